# core/query.py

from dataclasses import dataclass
from typing import Iterable

from core.models import FontRecord


@dataclass(frozen=True)
class QueryState:
    text: str = ""
    monospaced_only: bool = False


def matches(record: FontRecord, needle: str, monospaced_only: bool) -> bool:
    """`needle` must already be casefolded."""
    if monospaced_only and not record.is_monospaced:
        return False
    if not needle:
        return True
    return (
        needle in record.family_name.casefold()
        or needle in record.display_name.casefold()
        or needle in record.postscript_name.casefold()
    )


def filter_fonts(fonts: Iterable[FontRecord], query: str, monospaced_only: bool) -> list[FontRecord]:
    """
    The fonts whose family, display or PostScript name contains `query`
    (case-insensitively), optionally restricted to monospaced faces.
    Input order is kept.
    """
    needle = query.casefold()
    return [f for f in fonts if matches(f, needle, monospaced_only)]


def filter_state(fonts: Iterable[FontRecord], state: QueryState) -> list[FontRecord]:
    return filter_fonts(fonts, state.text, state.monospaced_only)
