# core/models.py

import uuid
from dataclasses import dataclass, field
from enum import Enum

UNKNOWN_FAMILY = "Unknown"


@dataclass(frozen=True)
class FontRecord:
    """
    One installed font face.

    Two records describing the same face compare equal even when they come
    from separate enumerations; `id` only tells them apart for the lifetime
    of the process.
    """
    postscript_name: str
    display_name: str
    family_name: str
    is_monospaced: bool
    id: str = field(default_factory=lambda: uuid.uuid4().hex, compare=False, repr=False)

    def __post_init__(self):
        if not self.postscript_name or not self.postscript_name.strip():
            raise ValueError("FontRecord requires a non-empty PostScript name")

    @property
    def sort_key(self) -> tuple[str, str, str]:
        return self.family_name, self.display_name, self.postscript_name

    @property
    def style_name(self) -> str:
        """The display name minus its family prefix ("Bold Italic"), or "" for the plain face."""
        if self.display_name.startswith(self.family_name):
            return self.display_name[len(self.family_name):].strip()
        return ""


class DisplayMode(Enum):
    GRID = "grid"
    COLUMN = "column"

    @property
    def label(self) -> str:
        return self.value.title()
