# core/catalog.py

import logging
from typing import Iterator, Optional

from core.event_bus import EventBus
from core.models import FontRecord, UNKNOWN_FAMILY
from core.providers import FontProvider, ProviderError

log = logging.getLogger(__name__)


class FontCatalog:
    """
    The sorted list of installed fonts.

    Built once at startup from a FontProvider and replaced wholesale on
    reload; listeners on `events` receive "catalog_loaded" with the new
    tuple after the swap, never during it.
    """
    def __init__(self, provider: FontProvider, events: Optional[EventBus] = None):
        self.provider = provider
        self.events = events or EventBus()
        self._fonts: tuple[FontRecord, ...] = ()

    # ─── Public API ──────────────────────────────────────────────────────────

    @property
    def fonts(self) -> tuple[FontRecord, ...]:
        return self._fonts

    def load(self) -> tuple[FontRecord, ...]:
        records = []
        for ident in self._list_identifiers():
            record = self._resolve(ident)
            if record is not None:
                records.append(record)

        fonts = self._dedupe(sorted(records, key=lambda r: r.sort_key))
        self._fonts = fonts
        log.info(f"Loaded {len(fonts)} fonts from {self.provider.name} provider")
        self.events.fire("catalog_loaded", fonts)
        return fonts

    reload = load

    def find(self, postscript_name: str) -> Optional[FontRecord]:
        for record in self._fonts:
            if record.postscript_name == postscript_name:
                return record
        return None

    def __len__(self) -> int:
        return len(self._fonts)

    def __iter__(self) -> Iterator[FontRecord]:
        return iter(self._fonts)

    # ─── Internal Helpers ──────────────────────────────────────────────────

    def _list_identifiers(self) -> list[str]:
        try:
            return list(self.provider.list_identifiers())
        except Exception as e:
            log.warning(f"Font provider '{self.provider.name}' unavailable: {e}")
            return []

    def _resolve(self, ident: str) -> Optional[FontRecord]:
        if not ident or not ident.strip():
            return None

        try:
            mono = bool(self.provider.is_monospaced(ident))
        except ProviderError as e:
            log.debug(f"Skipping {ident}: {e}")
            return None
        except Exception as e:
            log.warning(f"Skipping {ident} after unexpected provider error: {e}")
            return None

        display = self._lookup(self.provider.display_name, ident) or ident
        family = self._lookup(self.provider.family_name, ident) or UNKNOWN_FAMILY

        return FontRecord(
            postscript_name=ident,
            display_name=display,
            family_name=family,
            is_monospaced=mono,
        )

    @staticmethod
    def _lookup(resolver, ident: str) -> Optional[str]:
        try:
            value = resolver(ident)
        except Exception as e:
            log.debug(f"No metadata for {ident}: {e}")
            return None
        return value.strip() if value and value.strip() else None

    @staticmethod
    def _dedupe(records: list[FontRecord]) -> tuple[FontRecord, ...]:
        # Input is sorted, so the kept duplicate is always the lowest one
        seen = set()
        unique = []
        for record in records:
            if record.postscript_name in seen:
                continue
            seen.add(record.postscript_name)
            unique.append(record)
        return tuple(unique)
