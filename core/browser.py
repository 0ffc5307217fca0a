# core/browser.py

import logging
from typing import Optional

from core.catalog import FontCatalog
from core.config import (
    DEFAULT_SAMPLE_TEXT, DEFAULT_PREVIEW_SIZE, MIN_PREVIEW_SIZE, MAX_PREVIEW_SIZE
)
from core.event_bus import EventBus
from core.models import DisplayMode, FontRecord
from core.pins import PinSet, format_pinned
from core.query import QueryState, filter_state

log = logging.getLogger(__name__)


def clamp_size(size: float) -> int:
    return max(MIN_PREVIEW_SIZE, min(MAX_PREVIEW_SIZE, int(round(size))))


class BrowserState:
    """
    Everything the window shows, minus the widgets.

    Holds the query, the pins and the preview settings, and keeps `visible`
    in step with the catalog: any change to the catalog or the query
    recomputes it from scratch and fires "visible_changed".  Preview tweaks
    fire "preview_changed"; pin changes are re-announced as "pins_changed".
    Setters that leave a value as it was stay silent.
    """
    def __init__(self, catalog: FontCatalog, events: Optional[EventBus] = None):
        self.catalog = catalog
        self.events = events or EventBus()

        self.query = QueryState()
        self.pins = PinSet()
        self.sample_text: str = DEFAULT_SAMPLE_TEXT
        self.preview_size: int = DEFAULT_PREVIEW_SIZE
        self.display_mode = DisplayMode.GRID
        self.visible: list[FontRecord] = list(catalog.fonts)

        catalog.events.register("catalog_loaded", self._on_catalog_loaded)
        self.pins.events.register("pins_changed", self._on_pins_changed)

    # ─── Query ───────────────────────────────────────────────────────────────

    def set_query_text(self, text: str):
        if text != self.query.text:
            self._set_query(QueryState(text, self.query.monospaced_only))

    def set_monospaced_only(self, enabled: bool):
        if enabled != self.query.monospaced_only:
            self._set_query(QueryState(self.query.text, enabled))

    def _set_query(self, query: QueryState):
        self.query = query
        self.recompute()

    def recompute(self) -> list[FontRecord]:
        self.visible = filter_state(self.catalog.fonts, self.query)
        log.debug(f"{len(self.visible)} fonts match {self.query}")
        self.events.fire("visible_changed", self.visible)
        return self.visible

    # ─── Preview ─────────────────────────────────────────────────────────────

    def set_sample_text(self, text: str):
        if text != self.sample_text:
            self.sample_text = text
            self.events.fire("preview_changed")

    def set_preview_size(self, size: float):
        size = clamp_size(size)
        if size != self.preview_size:
            self.preview_size = size
            self.events.fire("preview_changed")

    def set_display_mode(self, mode: DisplayMode):
        if mode != self.display_mode:
            self.display_mode = mode
            self.events.fire("preview_changed")

    # ─── Pins ────────────────────────────────────────────────────────────────

    def toggle_pin(self, record: FontRecord) -> bool:
        return self.pins.toggle(record)

    def clear_pins(self):
        self.pins.clear()

    def is_pinned(self, record: FontRecord) -> bool:
        return record in self.pins

    def pinned_text(self) -> str:
        return format_pinned(self.pins.ordered(), self.sample_text)

    # ─── Misc ────────────────────────────────────────────────────────────────

    def summary(self) -> str:
        return f"{len(self.visible)} of {len(self.catalog)} fonts"

    def _on_catalog_loaded(self, _fonts):
        self.recompute()

    def _on_pins_changed(self, pins):
        self.events.fire("pins_changed", pins)
