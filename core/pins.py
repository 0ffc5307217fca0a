# core/pins.py

from typing import Iterable, Iterator, Optional

from core.event_bus import EventBus
from core.models import FontRecord

PIN_BULLET = "•"


class PinSet:
    """
    Fonts pinned for side-by-side comparison.  Membership is by value, so a
    pin survives a catalog refresh as long as the font's metadata is the same.
    Fires "pins_changed" with a frozenset after every effective mutation.
    """
    def __init__(self, events: Optional[EventBus] = None):
        self.events = events or EventBus()
        self._pins: set[FontRecord] = set()

    def toggle(self, record: FontRecord) -> bool:
        if record in self._pins:
            self._pins.remove(record)
        else:
            self._pins.add(record)
        self._notify()
        return record in self._pins

    def pin(self, record: FontRecord):
        if record not in self._pins:
            self._pins.add(record)
            self._notify()

    def unpin(self, record: FontRecord):
        if record in self._pins:
            self._pins.remove(record)
            self._notify()

    def clear(self):
        if self._pins:
            self._pins.clear()
            self._notify()

    def contains(self, record: FontRecord) -> bool:
        return record in self._pins

    def all(self) -> frozenset[FontRecord]:
        return frozenset(self._pins)

    def ordered(self) -> list[FontRecord]:
        return sorted(self._pins, key=lambda r: r.sort_key)

    def __contains__(self, record: FontRecord) -> bool:
        return self.contains(record)

    def __len__(self) -> int:
        return len(self._pins)

    def __iter__(self) -> Iterator[FontRecord]:
        return iter(self.ordered())

    def _notify(self):
        self.events.fire("pins_changed", self.all())


def format_pinned(records: Iterable[FontRecord], sample_text: str) -> str:
    blocks = [
        f"{PIN_BULLET} {r.display_name} [{r.postscript_name}]\n  {sample_text}"
        for r in records
    ]
    return "\n\n".join(blocks)
