import pytest

from core.browser import BrowserState, clamp_size
from core.config import DEFAULT_PREVIEW_SIZE, MAX_PREVIEW_SIZE, MIN_PREVIEW_SIZE
from core.models import DisplayMode

from conftest import ARIAL, COURIER, record


@pytest.fixture
def state(catalog):
    return BrowserState(catalog)


def _recorder(state, event):
    seen = []
    state.events.register(event, lambda *args: seen.append(args))
    return seen


def test_starts_with_whole_catalog(state, catalog):
    assert state.visible == list(catalog.fonts)
    assert state.summary() == f"{len(catalog)} of {len(catalog)} fonts"
    assert state.preview_size == DEFAULT_PREVIEW_SIZE
    assert state.display_mode == DisplayMode.GRID


def test_query_changes_recompute_visible(state):
    seen = _recorder(state, "visible_changed")

    state.set_query_text("menlo")
    assert [f.family_name for f in state.visible] == ["Menlo", "Menlo"]

    state.set_monospaced_only(True)
    state.set_query_text("")
    assert all(f.is_monospaced for f in state.visible)
    assert len(seen) == 3


def test_noop_setters_stay_silent(state):
    visible = _recorder(state, "visible_changed")
    preview = _recorder(state, "preview_changed")

    state.set_query_text("")
    state.set_monospaced_only(False)
    state.set_sample_text(state.sample_text)
    state.set_preview_size(state.preview_size)
    state.set_display_mode(DisplayMode.GRID)

    assert visible == []
    assert preview == []


def test_catalog_reload_recomputes(state, catalog):
    state.set_query_text("arial")
    seen = _recorder(state, "visible_changed")

    catalog.reload()

    assert len(seen) == 1
    assert [f.postscript_name for f in state.visible] == ["Arial", "Arial-BoldMT"]


@pytest.mark.parametrize("size,expected", [
    (0, MIN_PREVIEW_SIZE),
    (MIN_PREVIEW_SIZE, MIN_PREVIEW_SIZE),
    (30.4, 30),
    (1000, MAX_PREVIEW_SIZE),
])
def test_preview_size_clamped(state, size, expected):
    assert clamp_size(size) == expected
    state.set_preview_size(size)
    assert state.preview_size == expected


def test_preview_changes_notify(state):
    seen = _recorder(state, "preview_changed")
    state.set_sample_text("Sphinx of black quartz")
    state.set_display_mode(DisplayMode.COLUMN)
    state.set_preview_size(48)
    assert len(seen) == 3


def test_pins_survive_refresh_and_export(state, catalog):
    pinned = _recorder(state, "pins_changed")
    state.toggle_pin(catalog.find("CourierNewPSMT"))
    state.toggle_pin(catalog.find("Arial"))

    catalog.reload()

    assert state.is_pinned(catalog.find("CourierNewPSMT"))
    state.set_sample_text("Hi")
    assert state.pinned_text() == "• Arial [Arial]\n  Hi\n\n• Courier New [CourierNewPSMT]\n  Hi"
    assert len(pinned) == 2

    state.clear_pins()
    assert not state.is_pinned(record(ARIAL))
    assert not state.is_pinned(record(COURIER))
    assert state.pinned_text() == ""
