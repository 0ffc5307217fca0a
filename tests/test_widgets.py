from PySide6.QtCore import Qt

from conftest import ARIAL, COURIER, record


def test_font_list_model_roles(qt_app):
    from ui.widgets.fonts.font_list_model import FontListModel, FontRole, PinnedRole

    pinned = {record(COURIER)}
    model = FontListModel(lambda r: r in pinned)
    model.set_fonts([record(ARIAL), record(COURIER)])

    assert model.rowCount() == 2
    assert model.data(model.index(0), Qt.DisplayRole) == "Arial"
    assert model.data(model.index(1), FontRole) == record(COURIER)
    assert model.data(model.index(0), PinnedRole) is False
    assert model.data(model.index(1), PinnedRole) is True
    assert "CourierNewPSMT" in model.data(model.index(1), Qt.ToolTipRole)
    assert model.data(model.index(5), Qt.DisplayRole) is None


def test_toggle_switch_emits_on_user_toggle_only(qt_app):
    from ui.widgets.toggle_switch import ToggleSwitch

    switch = ToggleSwitch()
    seen = []
    switch.toggled.connect(seen.append)

    switch.set_checked(True)
    assert switch.is_checked()
    assert seen == []

    switch.toggle()
    assert not switch.is_checked()
    assert seen == [False]


def test_comparison_panel_entries(qt_app):
    from ui.widgets.comparison_panel import ComparisonPanel

    panel = ComparisonPanel()
    panel.set_pins([record(ARIAL), record(COURIER)], "Sample", 18)
    assert panel.entry_count() == 2
    assert panel.title.text() == "Comparison (2)"
    assert panel.copy_button.isEnabled()

    panel.set_pins([], "Sample", 18)
    assert panel.entry_count() == 0
    assert not panel.clear_button.isEnabled()


def test_font_for_record(qt_app):
    from core.models import FontRecord
    from ui.style import font_for_record

    font = font_for_record(FontRecord("Menlo-Bold", "Menlo Bold", "Menlo", True), 30)
    assert font.family() == "Menlo"
    assert font.styleName() == "Bold"
    assert font.pointSizeF() == 30.0
    assert font.fixedPitch()
