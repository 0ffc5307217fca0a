# ui/style.py

from PySide6.QtGui import QColor, QFont

from core.models import FontRecord

ACCENT          = QColor("#4caf50")
MUTED_TEXT      = QColor("#8a8a8a")
TILE_BACKGROUND = QColor(127, 127, 127, 8)
TILE_BORDER     = QColor(127, 127, 127, 40)
ROW_ALT         = QColor(127, 127, 127, 10)
SELECTION       = QColor(76, 175, 80, 40)


def font_for_record(record: FontRecord, size: float) -> QFont:
    """Best QFont for rendering a sample in `record`'s face."""
    font = QFont(record.family_name)
    style = record.style_name
    if style:
        font.setStyleName(style)
    if record.is_monospaced:
        font.setStyleHint(QFont.Monospace)
        font.setFixedPitch(True)
    font.setPointSizeF(float(size))
    return font


def caption_font(base: QFont, delta: float = -1.0) -> QFont:
    font = QFont(base)
    if font.pointSizeF() > 0:
        font.setPointSizeF(max(6.0, font.pointSizeF() + delta))
    return font
