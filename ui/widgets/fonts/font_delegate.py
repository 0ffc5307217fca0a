# ui/widgets/fonts/font_delegate.py

from PySide6.QtCore import Qt, QEvent, QRect, QRectF, QSize, Signal
from PySide6.QtGui import QColor, QFontMetrics, QPainter, QPen, QBrush
from PySide6.QtWidgets import QStyledItemDelegate, QStyle

from core.config import DEFAULT_SAMPLE_TEXT, DEFAULT_PREVIEW_SIZE, GRID_TILE_WIDTH
from core.models import DisplayMode, FontRecord
from ui.style import (
    ACCENT, MUTED_TEXT, TILE_BACKGROUND, TILE_BORDER, ROW_ALT, SELECTION,
    font_for_record, caption_font
)
from ui.widgets.fonts.font_list_model import FontRole, PinnedRole

PADDING         = 14
BUTTON_SIZE     = 24
ROW_HEIGHT      = 60
NAME_COLUMN     = 200
SAMPLE_LINES    = 3


class FontDelegate(QStyledItemDelegate):
    """
    Paints one font as a grid tile or a list row, including its pin
    button (and in column mode a copy button), and turns clicks on those
    buttons into signals.
    """
    pinClicked  = Signal(object)
    copyClicked = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.mode = DisplayMode.GRID
        self.sample_text = DEFAULT_SAMPLE_TEXT
        self.preview_size = DEFAULT_PREVIEW_SIZE

    # ─── Geometry ───────────────────────────────────────────────────────────

    def sizeHint(self, option, index) -> QSize:
        if self.mode == DisplayMode.COLUMN:
            view = option.widget
            width = view.viewport().width() if view is not None else 800
            return QSize(width, ROW_HEIGHT)

        caption = QFontMetrics(caption_font(option.font)).height()
        sample = self._sample_height(index.data(FontRole))
        return QSize(GRID_TILE_WIDTH, PADDING * 2 + caption * 2 + sample + 24)

    def _sample_height(self, record: FontRecord) -> int:
        if record is None:
            return 0
        return QFontMetrics(font_for_record(record, self.preview_size)).lineSpacing() * SAMPLE_LINES

    def pin_rect(self, rect: QRect) -> QRect:
        if self.mode == DisplayMode.COLUMN:
            return QRect(rect.right() - PADDING - BUTTON_SIZE,
                         rect.center().y() - BUTTON_SIZE // 2, BUTTON_SIZE, BUTTON_SIZE)
        return QRect(rect.right() - 8 - BUTTON_SIZE, rect.top() + 8, BUTTON_SIZE, BUTTON_SIZE)

    def copy_rect(self, rect: QRect) -> QRect:
        pin = self.pin_rect(rect)
        return pin.translated(-(BUTTON_SIZE + 12), 0)

    # ─── Painting ───────────────────────────────────────────────────────────

    def paint(self, painter: QPainter, option, index):
        record = index.data(FontRole)
        if record is None:
            return

        painter.save()
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setClipRect(option.rect)

        pinned = bool(index.data(PinnedRole))
        if self.mode == DisplayMode.COLUMN:
            self._paint_row(painter, option, index.row(), record)
        else:
            self._paint_tile(painter, option, record)
        self._paint_pin(painter, self.pin_rect(option.rect), pinned)

        painter.restore()

    def _paint_tile(self, painter: QPainter, option, record: FontRecord):
        tile = QRectF(option.rect.adjusted(3, 3, -3, -3))
        painter.setPen(QPen(TILE_BORDER, 1))
        painter.setBrush(SELECTION if option.state & QStyle.State_Selected else TILE_BACKGROUND)
        painter.drawRoundedRect(tile, 14, 14)

        body = option.rect.adjusted(PADDING, PADDING, -PADDING, -PADDING)
        small = caption_font(option.font)
        small_height = QFontMetrics(small).height()

        # Title: "Display Name (PostScriptName)"
        title = f"{record.display_name} ({record.postscript_name})"
        title_rect = QRect(body.left(), body.top(), body.width() - BUTTON_SIZE, small_height)
        painter.setFont(small)
        painter.setPen(MUTED_TEXT)
        painter.drawText(title_rect, Qt.AlignLeft | Qt.AlignVCenter,
                         QFontMetrics(small).elidedText(title, Qt.ElideRight, title_rect.width()))

        sample_rect = QRect(body.left(), title_rect.bottom() + 12,
                            body.width(), self._sample_height(record))
        painter.setFont(font_for_record(record, self.preview_size))
        painter.setPen(option.palette.text().color())
        painter.drawText(sample_rect, Qt.AlignLeft | Qt.AlignTop | Qt.TextWordWrap, self.sample_text)

        if record.is_monospaced:
            badge_rect = QRect(body.left(), sample_rect.bottom() + 8, body.width(), small_height)
            painter.setFont(small)
            painter.setPen(MUTED_TEXT)
            painter.drawText(badge_rect, Qt.AlignLeft | Qt.AlignVCenter, "≡ Monospaced")

    def _paint_row(self, painter: QPainter, option, row: int, record: FontRecord):
        rect = option.rect
        if option.state & QStyle.State_Selected:
            painter.fillRect(rect, SELECTION)
        elif row % 2 == 0:
            painter.fillRect(rect, ROW_ALT)

        # Monospace dot
        dot = QColor(ACCENT)
        dot.setAlpha(255 if record.is_monospaced else 128)
        painter.setPen(Qt.NoPen)
        painter.setBrush(dot)
        painter.drawEllipse(QRectF(rect.left() + 20, rect.center().y() - 3, 6, 6))

        small = caption_font(option.font)
        line = QFontMetrics(small).height()
        names = QRect(rect.left() + 38, rect.center().y() - line, NAME_COLUMN - 18, line * 2)
        painter.setFont(small)
        painter.setPen(option.palette.text().color())
        painter.drawText(QRect(names.left(), names.top(), names.width(), line),
                         Qt.AlignLeft | Qt.AlignVCenter,
                         QFontMetrics(small).elidedText(record.display_name, Qt.ElideRight, names.width()))
        painter.setPen(MUTED_TEXT)
        painter.drawText(QRect(names.left(), names.top() + line, names.width(), line),
                         Qt.AlignLeft | Qt.AlignVCenter,
                         QFontMetrics(small).elidedText(record.family_name, Qt.ElideRight, names.width()))

        copy = self.copy_rect(rect)
        sample_rect = QRect(rect.left() + 20 + NAME_COLUMN + 24, rect.top(),
                            copy.left() - 24 - (rect.left() + 20 + NAME_COLUMN + 24), rect.height())
        font = font_for_record(record, self.preview_size)
        metrics = QFontMetrics(font)
        painter.setFont(font)
        painter.setPen(option.palette.text().color())
        painter.drawText(sample_rect, Qt.AlignCenter,
                         metrics.elidedText(self.sample_text, Qt.ElideRight, max(0, sample_rect.width())))

        self._paint_copy(painter, copy)

        painter.setPen(QPen(TILE_BORDER, 1))
        painter.drawLine(rect.left() + 20, rect.bottom(), rect.right(), rect.bottom())

    def _paint_pin(self, painter: QPainter, rect: QRect, pinned: bool):
        painter.setPen(QPen(ACCENT if pinned else MUTED_TEXT, 1.5))
        painter.setBrush(QBrush(ACCENT) if pinned else Qt.NoBrush)
        head = QRectF(rect.center().x() - 5, rect.top() + 4, 10, 10)
        painter.drawEllipse(head)
        painter.drawLine(rect.center().x(), int(head.bottom()), rect.center().x(), rect.bottom() - 4)

    def _paint_copy(self, painter: QPainter, rect: QRect):
        painter.setPen(QPen(MUTED_TEXT, 1.2))
        painter.setBrush(Qt.NoBrush)
        back = QRectF(rect.left() + 5, rect.top() + 4, 11, 13)
        painter.drawRoundedRect(back, 2, 2)
        painter.drawRoundedRect(back.translated(4, 4), 2, 2)

    # ─── Interaction ────────────────────────────────────────────────────────

    def editorEvent(self, event, model, option, index) -> bool:
        if event.type() != QEvent.MouseButtonRelease or event.button() != Qt.LeftButton:
            return super().editorEvent(event, model, option, index)

        record = index.data(FontRole)
        pos = event.position().toPoint()
        if record is not None and self.pin_rect(option.rect).contains(pos):
            self.pinClicked.emit(record)
            return True
        if (record is not None and self.mode == DisplayMode.COLUMN
                and self.copy_rect(option.rect).contains(pos)):
            self.copyClicked.emit(record)
            return True
        return super().editorEvent(event, model, option, index)

