# ui/widgets/fonts/font_view.py

from PySide6.QtCore import Qt, Signal, QPoint
from PySide6.QtWidgets import (
    QWidget, QListView, QLabel, QStackedLayout, QMenu, QAbstractItemView
)

from core.models import DisplayMode, FontRecord
from ui.widgets.fonts.font_delegate import FontDelegate
from ui.widgets.fonts.font_list_model import FontListModel, FontRole, PinnedRole


class FontView(QWidget):
    """
    The central font list: a QListView in icon mode for the grid, list mode
    for columns, plus an empty-state label shown instead when nothing matches.
    """
    pinToggled      = Signal(object)
    copyRequested   = Signal(str, str)  # text, what was copied

    def __init__(self, is_pinned, parent=None):
        super().__init__(parent)

        self.model = FontListModel(is_pinned, self)
        self.delegate = FontDelegate(self)

        self.list = QListView()
        self.list.setModel(self.model)
        self.list.setItemDelegate(self.delegate)
        self.list.setSelectionMode(QAbstractItemView.SingleSelection)
        self.list.setVerticalScrollMode(QAbstractItemView.ScrollPerPixel)
        self.list.setUniformItemSizes(True)
        self.list.setResizeMode(QListView.Adjust)
        self.list.setMouseTracking(True)
        self.list.setContextMenuPolicy(Qt.CustomContextMenu)

        self.empty_label = QLabel("No fonts match")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("color: gray; font-size: 15px;")

        self._stack = QStackedLayout(self)
        self._stack.addWidget(self.list)
        self._stack.addWidget(self.empty_label)

        self.delegate.pinClicked.connect(self.pinToggled)
        self.delegate.copyClicked.connect(self._copy_postscript_name)
        self.list.customContextMenuRequested.connect(self._show_context_menu)

        self.set_mode(DisplayMode.GRID)

    # ─── Public API ──────────────────────────────────────────────────────────

    def set_fonts(self, fonts: list[FontRecord]):
        self.model.set_fonts(fonts)
        self._stack.setCurrentWidget(self.list if fonts else self.empty_label)

    def set_mode(self, mode: DisplayMode):
        self.delegate.mode = mode
        if mode == DisplayMode.GRID:
            self.list.setViewMode(QListView.IconMode)
            self.list.setFlow(QListView.LeftToRight)
            self.list.setWrapping(True)
            self.list.setMovement(QListView.Static)
            self.list.setSpacing(6)
        else:
            self.list.setViewMode(QListView.ListMode)
            self.list.setFlow(QListView.TopToBottom)
            self.list.setWrapping(False)
            self.list.setSpacing(0)
        self._relayout()

    def set_preview(self, sample_text: str, size: int):
        self.delegate.sample_text = sample_text
        self.delegate.preview_size = size
        self._relayout()

    def refresh_pins(self):
        self.model.refresh_pins()
        self.list.viewport().update()

    def is_empty_state(self) -> bool:
        return self._stack.currentWidget() is self.empty_label

    # ─── Internal Helpers ──────────────────────────────────────────────────

    def _relayout(self):
        # Item sizes depend on preview size and mode
        self.list.doItemsLayout()
        self.list.viewport().update()

    def _copy_postscript_name(self, record: FontRecord):
        self.copyRequested.emit(record.postscript_name, "PostScript name")

    def _show_context_menu(self, pos: QPoint):
        index = self.list.indexAt(pos)
        record = index.data(FontRole) if index.isValid() else None
        if record is None:
            return

        pinned = index.data(PinnedRole)
        menu = QMenu(self)
        menu.addAction("Copy PostScript Name",
                       lambda: self.copyRequested.emit(record.postscript_name, "PostScript name"))
        menu.addAction("Copy Display Name",
                       lambda: self.copyRequested.emit(record.display_name, "display name"))
        menu.addSeparator()
        menu.addAction("Unpin" if pinned else "Pin for Comparison",
                       lambda: self.pinToggled.emit(record))
        menu.exec(self.list.viewport().mapToGlobal(pos))
