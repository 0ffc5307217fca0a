# ui/widgets/fonts/font_list_model.py

from typing import Optional

from PySide6.QtCore import Qt, QAbstractListModel, QModelIndex

from core.models import FontRecord

FontRole    = Qt.UserRole + 1
PinnedRole  = Qt.UserRole + 2


class FontListModel(QAbstractListModel):
    """Qt view over the currently visible fonts.  `is_pinned` answers the pin state per row."""

    def __init__(self, is_pinned=lambda record: False, parent=None):
        super().__init__(parent)
        self._fonts: list[FontRecord] = []
        self._is_pinned = is_pinned

    def set_fonts(self, fonts: list[FontRecord]):
        # A reset swaps the whole list in one step; views never see half of it
        self.beginResetModel()
        self._fonts = list(fonts)
        self.endResetModel()

    def refresh_pins(self):
        if self._fonts:
            self.dataChanged.emit(self.index(0), self.index(len(self._fonts) - 1), [PinnedRole])

    def refresh_all(self):
        if self._fonts:
            self.dataChanged.emit(self.index(0), self.index(len(self._fonts) - 1))

    def record(self, index: QModelIndex) -> Optional[FontRecord]:
        if not index.isValid() or not 0 <= index.row() < len(self._fonts):
            return None
        return self._fonts[index.row()]

    def fonts(self) -> list[FontRecord]:
        return list(self._fonts)

    # ─── QAbstractListModel ─────────────────────────────────────────────────

    def rowCount(self, parent=QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._fonts)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):
        record = self.record(index)
        if record is None:
            return None

        if role == Qt.DisplayRole:
            return record.display_name
        if role == Qt.ToolTipRole:
            return f"{record.display_name}\n{record.family_name}\n{record.postscript_name}"
        if role == FontRole:
            return record
        if role == PinnedRole:
            return self._is_pinned(record)
        return None
