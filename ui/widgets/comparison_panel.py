# ui/widgets/comparison_panel.py

from typing import Iterable

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QScrollArea, QFrame
)

from core.models import FontRecord
from ui.style import font_for_record


class ComparisonPanel(QWidget):
    """Pinned fonts stacked one above the other, each rendering the same sample."""
    copyAllRequested    = Signal()
    clearRequested      = Signal()
    unpinRequested      = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._entries: list[QWidget] = []

        # ─── Header ────────────────────────────
        self.title = QLabel()
        self.title.setStyleSheet("font-weight: bold;")

        self.copy_button = QPushButton("Copy All")
        self.clear_button = QPushButton("Clear")
        self.copy_button.clicked.connect(self.copyAllRequested)
        self.clear_button.clicked.connect(self.clearRequested)

        header = QHBoxLayout()
        header.addWidget(self.title, 1)
        header.addWidget(self.copy_button)
        header.addWidget(self.clear_button)

        # ─── Body ──────────────────────────────
        self.empty_label = QLabel("Pin fonts to compare them here")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setWordWrap(True)
        self.empty_label.setStyleSheet("color: gray;")

        self._body = QWidget()
        self._body_layout = QVBoxLayout(self._body)
        self._body_layout.setContentsMargins(0, 0, 0, 0)
        self._body_layout.setSpacing(14)
        self._body_layout.addWidget(self.empty_label)
        self._body_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setWidget(self._body)

        outer = QVBoxLayout(self)
        outer.setContentsMargins(8, 8, 8, 8)
        outer.addLayout(header)
        outer.addWidget(scroll, 1)

        self.set_pins([], "", 24)

    # ─── Public API ──────────────────────────────────────────────────────────

    def set_pins(self, records: Iterable[FontRecord], sample_text: str, size: int):
        records = list(records)
        for entry in self._entries:
            self._body_layout.removeWidget(entry)
            entry.deleteLater()
        self._entries = []

        for pos, record in enumerate(records):
            entry = self._make_entry(record, sample_text, size)
            self._body_layout.insertWidget(pos, entry)
            self._entries.append(entry)

        self.title.setText(f"Comparison ({len(records)})")
        self.empty_label.setVisible(not records)
        self.copy_button.setEnabled(bool(records))
        self.clear_button.setEnabled(bool(records))

    def entry_count(self) -> int:
        return len(self._entries)

    # ─── Internal Helpers ──────────────────────────────────────────────────

    def _make_entry(self, record: FontRecord, sample_text: str, size: int) -> QWidget:
        entry = QFrame()
        entry.setFrameShape(QFrame.StyledPanel)
        layout = QVBoxLayout(entry)
        layout.setContentsMargins(8, 6, 8, 8)
        layout.setSpacing(4)

        name = QLabel(f"{record.display_name}  [{record.postscript_name}]")
        name.setStyleSheet("color: gray; font-size: 11px;")
        name.setTextInteractionFlags(Qt.TextSelectableByMouse)

        unpin = QPushButton("✕")
        unpin.setFlat(True)
        unpin.setFixedSize(20, 20)
        unpin.setToolTip("Unpin")
        unpin.clicked.connect(lambda: self.unpinRequested.emit(record))

        top = QHBoxLayout()
        top.addWidget(name, 1)
        top.addWidget(unpin)
        layout.addLayout(top)

        sample = QLabel(sample_text)
        sample.setFont(font_for_record(record, size))
        sample.setWordWrap(True)
        layout.addWidget(sample)
        return entry
