# ui/widgets/size_slider.py

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QSlider, QLabel, QFrame

from core.config import MIN_PREVIEW_SIZE, MAX_PREVIEW_SIZE, DEFAULT_PREVIEW_SIZE


class SizeSlider(QWidget):
    """`8 ──●── 96 | 24 pt`"""
    sizeChanged = Signal(int)

    def __init__(self, value: int = DEFAULT_PREVIEW_SIZE, parent=None):
        super().__init__(parent)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(MIN_PREVIEW_SIZE, MAX_PREVIEW_SIZE)
        self.slider.setSingleStep(1)
        self.slider.setPageStep(4)
        self.slider.setFixedWidth(200)
        self.slider.setValue(value)

        self.value_label = QLabel()
        self.value_label.setMinimumWidth(44)

        divider = QFrame()
        divider.setFrameShape(QFrame.VLine)
        divider.setFixedHeight(12)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 2, 6, 2)
        layout.setSpacing(6)
        layout.addWidget(self._muted(str(MIN_PREVIEW_SIZE)))
        layout.addWidget(self.slider)
        layout.addWidget(self._muted(str(MAX_PREVIEW_SIZE)))
        layout.addWidget(divider)
        layout.addWidget(self.value_label)

        self.slider.valueChanged.connect(self._on_value_changed)
        self._update_label(value)

    def value(self) -> int:
        return self.slider.value()

    def set_value(self, value: int):
        self.slider.setValue(value)

    def _on_value_changed(self, value: int):
        self._update_label(value)
        self.sizeChanged.emit(value)

    def _update_label(self, value: int):
        self.value_label.setText(f"{value} pt")

    @staticmethod
    def _muted(text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet("color: gray;")
        return label
