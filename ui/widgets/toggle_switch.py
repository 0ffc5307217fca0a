# ui/widgets/toggle_switch.py

from PySide6.QtCore import Qt, Property, QPropertyAnimation, Signal, QRectF, QSize
from PySide6.QtGui import QPainter, QColor, QBrush
from PySide6.QtWidgets import QWidget

from ui.style import ACCENT


class ToggleSwitch(QWidget):
    """
    Animated on/off switch.  `toggled` fires only for user changes (mouse or
    Space), so setting it programmatically never loops back into the model.
    """
    toggled = Signal(bool)

    def __init__(self, checked: bool = False, parent=None):
        super().__init__(parent)
        self.setFixedSize(44, 22)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setCursor(Qt.PointingHandCursor)
        self._checked = checked
        self._slider_pos = 1.0 if checked else 0.0

        self._anim = QPropertyAnimation(self, b"slider_pos", self)
        self._anim.setDuration(120)

    @Property(float)
    def slider_pos(self):
        return self._slider_pos

    @slider_pos.setter
    def slider_pos(self, pos):
        self._slider_pos = pos
        self.update()

    def is_checked(self) -> bool:
        return self._checked

    def set_checked(self, checked: bool):
        if checked == self._checked:
            return
        self._checked = checked
        self._anim.stop()
        self._anim.setStartValue(self._slider_pos)
        self._anim.setEndValue(1.0 if checked else 0.0)
        self._anim.start()

    def toggle(self):
        self.set_checked(not self._checked)
        self.toggled.emit(self._checked)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        track = QRectF(1, 1, self.width() - 2, self.height() - 2)
        knob_diam = self.height() - 6
        knob_x = 3 + self._slider_pos * (self.width() - knob_diam - 6)
        knob = QRectF(knob_x, 3, knob_diam, knob_diam)

        track_color = ACCENT if self._checked else QColor("#bbbbbb")
        if not self.isEnabled():
            track_color = QColor("#dddddd")

        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(track_color))
        painter.drawRoundedRect(track, track.height() / 2, track.height() / 2)

        painter.setBrush(QBrush(QColor("white")))
        painter.drawEllipse(knob)

        if self.hasFocus():
            painter.setBrush(Qt.NoBrush)
            painter.setPen(QColor(ACCENT).darker(130))
            painter.drawRoundedRect(track, track.height() / 2, track.height() / 2)

    def sizeHint(self):
        return QSize(44, 22)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self.rect().contains(event.position().toPoint()):
            self.toggle()
        else:
            super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        if event.key() in (Qt.Key_Space, Qt.Key_Return, Qt.Key_Enter):
            self.toggle()
        else:
            super().keyPressEvent(event)
