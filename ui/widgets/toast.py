# ui/widgets/toast.py

from PySide6.QtWidgets import QWidget, QLabel, QVBoxLayout, QGraphicsOpacityEffect
from PySide6.QtCore import Qt, QTimer, QPoint, QPropertyAnimation, QEasingCurve

from core.config import TOAST_DURATION


class Toast(QWidget):
    """Short-lived confirmation bubble shown near the bottom of its anchor window."""

    def __init__(self, message: str, anchor: QWidget, duration: int = TOAST_DURATION):
        super().__init__(anchor)
        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setAttribute(Qt.WA_DeleteOnClose)
        self.setObjectName("toast")
        self.setStyleSheet("""
            #toast {
                background: rgba(40, 40, 40, 220);
                border-radius: 6px;
            }
            QLabel { color: white; font-size: 12px; }
        """)

        self.label = QLabel(message, self)
        layout = QVBoxLayout(self)
        layout.addWidget(self.label)
        layout.setContentsMargins(14, 8, 14, 8)

        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)

        self.fade_in = self._fade(0, 1)
        self.fade_out = self._fade(1, 0)
        self.fade_out.finished.connect(self.close)

        self.adjustSize()
        self._place(anchor)
        QTimer.singleShot(duration, self.fade_out.start)

    def _fade(self, start: float, end: float) -> QPropertyAnimation:
        anim = QPropertyAnimation(self.opacity_effect, b"opacity", self)
        anim.setDuration(200)
        anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setEasingCurve(QEasingCurve.InOutQuad)
        return anim

    def _place(self, anchor: QWidget):
        x = (anchor.width() - self.width()) // 2
        y = anchor.height() - self.height() - 40
        self.move(QPoint(max(0, x), max(0, y)))

    def show(self):
        super().show()
        self.raise_()
        self.fade_in.start()

    @classmethod
    def flash(cls, anchor: QWidget, message: str) -> "Toast":
        toast = cls(message, anchor)
        toast.show()
        return toast
