from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt, QTimer, QEasingCurve, QPoint, QPropertyAnimation
from PySide6.QtWidgets import (
    QWidget,
    QFrame,
    QLabel,
    QHBoxLayout,
    QGraphicsOpacityEffect,
)


@dataclass(frozen=True)
class ToastData:
    message: str
    notify_type: str = "info"  # "info" | "success" | "warning" | "error"
    timeout_ms: int = 3000


_PALETTE = {
    "success": ("#052e1a", "#16a34a"),
    "warning": ("#2a1a05", "#f59e0b"),
    "error": ("#2a0a0a", "#ef4444"),
    "info": ("#0b1222", "#38bdf8"),
}


def normalize_kind(kind: str | None) -> str:
    kind = (kind or "info").lower()
    if kind == "warn":
        kind = "warning"
    return kind if kind in _PALETTE else "info"


class ToastWidget(QFrame):
    def __init__(self, data: ToastData, parent: QWidget):
        super().__init__(parent)
        self.data = data
        bg, border = _PALETTE[normalize_kind(data.notify_type)]

        self.setObjectName("Toast")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"""
        QFrame#Toast {{
            background: {bg};
            border: 1px solid {border};
            border-radius: 12px;
        }}
        QLabel {{ color: #e5e7eb; font-size: 12px; }}
        """)

        row = QHBoxLayout(self)
        row.setContentsMargins(12, 10, 12, 10)
        self.lbl = QLabel(data.message)
        self.lbl.setWordWrap(True)
        row.addWidget(self.lbl)

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(0.0)
        self.setGraphicsEffect(self._opacity)
        self._anim: QPropertyAnimation | None = None

    def fade(self, start: float, end: float, on_done=None):
        self._anim = QPropertyAnimation(self._opacity, b"opacity", self)
        self._anim.setDuration(180)
        self._anim.setStartValue(start)
        self._anim.setEndValue(end)
        self._anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        if on_done is not None:
            self._anim.finished.connect(on_done)
        self._anim.start()


class ToastManager(QWidget):
    """
    Overlay that stacks toasts in the top-right corner of its host, newest first.
    """
    def __init__(self, host: QWidget, max_visible: int = 4):
        super().__init__(host)
        self.host = host
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground, True)

        self._toasts: list[ToastWidget] = []
        self._margin = 14
        self._spacing = 8
        self._max_visible = max_visible

        self.raise_()
        self.show()

    @property
    def toasts(self) -> list[ToastWidget]:
        return list(self._toasts)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._layout_toasts()

    def show_toast(self, message: str, notify_type: str = "info", timeout_ms: int = 3000) -> ToastWidget:
        self.setGeometry(self.host.rect())
        self.raise_()

        toast = ToastWidget(ToastData(message, normalize_kind(notify_type), timeout_ms), parent=self)
        toast.setFixedWidth(min(380, max(220, self.width() // 2)))
        self._toasts.insert(0, toast)

        while len(self._toasts) > self._max_visible:
            old = self._toasts.pop()
            old.hide()
            old.deleteLater()

        self._layout_toasts()
        toast.show()
        toast.fade(0.0, 1.0)

        QTimer.singleShot(max(500, int(timeout_ms)), lambda: self.dismiss(toast))
        return toast

    def dismiss(self, toast: ToastWidget):
        if toast not in self._toasts:
            return

        def remove():
            if toast in self._toasts:
                self._toasts.remove(toast)
            toast.hide()
            toast.deleteLater()
            self._layout_toasts()

        toast.fade(1.0, 0.0, on_done=remove)

    def _layout_toasts(self):
        self.setGeometry(self.host.rect())
        x_right = self.width() - self._margin
        y = self._margin
        for t in self._toasts:
            t.adjustSize()
            t.move(QPoint(x_right - t.width(), y))
            y += t.sizeHint().height() + self._spacing
        self.raise_()
