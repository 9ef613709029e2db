from __future__ import annotations

from typing import Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton

from controllers.lifecycle_controller import ScreenController


class MainScreen(QWidget):
    explicit_requested = pyqtSignal()
    implicit_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.addStretch(1)

        self.texto_estado = QLabel("")
        self.texto_estado.setAlignment(Qt.AlignCenter)
        self.texto_estado.setStyleSheet("QLabel { font-size: 20px; font-weight: 600; }")
        root.addWidget(self.texto_estado)

        self.bt_explicit = QPushButton("Intent Explícita")
        self.bt_explicit.clicked.connect(self.explicit_requested.emit)
        root.addWidget(self.bt_explicit)

        self.bt_implicit = QPushButton("Intent Implícita")
        self.bt_implicit.clicked.connect(self.implicit_requested.emit)
        root.addWidget(self.bt_implicit)

        root.addStretch(1)
        self._controller: Optional[ScreenController] = None

    def bind(self, controller: ScreenController):
        if self._controller is controller:
            return
        if self._controller is not None:
            try:
                self._controller.text_changed.disconnect(self.set_text)
            except TypeError:
                # Already disconnected (controller destroyed).
                pass
        self._controller = controller
        controller.text_changed.connect(self.set_text)
        self.set_text(controller.text)

    def set_text(self, text: str):
        self.texto_estado.setText(text or "")
