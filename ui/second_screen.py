from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton


class SecondScreen(QWidget):
    back_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        root = QVBoxLayout(self)
        root.addStretch(1)

        self.texto_mensagem = QLabel("")
        self.texto_mensagem.setAlignment(Qt.AlignCenter)
        self.texto_mensagem.setWordWrap(True)
        root.addWidget(self.texto_mensagem)

        self.bt_back = QPushButton("Voltar")
        self.bt_back.clicked.connect(self.back_requested.emit)
        root.addWidget(self.bt_back)

        root.addStretch(1)
        self._controller = None

    def bind(self, controller):
        if self._controller is controller:
            return
        if self._controller is not None:
            try:
                self._controller.text_changed.disconnect(self.set_text)
            except TypeError:
                pass
        self._controller = controller
        controller.text_changed.connect(self.set_text)
        self.set_text(controller.text)

    def set_text(self, text: str):
        self.texto_mensagem.setText(text or "")
