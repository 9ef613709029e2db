from PyQt5.QtCore import Qt, QEvent
from PyQt5.QtWidgets import (
    QMainWindow,
    QWidget,
    QSplitter,
    QVBoxLayout,
    QStackedWidget,
    QPlainTextEdit,
    QLabel,
    QAction,
)

from models.navigation import MAIN_SCREEN, SECOND_SCREEN
from services.config import save_state, state
from services.screen_host import ScreenHost
from ui.main_screen import MainScreen
from ui.second_screen import SecondScreen


class MainWindow(QMainWindow):
    """Desktop frame standing in for the device screen.

    Window events are forwarded to the host: showing resumes the top screen,
    minimizing stops it, closing finishes every screen.
    """

    def __init__(self, host: ScreenHost, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Ciclo de Vida")
        st = state()
        self.resize(st.window_width or 420, st.window_height or 640)

        self.host = host

        root_splitter = QSplitter(Qt.Vertical)
        root_splitter.setChildrenCollapsible(False)

        self.stack = QStackedWidget()
        self.main_screen = MainScreen()
        self.second_screen = SecondScreen()
        self.stack.addWidget(self.main_screen)
        self.stack.addWidget(self.second_screen)
        self._views = {MAIN_SCREEN: self.main_screen, SECOND_SCREEN: self.second_screen}
        root_splitter.addWidget(self.stack)

        log_container = QWidget()
        log_layout = QVBoxLayout(log_container)
        log_layout.setContentsMargins(0, 0, 0, 0)
        log_layout.addWidget(QLabel("Log"))
        self.log_text = QPlainTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setMaximumBlockCount(500)
        log_layout.addWidget(self.log_text)
        root_splitter.addWidget(log_container)
        root_splitter.setStretchFactor(0, 70)
        root_splitter.setStretchFactor(1, 30)
        self.setCentralWidget(root_splitter)

        menu = self.menuBar().addMenu("Tela")
        self.act_rotate = QAction("Girar (recriar)", self)
        self.act_rotate.setShortcut("Ctrl+R")
        self.act_rotate.triggered.connect(self.host.recreate)
        menu.addAction(self.act_rotate)
        self.act_back = QAction("Voltar", self)
        self.act_back.setShortcut("Alt+Left")
        self.act_back.triggered.connect(self.host.back)
        menu.addAction(self.act_back)

        self.second_screen.back_requested.connect(self.host.back)
        self.host.screen_created.connect(self._on_screen_created)
        self.host.screen_finished.connect(self._on_screen_finished)
        self.host.screen_shown.connect(self._on_screen_shown)

        for controller in self.host.screens:
            self._on_screen_created(controller)
        if self.host.top is not None:
            self._on_screen_shown(self.host.top)

    # --- Host slots ---------------------------------------------------------
    def _on_screen_created(self, controller):
        # Connected before create() runs so the first callbacks reach the log pane.
        controller.diagnostic.connect(self.append_log)

    def _on_screen_finished(self, controller):
        try:
            controller.diagnostic.disconnect(self.append_log)
        except TypeError:
            pass

    def _on_screen_shown(self, controller):
        view = self._views.get(controller.name)
        if view is None:
            self.append_log(f"[Host] no view for {controller.name}")
            return
        view.bind(controller)
        self.stack.setCurrentWidget(view)
        self.act_back.setEnabled(len(self.host.screens) > 1)

    def append_log(self, text: str):
        self.log_text.appendPlainText(text)

    # --- Window events ------------------------------------------------------
    def showEvent(self, event):
        super().showEvent(event)
        if not self.host.in_foreground:
            self.host.move_to_foreground()

    def changeEvent(self, event):
        super().changeEvent(event)
        if event.type() != QEvent.WindowStateChange:
            return
        if self.isMinimized():
            self.host.move_to_background()
        elif not self.host.in_foreground:
            self.host.move_to_foreground()

    def closeEvent(self, event):
        self.host.finish_all()
        st = state()
        st.window_width = self.width()
        st.window_height = self.height()
        save_state()
        super().closeEvent(event)
