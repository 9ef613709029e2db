from __future__ import annotations

from typing import Optional

from controllers.lifecycle_controller import LifecycleController
from controllers.message_controller import MessageScreenController
from controllers.navigation_dispatcher import NavigationDispatcher
from models.navigation import MAIN_SCREEN, SECOND_SCREEN
from services.action_resolver import ActionResolver
from services.config import AppState, state
from services.screen_host import ScreenHost


class AppController:
    """Top-level coordinator that wires the host, dispatcher and PyQt views."""

    def __init__(self, settings: Optional[AppState] = None):
        self.settings = settings or state()
        self.resolver = ActionResolver(desktop_fallback=self.settings.desktop_fallback)
        self.host = ScreenHost(self.resolver)
        self.dispatcher = NavigationDispatcher(self.host)
        strict = self.settings.strict_transitions
        self.host.register(MAIN_SCREEN, lambda message: LifecycleController(strict=strict))
        self.host.register(SECOND_SCREEN, lambda message: MessageScreenController(message, strict=strict))
        self.window = None

    # --- Button slots -------------------------------------------------------
    def send_greeting(self) -> None:
        self.dispatcher.send_greeting(self.settings.greeting)

    def dial(self) -> None:
        self.dispatcher.dial(self.settings.dial_uri)

    def start_host(self) -> LifecycleController:
        return self.host.launch(MAIN_SCREEN)

    def launch(self):
        from ui.main_window import MainWindow

        self.window = MainWindow(self.host)
        self.window.main_screen.explicit_requested.connect(self.send_greeting)
        self.window.main_screen.implicit_requested.connect(self.dial)
        self.start_host()
        self.window.show()
        return self.window
