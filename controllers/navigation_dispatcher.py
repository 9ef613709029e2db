from __future__ import annotations

from typing import Callable, Mapping, Optional

from models.navigation import (
    ACTION_DIAL,
    EXTRA_MESSAGE,
    SECOND_SCREEN,
    ActionMessage,
    NavigationMessage,
    TargetedMessage,
)
from services import debug_log


class NavigationDispatcher:
    """
    Builds navigation messages and hands them to the host resolver.

    Sends are fire-and-forget: nothing comes back to the caller. The resolver
    only needs a ``submit(message)`` method (``ScreenHost`` in the app).
    """

    TAG = "Navigation"

    def __init__(self, resolver, *, log_callback: Optional[Callable[[str], None]] = None):
        self._resolver = resolver
        self._log_callback = log_callback
        self._last: Optional[NavigationMessage] = None

    @property
    def last_message(self) -> Optional[NavigationMessage]:
        return self._last

    # --- Explicit -----------------------------------------------------------
    def send_targeted(self, destination: str, payload: Optional[Mapping[str, str]] = None) -> None:
        message = TargetedMessage(destination=destination, extras=dict(payload or {}))
        self._last = message
        self._log(f"explicit -> {destination} extras={sorted(message.extras)}")
        self._resolver.submit(message)

    def send_greeting(self, greeting: str) -> None:
        self.send_targeted(SECOND_SCREEN, {EXTRA_MESSAGE: greeting})

    # --- Implicit -----------------------------------------------------------
    def send_action(self, action_id: str, data: str) -> None:
        message = ActionMessage(action=action_id, data=data)
        self._last = message
        self._log(f"implicit -> {action_id} data={data}")
        try:
            self._resolver.submit(message)
        except Exception as ex:
            # Resolution is the host's business; report and carry on.
            self._log(f"implicit {action_id} not resolved: {ex}")

    def dial(self, uri: str) -> None:
        self.send_action(ACTION_DIAL, uri)

    def _log(self, message: str) -> None:
        if self._log_callback is not None:
            self._log_callback(f"{self.TAG}: {message}")
        else:
            debug_log.log(message, tag=self.TAG)
