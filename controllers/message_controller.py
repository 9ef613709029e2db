from __future__ import annotations

from typing import Optional

from models.navigation import EXTRA_MESSAGE, SECOND_SCREEN, TargetedMessage
from models.screen_state import PersistedSnapshot
from controllers.lifecycle_controller import ScreenController


class MessageScreenController(ScreenController):
    """Destination screen that displays the string it was started with.

    The inbound message is a one-shot mailbox: ``on_create`` takes it and
    later reads get None. No payload means nothing is displayed.
    """

    tag = "SecondActivity"

    def __init__(self, message: Optional[TargetedMessage] = None, name: str = SECOND_SCREEN, **kwargs):
        super().__init__(name, **kwargs)
        self._mailbox = message

    def take_message(self) -> Optional[TargetedMessage]:
        message, self._mailbox = self._mailbox, None
        return message

    def on_create(self, prior_snapshot: Optional[PersistedSnapshot]) -> None:
        message = self.take_message()
        if message is None:
            return
        self._set_text(message.get_string_extra(EXTRA_MESSAGE))
