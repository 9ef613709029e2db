from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

MAIN_SCREEN = "Main"
SECOND_SCREEN = "Second"

EXTRA_MESSAGE = "message"
ACTION_DIAL = "dial"

DEFAULT_GREETING = "Olá da MainActivity!"
DEFAULT_DIAL_URI = "tel:1234567890"


@dataclass(frozen=True)
class TargetedMessage:
    """Explicit message: names the destination screen and carries string extras."""

    destination: str
    extras: Dict[str, str] = field(default_factory=dict)

    def get_string_extra(self, key: str) -> Optional[str]:
        value = self.extras.get(key)
        return None if value is None else str(value)


@dataclass(frozen=True)
class ActionMessage:
    """Implicit message: an abstract action plus a URI-like data string."""

    action: str
    data: str = ""

    @property
    def scheme(self) -> str:
        head, sep, _ = self.data.partition(":")
        return head.lower() if sep else ""


NavigationMessage = Union[TargetedMessage, ActionMessage]
