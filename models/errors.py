"""Exception hierarchy for the lifecycle demo."""

from __future__ import annotations


class LifecycleDemoError(Exception):
    """Base exception for all lifecycle demo errors."""


class IllegalTransitionError(LifecycleDemoError):
    """Raised in strict mode when a lifecycle call arrives out of order."""

    def __init__(self, screen: str, current, target):
        self.screen = screen
        self.current = current
        self.target = target
        cur = current.value if current is not None else "(new)"
        super().__init__(f"{screen}: illegal transition {cur} -> {target.value}")


class UnresolvedMessageError(LifecycleDemoError):
    """Raised by the host when no screen or handler accepts a navigation message."""

    def __init__(self, message):
        self.message = message
        super().__init__(f"No handler for {message!r}")
