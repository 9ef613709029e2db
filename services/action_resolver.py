from __future__ import annotations

from typing import Callable, Dict, List, Optional

from models.errors import UnresolvedMessageError
from models.navigation import ActionMessage
from . import debug_log

ActionHandler = Callable[[ActionMessage], None]


def _open_with_desktop(message: ActionMessage) -> bool:
    from PyQt5.QtCore import QUrl
    from PyQt5.QtGui import QDesktopServices

    url = QUrl(message.data)
    if not url.isValid() or not url.scheme():
        return False
    return bool(QDesktopServices.openUrl(url))


class ActionResolver:
    """Resolves implicit messages to whichever handler declares the action.

    Handlers registered in-process win; otherwise the desktop URL handler
    (``QDesktopServices.openUrl``) gets a chance when ``desktop_fallback`` is
    on. Nothing accepting the message raises :class:`UnresolvedMessageError`.
    """

    def __init__(self, desktop_fallback: bool = False, opener: Optional[Callable[[ActionMessage], bool]] = None):
        self._handlers: Dict[str, List[ActionHandler]] = {}
        self.desktop_fallback = bool(desktop_fallback)
        self._opener = opener or _open_with_desktop

    def register(self, action: str, handler: ActionHandler) -> None:
        self._handlers.setdefault(action, []).append(handler)

    def unregister(self, action: str, handler: ActionHandler) -> None:
        handlers = self._handlers.get(action, [])
        if handler in handlers:
            handlers.remove(handler)
        if not handlers:
            self._handlers.pop(action, None)

    def handlers_for(self, action: str) -> List[ActionHandler]:
        return list(self._handlers.get(action, []))

    def can_resolve(self, message: ActionMessage) -> bool:
        return bool(self._handlers.get(message.action)) or self.desktop_fallback

    def resolve(self, message: ActionMessage) -> None:
        handlers = self._handlers.get(message.action)
        if handlers:
            debug_log.log(f"{message.action} -> in-process handler", tag="Resolver")
            handlers[0](message)
            return
        if self.desktop_fallback and self._opener(message):
            debug_log.log(f"{message.action} -> desktop handler for {message.data}", tag="Resolver")
            return
        debug_log.log(f"{message.action} unresolved data={message.data}", tag="Resolver")
        raise UnresolvedMessageError(message)
