from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from controllers.lifecycle_controller import ScreenController
from models.errors import UnresolvedMessageError
from models.navigation import ActionMessage, NavigationMessage, TargetedMessage
from models.screen_state import ScreenState
from . import debug_log
from .action_resolver import ActionResolver

ScreenFactory = Callable[[Optional[TargetedMessage]], ScreenController]


@dataclass
class _Entry:
    name: str
    message: Optional[TargetedMessage]
    controller: ScreenController


class ScreenHost(QObject):
    """
    Plays the host platform: builds screens and drives their lifecycle.

    Every transition goes out in platform order (create, start, resume on the
    way up; pause, stop, destroy on the way down) and one call at a time on
    the GUI thread. The stack holds at most two screens.
    """

    MAX_DEPTH = 2

    screen_created = pyqtSignal(object)
    screen_shown = pyqtSignal(object)
    screen_finished = pyqtSignal(object)
    screen_recreated = pyqtSignal(object, object)

    def __init__(self, resolver: Optional[ActionResolver] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._factories: Dict[str, ScreenFactory] = {}
        self._stack: List[_Entry] = []
        self._resolver = resolver or ActionResolver()
        self._foreground = True

    # --- Registry -----------------------------------------------------------
    def register(self, name: str, factory: ScreenFactory) -> None:
        self._factories[name] = factory

    @property
    def resolver(self) -> ActionResolver:
        return self._resolver

    @property
    def top(self) -> Optional[ScreenController]:
        return self._stack[-1].controller if self._stack else None

    @property
    def screens(self) -> Tuple[ScreenController, ...]:
        """Live screens, bottom first."""
        return tuple(e.controller for e in self._stack)

    @property
    def in_foreground(self) -> bool:
        return self._foreground

    # --- Entry points -------------------------------------------------------
    def launch(self, name: str) -> ScreenController:
        if self._stack:
            raise RuntimeError(f"cannot launch {name}: host already running {self._stack[0].name}")
        entry = self._build(name, None)
        self._stack.append(entry)
        controller = entry.controller
        controller.create(None)
        controller.start()
        if self._foreground:
            controller.resume()
        debug_log.log(f"launch {name}", tag="Host")
        self.screen_shown.emit(controller)
        return controller

    def submit(self, message: NavigationMessage) -> None:
        """Resolver entry point for the navigation dispatcher."""
        if isinstance(message, ActionMessage):
            self._submit_action(message)
        else:
            self._submit_targeted(message)

    def back(self) -> bool:
        """Finish the top screen and bring the one below forward."""
        if len(self._stack) < 2:
            return False
        top = self._stack[-1].controller
        below = self._stack[-2].controller
        if top.state is ScreenState.RESUMED:
            top.pause()
        # In the background the screen below stays stopped until move_to_foreground.
        if self._foreground:
            self._wind_up(below)
        self._wind_down(top)
        top.destroy()
        self._stack.pop()
        debug_log.log(f"back {top.name} -> {below.name}", tag="Host")
        self.screen_finished.emit(top)
        self.screen_shown.emit(below)
        return True

    def recreate(self) -> Optional[ScreenController]:
        """Destroy and rebuild the top screen, carrying its snapshot across."""
        if not self._stack:
            return None
        entry = self._stack[-1]
        old = entry.controller
        self._wind_down(old)
        snapshot = old.save_snapshot()
        old.destroy()

        fresh = self._build(entry.name, entry.message)
        self._stack[-1] = fresh
        new = fresh.controller
        new.create(snapshot)
        new.start()
        new.restore_snapshot(snapshot)
        if self._foreground:
            new.resume()
        else:
            new.stop()
        debug_log.log(f"recreate {entry.name} snapshot_keys={sorted(snapshot)}", tag="Host")
        self.screen_finished.emit(old)
        self.screen_recreated.emit(old, new)
        self.screen_shown.emit(new)
        return new

    def move_to_background(self) -> None:
        self._foreground = False
        if self._stack:
            self._wind_down(self._stack[-1].controller)

    def move_to_foreground(self) -> None:
        self._foreground = True
        if self._stack:
            self._wind_up(self._stack[-1].controller)

    def finish_all(self) -> None:
        while self._stack:
            entry = self._stack.pop()
            controller = entry.controller
            self._wind_down(controller)
            if controller.state is not ScreenState.DESTROYED:
                controller.destroy()
            self.screen_finished.emit(controller)
        debug_log.log("finish_all", tag="Host")

    # --- Internals ----------------------------------------------------------
    def _build(self, name: str, message: Optional[TargetedMessage]) -> _Entry:
        factory = self._factories.get(name)
        if factory is None:
            raise UnresolvedMessageError(message if message is not None else name)
        controller = factory(message)
        self.screen_created.emit(controller)
        return _Entry(name=name, message=message, controller=controller)

    def _submit_targeted(self, message: TargetedMessage) -> None:
        if len(self._stack) > 1 and self._stack[-2].name == message.destination:
            self.back()
            return
        if len(self._stack) >= self.MAX_DEPTH:
            raise RuntimeError(f"cannot open {message.destination}: stack limited to {self.MAX_DEPTH} screens")
        entry = self._build(message.destination, message)
        previous = self.top
        if previous is not None and previous.state is ScreenState.RESUMED:
            previous.pause()
        self._stack.append(entry)
        controller = entry.controller
        controller.create(None)
        controller.start()
        if self._foreground:
            controller.resume()
        if previous is not None:
            self._wind_down(previous)
        debug_log.log(f"open {message.destination}", tag="Host")
        self.screen_shown.emit(controller)

    def _submit_action(self, message: ActionMessage) -> None:
        current = self.top
        if current is not None and current.state is ScreenState.RESUMED:
            current.pause()
        try:
            self._resolver.resolve(message)
        finally:
            if current is not None and current.state is ScreenState.PAUSED and self._foreground:
                current.resume()

    @staticmethod
    def _wind_down(controller: ScreenController) -> None:
        if controller.state is ScreenState.RESUMED:
            controller.pause()
        if controller.state in (ScreenState.PAUSED, ScreenState.STARTED):
            controller.stop()

    @staticmethod
    def _wind_up(controller: ScreenController) -> None:
        if controller.state is ScreenState.STOPPED:
            controller.start()
        if controller.state in (ScreenState.STARTED, ScreenState.PAUSED):
            controller.resume()
