from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from models.errors import IllegalTransitionError
from models.navigation import MAIN_SCREEN
from models.screen_state import (
    CALLBACK_NAMES,
    PersistedSnapshot,
    ScreenState,
    is_allowed,
    is_terminal,
    make_snapshot,
    restored_text,
    visible_text,
)
from services import debug_log
from services.config import state


class ScreenController(QObject):
    """
    Lifecycle state machine for one screen instance.

    The host platform calls the transition methods; subclasses react through
    the ``on_*`` hooks and publish visible text through ``text_changed`` so
    the view layer stays presentation-only. Every transition emits exactly
    one diagnostic named after the platform callback ("onStart chamado").

    Out-of-order calls are still applied (the host alone decides when a call
    is legal) and produce an extra warning diagnostic. With ``strict=True``
    they raise :class:`IllegalTransitionError` and leave the state untouched.
    """

    tag = "Activity"

    state_changed = pyqtSignal(object)
    text_changed = pyqtSignal(str)
    diagnostic = pyqtSignal(str)

    def __init__(
        self,
        name: str,
        *,
        log_callback: Optional[Callable[[str], None]] = None,
        strict: Optional[bool] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._name = name
        self._state: Optional[ScreenState] = None
        self._text = ""
        self._history: List[ScreenState] = []
        self._log_callback = log_callback
        self._strict = state().strict_transitions if strict is None else bool(strict)

    # --- Read-only views ----------------------------------------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> Optional[ScreenState]:
        return self._state

    @property
    def text(self) -> str:
        return self._text

    @property
    def history(self) -> Tuple[ScreenState, ...]:
        return tuple(self._history)

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def is_finished(self) -> bool:
        return is_terminal(self._state)

    # --- Host-driven transitions ------------------------------------------
    def create(self, prior_snapshot: Optional[PersistedSnapshot] = None) -> None:
        self._transition(ScreenState.CREATED, self.on_create, prior_snapshot)

    def start(self) -> None:
        self._transition(ScreenState.STARTED, self.on_start)

    def resume(self) -> None:
        self._transition(ScreenState.RESUMED, self.on_resume)

    def pause(self) -> None:
        self._transition(ScreenState.PAUSED, self.on_pause)

    def stop(self) -> None:
        self._transition(ScreenState.STOPPED, self.on_stop)

    def destroy(self) -> None:
        self._transition(ScreenState.DESTROYED, self.on_destroy)

    def save_snapshot(self) -> PersistedSnapshot:
        if is_terminal(self._state):
            self._log("save requested after onDestroy")
        snapshot: PersistedSnapshot = {}
        self.on_save_snapshot(snapshot)
        self._log("onSaveInstanceState chamado")
        return snapshot

    def restore_snapshot(self, snapshot: Optional[PersistedSnapshot]) -> None:
        self.on_restore_snapshot(snapshot)
        self._log("onRestoreInstanceState chamado")

    # --- Hooks --------------------------------------------------------------
    def on_create(self, prior_snapshot: Optional[PersistedSnapshot]) -> None:
        pass

    def on_start(self) -> None:
        pass

    def on_resume(self) -> None:
        pass

    def on_pause(self) -> None:
        pass

    def on_stop(self) -> None:
        pass

    def on_destroy(self) -> None:
        pass

    def on_save_snapshot(self, out_snapshot: PersistedSnapshot) -> None:
        pass

    def on_restore_snapshot(self, snapshot: Optional[PersistedSnapshot]) -> None:
        pass

    # --- Internals ----------------------------------------------------------
    def _transition(self, target: ScreenState, hook, *args) -> None:
        current = self._state
        if not is_allowed(current, target):
            if self._strict:
                raise IllegalTransitionError(self._name, current, target)
            cur = current.value if current is not None else "(new)"
            self._log(f"unexpected transition {cur} -> {target.value}")
        self._state = target
        self._history.append(target)
        self.state_changed.emit(target)
        hook(*args)
        self._log(f"{CALLBACK_NAMES[target]} chamado")

    def _set_text(self, text: Optional[str]) -> None:
        if text is None:
            return
        self._text = text
        self.text_changed.emit(text)

    def _log(self, message: str) -> None:
        labeled = f"{self.tag}: {message}"
        self.diagnostic.emit(labeled)
        if self._log_callback is not None:
            self._log_callback(labeled)
        else:
            debug_log.log(message, tag=self.tag)


class LifecycleController(ScreenController):
    """Main screen: shows its own lifecycle state and keeps it across recreation.

    Visible text is always the most recent of the state label and a restored
    snapshot value. ``onDestroy`` leaves the text alone since the surface is
    already gone by then.
    """

    tag = "MainActivity"

    def __init__(self, name: str = MAIN_SCREEN, **kwargs):
        super().__init__(name, **kwargs)

    def on_create(self, prior_snapshot: Optional[PersistedSnapshot]) -> None:
        self._set_text(visible_text(ScreenState.CREATED, prior_snapshot))

    def on_start(self) -> None:
        self._set_text(visible_text(ScreenState.STARTED))

    def on_resume(self) -> None:
        self._set_text(visible_text(ScreenState.RESUMED))

    def on_pause(self) -> None:
        self._set_text(visible_text(ScreenState.PAUSED))

    def on_stop(self) -> None:
        self._set_text(visible_text(ScreenState.STOPPED))

    def on_save_snapshot(self, out_snapshot: PersistedSnapshot) -> None:
        out_snapshot.update(make_snapshot(self._text))

    def on_restore_snapshot(self, snapshot: Optional[PersistedSnapshot]) -> None:
        self._set_text(restored_text(snapshot))
