"""Lifecycle states of a screen and the snapshot that survives recreation."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Mapping, Optional


class ScreenState(Enum):
    CREATED = "Created"
    STARTED = "Started"
    RESUMED = "Resumed"
    PAUSED = "Paused"
    STOPPED = "Stopped"
    DESTROYED = "Destroyed"


# Minimal UI state carried across a destroy/recreate cycle.
PersistedSnapshot = Dict[str, str]

STATE_KEY = "estado"

STATE_LABELS: Dict[ScreenState, str] = {
    ScreenState.CREATED: "Estado: Criado",
    ScreenState.STARTED: "Estado: Iniciado",
    ScreenState.RESUMED: "Estado: Retomado",
    ScreenState.PAUSED: "Estado: Pausado",
    ScreenState.STOPPED: "Estado: Parado",
}

# Callback names as the host platform knows them; used in diagnostics.
CALLBACK_NAMES: Dict[ScreenState, str] = {
    ScreenState.CREATED: "onCreate",
    ScreenState.STARTED: "onStart",
    ScreenState.RESUMED: "onResume",
    ScreenState.PAUSED: "onPause",
    ScreenState.STOPPED: "onStop",
    ScreenState.DESTROYED: "onDestroy",
}

# Key None is "not created yet".
ALLOWED_TRANSITIONS: Dict[Optional[ScreenState], FrozenSet[ScreenState]] = {
    None: frozenset({ScreenState.CREATED}),
    ScreenState.CREATED: frozenset({ScreenState.STARTED}),
    ScreenState.STARTED: frozenset({ScreenState.RESUMED, ScreenState.STOPPED}),
    ScreenState.RESUMED: frozenset({ScreenState.PAUSED}),
    ScreenState.PAUSED: frozenset({ScreenState.RESUMED, ScreenState.STOPPED}),
    ScreenState.STOPPED: frozenset({ScreenState.STARTED, ScreenState.DESTROYED}),
    ScreenState.DESTROYED: frozenset(),
}


def is_allowed(current: Optional[ScreenState], target: ScreenState) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def is_terminal(current: Optional[ScreenState]) -> bool:
    return current is ScreenState.DESTROYED


def restored_text(snapshot: Optional[Mapping[str, str]]) -> Optional[str]:
    """Return the saved text of ``snapshot``, or None when there is nothing usable.

    A missing snapshot, a non-mapping, or a mapping without ``STATE_KEY`` are
    all treated the same way.
    """
    if not isinstance(snapshot, Mapping):
        return None
    value = snapshot.get(STATE_KEY)
    if value is None:
        return None
    return str(value)


def visible_text(state: Optional[ScreenState], snapshot: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Text a screen shows for ``state``; a usable snapshot value overrides the label."""
    saved = restored_text(snapshot)
    if saved is not None:
        return saved
    if state is None:
        return None
    return STATE_LABELS.get(state)


def make_snapshot(text: Optional[str]) -> PersistedSnapshot:
    if text is None:
        return {}
    return {STATE_KEY: text}
