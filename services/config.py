from dataclasses import dataclass, asdict, fields
from typing import Optional
from pathlib import Path
import json

from models.navigation import DEFAULT_DIAL_URI, DEFAULT_GREETING
from .app_paths import user_file, ensure_parent


# Persisted app settings (UI preferences only; the lifecycle snapshot is never written here)
@dataclass
class AppState:
    # Payload sent with the explicit message to the second screen
    greeting: str = DEFAULT_GREETING
    # Data URI sent with the implicit dial message
    dial_uri: str = DEFAULT_DIAL_URI
    # Raise IllegalTransitionError on out-of-order lifecycle calls instead of warning
    strict_transitions: bool = False
    # Hand unresolved action messages to the desktop URL handler
    desktop_fallback: bool = True
    debug_log: bool = True
    window_width: Optional[int] = None
    window_height: Optional[int] = None


_state = AppState()


def _state_path() -> Path:
    return user_file("user_settings.json")


def load_state() -> AppState:
    global _state
    p = _state_path()
    try:
        if p.exists():
            data = json.loads(p.read_text(encoding="utf-8"))
            # Ignore unknown keys to remain forward/backward compatible
            allowed = {f.name for f in fields(AppState)}
            filtered = {k: v for k, v in (data or {}).items() if k in allowed}
            _state = AppState(**filtered)
        else:
            _state = AppState()
    except (OSError, ValueError, TypeError, AttributeError):
        # Corrupt or incompatible; start fresh
        _state = AppState()
    return _state


def save_state() -> None:
    p = ensure_parent(_state_path())
    try:
        p.write_text(json.dumps(asdict(_state), ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError:
        pass


def state() -> AppState:
    return _state


# Load on import
load_state()
