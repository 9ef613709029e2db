from __future__ import annotations

import threading
from collections import deque
from datetime import datetime
from typing import List, Optional

from .app_paths import user_file
from .config import state

_log_lock = threading.Lock()
_log_path = user_file("debug.log")
# Tail kept in memory so views can show recent diagnostics without reading the file.
_recent = deque(maxlen=200)


def log(message: str, tag: Optional[str] = None) -> None:
    """Append a timestamped, thread-tagged message to debug.log (best effort).

    ``tag`` prefixes the message the way a logcat tag does, e.g.
    ``log("onCreate chamado", tag="MainActivity")``.
    """
    text = f"{tag}: {message}" if tag else message
    with _log_lock:
        _recent.append(text)
    if not state().debug_log:
        return
    try:
        line = f"{datetime.now().isoformat()} [{threading.current_thread().name}] {text}\n"
        with _log_lock:
            _log_path.parent.mkdir(parents=True, exist_ok=True)
            with _log_path.open("a", encoding="utf-8") as f:
                f.write(line)
    except OSError:
        pass


def recent(n: int = 20) -> List[str]:
    """Return the last ``n`` messages logged in this process, oldest first."""
    with _log_lock:
        items = list(_recent)
    return items[-n:] if n > 0 else []


def clear_recent() -> None:
    with _log_lock:
        _recent.clear()
