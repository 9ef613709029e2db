import os
import sys
from pathlib import Path

HOME_ENV = "LIFECYCLE_DEMO_HOME"


def app_root() -> Path:
    """Return the directory that should hold writable app data.

    ``LIFECYCLE_DEMO_HOME`` wins when set. When frozen by PyInstaller this
    resolves to the folder next to the executable; during development it is
    the repo root.
    """
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    if getattr(sys, "frozen", False):
        exe_dir = Path(sys.executable).resolve().parent
        if exe_dir.exists():
            return exe_dir
    return Path(__file__).resolve().parents[1]


def user_file(name: str) -> Path:
    """Path to a user-facing file (settings, logs) that lives beside the app."""
    return app_root() / name


def ensure_parent(path: Path) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    return path
