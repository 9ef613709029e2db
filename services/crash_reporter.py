from __future__ import annotations

import faulthandler
import sys
import threading
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional

from . import debug_log
from .app_paths import user_file, ensure_parent

LOG_PATH = user_file("crash.log")

_orig_sys_hook = None
_orig_thread_hook = None
_orig_qt_handler = None
_faulthandler_file = None


def _write_line(text: str) -> None:
    try:
        ensure_parent(LOG_PATH)
        with Path(LOG_PATH).open("a", encoding="utf-8") as f:
            f.write(text + "\n")
    except OSError:
        # Never raise from crash logging.
        pass


def _log_exception(prefix: str, exc_type, exc_value, exc_tb) -> None:
    ts = datetime.now().isoformat(timespec="seconds")
    _write_line(f"=== {prefix} @ {ts} ===")
    _write_line("".join(traceback.format_exception(exc_type, exc_value, exc_tb)).rstrip())
    _write_line("")
    debug_log.log(f"{prefix}: {exc_type.__name__}: {exc_value}", tag="crash")


def _show_dialog(summary: str) -> None:
    from PyQt5.QtWidgets import QApplication, QMessageBox

    if QApplication.instance() is None:
        return
    QMessageBox.critical(
        None,
        "Erro inesperado",
        f"{summary}\n\nDetalhes gravados em:\n{LOG_PATH}",
    )


def _sys_excepthook(exc_type, exc_value, exc_tb) -> None:
    _log_exception("Unhandled exception", exc_type, exc_value, exc_tb)
    try:
        _show_dialog(f"{exc_type.__name__}: {exc_value}")
    except Exception as ex:
        # Avoid secondary crashes when trying to notify the user.
        _write_line(f"[crash_reporter] dialog failed: {ex}")
    if callable(_orig_sys_hook):
        _orig_sys_hook(exc_type, exc_value, exc_tb)


def _thread_excepthook(args) -> None:
    try:
        _log_exception("Unhandled thread exception", args.exc_type, args.exc_value, args.exc_traceback)
    finally:
        if callable(_orig_thread_hook):
            _orig_thread_hook(args)


def _qt_message_handler(mode, context, message) -> None:
    prefix = getattr(mode, "name", None) or str(mode)
    try:
        _write_line(f"[Qt/{prefix}] {message}")
    finally:
        if callable(_orig_qt_handler):
            _orig_qt_handler(mode, context, message)


def install(log_path: Optional[Path] = None) -> Path:
    """Install hooks that write unexpected exceptions and Qt messages to crash.log.

    Returns the resolved log path.
    """
    global LOG_PATH, _orig_sys_hook, _orig_thread_hook, _orig_qt_handler, _faulthandler_file

    if log_path is not None:
        LOG_PATH = Path(log_path)
    LOG_PATH = ensure_parent(Path(LOG_PATH))

    # Hard crashes (segfaults inside Qt) only show up through faulthandler.
    try:
        _faulthandler_file = LOG_PATH.open("a", encoding="utf-8")
        faulthandler.enable(_faulthandler_file, all_threads=True)
    except OSError:
        _faulthandler_file = None

    _orig_sys_hook = sys.excepthook
    sys.excepthook = _sys_excepthook

    _orig_thread_hook = threading.excepthook
    threading.excepthook = _thread_excepthook

    from PyQt5.QtCore import qInstallMessageHandler

    _orig_qt_handler = qInstallMessageHandler(_qt_message_handler)
    return LOG_PATH


def uninstall() -> None:
    """Restore the hooks replaced by :func:`install`."""
    global _orig_sys_hook, _orig_thread_hook, _orig_qt_handler, _faulthandler_file

    if _orig_sys_hook is not None:
        sys.excepthook = _orig_sys_hook
        _orig_sys_hook = None
    if _orig_thread_hook is not None:
        threading.excepthook = _orig_thread_hook
        _orig_thread_hook = None

    from PyQt5.QtCore import qInstallMessageHandler

    qInstallMessageHandler(_orig_qt_handler)
    _orig_qt_handler = None

    if _faulthandler_file is not None:
        faulthandler.disable()
        _faulthandler_file.close()
        _faulthandler_file = None
