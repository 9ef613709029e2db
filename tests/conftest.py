"""Pytest configuration and shared fixtures."""

import os
import tempfile

# Must be set before services.config / services.debug_log are imported: both
# resolve their files from the app root at import time.
os.environ.setdefault("LIFECYCLE_DEMO_HOME", tempfile.mkdtemp(prefix="lifecycle-demo-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from controllers.lifecycle_controller import LifecycleController
from controllers.message_controller import MessageScreenController
from models.navigation import MAIN_SCREEN, SECOND_SCREEN
from services import config, debug_log
from services.action_resolver import ActionResolver
from services.screen_host import ScreenHost


class FakeResolver:
    """Records submitted messages; optionally fails like an unresolving host."""

    def __init__(self, error=None):
        self.submitted = []
        self.error = error

    def submit(self, message):
        self.submitted.append(message)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings and an empty diagnostics tail."""
    monkeypatch.setattr(config, "_state", config.AppState())
    debug_log.clear_recent()
    yield config.state()


@pytest.fixture
def diagnostics():
    return []


@pytest.fixture
def main_controller(diagnostics):
    return LifecycleController(log_callback=diagnostics.append, strict=False)


@pytest.fixture
def fake_resolver():
    return FakeResolver()


@pytest.fixture
def created_screens():
    """Every controller built by the ``host`` fixture, in build order."""
    return []


@pytest.fixture
def action_resolver():
    return ActionResolver(desktop_fallback=False)


@pytest.fixture
def host(diagnostics, created_screens, action_resolver):
    h = ScreenHost(action_resolver)

    def build_main(message):
        c = LifecycleController(log_callback=diagnostics.append, strict=True)
        created_screens.append(c)
        return c

    def build_second(message):
        c = MessageScreenController(message, log_callback=diagnostics.append, strict=True)
        created_screens.append(c)
        return c

    h.register(MAIN_SCREEN, build_main)
    h.register(SECOND_SCREEN, build_second)
    return h


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
