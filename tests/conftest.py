"""
Shared pytest fixtures for tagwm tests.
"""

import pytest
from pubsub import pub

from tagwm.host import Host
from tagwm.pinned_apps import AppName, PinnedApp, PinnedAppRegistry
from tagwm.protocol import QueryResult, WindowIdentity
from tagwm.window_set import WindowSet

TAGS = [str(i) for i in range(1, 11)]


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a display server")


@pytest.fixture(autouse=True)
def clean_bus(monkeypatch):
    """Drop every bus listener between tests."""
    monkeypatch.delenv("TAGWM_DEBUG", raising=False)
    pub.unsubAll()
    yield
    pub.unsubAll()


class FakeHost(Host):
    """Host double recording side effects."""

    def __init__(self):
        self.identities = {}
        self.failing = set()
        self.refreshes = 0
        self.killed = []
        self.quit_called = False

    def set_identity(self, window, *classes):
        self.identities[window] = WindowIdentity(tuple(classes))

    def fail_queries_for(self, window):
        self.failing.add(window)

    def query_identity(self, window):
        if window in self.failing:
            return QueryResult.failed("BadWindow")
        identity = self.identities.get(window)
        if identity is None:
            return QueryResult.not_found()
        return QueryResult.found(identity)

    def refresh(self):
        self.refreshes += 1

    def kill_window(self, window):
        self.killed.append(window)

    def quit(self):
        self.quit_called = True


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects."""

    class MockWindow:
        def __init__(self, object_id=1, title="test"):
            self.object_id = object_id
            self.title = title

        def __hash__(self):
            return hash(self.object_id)

        def __eq__(self, other):
            if not isinstance(other, MockWindow):
                return False
            return self.object_id == other.object_id

        def __repr__(self):
            return f"MockWindow({self.object_id})"

    return MockWindow


@pytest.fixture
def pinned_apps():
    """Tag 1 reserved for emacs."""
    return [PinnedApp(tag="1", command="emacs", query=AppName("emacs"))]


@pytest.fixture
def registry(pinned_apps):
    return PinnedAppRegistry(pinned_apps)


@pytest.fixture
def window_set():
    """Ten tags on a single screen."""
    return WindowSet(TAGS)
