"""Test fixtures and configuration."""

import errno
import socket
import tempfile
from pathlib import Path

import pytest

from portly.history import HistoryStore
from portly.prober import ProbeResult


class FakeProber:
    """Prober answering from fixed sets of busy and broken ports."""

    def __init__(self, busy=(), broken=()):
        self.busy = set(busy)
        self.broken = set(broken)
        self.calls: list[int] = []
        self.last_error = None

    def probe(self, port):
        self.calls.append(port)
        self.last_error = None
        if port in self.broken:
            self.last_error = PermissionError(errno.EACCES, "Permission denied")
            return ProbeResult.ERROR
        if port in self.busy:
            return ProbeResult.UNAVAILABLE
        return ProbeResult.AVAILABLE


class FakeInventory:
    """Inventory returning canned command output."""

    def __init__(self, port_holder=None, app_pids=None):
        self.holder_output = port_holder
        self.pids_output = app_pids
        self.queries: list[tuple[str, object]] = []

    def port_holder(self, port):
        self.queries.append(("port", port))
        return self.holder_output

    def app_pids(self, app_name):
        self.queries.append(("app", app_name))
        return self.pids_output


class FakeResolver:
    """Resolver with a fixed answer."""

    def __init__(self, owned=False):
        self.owned = owned
        self.calls: list[tuple[str, int]] = []

    def is_owned_by(self, app_name, port):
        self.calls.append((app_name, port))
        return self.owned


@pytest.fixture
def temp_dir():
    """Temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def env_file(temp_dir):
    """Path of a history file that does not exist yet."""
    return temp_dir / ".portly.env"


@pytest.fixture
def history(env_file):
    """History store backed by a temporary file."""
    return HistoryStore(env_file)


@pytest.fixture
def listening_socket():
    """A loopback socket listening on an OS-chosen port."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        yield s


@pytest.fixture
def free_port():
    """A port that was free a moment ago."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]
