"""Tests for prober module."""

import errno
import socket

from portly.prober import PortProber, ProbeResult


def test_probe_free_port_available(free_port):
    """Test that a free port is reported available."""
    prober = PortProber()

    assert prober.probe(free_port) is ProbeResult.AVAILABLE
    assert prober.last_error is None


def test_probe_twice_releases_listener(free_port):
    """Test that probing does not leave the port bound."""
    prober = PortProber()

    assert prober.probe(free_port) is ProbeResult.AVAILABLE
    assert prober.probe(free_port) is ProbeResult.AVAILABLE


def test_probe_port_in_use_unavailable(listening_socket):
    """Test that a listening port is unavailable, not an error."""
    port = listening_socket.getsockname()[1]
    prober = PortProber()

    assert prober.probe(port) is ProbeResult.UNAVAILABLE
    assert prober.last_error is None


def test_probe_invalid_port_error():
    """Test that out-of-range ports are reported as errors."""
    prober = PortProber()

    assert prober.probe(70000) is ProbeResult.ERROR
    assert prober.last_error is not None


def test_probe_other_bind_failure_error(monkeypatch):
    """Test that bind failures other than EADDRINUSE are errors."""

    class DeniedSocket:
        def __init__(self, *args):
            pass

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def setsockopt(self, *args):
            pass

        def bind(self, address):
            raise PermissionError(errno.EACCES, "Permission denied")

    monkeypatch.setattr(socket, "socket", DeniedSocket)
    prober = PortProber()

    assert prober.probe(80) is ProbeResult.ERROR
    assert isinstance(prober.last_error, PermissionError)


def test_is_available(free_port, listening_socket):
    """Test the boolean shortcut."""
    prober = PortProber()

    assert prober.is_available(free_port)
    assert not prober.is_available(listening_socket.getsockname()[1])


def test_probe_port_zero_unavailable():
    """Test that port 0 is never reported available."""
    prober = PortProber()

    assert prober.probe(0) is ProbeResult.UNAVAILABLE
    assert not prober.is_available(0)
