"""Bind-and-release port probe for portly."""

import errno
import socket
from enum import Enum


class ProbeResult(Enum):
    """Outcome of a single bind probe."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    ERROR = "error"


class PortProber:
    """Test TCP port availability on the loopback interface."""

    def __init__(self, host: str = "127.0.0.1") -> None:
        """Initialize prober.

        Args:
            host: Address to bind probes to
        """
        self.host = host
        self.last_error: OSError | OverflowError | None = None

    def probe(self, port: int) -> ProbeResult:
        """Try to bind a listener to the port and release it immediately.

        Args:
            port: Port number to test

        Returns:
            AVAILABLE if the bind succeeded, UNAVAILABLE if the address is
            already in use or is port 0, ERROR for any other bind failure
            (the exception is kept on ``last_error``)
        """
        self.last_error = None
        if port == 0:
            # Binding 0 lets the OS pick any port, so it says nothing about port 0
            return ProbeResult.UNAVAILABLE
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                s.bind((self.host, port))
                s.listen(1)
                return ProbeResult.AVAILABLE
        except OSError as e:
            if e.errno == errno.EADDRINUSE:
                return ProbeResult.UNAVAILABLE
            self.last_error = e
            return ProbeResult.ERROR
        except OverflowError as e:
            # socket raises OverflowError for ports outside 0-65535
            self.last_error = e
            return ProbeResult.ERROR

    def is_available(self, port: int) -> bool:
        """Check if a port can be bound right now."""
        return self.probe(port) is ProbeResult.AVAILABLE
