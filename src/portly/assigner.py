"""Port assignment logic for portly."""

from dataclasses import dataclass

from .config import HIGHEST_PORT, LOWEST_PORT
from .console import debug, info, warning
from .expansion import crossed_thresholds, next_ceiling
from .history import HistoryStore, HistoryWriteError
from .ownership import OwnershipResolver
from .prober import PortProber, ProbeResult


class PortAssignmentError(Exception):
    """Raised when no port can be assigned."""

    pass


class InvalidRangeError(PortAssignmentError):
    """Raised when the requested range is empty or out of bounds."""

    def __init__(self, min_port: int, max_port: int) -> None:
        super().__init__(
            f"Invalid range. min ({min_port}) must be less than max ({max_port}) "
            f"and both within {LOWEST_PORT}-{HIGHEST_PORT}"
        )
        self.min_port = min_port
        self.max_port = max_port


class ScanExhaustedError(PortAssignmentError):
    """Raised when every port in the (possibly expanded) range is taken."""

    def __init__(self, min_port: int, max_port: int) -> None:
        super().__init__(f"No available port in range {min_port}-{max_port}")
        self.min_port = min_port
        self.max_port = max_port


class ProbeError(PortAssignmentError):
    """Raised in strict mode when a probe fails for a reason other than in-use."""

    def __init__(self, port: int, cause: BaseException | None) -> None:
        super().__init__(f"Cannot probe port {port}: {cause}")
        self.port = port
        self.cause = cause


@dataclass(frozen=True)
class PortRange:
    """Inclusive range of ports to scan."""

    min: int
    max: int

    def validate(self) -> None:
        """Check that min < max and both are valid port numbers.

        Raises:
            InvalidRangeError: If the range is unusable
        """
        in_bounds = LOWEST_PORT <= self.min <= HIGHEST_PORT and LOWEST_PORT <= self.max <= HIGHEST_PORT
        if not in_bounds or self.min >= self.max:
            raise InvalidRangeError(self.min, self.max)


@dataclass
class AssignmentResult:
    """Outcome of a successful assignment run."""

    port: int
    reused: bool  # Taken from history without probing
    persisted: bool  # Written to the history store
    ceiling: int  # Highest port the scan was allowed to reach


class PortAssigner:
    """Pick a port for a keyed service, reusing the previous one when safe."""

    def __init__(
        self,
        history: HistoryStore,
        prober: PortProber | None = None,
        resolver: OwnershipResolver | None = None,
        strict_probe: bool = False,
    ) -> None:
        """Initialize assigner.

        Args:
            history: Store holding previous assignments
            prober: Port prober. Defaults to a loopback PortProber.
            resolver: Ownership resolver. Defaults to lsof/pm2 lookups.
            strict_probe: Abort with ProbeError when a probe fails for a
                reason other than "address in use", instead of skipping
                the port
        """
        self.history = history
        self.prober = prober or PortProber()
        self.resolver = resolver or OwnershipResolver()
        self.strict_probe = strict_probe

    def assign(
        self,
        port_range: PortRange,
        key: str,
        app_name: str | None = None,
        forced: bool = False,
        expand_max: bool = False,
    ) -> AssignmentResult:
        """Assign a port and record it in history.

        Strategy:
        1. Unless forced or no app name given, reuse the stored port if it
           is in range and not held by the app itself (no probe)
        2. Otherwise -> first bindable port in the range, ascending
        3. If the range is exhausted and expand_max is set -> raise the
           ceiling and scan the new ports, until found or 65535 is reached
        4. Record the port; a failed write is logged and reported through
           ``persisted=False`` but does not fail the run

        Args:
            port_range: Range to pick from
            key: Variable name the port is stored under
            app_name: Process manager name of the app the port is for
            forced: Skip reuse of the previous port
            expand_max: Allow scanning above port_range.max

        Returns:
            AssignmentResult for the chosen port

        Raises:
            InvalidRangeError: If the range is invalid
            ScanExhaustedError: If no port is available
            ProbeError: If strict_probe is set and a probe errors
        """
        port_range.validate()

        if not forced and app_name:
            previous = self._reusable_port(port_range, key, app_name)
            if previous is not None:
                info(f"Reusing previous port: {previous}")
                return self._finish(key, previous, reused=True, ceiling=port_range.max)

        current_max = port_range.max
        start = port_range.min

        while True:
            port = self._scan(start, current_max)
            if port is not None:
                info(f"Found available port: {port}")
                return self._finish(key, port, reused=False, ceiling=current_max)

            if not expand_max:
                raise ScanExhaustedError(port_range.min, current_max)

            new_max = next_ceiling(current_max)
            if new_max is None:
                warning(f"Reached max port limit ({HIGHEST_PORT}). Cannot expand further")
                raise ScanExhaustedError(port_range.min, current_max)

            for threshold in crossed_thresholds(current_max, new_max):
                warning(f"Scan ceiling passed {threshold}, approaching the top of the port space")

            info(
                f"No port found in {port_range.min}-{current_max}, "
                f"expanding max from {current_max} to {new_max}"
            )
            start = current_max + 1
            current_max = new_max

    def _reusable_port(self, port_range: PortRange, key: str, app_name: str) -> int | None:
        """Get the stored port if it may be handed out again."""
        previous = self.history.read(key)
        if previous is None:
            debug(f"No previous port stored for {key}")
            return None

        if not port_range.min <= previous <= port_range.max:
            debug(f"Previous port {previous} outside {port_range.min}-{port_range.max}")
            return None

        if self.resolver.is_owned_by(app_name, previous):
            debug(f"Previous port {previous} still held by {app_name}, scanning")
            return None

        return previous

    def _scan(self, start: int, end: int) -> int | None:
        """Probe ports start..end (never 0) in order and return the first available."""
        for port in range(max(start, 1), end + 1):
            result = self.prober.probe(port)
            if result is ProbeResult.AVAILABLE:
                return port
            if result is ProbeResult.ERROR:
                if self.strict_probe:
                    raise ProbeError(port, self.prober.last_error)
                debug(f"Skipping port {port}: {self.prober.last_error}")
        return None

    def _finish(self, key: str, port: int, reused: bool, ceiling: int) -> AssignmentResult:
        """Record the chosen port and build the result."""
        try:
            self.history.write(key, port)
            persisted = True
        except HistoryWriteError as e:
            warning(f"{e}. Port {port} is still assigned for this run")
            persisted = False

        return AssignmentResult(port=port, reused=reused, persisted=persisted, ceiling=ceiling)
