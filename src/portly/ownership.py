"""Process ownership checks - is a port held by a named application?"""

import subprocess
from typing import Protocol

from .console import debug


class ProcessInventory(Protocol):
    """Source of port-to-process and app-to-process information.

    Each query returns the raw command output, or None when the query
    failed (tool missing, non-zero exit, timeout).
    """

    def port_holder(self, port: int) -> str | None: ...

    def app_pids(self, app_name: str) -> str | None: ...


class SystemInventory:
    """Query lsof for port holders and pm2 for application pids."""

    def __init__(self, timeout: float = 5) -> None:
        self.timeout = timeout

    def port_holder(self, port: int) -> str | None:
        """Get pid(s) listening on a TCP port using lsof."""
        return self._run(["lsof", "-t", f"-iTCP:{port}", "-sTCP:LISTEN"])

    def app_pids(self, app_name: str) -> str | None:
        """Get pids registered under an application name using pm2."""
        return self._run(["pm2", "pid", app_name])

    def _run(self, command: list[str]) -> str | None:
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (subprocess.SubprocessError, FileNotFoundError, PermissionError) as e:
            debug(f"{command[0]} query failed: {e}")
            return None
        if result.returncode != 0:
            debug(f"{command[0]} exited with status {result.returncode}")
            return None
        return result.stdout


class OwnershipResolver:
    """Cross-reference a port's holder against an application's pids.

    This is a best-effort heuristic: pids can be reused and the tools can lag
    behind reality. Any failed or inconclusive query answers "not owned".
    """

    def __init__(self, inventory: ProcessInventory | None = None) -> None:
        """Initialize resolver.

        Args:
            inventory: Inventory to query. Defaults to SystemInventory.
        """
        self.inventory = inventory or SystemInventory()

    def is_owned_by(self, app_name: str, port: int) -> bool:
        """Check whether the process holding a port belongs to an app.

        Args:
            app_name: Application name as registered with the process manager
            port: Port number to check

        Returns:
            True only if the port holder's pid is one of the app's pids
        """
        holder = _first_pid(self.inventory.port_holder(port))
        if holder is None:
            debug(f"No process found holding port {port}")
            return False

        app_pids = _all_pids(self.inventory.app_pids(app_name))
        if not app_pids:
            debug(f"No pids registered for app '{app_name}'")
            return False

        owned = holder in app_pids
        debug(f"Port {port} held by pid {holder}, {app_name} pids {sorted(app_pids)}: owned={owned}")
        return owned


def _first_pid(output: str | None) -> int | None:
    if not output:
        return None
    lines = output.strip().splitlines()
    if not lines:
        return None
    try:
        return int(lines[0].strip())
    except ValueError:
        return None


def _all_pids(output: str | None) -> set[int]:
    pids: set[int] = set()
    for line in (output or "").splitlines():
        line = line.strip()
        if line.isdigit():
            pids.add(int(line))
    return pids
