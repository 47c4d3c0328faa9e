"""Port history store - remembers the last assigned port per key."""

import re
from pathlib import Path

from .config import HIGHEST_PORT
from .console import debug


class HistoryWriteError(Exception):
    """Raised when the history file cannot be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to write port history to {path}: {cause}")
        self.path = path
        self.cause = cause


class HistoryStore:
    """Plain-text store of ``export KEY=PORT`` lines.

    By default every write replaces the whole file, so the store holds a
    single record: assigning ``API_PORT`` after ``PORT`` forgets ``PORT``.
    Pass ``keep_other_keys=True`` to rewrite only the line for the key being
    written and leave the others in place.
    """

    def __init__(self, path: Path, keep_other_keys: bool = False) -> None:
        """Initialize store.

        Args:
            path: Path to the history file
            keep_other_keys: Preserve lines for other keys on write
        """
        self.path = Path(path)
        self.keep_other_keys = keep_other_keys

    def read(self, key: str) -> int | None:
        """Get the previously assigned port for a key.

        Only whole key names match: reading ``PORT`` ignores
        ``API_PORT=...`` lines. Port 0 is never a valid assignment and is
        skipped like an out-of-range value.

        Args:
            key: Variable name the port was stored under

        Returns:
            First valid port found for the key, or None if the file is
            missing, unreadable, or has no usable entry
        """
        pattern = _key_pattern(key)
        for line in self._read_text().splitlines():
            match = pattern.search(line)
            if match:
                port = int(match.group(1))
                if 0 < port <= HIGHEST_PORT:
                    return port
        return None

    def write(self, key: str, port: int) -> None:
        """Persist the port assigned to a key.

        Args:
            key: Variable name to store the port under
            port: Assigned port

        Raises:
            HistoryWriteError: If the file cannot be written
        """
        record = f"export {key}={port}"
        lines = [record]

        if self.keep_other_keys:
            pattern = _key_pattern(key)
            kept = [
                line
                for line in self._read_text().splitlines()
                if line.strip() and not pattern.search(line)
            ]
            lines = kept + [record]

        try:
            self.path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            raise HistoryWriteError(self.path, e) from e

        debug(f"Wrote {record} to {self.path}")

    def _read_text(self) -> str:
        """Load the file contents, treating any read failure as empty."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as e:
            debug(f"Ignoring unreadable history file {self.path}: {e}")
            return ""


def _key_pattern(key: str) -> re.Pattern[str]:
    # Lookbehind stops PORT from matching API_PORT=...
    return re.compile(rf"(?<![\w]){re.escape(key)}=(\d+)")
