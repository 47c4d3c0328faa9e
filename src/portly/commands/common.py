"""Common utilities for CLI commands."""

from pathlib import Path

import typer

from ..assigner import AssignmentResult, PortAssigner, PortAssignmentError, PortRange
from ..console import console, debug, error, error_console, info, success, warning
from ..history import HistoryStore

# Re-export console utilities
__all__ = [
    "console",
    "error_console",
    "debug",
    "info",
    "success",
    "warning",
    "error",
    "get_assigner",
    "run_assignment",
]


def get_assigner(env_file: Path, keep_keys: bool = False, strict_probe: bool = False) -> PortAssigner:
    """Get assigner backed by the history file."""
    return PortAssigner(HistoryStore(env_file, keep_other_keys=keep_keys), strict_probe=strict_probe)


def run_assignment(
    min_port: int,
    max_port: int,
    key: str,
    app_name: str | None,
    forced: bool,
    expand_max: bool,
    env_file: Path,
    keep_keys: bool = False,
    strict_probe: bool = False,
) -> AssignmentResult:
    """Run one assignment, exiting with status 1 on failure."""
    assigner = get_assigner(env_file, keep_keys=keep_keys, strict_probe=strict_probe)
    try:
        return assigner.assign(
            PortRange(min_port, max_port),
            key,
            app_name=app_name,
            forced=forced,
            expand_max=expand_max,
        )
    except PortAssignmentError as e:
        error(str(e))
        raise typer.Exit(1)
