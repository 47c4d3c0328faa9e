"""Console utilities for portly CLI."""

import os
from typing import Any

from rich.console import Console

# stdout is reserved for results so `PORT=$(portly)` captures only the port
console = Console()
error_console = Console(stderr=True)

# Debug mode - enabled by PORTLY_DEBUG environment variable
DEBUG = os.getenv("PORTLY_DEBUG", "").lower() in ("1", "true", "yes")


def debug(message: str, **kwargs: Any) -> None:
    """Print debug message if DEBUG mode is enabled.

    Args:
        message: Message to print
        **kwargs: Additional arguments for console.print
    """
    if DEBUG:
        error_console.print(f"[dim][DEBUG][/dim] {message}", **kwargs)


def info(message: str, **kwargs: Any) -> None:
    """Print info message to stderr.

    Args:
        message: Message to print
        **kwargs: Additional arguments for console.print
    """
    error_console.print(message, **kwargs)


def success(message: str, **kwargs: Any) -> None:
    """Print success message in green to stderr."""
    error_console.print(f"[green]{message}[/green]", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print warning message in yellow to stderr."""
    error_console.print(f"[yellow]Warning:[/yellow] {message}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print error message in red to stderr.

    Args:
        message: Message to print
        **kwargs: Additional arguments for console.print
    """
    error_console.print(f"[red]Error:[/red] {message}", **kwargs)
