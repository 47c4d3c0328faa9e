"""Show command - print the stored port for a key."""

from pathlib import Path

import typer

from ..history import HistoryStore
from .common import console, error_console
from .options import env_file_option, key_option


def show(
    key: str = key_option(),
    env_file: Path = env_file_option(),
) -> None:
    """Print the port last assigned to KEY.

    Examples:
        portly show
        portly show --key API_PORT --env-file .portly.env
    """
    stored = HistoryStore(env_file).read(key)
    if stored is None:
        error_console.print(f"[yellow]No port stored for {key} in {env_file}[/yellow]")
        raise typer.Exit(1)
    console.print(stored, highlight=False)
