"""Typer CLI for portly - Main entry point."""

from pathlib import Path

import typer

from . import __version__
from .commands import port, proxy, show
from .commands.common import console, run_assignment
from .commands.options import (
    app_name_option,
    env_file_option,
    expand_max_option,
    forced_option,
    key_option,
    max_option,
    min_option,
)

app = typer.Typer(
    name="portly",
    help="Port discovery utility",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"portly version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    min_port: int = min_option(),
    max_port: int = max_option(),
    key: str = key_option(),
    app_name: str | None = app_name_option(),
    forced: bool = forced_option(),
    expand_max: bool = expand_max_option(),
    env_file: Path = env_file_option(),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Assign a free port, reusing the previous one when safe.

    Without a subcommand, assigns a port using the options above and prints
    it.
    """
    if ctx.invoked_subcommand is not None:
        return

    result = run_assignment(min_port, max_port, key, app_name, forced, expand_max, env_file)
    console.print(result.port, highlight=False)


# Register all commands
app.command()(port)
app.command()(proxy)
app.command()(show)


def main() -> None:
    """Main entry point."""
    app()
