"""Shared typer options for assignment commands."""

from typing import Any

import typer

from ..config import (
    DEFAULT_ENV_FILE,
    DEFAULT_KEY,
    DEFAULT_MAX_PORT,
    DEFAULT_MIN_PORT,
    ENV_APP_NAME,
    ENV_ENV_FILE,
    ENV_KEY,
    ENV_MAX_PORT,
    ENV_MIN_PORT,
    HIGHEST_PORT,
    LOWEST_PORT,
)


def min_option(default: Any = DEFAULT_MIN_PORT) -> Any:
    return typer.Option(
        default,
        "--min",
        min=LOWEST_PORT,
        max=HIGHEST_PORT,
        envvar=ENV_MIN_PORT,
        help="Lowest port to consider",
    )


def max_option(default: Any = DEFAULT_MAX_PORT) -> Any:
    return typer.Option(
        default,
        "--max",
        min=LOWEST_PORT,
        max=HIGHEST_PORT,
        envvar=ENV_MAX_PORT,
        help="Highest port to consider",
    )


def key_option(default: Any = DEFAULT_KEY) -> Any:
    return typer.Option(default, "--key", envvar=ENV_KEY, help="Variable name to store the port under")


def app_name_option() -> Any:
    return typer.Option(
        None,
        "-a",
        "--app-name",
        envvar=ENV_APP_NAME,
        help="pm2 app name; enables reuse of the previous port",
    )


def forced_option() -> Any:
    return typer.Option(False, "--forced", help="Ignore the previous port and scan")


def expand_max_option() -> Any:
    return typer.Option(False, "--expand-max", help="Raise the max when the range is full")


def env_file_option() -> Any:
    return typer.Option(
        DEFAULT_ENV_FILE,
        "--env-file",
        envvar=ENV_ENV_FILE,
        dir_okay=False,
        help="Port history file",
    )


def keep_keys_option() -> Any:
    return typer.Option(False, "--keep-keys", help="Keep other keys in the history file")


def strict_probe_option() -> Any:
    return typer.Option(
        False, "--strict-probe", help="Fail on probe errors other than 'address in use'"
    )


__all__ = [
    "min_option",
    "max_option",
    "key_option",
    "app_name_option",
    "forced_option",
    "expand_max_option",
    "env_file_option",
    "keep_keys_option",
    "strict_probe_option",
]
