"""Port command - assign a port for a keyed service."""

from pathlib import Path

from .common import console, run_assignment
from .options import (
    app_name_option,
    env_file_option,
    expand_max_option,
    forced_option,
    keep_keys_option,
    key_option,
    max_option,
    min_option,
    strict_probe_option,
)


def port(
    min_port: int = min_option(...),
    max_port: int = max_option(...),
    key: str = key_option(...),
    app_name: str | None = app_name_option(),
    forced: bool = forced_option(),
    expand_max: bool = expand_max_option(),
    env_file: Path = env_file_option(),
    keep_keys: bool = keep_keys_option(),
    strict_probe: bool = strict_probe_option(),
) -> None:
    """Assign a port in MIN-MAX and print it.

    Reuses the port stored for KEY when an app name is given and that app
    does not hold the port itself.

    Examples:
        portly port --min 3000 --max 3100 --key PORT
        portly port --min 3000 --max 3100 --key API_PORT -a api --expand-max
        PORT=$(portly port --min 3000 --max 3100 --key PORT -a web)
    """
    result = run_assignment(
        min_port,
        max_port,
        key,
        app_name,
        forced,
        expand_max,
        env_file,
        keep_keys=keep_keys,
        strict_probe=strict_probe,
    )
    console.print(result.port, highlight=False)
