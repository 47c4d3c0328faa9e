"""Proxy command - assign a port and render a reverse-proxy config."""

from pathlib import Path

import typer

from ..config import DEFAULT_PROXY_DIR, ENV_DOMAIN
from ..proxy import ProxyConfigError, render_template_file, write_proxy_config
from .common import console, error, run_assignment, success
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


def proxy(
    domain: str = typer.Option(..., "--domain", envvar=ENV_DOMAIN, help="Domain served by the proxy"),
    template: Path = typer.Option(
        ..., "-t", "--template", dir_okay=False, help="Config template with {{DOMAIN}} and {{PORT}}"
    ),
    output_dir: Path = typer.Option(
        DEFAULT_PROXY_DIR, "-o", "--output-dir", file_okay=False, help="Directory for rendered configs"
    ),
    min_port: int = min_option(),
    max_port: int = max_option(),
    key: str = key_option(),
    app_name: str | None = app_name_option(),
    forced: bool = forced_option(),
    expand_max: bool = expand_max_option(),
    env_file: Path = env_file_option(),
    keep_keys: bool = keep_keys_option(),
    strict_probe: bool = strict_probe_option(),
) -> None:
    """Assign a port and write a proxy config for DOMAIN pointing at it.

    The rendered file is written to OUTPUT_DIR/DOMAIN and the port is
    printed.

    Examples:
        portly proxy --domain app.example.com -t nginx-template.txt -a web
        DOMAIN=app.example.com APP_NAME=web portly proxy -t nginx-template.txt
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

    try:
        content = render_template_file(template, {"DOMAIN": domain, "PORT": str(result.port)})
        config_path = write_proxy_config(output_dir, domain, content)
    except ProxyConfigError as e:
        error(str(e))
        raise typer.Exit(1)

    success(f"Config written to {config_path}")
    console.print(result.port, highlight=False)
