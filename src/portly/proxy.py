"""Reverse-proxy config rendering for portly."""

from pathlib import Path

from .console import debug


class ProxyConfigError(Exception):
    """Raised when a proxy config cannot be read or written."""

    pass


def render_template(template: str, placeholders: dict[str, str]) -> str:
    """Fill ``{{NAME}}`` placeholders in a template.

    Args:
        template: Template text
        placeholders: Mapping of placeholder name to value

    Returns:
        Rendered text. Unknown placeholders are left untouched.
    """
    content = template
    for name, value in placeholders.items():
        content = content.replace(f"{{{{{name}}}}}", value)
    return content


def render_template_file(template_path: Path, placeholders: dict[str, str]) -> str:
    """Read a template file and fill its placeholders.

    Raises:
        ProxyConfigError: If the template cannot be read
    """
    try:
        template = Path(template_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ProxyConfigError(f"Cannot read template {template_path}: {e}") from e
    return render_template(template, placeholders)


def write_proxy_config(output_dir: Path, domain: str, content: str) -> Path:
    """Write a rendered config to ``output_dir/<domain>``.

    Args:
        output_dir: Directory holding one config file per domain
        domain: Domain name, used as the file name
        content: Rendered config

    Returns:
        Path of the written file

    Raises:
        ProxyConfigError: If the directory or file cannot be written
    """
    if not domain or "/" in domain or domain in (".", ".."):
        raise ProxyConfigError(f"Invalid domain name: '{domain}'")

    config_path = Path(output_dir) / domain
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ProxyConfigError(f"Cannot write proxy config {config_path}: {e}") from e

    debug(f"Proxy config written to {config_path}")
    return config_path
