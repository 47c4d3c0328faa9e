"""Configuration defaults for portly."""

from pathlib import Path

DEFAULT_MIN_PORT = 3000
DEFAULT_MAX_PORT = 8000
DEFAULT_KEY = "PORT"
DEFAULT_ENV_FILE = Path(".portly.env")
DEFAULT_PROXY_DIR = Path("nginx-configs")

LOWEST_PORT = 0
HIGHEST_PORT = 65535

# Environment variables read by CLI options
ENV_MIN_PORT = "PORT_MIN"
ENV_MAX_PORT = "PORT_MAX"
ENV_KEY = "PORT_ENV_NAME"
ENV_APP_NAME = "APP_NAME"
ENV_ENV_FILE = "PORTLY_ENV_FILE"
ENV_DOMAIN = "DOMAIN"
