"""Command modules for portly CLI."""

from .port import port
from .proxy import proxy
from .show import show

__all__ = [
    "port",
    "proxy",
    "show",
]
