"""Allow running portly as ``python -m portly``."""

from .cli import main

main()
