"""Entry point for ``python -m debugstr``."""

from debugstr.cli import main

main()
