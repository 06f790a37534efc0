"""Entry point for ``python -m debugstr.mcp_server``."""

from debugstr.mcp_server import main

main()
