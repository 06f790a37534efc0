"""MCP server exposing the debug-string renderer as tools.

Package structure:
  __init__.py  — FastMCP init, register() call, re-exports
  __main__.py  — ``python -m debugstr.mcp_server`` entry point
  _core.py     — _call dispatcher, response contract
  _tools.py    — render_debug_string, inspect_characters

Run: python -m debugstr.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from debugstr.mcp_server import _tools

mcp = FastMCP(
    "debugstr",
    instructions=(
        "String debugging tools. "
        "render_debug_string shows each character above its index, escaping "
        "control and non-Latin-1 characters; use it to spot hidden whitespace, "
        "mixed line endings and look-alike characters. "
        "Indices count UTF-16 code units."
    ),
)

_tools.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from debugstr.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _ensure_contract_dict,
    _finalize_tool_result,
)
from debugstr.mcp_server._tools import (  # noqa: E402, F401
    inspect_characters,
    render_debug_string,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
