"""Render and inspect tools (2 tools, no I/O)."""

from __future__ import annotations

from debugstr import CliError, config
from debugstr.commands import render_result
from debugstr.inspector import inspect_text
from debugstr.mcp_server._core import _call, _contract_error, _finalize_tool_result

_MAX_TEXT_LENGTH = 50_000


def _validate_text(text: str | None) -> str:
    if text is None:
        return ""
    if not isinstance(text, str):
        raise CliError("[ERROR] text must be a string")
    if len(text) > _MAX_TEXT_LENGTH:
        raise CliError(f"[ERROR] text exceeds maximum length of {_MAX_TEXT_LENGTH} characters")
    return text


def render_debug_string(text: str, maximum_line_length: int | None = None) -> dict:
    """Render a string as a Character/Index table with escaped characters.

    Args:
        text: String to render. Control characters appear as \\n, \\r, \\t...;
            characters above U+00FE as \\uXXXX.
        maximum_line_length: Wrap width, at least 25 (default 80).

    Returns:
        Dict with report, length, row_groups, column_content_width,
        columns_per_line, maximum_line_length.
    """
    try:
        text = _validate_text(text)
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    width = config.MAX_LINE_LENGTH if maximum_line_length is None else maximum_line_length
    return _finalize_tool_result(_call(render_result, text, width))


def inspect_characters(text: str) -> dict:
    """List every UTF-16 code unit of a string with its escape token and Unicode name.

    Returns:
        Dict with length, code_points and characters (index, code_unit, hex,
        token, kind, name).
    """
    try:
        text = _validate_text(text)
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(dict(_call(inspect_text, text)))


def register(mcp):
    """Register all tools with the FastMCP instance."""
    mcp.tool()(render_debug_string)
    mcp.tool()(inspect_characters)
