"""Formatter for per-code-unit inspection results."""

from debugstr.formatters._table import _table, _trunc

_NAME_WIDTH = 48


def format_inspect_table(result):
    """Format inspect_text() output as a table with one row per code unit."""
    chars = result.get("characters") or []
    if not chars:
        return "No characters."
    cols = [("Index", 6), ("Unit", 7), ("Token", 7), ("Kind", 8), ("Name", 0)]
    rows = [
        (
            c["index"],
            c["hex"],
            c["token"] if c["kind"] != "literal" or c["token"].isprintable() else "?",
            c["kind"],
            _trunc(c["name"], _NAME_WIDTH) or "-",
        )
        for c in chars
    ]
    footer = f"Total: {result['length']} code units"
    if result.get("code_points") != result["length"]:
        footer += f" ({result['code_points']} code points)"
    return _table(cols, rows, footer=footer)
