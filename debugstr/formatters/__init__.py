"""Output formatting package for debugstr.

Re-exports all public names so consumers can do:
    from debugstr.formatters import format_inspect_table
"""

from debugstr.formatters._core import output, pretty_print
from debugstr.formatters._inspect import format_inspect_table
from debugstr.formatters._report import format_render_table, render_payload
from debugstr.formatters._table import (
    _CONTROL_RE,
    _sanitize_str,
    _table,
    _trunc,
)

__all__ = [
    "_CONTROL_RE",
    "_sanitize_str",
    "_table",
    "_trunc",
    "format_inspect_table",
    "format_render_table",
    "output",
    "pretty_print",
    "render_payload",
]
