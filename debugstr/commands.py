"""
Command implementations for debugstr.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Rendering lives in renderer.py and inspector.py. These thin wrappers
handle argparse → arguments, format selection, logging and formatter dispatch.
"""

import json
import sys

from debugstr import config
from debugstr.exceptions import CliError
from debugstr.formatters import format_inspect_table, format_render_table, output, render_payload
from debugstr.inspector import inspect_text
from debugstr.renderer import plan_layout, render


def _log_event(**fields):
    """Emit structured debug logs to stderr when enabled."""
    if not config.LOG_ENABLED:
        return
    print("[DEBUG] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _safe_json_string(text, context="text"):
    """Parse a JSON string literal with a friendly error message on failure."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise CliError(f"[ERROR] Invalid JSON in {context}: {e.msg} at position {e.pos}") from None
    if not isinstance(value, str):
        raise CliError(
            f"[ERROR] Invalid JSON in {context}: expected string, got {type(value).__name__}."
        )
    return value


def _text_from_ns(ns):
    if getattr(ns, "json", False):
        return _safe_json_string(ns.text)
    return ns.text


def _warn_split(text, length):
    """Warn on stderr when astral characters were split into surrogate pairs."""
    if config.RUNTIME_QUIET or not text:
        return
    split = length - len(text)
    if split > 0:
        print(
            f"[WARN] {split} character(s) above U+FFFF shown as surrogate pairs.",
            file=sys.stderr,
        )


def render_result(text, maximum_line_length):
    """Render *text* and return the JSON payload (report plus layout figures)."""
    report = render(text, maximum_line_length)
    layout = plan_layout(text, maximum_line_length) if text else None
    return render_payload(report, layout, maximum_line_length)


def cmd_render(ns):
    text = _text_from_ns(ns)
    width = ns.width if ns.width is not None else config.MAX_LINE_LENGTH
    result = render_result(text, width)
    _log_event(
        event="render",
        length=result["length"],
        maximum_line_length=width,
        row_groups=result["row_groups"],
    )
    _warn_split(text, result["length"])
    output(result, format_render_table, ns.format)


def cmd_inspect(ns):
    text = _text_from_ns(ns)
    result = inspect_text(text)
    _log_event(event="inspect", length=result["length"], code_points=result["code_points"])
    _warn_split(text, result["length"])
    output(result, format_inspect_table, ns.format)
