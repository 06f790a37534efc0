"""Low-level table rendering helpers (stdlib only)."""

import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x1f\x7f-\x9f]")


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from a table cell."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _table(columns, rows, footer=None, min_rule=40):
    """Build a left-aligned text table.
    columns: list of (name, width) tuples. Last column has no width (fills).
    rows: list of tuples matching columns. Only the last column is sanitized;
    earlier columns are expected to hold escape tokens or numbers.
    footer: optional footer line, separated by a blank line."""
    last = len(columns) - 1

    def _line(values):
        parts = []
        for i, val in enumerate(values):
            if i == last:
                parts.append(_sanitize_str(val) if isinstance(val, str) else str(val))
            else:
                parts.append(f"{str(val):<{columns[i][1]}}")
        return " ".join(parts).rstrip()

    header = _line([name for name, _ in columns])
    lines = [header, "-" * max(len(header), min_rule)]
    lines.extend(_line(row) for row in rows)
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)
