"""
Debug-string renderer.

Turns a string into a two-line-per-row report that shows every UTF-16 code
unit above its zero-based index:

    >>> print(render("AB\\r\\n"))
    Character: |A |B |\\r|\\n|
    Index:     |00|01|02|03|

Long strings wrap into several row-groups separated by a blank line. All
columns in a report share one width, measured once over the whole string.
"""

from debugstr import config
from debugstr._utils import _chunk_ranges, _index_digit_width, code_units
from debugstr.exceptions import CliError, InvalidArgumentError
from debugstr.models import Layout, escape_code_unit


def _check_line_length(maximum_line_length):
    valid = isinstance(maximum_line_length, int) and not isinstance(maximum_line_length, bool)
    if not valid or maximum_line_length < config.MIN_MAX_LINE_LENGTH:
        raise InvalidArgumentError(
            "maximum_line_length", config.MIN_MAX_LINE_LENGTH, maximum_line_length
        )


def plan_layout(text, maximum_line_length=config.DEFAULT_MAX_LINE_LENGTH) -> Layout:
    """Measure escape tokens, column width and row-group boundaries for *text*.

    Raises InvalidArgumentError if maximum_line_length < 25 and CliError if
    text is empty or None.
    """
    _check_line_length(maximum_line_length)
    if not text:
        raise CliError("[ERROR] Cannot lay out an empty string.")

    tokens = tuple(escape_code_unit(u) for u in code_units(text))
    digit_width = _index_digit_width(len(tokens))
    token_max_width = max(t.width for t in tokens)
    content_width = max(digit_width, token_max_width)
    column_width = content_width + len(config.SEPARATOR)
    per_line = max(1, (maximum_line_length - config.PREFIX_WIDTH) // column_width)

    return Layout(
        tokens=tokens,
        index_digit_width=digit_width,
        token_max_width=token_max_width,
        column_content_width=content_width,
        column_width=column_width,
        columns_per_line=per_line,
        row_groups=_chunk_ranges(len(tokens), per_line),
    )


def iter_row_groups(layout):
    """Yield (character_line, index_line) for each row-group of *layout*."""
    width = layout.column_content_width
    sep = config.SEPARATOR
    for start, stop in layout.row_groups:
        chars = "".join(t.text.ljust(width) + sep for t in layout.tokens[start:stop])
        indices = "".join(f"{i:0{width}d}" + sep for i in range(start, stop))
        yield (
            f"{config.CHARACTER_LABEL}{sep}{chars}",
            f"{config.INDEX_LABEL}{sep}{indices}",
        )


def render(text, maximum_line_length=config.DEFAULT_MAX_LINE_LENGTH):
    """Return the debug report for *text*.

    maximum_line_length is checked first and must be at least 25. Empty or
    None text yields EMPTY_TEXT_MESSAGE instead of a report.
    """
    _check_line_length(maximum_line_length)
    if not text:
        return config.EMPTY_TEXT_MESSAGE
    layout = plan_layout(text, maximum_line_length)
    return "\n\n".join("\n".join(pair) for pair in iter_row_groups(layout))
