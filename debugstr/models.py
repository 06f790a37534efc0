"""
Typed models for escape tokens and report layout.
"""

import re
from dataclasses import dataclass

from debugstr.exceptions import CliError

KIND_CONTROL = "control"
KIND_LITERAL = "literal"
KIND_UNICODE = "unicode"

CONTROL_ESCAPES = {
    0x07: "\\a",
    0x08: "\\b",
    0x0C: "\\f",
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
    0x0B: "\\v",
}
_CONTROL_UNESCAPES = {v: k for k, v in CONTROL_ESCAPES.items()}

# Highest code unit printed as itself. One below the Latin-1 boundary;
# existing reports depend on U+00FF being escaped.
LITERAL_MAX = 254

_UNICODE_TOKEN_RE = re.compile(r"\\u([0-9A-F]{4})")


@dataclass(frozen=True)
class EscapeToken:
    """Printable representation of one UTF-16 code unit."""

    kind: str
    text: str
    code_unit: int

    @property
    def width(self) -> int:
        return len(self.text)


def escape_code_unit(code_unit: int) -> EscapeToken:
    """Pick the control escape, the literal character, or a \\uXXXX escape."""
    control = CONTROL_ESCAPES.get(code_unit)
    if control is not None:
        return EscapeToken(KIND_CONTROL, control, code_unit)
    if code_unit <= LITERAL_MAX:
        return EscapeToken(KIND_LITERAL, chr(code_unit), code_unit)
    return EscapeToken(KIND_UNICODE, f"\\u{code_unit:04X}", code_unit)


def decode_token(token: str) -> int:
    """Return the code unit an escape token stands for.

    Accepts the padded form used in reports; trailing padding is stripped
    unless the token is itself a single space.
    """
    if len(token) > 1:
        token = token.rstrip(" ") or " "
    if token in _CONTROL_UNESCAPES:
        return _CONTROL_UNESCAPES[token]
    if len(token) == 1 and ord(token) <= LITERAL_MAX:
        return ord(token)
    m = _UNICODE_TOKEN_RE.fullmatch(token)
    if m:
        return int(m.group(1), 16)
    raise CliError(f"[ERROR] Not a valid escape token: {token!r}")


@dataclass(frozen=True)
class Layout:
    """Measured layout of a debug report, shared by every row-group."""

    tokens: tuple[EscapeToken, ...]
    index_digit_width: int
    token_max_width: int
    column_content_width: int
    column_width: int
    columns_per_line: int
    row_groups: tuple[tuple[int, int], ...]

    @property
    def length(self) -> int:
        return len(self.tokens)
