"""debugstr — render strings as escaped, indexed debug tables."""

from debugstr.config import VERSION
from debugstr.exceptions import CliError, InvalidArgumentError
from debugstr.inspector import inspect_text
from debugstr.models import EscapeToken, Layout, decode_token, escape_code_unit
from debugstr.renderer import iter_row_groups, plan_layout, render
from debugstr.types import CharacterRow, InspectResult, RenderResult

__all__ = [
    "VERSION",
    "CliError",
    "InvalidArgumentError",
    "EscapeToken",
    "Layout",
    "decode_token",
    "escape_code_unit",
    "inspect_text",
    "iter_row_groups",
    "plan_layout",
    "render",
    "CharacterRow",
    "InspectResult",
    "RenderResult",
]
