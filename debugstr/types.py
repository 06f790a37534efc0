"""Typed response definitions for render/inspect results.

These TypedDicts document the shape of dicts returned by commands and MCP
tools. Runtime values are plain dicts.
"""

from __future__ import annotations

from typing import Literal, TypedDict

TokenKind = Literal["control", "literal", "unicode"]


class CharacterRow(TypedDict):
    """One code unit of an inspected string."""

    index: int
    code_unit: int
    hex: str
    token: str
    kind: TokenKind
    name: str


class InspectResult(TypedDict):
    """Return type of inspect_text()."""

    length: int
    code_points: int
    characters: list[CharacterRow]


class RenderResult(TypedDict):
    """JSON payload for the render command and render_debug_string tool."""

    report: str
    length: int
    row_groups: int
    column_content_width: int
    columns_per_line: int
    maximum_line_length: int
