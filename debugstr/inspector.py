"""
Per-code-unit inspection of a string: index, code unit, escape token, kind
and Unicode name for every UTF-16 code unit.
"""

from __future__ import annotations

import unicodedata

from debugstr._utils import code_units
from debugstr.models import escape_code_unit
from debugstr.types import CharacterRow, InspectResult


def _unit_name(code_unit: int) -> str:
    if 0xD800 <= code_unit <= 0xDFFF:
        return ""
    return unicodedata.name(chr(code_unit), "")


def inspect_text(text: str | None) -> InspectResult:
    """Describe every code unit of *text*. Empty or None gives an empty result."""
    if not text:
        return {"length": 0, "code_points": 0, "characters": []}
    rows: list[CharacterRow] = []
    for index, unit in enumerate(code_units(text)):
        token = escape_code_unit(unit)
        rows.append(
            {
                "index": index,
                "code_unit": unit,
                "hex": f"U+{unit:04X}",
                "token": token.text,
                "kind": token.kind,  # type: ignore[typeddict-item]
                "name": _unit_name(unit),
            }
        )
    return {"length": len(rows), "code_points": len(text), "characters": rows}
