"""Tests for MCP server tool wrappers.

Verifies tool results, the response contract, and that errors are
converted to dicts instead of raised.
"""

import pytest

mcp_mod = pytest.importorskip("debugstr.mcp_server", reason="mcp package not installed")

import importlib  # noqa: E402

from debugstr import config  # noqa: E402
from debugstr.exceptions import CliError  # noqa: E402

_core = importlib.import_module("debugstr.mcp_server._core")


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class TestRenderTool:
    def test_render(self):
        result = mcp_mod.render_debug_string("ABC")
        assert result["ok"] is True
        assert result["schema_version"] == config.CONTRACT_SCHEMA_VERSION
        assert result["report"] == "Character: |A|B|C|\nIndex:     |0|1|2|"

    def test_wraps(self):
        result = mcp_mod.render_debug_string("01234567890123456789012345678901234567", 40)
        assert result["row_groups"] == 5

    def test_default_width_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_LINE_LENGTH", 40)
        result = mcp_mod.render_debug_string("x")
        assert result["maximum_line_length"] == 40

    def test_invalid_width_is_error_dict(self):
        result = mcp_mod.render_debug_string("ABC", 10)
        assert result["ok"] is False
        assert result["type"] == "invalid_argument"
        assert "25" in result["error"]

    def test_empty_text(self):
        result = mcp_mod.render_debug_string("")
        assert result["report"] == "The string is null or empty."

    def test_too_long(self):
        result = mcp_mod.render_debug_string("x" * 50_001)
        assert result["ok"] is False
        assert "maximum length" in result["error"]


class TestInspectTool:
    def test_inspect(self):
        result = mcp_mod.inspect_characters("A\r")
        assert result["ok"] is True
        assert result["length"] == 2
        assert result["characters"][1]["token"] == "\\r"

    def test_non_string_is_error_dict(self):
        result = mcp_mod.inspect_characters(42)
        assert result["ok"] is False


# ---------------------------------------------------------------------------
# Contract helpers
# ---------------------------------------------------------------------------


class TestContract:
    def test_contract_error_shape(self):
        err = _core._contract_error("bad", "error")
        assert err["ok"] is False
        assert err["error_detail"] == {"type": "error", "message": "bad"}

    def test_envelope_mode(self, monkeypatch):
        monkeypatch.setattr(_core, "MCP_RESPONSE_MODE", "envelope")
        result = _core._finalize_tool_result({"report": "R"})
        assert result == {
            "ok": True,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "data": {"report": "R"},
        }

    def test_envelope_mode_keeps_errors(self, monkeypatch):
        monkeypatch.setattr(_core, "MCP_RESPONSE_MODE", "envelope")
        result = _core._finalize_tool_result(_core._contract_error("bad"))
        assert result["ok"] is False

    def test_call_converts_cli_error(self):
        def _boom():
            raise CliError("[ERROR] nope")

        assert _core._call(_boom)["error"] == "[ERROR] nope"

    def test_call_converts_unexpected(self):
        def _boom():
            raise RuntimeError("kaput")

        assert _core._call(_boom)["error"] == "Unexpected error: kaput"
