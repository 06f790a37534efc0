"""Tests for inspector.py — per-code-unit inspection."""

from debugstr.inspector import inspect_text


class TestInspectText:
    def test_rows(self):
        result = inspect_text("A\n")
        assert result["length"] == 2
        assert result["code_points"] == 2
        first, second = result["characters"]
        assert first == {
            "index": 0,
            "code_unit": 0x41,
            "hex": "U+0041",
            "token": "A",
            "kind": "literal",
            "name": "LATIN CAPITAL LETTER A",
        }
        assert second["token"] == "\\n"
        assert second["kind"] == "control"
        assert second["name"] == ""

    def test_latin1_literal_named(self):
        row = inspect_text("\xe9")["characters"][0]
        assert row["kind"] == "literal"
        assert row["name"] == "LATIN SMALL LETTER E WITH ACUTE"

    def test_unicode_escape(self):
        row = inspect_text(chr(0x20AC))["characters"][0]
        assert row["kind"] == "unicode"
        assert row["token"] == "\\u20AC"
        assert row["hex"] == "U+20AC"
        assert row["name"] == "EURO SIGN"

    def test_astral_split_into_surrogates(self):
        result = inspect_text("\U0001F600")
        assert result["length"] == 2
        assert result["code_points"] == 1
        assert [c["hex"] for c in result["characters"]] == ["U+D83D", "U+DE00"]
        assert all(c["name"] == "" for c in result["characters"])

    def test_empty_and_none(self):
        empty = {"length": 0, "code_points": 0, "characters": []}
        assert inspect_text("") == empty
        assert inspect_text(None) == empty
