"""Tests for formatters.py: outcome rendering, usage text, table helpers."""

import json

from anki_connect.formatters import (
    _sanitize_str,
    _table,
    _trunc,
    format_actions_table,
    format_help,
    format_outcome,
    outcome_payload,
    output_outcome,
    render_value,
)
from anki_connect.models import Failure, Success
from anki_connect.registry import ACTIONS


class TestRenderValue:
    def test_string_as_is(self):
        assert render_value("<html>stats</html>") == "<html>stats</html>"

    def test_number(self):
        assert render_value(1519323742721) == "1519323742721"

    def test_structure_is_json(self):
        assert json.loads(render_value({"Default": 1})) == {"Default": 1}

    def test_unicode_kept(self):
        assert "żółw" in render_value(["żółw"])


class TestFormatOutcome:
    def test_done(self):
        assert format_outcome(Success(None)) == "Done."

    def test_value(self):
        assert format_outcome(Success(6)) == "6"

    def test_false_is_a_value(self):
        assert format_outcome(Success(False)) == "false"

    def test_failure(self):
        assert format_outcome(Failure("deck was not found")) == "Error: deck was not found"

    def test_structured_failure(self):
        assert format_outcome(Failure({"code": 1})).startswith("Error: {")


class TestOutput:
    def test_payload(self):
        assert outcome_payload(Success([1])) == {"ok": True, "result": [1]}
        assert outcome_payload(Failure("e")) == {"ok": False, "error": "e"}

    def test_text(self, capsys):
        output_outcome(Success(None))
        assert capsys.readouterr().out == "Done.\n"

    def test_json(self, capsys):
        output_outcome(Failure("e"), fmt="json")
        assert json.loads(capsys.readouterr().out) == {"ok": False, "error": "e"}


class TestHelp:
    def test_usage_and_table(self):
        text = format_help()
        assert text.startswith("Usage: anki-connect <action>")
        assert "--with_sync" in text
        assert "delete_decks" in text

    def test_table_lists_every_action(self):
        table = format_actions_table()
        for action in ACTIONS:
            assert action.name in table
        assert f"Total: {len(ACTIONS)} actions" in table

    def test_actions_table_marks_optional_params(self):
        lines = format_actions_table().splitlines()
        stats = next(line for line in lines if line.startswith("get_collection_stats_html"))
        assert "[params]" in stats
        deck_names = next(line for line in lines if line.startswith("deck_names "))
        assert " - " in deck_names


class TestTableHelpers:
    def test_trunc(self):
        assert _trunc("abcdef", 4) == "abc…"
        assert _trunc("abc", 4) == "abc"
        assert _trunc(None, 4) == ""

    def test_sanitize(self):
        assert _sanitize_str("a\x1b[31mb\x00c\n") == "abc\n"

    def test_table(self):
        out = _table([("A", 3), ("B", 0)], [("x", "y")], footer="done")
        lines = out.splitlines()
        assert lines[0] == "A   B"
        assert lines[2] == "x   y"
        assert lines[-1] == "done"
