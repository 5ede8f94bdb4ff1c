"""Tests for _utils.py and models.py: pure helpers and outcome types."""

import pytest

from anki_connect._utils import (
    acknowledge,
    check_for_file_data,
    maybe_add_field,
    reject_value,
    require_params,
)
from anki_connect.exceptions import CliError
from anki_connect.models import Failure, ObjectPayload, ParsedInvocation, Success


class TestMaybeAddField:
    def test_adds(self):
        assert maybe_add_field({"a": 1}, "b", 2) == {"a": 1, "b": 2}

    def test_skips_none(self):
        assert maybe_add_field({"a": 1}, "b", None) == {"a": 1}

    def test_keeps_false(self):
        assert maybe_add_field({}, "css", False) == {"css": False}

    def test_does_not_mutate(self):
        original = {"a": 1}
        maybe_add_field(original, "b", 2)
        assert original == {"a": 1}


class TestRequireParams:
    def test_returns_in_order(self):
        assert require_params({"b": 2, "a": 1}, "x", "a", "b") == (1, 2)

    def test_falsy_values_allowed(self):
        assert require_params({"a": None}, "x", "a") == (None,)

    def test_missing(self):
        with pytest.raises(CliError) as exc_info:
            require_params({}, "create_deck", "deck")
        assert str(exc_info.value) == "[ERROR] Action 'create_deck' requires params: deck"

    def test_not_a_mapping(self):
        with pytest.raises(CliError):
            require_params([1], "x", "a")


class TestAcknowledge:
    def test_false_becomes_failure(self):
        assert acknowledge(Success(False), "nope") == Failure("nope")

    def test_true_becomes_none(self):
        assert acknowledge(Success(True), "nope") == Success(None)

    def test_failure_passes(self):
        assert acknowledge(Failure("remote"), "nope") == Failure("remote")


class TestRejectValue:
    def test_rejected(self):
        assert reject_value(Success(None), None, "r") == Failure("r")

    def test_zero_is_not_false(self):
        assert reject_value(Success(0), False, "r") == Success(0)

    def test_other(self):
        assert reject_value(Success("x"), False, "r") == Success("x")


class TestCheckForFileData:
    def test_not_a_map(self):
        assert check_for_file_data("x") == Failure("File data must be a map")

    def test_no_filename(self):
        assert check_for_file_data({"data": "x"}) == Failure("No filename found")

    def test_no_content(self):
        assert check_for_file_data({"filename": "a"}) == Failure(
            "No data, path or url key found"
        )

    @pytest.mark.parametrize("key", ["data", "path", "url"])
    def test_ok(self, key):
        data = {"filename": "a", key: "v"}
        assert check_for_file_data(data) == Success(data)


class TestModels:
    def test_outcome_flags(self):
        assert Success().ok is True
        assert Success().value is None
        assert Failure("e").ok is False

    def test_outcomes_are_frozen(self):
        with pytest.raises(AttributeError):
            Success(1).value = 2

    def test_object_payload(self):
        assert ObjectPayload.from_value({"a": 1}, "params").data == {"a": 1}

    def test_object_payload_rejects_list(self):
        with pytest.raises(CliError, match="expected object, got list"):
            ObjectPayload.from_value([1], "params")

    def test_invocation_args(self):
        assert ParsedInvocation("sync").args == ()
        assert ParsedInvocation("x", params={"a": 1}).args == ({"a": 1},)
