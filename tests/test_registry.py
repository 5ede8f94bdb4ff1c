"""Tests for the action registry."""

import pytest

from anki_connect import actions
from anki_connect.registry import (
    ACTION_TABLE,
    ACTIONS,
    DOMAINS,
    action_names,
    action_rows,
    actions_by_domain,
    get_action,
)


class TestActionRegistry:
    def test_names_are_unique(self):
        names = action_names()
        assert len(names) == len(set(names))

    def test_table_matches_tuple(self):
        assert len(ACTION_TABLE) == len(ACTIONS)

    def test_every_handler_is_callable(self):
        for action in ACTIONS:
            assert callable(action.handler), action.name

    def test_name_matches_handler(self):
        for action in ACTIONS:
            assert action.handler.__name__ == action.name

    def test_arity_is_zero_or_one(self):
        for action in ACTIONS:
            assert action.arity in (0, 1), action.name

    def test_domains_known(self):
        for action in ACTIONS:
            assert action.domain in DOMAINS, action.name

    def test_every_exported_action_registered(self):
        for name in actions.__all__:
            assert name in ACTION_TABLE, name

    def test_wire_names_unique(self):
        wire_names = [a.wire_name for a in ACTIONS if a.wire_name is not None]
        assert len(wire_names) == len(set(wire_names))

    def test_every_action_has_summary(self):
        for action in ACTIONS:
            assert action.summary, action.name

    @pytest.mark.parametrize(
        "name,arity",
        [
            ("deck_names", 0),
            ("create_deck", 1),
            ("delete_decks", 1),
            ("sync", 0),
            ("remove_empty_notes", 0),
            ("get_collection_stats_html", 1),
            ("add_notes_from_file", 1),
        ],
    )
    def test_declared_arity(self, name, arity):
        assert get_action(name).arity == arity

    def test_only_collection_stats_has_optional_params(self):
        optional = [action.name for action in ACTIONS if action.params_optional]
        assert optional == ["get_collection_stats_html"]

    def test_optional_params_accept_zero_or_one(self):
        definition = get_action("get_collection_stats_html")
        assert definition.arities == (0, 1)
        assert definition.accepts(0)
        assert definition.accepts(1)
        assert not definition.accepts(2)
        assert definition.arity_text == "0 or 1"

    def test_fixed_arity(self):
        definition = get_action("create_deck")
        assert definition.arities == (1,)
        assert not definition.accepts(0)
        assert definition.arity_text == "1"

    @pytest.mark.parametrize(
        "name,domain",
        [
            ("deck_names", "deck"),
            ("gui_browse", "graphical"),
            ("store_media_file", "media"),
            ("sync", "miscellaneous"),
            ("create_model", "model"),
            ("add_note", "note"),
            ("card_reviews", "statistic"),
            ("add_notes_from_file", "service"),
        ],
    )
    def test_domain_assignment(self, name, domain):
        assert get_action(name).domain == domain


class TestLookup:
    def test_get_action(self):
        action = get_action("create_deck")
        assert action.wire_name == "createDeck"
        assert action.domain == "deck"

    def test_get_action_unknown(self):
        with pytest.raises(KeyError, match="Unknown action"):
            get_action("definitely_not_an_action")

    def test_by_domain(self):
        names = [a.name for a in actions_by_domain("statistic")]
        assert "card_reviews" in names
        assert "create_deck" not in names

    def test_service_has_no_wire_name(self):
        assert get_action("add_notes_from_file").wire_name is None

    def test_rows(self):
        rows = action_rows("media")
        assert {row["name"] for row in rows} == {
            "store_media_file",
            "retrieve_media_file",
            "get_media_files_names",
            "get_media_dir_path",
            "delete_media_file",
        }
        assert set(rows[0]) == {"name", "wire_name", "domain", "arity", "arities", "summary"}

    def test_rows_all(self):
        assert len(action_rows()) == len(ACTIONS)
