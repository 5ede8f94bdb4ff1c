"""Deck actions: names, creation, deletion, configuration groups and stats."""

from anki_connect import api
from anki_connect._utils import acknowledge, maybe_add_field, reject_value, require_params


def deck_names():
    """List every deck name, e.g. Success(["Default"])."""
    return api.invoke("deckNames")


def deck_names_and_ids():
    """Map deck names to deck IDs, e.g. Success({"Default": 1})."""
    return api.invoke("deckNamesAndIds")


def get_decks(params):
    """Group card IDs by the deck they belong to.

    Param: ``{"cards": [1502298036657, 1502298033753]}``.
    Result: ``{"Default": [1502032366472], "Japanese::JLPT N3": [...]}``.
    """
    (cards,) = require_params(params, "get_decks", "cards")
    return api.invoke("getDecks", {"cards": cards})


def create_deck(params):
    """Create an empty deck; an existing deck with the same name is kept.

    Param: ``{"deck": "Japanese::Tokyo"}``. Result: the deck ID.
    """
    (deck,) = require_params(params, "create_deck", "deck")
    return api.invoke("createDeck", {"deck": deck})


def change_deck(params):
    """Move cards to another deck, creating it when missing.

    Param: ``{"cards": [1502098034045], "deck": "Japanese::JLPT N3"}``.
    """
    cards, deck = require_params(params, "change_deck", "cards", "deck")
    return api.invoke("changeDeck", {"cards": cards, "deck": deck})


def delete_decks(params):
    """Delete decks by name, together with every card they contain.

    Param: ``{"decks": ["Japanese::JLPT N5", "Easy Spanish"]}``.
    """
    (decks,) = require_params(params, "delete_decks", "decks")
    return api.invoke("deleteDecks", {"decks": decks, "cards_too": True})


def get_deck_config(params):
    """Return the configuration group object of a deck. Param: ``{"deck": "Default"}``."""
    (deck,) = require_params(params, "get_deck_config", "deck")
    return api.invoke("getDeckConfig", {"deck": deck})


def save_deck_config(params):
    """Save a configuration group. Param: ``{"config": {...}}`` as returned by get_deck_config."""
    (deck_config,) = require_params(params, "save_deck_config", "config")
    return acknowledge(
        api.invoke("saveDeckConfig", {"config": deck_config}),
        "Invalid configuration group ID",
    )


def set_deck_config_id(params):
    """Point decks at another configuration group.

    Param: ``{"decks": ["Default"], "config_id": 1}``.
    """
    decks, config_id = require_params(params, "set_deck_config_id", "decks", "config_id")
    return acknowledge(
        api.invoke("setDeckConfigId", {"decks": decks, "config_id": config_id}),
        "Given configuration group or any of the given decks do not exist",
    )


def clone_deck_config_id(params):
    """Create a configuration group named ``name``, cloned from ``clone_from``.

    Without ``clone_from`` the default group is cloned. Result: the new group ID.
    """
    (name,) = require_params(params, "clone_deck_config_id", "name")
    request = maybe_add_field({"name": name}, "clone_from", params.get("clone_from"))
    return reject_value(
        api.invoke("cloneDeckConfigId", request),
        False,
        "The specified group to clone from does not exist",
    )


def remove_deck_config_id(params):
    """Remove a configuration group. Param: ``{"config_id": 1502972374573}``."""
    (config_id,) = require_params(params, "remove_deck_config_id", "config_id")
    return acknowledge(
        api.invoke("removeDeckConfigId", {"config_id": config_id}),
        "Attempting to remove either the default configuration group (ID = 1) "
        "or a configuration group that does not exist",
    )


def get_deck_stats(params):
    """Return new/learn/review/total counts keyed by deck ID.

    Param: ``{"decks": ["Japanese::JLPT N5", "Easy Spanish"]}``.
    """
    (decks,) = require_params(params, "get_deck_stats", "decks")
    return api.invoke("getDeckStats", {"decks": decks})
