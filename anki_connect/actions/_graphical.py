"""Graphical actions: drive Anki's browser, editor and reviewer windows."""

from anki_connect import api
from anki_connect._utils import acknowledge, maybe_add_field, reject_value, require_params

_NOT_REVIEWING = "Not in review mode"


def gui_browse(params):
    """Open the card browser on a search query and return the matching card IDs.

    Param: ``{"query": "deck:current"}``, optionally ``reorder_cards``
    (``{"order": "ascending", "column_id": "noteCrt"}``).
    """
    (query,) = require_params(params, "gui_browse", "query")
    request = maybe_add_field({"query": query}, "reorder_cards", params.get("reorder_cards"))
    return api.invoke("guiBrowse", request)


def gui_selected_notes():
    return api.invoke("guiSelectedNotes")


def gui_add_cards(params):
    """Open the Add Cards dialog pre-filled with ``note``; returns the note ID once added."""
    (note,) = require_params(params, "gui_add_cards", "note")
    return api.invoke("guiAddCards", {"note": note})


def gui_edit_note(params):
    """Open the Edit dialog for the note ID given as ``note``."""
    (note,) = require_params(params, "gui_edit_note", "note")
    return api.invoke("guiEditNote", {"note": note})


def gui_current_card():
    """Describe the card under review; Failure when the reviewer is not open."""
    return reject_value(api.invoke("guiCurrentCard"), None, _NOT_REVIEWING)


def gui_start_card_timer():
    return api.invoke("guiStartCardTimer")


def gui_show_question():
    return acknowledge(api.invoke("guiShowQuestion"), _NOT_REVIEWING)


def gui_show_answer():
    return acknowledge(api.invoke("guiShowAnswer"), _NOT_REVIEWING)


def gui_answer_card(params):
    """Answer the current card with ``ease`` (1-4). Show the answer first."""
    (ease,) = require_params(params, "gui_answer_card", "ease")
    return acknowledge(
        api.invoke("guiAnswerCard", {"ease": ease}),
        "Failed answering the current card",
    )


def gui_deck_overview(params):
    (name,) = require_params(params, "gui_deck_overview", "name")
    return acknowledge(
        api.invoke("guiDeckOverview", {"name": name}),
        "Failed opening the deck overview",
    )


def gui_deck_browser():
    return api.invoke("guiDeckBrowser")


def gui_deck_review(params):
    (name,) = require_params(params, "gui_deck_review", "name")
    return acknowledge(
        api.invoke("guiDeckReview", {"name": name}),
        "Failed opening the deck review",
    )


def gui_exit_anki():
    """Schedule a clean shutdown of Anki. Returns immediately."""
    return api.invoke("guiExitAnki")


def gui_check_database():
    return api.invoke("guiCheckDatabase")
