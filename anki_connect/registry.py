"""Action registry: the single source of truth for what the CLI can dispatch.

Adding an action means writing its function in anki_connect.actions and
appending one ActionDefinition to ACTIONS. ``arity`` is the number of
positional arguments the handler takes: 0, or 1 for the params dict.
With ``params_optional`` the handler also accepts no arguments at all.
"""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from anki_connect import actions
from anki_connect.notes_file import add_notes_from_file
from anki_connect.types import ActionRow


@dataclass(frozen=True)
class ActionDefinition:
    """One dispatchable action."""

    name: str
    handler: Callable
    arity: int
    domain: str
    wire_name: str | None  # None for local services built from other actions
    summary: str
    params_optional: bool = False

    @property
    def arities(self) -> tuple[int, ...]:
        if self.params_optional:
            return tuple(range(self.arity + 1))
        return (self.arity,)

    def accepts(self, count: int) -> bool:
        return count in self.arities

    @property
    def arity_text(self) -> str:
        return " or ".join(str(n) for n in self.arities)


DOMAINS: tuple[str, ...] = (
    "deck",
    "graphical",
    "media",
    "miscellaneous",
    "model",
    "note",
    "statistic",
    "service",
)


def _define(domain, handler, arity, wire_name, summary, params_optional=False):
    return ActionDefinition(
        handler.__name__, handler, arity, domain, wire_name, summary, params_optional
    )


_deck = partial(_define, "deck")
_gui = partial(_define, "graphical")
_media = partial(_define, "media")
_misc = partial(_define, "miscellaneous")
_model = partial(_define, "model")
_note = partial(_define, "note")
_stat = partial(_define, "statistic")


ACTIONS: tuple[ActionDefinition, ...] = (
    # -- deck --
    _deck(actions.deck_names, 0, "deckNames", "List deck names"),
    _deck(actions.deck_names_and_ids, 0, "deckNamesAndIds", "Map deck names to IDs"),
    _deck(actions.get_decks, 1, "getDecks", "Group --cards by deck"),
    _deck(actions.create_deck, 1, "createDeck", "Create --deck"),
    _deck(actions.change_deck, 1, "changeDeck", "Move --cards to --deck"),
    _deck(actions.delete_decks, 1, "deleteDecks", "Delete --decks and their cards"),
    _deck(actions.get_deck_config, 1, "getDeckConfig", "Show the config group of --deck"),
    _deck(actions.save_deck_config, 1, "saveDeckConfig", "Save a --config group"),
    _deck(actions.set_deck_config_id, 1, "setDeckConfigId", "Assign --config_id to --decks"),
    _deck(
        actions.clone_deck_config_id,
        1,
        "cloneDeckConfigId",
        "Clone a config group as --name (--clone_from)",
    ),
    _deck(actions.remove_deck_config_id, 1, "removeDeckConfigId", "Remove group --config_id"),
    _deck(actions.get_deck_stats, 1, "getDeckStats", "Card counts for --decks"),
    # -- graphical --
    _gui(actions.gui_browse, 1, "guiBrowse", "Open the browser on --query"),
    _gui(actions.gui_selected_notes, 0, "guiSelectedNotes", "Notes selected in the browser"),
    _gui(actions.gui_add_cards, 1, "guiAddCards", "Open Add Cards with --note"),
    _gui(actions.gui_edit_note, 1, "guiEditNote", "Open the editor on --note"),
    _gui(actions.gui_current_card, 0, "guiCurrentCard", "Card under review"),
    _gui(actions.gui_start_card_timer, 0, "guiStartCardTimer", "Restart the review timer"),
    _gui(actions.gui_show_question, 0, "guiShowQuestion", "Show the question side"),
    _gui(actions.gui_show_answer, 0, "guiShowAnswer", "Show the answer side"),
    _gui(actions.gui_answer_card, 1, "guiAnswerCard", "Answer with --ease 1-4"),
    _gui(actions.gui_deck_overview, 1, "guiDeckOverview", "Open the overview of --name"),
    _gui(actions.gui_deck_browser, 0, "guiDeckBrowser", "Open the deck browser"),
    _gui(actions.gui_deck_review, 1, "guiDeckReview", "Start reviewing --name"),
    _gui(actions.gui_exit_anki, 0, "guiExitAnki", "Close Anki"),
    _gui(actions.gui_check_database, 0, "guiCheckDatabase", "Run Check Database"),
    # -- media --
    _media(actions.store_media_file, 1, "storeMediaFile", "Store --filename from data/path/url"),
    _media(actions.retrieve_media_file, 1, "retrieveMediaFile", "Base64 content of --filename"),
    _media(actions.get_media_files_names, 1, "getMediaFilesNames", "Names matching --pattern"),
    _media(actions.get_media_dir_path, 0, "getMediaDirPath", "Path of collection.media"),
    _media(actions.delete_media_file, 1, "deleteMediaFile", "Delete --filename"),
    # -- miscellaneous --
    _misc(actions.request_permission, 0, "requestPermission", "Ask for API permission"),
    _misc(actions.version, 0, "version", "AnkiConnect API version"),
    _misc(actions.api_reflect, 1, "apiReflect", "Describe --scopes (and --actions)"),
    _misc(actions.sync, 0, "sync", "Sync with AnkiWeb"),
    _misc(actions.get_profiles, 0, "getProfiles", "List profiles"),
    _misc(actions.load_profile, 1, "loadProfile", "Switch to profile --name"),
    _misc(actions.multi, 1, "multi", "Run several --actions at once"),
    _misc(actions.export_package, 1, "exportPackage", "Export --deck to --path (.apkg)"),
    _misc(actions.import_package, 1, "importPackage", "Import the .apkg at --path"),
    _misc(actions.reload_collection, 0, "reloadCollection", "Reload from the database"),
    # -- model --
    _model(actions.model_names, 0, "modelNames", "List model names"),
    _model(actions.model_names_and_ids, 0, "modelNamesAndIds", "Map model names to IDs"),
    _model(actions.model_field_names, 1, "modelFieldNames", "Fields of --model_name"),
    _model(
        actions.model_field_descriptions,
        1,
        "modelFieldDescriptions",
        "Field descriptions of --model_name",
    ),
    _model(actions.model_field_fonts, 1, "modelFieldFonts", "Field fonts of --model_name"),
    _model(
        actions.model_fields_on_templates,
        1,
        "modelFieldsOnTemplates",
        "Fields used per template of --model_name",
    ),
    _model(actions.create_model, 1, "createModel", "Create a model"),
    _model(actions.model_templates, 1, "modelTemplates", "Templates of --model_name"),
    _model(actions.model_styling, 1, "modelStyling", "CSS of --model_name"),
    _model(actions.update_model_templates, 1, "updateModelTemplates", "Replace templates"),
    _model(actions.update_model_styling, 1, "updateModelStyling", "Replace CSS"),
    _model(
        actions.find_and_replace_in_models,
        1,
        "findAndReplaceInModels",
        "Find/replace in templates and CSS",
    ),
    _model(actions.model_template_rename, 1, "modelTemplateRename", "Rename a template"),
    _model(actions.model_template_reposition, 1, "modelTemplateReposition", "Move a template"),
    _model(actions.model_template_add, 1, "modelTemplateAdd", "Add a template"),
    _model(actions.model_template_remove, 1, "modelTemplateRemove", "Remove a template"),
    _model(actions.model_field_rename, 1, "modelFieldRename", "Rename a field"),
    _model(actions.model_field_reposition, 1, "modelFieldReposition", "Move a field"),
    _model(actions.model_field_add, 1, "modelFieldAdd", "Add a field"),
    _model(actions.model_field_remove, 1, "modelFieldRemove", "Remove a field"),
    _model(actions.model_field_set_font, 1, "modelFieldSetFont", "Set a field's font"),
    _model(
        actions.model_field_set_font_size, 1, "modelFieldSetFontSize", "Set a field's font size"
    ),
    _model(
        actions.model_field_set_description,
        1,
        "modelFieldSetDescription",
        "Set a field's description",
    ),
    # -- note --
    _note(actions.add_note, 1, "addNote", "Create --note"),
    _note(actions.add_notes, 1, "addNotes", "Create --notes"),
    _note(actions.can_add_notes, 1, "canAddNotes", "Check whether --notes can be added"),
    _note(actions.update_note_fields, 1, "updateNoteFields", "Update fields of --note"),
    _note(actions.update_note, 1, "updateNote", "Update fields and tags of --note"),
    _note(actions.update_note_tags, 1, "updateNoteTags", "Replace tags of --note"),
    _note(actions.get_note_tags, 1, "getNoteTags", "Tags of --note"),
    _note(actions.add_tags, 1, "addTags", "Add --tags to --notes"),
    _note(actions.remove_tags, 1, "removeTags", "Remove --tags from --notes"),
    _note(actions.get_tags, 0, "getTags", "List all tags"),
    _note(actions.clear_unused_tags, 0, "clearUnusedTags", "Drop tags no note uses"),
    _note(actions.replace_tags, 1, "replaceTags", "Replace a tag on --notes"),
    _note(
        actions.replace_tags_in_all_notes,
        1,
        "replaceTagsInAllNotes",
        "Replace a tag everywhere",
    ),
    _note(actions.find_notes, 1, "findNotes", "Note IDs matching --query"),
    _note(actions.notes_info, 1, "notesInfo", "Details of --notes"),
    _note(actions.delete_notes, 1, "deleteNotes", "Delete --notes"),
    _note(actions.remove_empty_notes, 0, "removeEmptyNotes", "Delete notes without cards"),
    # -- statistic --
    _stat(
        actions.get_num_cards_reviewed_today,
        0,
        "getNumCardsReviewedToday",
        "Reviews done today",
    ),
    _stat(
        actions.get_num_cards_reviewed_by_day,
        0,
        "getNumCardsReviewedByDay",
        "Reviews per day",
    ),
    _stat(
        actions.get_collection_stats_html,
        1,
        "getCollectionStatsHTML",
        "Stats report (--whole_collection, default true)",
        params_optional=True,
    ),
    _stat(actions.card_reviews, 1, "cardReviews", "Reviews of --deck since --start_id"),
    _stat(actions.get_reviews_of_cards, 1, "getReviewsOfCards", "Reviews of --cards"),
    _stat(actions.get_latest_review_id, 1, "getLatestReviewID", "Newest review ID of --deck"),
    _stat(actions.insert_reviews, 1, "insertReviews", "Insert --reviews"),
    # -- service --
    ActionDefinition(
        "add_notes_from_file",
        add_notes_from_file,
        1,
        "service",
        None,
        "Add notes from --file to --deck",
    ),
)

ACTION_TABLE: dict[str, ActionDefinition] = {action.name: action for action in ACTIONS}


def get_action(name: str) -> ActionDefinition:
    """Return an action by name. Raises KeyError if not found."""
    try:
        return ACTION_TABLE[name]
    except KeyError:
        raise KeyError(f"Unknown action: {name!r}") from None


def action_names() -> tuple[str, ...]:
    """Return all action names in registration order."""
    return tuple(action.name for action in ACTIONS)


def actions_by_domain(domain: str) -> tuple[ActionDefinition, ...]:
    """Return the actions of one domain, in registration order."""
    return tuple(action for action in ACTIONS if action.domain == domain)


def action_rows(domain=None):
    """Return ActionRow dicts for listing, optionally limited to one domain."""
    selected = ACTIONS if domain is None else actions_by_domain(domain)
    rows: list[ActionRow] = [
        {
            "name": action.name,
            "wire_name": action.wire_name,
            "domain": action.domain,
            "arity": action.arity,
            "arities": list(action.arities),
            "summary": action.summary,
        }
        for action in selected
    ]
    return rows
