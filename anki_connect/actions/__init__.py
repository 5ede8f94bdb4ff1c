"""AnkiConnect action functions, grouped by domain.

Re-exports every action so consumers can do:
    from anki_connect.actions import create_deck

Each function takes nothing or a single snake_case params dict and returns
a Success or Failure outcome.
"""

from anki_connect.actions._deck import (
    change_deck,
    clone_deck_config_id,
    create_deck,
    deck_names,
    deck_names_and_ids,
    delete_decks,
    get_deck_config,
    get_deck_stats,
    get_decks,
    remove_deck_config_id,
    save_deck_config,
    set_deck_config_id,
)
from anki_connect.actions._graphical import (
    gui_add_cards,
    gui_answer_card,
    gui_browse,
    gui_check_database,
    gui_current_card,
    gui_deck_browser,
    gui_deck_overview,
    gui_deck_review,
    gui_edit_note,
    gui_exit_anki,
    gui_selected_notes,
    gui_show_answer,
    gui_show_question,
    gui_start_card_timer,
)
from anki_connect.actions._media import (
    delete_media_file,
    get_media_dir_path,
    get_media_files_names,
    retrieve_media_file,
    store_media_file,
)
from anki_connect.actions._misc import (
    api_reflect,
    export_package,
    get_profiles,
    import_package,
    load_profile,
    multi,
    reload_collection,
    request_permission,
    sync,
    version,
)
from anki_connect.actions._model import (
    create_model,
    find_and_replace_in_models,
    model_field_add,
    model_field_descriptions,
    model_field_fonts,
    model_field_names,
    model_field_remove,
    model_field_rename,
    model_field_reposition,
    model_field_set_description,
    model_field_set_font,
    model_field_set_font_size,
    model_fields_on_templates,
    model_names,
    model_names_and_ids,
    model_styling,
    model_template_add,
    model_template_remove,
    model_template_rename,
    model_template_reposition,
    model_templates,
    update_model_styling,
    update_model_templates,
)
from anki_connect.actions._note import (
    add_note,
    add_notes,
    add_tags,
    can_add_notes,
    clear_unused_tags,
    delete_notes,
    find_notes,
    get_note_tags,
    get_tags,
    notes_info,
    remove_empty_notes,
    remove_tags,
    replace_tags,
    replace_tags_in_all_notes,
    update_note,
    update_note_fields,
    update_note_tags,
)
from anki_connect.actions._statistic import (
    card_reviews,
    get_collection_stats_html,
    get_latest_review_id,
    get_num_cards_reviewed_by_day,
    get_num_cards_reviewed_today,
    get_reviews_of_cards,
    insert_reviews,
)

__all__ = [
    "add_note",
    "add_notes",
    "add_tags",
    "api_reflect",
    "can_add_notes",
    "card_reviews",
    "change_deck",
    "clear_unused_tags",
    "clone_deck_config_id",
    "create_deck",
    "create_model",
    "deck_names",
    "deck_names_and_ids",
    "delete_decks",
    "delete_media_file",
    "delete_notes",
    "export_package",
    "find_and_replace_in_models",
    "find_notes",
    "get_collection_stats_html",
    "get_deck_config",
    "get_deck_stats",
    "get_decks",
    "get_latest_review_id",
    "get_media_dir_path",
    "get_media_files_names",
    "get_note_tags",
    "get_num_cards_reviewed_by_day",
    "get_num_cards_reviewed_today",
    "get_profiles",
    "get_reviews_of_cards",
    "get_tags",
    "gui_add_cards",
    "gui_answer_card",
    "gui_browse",
    "gui_check_database",
    "gui_current_card",
    "gui_deck_browser",
    "gui_deck_overview",
    "gui_deck_review",
    "gui_edit_note",
    "gui_exit_anki",
    "gui_selected_notes",
    "gui_show_answer",
    "gui_show_question",
    "gui_start_card_timer",
    "import_package",
    "insert_reviews",
    "load_profile",
    "model_field_add",
    "model_field_descriptions",
    "model_field_fonts",
    "model_field_names",
    "model_field_remove",
    "model_field_rename",
    "model_field_reposition",
    "model_field_set_description",
    "model_field_set_font",
    "model_field_set_font_size",
    "model_fields_on_templates",
    "model_names",
    "model_names_and_ids",
    "model_styling",
    "model_template_add",
    "model_template_remove",
    "model_template_rename",
    "model_template_reposition",
    "model_templates",
    "multi",
    "notes_info",
    "reload_collection",
    "remove_deck_config_id",
    "remove_empty_notes",
    "remove_tags",
    "replace_tags",
    "replace_tags_in_all_notes",
    "request_permission",
    "retrieve_media_file",
    "save_deck_config",
    "set_deck_config_id",
    "store_media_file",
    "sync",
    "update_model_styling",
    "update_model_templates",
    "update_note",
    "update_note_fields",
    "update_note_tags",
    "version",
]
