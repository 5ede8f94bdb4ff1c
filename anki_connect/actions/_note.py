"""Note actions: creation, updates, tags and search.

Note payloads follow ``anki_connect.types.NoteSpec``. Field names inside
``fields`` (``Front``, ``Back``...) are sent verbatim.
"""

from anki_connect import api
from anki_connect._utils import maybe_add_field, require_params

_OPTIONAL_NOTE_KEYS = ("options", "tags", "audio", "picture", "video")


def add_note(params):
    """Create a note and return its ID.

    Param::

        {"note": {"deck_name": "Default", "model_name": "Basic",
                  "fields": {"Front": "front content", "Back": "back content"},
                  "options": {"allow_duplicate": False, "duplicate_scope": "deck"},
                  "tags": ["yomichan"]}}

    ``audio``, ``video`` and ``picture`` take lists of FileSpec dicts.
    """
    (note,) = require_params(params, "add_note", "note")
    deck_name, model_name, fields = require_params(
        note, "add_note", "deck_name", "model_name", "fields"
    )
    new_note = {"deck_name": deck_name, "model_name": model_name, "fields": fields}
    for key in _OPTIONAL_NOTE_KEYS:
        new_note = maybe_add_field(new_note, key, note.get(key))
    return api.invoke("addNote", {"note": new_note})


def add_notes(params):
    """Create several notes; the result holds one ID (or null on failure) per note."""
    (notes,) = require_params(params, "add_notes", "notes")
    return api.invoke("addNotes", {"notes": notes})


def can_add_notes(params):
    """Check, per note, whether add_notes would accept it (no duplicates, valid model)."""
    (notes,) = require_params(params, "can_add_notes", "notes")
    return api.invoke("canAddNotes", {"notes": notes})


def update_note_fields(params):
    """Update the fields of ``note`` (which carries ``id`` and ``fields``).

    The note must not be open in the browser while it is being updated.
    """
    (note,) = require_params(params, "update_note_fields", "note")
    return api.invoke("updateNoteFields", {"note": note})


def update_note(params):
    """Update fields and/or tags of an existing note (``note`` carries ``id``)."""
    (note,) = require_params(params, "update_note", "note")
    return api.invoke("updateNote", {"note": note})


def update_note_tags(params):
    """Replace a note's tags. Param: ``{"note": 1483959289817, "tags": ["european-languages"]}``."""
    note, tags = require_params(params, "update_note_tags", "note", "tags")
    return api.invoke("updateNoteTags", {"note": note, "tags": tags})


def get_note_tags(params):
    (note,) = require_params(params, "get_note_tags", "note")
    return api.invoke("getNoteTags", {"note": note})


def add_tags(params):
    """Add space-separated ``tags`` to the note IDs in ``notes``."""
    notes, tags = require_params(params, "add_tags", "notes", "tags")
    return api.invoke("addTags", {"notes": notes, "tags": tags})


def remove_tags(params):
    """Remove space-separated ``tags`` from the note IDs in ``notes``."""
    notes, tags = require_params(params, "remove_tags", "notes", "tags")
    return api.invoke("removeTags", {"notes": notes, "tags": tags})


def get_tags():
    return api.invoke("getTags")


def clear_unused_tags():
    return api.invoke("clearUnusedTags")


def replace_tags(params):
    notes, tag_to_replace, replace_with_tag = require_params(
        params, "replace_tags", "notes", "tag_to_replace", "replace_with_tag"
    )
    return api.invoke(
        "replaceTags",
        {
            "notes": notes,
            "tag_to_replace": tag_to_replace,
            "replace_with_tag": replace_with_tag,
        },
    )


def replace_tags_in_all_notes(params):
    tag_to_replace, replace_with_tag = require_params(
        params, "replace_tags_in_all_notes", "tag_to_replace", "replace_with_tag"
    )
    return api.invoke(
        "replaceTagsInAllNotes",
        {"tag_to_replace": tag_to_replace, "replace_with_tag": replace_with_tag},
    )


def find_notes(params):
    """Return the IDs of notes matching an Anki search ``query`` such as ``deck:current``."""
    (query,) = require_params(params, "find_notes", "query")
    return api.invoke("findNotes", {"query": query})


def notes_info(params):
    """Return model, tags and field contents for each note ID in ``notes``."""
    (notes,) = require_params(params, "notes_info", "notes")
    return api.invoke("notesInfo", {"notes": notes})


def delete_notes(params):
    """Delete notes by ID, along with all their cards."""
    (notes,) = require_params(params, "delete_notes", "notes")
    return api.invoke("deleteNotes", {"notes": notes})


def remove_empty_notes():
    """Remove every note that has no cards."""
    return api.invoke("removeEmptyNotes")
