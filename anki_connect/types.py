"""Typed payload definitions for AnkiConnect actions.

These TypedDicts document the snake_case shapes that action functions accept.
They are optional; runtime behavior is unchanged (plain dicts).
"""

from __future__ import annotations

from typing import Any, TypedDict

# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------


class FileSpec(TypedDict, total=False):
    """A media file: ``filename`` plus exactly one of ``data``, ``path`` or ``url``.

    ``data`` is base64 content, ``path`` an absolute local path, ``url`` a
    location AnkiConnect downloads from. Files attached to notes also carry
    ``fields``, the note fields the media tag is appended to.
    """

    filename: str
    data: str
    path: str
    url: str
    skip_hash: str
    fields: list[str]
    delete_existing: bool


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


class DuplicateScopeOptions(TypedDict, total=False):
    deck_name: str | None
    check_children: bool
    check_all_models: bool


class NoteOptions(TypedDict, total=False):
    """``duplicate_scope`` of ``"deck"`` checks only the target deck."""

    allow_duplicate: bool
    duplicate_scope: str
    duplicate_scope_options: DuplicateScopeOptions


class _NoteRequired(TypedDict):
    deck_name: str
    model_name: str
    fields: dict[str, str]


class NoteSpec(_NoteRequired, total=False):
    """Note accepted by add_note, add_notes and can_add_notes.

    ``fields`` keys are the model's field names (``Front``, ``Back``...) and
    are sent verbatim.
    """

    options: NoteOptions
    tags: list[str]
    audio: list[FileSpec]
    video: list[FileSpec]
    picture: list[FileSpec]


# ---------------------------------------------------------------------------
# Registry rows
# ---------------------------------------------------------------------------


class ActionRow(TypedDict):
    """One row of ``list_actions`` output."""

    name: str
    wire_name: str | None
    domain: str
    arity: int
    arities: list[int]
    summary: str


class ToolResult(TypedDict, total=False):
    ok: bool
    result: Any
    error: Any
    type: str
