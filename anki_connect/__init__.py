"""anki-connect: typed client and CLI for the AnkiConnect add-on's JSON API."""

from anki_connect import actions
from anki_connect.api import invoke
from anki_connect.config import VERSION
from anki_connect.exceptions import CliError, ConnectionFailed, UsageError
from anki_connect.models import Failure, Outcome, Success
from anki_connect.notes_file import add_notes_from_file
from anki_connect.registry import ACTIONS, ActionDefinition, get_action
from anki_connect.types import FileSpec, NoteOptions, NoteSpec

__all__ = [
    "ACTIONS",
    "VERSION",
    "ActionDefinition",
    "CliError",
    "ConnectionFailed",
    "Failure",
    "FileSpec",
    "NoteOptions",
    "NoteSpec",
    "Outcome",
    "Success",
    "UsageError",
    "actions",
    "add_notes_from_file",
    "get_action",
    "invoke",
]
