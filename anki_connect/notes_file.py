"""
Bulk note import from a plain-text word list.

Each non-blank line is matched against a regex whose first group is the
note's Back and second group its Front. The default expects::

    - subsidiary - filia
    - pageant - widowisko
"""

import re
import sys

from anki_connect import config
from anki_connect._utils import maybe_add_field, require_params
from anki_connect.actions._note import add_notes
from anki_connect.exceptions import CliError
from anki_connect.models import Failure

DEFAULT_MODEL_NAME = "Basic"
DEFAULT_REGEX = r"-\s+(.*)\s+-\s+(.*)"


def _compile(pattern):
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        raise CliError(f"[ERROR] Invalid regex '{pattern}': {e}") from e
    if compiled.groups < 2:
        raise CliError(
            f"[ERROR] Regex '{pattern}' must capture two groups (back, front), "
            f"found {compiled.groups}."
        )
    return compiled


def parse_lines(lines, compiled):
    """Return ``[(back, front), ...]`` for every non-blank line.

    Returns a Failure naming the first line that does not match.
    """
    notes = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        match = compiled.search(line)
        if match is None:
            return Failure(f"Line {lineno} does not match the note pattern: {line!r}")
        notes.append((match.group(1), match.group(2)))
    return notes


def find_duplicates(notes):
    """Return ``[(back, [front, ...]), ...]`` for every Back used more than once."""
    grouped = {}
    for back, front in notes:
        grouped.setdefault(back, []).append(front)
    return [(back, fronts) for back, fronts in grouped.items() if len(fronts) > 1]


def _report_stream():
    """stdout, or stderr when stdout carries the JSON result."""
    return sys.stderr if config.RUNTIME_FORMAT == "json" else sys.stdout


def add_notes_from_file(params):
    """Upload notes from a text file to a deck.

    Params:
        file: path to the word list.
        deck: target deck name.
        model: note type, default ``Basic``.
        regex: line pattern with two groups (back, front).
        options: NoteOptions applied to every note.

    Duplicated Back values are printed and nothing is uploaded.
    """
    filename, deck = require_params(params, "add_notes_from_file", "file", "deck")
    model = params.get("model") or DEFAULT_MODEL_NAME
    compiled = _compile(params.get("regex") or DEFAULT_REGEX)

    try:
        with open(filename, encoding="utf-8") as f:
            parsed = parse_lines(f, compiled)
    except OSError as e:
        raise CliError(f"[ERROR] Cannot read notes file '{filename}': {e.strerror}") from e
    if isinstance(parsed, Failure):
        return parsed

    duplicates = find_duplicates(parsed)
    if duplicates:
        for back, fronts in duplicates:
            print(f"Duplicated notes: {back} -> {fronts!r}", file=_report_stream())
        return Failure("Duplicated notes found")

    notes = [
        maybe_add_field(
            {"deck_name": deck, "model_name": model, "fields": {"Back": back, "Front": front}},
            "options",
            params.get("options"),
        )
        for back, front in parsed
    ]
    return add_notes({"notes": notes})
