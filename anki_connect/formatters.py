"""Output rendering for anki-connect: outcomes, usage text and the action table."""

import json
import re

from anki_connect.models import Success
from anki_connect.registry import DOMAINS, actions_by_domain

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

USAGE_TEXT = """\
Usage: anki-connect <action> [--flag=value ...] [--with_<modifier> ...]

Flag values are parsed as JSON when they can be (object keys in snake_case),
otherwise passed through as plain strings:
  anki-connect create_deck --deck="TEST DECK"
  anki-connect add_note --note='{"deck_name": "Default", "model_name": "Basic",
                                 "fields": {"Front": "hi", "Back": "hello"}}'
  anki-connect delete_decks --decks='["TEST DECK"]' --with_sync

Modifiers (run in order after a successful action):
  --with_sync             Sync the collection with AnkiWeb

Global flags:
  --format text|json      Output as readable text (default) or a JSON envelope
  --quiet, -q             Suppress warnings and modifier progress
  --verbose, -v           Enable HTTP request logging
  --version               Show version number

Environment (.env or process environment):
  ANKI_CONNECT_URL        AnkiConnect endpoint (default: http://localhost:8765)
  ANKI_CONNECT_API_KEY    Optional AnkiConnect API key
"""


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from table output.
    Preserves newlines (\\n) and tabs (\\t)."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _table(columns, rows, footer=None):
    """Build a formatted table string.
    columns: list of (name, width) tuples. Last column has no width (fills).
    rows: list of tuples matching columns.
    footer: optional footer line."""
    parts = []
    for i, (name, width) in enumerate(columns):
        if i == len(columns) - 1:
            parts.append(name)
        else:
            parts.append(f"{name:<{width}}")
    header = " ".join(parts)
    sep = "-" * max(len(header), 78)
    lines = [header, sep]
    for row in rows:
        parts = []
        for i, val in enumerate(row):
            safe = _sanitize_str(val) if isinstance(val, str) else str(val)
            if i == len(columns) - 1:
                parts.append(safe)
            else:
                parts.append(f"{safe:<{columns[i][1]}}")
        lines.append(" ".join(parts))
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


def render_value(value):
    """Render a decoded JSON value for humans. Strings are shown as-is."""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_outcome(outcome):
    """Text rendering: ``Done.``, the value, or ``Error: <reason>``."""
    if isinstance(outcome, Success):
        if outcome.value is None:
            return "Done."
        return render_value(outcome.value)
    return f"Error: {render_value(outcome.reason)}"


def outcome_payload(outcome):
    if outcome.ok:
        return {"ok": True, "result": outcome.value}
    return {"ok": False, "error": outcome.reason}


def output_outcome(outcome, fmt="text"):
    """Print an outcome to stdout in the requested format."""
    if fmt == "json":
        print(json.dumps(outcome_payload(outcome), ensure_ascii=False))
    else:
        print(format_outcome(outcome))


# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------


def _args_label(action):
    if not action.arity:
        return "-"
    return "[params]" if action.params_optional else "params"


def format_actions_table():
    """Table of every registered action, grouped by domain."""
    rows = []
    for domain in DOMAINS:
        for action in actions_by_domain(domain):
            rows.append(
                (
                    _trunc(action.name, 32),
                    domain,
                    _args_label(action),
                    action.summary,
                )
            )
    return _table(
        [("Action", 32), ("Domain", 13), ("Args", 8), ("Description", 0)],
        rows,
        footer=f"Total: {len(rows)} actions",
    )


def format_help():
    return USAGE_TEXT + "\nActions:\n" + format_actions_table()
