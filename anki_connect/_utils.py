"""
Shared pure-utility functions for anki-connect.

These helpers have no network access and no side effects.
They are used across the action modules, notes_file.py and mcp_server.py.
"""

from anki_connect.exceptions import CliError
from anki_connect.models import Failure, Success


def maybe_add_field(mapping, key, value):
    """Return a copy of *mapping* with *key* set, unless *value* is None."""
    if value is None:
        return dict(mapping)
    return {**mapping, key: value}


def require_params(params, action, *keys):
    """Return the values of *keys* from *params*, in order.

    Raises CliError naming every missing key.
    """
    if not isinstance(params, dict):
        raise CliError(
            f"[ERROR] Action '{action}' expects an object of params, "
            f"got {type(params).__name__}."
        )
    missing = [key for key in keys if key not in params]
    if missing:
        raise CliError(f"[ERROR] Action '{action}' requires params: {', '.join(missing)}")
    return tuple(params[key] for key in keys)


def acknowledge(outcome, reason):
    """Map a boolean acknowledgement to an outcome.

    ``false`` becomes Failure(reason); any other successful value becomes
    Success(None). Failures pass through unchanged.
    """
    if not outcome.ok:
        return outcome
    if outcome.value is False:
        return Failure(reason)
    return Success(None)


def reject_value(outcome, rejected, reason):
    """Turn a successful *rejected* sentinel (False or None) into Failure(reason)."""
    if outcome.ok and outcome.value is rejected:
        return Failure(reason)
    return outcome


def check_for_file_data(data):
    """Check that a media file spec names a file and carries its content."""
    if not isinstance(data, dict):
        return Failure("File data must be a map")
    if "filename" not in data:
        return Failure("No filename found")
    if not any(key in data for key in ("data", "path", "url")):
        return Failure("No data, path or url key found")
    return Success(data)
