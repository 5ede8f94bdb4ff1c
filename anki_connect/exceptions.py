"""
anki-connect exception hierarchy.

All custom exceptions live here to avoid circular imports.
Remote errors reported by AnkiConnect are not exceptions: they come back
as Failure outcomes (see models.py).
"""


class CliError(Exception):
    """Exit code 1: validation, missing params, parse errors."""

    exit_code = 1


class UsageError(CliError):
    """Exit code 1: unknown action or wrong number of params."""

    exit_code = 1


class ConnectionFailed(CliError):
    """Exit code 3: AnkiConnect unreachable, timed out, or sent an unusable reply."""

    exit_code = 3


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors that callers want to handle."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
