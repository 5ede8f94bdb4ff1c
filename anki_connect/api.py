"""
HTTP request layer and response envelope handling for anki-connect.
"""

import json
import re
import sys
import time
import urllib.error
import urllib.request

from anki_connect import config
from anki_connect.casing import to_wire
from anki_connect.exceptions import CliError, ConnectionFailed, HTTPError
from anki_connect.models import Failure, Success

# AnkiConnect answers with text/json on older releases.
_JSON_CONTENT_TYPES = ("application/json", "text/json")


# ---------------------------------------------------------------------------
# Logging and error helpers
# ---------------------------------------------------------------------------


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not config.HTTP_LOG_ENABLED:
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _error_envelope(message, status=None, action=None, detail=None):
    """Build a consistent CLI-safe transport error message."""
    meta = []
    if status is not None:
        meta.append(f"status={status}")
    if action:
        meta.append(f"action={action}")
    suffix = f" ({', '.join(meta)})" if meta else ""
    body = f"[ERROR] {message}{suffix}"
    if detail:
        body += f"\n{detail}"
    return body


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _http_request(url, data, headers=None, method="POST", action=None):
    """Make an HTTP request and return the decoded JSON body.

    Raises HTTPError for HTTP status errors (caller decides the message),
    ConnectionFailed for network, timeout and parse errors, and CliError when
    *data* is not strict JSON (NaN, Infinity).
    """
    try:
        body = json.dumps(data, allow_nan=False).encode("utf-8")
    except ValueError as e:
        raise CliError(f"[ERROR] Request is not valid JSON: {e}") from e
    timeout = max(1, config.HTTP_TIMEOUT_SECONDS)
    req = urllib.request.Request(url, data=body, headers=headers or {}, method=method)
    start = time.perf_counter()
    _log_http_event(
        phase="request",
        method=method,
        url=url,
        action=action,
        bytes=len(body),
        timeout_seconds=timeout,
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            content_type = resp.headers.get("Content-Type", "")
            raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
            if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
                raise ConnectionFailed(
                    _error_envelope(
                        f"Response too large (>{config.HTTP_MAX_RESPONSE_BYTES} bytes).",
                        action=action,
                    )
                )
            _log_http_event(
                phase="response",
                method=method,
                url=url,
                action=action,
                status=getattr(resp, "status", 200),
                content_type=content_type,
                bytes=len(raw),
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
            )
    except urllib.error.HTTPError as e:
        error_body = (
            e.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
            if e.fp
            else ""
        )
        _log_http_event(
            phase="response",
            method=method,
            url=url,
            action=action,
            status=e.code,
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except TimeoutError as e:
        _log_http_event(phase="network_error", method=method, url=url, error="timeout")
        raise ConnectionFailed(
            _error_envelope(
                f"Request timed out after {timeout} seconds. Is Anki running?",
                action=action,
            )
        ) from e
    except urllib.error.URLError as e:
        _log_http_event(
            phase="network_error", method=method, url=url, error=f"url_error: {e.reason}"
        )
        raise ConnectionFailed(
            _error_envelope(
                f"Connection to {url} failed: {e.reason}. "
                "Is Anki running with the AnkiConnect add-on installed?",
                action=action,
            )
        ) from e
    except OSError as e:
        # Connection reset or dropped mid-response.
        _log_http_event(phase="network_error", method=method, url=url, error=str(e))
        raise ConnectionFailed(
            _error_envelope(f"Connection to {url} failed: {e}", action=action)
        ) from e

    try:
        return json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        if content_type and not any(t in content_type.lower() for t in _JSON_CONTENT_TYPES):
            raise ConnectionFailed(
                _error_envelope(
                    f"Unexpected Content-Type from server ({content_type}).",
                    action=action,
                )
            ) from None
        raise ConnectionFailed(
            _error_envelope("Unexpected response from AnkiConnect (not valid JSON).", action=action)
        ) from None


# ---------------------------------------------------------------------------
# Envelope helpers
# ---------------------------------------------------------------------------


def build_payload(action, params=None):
    """Build the request body for one AnkiConnect action."""
    payload = {
        "action": action,
        "version": config.API_VERSION,
        "params": to_wire(params or {}),
    }
    if config.API_KEY:
        payload["key"] = config.API_KEY
    return payload


def unwrap_envelope(body, action):
    """Map a ``{result, error}`` response body to Success or Failure."""
    if not isinstance(body, dict) or not ("result" in body or "error" in body):
        raise ConnectionFailed(
            _error_envelope(
                "Unexpected response shape: expected an object with 'result' and 'error', "
                f"got {type(body).__name__}.",
                action=action,
            )
        )
    if body.get("error") is not None:
        return Failure(body["error"])
    return Success(body.get("result"))


def _connection_failure(message):
    return Failure(message.removeprefix("[ERROR] "), kind="connection")


def invoke(action, params=None):
    """POST one action to AnkiConnect and return its Outcome.

    ``action`` is the wire name (``deckNames``); ``params`` uses snake_case
    keys and is converted to camelCase here. Transport errors come back as
    ``Failure(reason, kind="connection")``.
    """
    if not isinstance(action, str) or not action:
        raise CliError("[ERROR] Action name must be a non-empty string.")
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    try:
        body = _http_request(config.BASE_URL, build_payload(action, params), headers, action=action)
        return unwrap_envelope(body, action)
    except HTTPError as e:
        return _connection_failure(
            _error_envelope(
                f"HTTP {e.code}: {e.reason}",
                status=e.code,
                action=action,
                detail=_sanitize_error(e.body),
            )
        )
    except ConnectionFailed as e:
        return _connection_failure(str(e))
