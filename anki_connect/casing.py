"""Key-casing transcoder between snake_case params and AnkiConnect's camelCase.

Encoding (snake -> camel) walks nested dicts and lists and rewrites dict keys
only. Decoding (camel -> snake) is a per-key transform plugged into JSON
decoding as the object hook, so the parser supplies the recursion.

    >>> to_wire_key("deck_name")
    'deckName'
    >>> to_wire_key("start_id")
    'startID'
    >>> from_wire_key("myVariableName")
    'my_variable_name'
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

# Applied after the generic conversion. Extend when AnkiConnect uses an
# acronym spelling the generic algorithm cannot produce.
KEY_OVERRIDES: dict[str, str] = {
    "startId": "startID",
}

# A lowercase letter or digit followed by an uppercase letter, never at index 0.
_BOUNDARY_RE = re.compile(r"(?<!^)([a-z\d])([A-Z])")


def to_wire_key(key: Any) -> Any:
    """Convert one snake_case key to camelCase. Non-string keys pass through."""
    if not isinstance(key, str):
        return key
    first, *rest = key.split("_")
    camel = first + "".join(word[:1].upper() + word[1:] for word in rest)
    return KEY_OVERRIDES.get(camel, camel)


def to_wire(data: Any) -> Any:
    """Recursively convert dict keys to camelCase. Values are never touched."""
    if isinstance(data, Mapping):
        return {to_wire_key(key): to_wire(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_wire(item) for item in data]
    return data


def from_wire_key(name: str) -> str:
    """Convert one camelCase key to snake_case, keeping the first character's case."""
    if not name:
        return name
    split = _BOUNDARY_RE.sub(r"\1_\2", name)
    return split[0] + split[1:].lower()


def _decode_pairs(pairs):
    return {from_wire_key(key): value for key, value in pairs}


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def loads(text: str) -> Any:
    """Parse strict JSON text, converting every object key with from_wire_key.

    Raises ValueError (json.JSONDecodeError included) on malformed input and
    on the ``NaN``/``Infinity``/``-Infinity`` literals.
    """
    return json.loads(text, object_pairs_hook=_decode_pairs, parse_constant=_reject_constant)
