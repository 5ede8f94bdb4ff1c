"""
Typed models for action outcomes, CLI invocations and raw payloads.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from anki_connect.exceptions import CliError


@dataclass(frozen=True)
class Success:
    """AnkiConnect answered with ``error: null``."""

    value: Any = None

    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    """AnkiConnect (or a local check) rejected the action, or could not be reached.

    ``reason`` is whatever the server sent: usually a string, sometimes a dict.
    ``kind`` is ``"remote"`` for errors AnkiConnect reported and
    ``"connection"`` for transport failures (refused, timeout, bad reply).
    """

    reason: Any
    kind: str = "remote"

    ok: ClassVar[bool] = False

    @property
    def is_connection(self) -> bool:
        return self.kind == "connection"


Outcome = Union[Success, Failure]


@dataclass(frozen=True)
class ObjectPayload:
    """Typed wrapper for raw JSON object payloads."""

    data: dict

    @classmethod
    def from_value(cls, value, context):
        if isinstance(value, dict):
            return cls(data=value)
        raise CliError(
            f"[ERROR] Invalid JSON in {context}: expected object, got {type(value).__name__}."
        )


@dataclass(frozen=True)
class ParsedInvocation:
    """One CLI invocation after flag parsing, before dispatch."""

    action: str | None
    positional_params: tuple = ()
    params: dict[str, Any] = field(default_factory=dict)
    modifiers: tuple[str, ...] = ()

    @property
    def args(self) -> tuple:
        """Handler arguments: nothing, or the merged params mapping."""
        if not self.params:
            return ()
        return (dict(self.params),)
