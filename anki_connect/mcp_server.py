"""MCP server exposing the AnkiConnect action registry as tools.

Run: python -m anki_connect.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from anki_connect import config
from anki_connect.exceptions import CliError
from anki_connect.models import ObjectPayload
from anki_connect.registry import DOMAINS, action_rows, get_action
from anki_connect.types import ToolResult

mcp = FastMCP(
    "anki-connect",
    instructions=(
        "Anki flashcard tools backed by the AnkiConnect add-on (Anki must be running). "
        "Call list_actions to discover action names, then invoke_action with a params "
        "object using snake_case keys, e.g. "
        'invoke_action("create_deck", {"deck": "Spanish"}). '
        "Actions listed with arity 0 take no params; those whose arities include 0 "
        "may omit params."
    ),
)


def _contract_error(message: Any, error_type: str = "error") -> ToolResult:
    """Return a stable MCP error envelope."""
    return {"ok": False, "type": error_type, "error": message}


# -------------------------------------------------------------------
# Tools
# -------------------------------------------------------------------


@mcp.tool()
def list_actions(domain: str | None = None) -> dict:
    """List available actions with their domain, arity and summary.

    Args:
        domain: Optional filter: deck, graphical, media, miscellaneous, model,
            note, statistic or service.
    """
    if domain is not None and domain not in DOMAINS:
        return _contract_error(f"Unknown domain: {domain!r}. Use one of: {', '.join(DOMAINS)}")
    rows = action_rows(domain)
    return {"ok": True, "actions": rows, "count": len(rows)}


@mcp.tool()
def invoke_action(action: str, params: dict[str, Any] | None = None) -> dict:
    """Run one action. Returns {ok, result} or {ok: false, error}.

    Args:
        action: Action name from list_actions (e.g. deck_names, add_note).
        params: Params object with snake_case keys; omit when arities include 0.
    """
    try:
        definition = get_action(action)
    except KeyError:
        return _contract_error(f'Action "{action}" is not a valid action.', "usage")
    try:
        args = ()
        if params:
            args = (ObjectPayload.from_value(params, "params").data,)
        if not definition.accepts(len(args)):
            return _contract_error(
                f'Action "{definition.name}" expects {definition.arity_text} params.', "usage"
            )
        outcome = definition.handler(*args)
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
    if outcome.ok:
        return {"ok": True, "result": outcome.value}
    return _contract_error(outcome.reason, "connection" if outcome.is_connection else "remote")


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------


def main():
    """Run the MCP server (stdio transport)."""
    # stdout is the stdio transport; report lines go to stderr.
    config.RUNTIME_FORMAT = "json"
    mcp.run()


if __name__ == "__main__":
    main()
