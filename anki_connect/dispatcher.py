"""
Command dispatcher: turns argv tokens into one action call plus modifiers.

    anki-connect delete_decks --decks='["TEST DECK"]' --with_sync

parses to action ``delete_decks``, params ``{"decks": ["TEST DECK"]}`` and
modifiers ``("with_sync",)``. The action runs first; modifiers run in order
only if it succeeded.
"""

import sys

from anki_connect import casing, config
from anki_connect.actions import sync
from anki_connect.exceptions import CliError, ConnectionFailed, UsageError
from anki_connect.formatters import format_help, format_outcome, output_outcome
from anki_connect.models import ParsedInvocation
from anki_connect.registry import get_action

MODIFIER_PREFIX = "with_"

EXIT_OK = 0
EXIT_REMOTE_FAILURE = 2
EXIT_CONNECTION_FAILURE = ConnectionFailed.exit_code


# ---------------------------------------------------------------------------
# Token parsing
# ---------------------------------------------------------------------------


def normalize_flag_name(name):
    """``--deck-name`` and ``--deck_name`` both become ``deck_name``."""
    return name.replace("-", "_")


def split_tokens(tokens):
    """Partition tokens into positionals and ``(name, value)`` flag pairs.

    ``--key=value`` and ``--key value`` both set a value; a flag with no value
    is True. Modifier flags never take the next token as their value.
    Everything after a bare ``--`` is positional.
    """
    positionals = []
    flags = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "--":
            positionals.extend(tokens[i + 1 :])
            break
        if token.startswith("--") and len(token) > 2:
            body = token[2:]
            if "=" in body:
                name, value = body.split("=", 1)
                flags.append((normalize_flag_name(name), value))
                i += 1
                continue
            name = normalize_flag_name(body)
            has_value = (
                not name.startswith(MODIFIER_PREFIX)
                and i + 1 < len(tokens)
                and not tokens[i + 1].startswith("--")
            )
            if has_value:
                flags.append((name, tokens[i + 1]))
                i += 2
                continue
            flags.append((name, True))
        else:
            positionals.append(token)
        i += 1
    return positionals, flags


def decode_flag_value(value):
    """Parse a flag value as JSON, falling back to the raw string.

    Object keys inside the JSON are converted from camelCase to snake_case.
    """
    if not isinstance(value, str):
        return value
    try:
        return casing.loads(value)
    except ValueError:
        return value


def parse_invocation(tokens):
    """Parse argv tokens (global flags already removed) into a ParsedInvocation."""
    positionals, flags = split_tokens(list(tokens))
    modifiers = []
    params = {}
    for name, value in flags:
        if name.startswith(MODIFIER_PREFIX):
            modifiers.append(name)
            continue
        params[name] = decode_flag_value(value)
    action = positionals[0] if positionals else None
    return ParsedInvocation(
        action=action,
        positional_params=tuple(decode_flag_value(p) for p in positionals[1:]),
        params=params,
        modifiers=tuple(modifiers),
    )


# ---------------------------------------------------------------------------
# Resolution and dispatch
# ---------------------------------------------------------------------------


def resolve(invocation):
    """Return the ActionDefinition for *invocation*.

    Raises UsageError for unknown actions and argument-count mismatches.
    """
    try:
        definition = get_action(invocation.action)
    except KeyError:
        raise UsageError(
            f'Action "{invocation.action}" is not a valid action.\n'
            "Run `anki-connect help` to list the available actions."
        ) from None
    if not definition.accepts(len(invocation.args)):
        raise UsageError(f'Action "{definition.name}" expects {definition.arity_text} params.')
    return definition


def _warn(message):
    if not config.RUNTIME_QUIET:
        print(f"[WARN] {message}", file=sys.stderr)


def _progress(message):
    """Modifier progress lines. Kept off stdout when stdout carries JSON."""
    if config.RUNTIME_QUIET:
        return
    stream = sys.stderr if config.RUNTIME_FORMAT == "json" else sys.stdout
    print(message, file=stream)


def failure_exit_code(outcome):
    """Exit code for a Failure: 3 when AnkiConnect was unreachable, else 2."""
    if outcome.is_connection:
        return EXIT_CONNECTION_FAILURE
    return EXIT_REMOTE_FAILURE


def _run_sync():
    _progress("Syncing...")
    outcome = sync()
    if outcome.ok:
        _progress("Synced!")
        return EXIT_OK
    stream = sys.stderr if config.RUNTIME_FORMAT == "json" else sys.stdout
    print(format_outcome(outcome), file=stream)
    return failure_exit_code(outcome)


_MODIFIERS = {
    "with_sync": _run_sync,
}


def run_modifiers(modifiers):
    """Run modifiers in order. Returns the exit code of the first that failed.

    A failing modifier does not stop the ones after it.
    """
    exit_code = EXIT_OK
    for name in modifiers:
        handler = _MODIFIERS.get(name)
        if handler is None:
            _warn(f"Unknown modifier '{name}', skipping.")
            continue
        try:
            code = handler()
        except CliError as e:
            print(str(e), file=sys.stderr)
            code = e.exit_code
        if exit_code == EXIT_OK:
            exit_code = code
    return exit_code


def run(tokens):
    """Dispatch one CLI invocation and return the process exit code.

    Raises CliError (UsageError, missing params...) for the caller to report.
    Remote and transport errors are Failure outcomes, rendered as ``Error: ...``.
    """
    invocation = parse_invocation(tokens)
    if invocation.action is None or invocation.action == "help":
        print(format_help())
        return EXIT_OK

    definition = resolve(invocation)
    if invocation.positional_params:
        _warn(
            f"Ignoring positional arguments after '{definition.name}': "
            f"{' '.join(str(p) for p in invocation.positional_params)}. "
            "Pass params as --flag=value."
        )

    outcome = definition.handler(*invocation.args)
    output_outcome(outcome, config.RUNTIME_FORMAT)
    if not outcome.ok:
        return failure_exit_code(outcome)
    return run_modifiers(invocation.modifiers)
