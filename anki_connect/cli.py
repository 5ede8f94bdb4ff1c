"""
anki-connect: command-line front end for the AnkiConnect add-on
"""

import json
import sys

from anki_connect import config, dispatcher
from anki_connect.exceptions import CliError

# ---------------------------------------------------------------------------
# Global flag extraction (before dispatch, so flags work in any position)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, quiet, verbose, remaining_argv).
    Handles --version directly. Tokens after a bare ``--`` are left alone.
    """
    fmt = config.RUNTIME_FORMAT
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            remaining.extend(argv[i:])
            break
        if arg == "--version":
            print(f"anki-connect {config.VERSION}")
            sys.exit(0)
        elif arg in ("--quiet", "-q"):
            quiet = True
        elif arg in ("--verbose", "-v"):
            verbose = True
        elif arg == "--format" or arg.startswith("--format="):
            if "=" in arg:
                fmt = arg.split("=", 1)[1]
            elif i + 1 < len(argv):
                fmt = argv[i + 1]
                i += 1
            else:
                raise CliError("[ERROR] --format needs a value. Use: text, json")
            if fmt not in config.VALID_FORMATS:
                raise CliError(
                    f"[ERROR] Invalid format '{fmt}'. Use: {', '.join(config.VALID_FORMATS)}"
                )
        else:
            remaining.append(arg)
        i += 1
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Error output
# ---------------------------------------------------------------------------


def _error_type_from_message(message):
    if message.startswith("[ERROR]"):
        return "error"
    if message.startswith("Action "):
        return "usage"
    return "cli_error"


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "error": {
                "type": _error_type_from_message(msg),
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    if argv is None:
        argv = sys.argv[1:]

    fmt = config.RUNTIME_FORMAT
    try:
        fmt, quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_FORMAT = fmt
        config.RUNTIME_QUIET = quiet
        if verbose:
            config.HTTP_LOG_ENABLED = True
        exit_code = dispatcher.run(remaining_argv)
    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
