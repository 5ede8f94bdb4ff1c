"""
anki-connect shared configuration, constants, and module-level state.
Standalone module, no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys that may also come from the process environment (which wins over .env).
KNOWN_ENV_KEYS = (
    "ANKI_CONNECT_URL",
    "ANKI_CONNECT_API_KEY",
    "ANKI_CONNECT_API_VERSION",
    "ANKI_CONNECT_HTTP_TIMEOUT_SECONDS",
    "ANKI_CONNECT_HTTP_MAX_RESPONSE_BYTES",
    "ANKI_CONNECT_HTTP_LOG",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in KNOWN_ENV_KEYS:
        if key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

DEFAULT_URL = "http://localhost:8765"
DEFAULT_API_VERSION = 6

VALID_FORMATS = ("text", "json")

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env / environment)
# ---------------------------------------------------------------------------

env = load_env()

BASE_URL = env.get("ANKI_CONNECT_URL") or DEFAULT_URL
API_KEY = env.get("ANKI_CONNECT_API_KEY", "")
API_VERSION = _env_int("ANKI_CONNECT_API_VERSION", DEFAULT_API_VERSION)
HTTP_TIMEOUT_SECONDS = _env_int("ANKI_CONNECT_HTTP_TIMEOUT_SECONDS", 30)
# retrieve_media_file returns base64 payloads, so the cap is generous.
HTTP_MAX_RESPONSE_BYTES = _env_int("ANKI_CONNECT_HTTP_MAX_RESPONSE_BYTES", 50_000_000)
HTTP_LOG_ENABLED = _env_bool("ANKI_CONNECT_HTTP_LOG", False)

# ---------------------------------------------------------------------------
# Runtime flags (set by the CLI from global flags)
# ---------------------------------------------------------------------------

RUNTIME_FORMAT = "text"
RUNTIME_QUIET = False
