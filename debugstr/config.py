"""
debugstr shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

_ENV_KEYS = (
    "DEBUGSTR_MAX_LINE_LENGTH",
    "DEBUGSTR_LOG",
    "DEBUGSTR_MCP_RESPONSE_MODE",
)


def load_env():
    """Read KEY=VALUE pairs from .env, falling back to os.environ for known keys."""
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _ENV_KEYS:
        if key not in env and key in os.environ:
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
CONTRACT_SCHEMA_VERSION = "1.0"

DEFAULT_MAX_LINE_LENGTH = 80
MIN_MAX_LINE_LENGTH = 25
# Length of "Character: ", reserved on every line of a row-group.
PREFIX_WIDTH = 11

CHARACTER_LABEL = "Character: "
INDEX_LABEL = "Index:     "
SEPARATOR = "|"

EMPTY_TEXT_MESSAGE = "The string is null or empty."

VALID_FORMATS = {"json", "table"}
VALID_MCP_RESPONSE_MODES = {"legacy", "envelope"}

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

MAX_LINE_LENGTH = _env_int("DEBUGSTR_MAX_LINE_LENGTH", DEFAULT_MAX_LINE_LENGTH)
LOG_ENABLED = _env_bool("DEBUGSTR_LOG", False)

MCP_RESPONSE_MODE = env.get("DEBUGSTR_MCP_RESPONSE_MODE", "legacy").strip().lower()
if MCP_RESPONSE_MODE not in VALID_MCP_RESPONSE_MODES:
    MCP_RESPONSE_MODE = "legacy"

# ---------------------------------------------------------------------------
# Runtime flags (set by the CLI)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
RUNTIME_VERBOSE = False
