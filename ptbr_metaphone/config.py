"""Configuration defaults and .env loading.

WHY: The filter mode, the default tokenizer, request limits and the API
bind address are deployment choices, not code. Keeping them as plain
module-level constants makes them easy to find, and reading them from
the environment lets an operator change them without editing source.

HOW: python-dotenv loads the .env file on import. Each constant reads
its environment variable with a hardcoded fallback. load_bool() and
load_int() give clear errors when a value cannot be parsed.

RULES:
- PTBR_METAPHONE_INJECT: "true" keeps the original token and stacks the
  code on it; "false" replaces the token text (default: true)
- PTBR_METAPHONE_TOKENIZER: key into analysis.TOKENIZERS (default: standard)
- PTBR_METAPHONE_MAX_WORDS: cap on words per /encode request (default: 1000)
- PTBR_METAPHONE_HOST / PTBR_METAPHONE_PORT: uvicorn bind address
- Invalid values raise ValueError at import time, never silently default
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the process is started from)
load_dotenv()

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def parse_bool(value: str) -> bool:
    """Parse a boolean setting string.

    RULES:
    - Accepts true/false, 1/0, yes/no, on/off in any case
    - Anything else raises ValueError
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError("Not a boolean value: {!r}".format(value))


def load_bool(name: str, default: bool) -> bool:
    """Read a boolean from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse_bool(raw)
    except ValueError:
        raise ValueError("{} must be a boolean, got {!r}".format(name, raw))


def load_int(name: str, default: int) -> int:
    """Read a positive integer from the environment."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError("{} must be an integer, got {!r}".format(name, raw))
    if value < 1:
        raise ValueError("{} must be positive, got {}".format(name, value))
    return value


# ---------------------------------------------------------------------------
# Analysis defaults
# ---------------------------------------------------------------------------

DEFAULT_INJECT = load_bool("PTBR_METAPHONE_INJECT", True)
DEFAULT_TOKENIZER = os.getenv("PTBR_METAPHONE_TOKENIZER", "standard")

# ---------------------------------------------------------------------------
# HTTP API defaults
# ---------------------------------------------------------------------------

MAX_WORDS_PER_REQUEST = load_int("PTBR_METAPHONE_MAX_WORDS", 1000)
API_HOST = os.getenv("PTBR_METAPHONE_HOST", "0.0.0.0")
API_PORT = load_int("PTBR_METAPHONE_PORT", 8000)
