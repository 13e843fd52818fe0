"""Configuration defaults and .env loading.

WHY: The CLI and the HTTP API share a few deployment-level defaults (which
scheme to use, whether to warn about invalid input, where to listen).
Keeping them in one module, overridable from the environment, means a
project can pin its conventions in a .env file instead of repeating flags.

HOW: python-dotenv loads the .env file on import. Defaults are read from
the environment into module-level constants.

RULES:
- DEVA_SCHEME: default scheme name (unknown names fall back to IAST with
  a warning when the converter is built)
- DEVA_STRICT: "true"/"false", strict mode default
- DEVA_ALLOW: characters exempted from strict-mode warnings, given as one
  string (each character is one entry); defaults to danda and double danda
- DEVA_API_HOST / DEVA_API_PORT: bind address of the HTTP API
- Library code (deva_converter.core) never reads this module; only the
  adapters (CLI, server) do
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from deva_converter.schemes.base import DANDA, DOUBLE_DANDA

# Load .env from the current working directory
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DEFAULT_SCHEME = os.getenv("DEVA_SCHEME", "iast")
DEFAULT_STRICT = _env_flag("DEVA_STRICT", "false")
DEFAULT_ALLOW: frozenset = frozenset(os.getenv("DEVA_ALLOW", DANDA + DOUBLE_DANDA))

API_HOST = os.getenv("DEVA_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("DEVA_API_PORT", "8000"))
