"""Transliteration scheme registry.

WHY: The CLI, the HTTP API and ``Converter.from_scheme`` need a single
lookup to find a ready-made scheme by name. Adding a scheme means one new
data module and one line here.

HOW: SCHEMES maps lowercase names to Scheme instances. get_scheme()
resolves a name and falls back to the default scheme (logging a single
warning) when the name is unknown.

RULES:
- Keys are lowercase identifiers (used in CLI flags, API requests, .env)
- Values are Scheme instances; tables are copied when converter tables
  are built, so these module-level dicts are never mutated
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from deva_converter.schemes.base import Scheme
from deva_converter.schemes.harvard_kyoto import HARVARD_KYOTO
from deva_converter.schemes.iast import IAST
from deva_converter.schemes.iso15919 import ISO15919

logger = logging.getLogger(__name__)

DEFAULT_SCHEME_NAME = "iast"

SCHEMES: Dict[str, Scheme] = {
    "iast": IAST,
    "hk": HARVARD_KYOTO,
    "iso15919": ISO15919,
}


def get_scheme(name: Optional[str] = None) -> Scheme:
    """Look up a scheme by name, falling back to the default.

    WHY: A misspelled scheme name in a config file or request should not
    make the converter unusable, so it degrades to the default scheme.

    RULES:
    - None selects the default scheme silently
    - Lookup is case-insensitive and ignores surrounding whitespace
    - An unknown name logs exactly one warning and returns the default
    """
    if name is None:
        return SCHEMES[DEFAULT_SCHEME_NAME]

    key = name.strip().lower()
    if key in SCHEMES:
        return SCHEMES[key]

    logger.warning(
        "Unknown scheme '%s', falling back to '%s'. Available: %s",
        name, DEFAULT_SCHEME_NAME, ", ".join(sorted(SCHEMES)),
    )
    return SCHEMES[DEFAULT_SCHEME_NAME]


__all__ = ["DEFAULT_SCHEME_NAME", "SCHEMES", "Scheme", "get_scheme"]
