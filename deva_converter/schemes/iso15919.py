"""Simplified ISO 15919 tables, derived from IAST.

ISO 15919 differs from IAST for Sanskrit only in the vocalic liquids
(ring below instead of dot below) and the anusvara (dot above instead of
dot below). The tables are copies of the IAST ones with those keys renamed.
"""

from typing import Dict

from deva_converter.schemes import iast
from deva_converter.schemes.base import Scheme

# IAST key -> ISO 15919 key
_RENAMED_VOWELS: Dict[str, str] = {
    "r\N{COMBINING DOT BELOW}": "r\N{COMBINING RING BELOW}",
    "r\N{COMBINING DOT BELOW}\N{COMBINING MACRON}": "r\N{COMBINING RING BELOW}\N{COMBINING MACRON}",
    "l\N{COMBINING DOT BELOW}": "l\N{COMBINING RING BELOW}",
    "l\N{COMBINING DOT BELOW}\N{COMBINING MACRON}": "l\N{COMBINING RING BELOW}\N{COMBINING MACRON}",
}

_RENAMED_FINALS: Dict[str, str] = {
    "m\N{COMBINING DOT BELOW}": "m\N{COMBINING DOT ABOVE}",
}


def _rename(table: Dict[str, str], renames: Dict[str, str]) -> Dict[str, str]:
    return {renames.get(key, key): glyph for key, glyph in table.items()}


ISO15919 = Scheme(
    name="iso15919",
    title="ISO 15919 (simplified)",
    consonants=dict(iast.CONSONANTS),
    vowels=_rename(iast.VOWELS, _RENAMED_VOWELS),
    diacritics=_rename(iast.DIACRITICS, _RENAMED_VOWELS),
    finals=_rename(iast.FINALS, _RENAMED_FINALS),
    description="ISO 15919 with ring-below vocalic liquids and dot-above anusvara",
)
