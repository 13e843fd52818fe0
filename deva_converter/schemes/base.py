"""Transliteration scheme container and script-wide constants.

WHY: Every romanization of Sanskrit (IAST, Harvard-Kyoto, ISO 15919, ...)
supplies the same four lookup tables. The aksarizers and renderers only ever
see these tables, so a scheme is pure data with no behaviour of its own.

HOW: Scheme is a frozen dataclass holding four plain dicts (Latin token →
Devanagari glyph) plus the inherent vowel, the virama glyph, and a
case-sensitivity flag. Scheme modules build one module-level instance each.

RULES:
- Table keys are Latin tokens in Unicode NFD form
- Case-insensitive schemes use lowercase keys only
- The inherent vowel must be a key of ``vowels`` but not of ``diacritics``
  (a bare consonant realizes it)
- Validation happens later, when converter tables are built
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

VIRAMA = "\N{DEVANAGARI SIGN VIRAMA}"
DANDA = "\N{DEVANAGARI DANDA}"
DOUBLE_DANDA = "\N{DEVANAGARI DOUBLE DANDA}"
INHERENT_VOWEL = "a"


@dataclass(frozen=True)
class Scheme:
    """A named set of Latin ↔ Devanagari translation tables.

    Attributes:
        name: Registry key, e.g. ``"iast"``.
        title: Human-readable name, e.g. ``"IAST"``.
        consonants: Consonant token → consonant letter.
        vowels: Vowel token → independent vowel letter.
        diacritics: Vowel token → dependent vowel sign (matra).
        finals: Final token → anusvara, visarga, candrabindu.
        inherent: The vowel carried by a bare consonant letter.
        virama: The vowel-suppressing sign.
        case_sensitive: Whether ``A`` and ``a`` are different tokens.
    """

    name: str
    title: str
    consonants: Dict[str, str]
    vowels: Dict[str, str]
    diacritics: Dict[str, str]
    finals: Dict[str, str]
    inherent: str = INHERENT_VOWEL
    virama: str = VIRAMA
    case_sensitive: bool = False
    description: str = field(default="", compare=False)
