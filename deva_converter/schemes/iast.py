"""IAST (International Alphabet of Sanskrit Transliteration) tables.

WHY: IAST is the de-facto standard romanization in Indological print and
the default scheme of the converter.

HOW: Plain dicts keyed by NFD tokens. Combining marks are spelled out with
``\\N{...}`` escapes so the decomposed form is visible in the source.

RULES:
- Keys are lowercase (IAST is case-insensitive)
- Every multi-character token has all of its prefixes as tokens too
  (t + dot below + h -> t + dot below -> t)
"""

from typing import Dict

from deva_converter.schemes.base import Scheme

CONSONANTS: Dict[str, str] = {
    "k": "\N{DEVANAGARI LETTER KA}",
    "kh": "\N{DEVANAGARI LETTER KHA}",
    "g": "\N{DEVANAGARI LETTER GA}",
    "gh": "\N{DEVANAGARI LETTER GHA}",
    "n\N{COMBINING DOT ABOVE}": "\N{DEVANAGARI LETTER NGA}",
    "c": "\N{DEVANAGARI LETTER CA}",
    "ch": "\N{DEVANAGARI LETTER CHA}",
    "j": "\N{DEVANAGARI LETTER JA}",
    "jh": "\N{DEVANAGARI LETTER JHA}",
    "n\N{COMBINING TILDE}": "\N{DEVANAGARI LETTER NYA}",
    "t\N{COMBINING DOT BELOW}": "\N{DEVANAGARI LETTER TTA}",
    "t\N{COMBINING DOT BELOW}h": "\N{DEVANAGARI LETTER TTHA}",
    "d\N{COMBINING DOT BELOW}": "\N{DEVANAGARI LETTER DDA}",
    "d\N{COMBINING DOT BELOW}h": "\N{DEVANAGARI LETTER DDHA}",
    "n\N{COMBINING DOT BELOW}": "\N{DEVANAGARI LETTER NNA}",
    "t": "\N{DEVANAGARI LETTER TA}",
    "th": "\N{DEVANAGARI LETTER THA}",
    "d": "\N{DEVANAGARI LETTER DA}",
    "dh": "\N{DEVANAGARI LETTER DHA}",
    "n": "\N{DEVANAGARI LETTER NA}",
    "p": "\N{DEVANAGARI LETTER PA}",
    "ph": "\N{DEVANAGARI LETTER PHA}",
    "b": "\N{DEVANAGARI LETTER BA}",
    "bh": "\N{DEVANAGARI LETTER BHA}",
    "m": "\N{DEVANAGARI LETTER MA}",
    "y": "\N{DEVANAGARI LETTER YA}",
    "r": "\N{DEVANAGARI LETTER RA}",
    "l": "\N{DEVANAGARI LETTER LA}",
    "v": "\N{DEVANAGARI LETTER VA}",
    "s\N{COMBINING ACUTE ACCENT}": "\N{DEVANAGARI LETTER SHA}",
    "s\N{COMBINING DOT BELOW}": "\N{DEVANAGARI LETTER SSA}",
    "s": "\N{DEVANAGARI LETTER SA}",
    "h": "\N{DEVANAGARI LETTER HA}",
}

VOWELS: Dict[str, str] = {
    "a": "\N{DEVANAGARI LETTER A}",
    "a\N{COMBINING MACRON}": "\N{DEVANAGARI LETTER AA}",
    "i": "\N{DEVANAGARI LETTER I}",
    "i\N{COMBINING MACRON}": "\N{DEVANAGARI LETTER II}",
    "u": "\N{DEVANAGARI LETTER U}",
    "u\N{COMBINING MACRON}": "\N{DEVANAGARI LETTER UU}",
    "r\N{COMBINING DOT BELOW}": "\N{DEVANAGARI LETTER VOCALIC R}",
    "r\N{COMBINING DOT BELOW}\N{COMBINING MACRON}": "\N{DEVANAGARI LETTER VOCALIC RR}",
    "l\N{COMBINING DOT BELOW}": "\N{DEVANAGARI LETTER VOCALIC L}",
    "l\N{COMBINING DOT BELOW}\N{COMBINING MACRON}": "\N{DEVANAGARI LETTER VOCALIC LL}",
    "e": "\N{DEVANAGARI LETTER E}",
    "ai": "\N{DEVANAGARI LETTER AI}",
    "o": "\N{DEVANAGARI LETTER O}",
    "au": "\N{DEVANAGARI LETTER AU}",
}

DIACRITICS: Dict[str, str] = {
    "a\N{COMBINING MACRON}": "\N{DEVANAGARI VOWEL SIGN AA}",
    "i": "\N{DEVANAGARI VOWEL SIGN I}",
    "i\N{COMBINING MACRON}": "\N{DEVANAGARI VOWEL SIGN II}",
    "u": "\N{DEVANAGARI VOWEL SIGN U}",
    "u\N{COMBINING MACRON}": "\N{DEVANAGARI VOWEL SIGN UU}",
    "r\N{COMBINING DOT BELOW}": "\N{DEVANAGARI VOWEL SIGN VOCALIC R}",
    "r\N{COMBINING DOT BELOW}\N{COMBINING MACRON}": "\N{DEVANAGARI VOWEL SIGN VOCALIC RR}",
    "l\N{COMBINING DOT BELOW}": "\N{DEVANAGARI VOWEL SIGN VOCALIC L}",
    "l\N{COMBINING DOT BELOW}\N{COMBINING MACRON}": "\N{DEVANAGARI VOWEL SIGN VOCALIC LL}",
    "e": "\N{DEVANAGARI VOWEL SIGN E}",
    "ai": "\N{DEVANAGARI VOWEL SIGN AI}",
    "o": "\N{DEVANAGARI VOWEL SIGN O}",
    "au": "\N{DEVANAGARI VOWEL SIGN AU}",
}

FINALS: Dict[str, str] = {
    "m\N{COMBINING DOT BELOW}": "\N{DEVANAGARI SIGN ANUSVARA}",
    "h\N{COMBINING DOT BELOW}": "\N{DEVANAGARI SIGN VISARGA}",
    "m\N{COMBINING CANDRABINDU}": "\N{DEVANAGARI SIGN CANDRABINDU}",
}

IAST = Scheme(
    name="iast",
    title="IAST",
    consonants=CONSONANTS,
    vowels=VOWELS,
    diacritics=DIACRITICS,
    finals=FINALS,
    description="International Alphabet of Sanskrit Transliteration",
)
