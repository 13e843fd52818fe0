"""Harvard-Kyoto tables.

ASCII-only and case-sensitive: "t" is TA but "T" is TTA (retroflex).
"""

from typing import Dict

from deva_converter.schemes.base import Scheme

CONSONANTS: Dict[str, str] = {
    "k": "क", "kh": "ख", "g": "ग", "gh": "घ", "G": "ङ",
    "c": "च", "ch": "छ", "j": "ज", "jh": "झ", "J": "ञ",
    "T": "ट", "Th": "ठ", "D": "ड", "Dh": "ढ", "N": "ण",
    "t": "त", "th": "थ", "d": "द", "dh": "ध", "n": "न",
    "p": "प", "ph": "फ", "b": "ब", "bh": "भ", "m": "म",
    "y": "य", "r": "र", "l": "ल", "v": "व",
    "z": "श", "S": "ष", "s": "स", "h": "ह",
}

VOWELS: Dict[str, str] = {
    "a": "अ", "A": "आ",
    "i": "इ", "I": "ई",
    "u": "उ", "U": "ऊ",
    "R": "ऋ", "RR": "ॠ",
    "lR": "ऌ", "lRR": "ॡ",
    "e": "ए", "ai": "ऐ",
    "o": "ओ", "au": "औ",
}

DIACRITICS: Dict[str, str] = {
    "A": "ा",
    "i": "ि", "I": "ी",
    "u": "ु", "U": "ू",
    "R": "ृ", "RR": "ॄ",
    "lR": "ॢ", "lRR": "ॣ",
    "e": "े", "ai": "ै",
    "o": "ो", "au": "ौ",
}

FINALS: Dict[str, str] = {
    "M": "ं",
    "H": "ः",
    "~": "ँ",
}

HARVARD_KYOTO = Scheme(
    name="hk",
    title="Harvard-Kyoto",
    consonants=CONSONANTS,
    vowels=VOWELS,
    diacritics=DIACRITICS,
    finals=FINALS,
    case_sensitive=True,
    description="ASCII romanization, case distinguishes retroflex and long vowels",
)
