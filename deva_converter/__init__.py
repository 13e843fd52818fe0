"""Deva Converter: Latin transliteration <-> Devanagari for Sanskrit.

WHY: Sanskrit is routinely written both in Devanagari and in Latin
romanizations (IAST, Harvard-Kyoto, ISO 15919). Converting between them is
not a character mapping: Devanagari hides the inherent vowel and marks
consonant clusters with a virama, Latin does neither.

HOW: Two-stage pipeline through an intermediate syllable representation,
the aksara: parse (tokenizer + aksarizer state machines) and render
(pluggable renderers). Each stage is independently testable.

RULES:
- All renderers consume the same aksara sequence
- Scheme tables are data; adding a scheme = one new module, no core changes
- Malformed content is passed through, never rejected; only malformed
  configuration raises (ConfigurationError)
"""

from deva_converter.core.converter import Converter
from deva_converter.core.ir import Aksara, AksaraBuilder, RawToken
from deva_converter.core.tables import ConfigurationError, ConverterConfig, build_config

__version__ = "0.1.0"

__all__ = [
    "Aksara",
    "AksaraBuilder",
    "ConfigurationError",
    "Converter",
    "ConverterConfig",
    "RawToken",
    "build_config",
]
