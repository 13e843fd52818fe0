"""Converter configuration and validated lookup tables.

WHY: Maximal-munch tokenization and the reverse (Devanagari → Latin)
lookups are only correct if the scheme tables obey a few invariants. A
table that breaks them would not fail loudly; it would silently mis-segment
text. All checks therefore run once, when a converter is constructed, and
raise ConfigurationError instead of letting a bad table through.

HOW: ConverterConfig is the plain input record (forward tables, optional
reverse tables, flags). build_config() fills it from a named scheme plus
per-instance overrides. SchemeTables.from_config() validates the record,
derives the reverse tables and the combined token set, and freezes
everything behind read-only mappings.

RULES:
- Keys must be non-empty and in NFD form; lowercase unless case-sensitive
- Glyphs must be single characters, since Devanagari input is read one
  character at a time
- Every proper prefix of a token must itself be a token
  (consonants + vowels + finals)
- Reverse tables must be true inverses: one glyph, one token per category.
  Supplied reverse tables need single-character keys and values that are
  tokens of the matching forward table
- Every vowel except the inherent one needs a diacritic, and every
  diacritic must belong to a vowel
- The rendering diacritics table maps the inherent vowel to ""
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Union

from deva_converter.schemes import Scheme, get_scheme
from deva_converter.schemes.base import INHERENT_VOWEL, VIRAMA


class ConfigurationError(ValueError):
    """Raised at construction time when scheme tables are malformed."""


@dataclass(frozen=True)
class ConverterConfig:
    """Everything a Converter is built from.

    Attributes:
        consonants, vowels, diacritics, finals: Latin → Devanagari tables.
        reverse_*: Devanagari → Latin tables; derived when None.
        inherent: Vowel token realized by a bare consonant.
        virama: Vowel-suppressing glyph.
        strict: Report invalid input units through the warning channel.
        allow: Units exempted from strict-mode warnings.
        case_sensitive: When False, Latin lookups fold case.
    """

    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    diacritics: Mapping[str, str]
    finals: Mapping[str, str]
    reverse_consonants: Optional[Mapping[str, str]] = None
    reverse_vowels: Optional[Mapping[str, str]] = None
    reverse_diacritics: Optional[Mapping[str, str]] = None
    reverse_finals: Optional[Mapping[str, str]] = None
    inherent: str = INHERENT_VOWEL
    virama: str = VIRAMA
    strict: bool = False
    allow: FrozenSet[str] = field(default_factory=frozenset)
    case_sensitive: bool = False
    scheme_name: str = "custom"


_CONFIG_FIELDS = frozenset(f.name for f in fields(ConverterConfig))


def build_config(scheme: Union[Scheme, str, None] = None, **overrides: Any) -> ConverterConfig:
    """Build a ConverterConfig from a named scheme plus overrides.

    WHY: The usual way to customize a scheme is to copy one table, change
    a few keys, and keep the rest (e.g. "w" instead of "v"). This helper
    merges the defaults so callers only pass what differs.

    HOW: Resolves the scheme (unknown names fall back to the default with a
    warning), copies its tables into a config, then applies overrides.

    RULES:
    - ``allow`` may be any iterable; it is stored as a frozenset
    - Unknown override names raise ConfigurationError

    Args:
        scheme: A Scheme, a registry name, or None for the default scheme.
        **overrides: Any ConverterConfig field.

    Returns:
        A ConverterConfig ready for Converter / SchemeTables.
    """
    if not isinstance(scheme, Scheme):
        scheme = get_scheme(scheme)

    unknown = set(overrides) - _CONFIG_FIELDS
    if unknown:
        raise ConfigurationError(
            "Unknown configuration option(s): {}".format(", ".join(sorted(unknown)))
        )

    if "allow" in overrides:
        overrides["allow"] = frozenset(overrides["allow"] or ())

    config = ConverterConfig(
        consonants=dict(scheme.consonants),
        vowels=dict(scheme.vowels),
        diacritics=dict(scheme.diacritics),
        finals=dict(scheme.finals),
        inherent=scheme.inherent,
        virama=scheme.virama,
        case_sensitive=scheme.case_sensitive,
        scheme_name=scheme.name,
    )
    return replace(config, **overrides)


def _check_keys(name: str, table: Mapping[str, str], case_sensitive: bool) -> None:
    for key, glyph in table.items():
        if not key or not glyph:
            raise ConfigurationError(
                "Empty entry in {} table: {!r} -> {!r}".format(name, key, glyph)
            )
        if unicodedata.normalize("NFD", key) != key:
            raise ConfigurationError(
                "Key {!r} in {} table is not in NFD form".format(key, name)
            )
        if not case_sensitive and key.lower() != key:
            raise ConfigurationError(
                "Key {!r} in {} table must be lowercase for a case-insensitive "
                "scheme".format(key, name)
            )
        if len(glyph) != 1:
            raise ConfigurationError(
                "Glyph {!r} for {!r} in {} table must be a single character".format(
                    glyph, key, name,
                )
            )


def _reverse(name: str, table: Mapping[str, str], skip: Iterable[str] = ()) -> dict:
    skipped = set(skip)
    reverse: dict = {}
    for key, glyph in table.items():
        if key in skipped:
            continue
        if glyph in reverse:
            raise ConfigurationError(
                "Glyph {!r} in {} table is mapped from both {!r} and {!r}".format(
                    glyph, name, reverse[glyph], key,
                )
            )
        reverse[glyph] = key
    return reverse


def _check_reverse(name: str, reverse: Mapping[str, str], forward: Mapping[str, str]) -> None:
    for glyph, key in reverse.items():
        if len(glyph) != 1:
            raise ConfigurationError(
                "Reverse {} table key {!r} must be a single character".format(name, glyph)
            )
        if key not in forward:
            raise ConfigurationError(
                "Reverse {} table maps {!r} to {!r}, which is not in the {} table".format(
                    name, glyph, key, name,
                )
            )


def _check_prefixes(tokens: FrozenSet[str]) -> None:
    for token in sorted(tokens):
        for end in range(1, len(token)):
            if token[:end] not in tokens:
                raise ConfigurationError(
                    "Token {!r} has prefix {!r} which is not a token; "
                    "maximal-munch tokenization would miss it".format(token, token[:end])
                )


@dataclass(frozen=True)
class SchemeTables:
    """Validated, read-only forward and reverse tables.

    ``diacritics`` is the rendering table: it maps the inherent vowel to
    the empty string. ``tokens`` is the tokenizer's lookup set.
    """

    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    diacritics: Mapping[str, str]
    finals: Mapping[str, str]
    reverse_consonants: Mapping[str, str]
    reverse_vowels: Mapping[str, str]
    reverse_diacritics: Mapping[str, str]
    reverse_finals: Mapping[str, str]
    tokens: FrozenSet[str]
    inherent: str
    virama: str
    case_sensitive: bool

    def fold(self, token: str) -> str:
        """Lookup form of a Latin token."""
        return token if self.case_sensitive else token.lower()

    @classmethod
    def from_config(cls, config: ConverterConfig) -> SchemeTables:
        """Validate a config and derive the reverse tables.

        Raises:
            ConfigurationError: If any table invariant is violated.
        """
        forward = {
            "consonants": config.consonants,
            "vowels": config.vowels,
            "diacritics": config.diacritics,
            "finals": config.finals,
        }
        for name, table in forward.items():
            _check_keys(name, table, config.case_sensitive)

        if len(config.virama) != 1:
            raise ConfigurationError("Virama must be a single character: {!r}".format(config.virama))
        if config.inherent not in config.vowels:
            raise ConfigurationError(
                "Inherent vowel {!r} is not in the vowels table".format(config.inherent)
            )

        stray = sorted(set(config.diacritics) - set(config.vowels))
        if stray:
            raise ConfigurationError(
                "Diacritics without a matching vowel: {}".format(", ".join(map(repr, stray)))
            )
        missing = sorted(set(config.vowels) - set(config.diacritics) - {config.inherent})
        if missing:
            raise ConfigurationError(
                "Vowels without a diacritic: {}".format(", ".join(map(repr, missing)))
            )

        tokens = frozenset(config.consonants) | frozenset(config.vowels) | frozenset(config.finals)
        _check_prefixes(tokens)

        reverse = {}
        for name, table in forward.items():
            supplied = getattr(config, "reverse_" + name)
            if supplied is None:
                skip = [config.inherent] if name == "diacritics" else []
                reverse[name] = _reverse(name, table, skip=skip)
            else:
                _check_reverse(name, supplied, table)
                reverse[name] = dict(supplied)

        diacritics = dict(config.diacritics)
        diacritics[config.inherent] = ""

        return cls(
            consonants=MappingProxyType(dict(config.consonants)),
            vowels=MappingProxyType(dict(config.vowels)),
            diacritics=MappingProxyType(diacritics),
            finals=MappingProxyType(dict(config.finals)),
            reverse_consonants=MappingProxyType(reverse["consonants"]),
            reverse_vowels=MappingProxyType(reverse["vowels"]),
            reverse_diacritics=MappingProxyType(reverse["diacritics"]),
            reverse_finals=MappingProxyType(reverse["finals"]),
            tokens=tokens,
            inherent=config.inherent,
            virama=config.virama,
            case_sensitive=config.case_sensitive,
        )
