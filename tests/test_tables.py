"""Unit tests for configuration building and table validation.

WHY: A malformed table does not crash a conversion; it silently produces
wrong text. Every table invariant must therefore be rejected loudly at
construction time, and customized schemes (one key swapped, reverse
tables supplied by hand) must still build.

HOW: Tests build configs with build_config() overrides and check that
SchemeTables.from_config() (through Converter) raises ConfigurationError
for each broken invariant, and derives correct reverse tables otherwise.

RULES:
- ConfigurationError is a ValueError
- Every failing case is a single, targeted modification of IAST
"""

import logging

import pytest

from deva_converter import ConfigurationError, Converter, ConverterConfig, build_config
from deva_converter.core.tables import SchemeTables
from deva_converter.schemes import SCHEMES, get_scheme
from deva_converter.schemes.iast import CONSONANTS, DIACRITICS, FINALS, IAST, VOWELS


def _with(table, **changes):
    """Copy of a table with keys added (value) or removed (None)."""
    result = dict(table)
    for key, value in changes.items():
        if value is None:
            result.pop(key)
        else:
            result[key] = value
    return result


class TestBuiltInSchemes:
    """All registered schemes satisfy every invariant."""

    @pytest.mark.parametrize("name", sorted(SCHEMES))
    def test_scheme_builds(self, name):
        converter = Converter.from_scheme(name)
        assert converter.scheme_name == name

    @pytest.mark.parametrize("name", sorted(SCHEMES))
    def test_reverse_tables_are_inverses(self, name):
        tables = Converter.from_scheme(name).tables
        for token, glyph in tables.consonants.items():
            assert tables.reverse_consonants[glyph] == token
        for token, glyph in tables.vowels.items():
            assert tables.reverse_vowels[glyph] == token
        for token, glyph in tables.finals.items():
            assert tables.reverse_finals[glyph] == token

    def test_inherent_vowel_renders_empty(self, iast):
        assert iast.tables.diacritics["a"] == ""
        assert "" not in iast.tables.reverse_diacritics

    def test_tables_are_read_only(self, iast):
        with pytest.raises(TypeError):
            iast.tables.consonants["w"] = "व"

    def test_token_set(self, iast):
        tokens = iast.tables.tokens
        assert "kh" in tokens and "au" in tokens
        assert len(tokens) == len(CONSONANTS) + len(VOWELS) + len(FINALS)


class TestBuildConfig:
    """Scheme defaults merged with per-instance overrides."""

    def test_default_scheme_is_iast(self):
        config = build_config()
        assert config.scheme_name == "iast"
        assert config.strict is False
        assert config.allow == frozenset()

    def test_scheme_instance_accepted(self):
        assert build_config(IAST).scheme_name == "iast"

    def test_allow_is_frozen(self):
        config = build_config(allow=["।", "॥"])
        assert config.allow == frozenset({"।", "॥"})

    def test_unknown_option_rejected(self):
        with pytest.raises(ConfigurationError, match="colour"):
            build_config(colour="blue")

    def test_unknown_scheme_falls_back_with_one_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="deva_converter.schemes"):
            config = build_config("itrans")
        assert config.scheme_name == "iast"
        assert len(caplog.records) == 1
        assert "itrans" in caplog.records[0].getMessage()

    def test_scheme_lookup_is_case_insensitive(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert get_scheme(" HK ").name == "hk"
        assert caplog.records == []

    def test_builtin_tables_not_mutated(self):
        config = build_config()
        config.consonants["w"] = "व"
        assert "w" not in IAST.consonants

    def test_w_instead_of_v(self):
        consonants = dict(CONSONANTS)
        consonants["w"] = consonants.pop("v")
        converter = Converter.from_scheme("iast", consonants=consonants)
        assert converter.to_deva("wana") == "वन"
        assert converter.to_latin("वन") == "wana"

    def test_explicit_reverse_table_used(self):
        # nukta QA read back as plain "k"
        reverse = {glyph: token for token, glyph in CONSONANTS.items()}
        reverse["\N{DEVANAGARI LETTER QA}"] = "k"
        converter = Converter.from_scheme("iast", reverse_consonants=reverse)
        assert converter.to_latin("\N{DEVANAGARI LETTER QA}") == "ka"
        assert converter.to_latin("क") == "ka"
        assert converter.to_deva("ka") == "क"

    def test_config_object_accepted(self):
        config = ConverterConfig(
            consonants={"k": "क"},
            vowels={"a": "अ", "i": "इ"},
            diacritics={"i": "ि"},
            finals={},
        )
        converter = Converter(config)
        assert converter.to_deva("kik") == "किक्"
        assert converter.scheme_name == "custom"


class TestConfigurationErrors:
    """Each broken invariant raises ConfigurationError at construction."""

    def _build(self, **overrides):
        return SchemeTables.from_config(build_config("iast", **overrides))

    def test_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)

    def test_nfc_key(self):
        precomposed = "\N{LATIN SMALL LETTER T WITH DOT BELOW}"
        with pytest.raises(ConfigurationError, match="NFD"):
            self._build(consonants=_with(CONSONANTS, **{precomposed: "ट"}))

    def test_uppercase_key_in_case_insensitive_scheme(self):
        with pytest.raises(ConfigurationError, match="lowercase"):
            self._build(consonants=_with(CONSONANTS, K="\N{DEVANAGARI LETTER QA}"))

    def test_uppercase_key_allowed_when_case_sensitive(self):
        tables = self._build(consonants=_with(CONSONANTS, K="\N{DEVANAGARI LETTER QA}"), case_sensitive=True)
        assert "K" in tables.tokens

    def test_empty_key(self):
        with pytest.raises(ConfigurationError, match="Empty"):
            self._build(finals=_with(FINALS, **{"": "ः"}))

    def test_empty_glyph(self):
        with pytest.raises(ConfigurationError, match="Empty"):
            self._build(consonants=_with(CONSONANTS, x=""))

    def test_multi_character_glyph(self):
        # to_latin reads one character at a time and could never match it
        with pytest.raises(ConfigurationError, match="single character"):
            self._build(consonants=_with(CONSONANTS, x="क्ष"))

    def test_reverse_value_not_a_token(self):
        reverse = {glyph: token for token, glyph in CONSONANTS.items()}
        reverse["क"] = "q"
        with pytest.raises(ConfigurationError, match="not in the consonants table"):
            self._build(reverse_consonants=reverse)

    def test_reverse_key_not_one_character(self):
        reverse = {glyph: token for token, glyph in VOWELS.items()}
        reverse["अअ"] = "a"
        with pytest.raises(ConfigurationError, match="single character"):
            self._build(reverse_vowels=reverse)

    def test_reverse_diacritics_checked_against_diacritics(self):
        reverse = {glyph: token for token, glyph in DIACRITICS.items()}
        reverse["\N{DEVANAGARI VOWEL SIGN CANDRA E}"] = "a"
        with pytest.raises(ConfigurationError, match="diacritics"):
            self._build(reverse_diacritics=reverse)

    def test_valid_reverse_table_accepted(self):
        reverse = {glyph: token for token, glyph in FINALS.items()}
        tables = self._build(reverse_finals=reverse)
        assert dict(tables.reverse_finals) == reverse

    def test_missing_prefix(self):
        # "ks" is not a token, so "ksh" could never be read
        with pytest.raises(ConfigurationError, match="prefix"):
            self._build(consonants=_with(CONSONANTS, ksh="\N{DEVANAGARI LETTER QA}"))

    def test_prefix_across_tables_is_enough(self):
        # "a" is a vowel, so the consonant "ax" is reachable
        tables = self._build(consonants=_with(CONSONANTS, ax="\N{DEVANAGARI LETTER QA}"))
        assert "ax" in tables.tokens

    def test_duplicate_glyph(self):
        with pytest.raises(ConfigurationError, match="both"):
            self._build(consonants=_with(CONSONANTS, w="व"))

    def test_diacritic_without_vowel(self):
        with pytest.raises(ConfigurationError, match="without a matching vowel"):
            self._build(diacritics=_with(DIACRITICS, x="ॅ"))

    def test_vowel_without_diacritic(self):
        with pytest.raises(ConfigurationError, match="without a diacritic"):
            self._build(diacritics=_with(DIACRITICS, ai=None))

    def test_inherent_not_a_vowel(self):
        with pytest.raises(ConfigurationError, match="Inherent"):
            self._build(inherent="x")

    def test_virama_must_be_one_character(self):
        with pytest.raises(ConfigurationError, match="Virama"):
            self._build(virama="््")

    def test_converter_raises_at_construction(self):
        with pytest.raises(ConfigurationError):
            Converter.from_scheme("iast", consonants=_with(CONSONANTS, w="व"))
