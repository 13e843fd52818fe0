"""Tests for rhyme statistics and well-formedness checks."""

import unicodedata

import pytest

from deva_converter.core.analysis import is_well_formed, rhyme_counts
from deva_converter.core.ir import Aksara, AksaraBuilder, RawToken


def _nfd(text):
    return unicodedata.normalize("NFD", text)


class TestRhymeCounts:
    """Counting vowel + final rhymes."""

    def test_counts(self, iast):
        counts = rhyme_counts(iast.latin_to_aksara("rāmaḥ rāmaḥ vanam"))
        assert counts[_nfd("ā")] == 2
        assert counts[_nfd("aḥ")] == 2
        assert counts["a"] == 2

    def test_onset_only_and_raw_skipped(self, iast):
        counts = rhyme_counts(iast.latin_to_aksara("vāk x"))
        assert dict(counts) == {_nfd("ā"): 1}

    def test_same_for_both_scripts(self, iast):
        latin = rhyme_counts(iast.latin_to_aksara("buddhaḥ"))
        deva = rhyme_counts(iast.devanagari_to_aksara("बुद्धः"))
        assert latin == deva

    def test_empty(self):
        assert not rhyme_counts([])


class TestAksaraShape:
    """Shape strings and their validity."""

    @pytest.mark.parametrize("aksara,shape,valid", [
        (Aksara(onset=("k",)), "C", True),
        (Aksara(onset=("k", "r")), "CC", True),
        (Aksara(onset=("k",), vowel="a"), "CV", True),
        (Aksara(onset=("k",), vowel="a", final="m"), "CVF", True),
        (Aksara(vowel="a"), "V", True),
        (Aksara(vowel="a", final="m"), "VF", True),
        (Aksara(), "", False),
        (Aksara(final="m"), "F", False),
        (Aksara(onset=("k",), final="m"), "CF", False),
    ])
    def test_shapes(self, aksara, shape, valid):
        assert aksara.shape == shape
        assert aksara.has_valid_shape() is valid

    def test_rhyme(self):
        assert Aksara(onset=("k",), vowel="a", final="m").rhyme == ("a", "m")
        assert Aksara(vowel="i").rhyme == ("i",)
        assert Aksara(onset=("k",)).rhyme is None

    def test_builder_requires_onset_or_vowel(self):
        with pytest.raises(ValueError):
            AksaraBuilder(final="m").build()


class TestWellFormed:
    """is_well_formed() over whole sequences."""

    def test_parsed_text_is_well_formed(self, iast):
        elements = iast.latin_to_aksara("ḥ dhrauḥ vāk x")
        assert is_well_formed(elements, iast.tables)

    def test_malformed_shape(self):
        assert not is_well_formed([Aksara(onset=("k",), final="m")])

    def test_raw_tokens_ignored(self):
        assert is_well_formed([RawToken("?")])

    def test_token_membership_checked_with_tables(self, iast):
        foreign = Aksara(onset=("q",), vowel="a")
        assert is_well_formed([foreign])
        assert not is_well_formed([foreign], iast.tables)

    def test_final_membership(self, iast):
        assert not Aksara(vowel="a", final="k").is_valid(iast.tables)
        assert Aksara(vowel="a", final=_nfd("ḥ")).is_valid(iast.tables)
