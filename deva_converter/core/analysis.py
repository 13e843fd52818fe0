"""Statistics over aksara sequences.

The aksara representation makes syllable-level questions cheap to answer,
e.g. how often each rhyme occurs in a text (useful for metrics and for
spotting transliteration errors).
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from deva_converter.core.ir import Aksara, Element
from deva_converter.core.tables import SchemeTables


def rhyme_counts(elements: Iterable[Element]) -> Counter:
    """Count distinct rhymes (vowel + optional final) in a sequence.

    Rhymes are keyed by their joined Latin tokens, e.g. ``"au"`` or
    ``"ah\\u0323"``. Aksaras without a vowel and RawTokens are skipped.
    """
    counts = Counter()  # type: Counter
    for element in elements:
        if isinstance(element, Aksara) and element.rhyme is not None:
            counts["".join(element.rhyme)] += 1
    return counts


def is_well_formed(elements: Iterable[Element], tables: Optional[SchemeTables] = None) -> bool:
    """True when every aksara in the sequence passes Aksara.is_valid()."""
    return all(
        element.is_valid(tables)
        for element in elements
        if isinstance(element, Aksara)
    )
