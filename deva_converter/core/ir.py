"""Intermediate representation: aksaras and pass-through tokens.

WHY: Latin and Devanagari text are segmented differently (Latin spells the
inherent vowel, Devanagari hides it; Devanagari marks clusters with virama,
Latin just juxtaposes consonants). Both aksarizers therefore produce the
same syllable-level form, and both renderers consume it. This decouples
parsing from rendering in either direction.

HOW: Three types:
  Aksara          immutable syllable: onset consonants, vowel, final
  AksaraBuilder   mutable record filled in by an aksarizer state machine
  RawToken        input that could not be part of an aksara, kept verbatim

RULES:
- An aksara sequence is a list of ``Aksara | RawToken``
- Tokens stored in an Aksara are Latin tokens (case-folded unless the
  scheme is case-sensitive), never Devanagari glyphs
- Valid shapes are C+, C+V, C+VF, V, VF (C onset consonant, V vowel,
  F final); empty, F and C+F are malformed
- Onset-only (C+) is how a virama-closed cluster is represented
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple, Union

if TYPE_CHECKING:
    from deva_converter.core.tables import SchemeTables


@dataclass(frozen=True)
class Aksara:
    """One Sanskrit syllable unit (akṣara).

    Attributes:
        onset: Consonant tokens in order, or None for a vowel-initial aksara.
        vowel: Vowel token, or None for a bare consonant cluster.
        final: Final token (anusvara, visarga, ...), or None.
    """

    onset: Optional[Tuple[str, ...]] = None
    vowel: Optional[str] = None
    final: Optional[str] = None

    @property
    def shape(self) -> str:
        """Structural signature, e.g. ``"CCVF"`` for ``dhrauḥ``."""
        s = "C" * len(self.onset or ())
        if self.vowel:
            s += "V"
        if self.final:
            s += "F"
        return s

    @property
    def rhyme(self) -> Optional[Tuple[str, ...]]:
        """Vowel plus optional final, or None when there is no vowel.

        The aksara is assumed to be well-formed.
        """
        if self.final:
            return (self.vowel, self.final)
        if self.vowel:
            return (self.vowel,)
        return None

    def has_valid_shape(self) -> bool:
        shape = self.shape
        # empty, F and C+F are the malformed shapes
        return not (shape == "" or (shape.endswith("F") and "V" not in shape))

    def is_valid(self, tables: Optional[SchemeTables] = None) -> bool:
        """Check structure and, when tables are given, token membership.

        WHY: Aksaras built by the aksarizers are always well-formed, but
        hand-built ones (or ones carried over between converters with
        different schemes) may not be.

        RULES:
        - Shape must match C+(VF?)? or VF?
        - With tables: onset tokens must be consonants, the vowel a vowel,
          the final a final
        """
        if not self.has_valid_shape():
            return False
        if tables is None:
            return True
        if self.onset and any(c not in tables.consonants for c in self.onset):
            return False
        if self.vowel is not None and self.vowel not in tables.vowels:
            return False
        if self.final is not None and self.final not in tables.finals:
            return False
        return True


@dataclass(frozen=True)
class RawToken:
    """A token or character passed through unchanged."""

    text: str

    def __str__(self) -> str:
        return self.text


Element = Union[Aksara, RawToken]


@dataclass
class AksaraBuilder:
    """Mutable aksara under construction.

    WHY: The state machines grow an aksara one input unit at a time
    (append a cluster consonant, set the vowel, set the final) and only
    know it is complete when the next unit arrives.

    HOW: Fields mirror Aksara. build() freezes the record into an Aksara.
    """

    onset: List[str] = field(default_factory=list)
    vowel: Optional[str] = None
    final: Optional[str] = None

    def build(self) -> Aksara:
        if not self.onset and self.vowel is None:
            raise ValueError(
                "Cannot finalize an aksara with neither onset nor vowel "
                "(final={!r})".format(self.final)
            )
        return Aksara(
            onset=tuple(self.onset) if self.onset else None,
            vowel=self.vowel,
            final=self.final,
        )
