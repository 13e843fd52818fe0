"""Devanagari renderer.

WHY: Turning aksaras into Devanagari is where the script's conventions get
re-applied: cluster consonants are joined with a virama, a vowel after a
consonant becomes a dependent sign, the inherent vowel becomes nothing,
and a cluster without a vowel ends in a virama.

HOW: For each aksara emit, in order:
  onset     consonant glyphs joined by virama, then the vowel's diacritic
            (empty for the inherent vowel) or a trailing virama
  vowel     independent vowel glyph when there is no onset
  final     final glyph

RULES:
- RawToken elements are appended verbatim
- Tokens missing from the tables are emitted as their Latin text so a
  malformed aksara never raises
"""

from __future__ import annotations

from typing import Iterable, List

from deva_converter.core.ir import Aksara, Element
from deva_converter.core.tables import SchemeTables
from deva_converter.renderers.base import BaseRenderer


def render_deva(elements: Iterable[Element], tables: SchemeTables) -> str:
    """Render an aksara sequence as Devanagari text."""
    consonants, vowels = tables.consonants, tables.vowels
    diacritics, finals = tables.diacritics, tables.finals
    virama = tables.virama

    parts: List[str] = []
    for element in elements:
        if not isinstance(element, Aksara):
            parts.append(str(element))
            continue

        if element.onset:
            parts.append(virama.join(consonants.get(c, c) for c in element.onset))
            if element.vowel is not None:
                parts.append(diacritics.get(element.vowel, element.vowel))
            else:
                parts.append(virama)
        elif element.vowel is not None:
            parts.append(vowels.get(element.vowel, element.vowel))

        if element.final is not None:
            parts.append(finals.get(element.final, element.final))

    return "".join(parts)


class DevanagariRenderer(BaseRenderer):
    """Renderer producing Devanagari script."""

    @property
    def name(self) -> str:
        return "Devanagari"

    def render(self, elements: Iterable[Element], tables: SchemeTables) -> str:
        return render_deva(elements, tables)
