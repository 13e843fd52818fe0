"""Latin transliteration renderer.

Latin spells every part of an aksara explicitly, so rendering is plain
concatenation: onset tokens, vowel, final. Output is in NFD form, like the
tokens it is made of.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from deva_converter.core.ir import Aksara, Element
from deva_converter.core.tables import SchemeTables
from deva_converter.renderers.base import BaseRenderer


def render_latin(elements: Iterable[Element]) -> str:
    """Render an aksara sequence as Latin transliteration."""
    parts: List[str] = []
    for element in elements:
        if isinstance(element, Aksara):
            if element.onset:
                parts.extend(element.onset)
            if element.vowel is not None:
                parts.append(element.vowel)
            if element.final is not None:
                parts.append(element.final)
        else:
            parts.append(str(element))
    return "".join(parts)


class LatinRenderer(BaseRenderer):
    """Renderer producing Latin transliteration in the converter's scheme."""

    @property
    def name(self) -> str:
        return "Latin"

    def render(self, elements: Iterable[Element], tables: Optional[SchemeTables] = None) -> str:
        return render_latin(elements)
