"""The Converter facade: Latin ↔ Devanagari via aksaras.

WHY: Callers want two things, ``to_deva(text)`` and ``to_latin(text)``,
while power users want the intermediate aksaras to inspect or edit before
rendering. The Converter exposes both levels over one validated,
immutable set of tables.

HOW: Construction validates the configuration into SchemeTables (raising
ConfigurationError on bad tables) and fixes the strict-mode warning policy.
Each public method is then a pure function of its input:
  tokenize            Latin text → tokens
  latin_to_aksara     Latin text or tokens → aksaras
  devanagari_to_aksara Devanagari text → aksaras
  to_devanagari       Latin text or aksaras → Devanagari
  to_latin            Devanagari text or aksaras → Latin

RULES:
- A converter is immutable after construction and safe to share
- String input is parsed; any other sequence is taken as already parsed
- Latin output is in NFD form
- Warnings go to ``on_warning`` when given, else to the module logger
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import FrozenSet, List, Optional, Sequence, Union

from deva_converter.core.aksarizer import (
    InvalidInputReporter,
    devanagari_to_aksara,
    latin_to_aksara,
)
from deva_converter.core.ir import Element
from deva_converter.core.tables import ConverterConfig, SchemeTables, build_config
from deva_converter.core.tokenizer import tokenize
from deva_converter.renderers import RENDERERS
from deva_converter.renderers.devanagari import render_deva
from deva_converter.renderers.latin import render_latin
from deva_converter.schemes import Scheme

logger = logging.getLogger(__name__)


class Converter:
    """Convert between Latin transliteration and Devanagari.

    Example::

        d = Converter()
        d.to_deva("Kāmasūtra")    # 'कामसूत्र'
        d.to_latin("आसीद्राजा")   # 'āsīdrājā' (NFD)

        # strict mode, danda allowed, 'w' instead of 'v'
        consonants = dict(IAST.consonants)
        consonants["w"] = consonants.pop("v")
        d = Converter.from_scheme(
            "iast", strict=True, allow={"।"}, consonants=consonants,
        )
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        *,
        on_warning: Callable[[str], None] | None = None,
    ) -> None:
        if config is None:
            config = build_config()
        self.config = config
        self.tables = SchemeTables.from_config(config)
        self._reporter = InvalidInputReporter(
            strict=config.strict,
            allow=frozenset(config.allow),
            on_warning=on_warning,
        )
        logger.debug(
            "Converter ready: scheme=%s, %d tokens, strict=%s, case_sensitive=%s",
            config.scheme_name, len(self.tables.tokens), config.strict, config.case_sensitive,
        )

    @classmethod
    def from_scheme(
        cls,
        scheme: Union[Scheme, str, None] = None,
        *,
        on_warning: Callable[[str], None] | None = None,
        **overrides,
    ) -> Converter:
        """Build a converter from a named scheme plus config overrides.

        Unknown scheme names fall back to the default scheme with a single
        logged warning; malformed overrides raise ConfigurationError.
        """
        return cls(build_config(scheme, **overrides), on_warning=on_warning)

    @property
    def scheme_name(self) -> str:
        return self.config.scheme_name

    @property
    def strict(self) -> bool:
        return self.config.strict

    @property
    def allow(self) -> FrozenSet[str]:
        return self._reporter.allow

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def tokenize(self, text: str) -> List[str]:
        """Split Latin text into scheme tokens (maximal munch, case kept)."""
        return tokenize(text, self.tables.tokens, self.tables.fold)

    def latin_to_aksara(self, source: Union[str, Sequence[str]]) -> List[Element]:
        """Convert Latin text, or a token list, into aksaras."""
        tokens = self.tokenize(source) if isinstance(source, str) else source
        return latin_to_aksara(tokens, self.tables, self._reporter)

    def devanagari_to_aksara(self, text: str) -> List[Element]:
        """Convert Devanagari text into aksaras."""
        return devanagari_to_aksara(text, self.tables, self._reporter)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_devanagari(self, source: Union[str, Sequence[Element]]) -> str:
        """Convert Latin text, or an aksara sequence, to Devanagari."""
        elements = self.latin_to_aksara(source) if isinstance(source, str) else source
        return render_deva(elements, self.tables)

    to_deva = to_devanagari

    def to_latin(self, source: Union[str, Sequence[Element]]) -> str:
        """Convert Devanagari text, or an aksara sequence, to Latin."""
        elements = self.devanagari_to_aksara(source) if isinstance(source, str) else source
        return render_latin(elements)

    def render(self, elements: Sequence[Element], renderer: str = "devanagari") -> str:
        """Render an aksara sequence with any registered renderer.

        Raises:
            ValueError: If the renderer name is not registered.
        """
        if renderer not in RENDERERS:
            raise ValueError(
                "Unknown renderer '{}'. Available: {}".format(
                    renderer, ", ".join(sorted(RENDERERS))
                )
            )
        return RENDERERS[renderer]().render(elements, self.tables)
