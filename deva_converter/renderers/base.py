"""Abstract base renderer.

WHY: Every output (Devanagari text, Latin text, JSON analysis) consumes the
same aksara sequence. A shared interface lets the Converter, the CLI and
the HTTP API pick a renderer by name and treat them all alike.

HOW: BaseRenderer is an ABC with a ``name`` property and a ``render()``
method taking the aksara sequence and the converter's tables.

RULES:
- Subclasses MUST implement ``name`` and ``render()``
- RawToken elements are always emitted verbatim
- Aksaras are assumed well-formed; text renderers render malformed ones
  from whatever fields are present, schema-validated renderers reject them

To add a new renderer:
1. Create a new file in renderers/
2. Subclass BaseRenderer
3. Implement render() and name
4. Register it in RENDERERS in renderers/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from deva_converter.core.ir import Element
from deva_converter.core.tables import SchemeTables


class BaseRenderer(ABC):
    """Abstract base for all renderers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable renderer name, e.g. 'Devanagari'."""

    @property
    def media_type(self) -> str:
        return "text/plain"

    @abstractmethod
    def render(self, elements: Iterable[Element], tables: SchemeTables) -> str:
        """Turn an aksara sequence into a string.

        Args:
            elements: Aksaras and RawTokens, e.g. from an aksarizer.
            tables: Tables of the converter that renders.

        Returns:
            The rendered text.
        """
