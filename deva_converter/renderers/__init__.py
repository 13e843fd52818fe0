"""Renderer registry.

WHY: The CLI and the HTTP API select an output by name. A central dict
makes adding a renderer one import plus one line.

HOW: RENDERERS maps string keys to renderer *classes*. Callers instantiate
as needed: ``renderer = RENDERERS["devanagari"]()``.

RULES:
- Keys are snake_case identifiers (used by Converter.render)
- Every renderer listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deva_converter.renderers.aksara_json import AksaraJSONRenderer
from deva_converter.renderers.devanagari import DevanagariRenderer, render_deva
from deva_converter.renderers.latin import LatinRenderer, render_latin

if TYPE_CHECKING:
    from deva_converter.renderers.base import BaseRenderer

RENDERERS: dict[str, type[BaseRenderer]] = {
    "devanagari": DevanagariRenderer,
    "latin": LatinRenderer,
    "aksara_json": AksaraJSONRenderer,
}

__all__ = ["RENDERERS", "render_deva", "render_latin"]
