"""JSON renderer exposing the aksara structure.

WHY: The aksara representation is useful in its own right, for syllable
statistics, metrical analysis, or checking how a text was segmented.
This renderer dumps it in a stable, schema-validated JSON form.

HOW: Each element becomes one JSON object:
  {"type": "aksara", "onset": [...] | null, "vowel": ... | null,
   "final": ... | null, "shape": "CCVF", "latin": "...", "devanagari": "..."}
  {"type": "raw", "text": "..."}
The array is validated with jsonschema before it is serialized.

RULES:
- Output is a JSON array in input order
- Strings are written unescaped (ensure_ascii=False)
- Token fields keep the NFD tokens; only "latin" is NFC-composed
- Validate against aksara_json_schema.json before returning; raise on
  failure (malformed aksaras built by hand are rejected here)
"""

from __future__ import annotations

import json
import unicodedata
from pathlib import Path
from typing import Any, Dict, Iterable, List

import jsonschema

from deva_converter.core.ir import Aksara, Element
from deva_converter.core.tables import SchemeTables
from deva_converter.renderers.base import BaseRenderer
from deva_converter.renderers.devanagari import render_deva
from deva_converter.renderers.latin import render_latin

_SCHEMA_PATH = Path(__file__).resolve().parent / "aksara_json_schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the aksara JSON schema from disk."""
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def element_to_dict(element: Element, tables: SchemeTables) -> Dict[str, Any]:
    """Convert one sequence element to its JSON-ready dict."""
    if not isinstance(element, Aksara):
        return {"type": "raw", "text": str(element)}
    return {
        "type": "aksara",
        "onset": list(element.onset) if element.onset else None,
        "vowel": element.vowel,
        "final": element.final,
        "shape": element.shape,
        "latin": unicodedata.normalize("NFC", render_latin([element])),
        "devanagari": render_deva([element], tables),
    }


class AksaraJSONRenderer(BaseRenderer):
    """Renderer producing a JSON array of aksara objects."""

    @property
    def name(self) -> str:
        return "Aksara JSON"

    @property
    def media_type(self) -> str:
        return "application/json"

    def render(self, elements: Iterable[Element], tables: SchemeTables) -> str:
        """Render elements as a JSON array.

        Raises:
            jsonschema.ValidationError: If an element does not conform to
                the aksara schema (e.g. an aksara with a final but no vowel).
        """
        data: List[Dict[str, Any]] = [element_to_dict(e, tables) for e in elements]
        jsonschema.validate(instance=data, schema=_get_schema())
        return json.dumps(data, ensure_ascii=False, indent=2)
