"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request and response model. Enums
represent closed sets (conversion direction, source script). All fields
carry descriptions for the /docs UI.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- scheme is optional everywhere; the server default applies when omitted
- ElementModel mirrors the aksara JSON renderer output exactly
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Direction(str, Enum):
    """Conversion direction for POST /convert."""

    to_deva = "to_deva"
    to_latin = "to_latin"


class Source(str, Enum):
    """Script of the input text for POST /aksaras."""

    latin = "latin"
    devanagari = "devanagari"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ConvertRequest(BaseModel):
    """Text conversion request.

    RULES:
    - strict defaults to False (no warnings collected)
    - allow extends the server's default allow-set, it does not replace it
    """

    text: str = Field(description="Input text, Latin or Devanagari depending on direction.")
    direction: Direction = Field(
        default=Direction.to_deva,
        description="'to_deva' reads Latin input, 'to_latin' reads Devanagari input.",
    )
    scheme: Optional[str] = Field(
        default=None,
        description="Transliteration scheme name (e.g. 'iast', 'hk'). Unknown names fall back to IAST.",
    )
    strict: bool = Field(
        default=False,
        description="Report input that is not part of the scheme in 'warnings'.",
    )
    allow: List[str] = Field(
        default_factory=list,
        description="Characters or tokens exempted from strict-mode warnings.",
    )
    nfc: bool = Field(
        default=True,
        description="Compose Latin output to NFC. Ignored for 'to_deva'.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"text": "kāmasūtra", "direction": "to_deva", "scheme": "iast", "strict": True},
        ]
    }}


class AksaraRequest(BaseModel):
    """Aksara segmentation request."""

    text: str = Field(description="Input text to segment into aksaras.")
    source: Source = Field(
        default=Source.latin,
        description="Script of the input text.",
    )
    scheme: Optional[str] = Field(
        default=None,
        description="Transliteration scheme name. Unknown names fall back to IAST.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ConvertResponse(BaseModel):
    """Result of a conversion."""

    output: str = Field(description="Converted text.")
    scheme: str = Field(description="Scheme actually used (after any fallback).")
    warnings: List[str] = Field(
        default_factory=list,
        description="Strict-mode warnings in input order. Empty when strict is off.",
    )


class ElementModel(BaseModel):
    """One element of an aksara sequence.

    RULES:
    - type 'aksara' fills onset/vowel/final/shape/latin/devanagari
    - type 'raw' fills text only
    """

    type: str = Field(description="'aksara' or 'raw'.")
    onset: Optional[List[str]] = Field(default=None, description="Consonant tokens, or null.")
    vowel: Optional[str] = Field(default=None, description="Vowel token, or null.")
    final: Optional[str] = Field(default=None, description="Final token, or null.")
    shape: Optional[str] = Field(default=None, description="Shape string such as 'CCVF'.")
    latin: Optional[str] = Field(default=None, description="Latin rendering (NFC).")
    devanagari: Optional[str] = Field(default=None, description="Devanagari rendering.")
    text: Optional[str] = Field(default=None, description="Pass-through text of a raw element.")


class AksaraResponse(BaseModel):
    """Aksara segmentation result."""

    scheme: str = Field(description="Scheme actually used (after any fallback).")
    elements: List[ElementModel] = Field(description="Aksaras and raw elements in input order.")


class SchemeInfo(BaseModel):
    """Description of an available transliteration scheme."""

    key: str = Field(description="Scheme identifier used in requests.")
    name: str = Field(description="Human-readable scheme name.")
    case_sensitive: bool = Field(description="Whether Latin input case is significant.")
    description: str = Field(default="", description="Short description of the scheme.")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
