"""FastAPI application exposing the converter over HTTP.

WHY: Web front ends and other services (editors, corpus pipelines) need
conversion without embedding Python. FastAPI gives request validation
and OpenAPI documentation for free.

HOW: Every request builds its own Converter from the requested scheme
and strict-mode options. Converters are cheap to build and immutable, so
no state is shared between requests. Strict-mode warnings are collected
through the converter's on_warning callback and returned in the response.

RULES:
- All endpoints have OpenAPI descriptions on every response
- Error responses use the ErrorResponse schema
- ConfigurationError (malformed options) maps to 400
- The server's default allow-set (DEVA_ALLOW) is always in effect;
  request-level allow entries extend it
"""

from __future__ import annotations

import logging
import unicodedata
from typing import List, Optional

from fastapi import FastAPI, HTTPException

from deva_converter import __version__
from deva_converter.config import API_HOST, API_PORT, DEFAULT_ALLOW, DEFAULT_SCHEME
from deva_converter.core.converter import Converter
from deva_converter.core.tables import ConfigurationError
from deva_converter.renderers.aksara_json import element_to_dict
from deva_converter.schemes import SCHEMES
from deva_converter.server.models import (
    AksaraRequest,
    AksaraResponse,
    ConvertRequest,
    ConvertResponse,
    Direction,
    ElementModel,
    ErrorResponse,
    HealthResponse,
    SchemeInfo,
    Source,
)

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Deva Converter API",
    description=(
        "REST API for converting Sanskrit text between Latin transliteration "
        "(IAST, Harvard-Kyoto, ISO 15919) and Devanagari, and for inspecting "
        "the aksara (syllable) segmentation of a text."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_converter(
    scheme: Optional[str],
    strict: bool = False,
    allow: Optional[List[str]] = None,
    warnings: Optional[List[str]] = None,
) -> Converter:
    """Build a per-request converter, mapping bad options to HTTP 400."""
    merged_allow = set(DEFAULT_ALLOW)
    merged_allow.update(allow or ())
    on_warning = warnings.append if warnings is not None else None
    try:
        return Converter.from_scheme(
            scheme if scheme is not None else DEFAULT_SCHEME,
            strict=strict,
            allow=merged_allow,
            on_warning=on_warning,
        )
    except ConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


# ---------------------------------------------------------------------------
# Endpoints: Conversion
# ---------------------------------------------------------------------------


@app.post(
    "/convert",
    response_model=ConvertResponse,
    tags=["conversion"],
    summary="Convert text between Latin and Devanagari",
    description=(
        "Converts Latin transliteration to Devanagari ('to_deva') or "
        "Devanagari to Latin ('to_latin'). In strict mode, input that is "
        "not part of the scheme is listed in 'warnings'; it is still passed "
        "through unchanged in the output."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid converter options"},
    },
)
async def convert(request: ConvertRequest) -> ConvertResponse:
    warnings: List[str] = []
    converter = _build_converter(request.scheme, request.strict, request.allow, warnings)

    if request.direction == Direction.to_deva:
        output = converter.to_deva(request.text)
    else:
        output = converter.to_latin(request.text)
        if request.nfc:
            output = unicodedata.normalize("NFC", output)

    logger.debug(
        "Converted %d chars (%s, scheme=%s, %d warnings)",
        len(request.text), request.direction.value, converter.scheme_name, len(warnings),
    )
    return ConvertResponse(output=output, scheme=converter.scheme_name, warnings=warnings)


@app.post(
    "/aksaras",
    response_model=AksaraResponse,
    tags=["conversion"],
    summary="Segment text into aksaras",
    description=(
        "Parses Latin or Devanagari text and returns its aksara sequence: "
        "onset consonants, vowel and final of every syllable, plus raw "
        "elements for input outside the scheme."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid converter options"},
    },
)
async def aksaras(request: AksaraRequest) -> AksaraResponse:
    converter = _build_converter(request.scheme)

    if request.source == Source.latin:
        elements = converter.latin_to_aksara(request.text)
    else:
        elements = converter.devanagari_to_aksara(request.text)

    return AksaraResponse(
        scheme=converter.scheme_name,
        elements=[ElementModel(**element_to_dict(e, converter.tables)) for e in elements],
    )


# ---------------------------------------------------------------------------
# Endpoints: Schemes
# ---------------------------------------------------------------------------


@app.get(
    "/schemes",
    response_model=List[SchemeInfo],
    tags=["schemes"],
    summary="List available transliteration schemes",
    description="Returns all built-in schemes with their identifiers and case sensitivity.",
)
async def list_schemes() -> List[SchemeInfo]:
    return [
        SchemeInfo(
            key=key,
            name=scheme.title,
            case_sensitive=scheme.case_sensitive,
            description=scheme.description,
        )
        for key, scheme in sorted(SCHEMES.items())
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the deva-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
