"""Tests for the FastAPI conversion API.

WHY: Validates that all endpoints behave correctly: happy paths in both
directions, strict-mode warnings, scheme fallback, request validation
and error responses.

HOW: Each test exercises one endpoint behavior through the FastAPI
TestClient (synchronous, in-process). Configuration errors are injected
by patching the converter constructor, since no request field can
produce a malformed table on its own.

RULES:
- All tests use the FastAPI TestClient
- Each test is independent; the app holds no state between requests
- Tests cover: happy paths, 400 bad configuration, 422 invalid request
"""

from __future__ import annotations

import unicodedata
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from deva_converter import __version__
from deva_converter.core.tables import ConfigurationError
from deva_converter.server.app import app


@pytest.fixture
def client():
    return TestClient(app)


# ---------------------------------------------------------------------------
# POST /convert
# ---------------------------------------------------------------------------


class TestConvert:
    """POST /convert."""

    def test_to_deva(self, client):
        resp = client.post("/convert", json={"text": "kāmasūtra"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["output"] == "कामसूत्र"
        assert body["scheme"] == "iast"
        assert body["warnings"] == []

    def test_to_latin_nfc(self, client):
        resp = client.post("/convert", json={"text": "आसीद्राजा", "direction": "to_latin"})
        assert resp.status_code == 200
        assert resp.json()["output"] == unicodedata.normalize("NFC", "āsīdrājā")

    def test_to_latin_nfd(self, client):
        resp = client.post(
            "/convert",
            json={"text": "आसीद्राजा", "direction": "to_latin", "nfc": False},
        )
        assert resp.json()["output"] == unicodedata.normalize("NFD", "āsīdrājā")

    def test_scheme(self, client):
        resp = client.post("/convert", json={"text": "kRSNa", "scheme": "hk"})
        assert resp.json() == {"output": "कृष्ण", "scheme": "hk", "warnings": []}

    def test_unknown_scheme_falls_back(self, client):
        resp = client.post("/convert", json={"text": "rāma", "scheme": "klingon"})
        assert resp.status_code == 200
        assert resp.json()["scheme"] == "iast"
        assert resp.json()["output"] == "राम"

    def test_strict_warnings(self, client):
        resp = client.post("/convert", json={"text": "rāma x q", "strict": True})
        assert resp.json()["warnings"] == [
            "Invalid token 'x' read",
            "Invalid token 'q' read",
        ]
        assert resp.json()["output"] == "राम x q"

    def test_strict_allow(self, client):
        resp = client.post(
            "/convert",
            json={"text": "rāma x।", "strict": True, "allow": ["x"]},
        )
        assert resp.json()["warnings"] == []

    def test_warnings_ignored_when_not_strict(self, client):
        resp = client.post("/convert", json={"text": "rāma x"})
        assert resp.json()["warnings"] == []

    def test_invalid_direction(self, client):
        resp = client.post("/convert", json={"text": "a", "direction": "to_braille"})
        assert resp.status_code == 422

    def test_missing_text(self, client):
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    def test_configuration_error_is_400(self, client):
        with patch(
            "deva_converter.server.app.Converter.from_scheme",
            side_effect=ConfigurationError("Virama must be a single character"),
        ):
            resp = client.post("/convert", json={"text": "a"})
        assert resp.status_code == 400
        assert resp.json() == {"detail": "Virama must be a single character"}


# ---------------------------------------------------------------------------
# POST /aksaras
# ---------------------------------------------------------------------------


class TestAksaras:
    """POST /aksaras."""

    def test_latin(self, client):
        resp = client.post("/aksaras", json={"text": "dhrauḥ vāk"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["scheme"] == "iast"
        shapes = [e["shape"] for e in body["elements"]]
        assert shapes == ["CCVF", None, "CV", "C"]
        assert body["elements"][1] == {
            "type": "raw",
            "onset": None,
            "vowel": None,
            "final": None,
            "shape": None,
            "latin": None,
            "devanagari": None,
            "text": " ",
        }

    def test_devanagari(self, client):
        resp = client.post("/aksaras", json={"text": "बुद्धः", "source": "devanagari"})
        elements = resp.json()["elements"]
        assert [e["onset"] for e in elements] == [["b"], ["d", "dh"]]
        assert elements[1]["vowel"] == "a"
        assert elements[1]["latin"] == unicodedata.normalize("NFC", "ddhaḥ")

    def test_invalid_source(self, client):
        resp = client.post("/aksaras", json={"text": "a", "source": "tamil"})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# GET /schemes, GET /health
# ---------------------------------------------------------------------------


class TestSchemes:
    """GET /schemes."""

    def test_lists_builtin_schemes(self, client):
        resp = client.get("/schemes")
        assert resp.status_code == 200
        schemes = resp.json()
        assert [s["key"] for s in schemes] == ["hk", "iast", "iso15919"]
        by_key = {s["key"]: s for s in schemes}
        assert by_key["hk"]["case_sensitive"] is True
        assert by_key["iast"]["case_sensitive"] is False
        assert by_key["iast"]["name"] == "IAST"


class TestHealth:
    """GET /health."""

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}

    def test_openapi_docs(self, client):
        resp = client.get("/openapi.json")
        assert resp.status_code == 200
        paths = resp.json()["paths"]
        assert {"/convert", "/aksaras", "/schemes", "/health"} <= set(paths)
