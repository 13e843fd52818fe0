"""Shared test fixtures for the deva_converter test suite.

WHY: Most test modules need a converter for one of the built-in schemes,
sometimes in strict mode with its warnings captured. Centralizing the
fixtures keeps every module on the same configuration.

HOW: Pytest fixtures build fresh converters per test. Strict converters
collect their warnings into a list that the test can inspect.

RULES:
- Converters are immutable, but fixtures are function-scoped anyway so a
  test never sees another test's warnings
- Latin expectations in tests are normalized to NFD before comparing
"""

from typing import List

import pytest

from deva_converter import Converter
from deva_converter.schemes.base import DANDA, DOUBLE_DANDA


@pytest.fixture
def iast():
    """Default converter: IAST, non-strict."""
    return Converter()


@pytest.fixture
def hk():
    """Harvard-Kyoto converter (case-sensitive)."""
    return Converter.from_scheme("hk")


@pytest.fixture
def iso():
    """ISO 15919 converter."""
    return Converter.from_scheme("iso15919")


@pytest.fixture
def warnings() -> List[str]:
    """List receiving strict-mode warnings from the strict fixture."""
    return []


@pytest.fixture
def strict(warnings):
    """Strict IAST converter with danda and double danda allowed."""
    return Converter.from_scheme(
        "iast",
        strict=True,
        allow={DANDA, DOUBLE_DANDA},
        on_warning=warnings.append,
    )
