"""Shared test fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts/ to sys.path so we can import utils and the table generator
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from utils import SAMPLES  # noqa: E402

from runedfa.tables import TEXT, UTF8, WTF8, Tables  # noqa: E402

ALL_TABLES: list[Tables] = [UTF8, WTF8, TEXT]


@pytest.fixture(params=ALL_TABLES, ids=lambda t: t.name)
def tables(request: pytest.FixtureRequest) -> Tables:
    """Each table set in turn."""
    return request.param


@pytest.fixture(params=list(SAMPLES), ids=list(SAMPLES))
def sample(request: pytest.FixtureRequest) -> str:
    """Each five-codepoint sample string in turn."""
    return SAMPLES[request.param]
