"""Fixtures for tag tests."""

from __future__ import annotations

import pytest

from sctags.tags._internal.parsing import ScalaSyntaxParser


@pytest.fixture
def scala_parser() -> ScalaSyntaxParser:
    """Shared parser, reset so each test starts from a fresh grammar load."""
    ScalaSyntaxParser.reset()
    return ScalaSyntaxParser.get()
