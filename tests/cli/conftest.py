"""Shared fixtures for CLI tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """A small Scala project as the working directory, isolated from user config."""
    for key in [k for k in os.environ if k.upper().startswith("SCTAGS__")]:
        monkeypatch.delenv(key)
    src = tmp_path / "src" / "main" / "scala"
    src.mkdir(parents=True)
    (src / "Greeter.scala").write_text(
        "package demo\n\nobject Greeter {\n  def hello = \"hi\"\n  private def secret = 1\n}\n"
    )
    (src / "Shape.scala").write_text("package demo\n\ncase class Shape(sides: Int)\n")
    (tmp_path / "target").mkdir()
    (tmp_path / "target" / "Generated.scala").write_text("object Generated\n")
    monkeypatch.chdir(tmp_path)
    with patch("sctags.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
        yield tmp_path
