"""Tests for config/models.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sctags.config.models import DiscoveryConfig, LogOutputConfig, SctagsConfig, TagsConfig


class TestTagsConfig:
    def test_defaults(self) -> None:
        config = TagsConfig()

        assert config.output == "tags"
        assert config.language == "scala"
        assert not config.relative_paths
        assert config.emit_qualified

    @pytest.mark.parametrize("language", ["", "sca\tla", "a:b"])
    def test_rejects_language_breaking_line_format(self, language: str) -> None:
        with pytest.raises(ValidationError):
            TagsConfig(language=language)


class TestDiscoveryConfig:
    def test_extensions_normalized(self) -> None:
        config = DiscoveryConfig(extensions=[".Scala", "sc", "."])

        assert config.extensions == ["scala", "sc"]

    @pytest.mark.parametrize("size", [0, -5])
    def test_rejects_non_positive_max_size(self, size: int) -> None:
        with pytest.raises(ValidationError):
            DiscoveryConfig(max_file_size_mb=size)


class TestLogOutputConfig:
    def test_console_destinations_pass_through(self) -> None:
        assert LogOutputConfig(destination="stdout").destination == "stdout"

    def test_relative_file_destination_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(destination="logs/sctags.log")


class TestSctagsConfig:
    def test_sections_present(self) -> None:
        config = SctagsConfig()

        assert config.logging.level == "WARNING"
        assert len(config.logging.outputs) == 1
        assert config.discovery.include_dirs == []
