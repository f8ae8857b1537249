"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags end up here)
2. Environment variables (SCTAGS__SECTION__KEY)
3. Project YAML (.sctags.yaml in the working directory)
4. Global YAML (~/.config/sctags/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    SCTAGS__<SECTION>__<KEY>=<VALUE>

Examples:
    SCTAGS__LOGGING__LEVEL=DEBUG
    SCTAGS__TAGS__OUTPUT=.tags
    SCTAGS__TAGS__RELATIVE_PATHS=true
    SCTAGS__DISCOVERY__MAX_FILE_SIZE_MB=4
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from sctags.config.constants import DEFAULT_LANGUAGE, DEFAULT_OUTPUT, SOURCE_EXTENSIONS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SCTAGS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Tag files are often regenerated from editor hooks, "
        "so the default stays quiet.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class TagsConfig(BaseModel):
    """Tag file output configuration.

    Env vars:
        SCTAGS__TAGS__OUTPUT: Tag file path (default: tags)
        SCTAGS__TAGS__LANGUAGE: Value of the language: extension field
        SCTAGS__TAGS__RELATIVE_PATHS: Write paths relative to the tag file
        SCTAGS__TAGS__EMIT_QUALIFIED: Also write Parent.member tags
    """

    output: str = Field(
        default=DEFAULT_OUTPUT,
        description="Tag file to write. Relative paths resolve against the working directory.",
    )
    language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Value written in the language: extension field of every line.",
    )
    relative_paths: bool = Field(
        default=False,
        description="Write file names relative to the directory holding the tag file, "
        "so the tag file survives moving the project.",
    )
    emit_qualified: bool = Field(
        default=True,
        description="Write qualified Parent.member tags next to the unqualified ones.",
    )

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        if not v or any(c in v for c in "\t\n:"):
            raise ValueError(f"Language marker must be a non-empty word, got {v!r}")
        return v


class DiscoveryConfig(BaseModel):
    """Source discovery configuration for directory arguments.

    Env vars:
        SCTAGS__DISCOVERY__MAX_FILE_SIZE_MB: Skip larger files
        SCTAGS__DISCOVERY__FOLLOW_SYMLINKS: Follow symlinked directories
    """

    extensions: list[str] = Field(
        default_factory=lambda: list(SOURCE_EXTENSIONS),
        description="File extensions (without dot) collected from directory arguments.",
    )
    include_dirs: list[str] = Field(
        default_factory=list,
        description="Directory names normally pruned (target, .bloop, ...) to traverse anyway.",
    )
    follow_symlinks: bool = Field(
        default=False,
        description="Follow symlinked directories. RISK: symlink cycles are not detected.",
    )
    max_file_size_mb: int = Field(
        default=10,
        description="Skip discovered files larger than this (MB). Explicit file arguments "
        "are always processed.",
    )

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower().lstrip(".") for ext in v if ext.strip(".")]

    @field_validator("max_file_size_mb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_file_size_mb must be positive, got {v}")
        return v


class SctagsConfig(BaseModel):
    """Root configuration for sctags."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tags: TagsConfig = Field(default_factory=TagsConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
