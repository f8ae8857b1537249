"""sctags error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Source / parse
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Source / parse (3xxx)
    PARSE_FAILURE = 3001
    SOURCE_READ_ERROR = 3002
    GRAMMAR_UNAVAILABLE = 3003


@dataclass(frozen=True, slots=True)
class SctagsError(Exception):
    """Base error with structured context for diagnostics and JSON output."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PARSE_FAILURE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(SctagsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ParseFailure(SctagsError):
    """A source file could not be turned into a syntax tree.

    Recoverable: the file contributes no tags, other files are unaffected.
    """

    @property
    def path(self) -> str:
        return str(self.details.get("path", ""))

    @property
    def line(self) -> int:
        return int(self.details.get("line", 0))

    @property
    def column(self) -> int:
        return int(self.details.get("column", 0))

    @property
    def diagnostic(self) -> str:
        """Compiler-style ``path:line:column: reason`` line."""
        return f"{self.path}:{self.line}:{self.column}: {self.details.get('reason', self.message)}"

    @classmethod
    def at(cls, path: str, line: int, column: int, reason: str) -> "ParseFailure":
        return cls(
            code=ErrorCode.PARSE_FAILURE,
            message=f"Failed to parse {path} at {line}:{column}: {reason}",
            details={"path": path, "line": line, "column": column, "reason": reason},
        )


class SourceReadError(SctagsError):
    """A source file could not be read or decoded."""

    @property
    def path(self) -> str:
        return str(self.details.get("path", ""))

    @property
    def diagnostic(self) -> str:
        return f"{self.path}: {self.details.get('reason', self.message)}"

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "SourceReadError":
        return cls(
            code=ErrorCode.SOURCE_READ_ERROR,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class GrammarUnavailableError(SctagsError):
    """The tree-sitter grammar for the source language cannot be loaded."""

    @classmethod
    def missing(cls, module: str, reason: str) -> "GrammarUnavailableError":
        return cls(
            code=ErrorCode.GRAMMAR_UNAVAILABLE,
            message=f"Grammar module '{module}' is not available: {reason}",
            details={"module": module, "reason": reason},
        )

