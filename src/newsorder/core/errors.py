"""newsorder error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Extraction
- 4xxx: Ordering
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

    # Extraction (3xxx)
    EXTRACTION_UNSUPPORTED_LANGUAGE = 3001
    EXTRACTION_GRAMMAR_UNAVAILABLE = 3002
    EXTRACTION_READ_FAILED = 3003

    # Ordering (4xxx)
    ORDERING_INVALID_SCOPE = 4001


@dataclass(frozen=True, slots=True)
class NewsOrderError(Exception):
    """Base error with structured context for reports."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
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


class ConfigError(NewsOrderError):
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


class ExtractionError(NewsOrderError):
    """Errors raised while turning source text into scopes."""

    @classmethod
    def unsupported_language(cls, path: str, extension: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACTION_UNSUPPORTED_LANGUAGE,
            message=f"Unsupported file extension '{extension}': {path}",
            details={"path": path, "extension": extension},
        )

    @classmethod
    def grammar_unavailable(cls, language: str, reason: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACTION_GRAMMAR_UNAVAILABLE,
            message=f"Tree-sitter grammar for {language} is not available: {reason}",
            details={"language": language, "reason": reason},
        )

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACTION_READ_FAILED,
            message=f"Failed to read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class OrderingError(NewsOrderError):
    """Structurally invalid input handed to the ordering core."""

    @classmethod
    def invalid_scope(cls, scope_name: str, reason: str) -> "OrderingError":
        return cls(
            code=ErrorCode.ORDERING_INVALID_SCOPE,
            message=f"Invalid scope '{scope_name}': {reason}",
            details={"scope": scope_name, "reason": reason},
        )
