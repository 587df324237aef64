"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (NEWSORDER__SECTION__KEY)
3. Project YAML (.newsorder.yaml, or the file passed with --config)
4. Global YAML (~/.config/newsorder/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    NEWSORDER__<SECTION>__<KEY>=<VALUE>

Examples:
    NEWSORDER__LOGGING__LEVEL=DEBUG
    NEWSORDER__CHECK__CHECK_FUNCTIONS=false
    NEWSORDER__CHECK__SEVERITY=warning
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from newsorder.config.constants import MAX_FILE_SIZE_KB_MAX

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
SeverityName = Literal["error", "warning", "info", "hint"]

SUPPORTED_EXTENSIONS: tuple[str, ...] = (
    ".py",
    ".pyi",
    ".js",
    ".mjs",
    ".cjs",
    ".jsx",
    ".ts",
    ".mts",
    ".cts",
    ".tsx",
)


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

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
        NEWSORDER__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO adds a per-run summary, DEBUG one event per checked scope.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CheckConfig(BaseModel):
    """What gets checked and how violations are reported.

    Env vars:
        NEWSORDER__CHECK__CHECK_CLASSES: Check method order inside classes
        NEWSORDER__CHECK__CHECK_FUNCTIONS: Check top-level function order per file
        NEWSORDER__CHECK__SEVERITY: Severity attached to diagnostics
        NEWSORDER__CHECK__MAX_FILE_SIZE_KB: Skip files larger than this
    """

    check_classes: bool = Field(
        default=True,
        description="Check the declaration order of methods inside each class.",
    )
    check_functions: bool = Field(
        default=True,
        description="Check the declaration order of top-level functions in each file.",
    )
    extensions: list[str] = Field(
        default_factory=lambda: list(SUPPORTED_EXTENSIONS),
        description="File extensions picked up when a directory is checked.",
    )
    exclude_dirs: list[str] = Field(
        default_factory=list,
        description="Directory names skipped in addition to the built-in list.",
    )
    max_file_size_kb: int = Field(
        default=1024,
        description="Skip files larger than this (KB).",
    )
    severity: SeverityName = Field(
        default="error",
        description="Severity attached to newspaper-order diagnostics.",
    )

    @field_validator("extensions")
    @classmethod
    def validate_extensions(cls, v: list[str]) -> list[str]:
        normalized = [ext if ext.startswith(".") else f".{ext}" for ext in v]
        unknown = [ext for ext in normalized if ext.lower() not in SUPPORTED_EXTENSIONS]
        if unknown:
            raise ValueError(f"Unsupported extensions: {', '.join(unknown)}")
        return [ext.lower() for ext in normalized]

    @field_validator("max_file_size_kb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if not (0 < v <= MAX_FILE_SIZE_KB_MAX):
            raise ValueError(f"max_file_size_kb must be 1-{MAX_FILE_SIZE_KB_MAX}, got {v}")
        return v


class NewsOrderConfig(BaseModel):
    """Root configuration model (for type hints; loading goes through loader.py)."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    check: CheckConfig = Field(default_factory=CheckConfig)
