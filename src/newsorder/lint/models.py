"""Lint models - diagnostics and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal


class Severity(Enum):
    """Diagnostic severity level."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


@dataclass
class Diagnostic:
    """A single newspaper-order diagnostic."""

    path: str
    line: int
    message: str
    source: str  # tool that produced this
    severity: Severity = Severity.ERROR
    column: int | None = None
    code: str | None = None  # rule name, "newspaper-order"
    scope: str | None = None  # class name or file name

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "source": self.source,
            "severity": self.severity.value,
            "code": self.code,
            "scope": self.scope,
        }


@dataclass
class FileResult:
    """Result from checking a single file."""

    path: str
    status: Literal["clean", "dirty", "error", "skipped"]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    scopes_checked: int = 0
    duration_seconds: float = 0.0
    error_detail: str | None = None  # If status=="error" or "skipped"


@dataclass
class LintResult:
    """Aggregated result from a check run."""

    files: list[FileResult] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [d for f in self.files for d in f.diagnostics]

    @property
    def total_diagnostics(self) -> int:
        return sum(len(f.diagnostics) for f in self.files)

    @property
    def files_checked(self) -> int:
        return sum(1 for f in self.files if f.status in ("clean", "dirty"))

    @property
    def dirty_files(self) -> list[FileResult]:
        return [f for f in self.files if f.status == "dirty"]

    @property
    def errored_files(self) -> list[FileResult]:
        return [f for f in self.files if f.status == "error"]

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.diagnostics)

    @property
    def status(self) -> Literal["clean", "dirty", "error"]:
        if any(f.status == "dirty" for f in self.files):
            return "dirty"
        if any(f.status == "error" for f in self.files):
            return "error"
        return "clean"
