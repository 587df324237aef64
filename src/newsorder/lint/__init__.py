"""Lint module - newspaper-order diagnostics for source files."""

from newsorder.lint.models import Diagnostic, FileResult, LintResult, Severity
from newsorder.lint.ops import LintOps

__all__ = [
    "Diagnostic",
    "FileResult",
    "LintOps",
    "LintResult",
    "Severity",
]
