"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
Diagnostic wording is part of the output contract consumed by editors and CI
annotations, so it lives here rather than in the config models.

For configurable values, see models.py (CheckConfig, LoggingConfig).
"""

# =============================================================================
# Rule Identity
# =============================================================================

RULE_NAME = "newspaper-order"
"""Rule identifier attached to every diagnostic."""

DIAGNOSTIC_SOURCE = "newsorder"
"""Tool name reported as the diagnostic source."""

# =============================================================================
# Violation Message Grammar
# =============================================================================
# <HeaderPrefix><ScopeName>\n\nMethods order:\n1. <mark> <name>\n...

FAILURE_CLASS_STRING = (
    "The class does not read like a Newspaper. Please reorder the methods of the class: "
)
"""Header prefix for class scope violations."""

FAILURE_FILE_STRING = (
    "The functions in the file do not read like a Newspaper. "
    "Please reorder the functions in the file: "
)
"""Header prefix for file scope violations."""

ORDER_SEPARATOR = "\n\nMethods order:\n"
"""Literal between the header and the numbered member list."""

MATCH_MARK = "✓"
"""Member already sits at its canonical index."""

MISMATCH_MARK = "x"
"""Member must move."""

# =============================================================================
# Discovery
# =============================================================================

CONFIG_FILE_NAME = ".newsorder.yaml"
"""Project config file looked up in the checked root."""

MAX_FILE_SIZE_KB_MAX = 100_000
"""Upper bound for check.max_file_size_kb."""
