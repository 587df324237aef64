"""Directory exclusion for source discovery.

Tier 0 (HARDCODED_DIRS): Never traversed, not configurable.
    - VCS internals

Tier 1 (DEFAULT_PRUNABLE_DIRS): Skipped by default.
    - Dependencies, caches, build outputs
    - Extended per project with ``check.exclude_dirs``
"""

from __future__ import annotations

from collections.abc import Iterable

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        ".git",
        ".svn",
        ".hg",
        ".bzr",
    )
)

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # -------------------------------------------------------------------------
        # JavaScript/TypeScript ecosystem
        # -------------------------------------------------------------------------
        "node_modules",
        ".npm",
        ".yarn",
        ".pnpm-store",
        "bower_components",
        ".next",  # Next.js build
        ".nuxt",  # Nuxt.js build
        ".turbo",  # Turborepo cache
        "dist",
        "coverage",
        # -------------------------------------------------------------------------
        # Python ecosystem
        # -------------------------------------------------------------------------
        "venv",
        ".venv",
        ".virtualenv",
        "virtualenv",
        "env",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".ruff_cache",
        ".tox",
        ".nox",
        "eggs",
        ".eggs",
        "site-packages",
        ".ipynb_checkpoints",
        ".hypothesis",
        "htmlcov",
        "build",
    )
)

PRUNABLE_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS


def prunable_dirs(extra: Iterable[str] = ()) -> frozenset[str]:
    """Combine the built-in tiers with project-specific directory names."""
    return PRUNABLE_DIRS | frozenset(d.strip().rstrip("/") for d in extra if d.strip())
