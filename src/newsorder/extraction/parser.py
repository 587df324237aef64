"""Tree-sitter parsing for scope extraction.

Maps file extensions to grammars, loads grammars lazily and reports how many
error nodes a parse produced. Partial trees are still usable: tree-sitter
recovers around syntax errors, and scopes outside the damaged region are
extracted as usual.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tree_sitter

from newsorder.core.errors import ExtractionError
from newsorder.core.logging import get_logger

log = get_logger("extraction.parser")

# Extension -> language name
LANGUAGE_BY_EXTENSION: dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

# Language name -> (grammar module, language function)
GRAMMARS: dict[str, tuple[str, str]] = {
    "python": ("tree_sitter_python", "language"),
    "javascript": ("tree_sitter_javascript", "language"),
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "language_tsx"),
}


@dataclass
class ParseResult:
    """Result of parsing a file."""

    tree: Any  # Tree-sitter Tree (not serializable)
    language: str
    error_count: int
    root_node: Any  # Tree-sitter Node

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0


def detect_language(path: Path) -> str | None:
    """Language name for a path, or None when the extension is unsupported."""
    return LANGUAGE_BY_EXTENSION.get(path.suffix.lower())


@dataclass
class TreeSitterParser:
    """
    Tree-sitter parser for the languages newsorder understands.

    Usage::

        parser = TreeSitterParser()
        result = parser.parse(Path("src/foo.py"), content)
    """

    _parser: Any = field(default=None, repr=False)
    _languages: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        """Initialize the parser."""
        self._parser = tree_sitter.Parser()
        self._languages = {}

    def _get_language(self, lang_name: str) -> Any:
        """Get or load a Tree-sitter language."""
        if lang_name in self._languages:
            return self._languages[lang_name]

        module_name, func_name = GRAMMARS[lang_name]
        try:
            mod = importlib.import_module(module_name)
            lang = tree_sitter.Language(getattr(mod, func_name)())
        except (ImportError, AttributeError) as err:
            raise ExtractionError.grammar_unavailable(lang_name, str(err)) from err

        self._languages[lang_name] = lang
        return lang

    def parse(self, path: Path, content: bytes | None = None) -> ParseResult:
        """
        Parse a file with Tree-sitter.

        Args:
            path: Path to file (used for language detection)
            content: File content as bytes. If None, reads from path.

        Returns:
            ParseResult with tree, language, and error info.

        Raises:
            ExtractionError: Unsupported extension, missing grammar, or
                unreadable file.
        """
        language = detect_language(path)
        if language is None:
            raise ExtractionError.unsupported_language(str(path), path.suffix)

        if content is None:
            try:
                content = path.read_bytes()
            except OSError as e:
                raise ExtractionError.read_failed(str(path), str(e)) from e

        self._parser.language = self._get_language(language)
        tree = self._parser.parse(content)

        error_count = 0
        pending = [tree.root_node]
        while pending:
            node = pending.pop()
            if node.type == "ERROR" or node.is_missing:
                error_count += 1
            pending.extend(node.children)

        if error_count:
            log.debug("parse_errors", path=str(path), errors=error_count)

        return ParseResult(
            tree=tree,
            language=language,
            error_count=error_count,
            root_node=tree.root_node,
        )
