"""Scope extraction protocol and registry.

An extractor walks a tree-sitter syntax tree and produces the scopes the
ordering core checks: one per class, plus one for the file's top-level
functions. Each member carries the names of the siblings its body calls,
already filtered to names declared in the same scope. Inherited members,
globals and anything that cannot be attributed to a sibling never appear.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING

from newsorder.order.models import Member, MemberKind, Position, Scope, ScopeKind

if TYPE_CHECKING:
    from tree_sitter import Node


def node_text(node: Node | None) -> str:
    """Decoded source text of a node ('' for None)."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def node_position(node: Node) -> Position:
    """1-based line and column of a node's first character."""
    row, column = node.start_point
    return Position(line=row + 1, column=column + 1)


def keyword_position(node: Node, keyword: str) -> Position:
    """Position of the first child token of the given type, else of the node."""
    for child in node.children:
        if child.type == keyword:
            return node_position(child)
    return node_position(node)


def walk(node: Node, *, skip: frozenset[str] = frozenset()) -> Iterator[Node]:
    """Pre-order walk over ``node``'s descendants, not entering ``skip`` types."""
    pending = list(reversed(node.children))
    while pending:
        current = pending.pop()
        yield current
        if current.type not in skip:
            pending.extend(reversed(current.children))


class MemberDraft:
    """Mutable member record filled while walking, frozen into a Member at the end."""

    __slots__ = ("name", "node", "body", "kind", "calls")

    def __init__(self, name: str, node: Node, body: Node | None, kind: MemberKind) -> None:
        self.name = name
        self.node = node
        self.body = body
        self.kind = kind
        self.calls: set[str] = set()

    def freeze(self, index: int) -> Member:
        return Member(
            name=self.name,
            index=index,
            position=node_position(self.node),
            kind=self.kind,
            calls=frozenset(self.calls),
        )


def build_scope(kind: ScopeKind, name: str, position: Position, drafts: list[MemberDraft]) -> Scope:
    """Freeze drafts into a scope, declared index = list position."""
    return Scope(
        kind=kind,
        name=name,
        position=position,
        members=tuple(draft.freeze(i) for i, draft in enumerate(drafts)),
    )


class BaseScopeExtractor(ABC):
    """Base class for language-specific scope extractors."""

    @property
    @abstractmethod
    def language(self) -> str:
        """Language name this extractor handles."""
        ...

    def extract(self, root: Node, file_name: str) -> list[Scope]:
        """All scopes in a file: classes in document order, then the file scope."""
        scopes = self.extract_class_scopes(root)
        scopes.append(self.extract_file_scope(root, file_name))
        return scopes

    @abstractmethod
    def extract_class_scopes(self, root: Node) -> list[Scope]:
        """One scope per class declaration, nested classes included."""
        ...

    @abstractmethod
    def extract_file_scope(self, root: Node, file_name: str) -> Scope:
        """Scope holding the file's top-level functions."""
        ...


# =============================================================================
# Extractor Registry
# =============================================================================


class ExtractorRegistry:
    """Registry of language-specific scope extractors."""

    def __init__(self) -> None:
        self._extractors: dict[str, BaseScopeExtractor] = {}

    def register(self, extractor: BaseScopeExtractor) -> None:
        """Register an extractor for its language."""
        self._extractors[extractor.language] = extractor

    def get(self, language: str) -> BaseScopeExtractor | None:
        """Get extractor for a language, or None."""
        return self._extractors.get(language)


# Global registry instance
_registry: ExtractorRegistry | None = None


def get_registry() -> ExtractorRegistry:
    """Get the global extractor registry, initializing if needed."""
    global _registry
    if _registry is None:
        _registry = ExtractorRegistry()
        _register_builtin_extractors(_registry)
    return _registry


def _register_builtin_extractors(registry: ExtractorRegistry) -> None:
    """Register all built-in extractors."""
    # Import here to avoid circular imports
    from newsorder.extraction.python import PythonScopeExtractor
    from newsorder.extraction.typescript import TypeScriptScopeExtractor

    registry.register(PythonScopeExtractor())
    for language in ("javascript", "typescript", "tsx"):
        registry.register(TypeScriptScopeExtractor(language))


__all__ = [
    "BaseScopeExtractor",
    "ExtractorRegistry",
    "MemberDraft",
    "build_scope",
    "get_registry",
    "keyword_position",
    "node_position",
    "node_text",
    "walk",
]
