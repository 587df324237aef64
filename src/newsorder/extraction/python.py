"""Python scope extractor.

Class scopes:
- Members are ``def``/``async def`` statements directly in the class body,
  decorated or not. Properties (and their setters/deleters) are accessors.
- ``self.name(...)``, ``cls.name(...)`` and ``ClassName.name(...)`` resolve
  to a sibling; reading ``self.name`` resolves only when ``name`` is an
  accessor. ``super().name()`` and names the class does not declare itself
  (inherited members) never resolve.
- Nested class bodies are skipped: their ``self`` is another object.

File scope:
- Members are top-level ``def``/``async def`` statements.
- ``name(...)`` with a bare identifier resolves to a top-level function.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from newsorder.extraction import (
    BaseScopeExtractor,
    MemberDraft,
    build_scope,
    keyword_position,
    node_text,
    walk,
)
from newsorder.order.models import MemberKind, Position, Scope, ScopeKind

if TYPE_CHECKING:
    from tree_sitter import Node

_ACCESSOR_DECORATORS = frozenset(
    {
        "property",
        "cached_property",
        "functools.cached_property",
        "abstractproperty",
        "abc.abstractproperty",
    }
)
_ACCESSOR_SUFFIXES = (".setter", ".getter", ".deleter")
_CLASS_BOUNDARY = frozenset({"class_definition"})
_RECEIVERS = frozenset({"self", "cls"})


def _unwrap_function(node: Node) -> tuple[Node, list[Node]] | None:
    """(function_definition, decorators) for a possibly decorated def, else None."""
    if node.type == "function_definition":
        return node, []
    if node.type == "decorated_definition":
        definition = node.child_by_field_name("definition")
        if definition is not None and definition.type == "function_definition":
            decorators = [c for c in node.named_children if c.type == "decorator"]
            return definition, decorators
    return None


def _is_accessor(decorators: list[Node]) -> bool:
    for decorator in decorators:
        expression = node_text(decorator).lstrip("@").strip()
        if expression in _ACCESSOR_DECORATORS or expression.endswith(_ACCESSOR_SUFFIXES):
            return True
    return False


def _is_call_target(node: Node) -> bool:
    parent = node.parent
    return (
        parent is not None
        and parent.type == "call"
        and parent.child_by_field_name("function") == node
    )


class PythonScopeExtractor(BaseScopeExtractor):
    """Scope extractor for Python sources."""

    @property
    def language(self) -> str:
        return "python"

    def extract_class_scopes(self, root: Node) -> list[Scope]:
        scopes: list[Scope] = []

        def visit(node: Node) -> None:
            for child in node.children:
                if child.type == "class_definition":
                    scopes.append(self._class_scope(child))
                visit(child)

        visit(root)
        return scopes

    def extract_file_scope(self, root: Node, file_name: str) -> Scope:
        drafts = self._collect_drafts(root, MemberKind.FUNCTION)
        names = {draft.name for draft in drafts}

        for draft in drafts:
            if draft.body is None:
                continue
            for node in walk(draft.body):
                if node.type != "call":
                    continue
                function = node.child_by_field_name("function")
                if function is not None and function.type == "identifier":
                    name = node_text(function)
                    if name in names:
                        draft.calls.add(name)

        return build_scope(ScopeKind.FILE, file_name, Position(line=1, column=1), drafts)

    def _class_scope(self, node: Node) -> Scope:
        name = node_text(node.child_by_field_name("name"))
        body = node.child_by_field_name("body")
        drafts = self._collect_drafts(body, MemberKind.METHOD) if body is not None else []
        siblings = {draft.name for draft in drafts}
        accessors = {draft.name for draft in drafts if draft.kind is MemberKind.ACCESSOR}
        receivers = _RECEIVERS | {name}

        for draft in drafts:
            if draft.body is None:
                continue
            for child in walk(draft.body, skip=_CLASS_BOUNDARY):
                if child.type != "attribute":
                    continue
                receiver = child.child_by_field_name("object")
                if receiver is None or receiver.type != "identifier":
                    continue
                if node_text(receiver) not in receivers:
                    continue
                attribute = node_text(child.child_by_field_name("attribute"))
                if attribute not in siblings:
                    continue
                if attribute in accessors or _is_call_target(child):
                    draft.calls.add(attribute)

        return build_scope(
            ScopeKind.CLASS,
            name,
            keyword_position(node, "class"),
            drafts,
        )

    def _collect_drafts(self, container: Node, default_kind: MemberKind) -> list[MemberDraft]:
        drafts: list[MemberDraft] = []
        for child in container.named_children:
            unwrapped = _unwrap_function(child)
            if unwrapped is None:
                continue
            definition, decorators = unwrapped
            kind = default_kind
            if default_kind is MemberKind.METHOD and _is_accessor(decorators):
                kind = MemberKind.ACCESSOR
            drafts.append(
                MemberDraft(
                    name=node_text(definition.child_by_field_name("name")),
                    node=definition,
                    body=definition.child_by_field_name("body"),
                    kind=kind,
                )
            )
        return drafts
