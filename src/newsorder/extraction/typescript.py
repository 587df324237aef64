"""JavaScript/TypeScript scope extractor.

Class scopes:
- Members are method definitions in the class body, ``get``/``set``
  accessors and abstract method signatures included. The constructor and
  overload signatures are not members.
- Any ``this.name`` access where ``name`` is a sibling resolves, which
  covers both calls and getter reads. ``this.constructor()`` never resolves.
- Nested classes and ``function`` bodies rebind ``this`` and are skipped;
  arrow functions are searched.
- Class expressions (``const Foo = class { ... }``) are scopes too, named
  after the variable or field they are assigned to.

File scope:
- Members are top-level function declarations, exported or not.
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

_CLASS_TYPES = frozenset({"class_declaration", "abstract_class_declaration", "class"})
_ANONYMOUS_CLASS = "(anonymous class)"

# Parent node type -> field holding the name a class expression is bound to
_ASSIGNMENT_TARGETS = {
    "variable_declarator": "name",
    "assignment_expression": "left",
    "public_field_definition": "name",
    "field_definition": "property",
}
_FUNCTION_TYPES = frozenset({"function_declaration", "generator_function_declaration"})
_METHOD_TYPES = frozenset({"method_definition", "abstract_method_signature"})

# Nodes that rebind `this`
_THIS_BOUNDARY = frozenset(
    {
        "class_declaration",
        "abstract_class_declaration",
        "class",
        "function",
        "function_expression",
        "function_declaration",
        "generator_function",
        "generator_function_declaration",
    }
)


def _is_accessor(node: Node) -> bool:
    return any(child.type in ("get", "set") for child in node.children)


def _class_name(node: Node) -> str:
    """Declared name; a class expression falls back to the variable or field it is assigned to."""
    name = node.child_by_field_name("name")
    if name is not None:
        return node_text(name)
    parent = node.parent
    field = _ASSIGNMENT_TARGETS.get(parent.type) if parent is not None else None
    if parent is not None and field is not None:
        target = parent.child_by_field_name(field)
        if target is not None:
            return node_text(target)
    return _ANONYMOUS_CLASS


def _top_level_function(node: Node) -> Node | None:
    if node.type in _FUNCTION_TYPES:
        return node
    if node.type == "export_statement":
        declaration = node.child_by_field_name("declaration")
        if declaration is not None and declaration.type in _FUNCTION_TYPES:
            return declaration
        for child in node.named_children:
            if child.type in _FUNCTION_TYPES:
                return child
    return None


class TypeScriptScopeExtractor(BaseScopeExtractor):
    """Scope extractor for JavaScript, TypeScript and TSX sources."""

    def __init__(self, language: str = "typescript") -> None:
        self._language = language

    @property
    def language(self) -> str:
        return self._language

    def extract_class_scopes(self, root: Node) -> list[Scope]:
        scopes: list[Scope] = []

        def visit(node: Node) -> None:
            for child in node.children:
                if child.type in _CLASS_TYPES:
                    scopes.append(self._class_scope(child))
                visit(child)

        visit(root)
        return scopes

    def extract_file_scope(self, root: Node, file_name: str) -> Scope:
        drafts: list[MemberDraft] = []
        for child in root.named_children:
            function = _top_level_function(child)
            if function is None:
                continue
            drafts.append(
                MemberDraft(
                    name=node_text(function.child_by_field_name("name")),
                    node=function,
                    body=function.child_by_field_name("body"),
                    kind=MemberKind.FUNCTION,
                )
            )
        names = {draft.name for draft in drafts}

        for draft in drafts:
            if draft.body is None:
                continue
            for node in walk(draft.body):
                if node.type != "call_expression":
                    continue
                function = node.child_by_field_name("function")
                if function is not None and function.type == "identifier":
                    name = node_text(function)
                    if name in names:
                        draft.calls.add(name)

        return build_scope(ScopeKind.FILE, file_name, Position(line=1, column=1), drafts)

    def _class_scope(self, node: Node) -> Scope:
        drafts: list[MemberDraft] = []
        body = node.child_by_field_name("body")
        for child in body.named_children if body is not None else []:
            if child.type not in _METHOD_TYPES:
                continue
            name = node_text(child.child_by_field_name("name"))
            if name == "constructor":
                continue
            drafts.append(
                MemberDraft(
                    name=name,
                    node=child,
                    body=child.child_by_field_name("body"),
                    kind=MemberKind.ACCESSOR if _is_accessor(child) else MemberKind.METHOD,
                )
            )
        siblings = {draft.name for draft in drafts}

        for draft in drafts:
            if draft.body is None:
                continue
            for child in walk(draft.body, skip=_THIS_BOUNDARY):
                if child.type != "member_expression":
                    continue
                receiver = child.child_by_field_name("object")
                if receiver is None or receiver.type != "this":
                    continue
                name = node_text(child.child_by_field_name("property"))
                if name in siblings:
                    draft.calls.add(name)

        return build_scope(
            ScopeKind.CLASS,
            _class_name(node),
            keyword_position(node, "class"),
            drafts,
        )
