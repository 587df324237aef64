"""Ordering operations - validate scopes against newspaper order."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from newsorder.core.errors import OrderingError
from newsorder.core.logging import get_logger
from newsorder.order.canonical import canonical_order
from newsorder.order.components import condense, is_cyclic, strongly_connected_components
from newsorder.order.graph import CallGraph, build_call_graph
from newsorder.order.models import Component, OrderEntry, Scope, Violation
from newsorder.order.report import annotate, emit_violation

log = get_logger("order.ops")


@dataclass(frozen=True)
class ScopeReport:
    """Canonical order of one scope, with the members exempt through recursion."""

    scope: Scope
    entries: tuple[OrderEntry, ...]
    recursive: frozenset[int]

    @property
    def in_order(self) -> bool:
        return all(entry.matches for entry in self.entries)


def _check_indexes(scope: Scope) -> None:
    for position, member in enumerate(scope.members):
        if member.index != position:
            raise OrderingError.invalid_scope(
                scope.name,
                f"member '{member.name}' has declared index {member.index}, expected {position}",
            )


def _run(scope: Scope) -> tuple[CallGraph, list[Component], list[OrderEntry]]:
    _check_indexes(scope)
    graph = build_call_graph(scope)
    components = strongly_connected_components(graph)
    canonical = canonical_order(condense(graph, components))
    return graph, components, annotate(canonical, scope)


def validate_scope(scope: Scope) -> Violation | None:
    """Check one scope.

    Builds the sibling call graph, collapses recursive groups, derives the
    canonical order and reports a single violation when the declared order
    differs from it.

    Raises:
        OrderingError: If member indexes are not 0..n-1 in declaration order.
    """
    graph, components, entries = _run(scope)
    violation = emit_violation(scope, entries)

    log.debug(
        "scope_checked",
        scope=scope.name,
        kind=scope.kind.value,
        members=scope.size,
        edges=len(graph.edges),
        components=len(components),
        violation=violation is not None,
    )
    return violation


def validate_scopes(scopes: Iterable[Scope]) -> list[Violation]:
    """Check every scope independently; violations keep the input order."""
    violations: list[Violation] = []
    for scope in scopes:
        violation = validate_scope(scope)
        if violation is not None:
            violations.append(violation)
    return violations


def explain_scope(scope: Scope) -> ScopeReport:
    """Canonical order of a scope whether or not it is violated."""
    graph, components, entries = _run(scope)
    recursive = frozenset(
        member for c in components if is_cyclic(c, graph) for member in c.members
    )
    log.debug("scope_explained", scope=scope.name, members=scope.size, recursive=len(recursive))
    return ScopeReport(scope=scope, entries=tuple(entries), recursive=recursive)
