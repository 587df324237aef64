"""Tests for order/canonical.py and order/report.py modules."""

from __future__ import annotations

from newsorder.order.canonical import canonical_order
from newsorder.order.components import condense, strongly_connected_components
from newsorder.order.graph import CallGraph
from newsorder.order.models import Edge, Member, Position, Scope, ScopeKind
from newsorder.order.report import annotate, emit_violation


def order_for(size: int, edges: list[tuple[int, int]]) -> list[int]:
    graph = CallGraph(size=size, edges=[Edge(a, b) for a, b in edges])
    return canonical_order(condense(graph, strongly_connected_components(graph)))


def make_scope(names: list[str]) -> Scope:
    return Scope(
        kind=ScopeKind.CLASS,
        name="Widget",
        position=Position(4, 1),
        members=tuple(Member(name=n, index=i, position=Position(5 + i, 5)) for i, n in enumerate(names)),
    )


class TestCanonicalOrder:
    """Tests for canonical_order function."""

    def test_no_edges_is_identity(self) -> None:
        assert order_for(4, []) == [0, 1, 2, 3]

    def test_caller_moves_before_callee(self) -> None:
        assert order_for(2, [(1, 0)]) == [1, 0]

    def test_chain(self) -> None:
        assert order_for(3, [(2, 1), (1, 0)]) == [2, 1, 0]

    def test_ties_follow_declared_index(self) -> None:
        """Free components stay in declared order around constrained ones."""
        assert order_for(5, [(3, 1)]) == [0, 2, 3, 1, 4]

    def test_cycle_members_keep_declared_order(self) -> None:
        assert order_for(4, [(0, 2), (2, 1), (1, 2), (3, 3)]) == [0, 1, 2, 3]

    def test_caller_of_cycle_precedes_it(self) -> None:
        assert order_for(3, [(0, 1), (1, 0), (2, 0)]) == [2, 0, 1]

    def test_diamond(self) -> None:
        assert order_for(4, [(3, 1), (3, 2), (1, 0), (2, 0)]) == [3, 1, 2, 0]

    def test_is_a_permutation(self) -> None:
        edges = [(5, 0), (4, 5), (1, 3), (3, 1), (2, 2)]
        assert sorted(order_for(6, edges)) == list(range(6))


class TestAnnotate:
    """Tests for annotate and emit_violation functions."""

    def test_exact_index_equality(self) -> None:
        scope = make_scope(["a", "b", "c"])

        entries = annotate([0, 2, 1], scope)

        assert [(e.member.name, e.matches) for e in entries] == [
            ("a", True),
            ("c", False),
            ("b", False),
        ]
        assert [e.mark for e in entries] == ["✓", "x", "x"]

    def test_identity_emits_nothing(self) -> None:
        scope = make_scope(["a", "b"])
        assert emit_violation(scope, annotate([0, 1], scope)) is None

    def test_violation_anchored_at_scope(self) -> None:
        scope = make_scope(["a", "b"])

        violation = emit_violation(scope, annotate([1, 0], scope))

        assert violation is not None
        assert violation.position == Position(4, 1)
        assert violation.scope_name == "Widget"
        assert violation.kind is ScopeKind.CLASS
        assert len(violation.entries) == 2
