"""Tests for order/graph.py and order/components.py modules.

Covers:
- build_call_graph() edge resolution and deduplication
- strongly_connected_components() partitioning
- condense() component edges
- is_cyclic() helper
"""

from __future__ import annotations

from newsorder.order.components import condense, is_cyclic, strongly_connected_components
from newsorder.order.graph import CallGraph, build_call_graph
from newsorder.order.models import Edge, Member, Position, Scope, ScopeKind


def make_scope(members: list[tuple[str, set[str]]]) -> Scope:
    return Scope(
        kind=ScopeKind.FILE,
        name="module.py",
        position=Position(1, 1),
        members=tuple(
            Member(name=n, index=i, position=Position(i + 1, 1), calls=frozenset(c))
            for i, (n, c) in enumerate(members)
        ),
    )


def make_graph(size: int, edges: list[tuple[int, int]]) -> CallGraph:
    return CallGraph(size=size, edges=[Edge(a, b) for a, b in edges])


class TestBuildCallGraph:
    """Tests for build_call_graph function."""

    def test_resolves_sibling_names(self) -> None:
        graph = build_call_graph(make_scope([("a", {"b"}), ("b", set())]))
        assert graph.edges == [Edge(0, 1)]

    def test_drops_unknown_names(self) -> None:
        graph = build_call_graph(make_scope([("a", {"print", "base_method"}), ("b", set())]))
        assert graph.edges == []

    def test_keeps_self_edges(self) -> None:
        graph = build_call_graph(make_scope([("a", {"a"})]))
        assert graph.edges == [Edge(0, 0)]
        assert graph.edges[0].is_self_loop is True

    def test_name_shared_by_several_members(self) -> None:
        """Getter and setter share a name; a call reaches both."""
        graph = build_call_graph(make_scope([("use", {"value"}), ("value", set()), ("value", set())]))
        assert graph.edges == [Edge(0, 1), Edge(0, 2)]

    def test_edges_sorted_and_unique(self) -> None:
        graph = build_call_graph(make_scope([("a", {"c", "b"}), ("b", {"c"}), ("c", set())]))
        assert graph.edges == [Edge(0, 1), Edge(0, 2), Edge(1, 2)]

    def test_successors(self) -> None:
        graph = build_call_graph(make_scope([("a", {"c", "b"}), ("b", set()), ("c", set())]))
        assert graph.successors(0) == [1, 2]
        assert graph.successors(1) == []
        assert graph.has_edge(0, 2) is True
        assert graph.has_edge(2, 0) is False


class TestStronglyConnectedComponents:
    """Tests for strongly_connected_components function."""

    def test_acyclic_graph_gives_singletons(self) -> None:
        components = strongly_connected_components(make_graph(3, [(0, 1), (1, 2)]))
        assert [c.members for c in components] == [(0,), (1,), (2,)]

    def test_two_member_cycle(self) -> None:
        components = strongly_connected_components(make_graph(3, [(0, 1), (1, 2), (2, 1)]))
        assert [c.members for c in components] == [(0,), (1, 2)]

    def test_long_cycle_collapses_to_one(self) -> None:
        edges = [(0, 1), (1, 2), (2, 3), (3, 0)]
        components = strongly_connected_components(make_graph(4, edges))
        assert [c.members for c in components] == [(0, 1, 2, 3)]

    def test_components_sorted_by_min_index(self) -> None:
        components = strongly_connected_components(make_graph(4, [(3, 0), (0, 3), (2, 1)]))
        assert [c.min_index for c in components] == [0, 1, 2]
        assert components[0].members == (0, 3)

    def test_deep_chain_does_not_recurse(self) -> None:
        """Iterative traversal handles chains far past the recursion limit."""
        size = 5000
        edges = [(i, i + 1) for i in range(size - 1)]
        components = strongly_connected_components(make_graph(size, edges))
        assert len(components) == size

    def test_every_member_in_exactly_one_component(self) -> None:
        edges = [(0, 1), (1, 0), (2, 3), (3, 4), (4, 2), (5, 5)]
        components = strongly_connected_components(make_graph(7, edges))
        seen = sorted(m for c in components for m in c.members)
        assert seen == list(range(7))


class TestCondense:
    """Tests for condense function."""

    def test_drops_internal_edges_and_duplicates(self) -> None:
        graph = make_graph(4, [(0, 1), (0, 2), (1, 2), (2, 1), (3, 3)])
        components = strongly_connected_components(graph)

        condensation = condense(graph, components)

        assert [c.members for c in condensation.components] == [(0,), (1, 2), (3,)]
        assert condensation.component_of == (0, 1, 1, 2)
        assert condensation.edges == ((0, 1),)


class TestIsCyclic:
    """Tests for is_cyclic function."""

    def test_singleton_without_self_edge(self) -> None:
        graph = make_graph(2, [(0, 1)])
        components = strongly_connected_components(graph)
        assert [is_cyclic(c, graph) for c in components] == [False, False]

    def test_self_loop_and_cycle(self) -> None:
        graph = make_graph(3, [(0, 0), (1, 2), (2, 1)])
        components = strongly_connected_components(graph)
        assert [is_cyclic(c, graph) for c in components] == [True, True]
