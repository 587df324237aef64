"""Strongly connected components and the condensation graph.

Members inside one component call each other transitively (a lone member
calling itself is a component of its own), so no caller-before-callee
constraint applies among them. The whole component is exempt, whatever its
size.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from newsorder.order.graph import CallGraph
from newsorder.order.models import Component


@dataclass(frozen=True)
class Condensation:
    """Graph with one node per component.

    Node ids are positions in ``components``, which is sorted by each
    component's minimum declared index. Edges join distinct components only.
    """

    components: tuple[Component, ...]
    component_of: tuple[int, ...]
    edges: tuple[tuple[int, int], ...]


def strongly_connected_components(graph: CallGraph) -> list[Component]:
    """Tarjan's algorithm, iterative so very large scopes cannot hit the recursion limit.

    Returns components sorted by minimum declared index.
    """
    counter = 0
    index_of: dict[int, int] = {}
    lowlink: dict[int, int] = {}
    stack: list[int] = []
    on_stack: set[int] = set()
    found: list[Component] = []

    def visit(node: int) -> None:
        nonlocal counter
        index_of[node] = lowlink[node] = counter
        counter += 1
        stack.append(node)
        on_stack.add(node)

    for root in graph.nodes:
        if root in index_of:
            continue
        visit(root)
        work: list[tuple[int, Iterator[int]]] = [(root, iter(graph.successors(root)))]
        while work:
            node, pending = work[-1]
            for succ in pending:
                if succ not in index_of:
                    visit(succ)
                    work.append((succ, iter(graph.successors(succ))))
                    break
                if succ in on_stack:
                    lowlink[node] = min(lowlink[node], index_of[succ])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])
                if lowlink[node] == index_of[node]:
                    members: list[int] = []
                    while True:
                        top = stack.pop()
                        on_stack.discard(top)
                        members.append(top)
                        if top == node:
                            break
                    found.append(Component(members=tuple(sorted(members))))

    return sorted(found, key=lambda c: c.min_index)


def condense(graph: CallGraph, components: list[Component]) -> Condensation:
    """Contract each component to a node; drop self loops and duplicates."""
    component_of = [0] * graph.size
    for cid, component in enumerate(components):
        for member in component.members:
            component_of[member] = cid

    edges = {
        (component_of[edge.caller], component_of[edge.callee])
        for edge in graph.edges
        if component_of[edge.caller] != component_of[edge.callee]
    }
    return Condensation(
        components=tuple(components),
        component_of=tuple(component_of),
        edges=tuple(sorted(edges)),
    )


def is_cyclic(component: Component, graph: CallGraph) -> bool:
    """True for recursive components: several members, or one calling itself."""
    if component.size > 1:
        return True
    only = component.members[0]
    return graph.has_edge(only, only)
