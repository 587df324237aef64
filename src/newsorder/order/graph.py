"""Sibling call graph for one scope."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from newsorder.core.logging import get_logger
from newsorder.order.models import Edge, Scope

log = get_logger("order.graph")


@dataclass
class CallGraph:
    """Directed graph over a scope's members, nodes are declared indexes."""

    size: int
    edges: list[Edge] = field(default_factory=list)
    _successors: dict[int, list[int]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        adjacency: dict[int, list[int]] = defaultdict(list)
        for edge in self.edges:
            adjacency[edge.caller].append(edge.callee)
        self._successors = dict(adjacency)

    @property
    def nodes(self) -> range:
        return range(self.size)

    def successors(self, index: int) -> list[int]:
        return self._successors.get(index, [])

    def has_edge(self, caller: int, callee: int) -> bool:
        return callee in self.successors(caller)


def build_call_graph(scope: Scope) -> CallGraph:
    """Turn each member's resolved call names into deduplicated edges.

    A name resolves to every member bearing it (property getter/setter pairs,
    overload stubs). Names matching no member are dropped.
    """
    by_name: dict[str, list[int]] = defaultdict(list)
    for member in scope.members:
        by_name[member.name].append(member.index)

    edges: set[Edge] = set()
    for member in scope.members:
        for name in member.calls:
            targets = by_name.get(name)
            if not targets:
                log.debug("call_unresolved", scope=scope.name, caller=member.name, target=name)
                continue
            edges.update(Edge(member.index, target) for target in targets)

    ordered = sorted(edges, key=lambda e: (e.caller, e.callee))
    return CallGraph(size=scope.size, edges=ordered)
