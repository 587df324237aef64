"""Canonical declaration order from the condensation graph."""

from __future__ import annotations

import heapq

from newsorder.order.components import Condensation


def canonical_order(condensation: Condensation) -> list[int]:
    """Topologically sort components and flatten them into member indexes.

    Callers come before callees. Among components the graph leaves free,
    the one with the smallest declared index goes first, so a scope without
    real conflicts maps onto its own order. Members of one component keep
    their declared relative order.
    """
    components = condensation.components
    successors: list[list[int]] = [[] for _ in components]
    indegree = [0] * len(components)
    for src, dst in condensation.edges:
        successors[src].append(dst)
        indegree[dst] += 1

    ready = [(c.min_index, cid) for cid, c in enumerate(components) if indegree[cid] == 0]
    heapq.heapify(ready)

    order: list[int] = []
    while ready:
        _, cid = heapq.heappop(ready)
        order.extend(components[cid].members)
        for nxt in successors[cid]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                heapq.heappush(ready, (components[nxt].min_index, nxt))

    return order
