"""Compare canonical and declared order and build the scope's violation."""

from __future__ import annotations

from newsorder.order.models import OrderEntry, Scope, Violation


def annotate(canonical: list[int], scope: Scope) -> list[OrderEntry]:
    """Mark each member as matching when its canonical slot equals its declared index.

    Exact index equality: one misplaced member shifts, and marks, every
    member between its declared and canonical slots.
    """
    return [
        OrderEntry(member=scope.members[index], matches=slot == index)
        for slot, index in enumerate(canonical)
    ]


def emit_violation(scope: Scope, entries: list[OrderEntry]) -> Violation | None:
    """One violation for the whole scope, or None when every member matches."""
    if all(entry.matches for entry in entries):
        return None
    return Violation(
        kind=scope.kind,
        scope_name=scope.name,
        position=scope.position,
        entries=tuple(entries),
    )
