"""Ordering models - members, scopes, components and violations.

All values are immutable snapshots built fresh for each scope and dropped
once the scope's violation (if any) has been reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from newsorder.config.constants import (
    FAILURE_CLASS_STRING,
    FAILURE_FILE_STRING,
    MATCH_MARK,
    MISMATCH_MARK,
    ORDER_SEPARATOR,
)


class ScopeKind(Enum):
    """Kind of scope whose members are ordered."""

    CLASS = "class"
    FILE = "file"

    @property
    def header_prefix(self) -> str:
        return FAILURE_CLASS_STRING if self is ScopeKind.CLASS else FAILURE_FILE_STRING


class MemberKind(Enum):
    """Kind of declaration. Informational only, ordering ignores it."""

    METHOD = "method"
    ACCESSOR = "accessor"
    FUNCTION = "function"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and 1-based column."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Member:
    """One declaration in a scope.

    ``calls`` holds the names of siblings this member's body refers to,
    already filtered to sibling targets by the extractor.
    """

    name: str
    index: int
    position: Position
    kind: MemberKind = MemberKind.METHOD
    calls: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class Scope:
    """A class body or a file's top-level functions, in declaration order."""

    kind: ScopeKind
    name: str
    position: Position
    members: tuple[Member, ...] = ()

    @property
    def size(self) -> int:
        return len(self.members)

    def member_names(self) -> list[str]:
        return [m.name for m in self.members]


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed call relation between two members of one scope (by index)."""

    caller: int
    callee: int

    @property
    def is_self_loop(self) -> bool:
        return self.caller == self.callee


@dataclass(frozen=True, slots=True)
class Component:
    """Strongly connected component: members calling each other transitively.

    ``members`` are declared indexes in ascending order.
    """

    members: tuple[int, ...]

    @property
    def min_index(self) -> int:
        return self.members[0]

    @property
    def size(self) -> int:
        return len(self.members)


@dataclass(frozen=True, slots=True)
class OrderEntry:
    """A member at its canonical slot, with whether it already sits there."""

    member: Member
    matches: bool

    @property
    def mark(self) -> str:
        return MATCH_MARK if self.matches else MISMATCH_MARK


@dataclass(frozen=True, slots=True)
class Violation:
    """Newspaper-order violation for one scope.

    ``entries`` lists every member in canonical order.
    """

    kind: ScopeKind
    scope_name: str
    position: Position
    entries: tuple[OrderEntry, ...]

    @property
    def message(self) -> str:
        lines = [f"{i}. {entry.mark} {entry.member.name}" for i, entry in enumerate(self.entries, 1)]
        return f"{self.kind.header_prefix}{self.scope_name}{ORDER_SEPARATOR}" + "\n".join(lines)

    @property
    def canonical_names(self) -> list[str]:
        return [entry.member.name for entry in self.entries]

    @property
    def mismatched(self) -> list[Member]:
        return [entry.member for entry in self.entries if not entry.matches]
