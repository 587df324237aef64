"""Order module - newspaper-order validation of sibling declarations."""

from newsorder.order.canonical import canonical_order
from newsorder.order.components import Condensation, condense, is_cyclic, strongly_connected_components
from newsorder.order.graph import CallGraph, build_call_graph
from newsorder.order.models import (
    Component,
    Edge,
    Member,
    MemberKind,
    OrderEntry,
    Position,
    Scope,
    ScopeKind,
    Violation,
)
from newsorder.order.ops import ScopeReport, explain_scope, validate_scope, validate_scopes
from newsorder.order.report import annotate, emit_violation

__all__ = [
    "CallGraph",
    "Component",
    "Condensation",
    "Edge",
    "Member",
    "MemberKind",
    "OrderEntry",
    "Position",
    "Scope",
    "ScopeKind",
    "ScopeReport",
    "Violation",
    "annotate",
    "build_call_graph",
    "canonical_order",
    "condense",
    "emit_violation",
    "explain_scope",
    "is_cyclic",
    "strongly_connected_components",
    "validate_scope",
    "validate_scopes",
]
