from .clauses import WELL_KNOWN_KINDS, Clause, ClauseKind, OrderSpec, WhereCondition
from .native import NativeQuery
from .query import ClauseQuery

__all__ = [
    # Queries
    "ClauseQuery",
    "NativeQuery",
    # Clause values
    "Clause",
    "ClauseKind",
    "OrderSpec",
    "WhereCondition",
    "WELL_KNOWN_KINDS",
]
