"""Clause value types produced by ``ClauseQuery``."""

from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple


class ClauseKind(str, Enum):
    """Well-known clause kinds; anything else is an extension kind."""

    SELECT = "select"
    FROM = "from"
    WHERE = "where"
    WHEREID = "whereid"  # request element by ID
    LIMIT = "limit"
    ORDER = "order"


class Clause(NamedTuple):
    """One ``(kind, payload)`` unit of query intent."""

    kind: str
    payload: Any


class WhereCondition(NamedTuple):
    """Payload of a ``where`` clause.

    ``value`` substitutes the ``?`` placeholders in ``condition``; ``op``
    relates the condition to the previous ones (``"and"`` / ``"or"``).
    Both are interpreted by the consuming adapter only.
    """

    condition: str
    value: Any = None
    op: str = "and"


class OrderSpec(NamedTuple):
    """Payload of an ``order`` clause."""

    sort: Any
    direction: str = "asc"


WELL_KNOWN_KINDS: frozenset[str] = frozenset(kind.value for kind in ClauseKind)
