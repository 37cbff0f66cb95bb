"""
Generic, adapter-agnostic clause query.

Aggregates query intent as an ordered list of clauses, where each clause
is a ``(kind, payload)`` pair.  Nothing here interprets or executes the
clauses; concrete backend adapters translate the assembled list into a
native request.

Example::

    query = (
        ClauseQuery()
        .select(["name", "age"])
        .from_("people")
        .where("age > ?", 18)
        .where("name = ?", "Bob", "or")
        .order("age", "desc")
        .limit(10)
        .clause("consistentRead", True)  # ("consistentread", (True,))
    )
    adapter.query(query.assemble())

``clause(name, *args)`` declares a clause named after the lowercased
``name``, carrying the positional arguments as payload.  Names of the
well-known kinds are routed through their validated builder methods.
"""

from __future__ import annotations

import copy
import inspect
import logging
import numbers
from decimal import Decimal
from typing import TYPE_CHECKING, Any
from uuid import UUID

from cloudgate_core.primitives.exceptions import InvalidArgumentError

from .clauses import Clause, ClauseKind, OrderSpec, WhereCondition

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger("cloudgate.documents.query")

_SCALAR_TYPES = (str, bytes, numbers.Number, UUID)


class ClauseQuery:
    """
    Fluent, append-only clause builder.

    Only the well-known kinds get primitive type-checks on their direct
    arguments; unknown kinds are never rejected.  A failed call leaves the
    clause list untouched.
    """

    def __init__(self) -> None:
        self._clauses: list[Clause] = []

    # -- well-known clauses --------------------------------------------------

    def select(self, fields: str | Sequence[str] | None) -> ClauseQuery:
        """SELECT clause: a field name or a list of field names.

        Empty values (``None``, ``""``, ``[]``) are ignored.
        """
        if not fields:
            return self
        if isinstance(fields, str):
            return self._append(ClauseKind.SELECT, fields)
        if isinstance(fields, (list, tuple)) and all(
            isinstance(f, str) for f in fields
        ):
            return self._append(ClauseKind.SELECT, tuple(fields))
        raise InvalidArgumentError(
            "SELECT argument must be a string or a sequence of strings",
            argument="fields",
            value=fields,
        )

    def from_(self, name: str) -> ClauseQuery:
        """FROM clause: the source collection name."""
        if not isinstance(name, str):
            raise InvalidArgumentError(
                "FROM argument must be a string", argument="name", value=name
            )
        return self._append(ClauseKind.FROM, name)

    def where(
        self,
        condition: str,
        value: Any = None,
        op: str = "and",
    ) -> ClauseQuery:
        """WHERE clause.

        Args:
            condition: Condition text, ``?`` marks a placeholder.
            value: Value(s) substituted for the placeholders.
            op: Relation to the other conditions, ``"and"`` or ``"or"``.
                Passed through uninterpreted.
        """
        if not isinstance(condition, str):
            raise InvalidArgumentError(
                "WHERE argument must be a string",
                argument="condition",
                value=condition,
            )
        return self._append(ClauseKind.WHERE, WhereCondition(condition, value, op))

    def where_id(self, value: str | int | UUID) -> ClauseQuery:
        """Select a record (or its fields) by identifier."""
        if not isinstance(value, _SCALAR_TYPES):
            raise InvalidArgumentError(
                "WHEREID argument must be a scalar", argument="value", value=value
            )
        return self._append(ClauseKind.WHEREID, value)

    def limit(self, count: int) -> ClauseQuery:
        """LIMIT clause: how many items to return."""
        integral = _as_integer(count)
        if integral is None:
            raise InvalidArgumentError(
                "LIMIT argument must be an integer", argument="count", value=count
            )
        return self._append(ClauseKind.LIMIT, integral)

    def order(self, sort: Any, direction: str = "asc") -> ClauseQuery:
        """ORDER clause: field or fields to sort by, and the direction."""
        return self._append(ClauseKind.ORDER, OrderSpec(sort, direction))

    # -- extension clauses ---------------------------------------------------

    def clause(self, name: str, *args: Any) -> ClauseQuery:
        """Declare a clause the consuming adapter should recognise.

        A well-known kind (``"whereId"``, ``"LIMIT"``, ...) goes through its
        builder method, so it gets the same checks and payload shape.
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(
                "Clause name must be a non-empty string", argument="name", value=name
            )
        kind = name.lower()
        builder = self._builders().get(kind)
        if builder is None:
            return self._append(kind, args)
        try:
            inspect.signature(builder).bind(*args)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"Wrong number of arguments for a {kind.upper()} clause",
                argument="args",
                value=args,
            ) from exc
        return builder(*args)

    def _builders(self) -> dict[str, Callable[..., ClauseQuery]]:
        return {
            ClauseKind.SELECT.value: self.select,
            ClauseKind.FROM.value: self.from_,
            ClauseKind.WHERE.value: self.where,
            ClauseKind.WHEREID.value: self.where_id,
            ClauseKind.LIMIT.value: self.limit,
            ClauseKind.ORDER.value: self.order,
        }

    # -- read ----------------------------------------------------------------

    def assemble(self) -> tuple[Clause, ...]:
        """Assemble the query; for a clause query that is the clause list."""
        return self.get_clauses()

    def get_clauses(self) -> tuple[Clause, ...]:
        """Return a detached snapshot of the clauses, in insertion order.

        Payloads are deep-copied, so mutating the snapshot never reaches
        the builder.
        """
        return copy.deepcopy(tuple(self._clauses))

    def clauses_of(self, kind: str) -> tuple[Clause, ...]:
        """Return the clauses of one kind, in insertion order."""
        wanted = kind.lower()
        return tuple(c for c in self.get_clauses() if c.kind == wanted)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary."""
        return {
            "clauses": [
                {"kind": c.kind, "payload": _plain(c.payload)}
                for c in self.get_clauses()
            ]
        }

    def __repr__(self) -> str:
        kinds = ", ".join(c.kind for c in self._clauses)
        return f"ClauseQuery([{kinds}])"

    # -- internals -----------------------------------------------------------

    def _append(self, kind: str, payload: Any) -> ClauseQuery:
        if isinstance(kind, ClauseKind):
            kind = kind.value
        self._clauses.append(Clause(kind, copy.deepcopy(payload)))
        logger.debug("Added %s clause (%d total)", kind, len(self._clauses))
        return self


def _as_integer(value: Any) -> int | None:
    """Return ``value`` as an ``int`` when it is exactly integral."""
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    try:
        integral = int(value)
    except (OverflowError, ValueError):  # inf / nan
        return None
    return integral if integral == value else None


def _plain(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_plain(item) for item in value]
    return value
