"""NativeQuery — a query already expressed in the backend's own language."""

from __future__ import annotations

from typing import Any

from cloudgate_core.primitives.exceptions import InvalidArgumentError


class NativeQuery:
    """
    Wraps a backend-native query value (e.g. a select expression string or
    a table-service filter object) so it can travel through the same
    ``assemble()`` seam as a ``ClauseQuery``.
    """

    __slots__ = ("_statement",)

    def __init__(self, statement: Any) -> None:
        if statement is None:
            raise InvalidArgumentError(
                "A native query statement is required", argument="statement"
            )
        self._statement = statement

    @property
    def statement(self) -> Any:
        return self._statement

    def assemble(self) -> Any:
        return self._statement

    def __repr__(self) -> str:
        return f"NativeQuery({self._statement!r})"
