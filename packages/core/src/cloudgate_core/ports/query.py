"""IQueryAdapter — the contract every query representation satisfies."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IQueryAdapter(Protocol):
    """
    Anything that can produce a consumable query representation.

    Consumers depend only on ``assemble()``.  A clause builder assembles
    into its ordered clause list; a native query assembles into the
    backend-native value it wraps.  What the returned value looks like is
    agreed between the query type and the adapter that consumes it.
    """

    def assemble(self) -> Any:
        """Return the representation a backend adapter will translate."""
        ...
