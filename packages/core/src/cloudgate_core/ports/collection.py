"""Minimal, independent capabilities for read-only result collections.

Most consumers need one or two of these, never all three, so they are
kept as separate protocols rather than one fused interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ICountable(Protocol):
    """Size query."""

    def count(self) -> int: ...


@runtime_checkable
class IIndexed(Protocol[T_co]):
    """Positional access with an explicit bounds check."""

    def get(self, offset: int) -> T_co:
        """Return the element at ``offset`` or raise ``OutOfBoundsError``."""
        ...

    def has(self, offset: int) -> bool: ...


@runtime_checkable
class ISequential(Protocol[T_co]):
    """
    Forward traversal over a single shared cursor.

    ``rewind()`` restarts the cursor; ``iter()`` rewinds and walks it to
    the end.  There is one cursor per collection, not one per iterator.
    """

    def __iter__(self) -> Iterator[T_co]: ...

    def rewind(self) -> None: ...

    def valid(self) -> bool: ...

    def current(self) -> T_co: ...

    def key(self) -> int: ...

    def advance(self) -> None: ...
