"""
ReadOnlyInstanceCollection — a fixed, read-only list of managed instances.

Usage::

    instances = ReadOnlyInstanceCollection(adapter, raw_descriptors)

    len(instances)            # or instances.count()
    instances[0]              # or instances.get(0); OutOfBoundsError past the end
    instances.has(3)
    for instance in instances:
        instance.status()

The collection is built once from the descriptors an adapter returned and
never changes size afterwards.  Assigning or deleting by index raises
``InvalidArgumentError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, NoReturn

from cloudgate_core.primitives.exceptions import InvalidArgumentError, OutOfBoundsError

from .instance import ManagedInstance
from .ports import is_infrastructure_adapter

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .instance import InstanceAttributes
    from .ports import IInfrastructureAdapter

logger = logging.getLogger("cloudgate.infrastructure.instances")


class ReadOnlyInstanceCollection:
    """
    Ordered, fixed-size collection of ``ManagedInstance``.

    Every element shares the same borrowed adapter handle.  Traversal uses
    a single cursor per collection: ``rewind()`` (and ``iter()``, which
    rewinds) resets it for everyone, it is not forked per iterator.
    """

    __slots__ = ("_adapter", "_instances", "_position")

    def __init__(
        self,
        adapter: IInfrastructureAdapter,
        descriptors: Iterable[Mapping[str, Any] | InstanceAttributes] | None,
    ) -> None:
        if not is_infrastructure_adapter(adapter):
            raise InvalidArgumentError(
                "You must pass an IInfrastructureAdapter", argument="adapter"
            )
        if (
            descriptors is None
            or not isinstance(descriptors, Iterable)
            or isinstance(descriptors, (str, bytes, Mapping))
        ):
            raise InvalidArgumentError(
                "You must pass a list of instance descriptors",
                argument="descriptors",
                value=descriptors,
            )
        instances = tuple(
            ManagedInstance(adapter, descriptor) for descriptor in descriptors
        )
        if not instances:
            raise InvalidArgumentError(
                "You must pass a non-empty list of instance descriptors",
                argument="descriptors",
            )

        self._adapter = adapter
        self._instances = instances
        self._position = 0
        logger.debug(
            "Built instance collection of %d instance(s) on %s",
            len(self._instances),
            type(adapter).__name__,
        )

    @property
    def adapter(self) -> IInfrastructureAdapter:
        return self._adapter

    # -- size ----------------------------------------------------------------

    def count(self) -> int:
        """Return the number of instances."""
        return len(self._instances)

    def __len__(self) -> int:
        return len(self._instances)

    # -- indexed access ------------------------------------------------------

    def has(self, offset: Any) -> bool:
        """Whether ``offset`` addresses an element."""
        if isinstance(offset, bool) or not isinstance(offset, int):
            return False
        return 0 <= offset < len(self._instances)

    def get(self, offset: int) -> ManagedInstance:
        """Return the instance at ``offset``.

        Raises:
            OutOfBoundsError: If ``offset`` is outside ``[0, count())``.
                Negative offsets are not reverse indices.
        """
        if not self.has(offset):
            raise OutOfBoundsError(offset, len(self._instances))
        return self._instances[offset]

    def __getitem__(self, offset: int) -> ManagedInstance:
        return self.get(offset)

    def __setitem__(self, offset: int, value: Any) -> NoReturn:
        raise InvalidArgumentError(
            "You are trying to set a read-only element", argument="offset"
        )

    def __delitem__(self, offset: int) -> NoReturn:
        raise InvalidArgumentError(
            "You are trying to unset a read-only element", argument="offset"
        )

    # -- traversal -----------------------------------------------------------

    def rewind(self) -> None:
        """Move the cursor back to the first element."""
        self._position = 0

    def valid(self) -> bool:
        """Whether the cursor points at an element."""
        return self._position < len(self._instances)

    def current(self) -> ManagedInstance:
        """Return the element under the cursor."""
        return self.get(self._position)

    def key(self) -> int:
        return self._position

    def advance(self) -> None:
        self._position += 1

    def __iter__(self) -> Iterator[ManagedInstance]:
        self.rewind()
        while self.valid():
            yield self.current()
            self.advance()

    def __repr__(self) -> str:
        return f"ReadOnlyInstanceCollection(count={len(self._instances)})"
