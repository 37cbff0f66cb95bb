"""Error taxonomy shared by every cloudgate package.

All exceptions inherit from ``CloudGateError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class CloudGateError(Exception):
    """Root exception for the entire cloudgate toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidArgumentError(CloudGateError, ValueError):
    """Raised when a call receives a value violating its type/shape contract.

    Also raised when a read-only structure is asked to mutate.
    """

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        value: Any = None,
    ) -> None:
        self.message = message
        self.argument = argument
        self.value = value
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT",
            "message": self.message,
            "argument": self.argument,
        }


class OutOfBoundsError(CloudGateError, IndexError):
    """Raised when an offset falls outside ``[0, size)``."""

    def __init__(self, offset: object, size: int) -> None:
        self.offset = offset
        self.size = size
        super().__init__(f"Illegal index {offset!r} for collection of size {size}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OUT_OF_BOUNDS",
            "offset": self.offset,
            "size": self.size,
        }


class AdapterError(CloudGateError):
    """Base class for errors reported by backend adapters."""


class InstanceNotFoundError(AdapterError):
    """Raised when an adapter does not know the requested instance."""

    def __init__(self, instance_id: object) -> None:
        self.instance_id = instance_id
        super().__init__(f"Instance with id={instance_id!r} not found")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INSTANCE_NOT_FOUND",
            "instance_id": self.instance_id,
        }
