from .exceptions import (
    AdapterError,
    CloudGateError,
    InstanceNotFoundError,
    InvalidArgumentError,
    OutOfBoundsError,
)

__all__ = [
    "AdapterError",
    "CloudGateError",
    "InstanceNotFoundError",
    "InvalidArgumentError",
    "OutOfBoundsError",
]
