"""cloudgate-core — Foundation package for the cloudgate toolkit.

Error taxonomy and the capability protocols that backend adapters,
query types and result collections agree on.
"""

from __future__ import annotations

# ── Ports ───────────────────────────────────────────────────────
from .ports import ICountable, IIndexed, IQueryAdapter, ISequential

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    AdapterError,
    CloudGateError,
    InstanceNotFoundError,
    InvalidArgumentError,
    OutOfBoundsError,
)

__all__ = [
    # Ports
    "ICountable",
    "IIndexed",
    "IQueryAdapter",
    "ISequential",
    # Exceptions
    "AdapterError",
    "CloudGateError",
    "InstanceNotFoundError",
    "InvalidArgumentError",
    "OutOfBoundsError",
]
