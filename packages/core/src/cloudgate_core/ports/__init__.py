from .collection import ICountable, IIndexed, ISequential
from .query import IQueryAdapter

__all__ = [
    "ICountable",
    "IIndexed",
    "IQueryAdapter",
    "ISequential",
]
