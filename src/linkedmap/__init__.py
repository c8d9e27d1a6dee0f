"""linkedmap - Immutable insertion-ordered collection with O(1) move-to-end and removal."""

from linkedmap.core import LinkedMap
from linkedmap.errors import DuplicateKeyError, LinkedMapError, MissingKeyError
from linkedmap.node import Node
from linkedmap.types import DuplicatePolicy, MissingPolicy

__version__ = "0.1.0"

__all__ = [
    "LinkedMap",
    "Node",
    "LinkedMapError",
    "DuplicateKeyError",
    "MissingKeyError",
    "DuplicatePolicy",
    "MissingPolicy",
]
