"""Immutable node records linking entries by key."""

import dataclasses
from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")


@dataclass(frozen=True)
class Node(Generic[K]):
    """
    A value's place in the order.

    Neighbours are referenced by their key in the owning map, never by
    object reference, so a node can be shared between map versions.
    """

    value: K
    previous: K | None = None
    next: K | None = None

    def with_previous(self, key: K | None) -> "Node[K]":
        """Return a copy with the backward link replaced."""
        return dataclasses.replace(self, previous=key)

    def with_next(self, key: K | None) -> "Node[K]":
        """Return a copy with the forward link replaced."""
        return dataclasses.replace(self, next=key)

    @property
    def is_detached(self) -> bool:
        """True if the node has neither neighbour."""
        return self.previous is None and self.next is None
