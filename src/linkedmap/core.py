"""Main LinkedMap implementation."""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar, get_args

from linkedmap.errors import DuplicateKeyError, MissingKeyError
from linkedmap.node import Node
from linkedmap.types import DuplicatePolicy, MissingPolicy

K = TypeVar("K")
D = TypeVar("D")

logger = logging.getLogger(__name__)


def _check_policy(name: str, policy: str, allowed: Any) -> None:
    if policy not in get_args(allowed):
        raise ValueError(f"Invalid {name} policy: {policy!r}")


class LinkedMap(Generic[K]):
    """
    Immutable insertion-ordered collection with O(1) add, move-to-end and remove.

    Each stored value is its own lookup key. Entries are kept in a dict of
    Node records whose previous/next fields are keys of their neighbours,
    so every operation that changes the order returns a new LinkedMap that
    shares all untouched nodes with the original. The receiver is never
    modified.
    """

    __slots__ = ("_head", "_tail", "_entries")

    _head: K | None
    _tail: K | None
    _entries: dict[K, Node[K]]

    def __init__(self) -> None:
        """Initialize an empty map."""
        object.__setattr__(self, "_head", None)
        object.__setattr__(self, "_tail", None)
        object.__setattr__(self, "_entries", {})

    @classmethod
    def new(cls) -> "LinkedMap[K]":
        """Create a new empty map."""
        return cls()

    @classmethod
    def from_iterable(cls, values: Iterable[K]) -> "LinkedMap[K]":
        """
        Build a map by adding each value in turn.

        A value that occurs more than once ends up at the position of its
        last occurrence.
        """
        result: LinkedMap[K] = cls()
        for value in values:
            result = result.add(value)
        return result

    def _derive(
        self, head: K | None, tail: K | None, entries: dict[K, Node[K]]
    ) -> "LinkedMap[K]":
        """Return a new map of the same type over the given fields."""
        derived = type(self).__new__(type(self))
        object.__setattr__(derived, "_head", head)
        object.__setattr__(derived, "_tail", tail)
        object.__setattr__(derived, "_entries", entries)
        return derived

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, tuple[list[K]]]:
        # Links are fully determined by the order
        return type(self).from_iterable, (self.to_list(),)

    @property
    def head(self) -> K | None:
        """The first value in order, or None if empty."""
        return self._head

    @property
    def tail(self) -> K | None:
        """The last (most recently added) value, or None if empty."""
        return self._tail

    @property
    def entries(self) -> Mapping[K, Node[K]]:
        """Read-only view of the value -> Node mapping."""
        return MappingProxyType(self._entries)

    def add(self, value: K) -> "LinkedMap[K]":
        """
        Add a value at the tail, moving it there if it is already present.

        The relative order of all other values is preserved.

        Args:
            value: Hashable value to add. None cannot be stored because it
                marks a missing link.

        Returns:
            A map with value as its tail (self if value already was the tail)

        Raises:
            ValueError: If value is None
        """
        if value is None:
            raise ValueError("None cannot be stored in a LinkedMap")

        if not self._entries:
            return self._derive(value, value, {value: Node(value)})

        # Already at the tail (includes the sole-entry case)
        if value == self._tail:
            return self

        entries = dict(self._entries)
        head, tail = self._head, self._tail
        if value in entries:
            head, tail = self._unlink(entries, value)

        # value was not the tail, so at least one other entry remains
        entries[tail] = entries[tail].with_next(value)
        entries[value] = Node(value, previous=tail)
        return self._derive(head, value, entries)

    def add_new(self, value: K, *, if_present: DuplicatePolicy = "ignore") -> "LinkedMap[K]":
        """
        Add a value at the tail unless it is already present.

        Args:
            value: Hashable value to add
            if_present: Policy when value is already present:
                - "ignore": Return the map unchanged (default)
                - "raise": Raise DuplicateKeyError

        Returns:
            The updated map, or self if value was present

        Raises:
            DuplicateKeyError: If value is present and if_present="raise"
            ValueError: If if_present is not a known policy
        """
        _check_policy("if_present", if_present, DuplicatePolicy)

        if value in self._entries:
            if if_present == "raise":
                logger.debug("Rejecting duplicate value %r", value)
                raise DuplicateKeyError(value)
            return self

        return self.add(value)

    def remove(self, value: K, *, if_missing: MissingPolicy = "ignore") -> "LinkedMap[K]":
        """
        Remove a value, relinking its neighbours to each other.

        Args:
            value: The value to remove
            if_missing: Policy when value is not present:
                - "ignore": Return the map unchanged (default)
                - "raise": Raise MissingKeyError

        Returns:
            The updated map, or self if value was absent

        Raises:
            MissingKeyError: If value is absent and if_missing="raise"
            ValueError: If if_missing is not a known policy
        """
        _check_policy("if_missing", if_missing, MissingPolicy)

        if value not in self._entries:
            if if_missing == "raise":
                logger.debug("Cannot remove missing value %r", value)
                raise MissingKeyError(value)
            return self

        # Sole entry
        if self._entries[value].is_detached:
            return type(self)()

        entries = dict(self._entries)
        head, tail = self._unlink(entries, value)
        return self._derive(head, tail, entries)

    def _unlink(self, entries: dict[K, Node[K]], value: K) -> tuple[K | None, K | None]:
        """
        Excise value from a private working copy of this map's entries.

        value must be present and have at least one neighbour. At most two
        neighbour nodes are replaced. Returns the resulting (head, tail) pair.
        """
        node = entries.pop(value)
        head, tail = self._head, self._tail

        if node.previous is None:
            # Removing the head: successor takes over
            head = node.next
            entries[head] = entries[head].with_previous(None)
        elif node.next is None:
            # Removing the tail: predecessor takes over
            tail = node.previous
            entries[tail] = entries[tail].with_next(None)
        else:
            # Interior: splice neighbours together
            entries[node.previous] = entries[node.previous].with_next(node.next)
            entries[node.next] = entries[node.next].with_previous(node.previous)

        return head, tail

    def get(self, key: K, default: D | None = None) -> K | D | None:
        """
        Look up a value without changing the order.

        Args:
            key: The value to look up
            default: Returned when key is absent

        Returns:
            The stored value if present, default otherwise
        """
        node = self._entries.get(key)
        return node.value if node is not None else default

    def get_lazy(self, key: K, factory: Callable[[], D]) -> K | D:
        """
        Look up a value, computing the fallback only on a miss.

        Args:
            key: The value to look up
            factory: Zero-argument callable invoked once if key is absent

        Returns:
            The stored value if present, factory() otherwise
        """
        node = self._entries.get(key)
        if node is not None:
            return node.value
        return factory()

    def size(self) -> int:
        """Return the number of values."""
        return len(self._entries)

    def member(self, value: K) -> bool:
        """Return True if value is present."""
        return value in self._entries

    def to_list(self) -> list[K]:
        """Return the values from head to tail."""
        values: list[K] = []
        current = self._head
        while current is not None:
            values.append(current)
            current = self._entries[current].next
        return values

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, value: object) -> bool:
        return value in self._entries

    def __iter__(self) -> Iterator[K]:
        # Eager: the order is materialized before iteration starts
        return iter(self.to_list())

    def __reversed__(self) -> Iterator[K]:
        """Iterate from tail to head by following previous links."""
        values: list[K] = []
        current = self._tail
        while current is not None:
            values.append(current)
            current = self._entries[current].previous
        return iter(values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedMap):
            return NotImplemented
        return (
            self._head == other._head
            and self._tail == other._tail
            and self._entries == other._entries
        )

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
