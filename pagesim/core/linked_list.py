# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
Bounded doubly-linked list with O(1) lookup.

Nodes live in a fixed-size arena and are addressed by integer handles;
neighbour links are handles too, so the list is the only owner of its
nodes. A mapping from value to handle gives O(1) find/contains and lets
callers promote or demote an entry given only its value.

The front of the list is the least recently used end, the back the most
recently used end:

    lst = BoundedList(capacity=3)
    a = lst.append("a")
    lst.append("b")
    lst.move_to_back(a)          # ["b", "a"]
    lst.remove_by_value("b")     # ["a"]

Lookup registration is first-wins: if a value equal to one already mapped
is inserted again, the mapping keeps pointing at the original node.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

from .exceptions import CapacityExceededError, InvalidHandleError

T = TypeVar("T", bound=Hashable)


@dataclass
class _Node(Generic[T]):
    """Arena slot holding one value and its neighbour handles"""
    value: T
    previous: Optional[int] = None
    next: Optional[int] = None


class BoundedList(Generic[T]):
    """
    Fixed-capacity ordered sequence with O(1) lookup, removal and
    move-to-front/back.
    """

    def __init__(self, capacity: int = 10):
        """
        Create an empty list.

        Args:
            capacity: Maximum number of entries (0 makes a list that can
                never hold anything)
        """
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._init_storage()

    def _init_storage(self) -> None:
        self._nodes: List[Optional[_Node[T]]] = [None] * self._capacity
        self._free: Deque[int] = deque(range(self._capacity))
        self._lookup: Dict[T, int] = {}
        self._first: Optional[int] = None
        self._last: Optional[int] = None
        self._count = 0

    # =========================================================================
    # State
    # =========================================================================

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    @property
    def is_full(self) -> bool:
        return self._count == self._capacity

    @property
    def first(self) -> Optional[int]:
        """Handle of the front (least recently used) node"""
        return self._first

    @property
    def last(self) -> Optional[int]:
        """Handle of the back (most recently used) node"""
        return self._last

    @property
    def first_value(self) -> Optional[T]:
        return None if self._first is None else self._nodes[self._first].value

    @property
    def last_value(self) -> Optional[T]:
        return None if self._last is None else self._nodes[self._last].value

    def __len__(self) -> int:
        return self._count

    def __contains__(self, value: object) -> bool:
        return value in self._lookup

    def __iter__(self) -> Iterator[T]:
        handle = self._first
        while handle is not None:
            node = self._nodes[handle]
            yield node.value
            handle = node.next

    def __repr__(self) -> str:
        return f"BoundedList(capacity={self._capacity}, values={self.values()!r})"

    def values(self) -> List[T]:
        """Snapshot of the values, front to back"""
        return list(self)

    # =========================================================================
    # Insertion
    # =========================================================================

    def append(self, value: T) -> int:
        """
        Add a value at the back of the list.

        Returns:
            Handle of the new node

        Raises:
            CapacityExceededError: If the list is full
        """
        self._check_capacity()
        handle = self._allocate(value)
        self._link_last(handle)
        self._register(value, handle)
        return handle

    def prepend(self, value: T) -> int:
        """Add a value at the front of the list; see append()"""
        self._check_capacity()
        handle = self._allocate(value)
        self._link_first(handle)
        self._register(value, handle)
        return handle

    def insert_after(self, handle: int, value: T) -> int:
        """Insert a value directly behind the node at handle"""
        node = self._node(handle)
        if handle == self._last:
            return self.append(value)

        self._check_capacity()
        new_handle = self._allocate(value)
        new_node = self._nodes[new_handle]
        new_node.previous = handle
        new_node.next = node.next
        self._nodes[node.next].previous = new_handle
        node.next = new_handle
        self._register(value, new_handle)
        return new_handle

    def insert_before(self, handle: int, value: T) -> int:
        """Insert a value directly in front of the node at handle"""
        node = self._node(handle)
        if handle == self._first:
            return self.prepend(value)

        self._check_capacity()
        new_handle = self._allocate(value)
        new_node = self._nodes[new_handle]
        new_node.next = handle
        new_node.previous = node.previous
        self._nodes[node.previous].next = new_handle
        node.previous = new_handle
        self._register(value, new_handle)
        return new_handle

    # =========================================================================
    # Lookup
    # =========================================================================

    def find(self, value: T) -> Optional[int]:
        """Handle registered for value, or None if absent"""
        return self._lookup.get(value)

    def contains(self, value: T) -> bool:
        return value in self._lookup

    def value_at(self, handle: int) -> T:
        return self._node(handle).value

    # =========================================================================
    # Removal
    # =========================================================================

    def remove(self, handle: Optional[int]) -> bool:
        """
        Detach and free the node at handle.

        Passing None or a handle that is not live is a no-op.

        Returns:
            True if a node was removed
        """
        if handle is None or not self._is_live(handle):
            return False

        node = self._nodes[handle]
        if self._lookup.get(node.value) == handle:
            del self._lookup[node.value]

        self._unlink(handle)
        self._nodes[handle] = None
        self._free.append(handle)
        self._count -= 1
        return True

    def remove_by_value(self, value: T) -> bool:
        return self.remove(self.find(value))

    def clear(self) -> None:
        """Remove every entry"""
        self._init_storage()

    # =========================================================================
    # Reordering
    # =========================================================================

    def move_to_back(self, handle: int) -> None:
        """Make the node at handle the most recently used entry"""
        self._node(handle)
        if handle == self._last:
            return
        self._unlink(handle)
        self._link_last(handle)

    def move_to_front(self, handle: int) -> None:
        """Make the node at handle the least recently used entry"""
        self._node(handle)
        if handle == self._first:
            return
        self._unlink(handle)
        self._link_first(handle)

    def move_to_back_by_value(self, value: T) -> bool:
        handle = self.find(value)
        if handle is None:
            return False
        self.move_to_back(handle)
        return True

    def move_to_front_by_value(self, value: T) -> bool:
        handle = self.find(value)
        if handle is None:
            return False
        self.move_to_front(handle)
        return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _check_capacity(self) -> None:
        if self._count + 1 > self._capacity:
            raise CapacityExceededError(
                "The list is full.", capacity=self._capacity
            )

    def _allocate(self, value: T) -> int:
        handle = self._free.popleft()
        self._nodes[handle] = _Node(value)
        self._count += 1
        return handle

    def _register(self, value: T, handle: int) -> None:
        if value not in self._lookup:
            self._lookup[value] = handle

    def _is_live(self, handle: int) -> bool:
        return (
            isinstance(handle, int)
            and 0 <= handle < self._capacity
            and self._nodes[handle] is not None
        )

    def _node(self, handle: int) -> _Node[T]:
        if handle is None or not self._is_live(handle):
            raise InvalidHandleError(
                f"Handle {handle!r} does not refer to a node in this list",
                handle=handle,
            )
        return self._nodes[handle]

    def _link_last(self, handle: int) -> None:
        node = self._nodes[handle]
        node.previous = self._last
        node.next = None
        if self._last is None:
            self._first = handle
        else:
            self._nodes[self._last].next = handle
        self._last = handle

    def _link_first(self, handle: int) -> None:
        node = self._nodes[handle]
        node.previous = None
        node.next = self._first
        if self._first is None:
            self._last = handle
        else:
            self._nodes[self._first].previous = handle
        self._first = handle

    def _unlink(self, handle: int) -> None:
        node = self._nodes[handle]
        if node.previous is None:
            self._first = node.next
        else:
            self._nodes[node.previous].next = node.next
        if node.next is None:
            self._last = node.previous
        else:
            self._nodes[node.next].previous = node.previous
        node.previous = None
        node.next = None
