"""
Doubly linked list implementation for sorted single-type storage.

Inserts at either end are O(1); everything else is a linear walk that stops
as soon as sortedness proves the target cannot appear further on.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from sortedseq.interfaces.sorted_container import SortedContainer
from sortedseq.models.comparator import Comparator, Ordering, validate_comparator
from sortedseq.models.element_kind import ElementKind
from sortedseq.models.exceptions import (
    EmptyContainerError,
    InvalidValueError,
    TypeMismatchError,
)

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """Node in the linked list."""

    value: T
    prev: "Node[T] | None" = field(default=None, repr=False)
    next: "Node[T] | None" = field(default=None, repr=False)


class OrderedSequence(SortedContainer[T]):
    """
    Doubly linked list kept in ascending comparator order.

    Properties maintained:
    1. Adjacent values never compare greater (head to tail)
    2. next/prev links are symmetric
    3. head is None iff tail is None iff the size is 0
    4. Every value has the element kind fixed at construction
    5. Values that compare equal are all kept

    Not thread-safe. Iterators raise RuntimeError if the sequence is
    mutated while they are live.
    """

    def __init__(
        self,
        element_kind: ElementKind | str,
        comparator: Comparator | None = None,
    ) -> None:
        """
        Initialize an empty sequence.

        Args:
            element_kind: ElementKind or its selector ("int" / "string").
            comparator: Optional function (a, b) -> int returning a negative
                number, zero or a positive number. Defaults to the natural
                order of the element kind.

        Raises:
            ConfigurationError: If the kind is unknown or the comparator is
                not a two-argument callable.
        """
        self._element_kind = ElementKind.from_selector(element_kind)
        self._custom_comparator = (
            validate_comparator(comparator) if comparator is not None else None
        )
        self._comparator: Comparator = (
            self._custom_comparator or self._element_kind.default_compare
        )

        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size: int = 0

        # Bumped on every structural change so live iterators can detect it
        self._version: int = 0

    @property
    def element_kind(self) -> ElementKind:
        return self._element_kind

    @property
    def comparator(self) -> Comparator | None:
        """The comparator given at construction, or None for the default order."""
        return self._custom_comparator

    def insert(self, value: T) -> None:
        """Insert value keeping the list sorted. O(N), O(1) at either end."""
        self._validate_type(value)
        self._validate_value(value)

        new_node = Node(value=value)

        if self._head is None:
            self._head = new_node
            self._tail = new_node
        elif self._compare(value, self._head.value) != Ordering.GREATER:
            # Fast path: new head
            new_node.next = self._head
            self._head.prev = new_node
            self._head = new_node
        elif self._compare(value, self._tail.value) != Ordering.LESS:
            # Fast path: new tail
            new_node.prev = self._tail
            self._tail.next = new_node
            self._tail = new_node
        else:
            self._insert_sorted(new_node)

        self._size += 1
        self._version += 1

    def remove(self, value: T) -> bool:
        """Remove the first value equal to ``value``. O(N)"""
        self._validate_type(value)
        node = self._find_node(value)
        if node is None:
            return False

        self._unlink(node)
        return True

    def contains(self, value: T) -> bool:
        self._validate_type(value)
        return self._find_node(value) is not None

    def __contains__(self, value: object) -> bool:
        # A value of another type is never a member
        if not self._element_kind.accepts(value):
            return False
        return self._find_node(value) is not None

    def first(self) -> T:
        if self._head is None:
            raise EmptyContainerError("first")
        return self._head.value

    def last(self) -> T:
        if self._tail is None:
            raise EmptyContainerError("last")
        return self._tail.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def to_list(self) -> list[T]:
        return list(self._walk())

    def clear(self) -> None:
        """Drop every node. Element kind and comparator are kept."""
        if self._head is None:
            return

        self._head = None
        self._tail = None
        self._size = 0
        self._version += 1

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def iterator(self, start: T | None = None, end: T | None = None) -> Iterator[T]:
        return _SequenceIterator(self, start, end)

    def __aiter__(self) -> AsyncIterator[T]:
        return self.async_iterator()

    def async_iterator(
        self, start: T | None = None, end: T | None = None
    ) -> AsyncIterator[T]:
        return _AsyncSequenceIterator(self, start, end)

    def __repr__(self) -> str:
        return f"OrderedSequence({self._element_kind.value!r}, {self.to_list()!r})"

    def _walk(self) -> Iterator[T]:
        """Yield values head to tail without mutation checks."""
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def _compare(self, a: T, b: T) -> Ordering:
        return Ordering.of(self._comparator(a, b))

    def _find_node(self, value: T) -> Node[T] | None:
        """Find the first node equal to value, stopping at the first greater one."""
        current = self._head
        while current is not None:
            ordering = self._compare(current.value, value)
            if ordering == Ordering.EQUAL:
                return current
            if ordering == Ordering.GREATER:
                # Everything after this node is greater as well
                return None
            current = current.next
        return None

    def _insert_sorted(self, new_node: Node[T]) -> None:
        """Insert before the first strictly greater node, or append."""
        current = self._head
        while current is not None:
            if self._compare(new_node.value, current.value) == Ordering.LESS:
                new_node.next = current
                new_node.prev = current.prev

                if current.prev is not None:
                    current.prev.next = new_node
                else:
                    self._head = new_node

                current.prev = new_node
                return
            current = current.next

        self._tail.next = new_node
        new_node.prev = self._tail
        self._tail = new_node

    def _unlink(self, node: Node[T]) -> None:
        """Detach a node from its neighbours. O(1)"""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next

        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev

        node.prev = None
        node.next = None
        self._size -= 1
        self._version += 1

    def _validate_type(self, value: Any) -> None:
        if not self._element_kind.accepts(value):
            raise TypeMismatchError(
                self._element_kind.value, ElementKind.describe(value)
            )

    def _validate_value(self, value: Any) -> None:
        if self._element_kind is ElementKind.STRING and not value.strip():
            raise InvalidValueError("String cannot be empty or whitespace only")


class _SequenceIterator(Iterator[T]):
    """Iterator over a value range of an OrderedSequence."""

    def __init__(
        self, sequence: OrderedSequence[T], start: T | None, end: T | None
    ) -> None:
        if start is not None:
            sequence._validate_type(start)
        if end is not None:
            sequence._validate_type(end)

        self._sequence = sequence
        self._end = end
        self._version = sequence._version
        self._node = self._seek(sequence._head, start)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        node = self._node
        if node is None:
            raise StopIteration

        if self._sequence._version != self._version:
            raise RuntimeError("OrderedSequence mutated during iteration")

        # Check end bound
        if self._end is not None and self._sequence._compare(node.value, self._end) != Ordering.LESS:
            self._node = None
            raise StopIteration

        self._node = node.next
        return node.value

    def _seek(self, node: Node[T] | None, start: T | None) -> Node[T] | None:
        """Skip nodes below the start bound."""
        if start is None:
            return node
        while node is not None and self._sequence._compare(node.value, start) == Ordering.LESS:
            node = node.next
        return node


class _AsyncSequenceIterator(AsyncIterator[T]):
    """Async iterator over a value range of an OrderedSequence (in-memory, no I/O)."""

    def __init__(
        self, sequence: OrderedSequence[T], start: T | None, end: T | None
    ) -> None:
        self._inner = _SequenceIterator(sequence, start, end)

    def __aiter__(self) -> "_AsyncSequenceIterator[T]":
        return self

    async def __anext__(self) -> T:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
