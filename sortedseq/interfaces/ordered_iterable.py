"""
OrderedIterable protocol for containers that iterate their values in order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class OrderedIterable(ABC, Generic[T]):
    """
    Protocol for containers that yield their values in ascending order.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end)

    Every call starts a fresh traversal from the current first value.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Return an iterator over all values in sorted order."""
        pass

    @abstractmethod
    def iterator(self, start: T | None = None, end: T | None = None) -> Iterator[T]:
        """
        Return an iterator over the values in the specified range.

        Args:
            start: Lower bound (inclusive). If None, starts from the beginning.
            end: Upper bound (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding values in sorted order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[T]:
        """Return an async iterator over all values in sorted order."""
        pass

    @abstractmethod
    def async_iterator(
        self, start: T | None = None, end: T | None = None
    ) -> AsyncIterator[T]:
        """
        Return an async iterator over the values in the specified range.

        Args:
            start: Lower bound (inclusive). If None, starts from the beginning.
            end: Upper bound (exclusive). If None, iterates to the end.

        Returns:
            AsyncIterator yielding values in sorted order.
        """
        pass
