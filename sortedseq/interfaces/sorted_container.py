"""
SortedContainer abstract base class for single-type sorted collections.
"""

from abc import abstractmethod
from typing import TypeVar

from sortedseq.interfaces.ordered_iterable import OrderedIterable

T = TypeVar("T")


class SortedContainer(OrderedIterable[T]):
    """
    Abstract base class for sorted value containers.

    Values are kept in ascending order under the container's comparator.
    Duplicates are allowed. Inherits iteration from OrderedIterable.

    Implementations:
    - OrderedSequence: doubly linked list with head/tail fast paths
    """

    @abstractmethod
    def insert(self, value: T) -> None:
        """
        Insert a value at its sorted position.

        Args:
            value: The value to insert.

        Time complexity: O(N), O(1) at either end
        """
        pass

    @abstractmethod
    def remove(self, value: T) -> bool:
        """
        Remove the first value equal to ``value``.

        Args:
            value: The value to remove.

        Returns:
            True if a value was found and removed, False otherwise.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def contains(self, value: T) -> bool:
        """
        Check if a value equal to ``value`` is stored.

        Args:
            value: The value to check.

        Returns:
            True if the value exists, False otherwise.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def first(self) -> T:
        """
        Return the smallest value.

        Raises:
            EmptyContainerError: If the container is empty.
        """
        pass

    @abstractmethod
    def last(self) -> T:
        """
        Return the largest value.

        Raises:
            EmptyContainerError: If the container is empty.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored values.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if no values are stored."""
        pass

    @abstractmethod
    def to_list(self) -> list[T]:
        """Return a snapshot of all values in sorted order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all values."""
        pass

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)
