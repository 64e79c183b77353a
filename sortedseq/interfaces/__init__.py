"""
Abstract base classes for sorted containers.
"""

from sortedseq.interfaces.ordered_iterable import OrderedIterable
from sortedseq.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
