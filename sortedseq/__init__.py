"""
Sorted single-type sequences.

This package provides an always-sorted container with:
- insert(value) - O(N), O(1) at head or tail
- remove(value) / contains(value) - linear walk with early exit
- first() / last() - O(1) bounds access
- Ordered, range-bounded and async iteration
- A validating service layer and an interactive command shell
"""

from sortedseq.models.element_kind import ElementKind
from sortedseq.models.sortedcontainers import OrderedSequence
from sortedseq.service import SequenceService

__all__ = ["ElementKind", "OrderedSequence", "SequenceService"]
