"""
Sorted container implementations.
"""

from sortedseq.models.sortedcontainers.linked_list import Node, OrderedSequence

__all__ = ["Node", "OrderedSequence"]
