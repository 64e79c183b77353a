"""
Data models for sorted sequences.
"""

from sortedseq.models.comparator import Comparator, Ordering, validate_comparator
from sortedseq.models.element_kind import ElementKind
from sortedseq.models.exceptions import (
    ConfigurationError,
    EmptyContainerError,
    InvalidValueError,
    SortedSequenceError,
    TypeMismatchError,
    ValidationError,
)
from sortedseq.models.sortedcontainers import OrderedSequence

__all__ = [
    "Comparator",
    "Ordering",
    "validate_comparator",
    "ElementKind",
    "ConfigurationError",
    "EmptyContainerError",
    "InvalidValueError",
    "SortedSequenceError",
    "TypeMismatchError",
    "ValidationError",
    "OrderedSequence",
]
