"""
Comparator validation and three-way ordering results.
"""

import inspect
from collections.abc import Callable
from enum import IntEnum
from typing import Any, TypeVar

from sortedseq.models.exceptions import ConfigurationError

T = TypeVar("T")

Comparator = Callable[[T, T], int]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class Ordering(IntEnum):
    """Normalized result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, result: int) -> "Ordering":
        """Map a comparator's raw int result onto LESS, EQUAL or GREATER."""
        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL


def validate_comparator(comparator: Any) -> Comparator:
    """
    Check that ``comparator`` can be called as ``comparator(a, b)``.

    The comparator must be callable and declare exactly two positional
    parameters. Variadic signatures are rejected as well.

    Raises:
        ConfigurationError: If the comparator is unusable.
    """
    if not callable(comparator):
        raise ConfigurationError("Comparator must be a valid callable function")

    try:
        signature = inspect.signature(comparator)
    except (TypeError, ValueError):
        raise ConfigurationError("Comparator must be a valid callable function") from None

    params = list(signature.parameters.values())
    if len(params) != 2 or any(p.kind not in _POSITIONAL for p in params):
        raise ConfigurationError("Comparator must accept exactly two arguments")

    return comparator
