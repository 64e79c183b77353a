"""
ElementKind - the single value type a sequence accepts.
"""

from enum import Enum
from typing import Any

from sortedseq.models.exceptions import ConfigurationError


class ElementKind(Enum):
    """Value domain of a sequence, fixed at construction."""

    INT = "int"
    STRING = "string"

    @classmethod
    def from_selector(cls, selector: "ElementKind | str") -> "ElementKind":
        """
        Resolve an element kind from a member or its selector string.

        Args:
            selector: An ElementKind, or one of "int" / "string".

        Returns:
            The matching ElementKind.

        Raises:
            ConfigurationError: If the selector names no known kind.
        """
        if isinstance(selector, cls):
            return selector
        for kind in cls:
            if kind.value == selector:
                return kind
        raise ConfigurationError("Type must be 'int' or 'string'")

    @classmethod
    def of(cls, value: Any) -> "ElementKind | None":
        """Return the kind a value belongs to, or None if it fits no kind."""
        for kind in cls:
            if kind.accepts(value):
                return kind
        return None

    def accepts(self, value: Any) -> bool:
        # bool is an int subclass but never a valid integer element
        if self is ElementKind.INT:
            return isinstance(value, int) and not isinstance(value, bool)
        return isinstance(value, str)

    @staticmethod
    def describe(value: Any) -> str:
        """Type descriptor of an arbitrary value, used in error messages."""
        return type(value).__name__

    def default_compare(self, a: Any, b: Any) -> int:
        """
        Default total order for this kind.

        Integers compare numerically; strings compare by code point, which is
        the same order as comparing their UTF-8 bytes.
        """
        return (a > b) - (a < b)
