"""
InputValidator - limits and sanitization for untrusted input.
"""

import re

from sortedseq.models.element_kind import ElementKind
from sortedseq.models.exceptions import (
    CapacityExceededError,
    EmptyInputError,
    EmptyValueError,
    InputTooLongError,
    IntegerOutOfRangeError,
    InvalidCommandError,
    StringTooLongError,
    TypeMismatchError,
    WhitespaceOnlyValueError,
)

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


class InputValidator:
    """
    Validates raw command lines and values before they reach a sequence.

    The core container only checks types and blank strings; this layer adds
    size caps, integer range checks, a capacity limit and sanitization.
    """

    DEFAULT_MAX_INPUT_LENGTH = 1000
    DEFAULT_MAX_STRING_LENGTH = 255
    DEFAULT_MAX_SIZE = 10_000
    DEFAULT_MIN_INTEGER = -(2**31)
    DEFAULT_MAX_INTEGER = 2**31 - 1

    ALLOWED_COMMANDS = ("insert", "remove", "contains", "stats", "clear", "quit")
    BANNED_SUBSTRINGS = ("<script", "</script", "javascript:", "vbscript:")

    def __init__(
        self,
        max_input_length: int = DEFAULT_MAX_INPUT_LENGTH,
        max_string_length: int = DEFAULT_MAX_STRING_LENGTH,
        max_size: int = DEFAULT_MAX_SIZE,
        min_integer: int = DEFAULT_MIN_INTEGER,
        max_integer: int = DEFAULT_MAX_INTEGER,
    ) -> None:
        """
        Initialize the validator.

        Args:
            max_input_length: Maximum length of a raw command line.
            max_string_length: Maximum length of a text value.
            max_size: Maximum number of values a sequence may hold.
            min_integer: Smallest accepted integer value.
            max_integer: Largest accepted integer value.
        """
        for name, limit in (
            ("max_input_length", max_input_length),
            ("max_string_length", max_string_length),
            ("max_size", max_size),
        ):
            if limit <= 0:
                raise ValueError(f"{name} must be positive, got {limit}")

        if min_integer > max_integer:
            raise ValueError(
                f"min_integer ({min_integer}) cannot exceed max_integer ({max_integer})"
            )

        self.max_input_length = max_input_length
        self.max_string_length = max_string_length
        self.max_size = max_size
        self.min_integer = min_integer
        self.max_integer = max_integer

    def validate_input(self, raw: str) -> str:
        """
        Validate and sanitize a raw command line.

        Returns:
            The line without NUL/CR characters and surrounding whitespace.
        """
        if len(raw) > self.max_input_length:
            raise InputTooLongError(self.max_input_length)

        sanitized = raw.replace("\0", "").replace("\r", "").strip()
        if not sanitized:
            raise EmptyInputError()

        return sanitized

    def validate_value(self, value: int | str, current_count: int) -> int | str:
        """
        Validate a value about to be inserted into a sequence.

        Args:
            value: The value to validate.
            current_count: Number of values the sequence holds right now.

        Returns:
            The value, sanitized if it is a string.
        """
        if current_count >= self.max_size:
            raise CapacityExceededError(self.max_size)

        return self.check_value(value)

    def check_value(self, value: int | str) -> int | str:
        """Validate a value without a capacity check (for lookups and removals)."""
        if ElementKind.STRING.accepts(value):
            return self._validate_string(value)
        if ElementKind.INT.accepts(value):
            return self._validate_integer(value)
        raise TypeMismatchError("int or string", ElementKind.describe(value))

    def validate_command(self, command: str) -> str:
        if command not in self.ALLOWED_COMMANDS:
            raise InvalidCommandError(command)
        return command

    def _validate_string(self, value: str) -> str:
        if len(value) > self.max_string_length:
            raise StringTooLongError(self.max_string_length)

        if value == "":
            raise EmptyValueError()

        if not value.strip():
            raise WhitespaceOnlyValueError()

        return self._sanitize_string(value)

    def _validate_integer(self, value: int) -> int:
        if value > self.max_integer or value < self.min_integer:
            raise IntegerOutOfRangeError(self.min_integer, self.max_integer)
        return value

    def _sanitize_string(self, value: str) -> str:
        """Strip control characters and script-injection markers."""
        sanitized = _CONTROL_CHARS_RE.sub("", value)
        for banned in self.BANNED_SUBSTRINGS:
            sanitized = sanitized.replace(banned, "")
        return sanitized
