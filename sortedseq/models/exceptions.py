"""
Custom exceptions for sorted sequences and their validation layer.
"""


class SortedSequenceError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SortedSequenceError, ValueError):
    """
    Raised when a sequence is constructed with an unusable configuration.

    Covers unknown element kinds and comparators that are not callable or
    do not accept exactly two arguments.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


class TypeMismatchError(SortedSequenceError, TypeError):
    """
    Raised when a value does not match the sequence's element kind.

    Values are never coerced; the caller gets the expected and actual type.
    """

    def __init__(self, expected: str, actual: str):
        """
        Initialize type mismatch error.

        Args:
            expected: Descriptor of the sequence's element kind.
            actual: Descriptor of the offered value's type.
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f"Type mismatch: expected {expected}, got {actual}")


class InvalidValueError(SortedSequenceError, ValueError):
    """Raised when a value of the right type fails content validation."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid value: {reason}")


class EmptyContainerError(SortedSequenceError, LookupError):
    """Raised when first()/last() is called on an empty sequence."""

    def __init__(self, operation: str = "operation"):
        self.operation = operation
        super().__init__(f"Cannot perform {operation} on empty list")


class ValidationError(SortedSequenceError, ValueError):
    """Base class for input validation failures outside the core container."""


class InputTooLongError(ValidationError):
    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(f"Input too long: maximum {max_length} characters allowed")


class EmptyInputError(ValidationError):
    def __init__(self):
        super().__init__("Input cannot be empty")


class CapacityExceededError(ValidationError):
    """Raised when an insert would grow a sequence past its size limit."""

    def __init__(self, max_size: int):
        self.max_size = max_size
        super().__init__(f"Array size limit exceeded: maximum {max_size} values allowed")


class StringTooLongError(ValidationError):
    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(f"String too long: maximum {max_length} characters allowed")


class EmptyValueError(ValidationError):
    def __init__(self):
        super().__init__("Value cannot be empty")


class WhitespaceOnlyValueError(ValidationError):
    def __init__(self):
        super().__init__("Value cannot be whitespace only")


class IntegerOutOfRangeError(ValidationError):
    def __init__(self, minimum: int, maximum: int):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Integer out of range: must be between {minimum} and {maximum}")


class InvalidCommandError(ValidationError):
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Invalid command: {command}")
