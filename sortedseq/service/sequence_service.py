"""
SequenceService - validated, non-raising front end to an OrderedSequence.
"""

import logging
from dataclasses import dataclass, field

from sortedseq.models.comparator import Comparator, validate_comparator
from sortedseq.models.element_kind import ElementKind
from sortedseq.models.exceptions import (
    InvalidValueError,
    TypeMismatchError,
    ValidationError,
)
from sortedseq.models.sortedcontainers import OrderedSequence
from sortedseq.security.validator import InputValidator

logger = logging.getLogger(__name__)

# Errors that become a failed OperationResult instead of propagating
_REJECTIONS = (ValidationError, TypeMismatchError, InvalidValueError)


@dataclass
class OperationResult:
    """Outcome of a service operation."""

    success: bool
    message: str


@dataclass
class SequenceStats:
    """Snapshot of a sequence's state."""

    count: int
    is_empty: bool
    value_type: str | None
    first: int | str | None
    last: int | str | None
    values: list[int | str] = field(default_factory=list)


class SequenceService:
    """
    Validated operations on a single OrderedSequence.

    Provides:
    - insert_value(v): validate, then insert
    - remove_value(v) / contains_value(v): validate, then search
    - stats(): count, bounds, type and values
    - clear_list(): drop every value

    Ordering and searching are delegated to the sequence. When no element
    kind is configured, the kind of the first inserted value is used until
    the next clear_list().
    """

    def __init__(
        self,
        element_kind: ElementKind | str | None = None,
        comparator: Comparator | None = None,
        validator: InputValidator | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            element_kind: Fixed element kind, or None to infer it on first insert.
            comparator: Optional comparator passed to the sequence.
            validator: Input validator (default limits if omitted).

        Raises:
            ConfigurationError: If the kind or comparator is invalid.
        """
        self._validator = validator or InputValidator()
        self._fixed_kind = (
            ElementKind.from_selector(element_kind) if element_kind is not None else None
        )
        self._comparator = (
            validate_comparator(comparator) if comparator is not None else None
        )

        self._sequence: OrderedSequence | None = None
        if self._fixed_kind is not None:
            self._sequence = OrderedSequence(self._fixed_kind, self._comparator)

    @property
    def sequence(self) -> OrderedSequence | None:
        """The backing sequence, or None before the first insert when inferring."""
        return self._sequence

    def size(self) -> int:
        return self._sequence.size() if self._sequence is not None else 0

    def insert_value(self, value: int | str) -> OperationResult:
        """
        Validate and insert a value.

        Returns:
            Successful result, or a failed one carrying the rejection reason.
        """
        try:
            validated = self._validator.validate_value(value, self.size())
            sequence = self._sequence_for(validated)
            sequence.insert(validated)
        except _REJECTIONS as e:
            logger.warning(f"Rejected insert of {value!r}: {e}")
            return OperationResult(success=False, message=str(e))

        # An inferred kind only sticks once a value was actually stored
        self._sequence = sequence
        logger.debug(f"Inserted {validated!r}, size is now {self.size()}")
        return OperationResult(success=True, message=f"Value {validated} inserted successfully")

    def remove_value(self, value: int | str) -> OperationResult:
        """Validate and remove the first matching value."""
        try:
            validated = self._validator.check_value(value)
            removed = self._sequence is not None and self._sequence.remove(validated)
        except _REJECTIONS as e:
            logger.warning(f"Rejected remove of {value!r}: {e}")
            return OperationResult(success=False, message=str(e))

        if not removed:
            return OperationResult(success=False, message=f"Value {validated} not found")

        logger.debug(f"Removed {validated!r}, size is now {self.size()}")
        return OperationResult(success=True, message=f"Value {validated} removed successfully")

    def contains_value(self, value: int | str) -> OperationResult:
        """Validate a value and report whether it is stored."""
        try:
            validated = self._validator.check_value(value)
            found = self._sequence is not None and self._sequence.contains(validated)
        except _REJECTIONS as e:
            logger.warning(f"Rejected lookup of {value!r}: {e}")
            return OperationResult(success=False, message=str(e))

        message = f"Value {validated} found" if found else f"Value {validated} not found"
        return OperationResult(success=found, message=message)

    def stats(self) -> SequenceStats:
        sequence = self._sequence
        if sequence is None or sequence.is_empty():
            return SequenceStats(
                count=0,
                is_empty=True,
                value_type=sequence.element_kind.value if sequence is not None else None,
                first=None,
                last=None,
            )

        return SequenceStats(
            count=sequence.size(),
            is_empty=False,
            value_type=sequence.element_kind.value,
            first=sequence.first(),
            last=sequence.last(),
            values=sequence.to_list(),
        )

    def clear_list(self) -> OperationResult:
        if self._sequence is not None:
            self._sequence.clear()
        if self._fixed_kind is None:
            # Inferred kinds are forgotten so the next insert may pick another
            self._sequence = None

        logger.debug("Cleared sequence")
        return OperationResult(success=True, message="List cleared successfully")

    def _sequence_for(self, value: int | str) -> OrderedSequence:
        """Return the backing sequence, or a new unattached one built from the value's kind."""
        if self._sequence is not None:
            return self._sequence

        kind = ElementKind.of(value)
        if kind is None:
            raise TypeMismatchError("int or string", ElementKind.describe(value))
        logger.debug(f"Element kind inferred as {kind.value!r}")
        return OrderedSequence(kind, self._comparator)
