"""
Service layer translating sequence operations into result objects.
"""

from sortedseq.service.sequence_service import (
    OperationResult,
    SequenceService,
    SequenceStats,
)

__all__ = ["OperationResult", "SequenceService", "SequenceStats"]
