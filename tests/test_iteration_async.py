"""
Tests for async iteration over OrderedSequence (in-memory, no I/O).
"""

import asyncio

import pytest

from sortedseq.models.exceptions import TypeMismatchError
from sortedseq.models.sortedcontainers import OrderedSequence


class TestAsyncIteration:
    """Tests for __aiter__ and async_iterator."""

    async def test_async_for(self, populated_sequence):
        """Test async iteration yields values in order."""
        values = [value async for value in populated_sequence]
        assert values == list(range(10))

    async def test_async_range(self, populated_sequence):
        """Test async range iteration [start, end)."""
        values = [value async for value in populated_sequence.async_iterator(2, 5)]
        assert values == [2, 3, 4]

    async def test_async_open_ranges(self, populated_sequence):
        """Test open-ended async ranges."""
        assert [v async for v in populated_sequence.async_iterator(start=7)] == [7, 8, 9]
        assert [v async for v in populated_sequence.async_iterator(end=1)] == [0]

    async def test_async_empty(self, string_sequence):
        """Test async iteration over an empty sequence."""
        assert [v async for v in string_sequence] == []

    async def test_async_restartable(self, string_sequence):
        """Test async iteration can be repeated."""
        for word in ["pear", "apple"]:
            string_sequence.insert(word)

        first = [v async for v in string_sequence]
        second = [v async for v in string_sequence]
        assert first == second == ["apple", "pear"]

    async def test_async_bounds_type_checked(self, populated_sequence):
        """Test async range bounds of the wrong type."""
        with pytest.raises(TypeMismatchError):
            populated_sequence.async_iterator(end="x")

    async def test_mutation_between_steps(self, populated_sequence):
        """Test that mutation during async iteration is detected."""
        iterator = populated_sequence.__aiter__()
        assert await iterator.__anext__() == 0

        populated_sequence.remove(5)

        with pytest.raises(RuntimeError):
            await iterator.__anext__()

    async def test_concurrent_readers(self):
        """Test several tasks iterating the same unchanged sequence."""
        sequence = OrderedSequence("int")
        for value in range(100, 0, -1):
            sequence.insert(value)

        async def reader(start: int, end: int) -> list[int]:
            result = []
            async for value in sequence.async_iterator(start, end):
                result.append(value)
                await asyncio.sleep(0)
            return result

        results = await asyncio.gather(reader(1, 11), reader(50, 55), reader(95, 200))

        assert results[0] == list(range(1, 11))
        assert results[1] == [50, 51, 52, 53, 54]
        assert results[2] == [95, 96, 97, 98, 99, 100]
