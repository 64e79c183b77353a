"""
Shared pytest fixtures for sorted sequence tests.
"""

import io

import pytest

from cli import register_commands
from command_shell.shell import CommandShell
from sortedseq.models.sortedcontainers import OrderedSequence
from sortedseq.security.validator import InputValidator
from sortedseq.service import SequenceService


def case_insensitive(a: str, b: str) -> int:
    a, b = a.casefold(), b.casefold()
    return (a > b) - (a < b)


@pytest.fixture
def int_sequence():
    """Provide an empty integer sequence with the default order."""
    return OrderedSequence("int")


@pytest.fixture
def string_sequence():
    """Provide an empty string sequence with the default order."""
    return OrderedSequence("string")


@pytest.fixture
def populated_sequence():
    """Provide an integer sequence holding 0..9."""
    sequence = OrderedSequence("int")
    for value in [5, 0, 9, 3, 7, 1, 8, 2, 6, 4]:
        sequence.insert(value)
    return sequence


@pytest.fixture
def validator():
    """Provide a validator with default limits."""
    return InputValidator()


@pytest.fixture
def service():
    """Provide a service that infers its element kind."""
    return SequenceService()


@pytest.fixture
def run_shell():
    """Run a wired shell over the given input text and return its output."""

    def run(text: str, service: SequenceService | None = None) -> str:
        output = io.StringIO()
        shell = CommandShell(input=io.StringIO(text), output=output, prompt="")
        register_commands(shell, service or SequenceService())
        shell.run()
        return output.getvalue()

    return run


def assert_well_formed(sequence: OrderedSequence) -> None:
    """Check link symmetry, bounds and size against a full walk."""
    head, tail = sequence._head, sequence._tail
    assert (head is None) == (tail is None) == (sequence.size() == 0)

    count = 0
    prev = None
    node = head
    while node is not None:
        assert node.prev is prev
        if prev is not None:
            assert sequence._compare(prev.value, node.value) <= 0
        prev = node
        node = node.next
        count += 1

    assert prev is tail
    assert count == sequence.size() == len(sequence.to_list())
