#!/usr/bin/env python3
"""
Basic usage of OrderedSequence.

Run after installing the package: python examples/basic_usage.py
"""

from sortedseq import OrderedSequence
from sortedseq.models.exceptions import EmptyContainerError, TypeMismatchError


def main():
    print("=== Basic OrderedSequence Usage ===\n")

    # Integers, natural order
    numbers = OrderedSequence("int")
    for value in [5, 1, 3, 2, 4]:
        numbers.insert(value)
    print(f"Integers:      {numbers.to_list()}")
    print(f"First / last:  {numbers.first()} / {numbers.last()}")
    print(f"Contains 3:    {numbers.contains(3)}")
    print(f"Remove 3:      {numbers.remove(3)} -> {numbers.to_list()}")
    print(f"Remove 99:     {numbers.remove(99)} -> {numbers.to_list()}\n")

    # Strings, natural order
    words = OrderedSequence("string")
    for word in ["zebra", "apple", "banana"]:
        words.insert(word)
    print(f"Strings:       {words.to_list()}")

    # Descending order via comparator
    descending = OrderedSequence("int", lambda a, b: b - a)
    for value in [1, 5, 3, 2]:
        descending.insert(value)
    print(f"Descending:    {descending.to_list()}\n")

    # Errors
    try:
        numbers.insert("text")
    except TypeMismatchError as e:
        print(f"Type check:    {e}")

    try:
        OrderedSequence("int").first()
    except EmptyContainerError as e:
        print(f"Empty check:   {e}")

    print("\n=== Basic Examples Completed! ===")


if __name__ == "__main__":
    main()
