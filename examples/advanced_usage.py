#!/usr/bin/env python3
"""
Advanced usage of OrderedSequence: comparators, duplicates, ranges and reuse.

Run after installing the package: python examples/advanced_usage.py
"""

import asyncio
import random
import time

from sortedseq import OrderedSequence


def by_absolute_value(a: int, b: int) -> int:
    return (abs(a) > abs(b)) - (abs(a) < abs(b))


def case_insensitive(a: str, b: str) -> int:
    a, b = a.casefold(), b.casefold()
    return (a > b) - (a < b)


async def collect(sequence: OrderedSequence, start: int, end: int) -> list[int]:
    return [value async for value in sequence.async_iterator(start, end)]


def main():
    print("=== Advanced OrderedSequence Usage ===\n")

    print("1. Performance (1000 random integers):")
    start = time.perf_counter()
    perf = OrderedSequence("int")
    for _ in range(1000):
        perf.insert(random.randint(1, 10000))
    elapsed_ms = (time.perf_counter() - start) * 1000
    print(f"   inserted in {elapsed_ms:.2f}ms, size {perf.size()}")
    print(f"   first 10: {perf.to_list()[:10]}\n")

    print("2. Duplicates:")
    dups = OrderedSequence("int")
    for value in [1, 1, 1, 2, 2]:
        dups.insert(value)
    print(f"   {dups.to_list()} (size {len(dups)})\n")

    print("3. Sort by absolute value:")
    absolute = OrderedSequence("int", by_absolute_value)
    for value in [-5, 3, -1, 4, -2]:
        absolute.insert(value)
    print(f"   {absolute.to_list()}\n")

    print("4. Case-insensitive strings:")
    words = OrderedSequence("string", case_insensitive)
    for word in ["Apple", "banana", "Cherry", "date"]:
        words.insert(word)
    print(f"   {words.to_list()}\n")

    print("5. Clear and reuse:")
    reuse = OrderedSequence("int")
    for value in [1, 2, 3]:
        reuse.insert(value)
    print(f"   before clear: {reuse.to_list()} (size {reuse.size()})")
    reuse.clear()
    print(f"   after clear:  {reuse.to_list()} (size {reuse.size()})")
    reuse.insert(10)
    reuse.insert(20)
    print(f"   after reuse:  {reuse.to_list()} (size {reuse.size()})\n")

    print("6. Iteration:")
    values = OrderedSequence("int")
    for value in range(1, 11):
        values.insert(value)
    print(f"   even numbers:      {[v for v in values if v % 2 == 0]}")
    print(f"   range [3, 7):      {list(values.iterator(3, 7))}")
    print(f"   async range [5,9): {asyncio.run(collect(values, 5, 9))}")

    print("\n=== Advanced Examples Completed! ===")


if __name__ == "__main__":
    main()
