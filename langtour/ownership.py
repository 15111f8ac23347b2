"""String and sequence helpers built around slices of existing data."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ImportantExcerpt:
    """A fragment of a larger text."""

    part: str

    def level(self, importance: int) -> str:
        """Return the excerpt labelled with an importance level."""
        return f"[Level {importance}] {self.part}"


def first_word(s: str) -> str:
    """Text up to the first space, or the whole string if there is none."""
    return s.partition(" ")[0]


def first_sentence(s: str) -> str:
    """Text up to the first full stop, or the whole string if there is none."""
    return s.partition(".")[0]


def sum_slice(values: Iterable[int]) -> int:
    """Sum of the values."""
    return sum(values)


def double_all(values: Iterable[int]) -> list[int]:
    """Return a new list with every value doubled."""
    return [x * 2 for x in values]


def max_of_slice(values: Iterable[int]) -> int:
    """Largest value, or 0 for an empty input."""
    return max(values, default=0)


def longest(x: str, y: str) -> str:
    """The longer of two strings; ``y`` when they are equally long."""
    return x if len(x) > len(y) else y


def main(argv: Sequence[str] | None = None) -> int:
    """Print a walk-through of the helpers in this module."""
    argparse.ArgumentParser(description="Slice and borrowing demonstrations.").parse_args(argv)
    print("===== Ownership =====\n")

    print("--- Borrowing ---")
    data = [1, 2, 3, 4, 5]
    print(f"Sum of {data} = {sum_slice(data)}")
    print(f"Doubled: {double_all(data)}")
    print(f"First sentence: {first_sentence('Call me Ishmael. Some years ago...')}")

    print("\n--- Slices ---")
    sentence = "the quick brown fox"
    words = sentence.split()
    print(f"First word: {first_word(sentence)}")
    print(f"All words: {words}")
    print(f"Last word: {words[-1] if words else ''}")
    numbers = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    print(f"Full array: {numbers}")
    print(f"Slice [2:5]: {numbers[2:5]}")
    print(f"Slice [:3]:  {numbers[:3]}")
    print(f"Slice [7:]:  {numbers[7:]}")
    print(f"Max of slice: {max_of_slice(numbers[3:7])}")
    print(f"Sorted: {sorted([5, 3, 8, 1, 9, 2, 7, 4, 6])}")

    print("\n--- Excerpts ---")
    print(f"Longest: {longest('long string is long', 'xyz')}")
    excerpt = ImportantExcerpt(first_sentence("Chapter 1. Once upon a time..."))
    print(f"Excerpt: {excerpt.part}")
    print(f"Level: {excerpt.level(3)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())