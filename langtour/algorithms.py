"""Searching, sorting, graph traversal and dynamic-programming routines."""

from __future__ import annotations

import argparse
import bisect
from collections import Counter, deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from itertools import accumulate
from typing import Any, TypeVar

T = TypeVar("T")
N = TypeVar("N", bound=Hashable)


def binary_search(arr: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the sorted ``arr``, or None if absent."""
    left, right = 0, len(arr)
    while left < right:
        mid = left + (right - left) // 2
        value = arr[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid
    return None


def merge_sort(arr: Iterable[T]) -> list[T]:
    """Return a new list with the items of ``arr`` in stable ascending order."""
    items = list(arr)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _partition(items: list[Any], lo: int, hi: int) -> int:
    """Lomuto partition of ``items[lo:hi]`` around its last element."""
    pivot = items[hi - 1]
    store = lo
    for j in range(lo, hi - 1):
        if items[j] <= pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[hi - 1] = items[hi - 1], items[store]
    return store


def quick_sort(arr: Iterable[T]) -> list[T]:
    """Return a new list with the items of ``arr`` sorted by quicksort."""
    items = list(arr)
    pending = [(0, len(items))]
    while pending:
        lo, hi = pending.pop()
        if hi - lo <= 1:
            continue
        p = _partition(items, lo, hi)
        pending.append((lo, p))
        pending.append((p + 1, hi))
    return items


def bfs(graph: Mapping[N, Sequence[N]], start: N) -> list[N]:
    """Breadth-first visiting order of ``graph`` starting at ``start``."""
    visited = {start}
    queue = deque([start])
    order: list[N] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph.get(node, ()):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def dfs(graph: Mapping[N, Sequence[N]], start: N) -> list[N]:
    """Depth-first (preorder) visiting order of ``graph`` starting at ``start``."""
    visited: set[N] = set()
    order: list[N] = []
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        stack.extend(reversed(graph.get(node, ())))
    return order


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number (fib(0) == 0, fib(1) == 1)."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def lcs(a: str, b: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(b) + 1)
    for ca in a:
        current = [0]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def coin_change(coins: Iterable[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount``, or None if it cannot be made."""
    if amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    coins = list(coins)
    best: list[int | None] = [0] + [None] * amount
    for total in range(1, amount + 1):
        candidates = [
            best[total - c] + 1
            for c in coins
            if 0 < c <= total and best[total - c] is not None
        ]
        best[total] = min(candidates, default=None)
    return best[amount]


@dataclass(frozen=True)
class SequenceSummary:
    """Aggregate facts about a sequence of integers."""

    sum_squares_of_evens: int
    maximum: int
    minimum: int
    most_frequent: int
    most_frequent_count: int
    running_max: list[int]


def summarize(data: Iterable[int]) -> SequenceSummary:
    """Compute a :class:`SequenceSummary` of a non-empty sequence."""
    values = list(data)
    if not values:
        raise ValueError("cannot summarize an empty sequence")
    value, count = Counter(values).most_common(1)[0]
    return SequenceSummary(
        sum_squares_of_evens=sum(x * x for x in values if x % 2 == 0),
        maximum=max(values),
        minimum=min(values),
        most_frequent=value,
        most_frequent_count=count,
        running_max=list(accumulate(values, max)),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print a walk-through of the algorithms in this module."""
    argparse.ArgumentParser(description="Algorithm demonstrations.").parse_args(argv)
    print("===== Algorithms Demo =====\n")

    print("--- Binary Search ---")
    sorted_values = [2, 5, 8, 12, 16, 23, 38, 56, 72, 91]
    print(f"Search for 23: {binary_search(sorted_values, 23)}")
    print(f"Search for 99: {binary_search(sorted_values, 99)}")
    print(f"bisect for 56: {bisect.bisect_left(sorted_values, 56)}")

    print("\n--- Sorting ---")
    data = [64, 34, 25, 12, 22, 11, 90]
    print(f"Original:   {data}")
    print(f"Merge Sort: {merge_sort(data)}")
    print(f"Quick Sort: {quick_sort(data)}")
    print(f"sorted:     {sorted(data)}")

    print("\n--- Graph BFS & DFS ---")
    graph = {"A": ["B", "C"], "B": ["D", "E"], "C": ["F"], "D": [], "E": [], "F": []}
    print(f"BFS from A: {bfs(graph, 'A')}")
    print(f"DFS from A: {dfs(graph, 'A')}")

    print("\n--- Dynamic Programming ---")
    print(f"Fibonacci(0..10): {[fib(i) for i in range(11)]}")
    print(f'LCS("ABCBDAB","BDCAB"): {lcs("ABCBDAB", "BDCAB")}')
    print(f"Coin change(11, [1,5,6,9]): {coin_change([1, 5, 6, 9], 11)}")

    print("\n--- Iterator Algorithms ---")
    summary = summarize([3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5])
    print(f"Sum of squares of evens: {summary.sum_squares_of_evens}")
    print(f"Max: {summary.maximum}, Min: {summary.minimum}")
    print(
        f"Most frequent: {summary.most_frequent} "
        f"(appears {summary.most_frequent_count} times)"
    )
    print(f"Running max: {summary.running_max}")

    print("\nAll algorithm demos complete!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())