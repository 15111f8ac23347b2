"""Collection helpers: a small book catalogue, word counts, sets and queues."""

from __future__ import annotations

import argparse
import heapq
from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class BookRecord:
    """One title held by the library."""

    title: str
    author: str
    genre: str
    year: int
    copies: int


def sample_catalog() -> list[BookRecord]:
    """Return the demonstration catalogue of six books."""
    return [
        BookRecord("Dune", "Frank Herbert", "Sci-Fi", 1965, 3),
        BookRecord("1984", "George Orwell", "Dystopia", 1949, 5),
        BookRecord("The Hobbit", "J.R.R. Tolkien", "Fantasy", 1937, 4),
        BookRecord("Foundation", "Isaac Asimov", "Sci-Fi", 1951, 2),
        BookRecord("Brave New World", "Aldous Huxley", "Dystopia", 1932, 3),
        BookRecord("The Name of the Wind", "Patrick Rothfuss", "Fantasy", 2007, 6),
    ]


def group_by_genre(books: Iterable[BookRecord]) -> dict[str, list[BookRecord]]:
    """Books grouped by genre; genres sorted, books kept in input order."""
    groups: defaultdict[str, list[BookRecord]] = defaultdict(list)
    for book in books:
        groups[book.genre].append(book)
    return {genre: groups[genre] for genre in sorted(groups)}


def total_copies(books: Iterable[BookRecord]) -> int:
    """Number of copies across all books."""
    return sum(book.copies for book in books)


def unique_authors(books: Iterable[BookRecord]) -> set[str]:
    """The distinct authors of the books."""
    return {book.author for book in books}


def search_titles(books: Iterable[BookRecord], query: str) -> list[BookRecord]:
    """Books whose lower-cased title starts with ``query``."""
    return [book for book in books if book.title.lower().startswith(query)]


def word_frequency(text: str) -> list[tuple[str, int]]:
    """Whitespace-separated words with their counts, most frequent first."""
    return Counter(text.split()).most_common()


def set_operations(a: Iterable[int], b: Iterable[int]) -> dict[str, list[int]]:
    """Sorted union, intersection, difference and symmetric difference."""
    left, right = set(a), set(b)
    return {
        "union": sorted(left | right),
        "intersection": sorted(left & right),
        "difference": sorted(left - right),
        "symmetric_difference": sorted(left ^ right),
    }


def bfs_indices(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first order over a graph given as adjacency lists by index."""
    if not 0 <= start < len(graph):
        raise IndexError(f"start node {start} is not in the graph")
    visited = [False] * len(graph)
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
    return order


def main(argv: Sequence[str] | None = None) -> int:
    """Print a walk-through of lists, dicts, sets, queues and the catalogue."""
    argparse.ArgumentParser(description="Collection demonstrations.").parse_args(argv)
    print("===== Collections =====\n")

    print("--- Lists ---")
    squares = [i * i for i in range(1, 6)]
    print(f"squares: {squares}")
    print(f"pop: {squares.pop()}")
    print(f"doubled: {[x * 2 for x in squares]}")
    print(f"evens:   {[x for x in squares if x % 2 == 0]}")
    words = sorted(["banana", "apple", "cherry", "date", "elderberry"])
    print(f"sorted:  {words}")
    print(f"by len:  {sorted(words, key=len)}")
    data = [1, 2, 3, 4, 5, 6]
    print(f"windows(3): {[data[i:i + 3] for i in range(len(data) - 2)]}")

    print("\n--- Dicts ---")
    scores = {"Alice": 95, "Bob": 87, "Charlie": 72, "Diana": 90}
    scores.setdefault("Eve", 88)
    scores.setdefault("Alice", 0)
    scores["Bob"] += 10
    print("Leaderboard:")
    ranked = sorted(scores.items(), key=lambda kv: kv[1], reverse=True)
    for rank, (name, score) in enumerate(ranked, start=1):
        print(f"  {rank}. {name} — {score}")
    print("Word frequency:")
    text = "the quick brown fox jumps over the lazy dog the fox"
    for word, count in word_frequency(text)[:5]:
        print(f"  '{word}': {count}")

    print("\n--- Sets ---")
    for name, values in set_operations([1, 2, 3, 4, 5], [3, 4, 5, 6, 7]).items():
        print(f"{name + ':':22}{values}")

    print("\n--- Queues & Heaps ---")
    print(f"BFS order: {bfs_indices([[1, 2], [3], [3, 4], [], []], 0)}")
    print(f"Max-heap order: {heapq.nlargest(8, [3, 1, 4, 1, 5, 9, 2, 6])}")
    min_heap = [5, 2, 8, 1, 9, 3]
    heapq.heapify(min_heap)
    print(f"Min-heap order: {[heapq.heappop(min_heap) for _ in range(len(min_heap))]}")

    print("\n--- Library Catalog ---")
    books = sample_catalog()
    for genre, members in group_by_genre(books).items():
        print(f"  {genre} ({len(members)} books):")
        for book in members:
            print(f"    - {book.title} ({book.year})")
    print(f"Total copies in library: {total_copies(books)}")
    print(f"Unique authors: {len(unique_authors(books))}")
    results = search_titles(books, "the")
    print(f"Search 'the': {len(results)} results")
    for book in results:
        print(f"  {book.title}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())