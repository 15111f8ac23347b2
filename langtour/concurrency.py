"""Threads, queues and locks applied to small batches of work."""

from __future__ import annotations

import argparse
import queue
import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

_DONE = object()


@dataclass(frozen=True)
class WorkItem:
    """A batch of numbers to be summarised."""

    id: int
    data: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class WorkResult:
    """Summary of one processed work item."""

    id: int
    total: int
    minimum: int
    maximum: int


def process_item(item: WorkItem) -> WorkResult:
    """Sum, minimum and maximum of an item's data."""
    if not item.data:
        raise ValueError(f"work item {item.id} has no data")
    return WorkResult(item.id, sum(item.data), min(item.data), max(item.data))


def make_work_items(count: int) -> list[WorkItem]:
    """Items numbered from 1 with 1000 values each, all between 1 and 100."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [
        WorkItem(item_id, [(x * item_id) % 100 + 1 for x in range(1000)])
        for item_id in range(1, count + 1)
    ]


def process_parallel(items: Iterable[WorkItem]) -> list[WorkResult]:
    """Process items on one thread each; results are ordered by id."""
    items = list(items)
    if not items:
        return []
    with ThreadPoolExecutor(max_workers=len(items)) as pool:
        results = list(pool.map(process_item, items))
    return sorted(results, key=lambda r: r.id)


def parallel_squares(count: int) -> list[int]:
    """Squares of 0..count-1, each computed on its own thread."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []

    def square(i: int) -> int:
        time.sleep(0.01)
        return i * i

    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(square, range(count)))


def pipeline_squares(values: Iterable[int]) -> list[int]:
    """Square values through a producer → transformer → consumer pipeline."""
    inputs = list(values)
    raw: queue.Queue = queue.Queue()
    processed: queue.Queue = queue.Queue()

    def produce() -> None:
        for value in inputs:
            raw.put(value)
        raw.put(_DONE)

    def transform() -> None:
        while (n := raw.get()) is not _DONE:
            processed.put(n * n)
        processed.put(_DONE)

    workers = [threading.Thread(target=produce), threading.Thread(target=transform)]
    for worker in workers:
        worker.start()
    result = list(iter(processed.get, _DONE))
    for worker in workers:
        worker.join()
    return result


def shared_counter(threads: int) -> int:
    """Increment a lock-protected counter once from each of ``threads`` threads."""
    if threads < 0:
        raise ValueError(f"threads must be non-negative, got {threads}")
    lock = threading.Lock()
    count = 0

    def bump() -> None:
        nonlocal count
        with lock:
            count += 1

    workers = [threading.Thread(target=bump) for _ in range(threads)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return count


def chunked_sums(limit: int, chunk: int) -> list[int]:
    """Partial sums of 0..=limit in chunks of ``chunk``, one thread per chunk."""
    if chunk <= 0:
        raise ValueError(f"chunk must be positive, got {chunk}")
    if limit < 0:
        return []
    starts = range(0, limit + 1, chunk)
    sums: dict[int, int] = {}
    lock = threading.Lock()

    def work(start: int) -> None:
        partial = sum(range(start, min(start + chunk, limit + 1)))
        with lock:
            sums[start] = partial

    workers = [threading.Thread(target=work, args=(s,)) for s in starts]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return [sums[s] for s in starts]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a walk-through of threads, queues and shared state."""
    argparse.ArgumentParser(description="Concurrency demonstrations.").parse_args(argv)
    print("===== Concurrency =====\n")

    print("--- Threads ---")
    start = time.perf_counter()
    squares = parallel_squares(5)
    elapsed = (time.perf_counter() - start) * 1000
    print(f"  5 parallel squares in {elapsed:.1f}ms: {squares}")

    print("\n--- Queues ---")
    print(f"  Pipeline squares: {pipeline_squares(range(1, 11))}")

    print("\n--- Locks ---")
    print(f"  Counter after 10 threads: {shared_counter(10)}")
    partial = chunked_sums(100, 25)
    print(f"  Partial sums: {partial}")
    print(f"  Total (should be 5050): {sum(partial)}")

    config = {"host": "localhost", "port": "8080"}
    config_lock = threading.Lock()

    def read_host(reader: int) -> str:
        with config_lock:
            return f"Reader {reader}: host={config['host']}"

    with ThreadPoolExecutor(max_workers=5) as pool:
        for line in pool.map(read_host, range(5)):
            print(f"  {line}")
    with config_lock:
        config["port"] = "9090"
    print(f"  port after update: {config['port']}")

    print("\n--- Parallel Work Queue ---")
    items = make_work_items(8)
    start = time.perf_counter()
    for item in items:
        sum(item.data)
    seq_time = (time.perf_counter() - start) * 1000
    start = time.perf_counter()
    results = process_parallel(items)
    par_time = (time.perf_counter() - start) * 1000
    print("  Results (id, sum, min, max):")
    for r in results:
        print(f"    Item {r.id}: sum={r.total} min={r.minimum} max={r.maximum}")
    print(f"  Sequential: {seq_time:.2f}ms")
    print(f"  Parallel:   {par_time:.2f}ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())