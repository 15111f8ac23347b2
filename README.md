# langtour

A small collection of runnable demos covering classic programming topics:
searching and sorting, graph traversal, dynamic programming, everyday
collection idioms, string and slice helpers, and thread-based concurrency
patterns. Each module is also a plain library of functions you can import.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line demos

Each command prints a guided walkthrough of its module's topic. The commands
take no options other than `--help`.

```
langtour-algorithms     # binary search, merge/quick sort, BFS/DFS, DP, sequence summary
langtour-fundamentals   # arithmetic, grading, primes, string handling
langtour-ownership      # word and slice helpers, longest-string, excerpts
langtour-catalog        # lists, dicts, sets, queues, heaps and a book catalogue
langtour-concurrency    # threads, queues, locks and a parallel work queue
```

## Library use

### `langtour.algorithms`

```python
from langtour.algorithms import binary_search, merge_sort, quick_sort, lcs, coin_change, fib

binary_search([1, 3, 5, 7, 9], 5)     # 2
binary_search([1, 3, 5], 4)           # None
merge_sort([3, 1, 4, 1, 5])           # [1, 1, 3, 4, 5]  (a new list)
quick_sort([9, 3, 6, 1, 8])           # [1, 3, 6, 8, 9]  (a new list)
fib(10)                               # 55
lcs("ABCBDAB", "BDCAB")               # 4
coin_change([1, 5, 6, 9], 11)         # 2
coin_change([2], 3)                   # None
```

```python
from langtour.algorithms import bfs, dfs, summarize

graph = {"A": ["B", "C"], "B": ["D", "E"], "C": ["F"]}
bfs(graph, "A")   # ['A', 'B', 'C', 'D', 'E', 'F']
dfs(graph, "A")   # ['A', 'B', 'D', 'E', 'C', 'F']

summary = summarize([3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5])
summary.maximum, summary.minimum   # (9, 1)
summary.running_max                # running maximum at each position
```

`fib` and `coin_change` raise `ValueError` for negative input; `summarize`
raises `ValueError` for an empty sequence.

### `langtour.fundamentals`

```python
from langtour.fundamentals import greet, add, factorial, is_prime, min_max, grade

greet("World")               # 'Hello, World!'
add(3, 4)                    # 7
factorial(5)                 # 120
is_prime(17)                 # True
min_max([3, 1, 4, 1, 5, 9])  # (1, 9)
grade(87)                    # 'B'
```

### `langtour.ownership`

```python
from langtour.ownership import first_word, first_sentence, double_all, max_of_slice, longest, ImportantExcerpt

first_word("hello world")                # 'hello'
first_sentence("Call me Ishmael. Some")  # 'Call me Ishmael'
double_all([1, 2, 3])                    # [2, 4, 6]  (a new list)
max_of_slice([])                         # 0
longest("hello", "hi")                   # 'hello'
ImportantExcerpt("Chapter 1").level(3)   # '[Level 3] Chapter 1'
```

### `langtour.catalog`

```python
from langtour.catalog import (
    sample_catalog, group_by_genre, total_copies, unique_authors,
    search_titles, word_frequency, set_operations, bfs_indices,
)

books = sample_catalog()
list(group_by_genre(books))                     # ['Dystopia', 'Fantasy', 'Sci-Fi']
total_copies(books)                             # 23
[b.title for b in search_titles(books, "the")]  # ['The Hobbit', 'The Name of the Wind']
word_frequency("the fox the")                   # [('the', 2), ('fox', 1)]
set_operations([1, 2, 3], [2, 3, 4])["union"]   # [1, 2, 3, 4]
bfs_indices([[1, 2], [3], [3, 4], [], []], 0)   # [0, 1, 2, 3, 4]
```

### `langtour.concurrency`

```python
from langtour.concurrency import (
    make_work_items, process_parallel, parallel_squares,
    pipeline_squares, shared_counter, chunked_sums,
)

results = process_parallel(make_work_items(8))   # one WorkResult per item, ordered by id
parallel_squares(5)                              # [0, 1, 4, 9, 16]
pipeline_squares([1, 2, 3])                      # [1, 4, 9]
shared_counter(10)                               # 10
chunked_sums(100, 25)                            # partial sums adding up to 5050
```

## What this package does not do

These are teaching demos. The commands only print fixed walkthroughs; they
read no input files, keep no storage, and run no servers.