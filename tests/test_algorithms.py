import pytest

from langtour.algorithms import (
    SequenceSummary,
    bfs,
    binary_search,
    coin_change,
    dfs,
    fib,
    lcs,
    main,
    merge_sort,
    quick_sort,
    summarize,
)

GRAPH = {"A": ["B", "C"], "B": ["D", "E"], "C": ["F"], "D": [], "E": [], "F": []}


def test_binary_search_found():
    assert binary_search([1, 3, 5, 7, 9], 5) == 2


def test_binary_search_not_found():
    assert binary_search([1, 3, 5], 4) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@pytest.mark.parametrize("target,index", [(2, 0), (23, 5), (91, 9)])
def test_binary_search_positions(target, index):
    assert binary_search([2, 5, 8, 12, 16, 23, 38, 56, 72, 91], target) == index


def test_merge_sort():
    assert merge_sort([3, 1, 4, 1, 5]) == [1, 1, 3, 4, 5]


def test_merge_sort_leaves_input_alone():
    data = [64, 34, 25, 12, 22, 11, 90]
    assert merge_sort(data) == [11, 12, 22, 25, 34, 64, 90]
    assert data == [64, 34, 25, 12, 22, 11, 90]


def test_quick_sort():
    assert quick_sort([9, 3, 6, 1, 8]) == [1, 3, 6, 8, 9]


@pytest.mark.parametrize("data", [[], [1], [2, 2, 2], [5, -1, 3, 0, -7, 5]])
def test_sorts_agree_with_sorted(data):
    assert merge_sort(data) == sorted(data)
    assert quick_sort(data) == sorted(data)


def test_bfs_order():
    assert bfs(GRAPH, "A") == ["A", "B", "C", "D", "E", "F"]


def test_dfs_order():
    assert dfs(GRAPH, "A") == ["A", "B", "D", "E", "C", "F"]


def test_traversal_handles_cycles():
    cyclic = {1: [2], 2: [3, 1], 3: [1]}
    assert bfs(cyclic, 1) == [1, 2, 3]
    assert dfs(cyclic, 1) == [1, 2, 3]


def test_fib_sequence():
    assert [fib(i) for i in range(11)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]


def test_fib_negative():
    with pytest.raises(ValueError):
        fib(-1)


def test_lcs():
    assert lcs("ABCBDAB", "BDCAB") == 4


def test_lcs_empty():
    assert lcs("", "ABC") == 0


def test_coin_change():
    assert coin_change([1, 5, 6, 9], 11) == 2


def test_coin_impossible():
    assert coin_change([2], 3) is None


def test_coin_zero_amount():
    assert coin_change([3, 7], 0) == 0


def test_summarize():
    summary = summarize([3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5])
    assert summary == SequenceSummary(
        sum_squares_of_evens=56,
        maximum=9,
        minimum=1,
        most_frequent=5,
        most_frequent_count=3,
        running_max=[3, 3, 4, 4, 5, 9, 9, 9, 9, 9, 9],
    )


def test_summarize_empty():
    with pytest.raises(ValueError):
        summarize([])


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Search for 23: 5" in out
    assert "Search for 99: None" in out
    assert "Coin change(11, [1,5,6,9]): 2" in out