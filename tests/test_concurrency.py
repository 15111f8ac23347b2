import pytest

from langtour.concurrency import (
    WorkItem,
    WorkResult,
    chunked_sums,
    make_work_items,
    main,
    parallel_squares,
    pipeline_squares,
    process_item,
    process_parallel,
    shared_counter,
)


def test_process_item_min_max():
    data = [4, 7, 1]
    result = process_item(WorkItem(3, data))
    assert result.id == 3
    assert result.minimum == 1
    assert result.maximum == 7
    assert result.total == sum(data)


def test_process_item_empty_raises():
    with pytest.raises(ValueError):
        process_item(WorkItem(1, []))


def test_make_work_items_shape():
    items = make_work_items(8)
    assert [item.id for item in items] == list(range(1, 9))
    assert all(len(item.data) == 1000 for item in items)
    assert all(1 <= v <= 100 for item in items for v in item.data)


def test_make_work_items_negative():
    with pytest.raises(ValueError):
        make_work_items(-1)


def test_process_parallel_matches_sequential():
    items = make_work_items(8)
    assert process_parallel(items) == [process_item(item) for item in items]


def test_process_parallel_sorted_by_id():
    items = [WorkItem(5, [1]), WorkItem(2, [2]), WorkItem(9, [3])]
    results = process_parallel(items)
    assert [r.id for r in results] == [2, 5, 9]
    assert isinstance(results[0], WorkResult) and results[0].total == 2


def test_process_parallel_empty():
    assert process_parallel([]) == []


def test_parallel_squares_invariant():
    squares = parallel_squares(5)
    assert len(squares) == 5
    assert all(value == i * i for i, value in enumerate(squares))


def test_parallel_squares_negative():
    with pytest.raises(ValueError):
        parallel_squares(-2)


def test_pipeline_squares_preserves_order():
    values = list(range(1, 11))
    result = pipeline_squares(values)
    assert len(result) == len(values)
    assert all(r == v * v for r, v in zip(result, values))


def test_pipeline_squares_empty():
    assert pipeline_squares([]) == []


def test_shared_counter():
    assert shared_counter(10) == 10
    assert shared_counter(0) == 0


def test_chunked_sums_total():
    partial = chunked_sums(100, 25)
    assert sum(partial) == 5050
    assert len(partial) == 5


def test_chunked_sums_bad_chunk():
    with pytest.raises(ValueError):
        chunked_sums(100, 0)


def test_main_runs(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Total (should be 5050): 5050" in out
    assert "port after update: 9090" in out