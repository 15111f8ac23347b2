import pytest

from langtour.fundamentals import add, factorial, grade, greet, is_prime, main, min_max


def test_add():
    assert add(3, 4) == 7


def test_factorial():
    assert factorial(5) == 120


@pytest.mark.parametrize("n,expected", [(0, 1), (1, 1), (10, 3628800)])
def test_factorial_values(n, expected):
    assert factorial(n) == expected


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-3)


def test_prime():
    assert is_prime(17)
    assert not is_prime(18)


@pytest.mark.parametrize("n,expected", [(0, False), (1, False), (2, True), (9, False), (97, True)])
def test_prime_edges(n, expected):
    assert is_prime(n) is expected


def test_min_max():
    assert min_max([3, 1, 4, 1, 5, 9]) == (1, 9)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


def test_greet():
    assert greet("World") == "Hello, World!"


@pytest.mark.parametrize("score,letter", [(95, "A"), (90, "A"), (87, "B"), (70, "C"), (69, "F")])
def test_grade(score, letter):
    assert grade(score) == letter


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "17 / 5 = 3" in out
    assert "Score 87 → grade B" in out
    assert "(0,4) (1,0) (1,1) (1,2) (1,3)\n" in out