import math

import pytest

from dsalab.recursion import factorial, fibonacci, fibonacci_series


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("n", [0, 1, 2, 7, 15])
def test_series_length_and_terms(n):
    series = fibonacci_series(n)
    assert len(series) == n
    assert series == [fibonacci(i) for i in range(n)]


def test_series_of_non_positive_is_empty():
    assert fibonacci_series(0) == []
    assert fibonacci_series(-3) == []


def test_series_starts_with_zero_one():
    assert fibonacci_series(2) == [0, 1]


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


@pytest.mark.parametrize("n", [2, 5, 10, 20, 25])
def test_factorial_matches_stdlib(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(1, 15))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-5)