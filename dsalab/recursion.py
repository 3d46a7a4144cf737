"""Recursive Fibonacci numbers and factorials."""

from functools import lru_cache

__all__ = ["fibonacci", "fibonacci_series", "factorial"]


def _check_non_negative(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} of a negative number doesn't exist: {n}")


@lru_cache(maxsize=None)
def _fib(n: int) -> int:
    if n < 2:
        return n
    return _fib(n - 1) + _fib(n - 2)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _check_non_negative(n, "Fibonacci number")
    return _fib(n)


def fibonacci_series(n: int) -> list[int]:
    """Return the first ``n`` terms of the Fibonacci series, starting at 0."""
    if n <= 0:
        return []
    return [fibonacci(i) for i in range(n)]


def factorial(n: int) -> int:
    """Return n! computed recursively; raise ValueError for negative ``n``."""
    _check_non_negative(n, "Factorial")
    if n <= 1:
        return 1
    return n * factorial(n - 1)