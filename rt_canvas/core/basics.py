"""Small list and string helpers shared by scenes and tests."""

from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, TypeVar

A = TypeVar('A')


def lines(s: str) -> list[str]:
    return s.split('\n')


def lines_from_to_of(start: int, end: int, s: str) -> list[str]:
    """Return lines start..end of s, 1-based and inclusive."""
    return lines(s)[start - 1 : end]


def do_to(target: A, fns: Iterable[Callable[[A], A]]) -> A:
    """Thread target through each function in turn and return the result."""
    return reduce(lambda acc, fn: fn(acc), fns, target)


def always(value: A) -> Callable[..., A]:
    """Return a function that ignores its arguments and returns value."""

    def _always(*_args: Any) -> A:
        return value

    return _always
