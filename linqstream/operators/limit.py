"""
Limit operators - implement skip, skip_while, take and take_while

Skip operators discard a prefix of the sequence, take operators
stop after a prefix.
"""

from collections.abc import Iterator
from typing import Any, Callable

from linqstream.operators.base import Operator, describe


def _check_count(count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"Count must be an integer, got {type(count).__name__}")
    return count


class Skip(Operator):
    """
    Skip operator - discards the first N values

    A count of zero or less passes every value through. If the child
    runs out before N values were discarded, the operator is exhausted.
    """

    def __init__(self, child: Iterator[Any], count: int):
        """
        Initialize skip operator

        Args:
            child: Upstream iterator to pull values from
            count: Number of leading values to discard

        Raises:
            TypeError: If count is not an integer
        """
        super().__init__(child)
        self.count = _check_count(count)
        self.remaining = self.count

    def __next__(self) -> Any:
        while self.remaining > 0:
            next(self.child)
            self.remaining -= 1
        return next(self.child)

    def __repr__(self) -> str:
        return f"Skip({self.count})"


class SkipWhile(Operator):
    """
    SkipWhile operator - discards values while a predicate holds

    The first value that fails the predicate is yielded and every later
    value passes through. The predicate is never called again after its
    first failure.
    """

    def __init__(self, child: Iterator[Any], predicate: Callable[[Any], bool]):
        super().__init__(child)
        self.predicate = predicate
        self.skipped = False

    def __next__(self) -> Any:
        while not self.skipped:
            value = next(self.child)
            if not self.predicate(value):
                self.skipped = True
                return value
        return next(self.child)

    def __repr__(self) -> str:
        return f"SkipWhile({describe(self.predicate)})"


class Take(Operator):
    """
    Take operator - yields at most N values

    This allows for early termination - after the N-th value the child
    is never pulled again. A count of zero or less yields nothing.
    """

    def __init__(self, child: Iterator[Any], count: int):
        """
        Initialize take operator

        Args:
            child: Upstream iterator to pull values from
            count: Maximum number of values to yield

        Raises:
            TypeError: If count is not an integer
        """
        super().__init__(child)
        self.count = _check_count(count)
        self.remaining = self.count

    def __next__(self) -> Any:
        if self.remaining <= 0:
            raise StopIteration
        try:
            value = next(self.child)
        except StopIteration:
            self.remaining = 0
            raise
        self.remaining -= 1
        return value

    def __repr__(self) -> str:
        return f"Take({self.count})"


class TakeWhile(Operator):
    """
    TakeWhile operator - yields values while a predicate holds

    Stops permanently at the first failing value, which is consumed
    from the child but not yielded.
    """

    def __init__(self, child: Iterator[Any], predicate: Callable[[Any], bool]):
        super().__init__(child)
        self.predicate = predicate
        self.taken = False

    def __next__(self) -> Any:
        if self.taken:
            raise StopIteration
        try:
            value = next(self.child)
        except StopIteration:
            self.taken = True
            raise
        if self.predicate(value):
            return value
        self.taken = True
        raise StopIteration

    def __repr__(self) -> str:
        return f"TakeWhile({describe(self.predicate)})"
