"""
Element terminals - single, first, last and element_at

Each has a strict form that raises when no element qualifies and an
OrDefault form that returns a caller-supplied default instead.
"""

from collections.abc import Iterator
from typing import Any, Callable, Optional

from linqstream.core.types import MISSING
from linqstream.errors import EmptySequenceError, MultipleElementsError
from linqstream.terminals.base import Terminal


def _no_match(predicate: Optional[Callable[[Any], bool]], operation: str) -> EmptySequenceError:
    if predicate is None:
        return EmptySequenceError("Sequence contains no elements", operation=operation)
    return EmptySequenceError("Sequence contains no matching element", operation=operation)


class Single(Terminal):
    """
    The only element of the sequence

    Pulls at most two values.

    Raises:
        EmptySequenceError: If the sequence is empty
        MultipleElementsError: If the sequence has more than one element
    """

    operation = "single"

    def __init__(self, iterator: Iterator[Any], default: Any = MISSING):
        super().__init__(iterator)
        self.default = default

    def _run(self) -> Any:
        try:
            value = next(self.iterator)
        except StopIteration:
            if self.default is MISSING:
                raise EmptySequenceError(
                    "Sequence contains no elements", operation=self.operation
                ) from None
            return self.default

        try:
            next(self.iterator)
        except StopIteration:
            return value
        raise MultipleElementsError(
            "Sequence contains more than one element", operation=self.operation
        )


class SingleOrDefault(Single):
    """Like Single, but an empty sequence gives the default"""

    operation = "single_or_default"

    def __init__(self, iterator: Iterator[Any], default: Any = None):
        super().__init__(iterator, default)


class First(Terminal):
    """First element, optionally the first matching the predicate"""

    operation = "first"

    def __init__(
        self,
        iterator: Iterator[Any],
        predicate: Optional[Callable[[Any], bool]] = None,
        default: Any = MISSING,
    ):
        super().__init__(iterator, predicate)
        self.default = default

    def _run(self) -> Any:
        for value in self.iterator:
            if self._matches(value):
                return value

        if self.default is MISSING:
            raise _no_match(self.predicate, self.operation)
        return self.default


class FirstOrDefault(First):
    """Like First, but gives the default when nothing qualifies"""

    operation = "first_or_default"

    def __init__(
        self,
        iterator: Iterator[Any],
        predicate: Optional[Callable[[Any], bool]] = None,
        default: Any = None,
    ):
        super().__init__(iterator, predicate, default)


class Last(Terminal):
    """
    Last element, optionally the last matching the predicate

    Always scans the whole sequence.
    """

    operation = "last"

    def __init__(
        self,
        iterator: Iterator[Any],
        predicate: Optional[Callable[[Any], bool]] = None,
        default: Any = MISSING,
    ):
        super().__init__(iterator, predicate)
        self.default = default

    def _run(self) -> Any:
        found = False
        last = None
        for value in self.iterator:
            if self._matches(value):
                found = True
                last = value

        if found:
            return last
        if self.default is MISSING:
            raise _no_match(self.predicate, self.operation)
        return self.default


class LastOrDefault(Last):
    """Like Last, but gives the default when nothing qualifies"""

    operation = "last_or_default"

    def __init__(
        self,
        iterator: Iterator[Any],
        predicate: Optional[Callable[[Any], bool]] = None,
        default: Any = None,
    ):
        super().__init__(iterator, predicate, default)


class ElementAt(Terminal):
    """
    Element at a zero-based position

    Advances the iterator index + 1 times and returns the last value
    pulled. Negative indexes are out of range.
    """

    operation = "element_at"

    def __init__(self, iterator: Iterator[Any], index: int, default: Any = MISSING):
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"Index must be an integer, got {type(index).__name__}")
        super().__init__(iterator)
        self.index = index
        self.default = default

    def _run(self) -> Any:
        if self.index >= 0:
            position = 0
            for value in self.iterator:
                if position == self.index:
                    return value
                position += 1

        if self.default is MISSING:
            raise EmptySequenceError(
                f"Index {self.index} is out of range", operation=self.operation
            )
        return self.default
