"""
Main Query API - user-facing interface for linqstream

This is the primary entry point for users. It provides a fluent API for
composing lazy operations over any iterable.

Example:
    >>> from linqstream import query
    >>> query(range(10)).filter(lambda i: i % 2).map(lambda i: i * i).to_list()
    [1, 9, 25, 49, 81]
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Generic, Optional, TypeVar

from linqstream.core.types import MISSING, KeyValuePair
from linqstream.operators import (
    Concat,
    ForEach,
    KeyValue,
    Reverse,
    Select,
    SelectMany,
    Skip,
    SkipWhile,
    Source,
    Take,
    TakeWhile,
    Where,
)
from linqstream.operators.base import explain_upstream
from linqstream.terminals import (
    Aggregate,
    AllSatisfy,
    AnySatisfy,
    Average,
    Count,
    ElementAt,
    First,
    FirstOrDefault,
    GroupBy,
    Last,
    LastOrDefault,
    Max,
    Min,
    Single,
    SingleOrDefault,
    Sum,
    Terminal,
    ToDataFrame,
    ToDict,
    ToList,
)

T = TypeVar("T")
U = TypeVar("U")


class Query(Generic[T]):
    """
    Fluent handle over the head of an operator chain

    Chain methods (map, filter, skip, ...) wrap the current head in a new
    operator and return a new Query. The Query they were called on is
    superseded and must not be pulled again.

    Terminal methods (count, first, to_list, ...) drain the head and
    return a concrete value. They are where deferred work actually runs,
    so errors from caller-supplied functions surface there.

    A Query is itself an iterator: next(q) advances the head once and
    iter(q) returns q, so it can be drained by a for loop exactly once.
    """

    def __init__(self, head: Iterable[T]):
        """
        Initialize query over an iterator

        Args:
            head: Iterator to pull from. Any other iterable is wrapped
                  with iter(), so Query([1, 2]) reads the list once.
        """
        self.head = iter(head)

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> "Query[T]":
        """
        Create a query over a finite ordered sequence

        Example:
            >>> Query.from_iterable([3, 1, 2]).reverse().to_list()
            [2, 1, 3]
        """
        return cls(Source(iterable))

    from_array = from_iterable

    def _chain(self, head: Iterator[U]) -> "Query[U]":
        return Query(head)

    def _execute(self, terminal: Terminal) -> Any:
        return terminal.execute()

    # --------- chain methods (lazy) ----------

    def map(self, func: Callable[[T], U]) -> "Query[U]":
        """Transform every value with func"""
        return self._chain(Select(self.head, func))

    select = map

    def filter(self, predicate: Callable[[T], bool]) -> "Query[T]":
        """Keep only values for which predicate is truthy"""
        return self._chain(Where(self.head, predicate))

    where = filter

    def skip(self, count: int) -> "Query[T]":
        """Drop the first count values"""
        return self._chain(Skip(self.head, count))

    def skip_while(self, predicate: Callable[[T], bool]) -> "Query[T]":
        """Drop values until predicate first fails, then keep everything"""
        return self._chain(SkipWhile(self.head, predicate))

    def take(self, count: int) -> "Query[T]":
        """Keep at most the first count values"""
        return self._chain(Take(self.head, count))

    def take_while(self, predicate: Callable[[T], bool]) -> "Query[T]":
        """Keep values until predicate first fails"""
        return self._chain(TakeWhile(self.head, predicate))

    def for_each(self, func: Callable[[T], None]) -> "Query[T]":
        """
        Call func on every value as it is pulled

        Values pass through unchanged. Nothing is called until the query
        is drained.
        """
        return self._chain(ForEach(self.head, func))

    def concat(self, other: Iterable[T]) -> "Query[T]":
        """Append every value of other after this sequence"""
        return self._chain(Concat(self.head, other))

    def key_value(
        self, key_func: Callable[[T], Any], value_func: Callable[[T], Any]
    ) -> "Query[KeyValuePair]":
        """Map every value to KeyValuePair(key_func(v), value_func(v))"""
        return self._chain(KeyValue(self.head, key_func, value_func))

    def select_many(self, func: Callable[[T], Iterable[U]]) -> "Query[U]":
        """
        Flatten the iterables returned by func, in order

        Example:
            >>> query([[1, 2], [], [3]]).select_many(lambda x: x).to_list()
            [1, 2, 3]
        """
        return self._chain(SelectMany(self.head, func))

    def reverse(self) -> "Query[T]":
        """
        Yield the values in reverse order

        Note: This drains the whole sequence into memory immediately,
        at the time reverse() is called.
        """
        return self._chain(Reverse(self.head))

    # --------- terminal methods (force evaluation) ----------

    def count(self, predicate: Optional[Callable[[T], bool]] = None) -> int:
        """Number of values, or of values matching predicate"""
        return self._execute(Count(self.head, predicate))

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if every value matches predicate (True when empty)"""
        return self._execute(AllSatisfy(self.head, predicate))

    def any(self, predicate: Optional[Callable[[T], bool]] = None) -> bool:
        """True if some value matches predicate, or, without one, if not empty"""
        return self._execute(AnySatisfy(self.head, predicate))

    def single(self) -> T:
        """
        The only value

        Raises:
            EmptySequenceError: If there are no values
            MultipleElementsError: If there is more than one value
        """
        return self._execute(Single(self.head))

    def single_or_default(self, default: Any = None) -> T:
        """
        The only value, or default when empty

        Raises:
            MultipleElementsError: If there is more than one value
        """
        return self._execute(SingleOrDefault(self.head, default))

    def first(self, predicate: Optional[Callable[[T], bool]] = None) -> T:
        """
        First value, or first value matching predicate

        Raises:
            EmptySequenceError: If no value qualifies
        """
        return self._execute(First(self.head, predicate))

    def first_or_default(
        self, predicate: Optional[Callable[[T], bool]] = None, default: Any = None
    ) -> T:
        """First value (matching predicate), or default"""
        return self._execute(FirstOrDefault(self.head, predicate, default))

    def last(self, predicate: Optional[Callable[[T], bool]] = None) -> T:
        """
        Last value, or last value matching predicate

        Raises:
            EmptySequenceError: If no value qualifies
        """
        return self._execute(Last(self.head, predicate))

    def last_or_default(
        self, predicate: Optional[Callable[[T], bool]] = None, default: Any = None
    ) -> T:
        """Last value (matching predicate), or default"""
        return self._execute(LastOrDefault(self.head, predicate, default))

    def element_at(self, index: int) -> T:
        """
        Value at zero-based index

        Raises:
            EmptySequenceError: If the sequence is shorter than index + 1
        """
        return self._execute(ElementAt(self.head, index))

    def element_at_or_default(self, index: int, default: Any = None) -> T:
        """Value at zero-based index, or default when out of range"""
        return self._execute(ElementAt(self.head, index, default))

    def to_list(self) -> list[T]:
        """
        Materialize all values into a list

        Example:
            >>> query("abc").to_list()
            ['a', 'b', 'c']
        """
        return self._execute(ToList(self.head))

    to_array = to_list

    def to_dict(
        self, key_func: Callable[[T], Any], value_func: Optional[Callable[[T], Any]] = None
    ) -> dict[Any, Any]:
        """Dictionary of key_func(v) -> value_func(v); later duplicates win"""
        return self._execute(ToDict(self.head, key_func, value_func))

    to_dictionary = to_dict

    def group_by(self, key_func: Callable[[T], Any]) -> dict[Any, list[T]]:
        """
        Group values into lists by key_func(v)

        Example:
            >>> query(range(1, 7)).group_by(lambda i: i % 2)
            {1: [1, 3, 5], 0: [2, 4, 6]}
        """
        return self._execute(GroupBy(self.head, key_func))

    def aggregate(self, func: Callable[[Any, T], Any], seed: Any = MISSING) -> Any:
        """
        Left fold: acc = func(acc, v) for every value, starting from seed

        Without a seed the first value is the starting accumulator.

        Raises:
            EmptySequenceError: If there is no seed and no values
        """
        return self._execute(Aggregate(self.head, func, seed))

    def sum(self, func: Optional[Callable[[T], Any]] = None) -> Any:
        """Sum of func(v) (or v), 0 when empty"""
        return self._execute(Sum(self.head, func))

    def average(self, func: Optional[Callable[[T], Any]] = None) -> float:
        """
        Mean of func(v) (or v)

        Raises:
            DivisionByZeroError: If the sequence is empty
        """
        return self._execute(Average(self.head, func))

    def min(self, func: Optional[Callable[[T], Any]] = None) -> Any:
        """Smallest func(v) (or v); raises EmptySequenceError when empty"""
        return self._execute(Min(self.head, func))

    def max(self, func: Optional[Callable[[T], Any]] = None) -> Any:
        """Largest func(v) (or v); raises EmptySequenceError when empty"""
        return self._execute(Max(self.head, func))

    def to_dataframe(self, columns: Optional[list[str]] = None):
        """
        Materialize all values into a pandas DataFrame

        Raises:
            ImportError: If pandas is not installed
        """
        return self._execute(ToDataFrame(self.head, columns))

    # --------- iterator protocol ----------

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self.head)

    def explain(self, indent: int = 0) -> str:
        """
        Get the operator chain

        Args:
            indent: Spaces before the first line

        Returns:
            Human-readable plan, head first

        Example:
            >>> print(query([1, 2, 3]).filter(is_odd).take(1).explain())
            Take(1)
              Where(is_odd)
                Source(list)
        """
        return "\n".join(explain_upstream(self.head, indent))

    def __repr__(self) -> str:
        return f"Query({self.head!r})"


# Convenience function for top-level API
def query(iterable: Iterable[T] = ()) -> Query[T]:
    """
    Create a query over an iterable

    This is the main entry point for the linqstream API.

    Args:
        iterable: Values to query; empty if omitted

    Returns:
        Query object

    Example:
        >>> from linqstream import query
        >>> query([1, 2, 3, 4]).skip(1).take(2).to_list()
        [2, 3]
    """
    return Query.from_iterable(iterable)
