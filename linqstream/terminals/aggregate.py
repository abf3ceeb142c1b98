"""
Aggregating terminals - aggregate, sum, average, min and max

All of them feed every value to an Aggregator and return its result.
"""

from collections.abc import Iterator
from typing import Any, Callable, Optional

from linqstream.core.types import MISSING
from linqstream.terminals.base import Terminal
from linqstream.utils.aggregates import FoldAggregator, create_aggregator


class Aggregate(Terminal):
    """
    Left fold over the sequence

    The accumulator starts at seed and becomes func(accumulator, value)
    for every value in order. Without a seed the first value is the
    starting accumulator, and an empty sequence raises EmptySequenceError.
    """

    def __init__(
        self,
        iterator: Iterator[Any],
        func: Callable[[Any, Any], Any],
        seed: Any = MISSING,
    ):
        super().__init__(iterator)
        self.func = func
        self.seed = seed

    def _run(self) -> Any:
        aggregator = FoldAggregator(self.func, self.seed)
        for value in self.iterator:
            aggregator.update(value)
        return aggregator.result()


class SelectorAggregate(Terminal):
    """
    Aggregate of func(value), computed by a named aggregator

    Subclasses set `function` to one of the names create_aggregator knows.
    """

    function = ""

    def __init__(self, iterator: Iterator[Any], func: Optional[Callable[[Any], Any]] = None):
        """
        Initialize aggregate

        Args:
            iterator: Iterator to consume
            func: Selects the number to aggregate (the value itself if omitted)
        """
        super().__init__(iterator)
        self.selector = func if func is not None else _identity

    def _run(self) -> Any:
        aggregator = create_aggregator(self.function)
        for value in self.iterator:
            aggregator.update(self.selector(value))
        return aggregator.result()


class Sum(SelectorAggregate):
    """Sum with + starting from 0; 0 for an empty sequence"""

    function = "SUM"


class Average(SelectorAggregate):
    """
    Arithmetic mean

    Raises:
        DivisionByZeroError: If the sequence is empty
    """

    function = "AVG"


class Min(SelectorAggregate):
    """Smallest value; raises EmptySequenceError when empty"""

    function = "MIN"


class Max(SelectorAggregate):
    """Largest value; raises EmptySequenceError when empty"""

    function = "MAX"


def _identity(value: Any) -> Any:
    return value
