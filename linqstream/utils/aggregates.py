"""
Aggregation function implementations

Provides FOLD, COUNT, SUM, AVG, MIN and MAX aggregations.
Each aggregator maintains state and can be updated incrementally.
"""

from typing import Any, Callable

from linqstream.core.types import MISSING
from linqstream.errors import DivisionByZeroError, EmptySequenceError


class Aggregator:
    """Base class for aggregators"""

    def update(self, value: Any) -> None:
        """Update aggregator with a new value"""
        raise NotImplementedError

    def result(self) -> Any:
        """Get final aggregated result"""
        raise NotImplementedError


class FoldAggregator(Aggregator):
    """
    FOLD aggregator - left fold with a caller-supplied function

    Without a seed the first value becomes the initial accumulator.
    """

    def __init__(self, func: Callable[[Any, Any], Any], seed: Any = MISSING):
        """
        Initialize FOLD aggregator

        Args:
            func: Called as func(accumulator, value) for every value
            seed: Initial accumulator (optional)
        """
        self.func = func
        self.accumulator = seed

    def update(self, value: Any) -> None:
        """Fold value into the accumulator"""
        if self.accumulator is MISSING:
            self.accumulator = value
        else:
            self.accumulator = self.func(self.accumulator, value)

    def result(self) -> Any:
        """Return the accumulator"""
        if self.accumulator is MISSING:
            raise EmptySequenceError(
                "Sequence contains no elements and no seed was given", operation="aggregate"
            )
        return self.accumulator


class CountAggregator(Aggregator):
    """COUNT aggregator - counts values"""

    def __init__(self):
        self.count = 0

    def update(self, value: Any) -> None:
        """Update count"""
        self.count += 1

    def result(self) -> int:
        """Return total count"""
        return self.count


class SumAggregator(Aggregator):
    """SUM aggregator - adds values with + starting from 0"""

    def __init__(self):
        self.sum = 0

    def update(self, value: Any) -> None:
        """Add value to sum"""
        self.sum += value

    def result(self) -> Any:
        """Return sum, 0 if no values"""
        return self.sum


class AvgAggregator(Aggregator):
    """AVG aggregator - computes average of numeric values"""

    def __init__(self):
        self.sum = 0
        self.count = 0

    def update(self, value: Any) -> None:
        """Add value to average calculation"""
        self.sum += value
        self.count += 1

    def result(self) -> float:
        """
        Return average

        Raises:
            DivisionByZeroError: If no values were seen
        """
        if self.count == 0:
            raise DivisionByZeroError("Cannot average an empty sequence", operation="average")
        return self.sum / self.count


class MinAggregator(Aggregator):
    """MIN aggregator - finds minimum value"""

    def __init__(self):
        self.min: Any = MISSING

    def update(self, value: Any) -> None:
        """Update minimum"""
        if self.min is MISSING or value < self.min:
            self.min = value

    def result(self) -> Any:
        """Return minimum value"""
        if self.min is MISSING:
            raise EmptySequenceError("Sequence contains no elements", operation="min")
        return self.min


class MaxAggregator(Aggregator):
    """MAX aggregator - finds maximum value"""

    def __init__(self):
        self.max: Any = MISSING

    def update(self, value: Any) -> None:
        """Update maximum"""
        if self.max is MISSING or value > self.max:
            self.max = value

    def result(self) -> Any:
        """Return maximum value"""
        if self.max is MISSING:
            raise EmptySequenceError("Sequence contains no elements", operation="max")
        return self.max


def create_aggregator(function: str) -> Aggregator:
    """
    Factory function to create appropriate aggregator

    Args:
        function: Aggregate function name (COUNT, SUM, AVG, MIN, MAX)

    Returns:
        Aggregator instance

    Raises:
        ValueError: If function is not recognized
    """
    function = function.upper()

    if function == "COUNT":
        return CountAggregator()
    elif function == "SUM":
        return SumAggregator()
    elif function == "AVG":
        return AvgAggregator()
    elif function == "MIN":
        return MinAggregator()
    elif function == "MAX":
        return MaxAggregator()
    else:
        raise ValueError(f"Unknown aggregate function: {function}")
