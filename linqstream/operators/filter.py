"""
Where operator - filters values by a predicate

Only values for which the predicate returns a truthy result are yielded.
"""

from collections.abc import Iterator
from typing import Any, Callable

from linqstream.operators.base import Operator, describe


class Where(Operator):
    """
    Where operator - evaluates a predicate per value

    Pulls from child until a value satisfies the predicate,
    then yields it. Values that fail are dropped.
    """

    def __init__(self, child: Iterator[Any], predicate: Callable[[Any], bool]):
        """
        Initialize where operator

        Args:
            child: Upstream iterator to pull values from
            predicate: Function deciding whether a value is kept
        """
        super().__init__(child)
        self.predicate = predicate

    def __next__(self) -> Any:
        while True:
            value = next(self.child)
            if self.predicate(value):
                return value

    def __repr__(self) -> str:
        return f"Where({describe(self.predicate)})"
