"""
Concat operator

Yields every value of a first sequence, then every value of a second one.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from linqstream.operators.base import Operator, explain_upstream


class Concat(Operator):
    """
    Concat operator - joins two sequences end to end

    Unlike the other operators it has two inputs. The second input is
    not touched until the first is exhausted.
    """

    def __init__(self, first: Iterator[Any], second: Iterable[Any]):
        """
        Initialize Concat operator

        Args:
            first: Sequence yielded first
            second: Sequence yielded after first is exhausted; any iterable
        """
        # Store both children (concat has two inputs)
        super().__init__(first)
        self.first = first
        self.second = second
        self._second_iterator = iter(second)
        self.exhausted_first = False

    def __next__(self) -> Any:
        if not self.exhausted_first:
            try:
                return next(self.first)
            except StopIteration:
                self.exhausted_first = True
        return next(self._second_iterator)

    def explain(self, indent: int = 0) -> list[str]:
        lines = [" " * indent + repr(self)]
        lines.extend(explain_upstream(self.first, indent + 2))
        lines.extend(explain_upstream(self.second, indent + 2))
        return lines

    def __repr__(self) -> str:
        return "Concat()"
