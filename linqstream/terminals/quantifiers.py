"""
Quantifier terminals - all and any

Both stop pulling as soon as the answer is known.
"""

from collections.abc import Iterator
from typing import Any, Callable

from linqstream.terminals.base import Terminal


class AllSatisfy(Terminal):
    """
    True if every value satisfies the predicate

    An empty sequence gives True.
    """

    def __init__(self, iterator: Iterator[Any], predicate: Callable[[Any], bool]):
        super().__init__(iterator, predicate)

    def _run(self) -> bool:
        for value in self.iterator:
            if not self.predicate(value):
                return False
        return True


class AnySatisfy(Terminal):
    """
    True if some value satisfies the predicate

    Without a predicate, True if the sequence has at least one value.
    """

    def _run(self) -> bool:
        for value in self.iterator:
            if self._matches(value):
                return True
        return False
