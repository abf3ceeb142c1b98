"""
Source operator - reads values from an iterable

This is a leaf operator (has no child).
It wraps any finite ordered sequence and yields its values once, in order.
"""

from collections.abc import Iterable
from typing import Any

from linqstream.operators.base import Operator


class Source(Operator):
    """
    Source operator - wrapper around a Python iterable

    This is the leaf of the operator chain. Lists, tuples, strings,
    generators and other iterators are all accepted.
    """

    def __init__(self, iterable: Iterable[Any]):
        """
        Initialize source operator

        Args:
            iterable: Values to yield

        Raises:
            TypeError: If iterable is not iterable
        """
        super().__init__(child=None)
        self.iterable = iterable
        self._iterator = iter(iterable)

    def __next__(self) -> Any:
        return next(self._iterator)

    def __repr__(self) -> str:
        return f"Source({type(self.iterable).__name__})"
