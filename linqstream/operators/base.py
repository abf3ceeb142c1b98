"""
Base operator class for pull-based sequence evaluation

Each operator pulls values from its child operator on demand.
Nothing is computed until a consumer asks for the next value.
"""

from collections.abc import Iterator
from typing import Any, Optional


class Operator:
    """
    Base class for all deferred operators

    Operators form a chain where:
    - The leaf operator (Source) reads from a Python iterable
    - Every other operator wraps exactly one upstream (Concat wraps two)
    - The head of the chain is pulled by a Query or a Terminal

    The pull-based model means:
    - Operators are iterators: each __next__ advances exactly once
    - All state lives in plain attributes, so a caller function that
      raises during a pull fails that pull only; the next pull carries on
    - Memory usage is O(chain depth), not O(data size), except for
      buffering operators such as Reverse

    An operator must have a single consumer. Pulling from an operator that
    has already been wrapped by another operator splits the sequence between
    the two pullers and gives undefined results.
    """

    def __init__(self, child: Optional[Iterator[Any]] = None):
        """
        Initialize operator

        Args:
            child: Upstream iterator to pull values from (None for leaf operators)
        """
        self.child = child

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        """
        Advance the operator once

        Returns:
            The next value

        Raises:
            StopIteration: When the operator is exhausted
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement __next__()")

    def explain(self, indent: int = 0) -> list[str]:
        """Describe this operator and everything upstream of it"""
        lines = [" " * indent + repr(self)]
        lines.extend(explain_upstream(self.child, indent + 2))
        return lines

    def __repr__(self) -> str:
        """String representation for debugging"""
        return f"{self.__class__.__name__}()"


def explain_upstream(upstream: Any, indent: int) -> list[str]:
    """Explain an upstream that may or may not be an operator"""
    if upstream is None:
        return []
    if hasattr(upstream, "explain"):
        explained = upstream.explain(indent)
        # Query.explain returns a rendered string
        if isinstance(explained, str):
            return explained.splitlines()
        return explained
    return [" " * indent + type(upstream).__name__]


def describe(func: Any) -> str:
    """Short name for a caller-supplied function"""
    return getattr(func, "__name__", type(func).__name__)
