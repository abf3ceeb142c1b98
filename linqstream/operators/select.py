"""
Projection operators - implement select, select_many, key_value and for_each

Each value pulled from the child is passed through a caller-supplied
function. The functions run only when the value is pulled.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Optional

from linqstream.core.types import KeyValuePair
from linqstream.operators.base import Operator, describe


class Select(Operator):
    """
    Select operator - transforms each value

    Pulls one value from child, applies func, yields the result.
    """

    def __init__(self, child: Iterator[Any], func: Callable[[Any], Any]):
        """
        Initialize select operator

        Args:
            child: Upstream iterator to pull values from
            func: Transform applied to every value
        """
        super().__init__(child)
        self.func = func

    def __next__(self) -> Any:
        return self.func(next(self.child))

    def __repr__(self) -> str:
        return f"Select({describe(self.func)})"


class ForEach(Operator):
    """
    ForEach operator - observes each value without changing it

    The side effect fires when the value is pulled, not when the chain
    is built, so a chain that is never drained never calls func.
    """

    def __init__(self, child: Iterator[Any], func: Callable[[Any], None]):
        super().__init__(child)
        self.func = func

    def __next__(self) -> Any:
        value = next(self.child)
        self.func(value)
        return value

    def __repr__(self) -> str:
        return f"ForEach({describe(self.func)})"


class KeyValue(Operator):
    """KeyValue operator - maps each value to a KeyValuePair"""

    def __init__(
        self,
        child: Iterator[Any],
        key_func: Callable[[Any], Any],
        value_func: Callable[[Any], Any],
    ):
        super().__init__(child)
        self.key_func = key_func
        self.value_func = value_func

    def __next__(self) -> KeyValuePair:
        value = next(self.child)
        return KeyValuePair(self.key_func(value), self.value_func(value))

    def __repr__(self) -> str:
        return f"KeyValue({describe(self.key_func)}, {describe(self.value_func)})"


class SelectMany(Operator):
    """
    SelectMany operator - flattens one level of nesting

    For each upstream value, func returns a finite iterable. Its items are
    yielded in order before the next upstream value is pulled. Upstream
    values whose expansion is empty produce nothing.
    """

    def __init__(self, child: Iterator[Any], func: Callable[[Any], Iterable[Any]]):
        """
        Initialize select_many operator

        Args:
            child: Upstream iterator to pull values from
            func: Function returning the expansion of a value
        """
        super().__init__(child)
        self.func = func
        # Remainder of the current expansion
        self.expansion: Optional[Iterator[Any]] = None

    def __next__(self) -> Any:
        while True:
            if self.expansion is not None:
                try:
                    return next(self.expansion)
                except StopIteration:
                    self.expansion = None
            self.expansion = iter(self.func(next(self.child)))

    def __repr__(self) -> str:
        return f"SelectMany({describe(self.func)})"
