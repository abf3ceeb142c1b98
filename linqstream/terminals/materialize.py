"""
Materializing terminals - to_list, to_dict, group_by and to_dataframe

These drain the whole iterator into a concrete container.
"""

from collections.abc import Iterator
from typing import Any, Callable, Optional

from linqstream.terminals.base import Terminal


class ToList(Terminal):
    """All values, in order"""

    def _run(self) -> list[Any]:
        return list(self.iterator)


class ToDict(Terminal):
    """
    Dictionary built from every value

    When two values produce the same key, the later one wins.
    """

    def __init__(
        self,
        iterator: Iterator[Any],
        key_func: Callable[[Any], Any],
        value_func: Optional[Callable[[Any], Any]] = None,
    ):
        """
        Initialize to_dict terminal

        Args:
            iterator: Iterator to consume
            key_func: Computes the key for a value
            value_func: Computes the stored value (the value itself if omitted)
        """
        super().__init__(iterator)
        self.key_func = key_func
        self.value_func = value_func

    def _run(self) -> dict[Any, Any]:
        result = {}
        for value in self.iterator:
            stored = value if self.value_func is None else self.value_func(value)
            result[self.key_func(value)] = stored
        return result


class GroupBy(Terminal):
    """
    Values grouped into lists by key

    Groups keep the order in which their values arrived, and keys keep
    the order in which they were first seen.
    """

    def __init__(self, iterator: Iterator[Any], key_func: Callable[[Any], Any]):
        super().__init__(iterator)
        self.key_func = key_func

    def _run(self) -> dict[Any, list[Any]]:
        # Hash map: key -> values in arrival order
        groups: dict[Any, list[Any]] = {}
        for value in self.iterator:
            key = self.key_func(value)
            if key not in groups:
                groups[key] = []
            groups[key].append(value)
        return groups


class ToDataFrame(Terminal):
    """
    pandas DataFrame built from every value

    Dicts, named tuples (including KeyValuePair) and dataclass instances
    become columns; scalars become a single column.
    """

    def __init__(self, iterator: Iterator[Any], columns: Optional[list[str]] = None):
        super().__init__(iterator)
        self.columns = columns

    def _run(self):
        try:
            import pandas as pd
        except ImportError as e:
            raise ImportError(
                "Pandas is required for to_dataframe(). Install with: pip install linqstream[pandas]"
            ) from e

        return pd.DataFrame(list(self.iterator), columns=self.columns)
