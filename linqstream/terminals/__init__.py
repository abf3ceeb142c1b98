"""
Terminal operators

Every terminal consumes an iterator and returns a single value.
"""

from linqstream.terminals.aggregate import Aggregate, Average, Max, Min, Sum
from linqstream.terminals.base import Terminal
from linqstream.terminals.count import Count
from linqstream.terminals.element import (
    ElementAt,
    First,
    FirstOrDefault,
    Last,
    LastOrDefault,
    Single,
    SingleOrDefault,
)
from linqstream.terminals.materialize import GroupBy, ToDataFrame, ToDict, ToList
from linqstream.terminals.quantifiers import AllSatisfy, AnySatisfy

__all__ = [
    "Aggregate",
    "AllSatisfy",
    "AnySatisfy",
    "Average",
    "Count",
    "ElementAt",
    "First",
    "FirstOrDefault",
    "GroupBy",
    "Last",
    "LastOrDefault",
    "Max",
    "Min",
    "Single",
    "SingleOrDefault",
    "Sum",
    "Terminal",
    "ToDataFrame",
    "ToDict",
    "ToList",
]
