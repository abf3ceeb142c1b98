"""
Deferred operators

Every operator is an iterator that pulls lazily from its upstream.
"""

from linqstream.operators.base import Operator
from linqstream.operators.concat import Concat
from linqstream.operators.filter import Where
from linqstream.operators.limit import Skip, SkipWhile, Take, TakeWhile
from linqstream.operators.reverse import Reverse
from linqstream.operators.select import ForEach, KeyValue, Select, SelectMany
from linqstream.operators.source import Source

__all__ = [
    "Concat",
    "ForEach",
    "KeyValue",
    "Operator",
    "Reverse",
    "Select",
    "SelectMany",
    "Skip",
    "SkipWhile",
    "Source",
    "Take",
    "TakeWhile",
    "Where",
]
