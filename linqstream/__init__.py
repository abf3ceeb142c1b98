"""
linqstream - lazy, chainable queries over Python iterables

This package provides a fluent API for composing transformation,
filtering and aggregation over any iterable. Chain methods are lazy;
terminal methods pull values through the chain and return a result.
"""

__version__ = "0.1.0"

# Main API
from linqstream.core.query import Query, query
from linqstream.core.types import KeyValuePair
from linqstream.errors import (
    DivisionByZeroError,
    EmptySequenceError,
    ErrorKind,
    MultipleElementsError,
    SequenceError,
)

__all__ = [
    "__version__",
    "DivisionByZeroError",
    "EmptySequenceError",
    "ErrorKind",
    "KeyValuePair",
    "MultipleElementsError",
    "Query",
    "SequenceError",
    "query",
]
