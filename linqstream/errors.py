"""
Errors raised by terminal operators

Every failure carries an ErrorKind so callers can branch on the kind
instead of parsing messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of failures a sequence query can produce."""

    EMPTY_SEQUENCE = "EMPTY_SEQUENCE"
    MULTIPLE_ELEMENTS = "MULTIPLE_ELEMENTS"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"

    def __str__(self) -> str:
        return self.value


class SequenceError(Exception):
    """
    Base class for query failures

    Attributes:
        kind: Which failure occurred
        operation: Name of the terminal operation that failed (e.g. 'single')
    """

    kind: ErrorKind

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind}, operation={self.operation!r})"


class EmptySequenceError(SequenceError, ValueError):
    """Sequence had no elements, or none matched the predicate"""

    kind = ErrorKind.EMPTY_SEQUENCE


class MultipleElementsError(SequenceError, ValueError):
    """Sequence had more than one element where exactly one was expected"""

    kind = ErrorKind.MULTIPLE_ELEMENTS


class DivisionByZeroError(SequenceError, ZeroDivisionError):
    """Average was requested over an empty sequence"""

    kind = ErrorKind.DIVISION_BY_ZERO
