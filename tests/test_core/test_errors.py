"""
Tests for error kinds
"""

import pytest

from linqstream.errors import (
    DivisionByZeroError,
    EmptySequenceError,
    ErrorKind,
    MultipleElementsError,
    SequenceError,
)


class TestErrorKinds:
    """Test the closed set of error kinds"""

    @pytest.mark.parametrize(
        "error_class, kind, builtin",
        [
            (EmptySequenceError, ErrorKind.EMPTY_SEQUENCE, ValueError),
            (MultipleElementsError, ErrorKind.MULTIPLE_ELEMENTS, ValueError),
            (DivisionByZeroError, ErrorKind.DIVISION_BY_ZERO, ZeroDivisionError),
        ],
    )
    def test_error_kind(self, error_class, kind, builtin):
        error = error_class("message", operation="op")

        assert error.kind is kind
        assert error.operation == "op"
        assert isinstance(error, SequenceError)
        assert isinstance(error, builtin)
        assert str(error) == "message"

    def test_kinds_are_closed(self):
        assert {k.value for k in ErrorKind} == {
            "EMPTY_SEQUENCE",
            "MULTIPLE_ELEMENTS",
            "DIVISION_BY_ZERO",
        }

    def test_repr(self):
        error = EmptySequenceError("empty", operation="first")
        assert repr(error) == "EmptySequenceError(kind=EMPTY_SEQUENCE, operation='first')"

    def test_operation_optional(self):
        assert MultipleElementsError("many").operation is None
