"""
Pytest configuration and shared fixtures
"""

import pytest


class RecordingIterator:
    """Iterator that records how many times it was pulled"""

    def __init__(self, values):
        self._values = iter(values)
        self.pulls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.pulls += 1
        return next(self._values)


@pytest.fixture
def numbers():
    """Integers 0..9"""
    return [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


@pytest.fixture
def letters():
    """Characters a..j"""
    return ["a", "b", "c", "d", "e", "f", "g", "h", "i", "j"]


@pytest.fixture
def people():
    """Sample records for testing"""
    return [
        {"name": "Alice", "age": 30, "city": "NYC"},
        {"name": "Bob", "age": 25, "city": "LA"},
        {"name": "Charlie", "age": 35, "city": "SF"},
        {"name": "Diana", "age": 28, "city": "NYC"},
        {"name": "Eve", "age": 32, "city": "LA"},
    ]


@pytest.fixture
def recording():
    """Factory for iterators that count their pulls"""
    return RecordingIterator
