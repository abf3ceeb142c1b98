"""Shared types for linqstream.

KeyValuePair is produced by key_value(); MISSING marks an argument the
caller did not supply where None is a legitimate value.
"""

from typing import Any, NamedTuple


class KeyValuePair(NamedTuple):
    """Immutable (key, value) pair."""

    key: Any
    value: Any

    def __str__(self) -> str:
        return f"{self.key!r}: {self.value!r}"


class _Missing:
    """Sentinel type for omitted arguments."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()
