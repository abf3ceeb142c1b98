"""
Reverse operator

Yields the child's values in reverse order.
"""

import logging
from collections.abc import Iterator
from typing import Any

from linqstream.operators.base import Operator

logger = logging.getLogger(__name__)


class Reverse(Operator):
    """
    Reverse operator

    Note: This is a buffering operator, not a streaming one. The whole
    child is drained into memory when the operator is constructed, so
    memory use is O(n) and any side effects upstream (for_each, failing
    predicates) happen at the reverse() call, not at the first pull.
    """

    def __init__(self, child: Iterator[Any]):
        """
        Initialize Reverse operator and drain the child

        Args:
            child: Upstream iterator to drain
        """
        super().__init__(child)
        self.buffer = list(child)
        self.drained = len(self.buffer)
        logger.debug(f"Reverse buffered {len(self.buffer)} values")

    def __next__(self) -> Any:
        if not self.buffer:
            raise StopIteration
        return self.buffer.pop()

    def __repr__(self) -> str:
        return f"Reverse(buffered={self.drained})"
