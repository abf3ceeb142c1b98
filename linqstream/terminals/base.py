"""
Base class for terminal operators

A terminal drains an iterator (fully, or until it can answer) and
returns one concrete value. Terminals are not iterators, so nothing
can be chained after them.
"""

import logging
from collections.abc import Iterator
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Terminal:
    """
    Base class for all terminal operators

    Subclasses implement _run(). A terminal is executed once; after that
    its iterator is spent and the terminal holds no further state.
    """

    def __init__(self, iterator: Iterator[Any], predicate: Optional[Callable[[Any], bool]] = None):
        """
        Initialize terminal

        Args:
            iterator: Iterator to consume
            predicate: Optional filter; None means every value matches
        """
        self.iterator = iterator
        self.predicate = predicate

    def execute(self) -> Any:
        """Consume the iterator and return the result"""
        logger.debug(f"Running terminal {self.__class__.__name__}")
        result = self._run()
        logger.debug(f"Finished terminal {self.__class__.__name__}")
        return result

    def _run(self) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} must implement _run()")

    def _matches(self, value: Any) -> bool:
        return self.predicate is None or bool(self.predicate(value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
