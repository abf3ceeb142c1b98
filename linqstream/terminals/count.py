"""Count terminal"""

from linqstream.terminals.base import Terminal
from linqstream.utils.aggregates import create_aggregator


class Count(Terminal):
    """Number of values, or of values matching the predicate"""

    def _run(self) -> int:
        aggregator = create_aggregator("COUNT")
        for value in self.iterator:
            if self._matches(value):
                aggregator.update(value)
        return aggregator.result()
