import heapq
import itertools
from typing import Any, List, Tuple

from errors import EmptyQueueError


class MinPriorityQueue:
    """Binary min-heap of items keyed by a numeric weight.

    Entries are stored as ``(weight, sequence, item)`` triples. The sequence
    number grows with every push, so items of equal weight come out in the
    order they went in and the items themselves are never compared.

    :ivar heap: Underlying ``heapq`` list of entries.
    :type heap: List[Tuple[float, int, Any]]
    """

    def __init__(self):
        """Create an empty queue.

        :returns: None
        :rtype: None
        """
        self.heap: List[Tuple[float, int, Any]] = []
        self._sequence = itertools.count()

    def push(self, item: Any, weight: float):
        """Insert ``item`` with priority ``weight`` in O(log n).

        :param item: Value to store; it is never compared with other items.
        :type item: Any
        :param weight: Priority; smaller weights are popped first.
        :type weight: float
        :returns: None
        :rtype: None
        """
        heapq.heappush(self.heap, (weight, next(self._sequence), item))

    def pop(self) -> Any:
        """Remove and return the item with the smallest weight in O(log n).

        :returns: The item with the smallest ``(weight, insertion order)`` key.
        :rtype: Any
        :raises EmptyQueueError: If the queue has no elements.
        """
        if not self.heap:
            raise EmptyQueueError("pop from an empty priority queue")
        _, _, item = heapq.heappop(self.heap)
        return item

    def is_empty(self) -> bool:
        return not self.heap

    def __len__(self):
        return len(self.heap)
