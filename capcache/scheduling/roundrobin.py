"""Interleaved weighted round-robin node selection."""

from typing import Generic, List, Optional, Protocol, TypeVar
import threading

from capcache.utils.utils import gcd


class WeightedNode(Protocol):
    def weight(self) -> int:
        ...


NodeT = TypeVar("NodeT", bound=WeightedNode)


class RoundRobin(Generic[NodeT]):
    """
    Weighted round-robin selector.

    Walks the nodes cyclically while lowering a current-weight threshold by
    the GCD of all weights on every wrap-around, so a node of weight w is
    picked w / gcd times per cycle, interleaved with the others. Equal
    weights degrade to plain rotation.
    """

    def __init__(self, *nodes: NodeT):
        self._nodes: List[NodeT] = list(nodes)
        self._index = -1
        self._weight = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._nodes)

    def next(self) -> Optional[NodeT]:
        """
        Pick the next node.

        Returns:
            The selected node, or None if there are no nodes with a positive weight
        """
        with self._lock:
            if not self._nodes:
                return None

            while True:
                self._index = (self._index + 1) % len(self._nodes)

                if self._index == 0:
                    self._weight -= self._step()
                    if self._weight <= 0:
                        self._weight = self._max_weight()
                        if self._weight <= 0:
                            return None

                node = self._nodes[self._index]
                if node.weight() >= self._weight:
                    return node

    def _step(self) -> int:
        return gcd(*(node.weight() for node in self._nodes)) or 1

    def _max_weight(self) -> int:
        return max(node.weight() for node in self._nodes)
