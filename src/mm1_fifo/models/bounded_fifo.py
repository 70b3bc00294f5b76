# src/mm1_fifo/models/bounded_fifo.py

"""
Implements the fixed-capacity circular FIFO queue.

This module provides the `BoundedFifoQueue` class, an array-backed
circular buffer following Cormen, Leiserson, Rivest and Stein (2009),
p. 234. It inherits from `BaseQueue` and keeps a single head/tail pair
of indices into a fixed list of slots:

- `head` is the index of the element that will be dequeued next.
- `tail` is the index of the free slot that receives the next element.
- `head == tail` with an empty head slot means the queue is empty.
- Both indices wrap around modulo `capacity`.

Because no separate "full" flag exists, one slot is always kept free,
so a queue of capacity C holds at most C - 1 elements in normal use.

**Insert-then-detect overflow:**
`enqueue()` writes the element *first* and only then checks whether
the advanced tail has run into an occupied slot. On overflow the
element is nonetheless stored (it fills the reserved slot) and the
call returns `EnqueueResult.OVERFLOW`.
"""

import logging
from typing import Any, Iterator, List, Optional

# Local package imports
from ..base_queue import BaseQueue
from ..constants import EnqueueResult, QueuePhase

# Set up the module-level logger
log = logging.getLogger(__name__)


class BoundedFifoQueue(BaseQueue):
    """
    A concrete implementation of BaseQueue backed by a circular array.

    Empty slots hold `None`; therefore `None` cannot be enqueued.
    """

    def __init__(self, capacity: int):
        """
        Initializes an empty queue with head = tail = 0.

        Args:
            capacity (int): The number of slots. Must be >= 2.
        """
        super().__init__(capacity)

        self._slots: List[Optional[Any]] = [None] * capacity
        self._head: int = 0
        self._tail: int = 0

        # Kept in step with the slots on every mutation
        self._size: int = 0

        log.info(f"BoundedFifoQueue initialized: Capacity={self.capacity}")

    @property
    def head(self) -> int:
        return self._head

    @property
    def tail(self) -> int:
        return self._tail

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def phase(self) -> QueuePhase:
        """The logical phase of the queue (empty, partial, at capacity)."""
        if self._size == 0:
            return QueuePhase.EMPTY
        if self._size >= self.capacity - 1:
            return QueuePhase.AT_CAPACITY
        return QueuePhase.PARTIAL

    def enqueue(self, element: Any) -> EnqueueResult:
        """
        Writes `element` into the tail slot, then advances the tail.

        The tail advances unconditionally. If the slot it lands on is
        occupied, the queue is full and OVERFLOW is returned; the
        element has still been written.
        """
        if element is None:
            log.error("Attempted to enqueue None; None marks an empty slot.")
            raise ValueError("Cannot enqueue None into a BoundedFifoQueue.")

        log.debug(f"Enqueue {element!r}: head={self._head} tail={self._tail}")

        if self._slots[self._tail] is None:
            self._size += 1
        self._slots[self._tail] = element
        self._tail = (self._tail + 1) % self.capacity

        # The next slot must be empty, otherwise overflow
        if self._slots[self._tail] is None:
            return EnqueueResult.OK

        log.warning(f"Queue overflow: tail={self._tail} reached an occupied "
                    f"slot (head={self._head}, size={self._size}).")
        return EnqueueResult.OVERFLOW

    def dequeue(self) -> Optional[Any]:
        """
        Removes and returns the element at the head.

        Returns `None` without touching any state if the head slot is
        empty.
        """
        log.debug(f"Dequeue: head={self._head} tail={self._tail}")
        element = self._remove_head()
        if element is None:
            log.debug("Dequeue on empty queue. Nothing removed.")
        return element

    def evict_head(self) -> bool:
        """Drops the head element exactly as `dequeue()` would."""
        evicted = self._remove_head()
        if evicted is None:
            return False
        log.debug(f"Evicted {evicted!r}. Size now {self._size}.")
        return True

    def peek(self) -> Optional[Any]:
        """Returns the head element without removing it."""
        return self._slots[self._head]

    def occupancy_mask(self) -> List[bool]:
        return [slot is not None for slot in self._slots]

    def snapshot(self) -> List[Any]:
        """
        Returns the stored elements in FIFO order (oldest first).

        Iteration starts at the head and stops at the first empty slot.
        After an overflow followed by a removal the head slot is empty,
        so the snapshot is empty even though len() is capacity - 1.
        """
        return list(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        index = self._head
        for _ in range(self.capacity):
            element = self._slots[index]
            if element is None:
                break
            yield element
            index = (index + 1) % self.capacity

    def __repr__(self) -> str:
        return (f"BoundedFifoQueue(capacity={self.capacity}, "
                f"size={self._size}, head={self._head}, tail={self._tail})")

    def _remove_head(self) -> Optional[Any]:
        """
        Clears the head slot and advances the head.

        An occupied head slot with head == tail only happens in the
        all-slots-full state after an overflow. There the head is left
        in place on the now empty slot. In normal operation the last
        element sits just before the tail, so its removal moves the head
        onto the tail.
        """
        element = self._slots[self._head]
        if element is None:
            return None

        self._slots[self._head] = None
        self._size -= 1
        if self._head != self._tail:
            self._head = (self._head + 1) % self.capacity
        return element
