# src/mm1_fifo/base_queue.py

"""
Defines the Abstract Base Class (ABC) for bounded queues.

This module provides 'BaseQueue', which establishes the interface the
simulator and the admission controller program against. Any bounded
queue that offers these operations can be driven step by step,
truncated and rendered in the same way.
"""

import abc
import numbers
from typing import Any, List, Optional

# Local package imports
from .constants import EnqueueResult, MIN_CAPACITY


class BaseQueue(abc.ABC):
    """
    Abstract Base Class for bounded queue implementations.

    This class defines the standard public API:
    - `enqueue(element)`: To store an arriving element.
    - `dequeue()`: To remove the element at the head, if any.
    - `evict_head()`: To drop the element at the head without returning it.
    - `occupancy_mask()`: To report which slots are occupied.
    - `len(queue)`: The number of occupied slots.
    """

    def __init__(self, capacity: int):
        """
        Initializes the base attributes common to all bounded queues.

        Args:
            capacity (int): The number of slots in the queue.

        Raises:
            ValueError: If capacity is not an integer or is less than 2.
        """
        if (isinstance(capacity, bool)
                or not isinstance(capacity, numbers.Integral)):
            raise ValueError(f"Queue capacity must be an integer, "
                             f"got {capacity!r}.")
        if capacity < MIN_CAPACITY:
            # One slot is always kept free to tell a full queue from an
            # empty one, so fewer than two slots cannot hold anything.
            raise ValueError(f"Queue capacity must be >= {MIN_CAPACITY}, "
                             f"got {capacity}.")

        self._capacity: int = int(capacity)

    @property
    def capacity(self) -> int:
        """The fixed number of slots."""
        return self._capacity

    @abc.abstractmethod
    def enqueue(self, element: Any) -> EnqueueResult:
        """
        Stores an element at the tail of the queue.

        Args:
            element (Any): The element to store.

        Returns:
            EnqueueResult: OK, or OVERFLOW if the queue has no room left.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def dequeue(self) -> Optional[Any]:
        """
        Removes and returns the element at the head of the queue.

        Returns:
            Optional[Any]: The removed element, or `None` if the
                           queue was empty.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def evict_head(self) -> bool:
        """
        Drops the element at the head of the queue.

        Returns:
            bool: True if an element was removed, False if the head
                  slot was empty.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def occupancy_mask(self) -> List[bool]:
        """
        Reports the occupancy of every slot in array order.

        Returns:
            List[bool]: One flag per slot, True where the slot is occupied.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
