# src/mm1_fifo/admission.py

"""
Provides the AdmissionController, a truncation policy for bounded queues.

The controller models a simple congestion-control mechanism: when it is
invoked, it forcibly drops the oldest elements of a queue until the
occupancy is at or below a configured limit. Dropped elements are
discarded, not handed back to the caller; an involuntary drop is a
different event from a voluntary departure.

The controller holds no state other than its limit. It is the caller's
job to decide *when* to enforce (e.g., every 10 steps).
"""

import logging
import numbers
from typing import Optional

# Local package imports
from .base_queue import BaseQueue

# Set up the module-level logger
log = logging.getLogger(__name__)


class AdmissionController:
    """
    Truncates a queue to at most `limit` elements, oldest first.

    Attributes:
        limit (int): The default occupancy limit used by `enforce()`.
    """

    def __init__(self, limit: int):
        """
        Initializes the controller.

        Args:
            limit (int): The maximum occupancy left after enforcement.
                         Must be a non-negative integer.
        """
        self.limit: int = self._validate_limit(limit)
        log.info(f"AdmissionController initialized: Limit={self.limit}")

    def enforce(self, queue: BaseQueue, limit: Optional[int] = None) -> int:
        """
        Evicts head elements while the occupancy exceeds the limit.

        Eviction goes through `queue.evict_head()`, which removes the
        head exactly as `dequeue()` does. The loop also stops if the
        head slot turns out to be empty, so it never underflows. A limit
        at or above the current occupancy is a no-op.

        Args:
            queue (BaseQueue): The queue to truncate.
            limit (Optional[int]): Overrides the configured limit for
                                   this call.

        Returns:
            int: The number of elements evicted.
        """
        limit = self.limit if limit is None else self._validate_limit(limit)

        queue_length = len(queue)
        evicted = 0
        while queue_length > limit:
            if not queue.evict_head():
                log.warning(f"Head slot empty with occupancy {queue_length} "
                            f"> limit {limit}. Stopping truncation.")
                break
            queue_length -= 1
            evicted += 1

        if evicted:
            log.debug(f"Truncated queue to {queue_length} "
                      f"(limit={limit}, evicted={evicted}).")
        return evicted

    @staticmethod
    def _validate_limit(limit: int) -> int:
        if (isinstance(limit, bool) or not isinstance(limit, numbers.Integral)
                or limit < 0):
            log.error(f"Invalid admission limit {limit!r}.")
            raise ValueError(f"Admission limit must be a non-negative "
                             f"integer, got {limit!r}.")
        return int(limit)
