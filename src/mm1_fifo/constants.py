# src/mm1_fifo/constants.py

"""
Defines core enumerations and default parameters used across the package.

The enums are the value-level signals returned by the bounded queue:
an overflow is an expected outcome of a bounded queue under load, so it
is returned to the caller rather than raised.

The defaults reproduce the reference M/M/1 scenario: a 20-slot queue,
arrival probability 0.25, departure probability 0.30 and truncation to
2 elements every 10 steps.
"""

from enum import Enum, auto

class EnqueueResult(Enum):
    """
    Represents the possible outcomes of `BoundedFifoQueue.enqueue()`.

    The element is written into the queue in both cases; `OVERFLOW`
    reports that the tail has caught up with an occupied head slot.
    """

    # The element was stored and the next tail slot is free.
    OK = auto()

    # The element was stored, but the tail now points at an occupied
    # slot. The queue has no room left; the caller decides whether to
    # stop the run or drop further arrivals.
    OVERFLOW = auto()

class QueuePhase(Enum):
    """
    The three logical phases of a bounded FIFO queue.
    """

    EMPTY = auto()

    PARTIAL = auto()

    # Holding `capacity - 1` elements (the usable maximum), or more
    # after an overflow.
    AT_CAPACITY = auto()


# Queue
DEFAULT_CAPACITY: int = 20
MIN_CAPACITY: int = 2
DEFAULT_TOKEN: str = "ab"

# Driver
DEFAULT_ARRIVAL_PROB: float = 0.25
DEFAULT_DEPARTURE_PROB: float = 0.30
DEFAULT_STEPS: int = 10000
DEFAULT_SEED: int = 1234

# Admission control
DEFAULT_CONTROL_INTERVAL: int = 10
DEFAULT_LIMIT: int = 2

# Replications
DEFAULT_REPLICATIONS: int = 100

# Rendering
OCCUPIED_MARK: str = "*"
FREE_MARK: str = " "
