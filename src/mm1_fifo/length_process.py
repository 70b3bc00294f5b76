# src/mm1_fifo/length_process.py

"""
Generates queue-length time series without storing elements.

This is the counter-only form of the same discrete M/M/1 model the
`FifoSimulator` runs on a real queue, approximating Poisson arrivals
with a Bernoulli process and exponential service with geometric
service times (Bertsekas and Tsitsiklis, 2008):

- Zero or one arrival per step, with probability `arrival_prob`.
- Zero or one departure per step, with probability `departure_prob`,
  but only if the queue holds something after the arrival.
- With control, every `control_interval` steps a length above `limit`
  is cut down to `limit`.

There is no capacity here; the length is unbounded.
"""

import logging
import math
import numbers
from typing import Any, Dict, Optional

import numpy as np

# Local package imports
from .constants import DEFAULT_CONTROL_INTERVAL
from .sources import validate_probability

# Set up the module-level logger
log = logging.getLogger(__name__)


def generate_length_series(
    steps: int,
    arrival_prob: float,
    departure_prob: float,
    rng: Optional[np.random.Generator] = None,
    control: bool = False,
    limit: float = math.inf,
    control_interval: int = DEFAULT_CONTROL_INTERVAL
) -> np.ndarray:
    """
    Simulates the queue length over `steps` time steps.

    Args:
        steps (int): The number of time steps.
        arrival_prob (float): Probability of an arrival per step.
        departure_prob (float): Probability of a departure per step.
        rng (Optional[np.random.Generator]): The random generator to
            draw from. A fresh unseeded generator is used if None.
        control (bool): Whether to truncate the queue length.
        limit (float): The length to truncate to. An integer, or
            math.inf for no truncation.
        control_interval (int): Truncate every this many steps.

    Returns:
        np.ndarray: Integer array of length `steps`; element i is the
                    queue length after step i + 1.
    """
    if steps < 0:
        raise ValueError(f"steps cannot be negative, got {steps}.")
    if control_interval <= 0:
        raise ValueError(f"control_interval must be positive, "
                         f"got {control_interval!r}.")
    if limit != math.inf and (isinstance(limit, bool)
                              or not isinstance(limit, numbers.Integral)):
        raise ValueError(f"limit must be an integer or math.inf, "
                         f"got {limit!r}.")
    if limit < 0:
        raise ValueError(f"limit cannot be negative, got {limit!r}.")
    validate_probability("arrival_prob", arrival_prob)
    validate_probability("departure_prob", departure_prob)

    if rng is None:
        rng = np.random.default_rng()

    log.debug(f"Generating length series: steps={steps}, "
              f"p_arrival={arrival_prob}, p_departure={departure_prob}, "
              f"control={control}, limit={limit}")

    queue_length = np.zeros(steps, dtype=np.int64)
    previous = 0
    for i in range(1, steps + 1):
        arrival = int(rng.random() < arrival_prob)

        # Always zero departures if the queue is empty
        if previous + arrival == 0:
            departure = 0
        else:
            departure = int(rng.random() < departure_prob)

        current = previous + arrival - departure
        if control and i % control_interval == 0 and current > limit:
            current = int(limit)

        queue_length[i - 1] = current
        previous = current

    return queue_length


def summarize_series(series) -> Dict[str, Any]:
    """
    Summarizes a queue-length series.

    Returns:
        Dict[str, Any]: `queue_zero` (percentage of steps with an empty
        queue, rounded to one decimal), `median`, `mean` and `max`.
    """
    data = np.asarray(series)
    if data.size == 0:
        log.warning("Empty series. Returning zero statistics.")
        return {"queue_zero": 0.0, "median": 0.0, "mean": 0.0, "max": 0}

    return {
        "queue_zero": round(100.0 * float(np.mean(data == 0)), 1),
        "median": float(np.median(data)),
        "mean": float(np.mean(data)),
        "max": int(np.max(data))
    }


def idle_departure_probability(arrival_prob: float,
                               departure_prob: float) -> float:
    """
    Probability that a departure event goes unused on an empty queue:
    no arrival and a departure draw, (1 - p_arrival) * p_departure.
    """
    return (1.0 - arrival_prob) * departure_prob
