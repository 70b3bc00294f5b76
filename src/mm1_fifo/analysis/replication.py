# src/mm1_fifo/analysis/replication.py

"""
Runs repeated queue-length simulations and collects their statistics.

Each replication generates one queue-length series (see
`mm1_fifo.length_process`) and reduces it to `queue_zero`, `median`,
`mean` and `max`. The replications share one seeded generator, so the
whole table is reproducible from a single seed.

This module requires 'pandas', which is an optional dependency for
the [analysis] feature set.
"""

import logging
import math
from typing import Optional

# Optional Dependency Handling
try:
    import numpy as np
    import pandas as pd
except ImportError:
    log = logging.getLogger(__name__)
    log.error("Analysis dependencies (numpy, pandas) not found.")
    log.error("Please install them with: pip install mm1-fifo[analysis]")
    raise

from ..constants import (
    DEFAULT_ARRIVAL_PROB,
    DEFAULT_CONTROL_INTERVAL,
    DEFAULT_DEPARTURE_PROB,
    DEFAULT_REPLICATIONS,
    DEFAULT_SEED,
    DEFAULT_STEPS,
)
from ..length_process import generate_length_series, summarize_series

log = logging.getLogger(__name__)


def run_replications(
    n: int = DEFAULT_REPLICATIONS,
    steps: int = DEFAULT_STEPS,
    arrival_prob: float = DEFAULT_ARRIVAL_PROB,
    departure_prob: float = DEFAULT_DEPARTURE_PROB,
    control: bool = False,
    limit: float = math.inf,
    control_interval: int = DEFAULT_CONTROL_INTERVAL,
    seed: Optional[int] = DEFAULT_SEED
) -> "pd.DataFrame":
    """
    Runs `n` independent replications of the queue-length process.

    Args:
        n (int): The number of replications.
        steps (int): The number of time steps per replication.
        arrival_prob (float): Probability of an arrival per step.
        departure_prob (float): Probability of a departure per step.
        control (bool): Whether to truncate the queue length.
        limit (float): The length to truncate to.
        control_interval (int): Truncate every this many steps.
        seed (Optional[int]): Seed of the shared random generator.

    Returns:
        pd.DataFrame: One row per replication with the columns
        'queue_zero', 'median', 'mean' and 'max'.
    """
    if n <= 0:
        raise ValueError(f"Number of replications must be > 0, got {n}.")

    log.info(f"Running {n} replications of {steps} steps "
             f"(control={control}, limit={limit})")

    rng = np.random.default_rng(seed)
    rows = []
    for i in range(n):
        series = generate_length_series(
            steps=steps,
            arrival_prob=arrival_prob,
            departure_prob=departure_prob,
            rng=rng,
            control=control,
            limit=limit,
            control_interval=control_interval
        )
        rows.append(summarize_series(series))
        log.debug(f"Replication {i + 1}/{n} done: {rows[-1]}")

    return pd.DataFrame(rows, columns=["queue_zero", "median", "mean", "max"])
