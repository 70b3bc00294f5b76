# src/mm1_fifo/measure.py

"""
Provides the Measure class, a data collection and statistical analysis
tool for the discrete-time FIFO simulation.

This module records what happens at every time step (arrivals,
departures, evictions, overflows and the resulting queue length) and
calculates a set of Key Performance Indicators (KPIs) from that data.

It is designed to be a passive component; it only records data
when its 'log_...' methods are called by the simulator.
"""

import logging
import math
from typing import List, Tuple, Dict, Any

# Set up the module-level logger
log = logging.getLogger(__name__)


class Measure:
    """
    Collects, stores, and calculates KPIs for a bounded FIFO simulation.

    Attributes:
        capacity (int): The number of slots of the simulated queue.

        # Per-step data
        queue_lengths (List[int]): The queue length after every step.
        eviction_log (List[Tuple[int, int]]):
            A log of (step, evicted_count) tuples for every truncation
            that dropped at least one element.

        # Simple counters
        total_arrivals (int): Arrivals that were enqueued.
        total_departures (int): Departures that removed an element.
        total_idle_departures (int): Departure requests that found the
                                     queue empty.
        total_evictions (int): Elements dropped by admission control.
        total_overflows (int): Enqueues that reported overflow.

        last_step (int): The last step recorded.
    """

    def __init__(self, capacity: int):
        """
        Initializes the KPI tracker.

        Args:
            capacity (int): The number of slots of the simulated queue.
        """
        if capacity <= 0:
            log.warning(f"Measure initialized with capacity <= 0 ({capacity}). "
                        "Occupancy KPIs will be zero.")

        self.capacity: int = capacity
        self.last_step: int = 0

        # Data Storage
        self.queue_lengths: List[int] = []
        self.eviction_log: List[Tuple[int, int]] = []

        # Simple counters
        self.total_arrivals: int = 0
        self.total_departures: int = 0
        self.total_idle_departures: int = 0
        self.total_evictions: int = 0
        self.total_overflows: int = 0

        log.debug(f"Measure tracker initialized (Capacity={capacity})")

    def log_arrival(self, step: int):
        """Logs an element entering the queue."""
        self.total_arrivals += 1
        self._update_last_step(step)

    def log_overflow(self, step: int):
        """Logs an enqueue that reported overflow."""
        self.total_overflows += 1
        self._update_last_step(step)
        log.debug(f"Step {step}: Overflow logged. "
                  f"Total overflows: {self.total_overflows}")

    def log_departure(self, step: int):
        """Logs an element leaving the queue."""
        self.total_departures += 1
        self._update_last_step(step)

    def log_idle_departure(self, step: int):
        """Logs a departure request that found the queue empty."""
        self.total_idle_departures += 1
        self._update_last_step(step)

    def log_eviction(self, step: int, count: int):
        """Logs elements dropped by admission control."""
        if count <= 0:
            return
        self.total_evictions += count
        self.eviction_log.append((step, count))
        self._update_last_step(step)
        log.debug(f"Step {step}: {count} element(s) evicted. "
                  f"Total evictions: {self.total_evictions}")

    def log_step(self, step: int, queue_length: int):
        """Logs the queue length at the end of a step."""
        self.queue_lengths.append(queue_length)
        self._update_last_step(step)

    def _update_last_step(self, step: int):
        """Internal helper to keep track of the latest step."""
        self.last_step = max(self.last_step, step)

    def _calculate_statistical_summary(
        self, data: List[float], confidence: float = 0.95
    ) -> Dict[str, Any]:
        """
        Calculates a full statistical summary for a list of observations.

        Includes mean, std_dev, count, and confidence interval.
        Uses Z-score (1.96) for 95% CI, assuming n > 30, which is
        typical for simulation.
        """
        n = len(data)
        if n == 0:
            return {
                "mean": 0.0, "std_dev": 0.0, "count": 0,
                "confidence_interval_95": (0.0, 0.0)
            }

        mean = sum(data) / n

        if n > 1:
            variance = sum((x - mean) ** 2 for x in data) / (n - 1)
            std_dev = math.sqrt(variance)
        else:
            std_dev = 0.0 # Cannot calculate variance with one sample

        z_score = 1.96  # For 95% confidence
        if confidence != 0.95:
            log.warning(f"CI calculation for confidence {confidence} "
                        "not implemented, defaulting to 95% (Z=1.96).")

        margin_of_error = z_score * (std_dev / math.sqrt(n))

        return {
            "mean": mean,
            "std_dev": std_dev,
            "count": n,
            "confidence_interval_95": (mean - margin_of_error,
                                       mean + margin_of_error)
        }

    @staticmethod
    def _median(data: List[int]) -> float:
        """Median of the observations; 0.0 for no data."""
        n = len(data)
        if n == 0:
            return 0.0
        ordered = sorted(data)
        mid = n // 2
        if n % 2:
            return float(ordered[mid])
        return (ordered[mid - 1] + ordered[mid]) / 2

    def get_final_kpis(self) -> Dict[str, Any]:
        """
        Calculates and returns the final dictionary of all KPIs.

        This method should be called *after* the simulation is complete.

        Returns:
            Dict[str, Any]: A nested dictionary containing all KPIs.
        """
        steps = len(self.queue_lengths)
        if steps == 0:
            log.warning("No steps recorded. Queue length KPIs will be zero.")

        log.info(f"Calculating final KPIs over {steps} steps")

        length_stats = self._calculate_statistical_summary(self.queue_lengths)
        length_stats["median"] = self._median(self.queue_lengths)
        length_stats["max"] = max(self.queue_lengths) if steps else 0
        zero_steps = sum(1 for length in self.queue_lengths if length == 0)
        length_stats["percent_zero"] = (100.0 * zero_steps / steps) \
            if steps > 0 else 0.0

        departure_requests = self.total_departures + self.total_idle_departures
        prob_idle = (self.total_idle_departures / departure_requests) \
            if departure_requests > 0 else 0.0

        prob_eviction = (self.total_evictions / self.total_arrivals) \
            if self.total_arrivals > 0 else 0.0

        # Assemble Final Report
        return {
            "simulation_summary": {
                "steps": steps,
                "last_step": self.last_step,
                "capacity": self.capacity
            },
            "arrivals_and_departures": {
                "total_arrivals": self.total_arrivals,
                "total_departures": self.total_departures,
                "total_idle_departures": self.total_idle_departures,
                "total_evictions": self.total_evictions,
                "total_overflows": self.total_overflows,
                "probability_of_idle_departure": prob_idle,
                "probability_of_eviction": prob_eviction
            },
            "queue_length": length_stats
        }
