# src/mm1_fifo/sources.py

"""
Event sources for the discrete-time driver.

An event source decides, for every time step, whether an arrival
happened and whether a departure was requested. The bounded queue never
generates randomness itself; it is driven by one of these sources:

- `BernoulliEventSource`: two independent biased coin flips per step,
  the discrete approximation of Poisson arrivals (Bernoulli process)
  and exponential service (geometric service times). Randomness comes
  from an injected `numpy.random.Generator`, so runs are repeatable.
- `SequenceEventSource`: replays pre-decided events, for fully
  deterministic runs and tests.
"""

import abc
import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

# Set up the module-level logger
log = logging.getLogger(__name__)


def validate_probability(name: str, value: float) -> float:
    """Checks that `value` lies in [0, 1] and returns it as a float."""
    if not 0.0 <= value <= 1.0:
        log.error(f"Invalid {name}={value!r}; must be within [0, 1].")
        raise ValueError(f"{name} must be within [0, 1], got {value!r}.")
    return float(value)


class EventSource(abc.ABC):
    """
    Produces one (arrival, departure_requested) pair per step.
    """

    @abc.abstractmethod
    def next_events(self) -> Tuple[bool, bool]:
        """
        Returns the events of the next step.

        Returns:
            Tuple[bool, bool]: (arrival happened, departure requested).
        """
        raise NotImplementedError


class BernoulliEventSource(EventSource):
    """
    Independent Bernoulli trials for arrivals and departures.

    The arrival coin is flipped before the departure coin on every
    step, so a seeded generator always yields the same run.
    """

    def __init__(self, arrival_prob: float, departure_prob: float,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        """
        Initializes the source.

        Args:
            arrival_prob (float): Probability of an arrival per step.
            departure_prob (float): Probability of a departure request
                                    per step.
            rng (Optional[np.random.Generator]): The random generator to
                draw from. Takes precedence over `seed`.
            seed (Optional[int]): Seed for a new generator when no `rng`
                is passed.
        """
        self.arrival_prob = validate_probability("arrival_prob", arrival_prob)
        self.departure_prob = validate_probability("departure_prob",
                                                   departure_prob)
        self.rng: np.random.Generator = rng if rng is not None \
            else np.random.default_rng(seed)

        log.info(f"BernoulliEventSource initialized: "
                 f"ArrivalProb={self.arrival_prob}, "
                 f"DepartureProb={self.departure_prob}")

    def next_events(self) -> Tuple[bool, bool]:
        arrival = bool(self.rng.random() < self.arrival_prob)
        departure = bool(self.rng.random() < self.departure_prob)
        return arrival, departure


class PeriodicEventSource(EventSource):
    """
    Deterministic arrivals and departures at fixed step periods.

    An event with period k fires on steps k, 2k, 3k, ... (steps count
    from 1). A period of None disables that event.
    """

    def __init__(self, arrival_period: Optional[int] = 1,
                 departure_period: Optional[int] = None):
        for name, period in (("arrival_period", arrival_period),
                             ("departure_period", departure_period)):
            if period is not None and period <= 0:
                raise ValueError(f"{name} must be positive, got {period!r}.")
        self.arrival_period = arrival_period
        self.departure_period = departure_period
        self.step: int = 0

    def next_events(self) -> Tuple[bool, bool]:
        self.step += 1
        arrival = self.arrival_period is not None \
            and self.step % self.arrival_period == 0
        departure = self.departure_period is not None \
            and self.step % self.departure_period == 0
        return arrival, departure


class SequenceEventSource(EventSource):
    """
    Replays caller-supplied arrival and departure flags.

    The two sequences are consumed in lockstep. Once a sequence is
    exhausted it yields False for the remaining steps.
    """

    def __init__(self, arrivals: Iterable[bool], departures: Iterable[bool]):
        self.arrivals: List[bool] = [bool(a) for a in arrivals]
        self.departures: List[bool] = [bool(d) for d in departures]
        self.position: int = 0

    def __len__(self) -> int:
        return max(len(self.arrivals), len(self.departures))

    def next_events(self) -> Tuple[bool, bool]:
        i = self.position
        self.position += 1
        arrival = self.arrivals[i] if i < len(self.arrivals) else False
        departure = self.departures[i] if i < len(self.departures) else False
        return arrival, departure
