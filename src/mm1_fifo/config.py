# src/mm1_fifo/config.py

"""
Simulation parameter sets and the built-in example scenarios.

A `SimulationConfig` validates one complete parameter set and knows how
to assemble the queue, event source, admission controller and simulator
for it. `SCENARIOS` holds the ten reference runs:

- 1, 2: deterministic filling of a 20-slot queue (no departures, then
  a departure every second step) until overflow.
- 3-6: random arrivals/departures at various loads, without control.
- 7, 8: the loads of 5 and 6, truncated to 2 elements every 10 steps.
- 9, 10: the reference M/M/1 load (0.25 / 0.30) over 10000 steps,
  without and with control.
"""

import logging
from typing import Any, Callable, Dict, Optional

import numpy as np

# Local package imports
from .admission import AdmissionController
from .constants import (
    DEFAULT_ARRIVAL_PROB,
    DEFAULT_CAPACITY,
    DEFAULT_CONTROL_INTERVAL,
    DEFAULT_DEPARTURE_PROB,
    DEFAULT_LIMIT,
    DEFAULT_SEED,
    DEFAULT_STEPS,
    DEFAULT_TOKEN,
)
from .models import BoundedFifoQueue
from .simulator import FifoSimulator, SimulationResult
from .sources import (
    BernoulliEventSource,
    EventSource,
    PeriodicEventSource,
    validate_probability,
)

# Set up the module-level logger
log = logging.getLogger(__name__)


class SimulationConfig:
    """
    A validated set of simulation parameters.

    If `arrival_period` or `departure_period` is set, events are
    deterministic (`PeriodicEventSource`) and the probabilities are
    ignored; otherwise they come from a seeded `BernoulliEventSource`.
    """

    def __init__(self, name: str = "custom",
                 capacity: int = DEFAULT_CAPACITY,
                 steps: int = DEFAULT_STEPS,
                 arrival_prob: float = DEFAULT_ARRIVAL_PROB,
                 departure_prob: float = DEFAULT_DEPARTURE_PROB,
                 control: bool = False,
                 limit: int = DEFAULT_LIMIT,
                 control_interval: int = DEFAULT_CONTROL_INTERVAL,
                 seed: Optional[int] = DEFAULT_SEED,
                 token: Any = DEFAULT_TOKEN,
                 stop_on_overflow: bool = True,
                 arrival_period: Optional[int] = None,
                 departure_period: Optional[int] = None):
        if steps < 0:
            raise ValueError(f"steps cannot be negative, got {steps}.")
        if control_interval <= 0:
            raise ValueError(f"control_interval must be positive, "
                             f"got {control_interval!r}.")
        if limit < 0:
            raise ValueError(f"limit cannot be negative, got {limit!r}.")

        self.name = name
        self.capacity = capacity
        self.steps = steps
        self.arrival_prob = validate_probability("arrival_prob", arrival_prob)
        self.departure_prob = validate_probability("departure_prob",
                                                   departure_prob)
        self.control = control
        self.limit = limit
        self.control_interval = control_interval
        self.seed = seed
        self.token = token
        self.stop_on_overflow = stop_on_overflow
        self.arrival_period = arrival_period
        self.departure_period = departure_period

    @property
    def deterministic(self) -> bool:
        return self.arrival_period is not None \
            or self.departure_period is not None

    def build_queue(self) -> BoundedFifoQueue:
        return BoundedFifoQueue(self.capacity)

    def build_source(self, rng: Optional[np.random.Generator] = None
                     ) -> EventSource:
        if self.deterministic:
            return PeriodicEventSource(self.arrival_period,
                                       self.departure_period)
        return BernoulliEventSource(self.arrival_prob, self.departure_prob,
                                    rng=rng, seed=self.seed)

    def build_controller(self) -> Optional[AdmissionController]:
        return AdmissionController(self.limit) if self.control else None

    def build_simulator(self, renderer: Optional[Callable[[str], None]] = None,
                        rng: Optional[np.random.Generator] = None
                        ) -> FifoSimulator:
        return FifoSimulator(
            queue=self.build_queue(),
            source=self.build_source(rng),
            controller=self.build_controller(),
            control_interval=self.control_interval,
            token=self.token,
            stop_on_overflow=self.stop_on_overflow,
            renderer=renderer
        )

    def run(self, renderer: Optional[Callable[[str], None]] = None
            ) -> SimulationResult:
        """Builds a fresh simulator and runs it for `steps` steps."""
        log.info(f"Running scenario '{self.name}'")
        return self.build_simulator(renderer).run(self.steps)

    def describe(self) -> str:
        if self.deterministic:
            events = (f"arrival every {self.arrival_period} step(s), "
                      f"departure every {self.departure_period} step(s)")
        else:
            events = (f"arrival probability {self.arrival_prob}, "
                      f"departure probability {self.departure_prob}")
        control = (f"truncate to {self.limit} every "
                   f"{self.control_interval} steps") if self.control \
            else "without control"
        return (f"{self.name}: {events}, {control}, "
                f"{self.steps} steps, capacity {self.capacity}")

    def __repr__(self) -> str:
        return f"SimulationConfig({self.describe()})"


def _random_scenario(name: str, arrival_prob: float, departure_prob: float,
                     steps: int, control: bool) -> SimulationConfig:
    return SimulationConfig(name=name, steps=steps,
                            arrival_prob=arrival_prob,
                            departure_prob=departure_prob,
                            control=control)


SCENARIOS: Dict[int, SimulationConfig] = {
    1: SimulationConfig(name="fill", steps=100,
                        arrival_period=1, departure_period=None),
    2: SimulationConfig(name="fill-half-drain", steps=100,
                        arrival_period=1, departure_period=2),
    3: _random_scenario("balanced", 0.5, 0.5, 1000, control=False),
    4: _random_scenario("light", 0.2, 0.4, 1000, control=False),
    5: _random_scenario("overloaded", 0.4, 0.2, 1000, control=False),
    6: _random_scenario("near-critical", 0.49, 0.52, 1000, control=False),
    7: _random_scenario("overloaded-control", 0.4, 0.2, 1000, control=True),
    8: _random_scenario("near-critical-control", 0.49, 0.52, 1000,
                        control=True),
    9: _random_scenario("mm1", DEFAULT_ARRIVAL_PROB, DEFAULT_DEPARTURE_PROB,
                        DEFAULT_STEPS, control=False),
    10: _random_scenario("mm1-control", DEFAULT_ARRIVAL_PROB,
                         DEFAULT_DEPARTURE_PROB, DEFAULT_STEPS, control=True),
}


def get_scenario(number: int) -> SimulationConfig:
    """Returns the built-in scenario `number` (1-10)."""
    try:
        return SCENARIOS[number]
    except KeyError:
        log.error(f"Unknown scenario {number}.")
        raise ValueError(f"Unknown scenario {number}; "
                         f"choose one of {sorted(SCENARIOS)}.") from None
