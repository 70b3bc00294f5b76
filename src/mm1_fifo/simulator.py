# src/mm1_fifo/simulator.py

"""
Implements the discrete-time driver around a bounded FIFO queue.

One loop iteration is one time step:

1. If the event source reports an arrival, a token is enqueued.
2. If it reports a departure request, the head element is dequeued
   (a request on an empty queue is an idle departure, not an error).
3. Every `control_interval` steps, the admission controller (if any)
   truncates the queue.
4. The resulting queue length is recorded and optionally rendered.

A run ends after `max_steps` steps, or after the first step in which
an enqueue reported overflow when `stop_on_overflow` is set.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

# Local package imports
from .admission import AdmissionController
from .base_queue import BaseQueue
from .constants import EnqueueResult, DEFAULT_CONTROL_INTERVAL, DEFAULT_TOKEN
from .measure import Measure
from .render import render_queue
from .sources import EventSource

# Set up the module-level logger
log = logging.getLogger(__name__)


class SimulationResult:
    """
    The outcome of `FifoSimulator.run()`.

    Attributes:
        steps_run (int): The number of steps executed.
        overflowed (bool): Whether the run hit an overflow.
        measure (Measure): The tracker holding all recorded data.
    """

    def __init__(self, steps_run: int, overflowed: bool, measure: Measure):
        self.steps_run = steps_run
        self.overflowed = overflowed
        self.measure = measure

    @property
    def queue_lengths(self) -> List[int]:
        return self.measure.queue_lengths

    def get_final_kpis(self) -> Dict[str, Any]:
        kpis = self.measure.get_final_kpis()
        kpis["simulation_summary"]["overflowed"] = self.overflowed
        return kpis

    def __repr__(self) -> str:
        return (f"SimulationResult(steps_run={self.steps_run}, "
                f"overflowed={self.overflowed})")


class FifoSimulator:
    """
    Drives a bounded queue with events from an `EventSource`.
    """

    def __init__(self, queue: BaseQueue, source: EventSource,
                 controller: Optional[AdmissionController] = None,
                 control_interval: int = DEFAULT_CONTROL_INTERVAL,
                 token: Any = DEFAULT_TOKEN,
                 stop_on_overflow: bool = True,
                 renderer: Optional[Callable[[str], None]] = None):
        """
        Initializes the simulator.

        Args:
            queue (BaseQueue): The queue to drive. Owned by this
                simulator for the duration of the run.
            source (EventSource): Supplies the events of each step.
            controller (Optional[AdmissionController]): Truncation
                policy. No truncation happens if None.
            control_interval (int): Truncate every this many steps.
            token (Any): The element enqueued on every arrival.
            stop_on_overflow (bool): End the run after the step in
                which an overflow occurred.
            renderer (Optional[Callable[[str], None]]): Receives the
                rendered occupancy line after every step (e.g. `print`).
        """
        if control_interval <= 0:
            raise ValueError(f"control_interval must be positive, "
                             f"got {control_interval!r}.")

        self.queue = queue
        self.source = source
        self.controller = controller
        self.control_interval = control_interval
        self.token = token
        self.stop_on_overflow = stop_on_overflow
        self.renderer = renderer

        self.measure: Measure = Measure(queue.capacity)
        self.current_step: int = 0
        self.overflowed: bool = False

        log.info(f"FifoSimulator initialized: Capacity={queue.capacity}, "
                 f"Control={'on' if controller else 'off'}, "
                 f"Interval={control_interval}")

    def step(self) -> bool:
        """
        Runs a single time step.

        Returns:
            bool: True if an enqueue reported overflow in this step.
        """
        self.current_step += 1
        step = self.current_step
        arrival, departure = self.source.next_events()
        overflow = False

        if arrival:
            status = self.queue.enqueue(self.token)
            self.measure.log_arrival(step)
            if status is EnqueueResult.OVERFLOW:
                overflow = True
                self.overflowed = True
                self.measure.log_overflow(step)

        if departure:
            if self.queue.dequeue() is None:
                self.measure.log_idle_departure(step)
            else:
                self.measure.log_departure(step)

        if self.controller is not None and step % self.control_interval == 0:
            evicted = self.controller.enforce(self.queue)
            self.measure.log_eviction(step, evicted)

        self.measure.log_step(step, len(self.queue))

        if self.renderer is not None:
            self.renderer(render_queue(self.queue))

        return overflow

    def run(self, max_steps: int) -> SimulationResult:
        """
        Runs steps until `max_steps` is reached or an overflow stops
        the run.
        """
        log.info(f"Starting run of up to {max_steps} steps.")
        steps_run = 0
        while steps_run < max_steps:
            overflow = self.step()
            steps_run += 1
            if overflow and self.stop_on_overflow:
                log.warning(f"Overflow at step {self.current_step}. "
                            f"Stopping run.")
                break

        log.info(f"Run finished after {steps_run} steps "
                 f"(overflowed={self.overflowed}).")
        return SimulationResult(steps_run, self.overflowed, self.measure)
