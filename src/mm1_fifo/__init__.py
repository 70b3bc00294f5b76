# src/mm1_fifo/__init__.py

"""
Initializes the 'mm1_fifo' package.

This file sets up the package-level logger and "lifts" the
most important classes and enums to the top-level namespace.
This allows users to import core components directly, e.g.:

from mm1_fifo import BoundedFifoQueue, AdmissionController, EnqueueResult
"""

import logging

# Setup Package-Level Logger
# A NullHandler keeps the library silent unless the *user*
# of the library configures their own logging setup.
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# Lift constants
from .constants import EnqueueResult, QueuePhase

# Lift the core queue and policy
from .base_queue import BaseQueue
from .models import BoundedFifoQueue
from .admission import AdmissionController

# Lift the simulation harness
from .measure import Measure
from .render import render_occupancy, render_queue
from .sources import (
    EventSource,
    BernoulliEventSource,
    PeriodicEventSource,
    SequenceEventSource
)
from .simulator import FifoSimulator, SimulationResult
from .length_process import generate_length_series, summarize_series
from .config import SimulationConfig, SCENARIOS, get_scenario


__all__ = [
    # Constants
    "EnqueueResult",
    "QueuePhase",

    # Core Classes
    "BaseQueue",
    "BoundedFifoQueue",
    "AdmissionController",

    # Harness
    "Measure",
    "render_occupancy",
    "render_queue",
    "EventSource",
    "BernoulliEventSource",
    "PeriodicEventSource",
    "SequenceEventSource",
    "FifoSimulator",
    "SimulationResult",
    "generate_length_series",
    "summarize_series",
    "SimulationConfig",
    "SCENARIOS",
    "get_scenario"
]
