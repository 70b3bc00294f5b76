# src/mm1_fifo/__main__.py

"""
Command line entry point: `python -m mm1_fifo`.

Runs one simulation (a built-in scenario or custom parameters), prints
the occupancy line of every step, `OVERFLOW!` if the run overflowed,
and a short KPI summary.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SCENARIOS, SimulationConfig, get_scenario
from .constants import (
    DEFAULT_ARRIVAL_PROB,
    DEFAULT_CAPACITY,
    DEFAULT_CONTROL_INTERVAL,
    DEFAULT_DEPARTURE_PROB,
    DEFAULT_LIMIT,
    DEFAULT_SEED,
    DEFAULT_STEPS,
)
from .length_process import idle_departure_probability

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mm1_fifo",
        description="Discrete-time M/M/1 simulation on a bounded FIFO queue.")
    parser.add_argument("--scenario", type=int, choices=sorted(SCENARIOS),
                        help="Run a built-in scenario; other run "
                             "parameters are ignored.")
    parser.add_argument("--list", action="store_true",
                        help="List the built-in scenarios and exit.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    parser.add_argument("--arrival-prob", type=float,
                        default=DEFAULT_ARRIVAL_PROB)
    parser.add_argument("--departure-prob", type=float,
                        default=DEFAULT_DEPARTURE_PROB)
    parser.add_argument("--control", action="store_true",
                        help="Truncate the queue every --interval steps.")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    parser.add_argument("--interval", type=int,
                        default=DEFAULT_CONTROL_INTERVAL)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the per-step occupancy.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    if args.scenario is not None:
        return get_scenario(args.scenario)
    return SimulationConfig(
        capacity=args.capacity,
        steps=args.steps,
        arrival_prob=args.arrival_prob,
        departure_prob=args.departure_prob,
        control=args.control,
        limit=args.limit,
        control_interval=args.interval,
        seed=args.seed
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        for number, scenario in sorted(SCENARIOS.items()):
            print(f"{number:>2}  {scenario.describe()}")
        return 0

    try:
        config = config_from_args(args)
        result = config.run(renderer=None if args.quiet else print)
    except ValueError as e:
        log.error(str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

    if result.overflowed:
        print("OVERFLOW!")

    kpis = result.get_final_kpis()
    length = kpis["queue_length"]
    flow = kpis["arrivals_and_departures"]
    print(config.describe())
    if not config.deterministic:
        print(f"probability of unused departure events when queue is "
              f"empty: {idle_departure_probability(config.arrival_prob, config.departure_prob):.2f}")
    print(f"steps: {result.steps_run} "
          f"queue length zero (%): {length['percent_zero']:.1f} "
          f"median: {length['median']:g} "
          f"mean: {length['mean']:.1f} "
          f"max: {length['max']}")
    print(f"arrivals: {flow['total_arrivals']} "
          f"departures: {flow['total_departures']} "
          f"evictions: {flow['total_evictions']} "
          f"overflows: {flow['total_overflows']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
