# tests/test_simulator.py

"""
Unit tests for the discrete-time driver, its event sources and the
occupancy renderer.

Runs are driven by deterministic sources (SequenceEventSource,
PeriodicEventSource) so every queue length can be checked by hand.
"""

import pytest

from mm1_fifo import (
    AdmissionController,
    BernoulliEventSource,
    BoundedFifoQueue,
    FifoSimulator,
    PeriodicEventSource,
    SequenceEventSource,
    render_occupancy,
    render_queue
)


def make_simulator(arrivals, departures, capacity=5, **kwargs):
    """Builds a simulator replaying the given events."""
    return FifoSimulator(
        queue=BoundedFifoQueue(capacity),
        source=SequenceEventSource(arrivals, departures),
        **kwargs
    )


# Rendering

def test_render_occupancy():
    assert render_occupancy([True, False, True]) == " * * 2"
    assert render_occupancy([False, False], length=0) == "    0"


def test_render_queue():
    q = BoundedFifoQueue(capacity=3)
    assert render_queue(q) == "     0"

    q.enqueue("ab")
    q.enqueue("cd")
    q.dequeue()
    assert render_queue(q) == "  *  1"


# Event sources

def test_sequence_source_exhaustion():
    """Exhausted sequences yield no further events."""
    source = SequenceEventSource([True], [False, True])

    assert len(source) == 2
    assert source.next_events() == (True, False)
    assert source.next_events() == (False, True)
    assert source.next_events() == (False, False)


def test_periodic_source():
    """Arrival every step, departure every second step."""
    source = PeriodicEventSource(arrival_period=1, departure_period=2)

    events = [source.next_events() for _ in range(4)]

    assert events == [(True, False), (True, True),
                      (True, False), (True, True)]


def test_periodic_source_invalid_period():
    with pytest.raises(ValueError):
        PeriodicEventSource(arrival_period=0)


def test_bernoulli_source_is_reproducible():
    """Two sources with the same seed produce the same events."""
    a = BernoulliEventSource(0.25, 0.30, seed=42)
    b = BernoulliEventSource(0.25, 0.30, seed=42)

    assert [a.next_events() for _ in range(50)] == \
        [b.next_events() for _ in range(50)]


def test_bernoulli_source_extremes():
    """Probability 1 always fires, probability 0 never does."""
    source = BernoulliEventSource(1.0, 0.0, seed=1)

    assert all(source.next_events() == (True, False) for _ in range(100))


@pytest.mark.parametrize("arrival_prob, departure_prob",
                         [(-0.1, 0.5), (0.5, 1.5)])
def test_bernoulli_source_invalid_probability(arrival_prob, departure_prob):
    with pytest.raises(ValueError):
        BernoulliEventSource(arrival_prob, departure_prob)


# Simulator

def test_deterministic_run():
    """
    Three arrivals, then three departures overlapping by one step.
    Lengths after each step: 1, 2, 2, 1, 0.
    """
    sim = make_simulator(arrivals=[True, True, True, False, False],
                         departures=[False, False, True, True, True])

    result = sim.run(max_steps=5)

    assert result.steps_run == 5
    assert result.overflowed is False
    assert result.queue_lengths == [1, 2, 2, 1, 0]

    kpis = result.get_final_kpis()
    assert kpis["arrivals_and_departures"]["total_arrivals"] == 3
    assert kpis["arrivals_and_departures"]["total_departures"] == 3
    assert kpis["arrivals_and_departures"]["total_idle_departures"] == 0
    assert kpis["simulation_summary"]["overflowed"] is False


def test_departure_on_empty_queue_is_idle():
    sim = make_simulator(arrivals=[False], departures=[True])

    result = sim.run(max_steps=1)

    assert result.queue_lengths == [0]
    assert result.measure.total_idle_departures == 1
    assert result.measure.total_departures == 0


def test_arrival_is_enqueued_before_departure():
    """An arrival and a departure in the same step cancel out."""
    sim = make_simulator(arrivals=[True], departures=[True])

    result = sim.run(max_steps=1)

    assert result.queue_lengths == [0]
    assert result.measure.total_departures == 1


def test_run_stops_on_overflow():
    """A 5-slot queue filled every step overflows on step 5."""
    sim = FifoSimulator(queue=BoundedFifoQueue(5),
                        source=PeriodicEventSource(arrival_period=1))

    result = sim.run(max_steps=100)

    assert result.overflowed is True
    assert result.steps_run == 5
    assert result.queue_lengths == [1, 2, 3, 4, 5]
    assert result.measure.total_overflows == 1


def test_run_continues_past_overflow_when_asked():
    """
    With stop_on_overflow=False the run goes on; the full queue keeps
    reporting overflow and its length stays at the capacity.
    """
    sim = FifoSimulator(queue=BoundedFifoQueue(3),
                        source=PeriodicEventSource(arrival_period=1),
                        stop_on_overflow=False)

    result = sim.run(max_steps=5)

    assert result.steps_run == 5
    assert result.queue_lengths == [1, 2, 3, 3, 3]
    assert result.measure.total_overflows == 3


def test_control_truncates_every_interval():
    """
    Ten arrivals without departures, truncated to 2 on step 10.
    """
    sim = FifoSimulator(queue=BoundedFifoQueue(20),
                        source=PeriodicEventSource(arrival_period=1),
                        controller=AdmissionController(limit=2),
                        control_interval=10)

    result = sim.run(max_steps=15)

    assert result.queue_lengths[:9] == list(range(1, 10))
    assert result.queue_lengths[9] == 2
    assert result.queue_lengths[14] == 7
    assert result.measure.total_evictions == 8
    assert result.measure.eviction_log == [(10, 8)]


def test_invalid_control_interval():
    with pytest.raises(ValueError):
        make_simulator([], [], control_interval=0)


def test_renderer_receives_one_line_per_step():
    lines = []
    sim = make_simulator(arrivals=[True, True], departures=[False, True],
                         capacity=4, renderer=lines.append)

    sim.run(max_steps=2)

    # Step 2 enqueues into slot 1 and dequeues slot 0
    assert lines == [" *    1", "  *   1"]


def test_custom_token_is_enqueued():
    q = BoundedFifoQueue(4)
    sim = FifoSimulator(queue=q,
                        source=SequenceEventSource([True], [False]),
                        token="xy")

    sim.step()

    assert q.snapshot() == ["xy"]
