# tests/test_length_process.py

"""
Unit tests for the counter-only queue-length process and the
replication table built on it.
"""

import math

import numpy as np
import pandas as pd
import pytest
from pytest import approx

from mm1_fifo import generate_length_series, summarize_series
from mm1_fifo.analysis.replication import run_replications
from mm1_fifo.length_process import idle_departure_probability


def test_no_arrivals_means_empty_queue():
    """Departures are impossible on an empty queue."""
    series = generate_length_series(50, arrival_prob=0.0, departure_prob=1.0,
                                    rng=np.random.default_rng(0))

    assert series.shape == (50,)
    assert np.all(series == 0)


def test_arrivals_only_grow_by_one_per_step():
    series = generate_length_series(10, arrival_prob=1.0, departure_prob=0.0,
                                    rng=np.random.default_rng(0))

    assert series.tolist() == list(range(1, 11))


def test_control_truncates_every_interval():
    """
    With an arrival every step and no departures, the length is cut to
    2 on steps 10 and 20 and grows by one in between.
    """
    series = generate_length_series(25, arrival_prob=1.0, departure_prob=0.0,
                                    rng=np.random.default_rng(0),
                                    control=True, limit=2)

    assert series[8] == 9
    assert series[9] == 2
    assert series[18] == 11
    assert series[19] == 2
    assert series[24] == 7


def test_control_without_limit_changes_nothing():
    """The default limit is infinite, so control alone never truncates."""
    series = generate_length_series(25, arrival_prob=1.0, departure_prob=0.0,
                                    rng=np.random.default_rng(0),
                                    control=True, limit=math.inf)

    assert series.tolist() == list(range(1, 26))


def test_length_never_negative():
    series = generate_length_series(2000, arrival_prob=0.1,
                                    departure_prob=0.9,
                                    rng=np.random.default_rng(7))

    assert series.min() >= 0
    # Consecutive steps differ by at most one
    assert np.all(np.abs(np.diff(series)) <= 1)


def test_seeded_series_are_reproducible():
    a = generate_length_series(500, 0.25, 0.30, rng=np.random.default_rng(1234))
    b = generate_length_series(500, 0.25, 0.30, rng=np.random.default_rng(1234))

    assert np.array_equal(a, b)


@pytest.mark.parametrize("kwargs", [
    {"steps": -1},
    {"arrival_prob": 1.5},
    {"departure_prob": -0.2},
    {"control_interval": 0},
    {"limit": -1},
    {"limit": 2.5},
    {"limit": True},
])
def test_invalid_arguments(kwargs):
    params = {"steps": 10, "arrival_prob": 0.5, "departure_prob": 0.5}
    params.update(kwargs)

    with pytest.raises(ValueError):
        generate_length_series(**params)


def test_summarize_series():
    stats = summarize_series([0, 0, 1, 2, 3])

    assert stats["queue_zero"] == approx(40.0)
    assert stats["median"] == approx(1.0)
    assert stats["mean"] == approx(1.2)
    assert stats["max"] == 3


def test_summarize_empty_series():
    assert summarize_series([]) == {
        "queue_zero": 0.0, "median": 0.0, "mean": 0.0, "max": 0
    }


def test_idle_departure_probability():
    """(1 - 0.25) * 0.30 for the reference load."""
    assert idle_departure_probability(0.25, 0.30) == approx(0.225)


# Replications

def test_run_replications_shape():
    df = run_replications(n=5, steps=200, seed=1234)

    assert isinstance(df, pd.DataFrame)
    assert df.shape == (5, 4)
    assert list(df.columns) == ["queue_zero", "median", "mean", "max"]
    assert (df["queue_zero"] >= 0).all() and (df["queue_zero"] <= 100).all()


def test_run_replications_reproducible():
    a = run_replications(n=3, steps=300, seed=99)
    b = run_replications(n=3, steps=300, seed=99)

    pd.testing.assert_frame_equal(a, b)


def test_run_replications_with_control():
    """
    Deterministic load: every replication is identical and the maximum
    is reached right before a truncation (2 + 9 arrivals).
    """
    df = run_replications(n=4, steps=25, arrival_prob=1.0,
                          departure_prob=0.0, control=True, limit=2)

    assert (df["max"] == 11).all()
    assert (df["queue_zero"] == 0.0).all()


def test_run_replications_invalid_count():
    with pytest.raises(ValueError):
        run_replications(n=0)


def test_numpy_integer_limit():
    series = generate_length_series(10, arrival_prob=1.0, departure_prob=0.0,
                                    control=True, limit=np.int64(3))

    assert series[9] == 3
