# tests/test_plotting.py

"""
Smoke tests for the optional plotting helpers.

Skipped unless the [analysis] extra (matplotlib, seaborn) is installed.
"""

import pytest

matplotlib = pytest.importorskip("matplotlib")
pytest.importorskip("seaborn")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from mm1_fifo import SimulationConfig  # noqa: E402
from mm1_fifo.analysis import plotting  # noqa: E402
from mm1_fifo.analysis.replication import run_replications  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def result():
    return SimulationConfig(steps=200, control=True).run()


def test_plot_queue_length_over_time(result):
    ax = plotting.plot_queue_length_over_time(result)

    assert ax.get_title() == "Queue Length Over Time"
    assert ax.get_xlabel() == "Time Step"


def test_plot_queue_length_histogram(result):
    ax = plotting.plot_queue_length_histogram(result.measure)

    assert ax.get_title() == "Distribution of Queue Length"


def test_plot_empty_data():
    ax = plotting.plot_queue_length_over_time([])

    assert ax.get_title().endswith("(No Data)")


def test_plot_replication_statistics():
    df = run_replications(n=5, steps=100)

    axes = plotting.plot_replication_statistics(df, title="control = False")

    assert len(axes) == 4
    assert axes[0].get_title().startswith("control = False: distribution of")
