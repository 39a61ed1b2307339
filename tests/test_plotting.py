import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from colebrook import MoodyChart
from colebrook.utils.plotting import (
    plot_friction_vs_reynolds,
    plot_friction_vs_roughness,
    plot_friction_surface,
    plot_moody_chart,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_friction_vs_reynolds(tmp_path):
    path = tmp_path / "re.png"
    fig, ax = plot_friction_vs_reynolds(np.arange(5000, 100001, 5000), 1e-4, save_path=str(path), show=False)
    assert path.exists()
    assert len(ax.get_lines()) == 1


def test_friction_vs_roughness():
    fig, ax = plot_friction_vs_roughness(1e5, np.linspace(1e-4, 1e-1, 20), show=False)
    x, y = ax.get_lines()[0].get_data()
    assert len(x) == 20
    assert np.all(np.diff(y) > 0)


def test_friction_surface():
    fig, ax = plot_friction_surface(np.logspace(4, 8, 8), np.linspace(1e-4, 1e-1, 6), show=False)
    assert ax.name == "3d"


def test_moody_chart_generates_if_needed():
    chart = MoodyChart(Re_range=np.logspace(3, 6, 10), epsilon_range=[0.0, 1e-3, 1e-2])
    fig, ax = plot_moody_chart(chart, show=False)
    assert chart.results_df is not None
    assert len(ax.get_lines()) == 3
