"""
Plotting utilities for friction factor curves and Moody charts
"""

import logging
from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from ..core.solver import FrictionFactorSolver

logger = logging.getLogger(__name__)


def _finish(fig, save_path: Optional[str], show: bool):
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        logger.info(f"Saved figure to {save_path}")

    if show:
        plt.show()


def plot_friction_vs_reynolds(
    Re,
    epsilon: float,
    solver: Optional[FrictionFactorSolver] = None,
    figsize: Tuple[int, int] = (8, 5),
    save_path: Optional[str] = None,
    show: bool = True,
):
    """
    Friction factor against Reynolds number at fixed roughness

    Parameters
    ----------
    Re : array_like
        Reynolds numbers (1-D)
    epsilon : float
        Relative roughness
    solver : FrictionFactorSolver, optional
        Solver to use, default ``FrictionFactorSolver()``
    """
    solver = solver or FrictionFactorSolver()
    Re = np.asarray(Re, dtype=float).ravel()
    f = solver.solve(Re, epsilon)

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(Re, f, label=f'ε/D = {epsilon:g}')
    ax.set_xscale('log')
    ax.set_xlabel('Reynolds Number Re')
    ax.set_ylabel('Friction Factor f')
    ax.set_title('Friction Factor vs Reynolds Number')
    ax.grid(True, which='both', alpha=0.3)
    ax.legend()

    _finish(fig, save_path, show)
    return fig, ax


def plot_friction_vs_roughness(
    Re: float,
    epsilon,
    solver: Optional[FrictionFactorSolver] = None,
    figsize: Tuple[int, int] = (8, 5),
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Friction factor against relative roughness at fixed Reynolds number"""
    solver = solver or FrictionFactorSolver()
    epsilon = np.asarray(epsilon, dtype=float).ravel()
    f = solver.solve(Re, epsilon)

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(epsilon, f, label=f'Re = {Re:g}')
    ax.set_xlabel('Relative Roughness ε/D')
    ax.set_ylabel('Friction Factor f')
    ax.set_title('Friction Factor vs Relative Roughness')
    ax.grid(True, alpha=0.3)
    ax.legend()

    _finish(fig, save_path, show)
    return fig, ax


def plot_friction_surface(
    Re,
    epsilon,
    solver: Optional[FrictionFactorSolver] = None,
    figsize: Tuple[int, int] = (9, 7),
    save_path: Optional[str] = None,
    show: bool = True,
):
    """
    3-D friction factor surface over a (Re, epsilon) meshgrid

    Re is plotted on a log10 axis.
    """
    solver = solver or FrictionFactorSolver()
    RE, EPSILON = np.meshgrid(
        np.asarray(Re, dtype=float).ravel(), np.asarray(epsilon, dtype=float).ravel()
    )
    F = solver.solve(RE, EPSILON)

    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(projection='3d')
    ax.plot_surface(np.log10(RE), EPSILON, F, cmap='viridis', alpha=0.9)
    ax.set_xlabel('log10(Re)')
    ax.set_ylabel('Relative Roughness ε/D')
    ax.set_zlabel('Friction Factor f')
    ax.set_title('Colebrook-White Friction Factor')

    _finish(fig, save_path, show)
    return fig, ax


def plot_moody_chart(
    chart,
    figsize: Tuple[int, int] = (12, 8),
    save_path: Optional[str] = None,
    show: bool = True,
):
    """
    Plot a Moody chart

    Parameters
    ----------
    chart : MoodyChart
        Chart with results (``generate`` is called if it has none)
    """
    if chart.results_df is None:
        chart.generate()

    fig, ax = plt.subplots(figsize=figsize)
    for eps, curve in chart.get_curves().items():
        curve = curve[curve['valid']]
        if len(curve) == 0:
            continue
        ax.plot(curve['Re'], curve['f'], linewidth=1.0)
        ax.annotate(
            f'{eps:g}',
            xy=(curve['Re'].iloc[-1], curve['f'].iloc[-1]),
            xytext=(3, 0),
            textcoords='offset points',
            fontsize=7,
            va='center',
        )

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('Reynolds Number Re')
    ax.set_ylabel('Darcy Friction Factor f')
    ax.set_title('Moody Chart')
    ax.grid(True, which='both', alpha=0.3)

    _finish(fig, save_path, show)
    return fig, ax


__all__ = [
    "plot_friction_vs_reynolds",
    "plot_friction_vs_roughness",
    "plot_friction_surface",
    "plot_moody_chart",
]
