"""
Colebrook-White friction factor examples

Reproduces the four usage patterns of the solver:
  1. Single Re, single epsilon
  2. Multiple Re, single epsilon
  3. Single Re, multiple epsilon
  4. Multiple Re, multiple epsilon (meshgrid surface)
and finishes with a Moody chart and an explicit-correlation comparison.
"""

import sys
import os
import logging
import numpy as np

# Add src to path
src_path = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, src_path)

from colebrook import colebrook, MoodyChart, compare_correlations
from colebrook.utils.plotting import (
    plot_friction_vs_reynolds,
    plot_friction_vs_roughness,
    plot_friction_surface,
    plot_moody_chart,
)


def example_single_value():
    """Example 1: Single Re, single epsilon"""
    Re = 1e5
    epsilon = 1e-4
    f = colebrook(Re, epsilon)

    print(f"\nRe = {Re:g}, epsilon = {epsilon:g}")
    print(f"  f = {f:.6f}")
    return f


def example_reynolds_sweep(show: bool = True):
    """Example 2: Multiple Re, single epsilon"""
    Re = np.arange(5000, 100001, 1000)
    epsilon = 1e-4
    f = colebrook(Re, epsilon)

    print(f"\nRe sweep {Re[0]:g} - {Re[-1]:g} at epsilon = {epsilon:g}")
    print(f"  f range: {f.min():.5f} - {f.max():.5f}")
    plot_friction_vs_reynolds(Re, epsilon, show=show)
    return f


def example_roughness_sweep(show: bool = True):
    """Example 3: Single Re, multiple epsilon"""
    Re = 1e5
    epsilon = np.linspace(1e-4, 1e-1, 100)
    f = colebrook(Re, epsilon)

    print(f"\nepsilon sweep {epsilon[0]:g} - {epsilon[-1]:g} at Re = {Re:g}")
    print(f"  f range: {f.min():.5f} - {f.max():.5f}")
    plot_friction_vs_roughness(Re, epsilon, show=show)
    return f


def example_surface(show: bool = True):
    """Example 4: Multiple Re, multiple epsilon"""
    Re = np.logspace(4, 8, 100)
    epsilon = np.linspace(1e-4, 1e-1, 100)
    RE, EPSILON = np.meshgrid(Re, epsilon)
    F = colebrook(RE, EPSILON, progress=True)

    print(f"\nSurface over {F.shape[0]} x {F.shape[1]} grid")
    print(f"  f range: {F.min():.5f} - {F.max():.5f}")
    plot_friction_surface(Re, epsilon, show=show)
    return F


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 70)
    print("COLEBROOK-WHITE FRICTION FACTOR EXAMPLES")
    print("=" * 70)

    example_single_value()
    example_reynolds_sweep()
    example_roughness_sweep()
    example_surface()

    print("\n" + "=" * 70)
    print("MOODY CHART")
    print("=" * 70)

    chart = MoodyChart()
    chart.generate()
    plot_moody_chart(chart)

    print("\n" + "=" * 70)
    print("EXPLICIT CORRELATIONS VS COLEBROOK-WHITE")
    print("=" * 70)

    df = compare_correlations(np.logspace(4, 8, 5), 1e-4)
    print(df.to_string(index=False, float_format=lambda x: f"{x:.5g}"))
