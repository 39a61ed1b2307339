"""
Moody chart analysis tools
"""

import logging
from typing import Dict, Iterable, Optional

import numpy as np
import pandas as pd

from ..core.options import SolverOptions
from ..core.solver import FrictionFactorSolver
from ..correlations import CorrelationRegistry
from ..utils.broadcasting import broadcast_inputs

logger = logging.getLogger(__name__)

RE_LAMINAR = 2300.0
RE_TURBULENT = 4000.0

DEFAULT_EPSILON = (0.0, 1e-6, 5e-6, 1e-5, 5e-5, 1e-4, 2e-4, 5e-4,
                   1e-3, 2e-3, 5e-3, 1e-2, 2e-2, 3e-2, 5e-2)


def flow_regime(Re) -> np.ndarray:
    """Classify Reynolds numbers as 'laminar', 'transitional' or 'turbulent'."""
    Re = np.asarray(Re, dtype=float)
    return np.where(
        Re < RE_LAMINAR, "laminar",
        np.where(Re < RE_TURBULENT, "transitional", "turbulent"),
    )


class MoodyChart:
    """
    Friction factor over a Reynolds number x relative roughness grid.

    Parameters
    ----------
    Re_range : array_like, optional
        Reynolds numbers, default ``np.logspace(3, 8, 200)``
    epsilon_range : array_like, optional
        Relative roughness values, default ``DEFAULT_EPSILON``
    options : SolverOptions, optional
        Solver options. Unless given explicitly, failed points are marked
        NaN instead of aborting the whole chart.
    """

    def __init__(
        self,
        Re_range: Optional[Iterable[float]] = None,
        epsilon_range: Optional[Iterable[float]] = None,
        options: Optional[SolverOptions] = None,
    ):
        self.Re_range = np.asarray(
            np.logspace(3, 8, 200) if Re_range is None else Re_range, dtype=float
        ).ravel()
        self.epsilon_range = np.asarray(
            DEFAULT_EPSILON if epsilon_range is None else epsilon_range, dtype=float
        ).ravel()
        if options is None:
            options = SolverOptions(on_error="nan")
        self.solver = FrictionFactorSolver(options)
        self.results_df: Optional[pd.DataFrame] = None

    def generate(self, include_laminar: bool = True) -> pd.DataFrame:
        """
        Solve every grid point.

        Parameters
        ----------
        include_laminar : bool
            Use f = 64/Re below Re = 2300 instead of the Colebrook root;
            those points are not passed to the solver.
        """
        RE, EPSILON = np.meshgrid(self.Re_range, self.epsilon_range)
        logger.info(f"Calculating {RE.size} Moody chart points...")

        regime = flow_regime(RE)

        # Re <= 0 goes to the solver so the configured on_error policy applies
        if include_laminar:
            laminar_mask = (regime == "laminar") & (RE > 0.0)
        else:
            laminar_mask = np.zeros(RE.shape, dtype=bool)

        f = np.full(RE.shape, np.nan)
        f[laminar_mask] = CorrelationRegistry.evaluate(
            "laminar", RE[laminar_mask], EPSILON[laminar_mask]
        )
        f[~laminar_mask] = self.solver.solve(RE[~laminar_mask], EPSILON[~laminar_mask])

        valid = np.isfinite(f)
        self.results_df = pd.DataFrame({
            "Re": RE.ravel(),
            "epsilon": EPSILON.ravel(),
            "f": f.ravel(),
            "regime": regime.ravel(),
            "valid": valid.ravel(),
        })

        logger.info(f"Valid points: {int(valid.sum())} / {RE.size}")
        return self.results_df

    def filter_valid(self) -> pd.DataFrame:
        """Return only points with a finite friction factor"""
        if self.results_df is None:
            raise ValueError("Must generate chart first")

        return self.results_df[self.results_df["valid"]]

    def get_curves(self) -> Dict[float, pd.DataFrame]:
        """One Re-sorted curve per relative roughness value."""
        if self.results_df is None:
            raise ValueError("Must generate chart first")

        return {
            float(eps): group.sort_values("Re").reset_index(drop=True)
            for eps, group in self.results_df.groupby("epsilon", sort=True)
        }

    def export_results(self, filename: str):
        """Export results to CSV"""
        if self.results_df is None:
            raise ValueError("Must generate chart first")

        self.results_df.to_csv(filename, index=False)
        logger.info(f"Exported to {filename}")


def compare_correlations(
    Re,
    epsilon,
    names: Optional[Iterable[str]] = None,
    options: Optional[SolverOptions] = None,
) -> pd.DataFrame:
    """
    Compare explicit correlations against the Colebrook-White root.

    Returns a DataFrame with columns ``Re``, ``epsilon``, ``colebrook`` and,
    per correlation, ``<name>`` and ``<name>_error_pct``.
    """
    if names is None:
        names = [n for n in CorrelationRegistry.list_correlations() if n != "laminar"]
    if options is None:
        options = SolverOptions()

    inputs = broadcast_inputs(Re, epsilon)
    f_ref = np.atleast_1d(FrictionFactorSolver(options).solve(inputs.Re, inputs.epsilon))

    data = {
        "Re": inputs.Re.ravel(),
        "epsilon": inputs.epsilon.ravel(),
        "colebrook": f_ref.ravel(),
    }
    for name in names:
        f_corr = np.atleast_1d(CorrelationRegistry.evaluate(name, inputs.Re, inputs.epsilon)).ravel()
        data[name] = f_corr
        data[f"{name}_error_pct"] = 100.0 * (f_corr - data["colebrook"]) / data["colebrook"]

    return pd.DataFrame(data)


__all__ = [
    "RE_LAMINAR",
    "RE_TURBULENT",
    "DEFAULT_EPSILON",
    "flow_regime",
    "MoodyChart",
    "compare_correlations",
]
