"""
Colebrook-White friction factor solver

Solves the implicit Colebrook-White equation

    1/sqrt(f) + 2*log10(epsilon/3.7 + 2.51/(Re*sqrt(f))) = 0

for the Darcy friction factor f with Brent's method on the bracket
[machine-epsilon, 1], one root search per (Re, epsilon) element.

References
----------
[1] Colebrook, C. F., & White, C. M. (1937). Experiments with fluid friction
    in roughened pipes. Proceedings of the Royal Society of London. Series A,
    161(906), 367-381.
[2] Colebrook, C. (1939). Turbulent Flow in Pipes, with Particular Reference
    to the Transition Region between the Smooth and Rough Pipe Laws. Journal
    of the Institution of Civil Engineers, 11(4), 133-156.
"""

import logging
import math
from typing import Optional, Union

import numpy as np
from scipy import optimize
from tqdm import tqdm

from .errors import DomainError, NonConvergenceError
from .options import SolverOptions
from ..utils.broadcasting import broadcast_inputs

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray, list, tuple]


def colebrook_residual(f: float, Re: float, epsilon: float) -> float:
    """Colebrook-White residual; zero at the friction factor."""
    sqrt_f = math.sqrt(f)
    return 1.0 / sqrt_f + 2.0 * math.log10(epsilon / 3.7 + 2.51 / (Re * sqrt_f))


class FrictionFactorSolver:
    """
    Elementwise Colebrook-White solver.

    Parameters
    ----------
    options : SolverOptions, optional
        Tolerances, bracket and partial-failure policy. Defaults to
        ``SolverOptions()`` (fail-fast on the first bad element).
    """

    def __init__(self, options: Optional[SolverOptions] = None):
        self.options = options if options is not None else SolverOptions()

    def _endpoint_residual(self, f: float, Re: float, epsilon: float) -> float:
        try:
            r = colebrook_residual(f, Re, epsilon)
        except (ValueError, ZeroDivisionError) as e:
            raise DomainError(
                f"Colebrook residual undefined at f={f:g} for Re={Re!r}, epsilon={epsilon!r}"
            ) from e
        if not math.isfinite(r):
            raise DomainError(
                f"Colebrook residual not finite at f={f:g} for Re={Re!r}, epsilon={epsilon!r}"
            )
        return r

    def solve_scalar(self, Re: float, epsilon: float) -> float:
        """
        Friction factor for a single (Re, epsilon) pair.

        Raises
        ------
        DomainError
            Re is not a positive finite number, epsilon is not finite, or the
            residual does not change sign on the bracket.
        NonConvergenceError
            brentq exhausted ``maxiter`` without meeting its tolerance.
        """
        Re = float(Re)
        epsilon = float(epsilon)
        opts = self.options

        if not (Re > 0.0 and math.isfinite(Re)):
            raise DomainError(f"Reynolds number must be positive and finite, got {Re!r}")
        if not math.isfinite(epsilon):
            raise DomainError(f"Relative roughness must be finite, got {epsilon!r}")

        r_lo = self._endpoint_residual(opts.lower, Re, epsilon)
        r_hi = self._endpoint_residual(opts.upper, Re, epsilon)
        if r_lo == 0.0:
            return opts.lower
        if r_hi == 0.0:
            return opts.upper
        if np.sign(r_lo) == np.sign(r_hi):
            raise DomainError(
                f"No sign change on [{opts.lower:g}, {opts.upper:g}] for "
                f"Re={Re!r}, epsilon={epsilon!r} (residuals {r_lo:.4g}, {r_hi:.4g})"
            )

        try:
            root, info = optimize.brentq(
                colebrook_residual,
                opts.lower,
                opts.upper,
                args=(Re, epsilon),
                xtol=opts.xtol,
                rtol=opts.rtol,
                maxiter=opts.maxiter,
                full_output=True,
                disp=False,
            )
        except ValueError as e:
            raise DomainError(f"brentq failed for Re={Re!r}, epsilon={epsilon!r}: {e}") from e

        if not info.converged:
            raise NonConvergenceError(
                f"brentq did not converge for Re={Re!r}, epsilon={epsilon!r} "
                f"after {info.iterations} iterations ({info.flag})"
            )
        return float(root)

    def _solve_or_nan(self, Re: float, epsilon: float) -> float:
        try:
            return self.solve_scalar(Re, epsilon)
        except (DomainError, NonConvergenceError) as e:
            logger.warning(f"Friction factor set to NaN: {e}")
            return float("nan")

    def solve(self, Re: ArrayLike, epsilon: ArrayLike) -> Union[float, np.ndarray]:
        """
        Friction factor for scalar or array inputs.

        Parameters
        ----------
        Re : float or array_like
            Reynolds number(s), > 0
        epsilon : float or array_like
            Relative roughness value(s), conventionally in (0, 1)

        Returns
        -------
        f : float or np.ndarray
            ``float`` if both inputs are scalars, otherwise an array with the
            shape of the non-scalar input(s).
        """
        inputs = broadcast_inputs(Re, epsilon)
        logger.debug(f"Solving Colebrook-White for {inputs.size} element(s), shape {inputs.shape}")

        solve_one = self.solve_scalar if self.options.on_error == "raise" else self._solve_or_nan
        pairs = inputs.pairs()
        if self.options.progress:
            pairs = tqdm(pairs, total=inputs.size, desc="Colebrook")

        f = np.fromiter(
            (solve_one(r, e) for r, e in pairs), dtype=float, count=inputs.size
        ).reshape(inputs.shape)

        if inputs.scalar:
            return float(f)
        return f

    __call__ = solve


def colebrook(Re: ArrayLike, epsilon: ArrayLike, **options) -> Union[float, np.ndarray]:
    """
    Darcy friction factor from the Colebrook-White equation.

    Keyword arguments are forwarded to ``SolverOptions``.

    Examples
    --------
    >>> round(colebrook(1e5, 1e-4), 5)
    0.01851
    >>> colebrook([5e3, 1e4, 1e5], 1e-4).shape
    (3,)
    """
    return FrictionFactorSolver(SolverOptions(**options)).solve(Re, epsilon)


__all__ = ["colebrook_residual", "FrictionFactorSolver", "colebrook"]
