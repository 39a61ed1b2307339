"""Core solver module"""

from .errors import ColebrookError, DomainError, ShapeMismatchError, NonConvergenceError
from .options import SolverOptions, load_options
from .solver import FrictionFactorSolver, colebrook, colebrook_residual

__all__ = [
    "ColebrookError",
    "DomainError",
    "ShapeMismatchError",
    "NonConvergenceError",
    "SolverOptions",
    "load_options",
    "FrictionFactorSolver",
    "colebrook",
    "colebrook_residual",
]
