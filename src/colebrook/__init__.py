"""
Colebrook - Darcy friction factor from the Colebrook-White equation
"""

__version__ = "0.1.0"
__author__ = "Ildeberto de los Santos Ruiz"

# Import main classes for easy access
from .core.errors import ColebrookError, DomainError, ShapeMismatchError, NonConvergenceError
from .core.options import SolverOptions, load_options
from .core.solver import FrictionFactorSolver, colebrook, colebrook_residual
from .correlations import CorrelationRegistry
from .analysis.moody import MoodyChart, compare_correlations

__all__ = [
    "colebrook",
    "colebrook_residual",
    "FrictionFactorSolver",
    "SolverOptions",
    "load_options",
    "ColebrookError",
    "DomainError",
    "ShapeMismatchError",
    "NonConvergenceError",
    "CorrelationRegistry",
    "MoodyChart",
    "compare_correlations",
]
