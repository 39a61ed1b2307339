"""Exceptions raised by the friction factor solver."""


class ColebrookError(Exception):
    """Base class for all solver errors."""


class DomainError(ColebrookError, ValueError):
    """Input pair has no root on the search bracket (Re <= 0, bad roughness, ...)."""


class ShapeMismatchError(ColebrookError, ValueError):
    """Two non-scalar inputs were given with different shapes."""


class NonConvergenceError(ColebrookError, RuntimeError):
    """Root-finder ran out of iterations before meeting its tolerance."""


__all__ = [
    "ColebrookError",
    "DomainError",
    "ShapeMismatchError",
    "NonConvergenceError",
]
