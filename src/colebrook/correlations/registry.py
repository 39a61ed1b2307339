"""Friction factor correlation registry."""

from typing import Callable, Dict, Iterable, Optional, Tuple, Union

import numpy as np

from ..core.errors import DomainError
from ..utils.broadcasting import broadcast_inputs


class CorrelationRegistry:
    """Central registry for explicit friction factor correlations."""

    _models: Dict[str, Callable] = {}

    @classmethod
    def register(cls, name: str, canonical: Optional[str] = None):
        """Decorator to register a correlation under ``name``."""

        def decorator(func: Callable):
            cls._models[name] = func
            func._registered = True
            func._correlation_name = canonical or name
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> Callable:
        """Retrieve a registered correlation by name or alias."""
        if name not in cls._models:
            available = cls.list_correlations()
            raise ValueError(
                f"Correlation '{name}' not found. "
                f"Available: {available}"
            )
        return cls._models[name]

    @classmethod
    def list_correlations(cls):
        """Canonical names of registered correlations (aliases excluded)."""
        return list(dict.fromkeys(f._correlation_name for f in cls._models.values()))

    @classmethod
    def evaluate(cls, name: str, Re, epsilon) -> Union[float, np.ndarray]:
        """Evaluate a correlation with the same broadcasting rules as the solver."""
        func = cls.get(name)
        inputs = broadcast_inputs(Re, epsilon)
        if np.any(~(inputs.Re > 0.0)):
            raise DomainError("Reynolds number must be positive")

        with np.errstate(divide="ignore", invalid="ignore"):
            f = np.broadcast_to(np.asarray(func(inputs.Re, inputs.epsilon), dtype=float), inputs.shape)

        if inputs.scalar:
            return float(f)
        return f.copy()


def _correlation_names(name: str, aliases: Iterable[str] = ()) -> Tuple[str, ...]:
    """Compose canonical and alias names for registration."""
    return tuple(dict.fromkeys([name, name.replace("_", "-"), *aliases]))


def register_correlation(name: str, *, aliases: Iterable[str] = ()):
    """Decorator to register a correlation and its aliases."""

    def decorator(func: Callable):
        for alias in _correlation_names(name, aliases):
            CorrelationRegistry.register(alias, canonical=name)(func)
        return func

    return decorator


__all__ = [
    "CorrelationRegistry",
    "register_correlation",
]
