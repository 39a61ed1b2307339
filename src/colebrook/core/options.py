"""
Solver configuration

Tolerances and bracket passed to scipy.optimize.brentq, plus the
partial-failure policy used when solving over arrays.
"""

import math
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Union

import numpy as np
import yaml

ON_ERROR_POLICIES = ("raise", "nan")

# Smallest positive step from 1.0; keeps 1/sqrt(f) finite at the lower end
MACHINE_EPS = float(np.finfo(float).eps)


@dataclass
class SolverOptions:
    """Root-finding settings for the Colebrook-White solver."""

    xtol: float = 2e-12                 # Absolute tolerance on f
    rtol: float = 4 * MACHINE_EPS       # Relative tolerance on f (brentq minimum)
    maxiter: int = 100                  # Iteration budget per element
    lower: float = MACHINE_EPS          # Bracket lower bound
    upper: float = 1.0                  # Bracket upper bound
    on_error: str = "raise"             # "raise" (fail-fast) or "nan"
    progress: bool = False              # tqdm progress bar over elements

    def __post_init__(self):
        """Validate solver options"""
        # YAML 1.1 reads "1e-10" as a string
        self.xtol = float(self.xtol)
        self.rtol = float(self.rtol)
        self.lower = float(self.lower)
        self.upper = float(self.upper)
        self.maxiter = int(self.maxiter)

        if not (math.isfinite(self.xtol) and self.xtol > 0):
            raise ValueError(f"xtol must be positive and finite, got {self.xtol!r}")
        if not (math.isfinite(self.rtol) and self.rtol >= 4 * MACHINE_EPS):
            raise ValueError(f"rtol must be finite and >= {4 * MACHINE_EPS:g}, got {self.rtol!r}")
        if self.maxiter < 1:
            raise ValueError("maxiter must be at least 1")
        if not (math.isfinite(self.upper) and 0.0 < self.lower < self.upper):
            raise ValueError(
                f"Invalid bracket [{self.lower!r}, {self.upper!r}]: need 0 < lower < upper < inf"
            )
        if self.on_error not in ON_ERROR_POLICIES:
            raise ValueError(
                f"Unknown on_error policy '{self.on_error}'. "
                f"Available: {list(ON_ERROR_POLICIES)}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "SolverOptions":
        """Create options from a dict, ignoring unknown keys."""
        safe_names = [f.name for f in fields(cls)]
        parsed = {}
        for key, val in data.items():
            key_l = key.lower()
            if key_l in safe_names:
                parsed[key_l] = val
        return cls(**parsed)

    def to_dict(self) -> dict:
        return asdict(self)


def load_options(path: Union[str, Path]) -> SolverOptions:
    """
    Load solver options from a YAML file.

    The mapping may sit at the top level or under a ``solver`` key::

        solver:
          xtol: 1.0e-10
          on_error: nan
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
    if isinstance(data.get("solver"), dict):
        data = data["solver"]
    return SolverOptions.from_dict(data)


__all__ = ["SolverOptions", "load_options", "MACHINE_EPS", "ON_ERROR_POLICIES"]
