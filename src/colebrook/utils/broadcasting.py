"""Scalar-vs-array reconciliation of (Re, epsilon) input pairs."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..core.errors import ShapeMismatchError


@dataclass(frozen=True)
class BroadcastInputs:
    """Equal-shape float arrays ready to be flattened."""

    Re: np.ndarray
    epsilon: np.ndarray
    shape: Tuple[int, ...]
    scalar: bool  # both inputs were scalars

    @property
    def size(self) -> int:
        return int(np.prod(self.shape, dtype=int))

    def pairs(self):
        """Iterate (Re, epsilon) element pairs in C order."""
        return zip(self.Re.ravel().tolist(), self.epsilon.ravel().tolist())


def broadcast_inputs(Re, epsilon) -> BroadcastInputs:
    """
    Replicate a scalar argument to the other argument's shape.

    Only 0-d inputs count as scalars; two arrays must already share a shape.

    Raises
    ------
    ShapeMismatchError
        If both inputs are arrays with different shapes.
    """
    Re = np.asarray(Re, dtype=float)
    epsilon = np.asarray(epsilon, dtype=float)

    if Re.ndim == 0 and epsilon.ndim != 0:
        shape = epsilon.shape
    elif epsilon.ndim == 0 and Re.ndim != 0:
        shape = Re.shape
    elif Re.shape == epsilon.shape:
        shape = Re.shape
    else:
        raise ShapeMismatchError(
            f"incompatible shapes: Re{Re.shape} and epsilon{epsilon.shape}"
        )

    return BroadcastInputs(
        Re=np.broadcast_to(Re, shape),
        epsilon=np.broadcast_to(epsilon, shape),
        shape=tuple(shape),
        scalar=(Re.ndim == 0 and epsilon.ndim == 0),
    )


__all__ = ["BroadcastInputs", "broadcast_inputs"]
