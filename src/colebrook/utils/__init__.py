"""Utility functions"""

from .broadcasting import BroadcastInputs, broadcast_inputs

# Plotting helpers live in colebrook.utils.plotting (imports matplotlib)

__all__ = [
    "BroadcastInputs",
    "broadcast_inputs",
]
