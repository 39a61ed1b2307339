"""Explicit friction factor correlations"""

from .registry import CorrelationRegistry, register_correlation

# Import all correlations to register them
from . import explicit
from .explicit import laminar, haaland, swamee_jain, serghides

__all__ = [
    "CorrelationRegistry",
    "register_correlation",
    "explicit",
    "laminar",
    "haaland",
    "swamee_jain",
    "serghides",
]
