"""
Explicit Friction Factor Correlations

Closed-form approximations to the Colebrook-White equation. All functions
take equal-shape numpy arrays (or floats) and return the Darcy friction factor.
"""

import numpy as np

from .registry import register_correlation


@register_correlation("laminar", aliases=("hagen_poiseuille",))
def laminar(Re, epsilon):
    """Hagen-Poiseuille: f = 64/Re (roughness has no effect)."""
    return 64.0 / Re


@register_correlation("haaland")
def haaland(Re, epsilon):
    """
    Haaland (1983):
    1/sqrt(f) = -1.8 * log10( (eps/3.7)^1.11 + 6.9/Re )
    """
    return (-1.8 * np.log10((epsilon / 3.7) ** 1.11 + 6.9 / Re)) ** -2


@register_correlation("swamee_jain", aliases=("swamee",))
def swamee_jain(Re, epsilon):
    """
    Swamee-Jain (1976), valid ~ 5e3 < Re < 1e8:
    f = 0.25 / [log10( eps/3.7 + 5.74/Re^0.9 )]^2
    """
    return 0.25 / np.log10(epsilon / 3.7 + 5.74 / Re ** 0.9) ** 2


@register_correlation("serghides")
def serghides(Re, epsilon):
    """Serghides (1984) three-step Steffensen acceleration of the Colebrook iteration."""
    e = epsilon / 3.7
    A = -2.0 * np.log10(e + 12.0 / Re)
    B = -2.0 * np.log10(e + 2.51 * A / Re)
    C = -2.0 * np.log10(e + 2.51 * B / Re)
    return (A - (B - A) ** 2 / (C - 2.0 * B + A)) ** -2


__all__ = ["laminar", "haaland", "swamee_jain", "serghides"]
