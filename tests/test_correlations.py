import numpy as np
import pytest

from colebrook import colebrook, DomainError
from colebrook.correlations import CorrelationRegistry


def test_registered_correlations():
    names = CorrelationRegistry.list_correlations()
    for name in ("laminar", "haaland", "swamee_jain", "serghides"):
        assert name in names


def test_aliases_resolve_to_same_function():
    assert CorrelationRegistry.get("swamee-jain") is CorrelationRegistry.get("swamee_jain")
    assert CorrelationRegistry.get("hagen_poiseuille") is CorrelationRegistry.get("laminar")


def test_unknown_correlation():
    with pytest.raises(ValueError, match="Available"):
        CorrelationRegistry.get("blasius")


def test_laminar():
    assert CorrelationRegistry.evaluate("laminar", 1000.0, 1e-3) == pytest.approx(0.064)


@pytest.mark.parametrize("name, tol", [
    ("haaland", 0.03),
    ("swamee_jain", 0.03),
    ("serghides", 1e-3),
])
def test_explicit_close_to_colebrook(name, tol):
    Re = np.logspace(4, 7, 10)
    eps = 1e-4
    f_ref = colebrook(Re, eps)
    f = CorrelationRegistry.evaluate(name, Re, eps)
    assert f.shape == Re.shape
    np.testing.assert_allclose(f, f_ref, rtol=tol)


def test_evaluate_scalar_returns_float():
    assert isinstance(CorrelationRegistry.evaluate("haaland", 1e5, 1e-4), float)


def test_evaluate_rejects_nonpositive_reynolds():
    with pytest.raises(DomainError):
        CorrelationRegistry.evaluate("haaland", [1e5, 0.0], 1e-4)


def test_laminar_ignores_roughness():
    assert CorrelationRegistry.evaluate("laminar", 1000.0, float("inf")) == pytest.approx(0.064)
    f = CorrelationRegistry.evaluate("laminar", [500.0, 1000.0], 1e-2)
    np.testing.assert_allclose(f, [0.128, 0.064])
