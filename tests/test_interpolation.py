import numpy as np
import pytest
import sympy

from share_consensus.common.interpolation import evaluate, interpolate
from share_consensus.common.rational import BigRational
from share_consensus.errors import SingularInterpolation


def _sympy_coeffs(points, k):
    """Reference coefficients (low order first) from sympy's interpolation."""
    X = sympy.symbols("X")
    expr = sympy.interpolate([(sympy.Integer(x), sympy.Integer(y)) for x, y in points], X)
    coeffs = list(reversed(sympy.Poly(expr, X).all_coeffs()))
    return coeffs + [sympy.Integer(0)] * (k - len(coeffs))


def _as_sympy(poly):
    return [sympy.Rational(c.numerator, c.denominator) for c in poly]


def test_quadratic_through_three_points():
    poly = interpolate([(1, 4), (2, 7), (3, 12)])
    assert poly == (BigRational(3), BigRational(0), BigRational(1))


def test_fractional_coefficients():
    poly = interpolate([(1, 1), (2, 0), (3, 2)])
    assert poly == (BigRational(5), BigRational(-11, 2), BigRational(3, 2))
    assert [str(c) for c in poly] == ["5", "-11/2", "3/2"]


def test_constant_and_linear():
    assert interpolate([(7, 5)]) == (BigRational(5),)
    assert interpolate([(1, 1), (3, 2)]) == (BigRational(1, 2), BigRational(1, 2))


def test_duplicate_x_is_singular():
    with pytest.raises(SingularInterpolation):
        interpolate([(1, 2), (1, 3), (4, 5)])
    with pytest.raises(SingularInterpolation):
        interpolate([])


def test_evaluate_uses_all_coefficients():
    poly = (BigRational(3), BigRational(0), BigRational(1))
    assert evaluate(poly, 6) == 39
    assert evaluate(poly, 0) == 3
    assert evaluate((BigRational(1, 2), BigRational(1, 2)), 2) == BigRational(3, 2)


def test_matches_sympy_and_passes_through_points():
    rng = np.random.default_rng(7)
    for k in range(1, 7):
        for _ in range(5):
            xs = [int(x) for x in rng.choice(np.arange(-40, 40), size=k, replace=False)]
            ys = [int(y) for y in rng.integers(-10**6, 10**6, size=k)]
            points = list(zip(xs, ys))
            poly = interpolate(points)
            assert len(poly) == k
            assert _as_sympy(poly) == _sympy_coeffs(points, k)
            for x, y in points:
                assert evaluate(poly, x) == y
