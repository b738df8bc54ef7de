"""Lagrange interpolation with exact rational coefficients."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..errors import SingularInterpolation
from .rational import ONE, ZERO, BigRational

Polynomial = Tuple[BigRational, ...]


def _mul_linear(coeffs: List[BigRational], root: int) -> List[BigRational]:
    """Multiply a coefficient list (low order first) by (X - root)."""
    out: List[BigRational] = []
    prev = ZERO
    for c in coeffs:
        out.append(prev - c * root)
        prev = c
    out.append(prev)
    return out


def interpolate(points: Sequence[Tuple[int, int]]) -> Polynomial:
    """Return the coefficients a0..a_{k-1} of the polynomial through ``points``.

    Each Lagrange basis polynomial is built by convolving (X - x_m) for every
    other point, scaled by 1 / prod(x_j - x_m) and weighted by y_j.
    """
    k = len(points)
    if k == 0:
        raise SingularInterpolation("Cannot interpolate an empty point set.")
    coeffs = [ZERO] * k
    for j, (xj, yj) in enumerate(points):
        basis = [ONE]
        denom = 1
        for m, (xm, _) in enumerate(points):
            if m == j:
                continue
            if xj == xm:
                raise SingularInterpolation(f"Duplicate x={xj} in interpolation points.")
            basis = _mul_linear(basis, xm)
            denom *= xj - xm
        scale = BigRational(yj, denom)
        for d, c in enumerate(basis):
            coeffs[d] = coeffs[d] + c * scale
    return tuple(coeffs)


def evaluate(polynomial: Sequence[BigRational], x: int) -> BigRational:
    """Evaluate sum(coeff[i] * x**i) with a running power of x."""
    total = ZERO
    power = ONE
    for c in polynomial:
        total = total + c * power
        power = power * x
    return total


__all__ = ["Polynomial", "interpolate", "evaluate"]
