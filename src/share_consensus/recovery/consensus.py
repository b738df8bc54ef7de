"""Exhaustive k-subset consensus search over exactly interpolated polynomials."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..common.interpolation import Polynomial, evaluate, interpolate
from ..common.rational import BigRational
from ..errors import InsufficientShares, NoValidPolynomial, SingularInterpolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """One (x, y) point of the sharing polynomial."""

    x: int
    y: int

    def as_pair(self) -> List[str]:
        return [str(self.x), str(self.y)]


@dataclass(frozen=True)
class ConsensusResult:
    """Best-scoring candidate of a consensus search."""

    polynomial: Polynomial
    subset: Tuple[int, ...]
    inliers: Tuple[Share, ...]
    outliers: Tuple[Share, ...]
    subsets_evaluated: int
    subsets_skipped: int

    @property
    def secret(self) -> BigRational:
        return self.polynomial[0]

    @property
    def inlier_pairs(self) -> List[List[str]]:
        return [share.as_pair() for share in self.inliers]

    @property
    def outlier_pairs(self) -> List[List[str]]:
        return [share.as_pair() for share in self.outliers]


def inlier_mask(polynomial: Polynomial, shares: Sequence[Share]) -> np.ndarray:
    """Boolean mask of shares lying exactly on ``polynomial``."""
    return np.fromiter(
        (evaluate(polynomial, s.x) == BigRational(s.y) for s in shares),
        dtype=bool,
        count=len(shares),
    )


def consensus_search(shares: Sequence[Share], k: int) -> ConsensusResult:
    """Find the degree-(k-1) polynomial that the most shares agree on.

    Subsets are tried in lexicographic order of share index and a later
    subset only replaces the current best with a strictly larger inlier
    count, so ties go to the earliest subset. Subsets with duplicate x
    values are skipped.
    """
    if k < 1:
        raise ValueError(f"Threshold k must be positive, got {k}.")
    shares = list(shares)
    n = len(shares)
    if n < k:
        raise InsufficientShares(n, k)

    best_poly: Optional[Polynomial] = None
    best_subset: Tuple[int, ...] = ()
    best_mask: Optional[np.ndarray] = None
    best_count = -1
    evaluated = 0
    skipped = 0

    for subset in combinations(range(n), k):
        points = [(shares[i].x, shares[i].y) for i in subset]
        try:
            poly = interpolate(points)
        except SingularInterpolation as exc:
            skipped += 1
            logger.debug("Skipping subset %s: %s", subset, exc)
            continue
        evaluated += 1
        mask = inlier_mask(poly, shares)
        count = int(mask.sum())
        if count > best_count:
            logger.debug("New best subset %s with %d/%d inliers", subset, count, n)
            best_poly, best_subset, best_mask, best_count = poly, subset, mask, count
            # nothing can beat unanimous agreement
            if count == n:
                break

    if best_poly is None or best_mask is None:
        raise NoValidPolynomial(f"All {skipped} candidate subsets were singular.")

    inliers = tuple(s for s, ok in zip(shares, best_mask) if ok)
    outliers = tuple(s for s, ok in zip(shares, best_mask) if not ok)
    return ConsensusResult(
        polynomial=best_poly,
        subset=best_subset,
        inliers=inliers,
        outliers=outliers,
        subsets_evaluated=evaluated,
        subsets_skipped=skipped,
    )


__all__ = ["Share", "ConsensusResult", "inlier_mask", "consensus_search"]
