"""Synthetic share generation for exercising the consensus solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..common.base_decoder import MAX_BASE, MIN_BASE, encode
from ..recovery.config import KEYS_FIELD
from ..recovery.consensus import Share


@dataclass(frozen=True)
class DealtShares:
    """Secret polynomial and the shares evaluated from it."""

    secret: int
    coefficients: Tuple[int, ...]
    shares: Tuple[Share, ...]


class ShareDealer:
    """Draws random integer polynomials and evaluates them at x = 1..n."""

    def __init__(
        self,
        k: int,
        n: int,
        coefficient_bound: int = 10**6,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not (1 <= k <= n):
            raise ValueError("Require 1 <= k <= n for share dealing.")
        if coefficient_bound < 1:
            raise ValueError("coefficient_bound must be positive.")
        self.k = k
        self.n = n
        self.coefficient_bound = coefficient_bound
        self.rng = rng if rng is not None else np.random.default_rng()

    def _draw(self) -> int:
        return int(self.rng.integers(0, self.coefficient_bound))

    def deal(self, secret: int | None = None) -> DealtShares:
        if secret is None:
            secret = self._draw()
        coeffs = (int(secret),) + tuple(self._draw() for _ in range(self.k - 1))
        shares = tuple(Share(x, evaluate_int(coeffs, x)) for x in range(1, self.n + 1))
        return DealtShares(secret=int(secret), coefficients=coeffs, shares=shares)


def evaluate_int(coeffs: Sequence[int], x: int) -> int:
    """Horner evaluation over plain integers."""
    y = 0
    for c in reversed(coeffs):
        y = y * x + c
    return y


def corrupt_shares(
    shares: Sequence[Share],
    count: int,
    rng: np.random.Generator,
    max_offset: int = 1000,
) -> Tuple[List[Share], Tuple[int, ...]]:
    """Shift the y value of ``count`` randomly chosen shares by a non-zero offset.

    Offsets are only subtracted when the result stays non-negative.
    """
    if not (0 <= count <= len(shares)):
        raise ValueError(f"Cannot corrupt {count} of {len(shares)} shares.")
    picked = tuple(sorted(int(i) for i in rng.choice(len(shares), size=count, replace=False)))
    out = list(shares)
    for idx in picked:
        offset = int(rng.integers(1, max_offset + 1))
        if rng.random() < 0.5 and out[idx].y - offset >= 0:
            offset = -offset
        out[idx] = Share(out[idx].x, out[idx].y + offset)
    return out, picked


def encode_document(
    shares: Sequence[Share],
    k: int,
    rng: np.random.Generator,
    bases: Sequence[int] | None = None,
) -> Dict[str, object]:
    """Build a share document with each y written in a (random) base."""
    if bases is not None and len(bases) != len(shares):
        raise ValueError("Need exactly one base per share.")
    document: Dict[str, object] = {KEYS_FIELD: {"n": len(shares), "k": k}}
    for idx, share in enumerate(shares):
        base = int(bases[idx]) if bases is not None else int(rng.integers(MIN_BASE, MAX_BASE + 1))
        document[str(share.x)] = {"base": str(base), "value": encode(share.y, base)}
    return document


__all__ = [
    "DealtShares",
    "ShareDealer",
    "evaluate_int",
    "corrupt_shares",
    "encode_document",
]
