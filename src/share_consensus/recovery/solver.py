"""Decode share entries, run the consensus search and assemble the result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence

from ..common.base_decoder import decode
from ..errors import InvalidConfiguration
from .config import INTEGER_PATTERN, ShareEncoding, SolverConfig, load_request
from .consensus import ConsensusResult, Share, consensus_search

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """Reconstructed secret together with the share classification."""

    secret: str
    polynomial: Dict[str, str]
    used_shares: List[List[str]]
    wrong_shares: List[List[str]]
    notes: str
    consensus: ConsensusResult

    def to_dict(self) -> dict:
        return {
            "secret": self.secret,
            "wrong_shares": self.wrong_shares,
            "used_shares": self.used_shares,
            "polynomial": dict(self.polynomial),
            "notes": self.notes,
        }


def _select_entries(
    config: SolverConfig, encodings: Sequence[ShareEncoding]
) -> List[ShareEncoding]:
    if config.provided_shares is None:
        return list(encodings)
    by_id = {enc.identifier: enc for enc in encodings}
    selected: List[ShareEncoding] = []
    for identifier in config.provided_shares:
        if identifier not in by_id:
            raise InvalidConfiguration(f"Provided share {identifier!r} has no entry.")
        selected.append(by_id[identifier])
    return selected


def decode_share(encoding: ShareEncoding) -> Share:
    if not INTEGER_PATTERN.fullmatch(encoding.identifier):
        raise InvalidConfiguration(
            f"Share identifier {encoding.identifier!r} is not an integer."
        )
    return Share(x=int(encoding.identifier), y=decode(encoding.value, encoding.base))


def solve(config: SolverConfig, encodings: Sequence[ShareEncoding]) -> SolveResult:
    """Reconstruct the secret from possibly corrupted share entries."""
    shares = [decode_share(enc) for enc in _select_entries(config, encodings)]
    if config.n is not None and config.n != len(encodings):
        logger.debug("Document declares n=%d but carries %d entries", config.n, len(encodings))
    consensus = consensus_search(shares, config.k)
    logger.info(
        "Solved k=%d over %d shares: %d used, %d wrong",
        config.k,
        len(shares),
        len(consensus.inliers),
        len(consensus.outliers),
    )
    return SolveResult(
        secret=str(consensus.secret),
        polynomial={f"a{i}": str(c) for i, c in enumerate(consensus.polynomial)},
        used_shares=consensus.inlier_pairs,
        wrong_shares=consensus.outlier_pairs,
        notes=f"Reconstructed degree-{config.k - 1} polynomial",
        consensus=consensus,
    )


def solve_document(document: Mapping[str, Any]) -> SolveResult:
    """Convenience wrapper: parse a share document mapping and solve it."""
    config, encodings = load_request(document)
    return solve(config, encodings)


__all__ = ["SolveResult", "decode_share", "solve", "solve_document"]
