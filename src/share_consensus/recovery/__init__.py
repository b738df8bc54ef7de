"""Secret recovery from possibly corrupted share documents."""

from .config import ShareEncoding, SolverConfig, load_request, load_request_file
from .consensus import ConsensusResult, Share, consensus_search, inlier_mask
from .solver import SolveResult, decode_share, solve, solve_document

__all__ = [
    "SolverConfig",
    "ShareEncoding",
    "load_request",
    "load_request_file",
    "Share",
    "ConsensusResult",
    "consensus_search",
    "inlier_mask",
    "SolveResult",
    "decode_share",
    "solve",
    "solve_document",
]
