"""Top-level package aggregating share-consensus components."""

from . import common, recovery, simulation
from .cli import main
from .errors import (
    DigitOutOfRange,
    DivideByZero,
    InsufficientShares,
    InvalidBase,
    InvalidConfiguration,
    InvalidDigit,
    NoValidPolynomial,
    ShareConsensusError,
    SingularInterpolation,
)
from .recovery import SolveResult, SolverConfig, ShareEncoding, solve, solve_document

__all__ = [
    "common",
    "recovery",
    "simulation",
    "main",
    "solve",
    "solve_document",
    "SolveResult",
    "SolverConfig",
    "ShareEncoding",
    "ShareConsensusError",
    "InvalidBase",
    "InvalidDigit",
    "DigitOutOfRange",
    "DivideByZero",
    "SingularInterpolation",
    "InsufficientShares",
    "NoValidPolynomial",
    "InvalidConfiguration",
]
