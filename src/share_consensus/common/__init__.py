"""Exact arithmetic, radix decoding and interpolation shared by the solver."""

from .base_decoder import MAX_BASE, MIN_BASE, char_to_digit, decode, encode
from .interpolation import Polynomial, evaluate, interpolate
from .rational import ONE, ZERO, BigRational

__all__ = [
    "BigRational",
    "ZERO",
    "ONE",
    "MIN_BASE",
    "MAX_BASE",
    "char_to_digit",
    "decode",
    "encode",
    "Polynomial",
    "interpolate",
    "evaluate",
]
