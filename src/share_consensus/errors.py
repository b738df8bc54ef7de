"""Exception hierarchy for share decoding and secret reconstruction."""

from __future__ import annotations


class ShareConsensusError(Exception):
    """Base class for every error raised by this package."""


class InvalidBase(ShareConsensusError, ValueError):
    def __init__(self, base: int) -> None:
        super().__init__(f"Base must be between 2 and 36, got {base}.")
        self.base = base


class InvalidDigit(ShareConsensusError, ValueError):
    def __init__(self, char: str, digits: str) -> None:
        super().__init__(f"Invalid digit {char!r} in {digits!r}.")
        self.char = char
        self.digits = digits


class DigitOutOfRange(ShareConsensusError, ValueError):
    def __init__(self, char: str, digit: int, base: int) -> None:
        super().__init__(f"Digit {char!r} ({digit}) >= base {base}.")
        self.char = char
        self.digit = digit
        self.base = base


class DivideByZero(ShareConsensusError, ZeroDivisionError):
    """Raised when a rational would end up with a zero denominator."""


class SingularInterpolation(ShareConsensusError, ArithmeticError):
    """The interpolation points do not determine a unique polynomial."""


class InsufficientShares(ShareConsensusError, ValueError):
    def __init__(self, available: int, required: int) -> None:
        super().__init__(
            f"Not enough shares provided (got {available}, need at least {required})."
        )
        self.available = available
        self.required = required


class NoValidPolynomial(ShareConsensusError, ValueError):
    """Every candidate subset was singular."""


class InvalidConfiguration(ShareConsensusError, ValueError):
    """The input document or solver configuration is malformed."""


__all__ = [
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
