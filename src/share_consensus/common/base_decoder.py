"""Radix 2-36 conversion between digit strings and integers."""

from __future__ import annotations

import string

from ..errors import DigitOutOfRange, InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36
DIGITS = string.digits + string.ascii_lowercase


def _check_base(base: int) -> int:
    base = int(base)
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(base)
    return base


def char_to_digit(char: str) -> int:
    """Map '0'-'9' to 0-9 and 'a'-'z' (any case) to 10-35."""
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    lowered = char.lower()
    if "a" <= lowered <= "z" and char.isascii():
        return 10 + ord(lowered) - ord("a")
    raise InvalidDigit(char, char)


def decode(digits: str, base: int) -> int:
    """Decode ``digits`` most-significant first; the empty string is 0."""
    base = _check_base(base)
    value = 0
    for char in digits:
        try:
            digit = char_to_digit(char)
        except InvalidDigit:
            raise InvalidDigit(char, digits) from None
        if digit >= base:
            raise DigitOutOfRange(char, digit, base)
        value = value * base + digit
    return value


def encode(value: int, base: int) -> str:
    """Inverse of :func:`decode` using lowercase digits."""
    base = _check_base(base)
    value = int(value)
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}.")
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, rem = divmod(value, base)
        out.append(DIGITS[rem])
    return "".join(reversed(out))


__all__ = ["MIN_BASE", "MAX_BASE", "char_to_digit", "decode", "encode"]
