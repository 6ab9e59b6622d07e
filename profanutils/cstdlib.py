"""Numeric conversions and helpers with C standard-library semantics."""

from __future__ import annotations

from dataclasses import dataclass

_MASK32 = 0xFFFFFFFF

# Radix-64 alphabet used by a64l/l64a: '.', '/', digits, upper case, lower case.
_CONV_TABLE = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_A64L_VALUES = {ch: i for i, ch in enumerate(_CONV_TABLE)}

_A64L_MAX_CHARS = 6
_ITOA_MIN_BASE = 2
_ITOA_MAX_BASE = 32


@dataclass(frozen=True)
class DivResult:
    """Quotient and remainder of an integer division truncated toward zero."""

    quot: int
    rem: int


def a64l(text: str) -> int:
    """Decode up to six radix-64 characters, least significant first.

    Decoding stops at the first character outside the alphabet. The result is
    the unsigned 32-bit value the characters encode.
    """
    result = 0
    shift = 0
    for ch in text[:_A64L_MAX_CHARS]:
        value = _A64L_VALUES.get(ch)
        if value is None:
            break
        result |= value << shift
        shift += 6
    return result & _MASK32


def l64a(n: int) -> str:
    """Encode the low 32 bits of ``n`` in radix-64; zero gives the empty string."""
    m = n & _MASK32
    chars = []
    while m:
        chars.append(_CONV_TABLE[m & 0x3F])
        m >>= 6
    return "".join(chars)


def atoi(text: str) -> int:
    """Parse a decimal integer after optional blanks and sign; stop at the first non-digit."""
    stripped = text.lstrip(" \t")
    negative = False
    if stripped[:1] in ("-", "+"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - ord("0")
    return -value if negative else value


def itoa(value: int, base: int) -> str:
    """Return ``value`` written in ``base`` (2 to 32) with upper-case digits.

    A minus sign is written only in base 10; other bases write the magnitude.
    Raises ValueError for a base outside the supported range.
    """
    if not _ITOA_MIN_BASE <= base <= _ITOA_MAX_BASE:
        raise ValueError(f"base must be between {_ITOA_MIN_BASE} and {_ITOA_MAX_BASE}: {base}")
    n = abs(value)
    digits = []
    while n:
        n, r = divmod(n, base)
        digits.append(chr(ord("A") + r - 10) if r >= 10 else chr(ord("0") + r))
    if not digits:
        digits.append("0")
    if value < 0 and base == 10:
        digits.append("-")
    return "".join(reversed(digits))


def div(numer: int, denom: int) -> DivResult:
    """Divide with the quotient truncated toward zero; raises ZeroDivisionError on zero."""
    if denom == 0:
        raise ZeroDivisionError("integer division by zero")
    quot = abs(numer) // abs(denom)
    if (numer < 0) != (denom < 0):
        quot = -quot
    return DivResult(quot, numer - quot * denom)


def _lcg(state: int) -> int:
    return (state * 1103515245 + 12345) & _MASK32


def rand_r(seed: int) -> tuple[int, int]:
    """Return a pseudo-random value in ``[0, 2**31)`` and the updated seed."""
    state = _lcg(seed & _MASK32)
    result = (state // 65536) % 2048
    state = _lcg(state)
    result = (result << 10) ^ ((state // 65536) % 1024)
    state = _lcg(state)
    result = (result << 10) ^ ((state // 65536) % 1024)
    return result, state