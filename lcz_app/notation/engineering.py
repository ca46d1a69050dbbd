"""
Engineering notation formatter.

Renders a float with a fixed number of significant digits and an exponent
that is a multiple of three, either as an SI prefix ("4.700 k") or as a
plain exponent ("4.700e3"). Values whose exponent falls outside the prefix
table are always rendered with a plain exponent.
"""

import math
import sys
from types import MappingProxyType

from ..errors import NotationDomainError

# Smallest power of ten with a prefix defined
PREFIX_START = -24

_SYMBOLS = ("y", "z", "a", "f", "p", "n", "u", "m", "",
            "k", "M", "G", "T", "P", "E", "Z", "Y")

PREFIXES = MappingProxyType({
    PREFIX_START + 3 * index: symbol for index, symbol in enumerate(_SYMBOLS)
})

PREFIX_END = PREFIX_START + 3 * (len(_SYMBOLS) - 1)

# Largest power of ten applied in one step; 10.0 ** 309 overflows
_MAX_STEP = 300


def _shift(value: float, power: int) -> float:
    """Return value * 10**power, splitting powers that would overflow."""
    if power > _MAX_STEP:
        return _shift(value * 10.0 ** _MAX_STEP, power - _MAX_STEP)
    if power < -_MAX_STEP:
        return _shift(value / 10.0 ** _MAX_STEP, power + _MAX_STEP)
    if power < 0:
        return value / 10.0 ** -power
    return value * 10.0 ** power


def _round_half_up(value: float, exponent: int, digits: int) -> float:
    """Round a positive value to `digits` significant digits, ties away from zero.

    Returns the rounded digits as a whole number; the value is that number
    times 10**(exponent - digits + 1).
    """
    fraction, whole = math.modf(_shift(value, digits - 1 - exponent))
    if fraction >= 0.5:
        whole += 1.0
    return whole


def _align_exponent(exponent: int) -> int:
    """Snap a decimal exponent onto an engineering triplet."""
    if exponent > 0:
        return (exponent // 3) * 3
    return ((-exponent + 3) // 3) * -3


def _check_domain(value: float, significant_digits: int) -> None:
    if isinstance(significant_digits, bool) or not isinstance(significant_digits, int):
        raise NotationDomainError(
            f"significant_digits must be an integer, got {significant_digits!r}",
            value=value,
            significant_digits=significant_digits
        )
    if significant_digits < 1:
        raise NotationDomainError(
            f"significant_digits must be at least 1, got {significant_digits}",
            value=value,
            significant_digits=significant_digits
        )
    if not math.isfinite(value) or abs(value) < sys.float_info.min:
        raise NotationDomainError(
            f"Cannot format {value!r} in engineering notation",
            value=value,
            significant_digits=significant_digits
        )


def format_engineering(value: float, significant_digits: int = 4, numeric: bool = False) -> str:
    """
    Format a value in engineering notation.

    Args:
        value: Normal, finite, nonzero float
        significant_digits: Number of significant digits to keep (>= 1)
        numeric: Use "e<exp>" exponents instead of SI prefixes

    Returns:
        "<sign><mantissa> <prefix>" or "<sign><mantissa>e<exponent>"

    Raises:
        NotationDomainError: value is zero, subnormal, NaN or infinite,
            or significant_digits is below one
    """
    _check_domain(value, significant_digits)

    sign = "-" if value < 0.0 else ""
    digits = significant_digits

    decade = math.floor(math.log10(abs(value)))
    whole = _round_half_up(abs(value), decade, digits)

    # Mantissa straight from the integer digits, never from the rounded float
    exponent = _align_exponent(decade)
    mantissa = _shift(whole, decade - digits + 1 - exponent)

    # 999.96 at 3 digits rounds to 1000 of the lower triplet
    if round(mantissa, max(digits - 3, 0)) >= 1000.0:
        mantissa /= 1000.0
        exponent += 3

    if mantissa >= 100.0:
        digits -= 2
    elif mantissa >= 10.0:
        digits -= 1

    decimals = max(digits - 1, 0)

    if numeric or exponent < PREFIX_START or exponent > PREFIX_END:
        return f"{sign}{mantissa:.{decimals}f}e{exponent}"
    return f"{sign}{mantissa:.{decimals}f} {PREFIXES[exponent]}"
