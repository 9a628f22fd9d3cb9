"""Number formatting with a fixed ``.`` thousands / ``,`` decimal convention."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real
from typing import Any, Final, Optional

# Leading/trailing blanks, sign, digits with optional fraction, optional exponent.
_NUMERIC_STRING: Final = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)
_SEPARATORS: Final = str.maketrans({",": ".", ".": ","})


def _as_decimal(value: Any) -> Optional[Decimal]:
    """Return ``value`` as a finite Decimal, or ``None`` if it is not numeric."""

    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, Real) or (isinstance(value, str) and _NUMERIC_STRING.match(value)):
        # repr() is the shortest round-tripping text, so 0.1 stays 0.1.
        number = Decimal(repr(float(value)))
    else:
        return None
    if not number.is_finite():
        return None
    return number


def is_numeric(value: Any) -> bool:
    """Return True for finite numbers and strings that spell one."""

    return _as_decimal(value) is not None


def _round_half_up(number: Decimal, places: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def max_decimals(value: Any, decimals: int = 3) -> int:
    """Return the fewest decimal places that represent ``value`` without loss.

    ``value`` is first rounded to ``decimals`` places; the result is the first
    ``i`` below ``decimals`` for which ``value * 10**i`` is a whole number,
    falling back to ``decimals`` itself.
    """

    decimals = max(0, decimals)
    number = _as_decimal(value)
    if number is None:
        raise TypeError(f"expected a number, got {value!r}")

    rounded = _round_half_up(number, decimals)
    for places in range(decimals):
        scaled = rounded.scaleb(places)
        if scaled == scaled.to_integral_value():
            return places
    return decimals


def format_number(value: Any, decimals: int = 2, zero_is_null: bool = False) -> str:
    """Format ``value`` as ``1.234,5`` using at most ``decimals`` places.

    Trailing zero decimals are trimmed rather than padded. Non-numeric input,
    and zero when ``zero_is_null`` is set, produce an empty string.
    A negative ``decimals`` counts as zero.
    """

    decimals = max(0, decimals)
    number = _as_decimal(value)
    if number is None:
        return ""
    if zero_is_null and number == 0:
        return ""

    places = max_decimals(number, decimals)
    rounded = _round_half_up(number, places)
    if rounded == 0:
        rounded = rounded.copy_abs()
    return f"{rounded:,.{places}f}".translate(_SEPARATORS)


__all__ = ["format_number", "is_numeric", "max_decimals"]
