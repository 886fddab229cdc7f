"""Decimal string <-> base unit conversion.

Both directions are exact: parsing scales a Decimal under a wide context and
formatting splits the integer with divmod, so any amount with at most
`decimals` fractional digits survives a round trip unchanged.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

# Enough digits for any uint256 amount plus 18 decimals
_PRECISION = 100


def parse_amount(value: str) -> Decimal:
    """Parse a display-unit amount. Raises ValueError for NaN, infinity or junk."""
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return amount


def parse_units(value: str, decimals: int) -> int:
    """Convert "1.5" with 18 decimals to 1500000000000000000.

    Digits beyond `decimals` are rounded half-up, matching viem's parseUnits.
    Raises ValueError when the scaled amount does not fit the working precision.
    """
    amount = parse_amount(value)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            scaled = amount.scaleb(decimals).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        except InvalidOperation as e:
            raise ValueError(f"Amount out of range: {value!r}") from e
    return int(scaled)


def format_units(value: int, decimals: int) -> str:
    """Convert base units to a trimmed decimal string ("0.1", "2", "-0.5")."""
    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(int(value)), 10**decimals)
    if decimals == 0 or fraction == 0:
        return f"{sign}{whole}"
    digits = str(fraction).rjust(decimals, "0").rstrip("0")
    return f"{sign}{whole}.{digits}"

