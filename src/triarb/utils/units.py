"""
Token unit conversions.

On-chain amounts are integers in the token's smallest unit; the scanner
works in human decimal amounts. Conversions go through Decimal so that
18-decimal tokens do not lose precision on the way to the quoter.
"""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal


def to_base_units(amount: float, decimals: int) -> int:
    """
    Convert a human amount to the token's smallest unit (truncating).

    Args:
        amount: Amount in whole tokens.
        decimals: Token decimals.

    Returns:
        Integer amount in smallest units.

    Example:
        >>> to_base_units(1.5, 6)
        1500000
    """
    scaled = Decimal(str(amount)).scaleb(decimals)
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def from_base_units(amount: int, decimals: int) -> float:
    """
    Convert an amount in smallest units to whole tokens.

    Example:
        >>> from_base_units(1500000, 6)
        1.5
    """
    return float(Decimal(amount).scaleb(-decimals))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))
