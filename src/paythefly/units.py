"""
PayTheFly SDK Unit Converter

Converts a human decimal amount ("1.5") into the token's smallest unit
("1500000" for 6 decimals) with exact string and integer operations.

Note:
    Excess fractional digits are truncated, never rounded:
    to_smallest_unit("1.123456789", 6) == "1123456".
"""

from .bigint import parse_decimal
from .exceptions import InvalidAmountError


def to_smallest_unit(amount: str, decimals: int) -> str:
    """
    Convert a decimal amount string to an integer string in smallest units.

    Args:
        amount: Unsigned decimal string, e.g. "10" or "0.25"
        decimals: Token decimal count

    Returns:
        Integer string without leading zeros ("0" for zero)

    Raises:
        InvalidAmountError: Malformed amount or negative decimals

    Example:
        >>> to_smallest_unit("1", 18)
        '1000000000000000000'
        >>> to_smallest_unit("1.123456789", 6)
        '1123456'
    """
    if not isinstance(decimals, int) or decimals < 0:
        raise InvalidAmountError(decimals, "decimals must be a non-negative integer")
    if not isinstance(amount, str):
        raise InvalidAmountError(amount, "amount must be a decimal string")

    if "." not in amount:
        parse_decimal(amount)
        return (amount + "0" * decimals).lstrip("0") or "0"

    if amount.count(".") > 1:
        raise InvalidAmountError(amount, "more than one decimal point")
    integer, fraction = amount.split(".")
    if not integer and not fraction:
        raise InvalidAmountError(amount, "no digits")
    # Validate each part separately; empty halves (".5", "5.") are allowed.
    for part in (integer, fraction):
        if part:
            parse_decimal(part)

    fraction = fraction.ljust(decimals, "0")[:decimals]
    combined = (integer + fraction).lstrip("0")
    return combined or "0"
