"""
PayTheFly SDK Big Integer Helpers

Exact conversions between decimal strings, hex strings and raw bytes.
Values include 256-bit hash fields, chain IDs and token amounts that can
exceed 2^64 in smallest-unit form, so everything goes through Python ints
and strings; there is no floating point anywhere in this module.

Functions:
    decimal_to_hex: Decimal string -> minimal hex
    hex_pad32: Left-pad hex to 32 bytes
    hex_to_int / int_to_hex: Exact round trip
    encode_uint256: Decimal string -> 64-char ABI word
    check_uint256: Reject values that do not fit a uint256 word
    hex_to_bytes / bytes_to_hex: Strict byte conversions
"""

from .exceptions import InvalidAmountError, InvalidHexError
from .utils import is_hex

WORD_HEX_LENGTH = 64
UINT256_MAX = 2 ** 256 - 1
UINT256_MAX_DIGITS = len(str(UINT256_MAX))


def parse_decimal(value: str) -> int:
    """
    Parse a non-negative decimal integer string.

    Raises:
        InvalidAmountError: Value is empty, signed, contains non-digits or
            is too long to convert
    """
    if not isinstance(value, str):
        value = str(value)
    if not value.isdigit() or not value.isascii():
        if value.startswith("-"):
            raise InvalidAmountError(value, "negative values are not allowed")
        raise InvalidAmountError(value, "expected an unsigned decimal integer")
    try:
        return int(value)
    except ValueError:
        raise InvalidAmountError(value, "too many digits") from None


def decimal_to_hex(value: str) -> str:
    """
    Convert a decimal string to hex by repeated division by 16.

    Returns "0" for zero or empty input; the result is not padded.

    Example:
        >>> decimal_to_hex("255")
        'ff'
        >>> decimal_to_hex("")
        '0'
    """
    if value in ("", "0"):
        return "0"
    num = parse_decimal(value)
    if num == 0:
        return "0"
    digits = []
    while num > 0:
        num, rem = divmod(num, 16)
        digits.append("0123456789abcdef"[rem])
    return "".join(reversed(digits))


def hex_pad32(value: str) -> str:
    """
    Left-pad a hex string with '0' to 64 characters.

    Raises:
        InvalidHexError: Input already longer than 32 bytes
    """
    if len(value) > WORD_HEX_LENGTH:
        raise InvalidHexError(value, f"longer than {WORD_HEX_LENGTH} hex characters")
    return value.rjust(WORD_HEX_LENGTH, "0")


def hex_to_int(value: str) -> int:
    """Parse an unprefixed hex string into an int."""
    if not is_hex(value):
        raise InvalidHexError(value, "non-hex characters")
    return int(value, 16)


def int_to_hex(value: int, even: bool = False) -> str:
    """
    Render a non-negative int as lowercase hex.

    Zero is "0", or "00" when an even-length byte-aligned string is requested.
    """
    if value < 0:
        raise InvalidAmountError(value, "negative values are not allowed")
    digits = format(value, "x")
    if even and len(digits) % 2:
        digits = "0" + digits
    return digits


def encode_uint256(value: str) -> str:
    """Encode a decimal string as a 32-byte big-endian ABI word (64 hex chars)."""
    return hex_pad32(decimal_to_hex(value))


def check_uint256(value: str) -> str:
    """
    Ensure a decimal string fits in an unsigned 256-bit ABI word.

    Returns the value unchanged.

    Raises:
        InvalidAmountError: Malformed or greater than 2^256 - 1
    """
    digits = str(value).lstrip("0")
    if len(digits) > UINT256_MAX_DIGITS or parse_decimal(digits or "0") > UINT256_MAX:
        raise InvalidAmountError(value, "exceeds uint256")
    return value


def hex_to_bytes(value: str) -> bytes:
    """
    Decode an unprefixed hex string to bytes.

    The empty string decodes to empty bytes.

    Raises:
        InvalidHexError: Odd length or non-hex characters
    """
    if value == "":
        return b""
    if len(value) % 2:
        raise InvalidHexError(value, "odd number of hex characters")
    if not is_hex(value):
        raise InvalidHexError(value, "non-hex characters")
    return bytes.fromhex(value)


def bytes_to_hex(data: bytes) -> str:
    return data.hex()
