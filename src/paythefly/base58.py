"""
PayTheFly SDK Base58 Codec

Base58 and Base58Check encoding with the Bitcoin alphabet, as used by
TRON addresses.

Functions:
    encode: bytes -> Base58 string
    decode: Base58 string -> bytes
    checksum: First 4 bytes of double SHA-256
    encode_check: Append checksum, then Base58-encode
    decode_check: Base58-decode, then verify and strip checksum

Example:
    >>> from paythefly import base58
    >>> base58.encode(b"\\x00\\x00hello")
    '11Cn8eVZg'
    >>> base58.decode("11Cn8eVZg")
    b'\\x00\\x00hello'

Note:
    - Each leading zero byte is encoded as a leading '1' and vice versa
    - decode_check must succeed before a decoded payload is trusted
"""

from .bigint import bytes_to_hex, hex_to_bytes, hex_to_int, int_to_hex
from .exceptions import ChecksumMismatchError, InvalidBase58Error
from .utils import double_sha256

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
CHECKSUM_LENGTH = 4

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def encode(data: bytes) -> str:
    """Encode bytes as a Base58 string."""
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    rest = data[leading_zeros:]
    num = hex_to_int(bytes_to_hex(rest)) if rest else 0

    result = []
    while num > 0:
        num, rem = divmod(num, 58)
        result.append(ALPHABET[rem])
    return "1" * leading_zeros + "".join(reversed(result))


def decode(text: str) -> bytes:
    """
    Decode a Base58 string to bytes.

    Raises:
        InvalidBase58Error: A character is outside the alphabet
    """
    leading_ones = len(text) - len(text.lstrip("1"))

    num = 0
    for position, ch in enumerate(text):
        digit = _INDEX.get(ch)
        if digit is None:
            raise InvalidBase58Error(text, position)
        num = num * 58 + digit

    body = hex_to_bytes(int_to_hex(num, even=True)) if num else b""
    return b"\x00" * leading_ones + body


def checksum(payload: bytes) -> bytes:
    """Return the 4-byte double SHA-256 checksum of payload."""
    return double_sha256(payload)[:CHECKSUM_LENGTH]


def encode_check(payload: bytes) -> str:
    return encode(payload + checksum(payload))


def decode_check(text: str) -> bytes:
    """
    Decode a Base58Check string and return the verified payload.

    Raises:
        InvalidBase58Error: Malformed Base58 or too short to hold a checksum
        ChecksumMismatchError: Trailing 4 bytes do not match the payload
    """
    raw = decode(text)
    if len(raw) < CHECKSUM_LENGTH:
        raise InvalidBase58Error(text)
    payload, found = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    expected = checksum(payload)
    if found != expected:
        raise ChecksumMismatchError(expected.hex(), found.hex())
    return payload
