"""
PayTheFly SDK Utility Module

Provides the hash primitives and hex helpers shared by every other module.

Functions:
    keccak256_bytes: Keccak-256 hash (bytes)
    keccak256_hex: Keccak-256 hash (hexadecimal, no prefix)
    double_sha256: SHA-256 applied twice (bytes)
    strip_hex_prefix: Remove an optional 0x/0X prefix
    normalize_hex: Lowercase hex without prefix
    is_hex: Check a string contains only hex digits

Example:
    >>> from paythefly.utils import keccak256_hex
    >>> keccak256_hex(b"")
    'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'

Note:
    - Keccak-256 is the hash algorithm used by Ethereum/TRON, slightly different from SHA3-256
    - Hex digests are returned without the 0x prefix because they are
      concatenated into larger EIP-712 encodings
"""

import hashlib
from typing import Optional

from Crypto.Hash import keccak

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def keccak256_bytes(payload: bytes) -> bytes:
    """
    Calculate Keccak-256 hash value (bytes format).

    Args:
        payload: Raw bytes to hash, no padding beyond Keccak's own

    Returns:
        32-byte hash value

    Example:
        >>> len(keccak256_bytes(b"hello"))
        32
    """
    hasher = keccak.new(digest_bits=256)
    hasher.update(payload)
    return hasher.digest()


def keccak256_hex(payload: bytes) -> str:
    """
    Calculate Keccak-256 hash value (hexadecimal format).

    Args:
        payload: Bytes to hash

    Returns:
        64-character lowercase hex string without prefix

    Example:
        >>> keccak256_hex(b"hello")
        '1c8aff950685c2ed4bc3174f3472287b56d9517b9c948127319a09a7a36deac8'
    """
    hasher = keccak.new(digest_bits=256)
    hasher.update(payload)
    return hasher.hexdigest()


def double_sha256(payload: bytes) -> bytes:
    """
    Calculate SHA-256(SHA-256(payload)).

    Used for Base58Check checksums on TRON addresses.
    """
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()


def strip_hex_prefix(value: str) -> str:
    """
    Remove an optional 0x or 0X prefix.

    Example:
        >>> strip_hex_prefix("0xABC")
        'ABC'
        >>> strip_hex_prefix("abc")
        'abc'
    """
    if value.startswith("0x") or value.startswith("0X"):
        return value[2:]
    return value


def normalize_hex(value: Optional[str]) -> str:
    """
    Normalize hex string.

    Converts to lowercase and removes 0x prefix.

    Args:
        value: Hex string, may have 0x prefix

    Returns:
        Normalized hex string (lowercase, no prefix),
        returns empty string if input is empty

    Example:
        >>> normalize_hex("0xABC123")
        'abc123'
        >>> normalize_hex(None)
        ''
    """
    if not value:
        return ""
    return strip_hex_prefix(value).lower()


def is_hex(value: str) -> bool:
    """Return True if value is non-empty and every character is a hex digit."""
    return bool(value) and all(ch in HEX_DIGITS for ch in value)
