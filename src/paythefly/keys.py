"""
PayTheFly SDK Keys Module

secp256k1 private key handling and address derivation for EVM and TRON.
One private key controls the same 20-byte account on both chain families;
only the textual form differs.

Functions:
    generate_private_key: New random key (64 hex chars)
    validate_private_key: Syntax check for a private key
    derive_evm_address: EIP-55 checksummed 0x address
    derive_tron_address: Base58Check T-address
    evm_to_tron_address / tron_to_evm_address: Representation conversion
    to_checksum_address: EIP-55 casing

Example:
    >>> from paythefly.keys import derive_evm_address
    >>> derive_evm_address("ac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80")
    '0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266'

Note:
    - The elliptic-curve math is delegated to tronpy.keys
    - Private keys are never logged or placed in exception messages
"""

from tronpy.exceptions import BadKey
from tronpy.keys import PrivateKey

from . import base58
from .exceptions import (
    ChecksumMismatchError,
    InvalidAddressError,
    InvalidBase58Error,
    InvalidPrivateKeyError,
)
from .utils import is_hex, keccak256_bytes, keccak256_hex, normalize_hex, strip_hex_prefix

TRON_ADDRESS_PREFIX = b"\x41"
TRON_ADDRESS_LENGTH = 34
EVM_ADDRESS_HEX_LENGTH = 40
PRIVATE_KEY_HEX_LENGTH = 64


def generate_private_key() -> str:
    """
    Generate a new random private key.

    Returns:
        Hex-encoded private key (64 chars, no 0x prefix)
    """
    return PrivateKey.random().hex()


def validate_private_key(key: str) -> bool:
    """
    Validate a private key format.

    Args:
        key: Private key with or without 0x prefix

    Returns:
        True if the key is exactly 64 hex digits
    """
    if not isinstance(key, str):
        return False
    body = strip_hex_prefix(key)
    return len(body) == PRIVATE_KEY_HEX_LENGTH and is_hex(body)


def normalize_private_key(key: str) -> str:
    """
    Return the canonical lowercase, unprefixed form of a private key.

    Raises:
        InvalidPrivateKeyError: Key is not 64 hex digits
    """
    if not validate_private_key(key):
        raise InvalidPrivateKeyError(f"Expected {PRIVATE_KEY_HEX_LENGTH} hex characters")
    return strip_hex_prefix(key).lower()


def load_private_key(key: str) -> PrivateKey:
    """
    Build a tronpy PrivateKey from a hex string.

    Raises:
        InvalidPrivateKeyError: Malformed key or scalar outside the curve order
    """
    raw = bytes.fromhex(normalize_private_key(key))
    try:
        return PrivateKey(raw)
    except (BadKey, ValueError) as exc:
        raise InvalidPrivateKeyError("Scalar outside secp256k1 range") from exc


def derive_public_key(key: str) -> bytes:
    """Return the 64-byte uncompressed public key X||Y (no 0x04 marker)."""
    return load_private_key(key).public_key.to_bytes()


def public_key_to_address(public_key: bytes) -> str:
    """
    Hash a 64-byte public key into a lowercase 0x address.

    Raises:
        InvalidAddressError: Public key is not 64 bytes
    """
    if len(public_key) == 65 and public_key[0] == 4:
        public_key = public_key[1:]
    if len(public_key) != 64:
        raise InvalidAddressError(public_key.hex(), "64-byte uncompressed public key")
    return "0x" + keccak256_bytes(public_key)[-20:].hex()


def to_checksum_address(address: str) -> str:
    """
    Convert an address to EIP-55 checksum format.

    A nibble is upper-cased when the matching nibble of
    keccak256(lowercase address) is 8 or more.

    Raises:
        InvalidAddressError: Not 20 bytes of hex
    """
    lower = _evm_body(address)
    digest = keccak256_hex(lower.encode("ascii"))
    return "0x" + "".join(
        ch.upper() if int(digest[i], 16) >= 8 else ch
        for i, ch in enumerate(lower)
    )


def derive_evm_address(key: str) -> str:
    """
    Derive EVM address from private key.

    Returns:
        EVM address with 0x prefix and EIP-55 checksum
    """
    return to_checksum_address(public_key_to_address(derive_public_key(key)))


def derive_tron_address(key: str) -> str:
    """
    Derive TRON address from private key.

    Returns:
        TRON address starting with 'T'
    """
    return evm_to_tron_address(public_key_to_address(derive_public_key(key)))


def evm_to_tron_address(evm_address: str) -> str:
    """
    Convert EVM address to TRON address.

    Raises:
        InvalidAddressError: Not 20 bytes of hex
    """
    payload = TRON_ADDRESS_PREFIX + bytes.fromhex(_evm_body(evm_address))
    return base58.encode_check(payload)


def tron_to_evm_address(tron_address: str) -> str:
    """
    Convert TRON address to EVM format.

    A value that is already 0x-prefixed is returned unchanged.

    Returns:
        Lowercase EVM address with 0x prefix

    Raises:
        InvalidAddressError: Malformed Base58 or wrong payload
        ChecksumMismatchError: Base58Check checksum does not verify
    """
    if tron_address.startswith("0x"):
        return tron_address
    try:
        payload = base58.decode_check(tron_address)
    except InvalidBase58Error as exc:
        raise InvalidAddressError(tron_address, "TRON base58check address") from exc
    if len(payload) != 21 or payload[:1] != TRON_ADDRESS_PREFIX:
        raise InvalidAddressError(tron_address, "TRON base58check address")
    return "0x" + payload[1:].hex()


def is_evm_address(value: str) -> bool:
    """True for 0x-prefixed 20-byte hex, regardless of casing."""
    if not isinstance(value, str) or not value.startswith(("0x", "0X")):
        return False
    body = value[2:]
    return len(body) == EVM_ADDRESS_HEX_LENGTH and is_hex(body)


def is_tron_address(value: str) -> bool:
    """True for a well-formed T-address with a valid checksum."""
    if not isinstance(value, str) or len(value) != TRON_ADDRESS_LENGTH or not value.startswith("T"):
        return False
    try:
        tron_to_evm_address(value)
    except (InvalidAddressError, ChecksumMismatchError):
        return False
    return True


def addresses_equal(a: str, b: str) -> bool:
    """Compare two EVM addresses by identity (case-insensitive)."""
    return _evm_body(a) == _evm_body(b)


def _evm_body(address: str) -> str:
    body = normalize_hex(address)
    if len(body) != EVM_ADDRESS_HEX_LENGTH or not is_hex(body):
        raise InvalidAddressError(address, "0x-prefixed 20 bytes hex")
    return body
