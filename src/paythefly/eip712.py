"""
PayTheFly SDK EIP-712 Module

Typed-data hashing for the PayTheFlyPro PaymentRequest struct.

    digest = keccak256(0x1901 || domainSeparator || hashStruct(PaymentRequest))

Functions:
    domain_separator: Hash of the EIP712Domain for a chain and contract
    payment_struct_hash: Hash of one PaymentRequest
    typed_data_hash: Final digest to sign
    payment_typed_data: Equivalent EIP-712 JSON document for wallets/verifiers

Note:
    - Every encoded field is one 32-byte word (64 hex characters), left-zero-padded
    - string members are hashed, never inlined
    - The domain type hash is a fixed constant while the PaymentRequest type
      hash is computed from PAYMENT_REQUEST_TYPE on every call
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from .bigint import WORD_HEX_LENGTH, encode_uint256, hex_pad32, hex_to_bytes
from .exceptions import InvalidAddressError, InvalidHashError
from .keys import to_checksum_address
from .utils import is_hex, keccak256_hex, normalize_hex

DOMAIN_NAME = "PayTheFlyPro"
DOMAIN_VERSION = "1"

# keccak256("EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)")
DOMAIN_TYPE_HASH = "8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"

PAYMENT_REQUEST_TYPE = (
    "PaymentRequest(string projectId,address token,uint256 amount,"
    "string serialNo,uint256 deadline)"
)

TYPED_DATA_PREFIX = "1901"

EIP712_DOMAIN_FIELDS = (
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
)

PAYMENT_REQUEST_FIELDS = (
    {"name": "projectId", "type": "string"},
    {"name": "token", "type": "address"},
    {"name": "amount", "type": "uint256"},
    {"name": "serialNo", "type": "string"},
    {"name": "deadline", "type": "uint256"},
)


@dataclass(frozen=True)
class PaymentRequest:
    """
    The PaymentRequest struct as signed.

    Attributes:
        project_id: PayTheFly project identifier
        token: EVM-form token contract address
        amount: Amount in the token's smallest unit (decimal string)
        serial_no: Merchant order serial number
        deadline: Unix timestamp (decimal string)
    """

    project_id: str
    token: str
    amount: str
    serial_no: str
    deadline: str

    def struct_hash(self) -> str:
        return payment_struct_hash(
            self.project_id, self.token, self.amount, self.serial_no, self.deadline
        )


def keccak256_string(text: str) -> str:
    """Keccak-256 of the UTF-8 bytes of text, as 64 hex characters."""
    return keccak256_hex(text.encode("utf-8"))


def payment_type_hash() -> str:
    return keccak256_string(PAYMENT_REQUEST_TYPE)


def encode_address(address: str) -> str:
    """
    Encode an EVM address as a 32-byte word.

    Raises:
        InvalidAddressError: Not 20 bytes of hex after stripping the prefix
    """
    body = normalize_hex(address)
    if len(body) != 40 or not is_hex(body):
        raise InvalidAddressError(address, "0x-prefixed 20 bytes hex")
    return hex_pad32(body)


def _keccak_words(*words: str) -> str:
    return keccak256_hex(hex_to_bytes("".join(words)))


def _check_word(value: str) -> str:
    word = normalize_hex(value)
    if len(word) != WORD_HEX_LENGTH or not is_hex(word):
        raise InvalidHashError(value)
    return word


def domain_separator(chain_id: Union[int, str], contract_address: str) -> str:
    """
    Compute the EIP-712 domain separator.

    Args:
        chain_id: Numeric chain ID
        contract_address: Verifying contract, EVM form (0x-prefixed)

    Returns:
        32-byte hash as 64 hex characters
    """
    return _keccak_words(
        DOMAIN_TYPE_HASH,
        keccak256_string(DOMAIN_NAME),
        keccak256_string(DOMAIN_VERSION),
        encode_uint256(str(chain_id)),
        encode_address(contract_address),
    )


def payment_struct_hash(
    project_id: str,
    token: str,
    amount: str,
    serial_no: str,
    deadline: str,
) -> str:
    """
    Compute hashStruct(PaymentRequest).

    Args:
        project_id: Project ID string
        token: Token contract address, EVM form
        amount: Amount in smallest unit (decimal string)
        serial_no: Serial number string
        deadline: Deadline timestamp (decimal string)

    Returns:
        32-byte hash as 64 hex characters

    Raises:
        InvalidAddressError: Malformed token address
        InvalidAmountError: amount or deadline is not an unsigned integer string
    """
    return _keccak_words(
        payment_type_hash(),
        keccak256_string(project_id),
        encode_address(token),
        encode_uint256(str(amount)),
        keccak256_string(serial_no),
        encode_uint256(str(deadline)),
    )


def typed_data_hash(domain_sep: str, struct_hash: str) -> str:
    """
    Compute the final digest: keccak256(0x1901 || domainSeparator || structHash).

    Raises:
        InvalidHashError: Either input is not exactly 32 bytes of hex
    """
    return _keccak_words(TYPED_DATA_PREFIX, _check_word(domain_sep), _check_word(struct_hash))


def payment_typed_data(
    chain_id: int,
    contract_address: str,
    request: PaymentRequest,
) -> Dict[str, Any]:
    """
    Build the EIP-712 JSON document that hashes to the same digest.

    Useful for wallets (eth_signTypedData_v4) and independent verifiers.
    Addresses must already be in EVM form.
    """
    return {
        "types": {
            "EIP712Domain": [dict(f) for f in EIP712_DOMAIN_FIELDS],
            "PaymentRequest": [dict(f) for f in PAYMENT_REQUEST_FIELDS],
        },
        "primaryType": "PaymentRequest",
        "domain": {
            "name": DOMAIN_NAME,
            "version": DOMAIN_VERSION,
            "chainId": int(chain_id),
            "verifyingContract": to_checksum_address(contract_address),
        },
        "message": {
            "projectId": request.project_id,
            "token": to_checksum_address(request.token),
            "amount": int(request.amount),
            "serialNo": request.serial_no,
            "deadline": int(request.deadline),
        },
    }
