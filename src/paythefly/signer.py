"""
PayTheFly SDK Signer Module

Signs PayTheFlyPro payment requests with EIP-712 typed data.

Functions:
    sign_payment: Sign a payment request end-to-end
    sign_hash: Canonical (low-s) secp256k1 signature of a 32-byte digest
    recover_signer: Recover the signing address from a digest and signature
    get_deadline: Current unix time plus a validity window

Classes:
    PaymentParams: Inputs of one signing operation
    SignedPayment: Signed request plus the payment link fields
    PaymentSigner: Signer bound to a KeyProvider and SignerConfig

Example:
    >>> from paythefly.signer import sign_payment
    >>> signature = sign_payment(
    ...     chain_id=56,
    ...     project_id="p1",
    ...     contract_address="0x...",
    ...     token_address="0x55d398326f99059fF775485246999027B3197955",
    ...     amount="10",
    ...     serial_no="PTF-1",
    ...     deadline="1704067200",
    ...     private_key="your_hex_private_key",
    ... )

Note:
    - v is the legacy 27/28 recovery byte, not EIP-155 adjusted; the
      PayTheFlyPro contract verifies exactly this form
    - On TRON chains, contract and token addresses are converted to EVM form
      before hashing
"""

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union
from urllib.parse import urlencode

from tronpy.exceptions import BadSignature
from tronpy.keys import PrivateKey, Signature

from .bigint import check_uint256, hex_pad32, hex_to_bytes, int_to_hex, parse_decimal
from .chains import get_chain_config, get_decimals, is_tron_chain
from .config import SignerConfig
from .eip712 import domain_separator, payment_struct_hash, typed_data_hash
from .exceptions import InvalidHashError, InvalidSignatureError
from .key_provider import KeyProvider
from .keys import (
    derive_evm_address,
    derive_tron_address,
    load_private_key,
    public_key_to_address,
    to_checksum_address,
    tron_to_evm_address,
)
from .units import to_smallest_unit
from .utils import is_hex, normalize_hex

logger = logging.getLogger("paythefly.signer")

SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
LEGACY_V_OFFSET = 27
SIGNATURE_HEX_LENGTH = 130

__all__ = [
    "PaymentParams",
    "SignedPayment",
    "PaymentSigner",
    "sign_payment",
    "sign_hash",
    "split_signature",
    "recover_signer",
    "get_deadline",
    "generate_serial_no",
    "is_tron_chain",
    "get_decimals",
]


@dataclass(frozen=True)
class PaymentParams:
    """
    Inputs of one payment signature.

    Attributes:
        chain_id: Numeric chain ID (must be configured)
        project_id: PayTheFly project ID
        contract_address: PayTheFlyPro contract, TRON or EVM form per chain
        token_address: Payment token contract, TRON or EVM form per chain
        amount: Human decimal amount, e.g. "10.5"
        serial_no: Unique order serial number
        deadline: Unix timestamp after which the payment is rejected
        private_key: Signing key (64 hex chars, optional 0x prefix)
    """

    chain_id: int
    project_id: str
    contract_address: str
    token_address: str
    amount: str
    serial_no: str
    deadline: Union[str, int]
    private_key: str

    def __repr__(self) -> str:
        return (
            f"PaymentParams(chain_id={self.chain_id}, project_id={self.project_id!r}, "
            f"amount={self.amount!r}, serial_no={self.serial_no!r}, private_key=***)"
        )


@dataclass(frozen=True)
class SignedPayment:
    """
    A signed payment request.

    Attributes:
        chain_id: Chain ID the signature is valid on
        project_id: Project ID
        token_address: Token address as supplied (chain-native form)
        amount: Human decimal amount as supplied
        serial_no: Serial number
        deadline: Deadline timestamp (decimal string)
        signature: 0x-prefixed 65-byte signature
    """

    chain_id: int
    project_id: str
    token_address: str
    amount: str
    serial_no: str
    deadline: str
    signature: str

    def to_query(self) -> Dict[str, str]:
        """Return the query fields expected by the PayTheFly payment page."""
        return {
            "projectId": self.project_id,
            "chainId": str(self.chain_id),
            "token": self.token_address,
            "amount": self.amount,
            "serialNo": self.serial_no,
            "deadline": self.deadline,
            "signature": self.signature,
        }

    def payment_url(self, base_url: str, **extra: str) -> str:
        """
        Build the payment link.

        Args:
            base_url: Payment page URL
            **extra: Additional query fields such as brand or redirect

        Example:
            >>> signed.payment_url("https://pro.paythefly.com/pay", brand="Shop")
            'https://pro.paythefly.com/pay?projectId=...&brand=Shop'
        """
        query = self.to_query()
        query.update({k: v for k, v in extra.items() if v is not None})
        separator = "&" if "?" in base_url else "?"
        return f"{base_url}{separator}{urlencode(query)}"


def _digest_bytes(digest: str) -> bytes:
    body = normalize_hex(digest)
    if len(body) != 64 or not is_hex(body):
        raise InvalidHashError(digest)
    return hex_to_bytes(body)


def sign_hash(digest: str, private_key: str) -> str:
    """
    Sign a 32-byte digest with a private key.

    Signatures are canonical: s is always in the lower half of the curve
    order, with the recovery id flipped accordingly.

    Args:
        digest: 32-byte hash as hex (optional 0x prefix)
        private_key: Private key (with or without 0x prefix)

    Returns:
        Signature as 0x-prefixed hex string (r + s + v), v in {27, 28}

    Raises:
        InvalidHashError: Digest is not 32 bytes
        InvalidPrivateKeyError: Malformed private key
    """
    return _sign_digest(_digest_bytes(digest), load_private_key(private_key))


def _sign_digest(digest: bytes, key: PrivateKey) -> str:
    raw = key.sign_msg_hash(digest).hex()
    r = int(raw[:64], 16)
    s = int(raw[64:128], 16)
    recovery = int(raw[128:130], 16)
    if recovery >= LEGACY_V_OFFSET:
        recovery -= LEGACY_V_OFFSET
    if s > SECP256K1_N // 2:
        s = SECP256K1_N - s
        recovery ^= 1

    return "0x" + hex_pad32(int_to_hex(r)) + hex_pad32(int_to_hex(s)) + int_to_hex(recovery + LEGACY_V_OFFSET)


def split_signature(signature: str) -> Tuple[str, str, int]:
    """
    Split a 65-byte signature into (r, s, v).

    Returns:
        r and s as 64 hex characters each, v as an int

    Raises:
        InvalidSignatureError: Wrong length or non-hex characters
    """
    body = normalize_hex(signature)
    if len(body) != SIGNATURE_HEX_LENGTH or not is_hex(body):
        raise InvalidSignatureError("Expected 65 bytes of hex")
    return body[:64], body[64:128], int(body[128:], 16)


def recover_signer(digest: str, signature: str) -> str:
    """
    Recover the EIP-55 address that produced a signature over digest.

    Raises:
        InvalidHashError: Digest is not 32 bytes
        InvalidSignatureError: Signature cannot be parsed or recovered
    """
    digest_bytes = _digest_bytes(digest)
    r, s, v = split_signature(signature)
    if v >= LEGACY_V_OFFSET:
        v -= LEGACY_V_OFFSET
    if v not in (0, 1):
        raise InvalidSignatureError(f"Unexpected recovery id: {v}")
    try:
        public_key = Signature(bytes.fromhex(r + s) + bytes([v])).recover_public_key_from_msg_hash(digest_bytes)
    except (BadSignature, ValueError) as exc:
        raise InvalidSignatureError(f"Recovery failed: {exc}") from exc
    return to_checksum_address(public_key_to_address(public_key.to_bytes()))


def sign_payment(params: Optional[PaymentParams] = None, **kwargs) -> str:
    """
    Sign a payment request.

    Accepts either a PaymentParams instance or its fields as keyword arguments.

    Returns:
        The signature as 0x-prefixed hex string (130 hex chars)

    Raises:
        UnsupportedChainError: Chain ID is not configured
        InvalidAmountError: Malformed amount or deadline, or one beyond uint256
        InvalidAddressError: Malformed contract or token address
        ChecksumMismatchError: TRON address checksum does not verify
        InvalidPrivateKeyError: Malformed private key
    """
    if params is None:
        params = PaymentParams(**kwargs)
    elif kwargs:
        raise TypeError("Pass either PaymentParams or keyword arguments, not both")

    config = get_chain_config(params.chain_id)

    amount = check_uint256(to_smallest_unit(params.amount, config.decimals))
    deadline = check_uint256(str(parse_decimal(str(params.deadline))))
    key = load_private_key(params.private_key)

    contract_address = params.contract_address
    token_address = params.token_address
    if config.is_tron:
        contract_address = tron_to_evm_address(contract_address)
        token_address = tron_to_evm_address(token_address)

    domain_sep = domain_separator(config.chain_id, contract_address)
    struct_hash = payment_struct_hash(
        params.project_id,
        token_address,
        amount,
        params.serial_no,
        deadline,
    )
    message_hash = typed_data_hash(domain_sep, struct_hash)

    logger.debug(
        "sign_payment: chain_id=%d, project_id=%s, serial_no=%s, digest=%s",
        config.chain_id,
        params.project_id,
        params.serial_no,
        message_hash[:18],
    )
    return _sign_digest(hex_to_bytes(message_hash), key)


def get_deadline(duration_seconds: int = 1800, clock: Callable[[], float] = time.time) -> str:
    """
    Get the deadline timestamp (current time + duration).

    Args:
        duration_seconds: Duration in seconds (default 30 minutes)
        clock: Time source returning unix seconds

    Returns:
        Unix timestamp as decimal string
    """
    return str(int(clock()) + int(duration_seconds))


def generate_serial_no(prefix: str = "PTF-") -> str:
    """Generate a unique serial number: prefix followed by a random UUID4."""
    return f"{prefix}{uuid.uuid4()}"


class PaymentSigner:
    """
    Payment signer bound to a key provider.

    Keeps raw keys out of host code: the key is fetched from the provider for
    each signature and never stored on the instance.

    Args:
        key_provider: Source of the signing key
        config: Signer configuration, defaults to SignerConfig()
        clock: Time source for deadlines, defaults to time.time

    Example:
        >>> signer = PaymentSigner(EnvKeyProvider())
        >>> signed = signer.sign(
        ...     chain_id=728126428,
        ...     project_id="p1",
        ...     contract_address="T...",
        ...     token_address="TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t",
        ...     amount="10",
        ... )
        >>> signed.payment_url(signer.config.pay_url)
    """

    def __init__(
        self,
        key_provider: KeyProvider,
        config: Optional[SignerConfig] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.key_provider = key_provider
        self.config = config or SignerConfig()
        self._clock = clock

    def address(self, chain_id: Optional[int] = None) -> str:
        """
        Get the signer's address.

        Returns the TRON form for TRON chains, EVM form otherwise.
        """
        key = self.key_provider.get_private_key()
        if chain_id is not None and is_tron_chain(chain_id):
            return derive_tron_address(key)
        return derive_evm_address(key)

    def sign(
        self,
        chain_id: int,
        project_id: str,
        contract_address: str,
        token_address: str,
        amount: str,
        serial_no: Optional[str] = None,
        deadline: Optional[Union[str, int]] = None,
    ) -> SignedPayment:
        """
        Sign a payment, filling in serial number and deadline when omitted.

        Raises:
            KeyNotAvailableError: Provider has no key
            UnsupportedChainError: Chain ID is not configured
        """
        get_chain_config(chain_id)
        if serial_no is None:
            serial_no = generate_serial_no(self.config.serial_prefix)
        if deadline is None:
            deadline = get_deadline(self.config.deadline_seconds, self._clock)

        params = PaymentParams(
            chain_id=chain_id,
            project_id=project_id,
            contract_address=contract_address,
            token_address=token_address,
            amount=amount,
            serial_no=serial_no,
            deadline=str(deadline),
            private_key=self.key_provider.get_private_key(),
        )
        signature = sign_payment(params)
        logger.info("Payment signed: chain_id=%s, serial_no=%s", chain_id, serial_no)
        return SignedPayment(
            chain_id=int(chain_id),
            project_id=project_id,
            token_address=token_address,
            amount=amount,
            serial_no=serial_no,
            deadline=str(deadline),
            signature=signature,
        )
