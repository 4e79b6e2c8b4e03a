"""
PayTheFly Signer SDK

Python SDK for PayTheFlyPro payment signing, supporting:
- EIP-712 PaymentRequest signatures for TRON and BSC
- EVM (EIP-55) and TRON (Base58Check) address derivation from one key
- Exact decimal to smallest-unit conversion

Quick Start:
    >>> from paythefly import PaymentSigner, StaticKeyProvider
    >>> signer = PaymentSigner(StaticKeyProvider("your_hex_private_key"))
    >>> signed = signer.sign(
    ...     chain_id=56,
    ...     project_id="p1",
    ...     contract_address="0x...",
    ...     token_address="0x55d398326f99059fF775485246999027B3197955",
    ...     amount="10",
    ... )
    >>> signed.signature
"""

from .chains import (
    CHAIN_CONFIG,
    ChainConfig,
    ChainKind,
    get_chain_config,
    get_decimals,
    is_tron_chain,
)
from .config import SignerConfig, load_env
from .eip712 import (
    PaymentRequest,
    domain_separator,
    payment_struct_hash,
    payment_typed_data,
    typed_data_hash,
)
from .exceptions import (
    PayTheFlyError,
    ConfigurationError,
    UnsupportedChainError,
    InvalidPrivateKeyError,
    KeyNotAvailableError,
    DataError,
    InvalidHexError,
    InvalidHashError,
    InvalidAddressError,
    InvalidBase58Error,
    ChecksumMismatchError,
    InvalidAmountError,
    SignatureError,
    InvalidSignatureError,
)
from .key_provider import EnvKeyProvider, KeyProvider, StaticKeyProvider
from .keys import (
    addresses_equal,
    derive_evm_address,
    derive_tron_address,
    evm_to_tron_address,
    generate_private_key,
    is_evm_address,
    is_tron_address,
    to_checksum_address,
    tron_to_evm_address,
    validate_private_key,
)
from .signer import (
    PaymentParams,
    PaymentSigner,
    SignedPayment,
    generate_serial_no,
    get_deadline,
    recover_signer,
    sign_hash,
    sign_payment,
    split_signature,
)
from .units import to_smallest_unit

__version__ = "0.1.0"

__all__ = [
    # Signing
    "PaymentParams",
    "PaymentSigner",
    "SignedPayment",
    "sign_payment",
    "sign_hash",
    "split_signature",
    "recover_signer",
    "get_deadline",
    "generate_serial_no",
    # Chains
    "CHAIN_CONFIG",
    "ChainConfig",
    "ChainKind",
    "get_chain_config",
    "get_decimals",
    "is_tron_chain",
    # EIP-712
    "PaymentRequest",
    "domain_separator",
    "payment_struct_hash",
    "payment_typed_data",
    "typed_data_hash",
    # Keys
    "addresses_equal",
    "derive_evm_address",
    "derive_tron_address",
    "evm_to_tron_address",
    "generate_private_key",
    "is_evm_address",
    "is_tron_address",
    "to_checksum_address",
    "tron_to_evm_address",
    "validate_private_key",
    # Key providers / config
    "KeyProvider",
    "StaticKeyProvider",
    "EnvKeyProvider",
    "SignerConfig",
    "load_env",
    # Units
    "to_smallest_unit",
    # Exceptions
    "PayTheFlyError",
    "ConfigurationError",
    "UnsupportedChainError",
    "InvalidPrivateKeyError",
    "KeyNotAvailableError",
    "DataError",
    "InvalidHexError",
    "InvalidHashError",
    "InvalidAddressError",
    "InvalidBase58Error",
    "ChecksumMismatchError",
    "InvalidAmountError",
    "SignatureError",
    "InvalidSignatureError",
]
