"""
PayTheFly SDK Exceptions Module

Provides fine-grained exception types for precise error handling by callers.

Exception Hierarchy:
    PayTheFlyError (Base Class)
    ├── ConfigurationError
    │   ├── UnsupportedChainError
    │   ├── InvalidPrivateKeyError
    │   └── KeyNotAvailableError
    ├── DataError
    │   ├── InvalidHexError
    │   ├── InvalidHashError
    │   ├── InvalidAddressError
    │   ├── InvalidBase58Error
    │   ├── ChecksumMismatchError
    │   └── InvalidAmountError
    └── SignatureError
        └── InvalidSignatureError

Example:
    >>> from paythefly.exceptions import UnsupportedChainError, DataError
    >>> try:
    ...     sign_payment(chain_id=999999, ...)
    ... except UnsupportedChainError as e:
    ...     print(f"Chain not configured: {e.details['chain_id']}")
    ... except DataError as e:
    ...     print(f"Bad input: {e.code}")

Note:
    - All exceptions inherit from PayTheFlyError
    - Each exception has code and details attributes
    - Can catch parent exceptions to handle a category of errors
"""

from typing import Optional, Any


class PayTheFlyError(Exception):
    """
    PayTheFly SDK Base Exception.

    Base class for all SDK exceptions, providing unified error code and details mechanism.

    Attributes:
        code: Error code string for programmatic handling
        details: Error details, can be any type

    Args:
        message: Error message
        code: Error code, defaults to "PAYTHEFLY_ERROR"
        details: Error details

    Example:
        >>> raise PayTheFlyError("Something went wrong", code="CUSTOM_ERROR", details={"key": "value"})
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.code = code or "PAYTHEFLY_ERROR"
        self.details = details

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            return f"[{self.code}] {super().__str__()} - {self.details}"
        return f"[{self.code}] {super().__str__()}"


# ============ Configuration Exceptions ============


class ConfigurationError(PayTheFlyError):
    """
    Configuration Error Base Class.

    Raised when the caller supplies configuration the SDK cannot work with.

    Args:
        message: Error message
        details: Error details
    """

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


class UnsupportedChainError(ConfigurationError):
    """
    Unsupported Chain Error.

    Raised when a chain ID is not present in the chain configuration table.

    Attributes:
        chain_id: The rejected chain ID

    Args:
        chain_id: Chain ID that was looked up

    Example:
        >>> raise UnsupportedChainError(999999)
        # [UNSUPPORTED_CHAIN] Unsupported chain ID: 999999
    """

    def __init__(self, chain_id: Any) -> None:
        super().__init__(
            f"Unsupported chain ID: {chain_id}",
            details={"chain_id": chain_id}
        )
        self.code = "UNSUPPORTED_CHAIN"
        self.chain_id = chain_id


class InvalidPrivateKeyError(ConfigurationError):
    """
    Invalid Private Key Error.

    Raised when provided private key format is incorrect.
    The key itself is never included in the message.

    Args:
        reason: Reason for invalidity

    Example:
        >>> raise InvalidPrivateKeyError("Expected 64 hex characters")
    """

    def __init__(self, reason: str = "Invalid format") -> None:
        super().__init__(f"Private key invalid: {reason}")
        self.code = "INVALID_PRIVATE_KEY"


class KeyNotAvailableError(ConfigurationError):
    """
    Key Not Available Error.

    Raised when a key provider has no private key to hand out.

    Args:
        source: Where the key was expected to come from

    Example:
        >>> raise KeyNotAvailableError("env:PAYTHEFLY_PRIVATE_KEY")
    """

    def __init__(self, source: Optional[str] = None) -> None:
        super().__init__(
            "Private key is not configured",
            details={"source": source} if source else None
        )
        self.code = "KEY_NOT_AVAILABLE"


# ============ Data Exceptions ============


class DataError(PayTheFlyError):
    """
    Data Processing Error Base Class.

    Raised when input data format or content is incorrect.
    These errors are never retried and input is never silently coerced.

    Args:
        message: Error message
        details: Error details
    """

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message, "DATA_ERROR", details)


class InvalidHexError(DataError):
    """
    Invalid Hex String Error.

    Args:
        value: Offending value
        reason: What is wrong with it

    Example:
        >>> raise InvalidHexError("0xzz", "non-hex characters")
    """

    def __init__(self, value: str, reason: str = "malformed hex") -> None:
        super().__init__(
            f"Invalid hex string: {reason}",
            details={"value": value[:20] + "..." if len(value) > 20 else value}
        )
        self.code = "INVALID_HEX"


class InvalidHashError(DataError):
    """
    Invalid Hash Format Error.

    Raised when provided hash value format is incorrect.

    Args:
        value: Invalid hash value
        expected_length: Expected byte length

    Example:
        >>> raise InvalidHashError("0x123", expected_length=32)
    """

    def __init__(self, value: str, expected_length: int = 32) -> None:
        super().__init__(
            f"Invalid hash format, expected {expected_length} bytes",
            details={"value": value[:20] + "..." if len(value) > 20 else value}
        )
        self.code = "INVALID_HASH"


class InvalidAddressError(DataError):
    """
    Invalid Address Format Error.

    Raised when provided blockchain address format is incorrect.

    Args:
        address: Invalid address
        expected_format: Description of expected format

    Example:
        >>> raise InvalidAddressError("invalid_addr", "TRON base58 or 20 bytes hex")
    """

    def __init__(
        self,
        address: str,
        expected_format: str = "20 bytes hex",
    ) -> None:
        super().__init__(
            f"Invalid address format: {address}",
            details={"address": address, "expected": expected_format}
        )
        self.code = "INVALID_ADDRESS"


class InvalidBase58Error(DataError):
    """
    Invalid Base58 Error.

    Raised when a string contains a character outside the Base58 alphabet.

    Args:
        value: Offending string
        position: Index of the first bad character

    Example:
        >>> raise InvalidBase58Error("T0abc", 1)
    """

    def __init__(self, value: str, position: Optional[int] = None) -> None:
        super().__init__(
            "Invalid Base58 string",
            details={"value": value, "position": position}
        )
        self.code = "INVALID_BASE58"


class ChecksumMismatchError(DataError):
    """
    Checksum Mismatch Error.

    Raised when the trailing 4 bytes of a Base58Check string do not match
    the double SHA-256 checksum of its payload.

    Args:
        expected: Computed checksum (hex)
        actual: Checksum found in the data (hex)

    Example:
        >>> raise ChecksumMismatchError("a1b2c3d4", "00000000")
    """

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(
            "Base58Check checksum mismatch",
            details={"expected": expected, "actual": actual}
        )
        self.code = "CHECKSUM_MISMATCH"


class InvalidAmountError(DataError):
    """
    Invalid Amount Error.

    Raised when a numeric string (amount, deadline, chain field) is
    negative, empty or not a plain decimal number.

    Args:
        value: Offending value
        reason: What is wrong with it

    Example:
        >>> raise InvalidAmountError("-1", "negative values are not allowed")
    """

    def __init__(self, value: Any, reason: str = "not a decimal number") -> None:
        super().__init__(
            f"Invalid amount: {reason}",
            details={"value": value[:20] + "..." if isinstance(value, str) and len(value) > 20 else value}
        )
        self.code = "INVALID_AMOUNT"


# ============ Signature Exceptions ============


class SignatureError(PayTheFlyError):
    """
    Signature Error Base Class.

    Raised when signature operation fails.

    Args:
        message: Error message
        details: Error details
    """

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message, "SIGNATURE_ERROR", details)


class InvalidSignatureError(SignatureError):
    """
    Invalid Signature Error.

    Raised when a signature cannot be parsed or recovered.

    Args:
        reason: Invalid reason

    Example:
        >>> raise InvalidSignatureError("Signature length mismatch")
    """

    def __init__(self, reason: str = "Signature verification failed") -> None:
        super().__init__(reason)
        self.code = "INVALID_SIGNATURE"
