"""
PayTheFly SDK Key Provider Module

Pluggable source for the signing key, so hosts decide how keys are stored.

Classes:
    KeyProvider: Abstract base class for key providers
    StaticKeyProvider: Key held in memory
    EnvKeyProvider: Key read from an environment variable on each call

Example:
    >>> from paythefly.key_provider import EnvKeyProvider
    >>> provider = EnvKeyProvider()
    >>> key = provider.get_private_key()

Note:
    - At-rest protection is the host's concern; implement KeyProvider to
      decrypt from a vault, KMS or database
    - Providers return normalized keys (lowercase, no 0x prefix)
"""

import os
from typing import Optional

from .config import DEFAULT_PRIVATE_KEY_ENV
from .exceptions import KeyNotAvailableError
from .keys import normalize_private_key


class KeyProvider:
    """
    Abstract base class for key providers.

    Example:
        >>> class VaultKeyProvider(KeyProvider):
        ...     def get_private_key(self) -> str:
        ...         return vault.read("paythefly/signing-key")
    """

    def get_private_key(self) -> str:
        """
        Return the signing key.

        Raises:
            KeyNotAvailableError: No key configured
            InvalidPrivateKeyError: Configured key is malformed
            NotImplementedError: Subclasses must implement this method
        """
        raise NotImplementedError


class StaticKeyProvider(KeyProvider):
    """Key provider holding a key in memory."""

    def __init__(self, private_key: Optional[str]) -> None:
        self._private_key = private_key

    def get_private_key(self) -> str:
        if not self._private_key:
            raise KeyNotAvailableError("static")
        return normalize_private_key(self._private_key)

    def __repr__(self) -> str:
        return "StaticKeyProvider(private_key=***)"


class EnvKeyProvider(KeyProvider):
    """
    Key provider reading an environment variable.

    Args:
        variable: Environment variable name, default PAYTHEFLY_PRIVATE_KEY
    """

    def __init__(self, variable: str = DEFAULT_PRIVATE_KEY_ENV) -> None:
        self.variable = variable

    def get_private_key(self) -> str:
        value = os.getenv(self.variable)
        if not value:
            raise KeyNotAvailableError(f"env:{self.variable}")
        return normalize_private_key(value.strip())
