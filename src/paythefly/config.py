"""
PayTheFly SDK Configuration

Environment Variables:
    PAYTHEFLY_PRIVATE_KEY: Signing key used by EnvKeyProvider
    PAYTHEFLY_DEADLINE_SECONDS: Payment validity window, default 1800
    PAYTHEFLY_SERIAL_PREFIX: Serial number prefix, default "PTF-"
    PAYTHEFLY_PAY_URL: Payment page base URL

Example:
    >>> from paythefly.config import SignerConfig, load_env
    >>> load_env()
    >>> config = SignerConfig.from_env()
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError

DEFAULT_DEADLINE_SECONDS = 1800
DEFAULT_SERIAL_PREFIX = "PTF-"
DEFAULT_PAY_URL = "https://pro.paythefly.com/pay"
DEFAULT_PRIVATE_KEY_ENV = "PAYTHEFLY_PRIVATE_KEY"


@dataclass(frozen=True)
class SignerConfig:
    """
    Payment signer configuration.

    Attributes:
        deadline_seconds: Validity window added to the current time
        serial_prefix: Prefix for generated serial numbers
        pay_url: Base URL of the hosted payment page
        private_key_env: Environment variable holding the signing key
    """

    deadline_seconds: int = DEFAULT_DEADLINE_SECONDS
    serial_prefix: str = DEFAULT_SERIAL_PREFIX
    pay_url: str = DEFAULT_PAY_URL
    private_key_env: str = DEFAULT_PRIVATE_KEY_ENV

    @classmethod
    def from_env(cls) -> "SignerConfig":
        """
        Build a config from PAYTHEFLY_* environment variables.

        Raises:
            ConfigurationError: PAYTHEFLY_DEADLINE_SECONDS is not a positive integer
        """
        raw_deadline = os.getenv("PAYTHEFLY_DEADLINE_SECONDS", str(DEFAULT_DEADLINE_SECONDS))
        try:
            deadline_seconds = int(raw_deadline)
        except ValueError:
            deadline_seconds = -1
        if deadline_seconds <= 0:
            raise ConfigurationError(
                "PAYTHEFLY_DEADLINE_SECONDS must be a positive integer",
                details={"value": raw_deadline},
            )
        return cls(
            deadline_seconds=deadline_seconds,
            serial_prefix=os.getenv("PAYTHEFLY_SERIAL_PREFIX", DEFAULT_SERIAL_PREFIX),
            pay_url=os.getenv("PAYTHEFLY_PAY_URL", DEFAULT_PAY_URL),
        )


def load_env(path: Optional[Union[str, Path]] = None) -> bool:
    """
    Load a .env file into the process environment.

    Without a path, the nearest .env above the working directory is used.
    Existing variables are not overridden. Returns True if a file was loaded.
    """
    if path is None:
        path = find_dotenv(usecwd=True)
        if not path:
            return False
    return load_dotenv(path)
