"""
PayTheFly SDK Chain Configuration

Static per-chain settings used by the payment signer.

Supported chains:
    728126428   TRON Mainnet   (tron, 6 decimals)
    3448148188  TRON Shasta    (tron, 6 decimals)
    56          BSC Mainnet    (evm, 18 decimals)
    97          BSC Testnet    (evm, 18 decimals)

Note:
    CHAIN_CONFIG is a read-only mapping built once at import time.
    Token contract addresses are supplied by the caller, not stored here.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import UnsupportedChainError

DEFAULT_DECIMALS = 18


class ChainKind(str, Enum):
    TRON = "tron"
    EVM = "evm"


@dataclass(frozen=True)
class ChainConfig:
    """
    Settings for one chain.

    Attributes:
        chain_id: Numeric chain ID used in the EIP-712 domain
        kind: Address family of the chain
        decimals: Decimal count of the payment token
        name: Display name
    """

    chain_id: int
    kind: ChainKind
    decimals: int
    name: str = ""

    @property
    def is_tron(self) -> bool:
        return self.kind is ChainKind.TRON


TRON_MAINNET = ChainConfig(728126428, ChainKind.TRON, 6, "TRON Mainnet")
TRON_SHASTA = ChainConfig(3448148188, ChainKind.TRON, 6, "TRON Shasta Testnet")
BSC_MAINNET = ChainConfig(56, ChainKind.EVM, 18, "BSC Mainnet")
BSC_TESTNET = ChainConfig(97, ChainKind.EVM, 18, "BSC Testnet")

CHAIN_CONFIG: Mapping[int, ChainConfig] = MappingProxyType({
    c.chain_id: c for c in (TRON_MAINNET, TRON_SHASTA, BSC_MAINNET, BSC_TESTNET)
})


def _find_chain(chain_id: int) -> Optional[ChainConfig]:
    try:
        return CHAIN_CONFIG.get(int(chain_id))
    except (TypeError, ValueError):
        return None


def get_chain_config(chain_id: int) -> ChainConfig:
    """
    Look up a chain.

    Raises:
        UnsupportedChainError: Chain ID is not configured
    """
    config = _find_chain(chain_id)
    if config is None:
        raise UnsupportedChainError(chain_id)
    return config


def is_tron_chain(chain_id: int) -> bool:
    config = _find_chain(chain_id)
    return config is not None and config.is_tron


def get_decimals(chain_id: int) -> int:
    """
    Get token decimals for a chain.

    Unknown chains fall back to 18 here, while signing on an unknown chain
    raises UnsupportedChainError.
    """
    config = _find_chain(chain_id)
    return config.decimals if config is not None else DEFAULT_DECIMALS
