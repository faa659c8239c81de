from .chain import Chain
from .chain_list import BaseChainList, ChainList
from .chains import Chains
from .enums import ChainStatus
from .exceptions import (
    ChainException,
    ValidationError,
    NotFoundError,
    UnsupportedChainError,
)
from .factory import build_chains, build_chain_list, create_default_chains, default_chains


__all__ = [
    "Chain",
    "BaseChainList",
    "ChainList",
    "Chains",
    "ChainStatus",
    "ChainException",
    "ValidationError",
    "NotFoundError",
    "UnsupportedChainError",
    "build_chains",
    "build_chain_list",
    "create_default_chains",
    "default_chains",
]
