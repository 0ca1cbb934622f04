"""
Metadata providers

ネットワーク・DEX・戦略ファミリーの読み取り専用テーブル
"""

from .dexes import SUPPORTED_DEXES, is_supported_dex
from .networks import (
    NETWORK_METADATA,
    NetworkMetadata,
    get_network_metadata,
    get_rpc_url,
    get_supported_networks,
    is_supported_network,
)
from .strategy_families import (
    STRATEGY_FAMILIES,
    StrategyFamilyDefinition,
    apply_family_defaults,
    get_required_fields,
    get_strategy_family,
    is_supported_strategy_family,
)

__all__ = [
    # Constants
    "NETWORK_METADATA",
    "STRATEGY_FAMILIES",
    "SUPPORTED_DEXES",
    # Types
    "NetworkMetadata",
    "StrategyFamilyDefinition",
    # Networks
    "get_network_metadata",
    "get_rpc_url",
    "get_supported_networks",
    "is_supported_network",
    # DEX
    "is_supported_dex",
    # Strategy families
    "apply_family_defaults",
    "get_required_fields",
    "get_strategy_family",
    "is_supported_strategy_family",
]
