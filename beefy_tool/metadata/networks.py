"""
ネットワークメタデータ

対応ネットワーク（Ethereum, Optimism, Arbitrum, Base）の
チェーンID・RPC環境変数キー・推奨フォークブロックを管理する
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkMetadata:
    """
    ネットワーク定義

    Attributes:
        chain_id: チェーンID
        rpc_env_var: RPC URL を保持する環境変数名
        fork_block: 推奨フォークブロック番号（任意）
    """

    chain_id: int
    rpc_env_var: str
    fork_block: int | None = None


NETWORK_METADATA: dict[str, NetworkMetadata] = {
    "mainnet": NetworkMetadata(chain_id=1, rpc_env_var="MAINNET_RPC_URL"),
    "optimism": NetworkMetadata(chain_id=10, rpc_env_var="OPTIMISM_RPC_URL"),
    "arbitrum": NetworkMetadata(chain_id=42161, rpc_env_var="ARBITRUM_RPC_URL"),
    "base": NetworkMetadata(chain_id=8453, rpc_env_var="BASE_RPC_URL"),
}


def is_supported_network(network: object) -> bool:
    """ネットワークが対応済みか判定"""
    return isinstance(network, str) and network in NETWORK_METADATA


def get_supported_networks() -> list[str]:
    """対応ネットワーク一覧（定義順）"""
    return list(NETWORK_METADATA)


def get_network_metadata(network: str) -> NetworkMetadata:
    """
    ネットワークのメタデータを取得

    Raises:
        KeyError: 未対応ネットワーク
    """
    if not is_supported_network(network):
        raise KeyError(f"Unsupported network: {network}")
    return NETWORK_METADATA[network]


def get_rpc_url(network: str) -> str | None:
    """環境変数から RPC URL を取得（未設定時は None）"""
    env_var = get_network_metadata(network).rpc_env_var
    return os.environ.get(env_var) or None
