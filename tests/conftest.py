"""
PyTest設定ファイル

テストに使用する共通フィクスチャ（有効な戦略設定・レジストリ隔離・ログキャプチャ）を定義します。
"""

import copy
from typing import Any

import pytest
from loguru import logger

from beefy_tool.strategy_config import migration
from beefy_tool.strategy_config.models import StrategyConfig, parse_strategy_config


REWARD_TOKEN = "0x9876543210987654321098765432109876543210"
NATIVE = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"
LP0_TOKEN = "0x1111111111111111111111111111111111111111"
LP1_TOKEN = "0x2222222222222222222222222222222222222222"

_VALID_DOCUMENT: dict[str, Any] = {
    "configVersion": 1,
    "name": "Test Strategy",
    "network": "optimism",
    "strategyFamily": "solidly_lp",
    "dex": "velodrome",
    "lpTokenAddress": "0x1234567890123456789012345678901234567890",
    "gaugeAddress": "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd",
    "rewardToken": REWARD_TOKEN,
    "routes": {
        "rewardToNative": {
            "from": REWARD_TOKEN,
            "to": NATIVE,
            "path": [REWARD_TOKEN, NATIVE],
        },
        "rewardToLp0": {
            "from": REWARD_TOKEN,
            "to": LP0_TOKEN,
            "path": [REWARD_TOKEN, LP0_TOKEN],
        },
        "rewardToLp1": {
            "from": REWARD_TOKEN,
            "to": LP1_TOKEN,
            "path": [REWARD_TOKEN, LP1_TOKEN],
        },
    },
    "vaultMode": "strategy-only",
    "beefyCore": {
        "keeper": "0x3333333333333333333333333333333333333333",
        "vaultFactory": "0x4444444444444444444444444444444444444444",
        "feeConfig": "0x5555555555555555555555555555555555555555",
        "feeRecipient": "0x6666666666666666666666666666666666666666",
    },
    "complexity": "basic",
}


@pytest.fixture
def valid_document() -> dict[str, Any]:
    """有効な設定ドキュメント（テストごとに独立したコピー）"""
    return copy.deepcopy(_VALID_DOCUMENT)


@pytest.fixture
def valid_config(valid_document) -> StrategyConfig:
    """有効な StrategyConfig"""
    return parse_strategy_config(valid_document)


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> migration.MigrationRegistry:
    """プロセス共通レジストリを新しいインスタンスに差し替える"""
    registry = migration.MigrationRegistry()
    monkeypatch.setattr(migration, "_default_registry", registry)
    return registry


@pytest.fixture
def log_messages():
    """loguru の出力をキャプチャ"""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
