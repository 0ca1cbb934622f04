"""
戦略設定バリデーション

型付け済み StrategyConfig に対する意味的な検証ロジック
ルールは定義順に評価し、最初の違反で ConfigValidationError を送出する
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from loguru import logger

from beefy_tool.metadata.dexes import SUPPORTED_DEXES, is_supported_dex
from beefy_tool.metadata.networks import get_supported_networks, is_supported_network
from beefy_tool.metadata.strategy_families import (
    STRATEGY_FAMILIES,
    get_strategy_family,
    is_supported_strategy_family,
)
from beefy_tool.shared.exceptions import ConfigValidationError

from .formats import is_filesystem_safe_name, is_valid_address
from .models import NATIVE_TOKEN_ADDRESS, StrategyConfig
from .routes import validate_route


# エラーメッセージ用のアドレス表示名
_ADDRESS_LABELS = {
    "lpTokenAddress": "LP token",
    "rewardToken": "reward token",
    "gaugeAddress": "gauge",
    "stakingAddress": "staking",
    "keeper": "keeper",
    "vaultFactory": "vault factory",
    "feeConfig": "fee config",
    "feeRecipient": "fee recipient",
}

# (JSONキー, 属性名, 期待するスワップ先)
_ROUTE_SPECS = (
    ("rewardToNative", "reward_to_native", NATIVE_TOKEN_ADDRESS),
    ("rewardToLp0", "reward_to_lp0", None),
    ("rewardToLp1", "reward_to_lp1", None),
)

_BEEFY_CORE_KEYS = (
    ("keeper", "keeper"),
    ("vaultFactory", "vault_factory"),
    ("feeConfig", "fee_config"),
    ("feeRecipient", "fee_recipient"),
)

# JSONキー → StrategyConfig 属性名
_ATTRIBUTE_BY_KEY = {
    (info.alias or name): name for name, info in StrategyConfig.model_fields.items()
}


def _field_value(config: StrategyConfig, key: str) -> object:
    return getattr(config, _ATTRIBUTE_BY_KEY[key], None)


def _is_present(value: object) -> bool:
    return value is not None and value != ""


def _require_address(value: object, key: str, field: str | None = None) -> None:
    if not is_valid_address(value):
        raise ConfigValidationError(
            f"Invalid {_ADDRESS_LABELS[key]} address format: {value}", field or key
        )


# =============================================================================
# ルール
# =============================================================================


def _check_network(config: StrategyConfig) -> None:
    if not is_supported_network(config.network):
        raise ConfigValidationError(
            f"Unsupported network: {config.network}. "
            f"Supported networks: {', '.join(get_supported_networks())}",
            "network",
        )


def _check_strategy_family(config: StrategyConfig) -> None:
    if not is_supported_strategy_family(config.strategy_family):
        raise ConfigValidationError(
            f"Unsupported strategy family: {config.strategy_family}. "
            f"Supported families: {', '.join(STRATEGY_FAMILIES)}",
            "strategyFamily",
        )


def _check_dex(config: StrategyConfig) -> None:
    if not is_supported_dex(config.dex):
        raise ConfigValidationError(
            f"Unsupported DEX: {config.dex}. "
            f"Supported DEXes: {', '.join(SUPPORTED_DEXES)}",
            "dex",
        )


def _check_name(config: StrategyConfig) -> None:
    if not is_filesystem_safe_name(config.name):
        raise ConfigValidationError(
            "Strategy name contains invalid characters. Only alphanumeric characters, "
            f"hyphens, underscores, and spaces are allowed: {config.name!r}",
            "name",
        )


def _check_lp_token(config: StrategyConfig) -> None:
    _require_address(config.lp_token_address, "lpTokenAddress")


def _check_reward_token(config: StrategyConfig) -> None:
    _require_address(config.reward_token, "rewardToken")


def _check_family_fields(config: StrategyConfig) -> None:
    """ファミリー定義に基づく必須フィールド・択一フィールドの検証"""
    family = config.strategy_family
    # 未対応ファミリーは _check_strategy_family が報告する
    if not is_supported_strategy_family(family):
        return

    definition = get_strategy_family(family)

    for key in definition.required_fields:
        if not _is_present(_field_value(config, key)):
            raise ConfigValidationError(
                f"{key} is required for {family} strategy family", key
            )

    for group in definition.one_of_fields:
        present = [key for key in group if _is_present(_field_value(config, key))]
        if not present:
            raise ConfigValidationError(
                f"Either {' or '.join(group)} must be provided for "
                f"{family} strategy family",
                group[0],
            )
        # 両方指定されている場合も受理する
        for key in present:
            _require_address(_field_value(config, key), key)


def _check_beefy_core(config: StrategyConfig) -> None:
    for key, attribute in _BEEFY_CORE_KEYS:
        _require_address(
            getattr(config.beefy_core, attribute), key, f"beefyCore.{key}"
        )


def _check_route(
    config: StrategyConfig, route_key: str, attribute: str, expected_to: str | None
) -> None:
    validate_route(
        getattr(config.routes, attribute),
        config.reward_token,
        expected_to,
        route_name=route_key,
    )


_RULES: tuple[Callable[[StrategyConfig], None], ...] = (
    _check_network,
    _check_strategy_family,
    _check_dex,
    _check_name,
    _check_lp_token,
    _check_reward_token,
    _check_family_fields,
    _check_beefy_core,
    *(
        partial(_check_route, route_key=key, attribute=attr, expected_to=expected_to)
        for key, attr, expected_to in _ROUTE_SPECS
    ),
)


# =============================================================================
# 公開API
# =============================================================================


def validate_config(config: StrategyConfig) -> None:
    """
    戦略設定の妥当性をチェック（fail-fast）

    Args:
        config: 構造検証済みの戦略設定

    Raises:
        ConfigValidationError: 最初に違反したルールのエラー
    """
    for rule in _RULES:
        rule(config)


def collect_config_errors(config: StrategyConfig) -> list[ConfigValidationError]:
    """
    全ルールを短絡せずに評価し、違反をすべて返す

    各ルール内では最初の違反のみを報告する
    """
    errors: list[ConfigValidationError] = []
    for rule in _RULES:
        try:
            rule(config)
        except ConfigValidationError as e:
            errors.append(e)
    return errors


def try_validate_config(config: StrategyConfig) -> tuple[bool, str | None]:
    """戦略設定を検証し、結果とエラーメッセージを返す"""
    try:
        validate_config(config)
    except ConfigValidationError as e:
        logger.error(f"戦略設定バリデーションエラー: {e.field}: {e.message}")
        return False, str(e)

    logger.debug(f"戦略設定の妥当性チェック成功: {config.name}")
    return True, None
