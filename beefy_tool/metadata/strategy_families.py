"""
戦略ファミリー定義（データ駆動設計）

ファミリーごとの必須フィールド・択一フィールド・デフォルト値・
テンプレート参照を宣言的に管理する
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StrategyFamilyDefinition:
    """
    戦略ファミリー定義

    Attributes:
        required_fields: 必須フィールド（JSONキー名）
        one_of_fields: いずれか1つ以上が必須のフィールド組
        defaults: 未指定時に補完するデフォルト値
        template: 使用する Solidity テンプレート
        description: ファミリーの説明
    """

    required_fields: tuple[str, ...]
    one_of_fields: tuple[tuple[str, ...], ...] = ()
    defaults: dict[str, Any] = field(default_factory=dict)
    template: str = ""
    description: str = ""


STRATEGY_FAMILIES: dict[str, StrategyFamilyDefinition] = {
    "solidly_lp": StrategyFamilyDefinition(
        required_fields=("lpTokenAddress", "rewardToken", "routes"),
        one_of_fields=(("gaugeAddress", "stakingAddress"),),
        defaults={"complexity": "basic"},
        template="StrategySolidlyLP.sol.ejs",
        description="Solidly-style LP strategies (Velodrome, Aerodrome, etc.)",
    ),
}


def is_supported_strategy_family(family: object) -> bool:
    """戦略ファミリーが対応済みか判定"""
    return isinstance(family, str) and family in STRATEGY_FAMILIES


def get_strategy_family(family: str) -> StrategyFamilyDefinition:
    """
    戦略ファミリー定義を取得

    Raises:
        KeyError: 未対応ファミリー
    """
    if not is_supported_strategy_family(family):
        raise KeyError(f"Unsupported strategy family: {family}")
    return STRATEGY_FAMILIES[family]


def get_required_fields(family: str) -> tuple[str, ...]:
    """ファミリーの必須フィールド一覧"""
    return get_strategy_family(family).required_fields


def apply_family_defaults(document: dict[str, Any]) -> dict[str, Any]:
    """
    ファミリーのデフォルト値を未指定キーへ補完した新しい辞書を返す

    未対応ファミリーの場合はそのまま返す（バリデーターで拒否される）
    """
    family = document.get("strategyFamily")
    if not is_supported_strategy_family(family):
        return document

    merged = dict(document)
    for key, value in get_strategy_family(family).defaults.items():
        if key not in merged:
            merged[key] = copy.deepcopy(value)
    return merged
