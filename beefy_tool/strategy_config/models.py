"""
Strategy config schema

strategy-config.json の構造バリデーションを提供する。
意味的な検証（アドレス形式・ルート整合性など）は validator.py が担う。
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from beefy_tool.shared.exceptions import ConfigValidationError


# EIP-7528 のネイティブトークン表現
NATIVE_TOKEN_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"

VaultMode = Literal["strategy-only", "vault-and-strategy"]
Complexity = Literal["basic", "intermediate", "advanced"]


class SwapRoute(BaseModel):
    """報酬トークン変換用のスワップルート"""

    from_: str = Field(alias="from", description="スワップ元トークン")
    to: str = Field(description="スワップ先トークン")
    path: tuple[str, ...] = Field(description="ルートパス（トークンアドレス列）")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}


class Routes(BaseModel):
    """ハーベスト時のスワップルート一式"""

    reward_to_native: SwapRoute = Field(alias="rewardToNative")
    reward_to_lp0: SwapRoute = Field(alias="rewardToLp0")
    reward_to_lp1: SwapRoute = Field(alias="rewardToLp1")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}


class BeefyCore(BaseModel):
    """Beefy インフラアドレス"""

    keeper: str
    vault_factory: str = Field(alias="vaultFactory")
    fee_config: str = Field(alias="feeConfig")
    fee_recipient: str = Field(alias="feeRecipient")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}


class StrategyConfig(BaseModel):
    """戦略設定の統合スキーマ（検証後は不変）"""

    config_version: int = Field(
        alias="configVersion", ge=0, strict=True, description="スキーマバージョン"
    )
    name: str = Field(description="戦略名（出力パスの導出にも使用）")
    # 列挙値の所属チェックは validate_config でフィールド単位に行う
    network: str = Field(description="対象ネットワーク")
    strategy_family: str = Field(alias="strategyFamily", description="戦略ファミリー")
    dex: str = Field(description="DEX")
    lp_token_address: str = Field(alias="lpTokenAddress", description="LPトークン")
    gauge_address: str | None = Field(
        default=None, alias="gaugeAddress", description="ゲージ"
    )
    staking_address: str | None = Field(
        default=None, alias="stakingAddress", description="ステーキング（ゲージの代替）"
    )
    reward_token: str = Field(alias="rewardToken", description="報酬トークン")
    routes: Routes
    vault_mode: VaultMode = Field(alias="vaultMode", description="Vault生成モード")
    beefy_core: BeefyCore = Field(alias="beefyCore")
    complexity: Complexity = Field(description="生成の複雑度（情報のみ）")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    def to_document(self) -> dict[str, Any]:
        """JSON永続化用の辞書（camelCaseキー、未指定の任意項目は省略）"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def with_version(self, version: int) -> StrategyConfig:
        """configVersion を差し替えた新しい設定を返す"""
        return self.model_copy(update={"config_version": version})


def _format_loc(loc: tuple[Any, ...]) -> tuple[str | int, ...]:
    return tuple(p for p in loc if p != "__root__")


def parse_strategy_config(document: dict[str, Any]) -> StrategyConfig:
    """
    辞書を StrategyConfig として構造検証

    Raises:
        ConfigValidationError: 型・必須項目エラー（最初のエラーのフィールドパス付き）
    """
    try:
        return StrategyConfig.model_validate(document)
    except ValidationError as e:
        first = e.errors()[0]
        field_path = _format_loc(tuple(first.get("loc", ())))
        path = ".".join(str(p) for p in field_path)
        msg = str(first.get("msg", "Invalid value"))
        message = f"{path}: {msg}" if path else msg
        raise ConfigValidationError(message, field_path) from e
