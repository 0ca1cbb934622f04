"""
カスタム例外モジュール

beefy-tool 固有の例外クラスを定義
各例外は機械判定用の code と、該当する場合はフィールドパス・バージョン対を保持する
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


FieldPath = tuple[str | int, ...]


class BeefyToolError(Exception):
    """プロジェクトの基底例外クラス"""

    code: str = "BEEFY_TOOL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """呼び出し側が文字列解析せずに扱える形式へ変換"""
        return {"code": self.code, "message": self.message}


# =============================================================================
# 設定バリデーション関連
# =============================================================================


def _to_field_path(field: str | Sequence[str | int] | None) -> FieldPath:
    if field is None:
        return ()
    if isinstance(field, str):
        return tuple(segment for segment in field.split(".") if segment)
    return tuple(field)


class ConfigValidationError(BeefyToolError):
    """設定バリデーションエラー（フィールド単位）"""

    code = "CONFIG_VALIDATION_ERROR"

    def __init__(
        self, message: str, field: str | Sequence[str | int] | None = None
    ) -> None:
        super().__init__(message)
        self.field_path: FieldPath = _to_field_path(field)

    @property
    def field(self) -> str | None:
        """表示用のドット区切りフィールドパス"""
        if not self.field_path:
            return None
        return ".".join(str(segment) for segment in self.field_path)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["field"] = self.field
        payload["fieldPath"] = list(self.field_path)
        return payload


class RouteValidationError(ConfigValidationError):
    """スワップルートの整合性エラー"""

    code = "ROUTE_VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field: str | Sequence[str | int] | None = None,
        route_name: str | None = None,
    ) -> None:
        super().__init__(message, field)
        self.route_name = route_name


# =============================================================================
# マイグレーション関連
# =============================================================================


class MigrationError(BeefyToolError):
    """
    設定マイグレーションエラー

    reason:
        downgrade: ダウングレード要求
        missing_step: 未登録のステップ
        step_failed: 変換関数の失敗
        unsupported_version: エンジンより新しい設定バージョン
        invalid_step: 連続しないバージョン対の登録
        registry_frozen: 凍結後の登録
    """

    code = "MIGRATION_ERROR"

    def __init__(
        self,
        message: str,
        reason: str,
        from_version: int | None = None,
        to_version: int | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.from_version = from_version
        self.to_version = to_version

    @property
    def step(self) -> str | None:
        """失敗したバージョン対（例: "1->2"）"""
        if self.from_version is None or self.to_version is None:
            return None
        return f"{self.from_version}->{self.to_version}"

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            {
                "reason": self.reason,
                "fromVersion": self.from_version,
                "toVersion": self.to_version,
            }
        )
        return payload


# =============================================================================
# ファイルシステム関連
# =============================================================================


class FileSystemError(BeefyToolError):
    """ファイル入出力エラー（ローダー境界でのみ送出）"""

    code = "FILESYSTEM_ERROR"

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["path"] = self.path
        return payload
