"""
設定バージョンマイグレーション

スキーマ変更ごとに 1 ステップ（N -> N+1）の変換関数を登録し、
宣言バージョンから目標バージョンまで順に連結して適用する
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from loguru import logger

from beefy_tool.shared.exceptions import MigrationError


MigrationFunction = Callable[[dict[str, Any]], dict[str, Any]]


class MigrationRegistry:
    """
    マイグレーション関数のレジストリ

    登録はプロセス起動時のみ行う。マイグレーション実行時に凍結され、
    以降の登録は MigrationError になる
    """

    def __init__(self) -> None:
        self._steps: dict[tuple[int, int], MigrationFunction] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """以降の登録を禁止する"""
        self._frozen = True

    def register(
        self, from_version: int, to_version: int, migration_fn: MigrationFunction
    ) -> None:
        """
        バージョン遷移の変換関数を登録

        Args:
            from_version: 変換元バージョン
            to_version: 変換先バージョン（from_version + 1 のみ）
            migration_fn: 変換関数

        Raises:
            MigrationError: 凍結済み、または連続しないバージョン対
        """
        if self._frozen:
            raise MigrationError(
                f"Cannot register migration {from_version}->{to_version}: "
                "registry is frozen",
                "registry_frozen",
                from_version,
                to_version,
            )
        if to_version != from_version + 1:
            raise MigrationError(
                f"Migration steps must advance exactly one version, "
                f"got {from_version}->{to_version}",
                "invalid_step",
                from_version,
                to_version,
            )
        self._steps[(from_version, to_version)] = migration_fn

    def get(self, from_version: int, to_version: int) -> MigrationFunction | None:
        return self._steps.get((from_version, to_version))

    def registered_migrations(self) -> list[str]:
        """登録済みステップ（"from->to" 形式、バージョン順）"""
        return [f"{a}->{b}" for a, b in sorted(self._steps)]


_default_registry = MigrationRegistry()


def get_default_registry() -> MigrationRegistry:
    """プロセス共通のレジストリ"""
    return _default_registry


def register_migration(
    from_version: int, to_version: int, migration_fn: MigrationFunction
) -> None:
    """プロセス共通レジストリへ登録（初期化時のみ）"""
    _default_registry.register(from_version, to_version, migration_fn)


def get_registered_migrations() -> list[str]:
    return _default_registry.registered_migrations()


def migrate_config(
    document: dict[str, Any],
    from_version: int,
    to_version: int,
    registry: MigrationRegistry | None = None,
) -> dict[str, Any]:
    """
    設定ドキュメントを目標バージョンまでマイグレーション

    Args:
        document: 変換元の設定ドキュメント（未型付け）
        from_version: 宣言されているバージョン
        to_version: 目標バージョン
        registry: 使用するレジストリ（省略時はプロセス共通）

    Returns:
        configVersion を to_version に更新したドキュメント
        （同一バージョンの場合は入力をそのまま返す）

    Raises:
        MigrationError: ダウングレード、未登録ステップ、変換関数の失敗
    """
    registry = registry if registry is not None else _default_registry
    registry.freeze()

    if from_version == to_version:
        return document

    if from_version > to_version:
        raise MigrationError(
            f"Cannot downgrade config from version {from_version} to {to_version}. "
            "Downgrades are not supported.",
            "downgrade",
            from_version,
            to_version,
        )

    current = copy.deepcopy(document)
    current_version = from_version

    while current_version < to_version:
        next_version = current_version + 1
        migration_fn = registry.get(current_version, next_version)

        if migration_fn is None:
            raise MigrationError(
                f"Migration from version {current_version} to {next_version} "
                "is not implemented. Register it with register_migration().",
                "missing_step",
                current_version,
                next_version,
            )

        try:
            migrated = migration_fn(current)
        except Exception as e:
            raise MigrationError(
                f"Migration from version {current_version} to {next_version} "
                f"failed: {e}",
                "step_failed",
                current_version,
                next_version,
            ) from e

        if not isinstance(migrated, dict):
            raise MigrationError(
                f"Migration from version {current_version} to {next_version} "
                f"failed: expected a dict, got {type(migrated).__name__}",
                "step_failed",
                current_version,
                next_version,
            )

        logger.debug(f"設定マイグレーション適用: {current_version}->{next_version}")
        current = migrated
        current_version = next_version

    current["configVersion"] = to_version
    return current
