"""
Configuration Loader

strategy-config.json の読み込み・マイグレーション・検証・書き出しを行うモジュール
呼び出し側は検証済みの StrategyConfig か型付きエラーのどちらかのみを受け取る
"""

from pathlib import Path
from typing import Any

from loguru import logger

from beefy_tool.metadata.strategy_families import apply_family_defaults
from beefy_tool.shared.config.settings import get_settings, resolve_config_path
from beefy_tool.shared.exceptions import (
    BeefyToolError,
    ConfigValidationError,
    MigrationError,
)

from .file_operations import load_json_file, save_json_file
from .migration import MigrationRegistry, migrate_config
from .models import StrategyConfig, parse_strategy_config
from .validator import validate_config


# 現在サポートしている設定バージョン
CURRENT_CONFIG_VERSION = 1


def _read_config_version(document: dict[str, Any]) -> int:
    """configVersion を取り出して検証"""
    if "configVersion" not in document:
        raise ConfigValidationError(
            "configVersion is required", "configVersion"
        )

    version = document["configVersion"]
    # bool は int のサブクラスなので明示的に除外
    if isinstance(version, bool) or not isinstance(version, int) or version < 0:
        raise ConfigValidationError(
            f"configVersion must be a non-negative integer, got: {version!r}",
            "configVersion",
        )
    return version


def validate_and_migrate_config(
    document: Any,
    *,
    registry: MigrationRegistry | None = None,
    current_version: int = CURRENT_CONFIG_VERSION,
) -> StrategyConfig:
    """
    未型付けの設定ドキュメントを現行バージョンへ移行し、検証する

    Args:
        document: JSONパース結果
        registry: マイグレーションレジストリ（省略時はプロセス共通）
        current_version: 目標とする現行バージョン

    Returns:
        検証済みの StrategyConfig

    Raises:
        ConfigValidationError: 構造・意味的な検証エラー
        MigrationError: 新しすぎるバージョン、またはマイグレーション失敗
    """
    if not isinstance(document, dict):
        raise ConfigValidationError(
            f"Config document must be a JSON object, got: {type(document).__name__}",
            "json",
        )

    version = _read_config_version(document)

    # 前方互換は仮定しない
    if version > current_version:
        raise MigrationError(
            f"Config version {version} is newer than the supported version "
            f"{current_version}. Upgrade beefy-tool to load this config.",
            "unsupported_version",
            version,
            current_version,
        )

    migrated = migrate_config(document, version, current_version, registry=registry)
    config = parse_strategy_config(apply_family_defaults(migrated))
    validate_config(config)
    return config


def read_config_file(
    config_path: str | Path,
    *,
    registry: MigrationRegistry | None = None,
    current_version: int = CURRENT_CONFIG_VERSION,
) -> StrategyConfig:
    """
    戦略設定ファイルを読み込む

    Args:
        config_path: strategy-config.json のパス（ディレクトリ指定も可）
        registry: マイグレーションレジストリ（省略時はプロセス共通）
        current_version: 目標とする現行バージョン

    Returns:
        移行・検証済みの StrategyConfig

    Raises:
        FileSystemError: ファイル読み込み失敗
        ConfigValidationError: JSON不正・検証エラー
        MigrationError: バージョン不整合・マイグレーション失敗
    """
    path = resolve_config_path(config_path)

    try:
        document = load_json_file(path)
        config = validate_and_migrate_config(
            document, registry=registry, current_version=current_version
        )
    except BeefyToolError as e:
        logger.error(f"戦略設定読み込みエラー: {path}: {e.message}")
        raise

    logger.info(f"戦略設定読み込み成功: {config.name} ({path})")
    return config


def write_config_file(
    config: StrategyConfig,
    output_path: str | Path,
    *,
    current_version: int = CURRENT_CONFIG_VERSION,
) -> Path:
    """
    戦略設定をJSONファイルへ書き出す

    現行バージョンを付与して検証した後にのみ書き込む

    Args:
        config: 戦略設定
        output_path: 出力先パス（既存ディレクトリ指定時は設定ファイル名を付与）
        current_version: 付与するバージョン

    Returns:
        書き出したファイルのパス

    Raises:
        ConfigValidationError: 検証エラー（ファイルは書き込まれない）
        FileSystemError: 書き込み失敗
    """
    path = resolve_config_path(output_path)
    stamped = config.with_version(current_version)

    try:
        validate_config(stamped)
        save_json_file(
            path, stamped.to_document(), indent=get_settings().config_json_indent
        )
    except BeefyToolError as e:
        logger.error(f"戦略設定書き込みエラー: {path}: {e.message}")
        raise

    logger.info(f"戦略設定書き込み成功: {stamped.name} ({path})")
    return path
