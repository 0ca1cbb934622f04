"""
beefy-tool

Beefy vault / strategy 生成用の設定検証・マイグレーションエンジン
"""

from beefy_tool.shared.exceptions import (
    BeefyToolError,
    ConfigValidationError,
    FileSystemError,
    MigrationError,
    RouteValidationError,
)
from beefy_tool.strategy_config import (
    CURRENT_CONFIG_VERSION,
    StrategyConfig,
    migrate_config,
    read_config_file,
    register_migration,
    validate_config,
    write_config_file,
)

__all__ = [
    "CURRENT_CONFIG_VERSION",
    "StrategyConfig",
    "migrate_config",
    "read_config_file",
    "register_migration",
    "validate_config",
    "write_config_file",
    # Errors
    "BeefyToolError",
    "ConfigValidationError",
    "FileSystemError",
    "MigrationError",
    "RouteValidationError",
]
