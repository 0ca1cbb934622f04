"""
Strategy Configuration Package

戦略設定（strategy-config.json）の検証・マイグレーション・読み書き
"""

from .file_operations import load_json_file, save_json_file
from .formats import (
    DANGEROUS_PATH_PATTERNS,
    is_filesystem_safe_name,
    is_valid_address,
    normalize_strategy_name,
)
from .loader import (
    CURRENT_CONFIG_VERSION,
    read_config_file,
    validate_and_migrate_config,
    write_config_file,
)
from .migration import (
    MigrationRegistry,
    get_default_registry,
    get_registered_migrations,
    migrate_config,
    register_migration,
)
from .models import (
    NATIVE_TOKEN_ADDRESS,
    BeefyCore,
    Routes,
    StrategyConfig,
    SwapRoute,
    parse_strategy_config,
)
from .routes import validate_route
from .validator import collect_config_errors, try_validate_config, validate_config

__all__ = [
    # Constants
    "CURRENT_CONFIG_VERSION",
    "DANGEROUS_PATH_PATTERNS",
    "NATIVE_TOKEN_ADDRESS",
    # Models
    "BeefyCore",
    "Routes",
    "StrategyConfig",
    "SwapRoute",
    "parse_strategy_config",
    # Format checks
    "is_filesystem_safe_name",
    "is_valid_address",
    "normalize_strategy_name",
    # Validator functions
    "collect_config_errors",
    "try_validate_config",
    "validate_config",
    "validate_route",
    # Migration
    "MigrationRegistry",
    "get_default_registry",
    "get_registered_migrations",
    "migrate_config",
    "register_migration",
    # Loader
    "read_config_file",
    "validate_and_migrate_config",
    "write_config_file",
    # File operations
    "load_json_file",
    "save_json_file",
]
