"""
Centralized settings

環境変数とデフォルト値の単一ソースを提供する。
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

# カレントディレクトリから上位へ .env を探索（既存の環境変数を優先）
_dotenv_path = find_dotenv(usecwd=True)
if _dotenv_path:
    load_dotenv(_dotenv_path, override=False)


class Settings(BaseModel):
    """アプリケーション設定"""

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    # strategy-config.json の入出力
    config_file_name: str = Field(
        default="strategy-config.json", alias="BEEFY_CONFIG_FILE_NAME"
    )
    config_json_indent: int = Field(
        default=2, ge=0, alias="BEEFY_CONFIG_JSON_INDENT"
    )

    model_config = {"populate_by_name": True}


@lru_cache
def get_settings() -> Settings:
    """キャッシュされた設定を取得"""
    return Settings.model_validate(dict(os.environ))


def reload_settings() -> Settings:
    """環境変数の再読み込み"""
    get_settings.cache_clear()
    return get_settings()


def resolve_config_path(path: str | Path) -> Path:
    """ディレクトリが渡された場合は設定ファイル名を付与する"""
    resolved = Path(path)
    if resolved.is_dir():
        return resolved / get_settings().config_file_name
    return resolved
