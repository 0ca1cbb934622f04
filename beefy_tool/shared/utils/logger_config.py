"""
Loguruベースのログ設定モジュール

設定ローダー・マイグレーション用の統一ログシステムを提供します。
環境変数やフラグによるログレベル制御に対応。
"""

import re
import sys
from typing import Optional

from loguru import logger

from beefy_tool.shared.config.settings import reload_settings


def sanitize_sensitive_info(message: str) -> str:
    """
    ログメッセージから機密情報を除去

    Args:
        message: 元のログメッセージ

    Returns:
        サニタイズされたログメッセージ
    """
    # ホームディレクトリ配下のパスをマスク
    message = re.sub(r"/Users/[^/]+/", ".../", message)
    message = re.sub(r"/home/[^/]+/", ".../", message)
    message = re.sub(r"C:\\Users\\[^\\]+\\", r"...\\", message)

    # RPC URL に埋め込まれた API キー（Alchemy / Infura 形式）をマスク
    message = re.sub(r"(https?://[^\s]+?/v[23]/)[A-Za-z0-9_\-]+", r"\1***", message)

    # パスワードやキーらしき文字列をマスク
    message = re.sub(
        r"(password|passwd|pwd|api_key|apikey|token|secret)[=:\s]+[^\s]+",
        r"\1=***",
        message,
        flags=re.IGNORECASE,
    )

    return message


def _secure_message_filter(record) -> bool:
    """ログレコードの機密情報をサニタイズ"""
    record["message"] = sanitize_sensitive_info(str(record["message"]))
    return True


def setup_logger(
    verbose: bool = False, quiet: bool = False, level_override: Optional[str] = None
) -> int:
    """
    logger設定

    Args:
        verbose: 詳細ログを有効化（DEBUGレベル）
        quiet: エラーログのみ表示（ERRORレベル）
        level_override: ログレベルの直接指定（INFO/DEBUG/WARNING/ERROR）

    Returns:
        追加したハンドラーID
    """
    # 既存のハンドラーを削除
    logger.remove()

    if level_override:
        level = level_override.upper()
    elif quiet:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    else:
        # 環境変数から取得、デフォルトはWARNING
        level = reload_settings().log_level.upper()

    format_string = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=format_string,
        colorize=True,
        backtrace=True,
        diagnose=False,
        filter=_secure_message_filter,
    )

    logger.debug(f"Logger initialized - Level: {level}")
    return handler_id
