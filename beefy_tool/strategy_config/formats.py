"""
文字列フォーマット検証

アドレス形式と戦略名の安全性（パストラバーサル対策）を判定する純粋関数
"""

import re

from beefy_tool.shared.exceptions import ConfigValidationError


# 0x + 40桁の16進数（チェックサム検証は行わない）
ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")

# 表示名向けにスペースは許可（出力パス用には normalize_strategy_name で正規化）
STRATEGY_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_\- ]+")

# 危険なパストラバーサルパターン
DANGEROUS_PATH_PATTERNS = ("..", "/", "\\")


def is_valid_address(value: object) -> bool:
    """
    アドレス形式の判定

    チェックサム付き・小文字のいずれも受理する
    """
    return isinstance(value, str) and ADDRESS_PATTERN.fullmatch(value) is not None


def addresses_equal(left: str, right: str) -> bool:
    """大文字小文字を無視したアドレス比較"""
    return left.lower() == right.lower()


def is_filesystem_safe_name(value: object) -> bool:
    """
    戦略名がファイルシステム上で安全か判定

    出力パスを組み立てる前に必ず通すこと
    """
    if not isinstance(value, str) or not value:
        return False

    if any(p in value for p in DANGEROUS_PATH_PATTERNS):
        return False

    if STRATEGY_NAME_PATTERN.fullmatch(value) is None:
        return False

    return bool(value.strip())


def normalize_strategy_name(name: str) -> str:
    """
    戦略名を検証し、パスに使える形へ正規化

    前後の空白を除去し、連続する空白を1つのハイフンに置換する

    Raises:
        ConfigValidationError: 安全でない戦略名
    """
    if not is_filesystem_safe_name(name):
        raise ConfigValidationError(
            f"Strategy name is not filesystem-safe: {name!r}", "name"
        )
    return re.sub(r" +", "-", name.strip())
