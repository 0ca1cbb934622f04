"""
ファイル入出力

strategy-config.json の読み書き（I/O 失敗は FileSystemError に変換）
"""

import json
from pathlib import Path
from typing import Any

from beefy_tool.shared.exceptions import ConfigValidationError, FileSystemError


def load_json_file(file_path: Path) -> Any:
    """
    JSONファイルを読み込む

    Args:
        file_path: ファイルパス

    Returns:
        パース結果

    Raises:
        FileSystemError: 読み込み失敗
        ConfigValidationError: UTF-8 / JSON として不正（field="json"）
    """
    try:
        raw = file_path.read_bytes()
    except OSError as e:
        raise FileSystemError(
            f"Failed to read config file {file_path}: {e.strerror or e}",
            str(file_path),
        ) from e

    try:
        return json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigValidationError(
            f"Config file {file_path} is not valid UTF-8: {e.reason}", "json"
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigValidationError(
            f"Invalid JSON in {file_path}: {e.msg} (line {e.lineno}, column {e.colno})",
            "json",
        ) from e


def save_json_file(file_path: Path, data: Any, indent: int = 2) -> None:
    """
    JSONファイルに保存（親ディレクトリは自動作成）

    Raises:
        FileSystemError: 書き込み失敗
    """
    text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(
            f"Failed to write config file {file_path}: {e.strerror or e}",
            str(file_path),
        ) from e
