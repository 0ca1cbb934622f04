"""
アドレス形式・戦略名安全性 Unit Tests
"""

import pytest

from beefy_tool.shared.exceptions import ConfigValidationError
from beefy_tool.strategy_config.formats import (
    addresses_equal,
    is_filesystem_safe_name,
    is_valid_address,
    normalize_strategy_name,
)


class TestIsValidAddress:
    """is_valid_address関数のテスト"""

    @pytest.mark.parametrize(
        "value",
        [
            "0x1234567890123456789012345678901234567890",
            "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd",
            "0xABCDEFABCDEFABCDEFABCDEFABCDEFABCDEFABCD",
            "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE",
        ],
        ids=["digits", "lowercase", "uppercase", "checksummed"],
    )
    def test_valid_addresses(self, value: str) -> None:
        """0x + 40桁の16進数は受理"""
        assert is_valid_address(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "invalid-address",
            "0x123456789012345678901234567890123456789",
            "0x12345678901234567890123456789012345678901",
            "1234567890123456789012345678901234567890",
            "0X1234567890123456789012345678901234567890",
            "0xg234567890123456789012345678901234567890",
            "0x1234567890123456789012345678901234567890\n",
            " 0x1234567890123456789012345678901234567890",
        ],
        ids=[
            "empty",
            "garbage",
            "too_short",
            "too_long",
            "no_prefix",
            "uppercase_prefix",
            "non_hex",
            "trailing_newline",
            "leading_space",
        ],
    )
    def test_invalid_addresses(self, value: str) -> None:
        """形式外の文字列は拒否"""
        assert is_valid_address(value) is False

    @pytest.mark.parametrize("value", [None, 123, b"0x" + b"1" * 40, ["0x" + "1" * 40]])
    def test_non_string_rejected(self, value: object) -> None:
        """文字列以外は拒否"""
        assert is_valid_address(value) is False


class TestAddressesEqual:
    def test_case_insensitive(self) -> None:
        assert addresses_equal("0x" + "ab" * 20, "0x" + "AB" * 20)

    def test_different_addresses(self) -> None:
        assert not addresses_equal("0x" + "1" * 40, "0x" + "2" * 40)


class TestIsFilesystemSafeName:
    """is_filesystem_safe_name関数のテスト"""

    @pytest.mark.parametrize(
        "name",
        ["Test-Strategy_123", "Test Strategy", "velo", "A"],
        ids=["hyphen_underscore", "space", "lowercase", "single_char"],
    )
    def test_safe_names(self, name: str) -> None:
        assert is_filesystem_safe_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["../etc/passwd", "a..b", "category/name", "path\\name", ".."],
        ids=["traversal", "double_dot", "slash", "backslash", "dots_only"],
    )
    def test_path_traversal_rejected(self, name: str) -> None:
        """パストラバーサルを含む名前は拒否"""
        assert is_filesystem_safe_name(name) is False

    def test_empty_rejected(self) -> None:
        assert is_filesystem_safe_name("") is False

    def test_whitespace_only_rejected(self) -> None:
        """trim 後に空になる名前は拒否"""
        assert is_filesystem_safe_name("   ") is False

    @pytest.mark.parametrize(
        "name",
        ["name@special", "名前", "name.v2", "tab\tname", "~admin"],
        ids=["at_sign", "non_ascii", "dot", "tab", "tilde"],
    )
    def test_invalid_characters_rejected(self, name: str) -> None:
        assert is_filesystem_safe_name(name) is False

    def test_non_string_rejected(self) -> None:
        assert is_filesystem_safe_name(None) is False


class TestNormalizeStrategyName:
    def test_spaces_collapsed_to_hyphen(self) -> None:
        assert normalize_strategy_name("  Velo  USDC WETH ") == "Velo-USDC-WETH"

    def test_already_normalized(self) -> None:
        assert normalize_strategy_name("Test-Strategy_123") == "Test-Strategy_123"

    def test_unsafe_name_raises(self) -> None:
        """安全でない名前は ConfigValidationError（field=name）"""
        with pytest.raises(ConfigValidationError) as exc_info:
            normalize_strategy_name("../escape")
        assert exc_info.value.field == "name"
