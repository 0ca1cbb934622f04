"""
スワップルート検証

単一ルートの内部整合性（始点・終点・パス形状）を検証する
"""

from __future__ import annotations

from beefy_tool.shared.exceptions import RouteValidationError

from .formats import addresses_equal, is_valid_address
from .models import SwapRoute


def _route_error(
    message: str, sub_field: str, route_name: str | None
) -> RouteValidationError:
    field_path = ("routes", route_name, sub_field) if route_name else (sub_field,)
    return RouteValidationError(message, field_path, route_name=route_name)


def validate_route(
    route: SwapRoute,
    expected_from: str,
    expected_to: str | None = None,
    *,
    route_name: str | None = None,
) -> None:
    """
    スワップルートの整合性を検証

    アドレス比較はすべて大文字小文字を無視する

    Args:
        route: 検証対象ルート
        expected_from: 期待するスワップ元（通常は rewardToken）
        expected_to: 期待するスワップ先（ネイティブ向けルートのみ指定）
        route_name: ルートキー（例: "rewardToLp0"）。指定時はフィールドパスに
            "routes.<route_name>." を付与する

    Raises:
        RouteValidationError: from / to / path のいずれかが不正
    """
    label = route_name or "route"

    if not is_valid_address(route.from_):
        raise _route_error(
            f"Invalid {label}.from address format: {route.from_}", "from", route_name
        )
    if not addresses_equal(route.from_, expected_from):
        raise _route_error(
            f"{label}.from ({route.from_}) must match expected address ({expected_from})",
            "from",
            route_name,
        )

    if not is_valid_address(route.to):
        raise _route_error(
            f"Invalid {label}.to address format: {route.to}", "to", route_name
        )
    if expected_to is not None and not addresses_equal(route.to, expected_to):
        raise _route_error(
            f"{label}.to must be {expected_to}, got: {route.to}", "to", route_name
        )

    path = route.path
    if not path:
        raise _route_error(
            f"{label}.path must be a non-empty array", "path", route_name
        )
    if not addresses_equal(path[0], route.from_):
        raise _route_error(
            f"{label}.path must start with from address ({route.from_})",
            "path",
            route_name,
        )
    if not addresses_equal(path[-1], route.to):
        raise _route_error(
            f"{label}.path must end with to address ({route.to})", "path", route_name
        )
    for token in path:
        if not is_valid_address(token):
            raise _route_error(
                f"Invalid token address in {label}.path: {token}", "path", route_name
            )
