"""対応DEX定義"""

SUPPORTED_DEXES: tuple[str, ...] = ("velodrome", "aerodrome")


def is_supported_dex(dex: object) -> bool:
    """DEXが対応済みか判定"""
    return isinstance(dex, str) and dex in SUPPORTED_DEXES
