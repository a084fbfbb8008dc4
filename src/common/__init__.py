"""
どこで: `common` パッケージ。
何を: 例外・設定・ロギング・レジストリ基底など、全層で使う軽量ユーティリティ。
なぜ: scene/layers/engine から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .errors import InvalidColorFormat, InvalidParameter

__all__ = [
    "BaseRegistry",
    "InvalidColorFormat",
    "InvalidParameter",
]
