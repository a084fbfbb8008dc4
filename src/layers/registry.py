"""
どこで: `layers.registry`。
何を: 描画パス関数 `(ctx, surface) -> None` の名前付きレジストリ。
なぜ: FrameDriver が描画順を名前の列として持ち、関数の実体を登録先から解決するため。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from common.base_registry import BaseRegistry

if TYPE_CHECKING:
    from engine.render.surface import DrawSurface
    from scene.context import FrameContext

LayerFn = Callable[["FrameContext", "DrawSurface"], None]

_layer_registry = BaseRegistry()


def layer(name: str | None = None):
    """描画パス登録デコレータ（名前省略時は関数名）。"""
    return _layer_registry.register(name)


def get_layer(name: str) -> LayerFn:
    """登録済みの描画パスを取得。未登録は `KeyError`。"""
    return _layer_registry.get(name)


def list_layers() -> list[str]:
    """登録済みの描画パス名（登録順）。"""
    return _layer_registry.list_all()


def is_layer_registered(name: str) -> bool:
    return _layer_registry.is_registered(name)


__all__ = ["LayerFn", "layer", "get_layer", "list_layers", "is_layer_registered"]
