"""
どこで: `layers` パッケージ。
何を: シーンの描画パス群。import 時に各パスをレジストリへ登録する。
なぜ: FrameDriver が名前の列だけで描画順を組めるようにするため。

登録順（既定の描画順と同じ）:
gradient_base → noise_wash → temporal_veil → rotating_glyph → time_rings → tick_marks
→ clock_hands → cursor_glyph
"""

from __future__ import annotations

from . import gradient, wash, veil, glyph, rings, ticks, hands, cursor  # noqa: F401  (register)
from .registry import LayerFn, get_layer, is_layer_registered, layer, list_layers
from .rings import draw_noise_arc

__all__ = [
    "LayerFn",
    "layer",
    "get_layer",
    "list_layers",
    "is_layer_registered",
    "draw_noise_arc",
]
