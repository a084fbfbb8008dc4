"""
どこで: `scene` パッケージ。
何を: シーンの状態（擬似時計/パレット/シード）と曲線生成、フレーム段取り（`scene.driver`）。
なぜ: 「何を描くか」の計算を GL/ウィンドウから独立させ、単体で検証できるようにするため。

`scene.driver` は描画パス（`layers`）を読み込むため、ここでは import しない。
"""

from __future__ import annotations

from .clock import ClockState, CursorAngleClock, angle_difference, normalize_angle
from .context import FrameContext, FrameInputs, NoiseSeeds, SceneContext
from .palette import PALETTES, active_palette, get_palette

__all__ = [
    "ClockState",
    "CursorAngleClock",
    "angle_difference",
    "normalize_angle",
    "FrameContext",
    "FrameInputs",
    "NoiseSeeds",
    "SceneContext",
    "PALETTES",
    "active_palette",
    "get_palette",
]
