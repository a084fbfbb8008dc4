"""
どこで: `scene.driver`。
何を: 1 フレームの段取り（ポインタ → 角度 → 擬似時計 → ActivePalette → 描画パスを固定順で実行）。
なぜ: 入力から描画までを一方向の流れとして 1 箇所にまとめ、状態更新を擬似時計だけに閉じ込めるため。

フレームごとの規則:
- ポインタはキャンバス内へ clamp。非有限ならキャンバス中央を使う。
- 角度は中央からポインタへの `atan2`。
- 色相シフト = 正規化角度 [deg]、明度シフト = 30·sin(2π·minute_progress·2) − 20。
- キャンバスが空（幅/高さ 0）のフレームは状態だけ進めて描画パスを呼ばない。
- `on_resize()` は擬似時計だけをリセットする（ノイズシードは保持）。
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import layers
from common.base_registry import BaseRegistry
from engine.render.surface import DrawSurface
from util.mathx import clamp

from .clock import TAU, normalize_angle
from .context import FrameContext, FrameInputs, SceneContext
from .palette import active_palette

logger = logging.getLogger(__name__)

DEFAULT_LAYER_ORDER: tuple[str, ...] = (
    "gradient_base",
    "noise_wash",
    "temporal_veil",
    "rotating_glyph",
    "time_rings",
    "tick_marks",
    "clock_hands",
    "cursor_glyph",
)

LIGHT_WAVE_AMPLITUDE = 30.0
LIGHT_BASE_SHIFT = -20.0


def resolve_pointer(inputs: FrameInputs) -> tuple[float, float]:
    """生ポインタをキャンバス内へ clamp（非有限なら中央）。"""
    w = float(inputs.width)
    h = float(inputs.height)
    if not inputs.pointer_finite:
        return (w * 0.5, h * 0.5)
    return (clamp(float(inputs.pointer_x), 0.0, w), clamp(float(inputs.pointer_y), 0.0, h))


class FrameDriver:
    """SceneContext を所有し、フレームごとに描画パスを順に呼び出す。"""

    def __init__(
        self,
        scene: SceneContext,
        layer_order: Sequence[str] = DEFAULT_LAYER_ORDER,
    ) -> None:
        self.scene = scene
        self._order = tuple(BaseRegistry.normalize_key(n) for n in layer_order)
        # 未登録名はここで KeyError
        self._passes = [(name, layers.get_layer(name)) for name in self._order]

    @property
    def layer_order(self) -> tuple[str, ...]:
        return self._order

    def prepare(self, inputs: FrameInputs) -> FrameContext:
        """入力から擬似時計を進め、描画パスへ渡す FrameContext を組み立てる。"""
        scene = self.scene
        w = int(inputs.width)
        h = int(inputs.height)
        px, py = resolve_pointer(inputs)
        mx = px / w if w > 0 else 0.5
        my = py / h if h > 0 else 0.5

        angle = math.atan2(py - h * 0.5, px - w * 0.5)
        scene.clock.update(angle, inputs.elapsed_ms)
        clock = scene.clock.state

        hue_shift = math.degrees(normalize_angle(angle))
        light_shift = (
            LIGHT_WAVE_AMPLITUDE * math.sin(TAU * clock.minute_progress * 2.0) + LIGHT_BASE_SHIFT
        )
        return FrameContext(
            t=float(inputs.elapsed_ms) / 1000.0,
            mx=mx,
            my=my,
            pointer_x=px,
            pointer_y=py,
            raw_pointer=(float(inputs.pointer_x), float(inputs.pointer_y)),
            width=w,
            height=h,
            palette=active_palette(scene.palette, hue_shift, light_shift),
            clock=clock,
            seeds=scene.seeds,
            noise=scene.noise,
        )

    def draw_frame(self, inputs: FrameInputs, surface: DrawSurface) -> FrameContext:
        """1 フレームを `surface` に記録する。呼び出し側で `begin_frame()` 済みであること。"""
        ctx = self.prepare(inputs)
        if ctx.width <= 0 or ctx.height <= 0:
            return ctx
        for name, draw in self._passes:
            surface.push()
            with surface.group(name):
                draw(ctx, surface)
            surface.pop()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("frame t=%.3f layers=%d", ctx.t, surface.layer_count)
        return ctx

    def on_resize(self, width: int | None = None, height: int | None = None) -> None:
        """リサイズ通知。擬似時計だけを未初期化へ戻す。"""
        self.scene.clock.reset()
        logger.debug("canvas resized to %sx%s; clock will reseed", width, height)


__all__ = ["FrameDriver", "DEFAULT_LAYER_ORDER", "resolve_pointer"]
