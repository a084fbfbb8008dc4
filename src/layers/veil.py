"""
どこで: `layers.veil`。
何を: 中心に重なる 6 枚の楕円ループ。半径はノイズで揺らぎ、ポインタで回転/縦つぶれが変わる。
なぜ: 時計盤の背後に薄いヴェール状の奥行きを作るため。
"""

from __future__ import annotations

import math

import numpy as np

from engine.render.surface import DrawSurface
from scene import curves
from scene.context import FrameContext
from util.color import rgba
from util.mathx import lerp

from .registry import layer

LOOPS = 6
LOOP_STEPS = 180
VEIL_ALPHA = 40


def _veil_loop(ctx: FrameContext, i: int) -> np.ndarray:
    t = ctx.t
    seeds = ctx.seeds
    phase = t * 0.1 + i * 0.6
    radius = ctx.min_side * (0.25 + i * 0.05)
    squash = lerp(0.7, 1.1, ctx.my)
    y_scale = 0.75 + 0.1 * math.sin(t * 0.3 + i) + 0.2 * squash

    def radius_of(angles: np.ndarray, _idx: np.ndarray) -> np.ndarray:
        n = ctx.noise.sample(
            np.cos(angles) * 0.8 + seeds.time_offset,
            np.sin(angles) * 0.8 + seeds.wash_seed,
            phase,
        )
        return radius * (0.92 + 0.08 * n)

    return curves.angular(LOOP_STEPS, -math.pi, math.pi, radius_of, y_scale=y_scale, closed=True)


@layer("temporal_veil")
def temporal_veil(ctx: FrameContext, surface: DrawSurface) -> None:
    t = ctx.t
    p = ctx.palette
    spin = lerp(-0.6, 0.6, ctx.mx)
    veil_base = lerp(2.1, 4.6, ctx.my)

    surface.push()
    surface.translate(*ctx.center)
    surface.no_fill()
    for i in range(LOOPS):
        surface.push()
        surface.rotate(0.12 * math.sin(t * 0.08 + i) + 0.03 * i + spin * 0.35)
        surface.stroke(rgba(p[(i + 2) % len(p)], VEIL_ALPHA))
        surface.stroke_weight(max(1.6, veil_base - i * 0.18))
        surface.curve(_veil_loop(ctx, i))
        surface.pop()
    surface.pop()
