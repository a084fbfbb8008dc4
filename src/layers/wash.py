"""
どこで: `layers.wash`。
何を: 画面の 15%〜85% に並ぶ 90 本の横帯。各帯はノイズで上下に揺れ、太さと色もノイズで変わる。
なぜ: 背景の上に有機的な流れ（水彩のにじみ）を重ねるため。
"""

from __future__ import annotations

import math

import numpy as np

from engine.render.surface import DrawSurface
from scene import curves
from scene.context import FrameContext
from util.color import lerp_color, rgba
from util.mathx import lerp

from .registry import layer

ROWS = 90
COLUMNS = 160
WASH_ALPHA = 42


def _row_curve(ctx: FrameContext, i: int, amp: float, y_base: float) -> np.ndarray:
    w = float(ctx.width)
    x_step = w / COLUMNS
    z = ctx.t * 0.18 + ctx.seeds.time_offset

    def y_of(xs: np.ndarray, _idx: np.ndarray) -> np.ndarray:
        n = ctx.noise.sample(xs / w * 1.9, i * 0.07, z)
        return y_base - amp + n * (2.0 * amp)

    # x = -step .. width + step を step 間隔で
    return curves.linear(COLUMNS + 2, -x_step, w + x_step, y_of)


@layer("noise_wash")
def noise_wash(ctx: FrameContext, surface: DrawSurface) -> None:
    t = ctx.t
    h = float(ctx.height)
    p = ctx.palette
    mouse_amp = lerp(0.012, 0.05, ctx.my)

    surface.push()
    surface.no_fill()
    for i in range(ROWS):
        y_base = lerp(h * 0.15, h * 0.85, i / (ROWS - 1))
        amp = h * (mouse_amp + 0.015 * math.sin(t * 0.5 + i * 0.3))
        hue_blend = 0.25 + 0.3 * ctx.noise(ctx.seeds.wash_seed, i * 0.08, t * 0.2)
        surface.stroke(rgba(lerp_color(p[0], p[3], hue_blend), WASH_ALPHA))
        surface.stroke_weight(2.4 + 1.5 * ctx.noise(i * 0.1, t * 0.3))
        surface.curve(_row_curve(ctx, i, amp, y_base))
    surface.pop()
