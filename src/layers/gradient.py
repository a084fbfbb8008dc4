"""
どこで: `layers.gradient`。
何を: 上下 2 色の縦グラデーション背景（2px 間隔・高さ 3px の塗り帯、alpha 220）。
なぜ: シーンの最背面を ActivePalette とポインタ位置に追従させるため。
"""

from __future__ import annotations

import math

from engine.render.surface import DrawSurface
from scene.context import FrameContext
from util.color import lerp_color, rgba
from util.mathx import clamp

from .registry import layer

BAND_STEP = 2
BAND_HEIGHT = 3
BAND_ALPHA = 220


@layer("gradient_base")
def gradient_base(ctx: FrameContext, surface: DrawSurface) -> None:
    p = ctx.palette
    t = ctx.t
    drift = ctx.mx - 0.5
    light = ctx.my - 0.5
    top_mix = clamp(0.35 + 0.1 * math.sin(t * 0.15) + 0.12 * drift)
    bottom_mix = clamp(0.45 + 0.15 * math.cos(t * 0.12) - 0.18 * light)
    top = lerp_color(p[0], p[3], top_mix)
    bottom = lerp_color(p[4], p[1], bottom_mix)

    surface.no_stroke()
    h = ctx.height
    for y in range(0, h + 1, BAND_STEP):
        c = lerp_color(top, bottom, y / h if h > 0 else 0.0)
        surface.fill(rgba(c, BAND_ALPHA))
        surface.rect(0.0, float(y), float(ctx.width), float(BAND_HEIGHT))
