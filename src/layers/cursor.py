"""
どこで: `layers.cursor`。
何を: システムカーソルの代わりに描く、脈動するハロー・十字・中心点のカーソルグリフ。
なぜ: 非表示にしたシステムカーソルの位置をシーンの配色で示すため。
"""

from __future__ import annotations

import math

from engine.render.surface import DrawSurface
from scene.context import FrameContext
from util.color import rgba

from .registry import layer

HALO_DIAMETER = 22.0
CROSS_HALF = 8.0
DOT_DIAMETER = 6.0


@layer("cursor_glyph")
def cursor_glyph(ctx: FrameContext, surface: DrawSurface) -> None:
    if not ctx.pointer_finite:
        return
    t = ctx.t
    p = ctx.palette
    accent = rgba(p[1], 140)
    halo = rgba(p[3], 80)
    pulse = 1.0 + 0.15 * math.sin(t * 3.8 + ctx.mx * math.pi)

    surface.push()
    surface.translate(ctx.pointer_x, ctx.pointer_y)
    surface.no_fill()
    surface.stroke(halo)
    surface.stroke_weight(2.0)
    surface.ellipse(0.0, 0.0, HALO_DIAMETER * pulse)

    surface.stroke(accent)
    surface.stroke_weight(1.6)
    surface.line(-CROSS_HALF, 0.0, CROSS_HALF, 0.0)
    surface.line(0.0, -CROSS_HALF, 0.0, CROSS_HALF)

    surface.fill(accent)
    surface.no_stroke()
    surface.ellipse(0.0, 0.0, DOT_DIAMETER + 1.5 * math.sin(t * 2.6 + ctx.my * 2.0 * math.pi))
    surface.pop()
