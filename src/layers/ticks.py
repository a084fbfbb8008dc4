"""
どこで: `layers.ticks`。
何を: 外周の 60 本の目盛り（5 本ごとに強調）。長さはノイズ、角度はゆっくり揺れる。
なぜ: 時計盤の輪郭を与えるため。
"""

from __future__ import annotations

import math

import numpy as np

from engine.render.surface import DrawSurface
from scene.context import FrameContext
from util.color import rgba
from util.mathx import lerp

from .registry import layer

TAU = 2.0 * math.pi
TICKS = 60
MAJOR_EVERY = 5


@layer("tick_marks")
def tick_marks(ctx: FrameContext, surface: DrawSurface) -> None:
    t = ctx.t
    p = ctx.palette
    outer = ctx.min_side * 0.5
    wobble = 0.06 * math.sin(t * 0.25) + 0.04 * (ctx.mx - 0.5)
    idx = np.arange(TICKS, dtype=np.float64)
    lengths = lerp(
        outer * 0.02,
        outer * (0.03 + 0.03 * ctx.my),
        ctx.noise.sample(ctx.seeds.time_offset + idx * 0.12, t * 0.22),
    )

    surface.push()
    surface.translate(*ctx.center)
    surface.stroke_weight(1.1)
    for i in range(TICKS):
        major = i % MAJOR_EVERY == 0
        angle = TAU * (i / TICKS) + wobble * math.sin(t * 0.2 + i * 0.05)
        surface.stroke(rgba(p[(i + 3) % len(p)], 80 if major else 40))
        inner = outer * 0.68 + (outer * 0.02 if major else 0.0)
        outer_r = inner + float(lengths[i])
        ca, sa = math.cos(angle), math.sin(angle)
        surface.line(ca * inner, sa * inner, ca * outer_r, sa * outer_r)
    surface.pop()
