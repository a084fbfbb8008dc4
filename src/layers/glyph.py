"""
どこで: `layers.glyph`。
何を: 中心で交互に逆回転する 4 重のスポーク輪と、各輪の内側に 3 本の揺らぐループ。
なぜ: 時計盤の中心に、時間とポインタで回り続けるグリフを置くため。
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

RINGS = 4
INNER_LOOPS = 3
INNER_STEPS = 24


def _spoke_ring(ctx: FrameContext, ring: int, base_radius: float) -> np.ndarray:
    rot_seed = ctx.seeds.rot_seed
    brush = 0.18 + 0.12 * ctx.my
    z = ctx.t * 0.22 + ring

    def radius_of(angles: np.ndarray, _idx: np.ndarray) -> np.ndarray:
        n = ctx.noise.sample(rot_seed + ring * 30 + np.cos(angles), np.sin(angles), z)
        return base_radius * (0.6 + ring * 0.1 + brush * n)

    spokes = 34 + ring * 6
    return curves.angular(spokes, -math.pi, math.pi, radius_of, closed=True)


def _inner_loop(ctx: FrameContext, ring: int, k: int, base_radius: float) -> np.ndarray:
    t = ctx.t
    wobble = 0.08 * ctx.noise(ctx.seeds.rot_seed + k * 10, ring, t * 0.3 + k)
    radius = base_radius * (0.25 + ring * 0.05 + k * 0.06 + 0.08 * (ctx.my - 0.5))

    def radius_of(angles: np.ndarray, _idx: np.ndarray) -> np.ndarray:
        return radius * (1.0 + wobble * np.sin(angles * 3.0 + t * 0.5))

    return curves.angular(INNER_STEPS, -math.pi, math.pi, radius_of, closed=True)


@layer("rotating_glyph")
def rotating_glyph(ctx: FrameContext, surface: DrawSurface) -> None:
    t = ctx.t
    p = ctx.palette
    base_radius = ctx.min_side * 0.19
    base_weight = lerp(1.6, 4.8, ctx.my)
    speed = 0.12 + 0.18 * ctx.mx

    surface.push()
    surface.translate(*ctx.center)
    surface.no_fill()
    for ring in range(RINGS):
        surface.push()
        direction = 1.0 if ring % 2 == 0 else -1.0
        surface.rotate(t * speed * direction + ring * 0.4 + (ctx.mx - 0.5) * 0.8)
        color = rgba(p[(ring + 4) % len(p)], 70 - ring * 12)
        weight = max(0.4, base_weight - ring * 0.45)
        surface.stroke(color)
        surface.stroke_weight(weight)
        surface.curve(_spoke_ring(ctx, ring, base_radius))

        surface.stroke_weight(max(0.6, weight * 0.7))
        for k in range(INNER_LOOPS):
            surface.curve(_inner_loop(ctx, ring, k, base_radius))
        surface.pop()
    surface.pop()
