"""
どこで: `layers.rings`。
何を: 時/分/秒の進捗を 12 時方向から時計回りに伸びる 3 本のノイズ弧で表示する。
なぜ: 擬似時計の進み具合を、針とは別に「溜まっていく量」として見せるため。
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from engine.render.surface import DrawSurface
from scene import curves
from scene.context import FrameContext
from util.color import rgba
from util.mathx import clamp, lerp

from .registry import layer

TAU = 2.0 * math.pi
ARC_START = -math.pi / 2.0
MIN_ARC_STEPS = 24
ARC_STEP_DENSITY = 0.35


def arc_steps(radius: float) -> int:
    """弧の分割数（半径に比例、最低 24）。"""
    return max(MIN_ARC_STEPS, int(math.floor(TAU * radius * ARC_STEP_DENSITY)))


def draw_noise_arc(
    ctx: FrameContext,
    surface: DrawSurface,
    radius: float,
    progress: float,
    color: Sequence[float],
    alpha: float,
    z: float,
    weight: float,
) -> None:
    """-π/2 から時計回りに `progress`·2π だけ伸びる、半径がノイズで揺らぐ弧を描く。

    `progress <= 0` は何も描かない。`progress` は [0, 1] に clamp する。
    """
    if progress <= 0:
        return
    seeds = ctx.seeds
    end = ARC_START + TAU * clamp(progress)

    def radius_of(angles: np.ndarray, _idx: np.ndarray) -> np.ndarray:
        n = ctx.noise.sample(
            np.cos(angles) * 0.9 + seeds.time_offset,
            np.sin(angles) * 0.9 + seeds.wash_seed,
            z,
        )
        return radius * (0.88 + 0.18 * n)

    surface.stroke(rgba(color, alpha))
    surface.stroke_weight(weight)
    surface.no_fill()
    surface.curve(curves.angular(arc_steps(radius), ARC_START, end, radius_of))


@layer("time_rings")
def time_rings(ctx: FrameContext, surface: DrawSurface) -> None:
    t = ctx.t
    p = ctx.palette
    clock = ctx.clock
    stretch = lerp(0.85, 1.1, ctx.mx)
    ring_weight = lerp(3.0, 6.2, ctx.my)
    base = ctx.min_side * stretch

    surface.push()
    surface.translate(*ctx.center)
    draw_noise_arc(
        ctx, surface, base * 0.32, clock.pseudo_hour / 12.0, p[1], 110, t * 0.07, ring_weight * 1.05
    )
    draw_noise_arc(
        ctx, surface, base * 0.38, clock.pseudo_minute / 60.0, p[2], 90, t * 0.11, ring_weight
    )
    draw_noise_arc(
        ctx, surface, base * 0.45, clock.pseudo_second / 60.0, p[4], 80, t * 0.18, ring_weight * 0.85
    )
    surface.pop()
