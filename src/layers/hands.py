"""
どこで: `layers.hands`。
何を: 擬似時計の時/分/秒針。各針は浮遊オフセットで法線方向へわずかにずれる。
なぜ: カーソルの回転量を時計の針として可視化するため。

時計が未初期化のフレームでは何も描かない（ポインタが非有限でも中央フォールバックの角度で描く）。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from engine.render.surface import DrawSurface
from engine.render.types import CAP_ROUND
from scene.context import FrameContext
from util.color import rgba

from .registry import layer

CLOCK_RADIUS_RATIO = 0.22
HAND_ALPHA = 180


@dataclass(frozen=True)
class _Hand:
    angle: float
    inner: float
    outer: float
    weight: float
    palette_index: int
    offset: float


@layer("clock_hands")
def clock_hands(ctx: FrameContext, surface: DrawSurface) -> None:
    clock = ctx.clock
    if not clock.initialized:
        return
    radius = ctx.min_side * CLOCK_RADIUS_RATIO
    hands = (
        _Hand(clock.hour_angle, 0.22, 0.58, 6.0, 2, clock.hour_offset),
        _Hand(clock.minute_angle, 0.16, 0.78, 4.0, 4, clock.minute_offset),
        _Hand(clock.second_angle, 0.12, 0.96, 2.0, 1, 0.0),
    )

    surface.push()
    surface.translate(*ctx.center)
    surface.stroke_cap(CAP_ROUND)
    for idx, hand in enumerate(hands):
        ca, sa = math.cos(hand.angle), math.sin(hand.angle)
        px, py = -sa, ca
        shift = radius * 0.03 * (idx - 1) + radius * 0.04 * hand.offset
        r0 = radius * hand.inner
        r1 = radius * hand.outer
        surface.stroke(rgba(ctx.palette[hand.palette_index], HAND_ALPHA))
        surface.stroke_weight(hand.weight)
        surface.line(
            ca * r0 + px * shift,
            sa * r0 + py * shift,
            ca * r1 + px * shift,
            sa * r1 + py * shift,
        )
    surface.pop()
