"""共通フィクスチャ。

- 乱数シード固定
- 小さな描画面とフレームコンテキストの試料
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np
import pytest

from engine.core.noise import NoiseField
from engine.render.surface import DrawSurface
from scene.clock import ClockState
from scene.context import FrameContext, NoiseSeeds, SceneContext
from scene.palette import active_palette, get_palette
from tests._utils.scene import tracking_clock

CANVAS_W = 400
CANVAS_H = 300


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(scope="session")
def noise_field() -> NoiseField:
    return NoiseField(seed=7, octaves=3, falloff=0.45)


@pytest.fixture()
def surface() -> DrawSurface:
    return DrawSurface(CANVAS_W, CANVAS_H)


@pytest.fixture()
def scene() -> SceneContext:
    return SceneContext.create(seed=1)


@pytest.fixture()
def make_ctx(noise_field: NoiseField) -> Callable[..., FrameContext]:
    """描画パスへ直接渡せる FrameContext を組み立てる。"""

    def _make(
        *,
        t: float = 1.5,
        pointer: tuple[float, float] = (300.0, 250.0),
        clock: ClockState | None = None,
        width: int = CANVAS_W,
        height: int = CANVAS_H,
    ) -> FrameContext:
        finite = math.isfinite(pointer[0]) and math.isfinite(pointer[1])
        px, py = pointer if finite else (width * 0.5, height * 0.5)
        return FrameContext(
            t=t,
            mx=px / width,
            my=py / height,
            pointer_x=px,
            pointer_y=py,
            raw_pointer=pointer,
            width=width,
            height=height,
            palette=active_palette(get_palette("01"), 0.0, -20.0),
            clock=clock if clock is not None else tracking_clock(),
            seeds=NoiseSeeds(time_offset=11.0, wash_seed=22.0, rot_seed=33.0),
            noise=noise_field,
        )

    return _make
