"""
どこで: `scene.context`。
何を: フレーム入力（FrameInputs）、起動時固定のノイズシード（NoiseSeeds）、
      シーン全体の所有物（SceneContext）、描画パスへ渡す読み取り専用スナップショット（FrameContext）。
なぜ: パレット/シード/時計状態をモジュールグローバルに置かず、毎フレームの入力を明示的な値として流すため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from engine.core.noise import NoiseField
from util.color import RGB

from .clock import ClockState, CursorAngleClock
from .palette import DEFAULT_PALETTE, get_palette

SEED_RANGE = 10000.0


@dataclass(frozen=True)
class FrameInputs:
    """1 フレーム分の入力。

    - `elapsed_ms`: 起動からの経過時間 [ms]
    - `pointer_x`, `pointer_y`: 生のポインタ位置 [px]（左上原点、NaN 可）
    - `width`, `height`: キャンバスサイズ [px]
    """

    elapsed_ms: float
    pointer_x: float
    pointer_y: float
    width: int
    height: int

    @property
    def pointer_finite(self) -> bool:
        return math.isfinite(self.pointer_x) and math.isfinite(self.pointer_y)


@dataclass(frozen=True)
class NoiseSeeds:
    """ノイズ場の座標オフセット。起動時に [0, 10000) から一様に一度だけ引く。"""

    time_offset: float
    wash_seed: float
    rot_seed: float

    @classmethod
    def from_random(cls, rng: np.random.Generator | None = None) -> "NoiseSeeds":
        gen = rng if rng is not None else np.random.default_rng()
        a, b, c = gen.uniform(0.0, SEED_RANGE, size=3)
        return cls(float(a), float(b), float(c))


@dataclass
class SceneContext:
    """シーンが所有する状態一式（パレット/シード/ノイズ場/擬似時計）。"""

    palette: tuple[str, ...]
    seeds: NoiseSeeds
    noise: NoiseField
    clock: CursorAngleClock = field(default_factory=CursorAngleClock)

    @classmethod
    def create(cls, palette_name: str = DEFAULT_PALETTE, seed: int | None = None) -> "SceneContext":
        """乱数シードからシード値とノイズ場を決めて生成する（`seed=None` は非決定）。"""
        rng = np.random.default_rng(seed)
        seeds = NoiseSeeds.from_random(rng)
        noise = NoiseField(seed=int(rng.integers(0, 2**31 - 1)))
        return cls(palette=get_palette(palette_name), seeds=seeds, noise=noise)


@dataclass(frozen=True)
class FrameContext:
    """描画パスへ渡すフレームのスナップショット（読み取り専用）。

    `pointer_x/pointer_y` はキャンバス内へ clamp 済み（生の値が非有限なら中央）。
    `raw_pointer` は clamp 前の値で、カーソル系の描画可否の判定に使う。
    """

    t: float
    mx: float
    my: float
    pointer_x: float
    pointer_y: float
    raw_pointer: tuple[float, float]
    width: int
    height: int
    palette: tuple[RGB, ...]
    clock: ClockState
    seeds: NoiseSeeds
    noise: NoiseField

    @property
    def pointer_finite(self) -> bool:
        return math.isfinite(self.raw_pointer[0]) and math.isfinite(self.raw_pointer[1])

    @property
    def min_side(self) -> float:
        return float(min(self.width, self.height))

    @property
    def center(self) -> tuple[float, float]:
        return (self.width * 0.5, self.height * 0.5)


__all__ = ["FrameInputs", "NoiseSeeds", "SceneContext", "FrameContext", "SEED_RANGE"]
