"""
どこで: `api.sketch_runner.scene`
何を: FrameClock から呼ばれ、入力を FrameInputs にまとめてシーンを 1 フレーム記録し、Renderer へ渡す Tickable。
なぜ: ウィンドウ/GL を持たない単体テストでも、ランナーと同じ経路でフレームを生成できるようにするため。
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from engine.core.tickable import Tickable
from engine.render.surface import DrawSurface
from engine.render.types import Layer
from scene.context import FrameInputs
from scene.driver import FrameDriver

logger = logging.getLogger(__name__)


class SceneTicker(Tickable):
    """1 tick = 1 フレーム分の記録。

    - `elapsed_ms`: 起動からの経過時間 [ms] を返す関数
    - `pointer`: 生ポインタ位置 [px] を返す関数（NaN 可）
    - `submit`: 記録したレイヤー列の受け取り先（通常は `LayerRenderer.submit`）
    """

    def __init__(
        self,
        driver: FrameDriver,
        surface: DrawSurface,
        *,
        elapsed_ms: Callable[[], float],
        pointer: Callable[[], tuple[float, float]],
        submit: Callable[[Sequence[Layer]], None],
    ) -> None:
        self.driver = driver
        self.surface = surface
        self._elapsed_ms = elapsed_ms
        self._pointer = pointer
        self._submit = submit
        self.frames = 0

    def tick(self, dt: float) -> None:
        px, py = self._pointer()
        inputs = FrameInputs(
            elapsed_ms=float(self._elapsed_ms()),
            pointer_x=px,
            pointer_y=py,
            width=self.surface.width,
            height=self.surface.height,
        )
        self.surface.begin_frame()
        self.driver.draw_frame(inputs, self.surface)
        self._submit(self.surface.layers())
        self.frames += 1

    def on_resize(self, width: int, height: int) -> None:
        """キャンバスの寸法を更新し、擬似時計をリセットする。"""
        self.surface.resize(width, height)
        self.driver.on_resize(width, height)


__all__ = ["SceneTicker"]
