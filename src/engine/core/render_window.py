"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（MSAA/背景クリア/システムカーソル非表示）とポインタ位置・リサイズ通知を提供。
なぜ: レンダラ/シーン層から GUI 依存を切り離し、入力を最小インターフェイスで渡すため。

座標系:
- `pointer` は左上原点・y 下向きのウィンドウ論理ピクセル。
- ポインタがウィンドウ外へ出ると `(nan, nan)`（ハードウェアポインタ不在と同じ扱い）。

使用例:
    win = RenderWindow(1280, 720, bg_color=(0, 0, 0, 1))
    win.add_draw_callback(renderer.draw)
    win.add_resize_callback(driver.on_resize)
    pyglet.app.run()
"""

from __future__ import annotations

import logging
import math
from typing import Callable

import pyglet
from pyglet.gl import Config, glClearColor

logger = logging.getLogger(__name__)


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        bg_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0),
        caption: str = "pyxiclock",
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。
            height: ウィンドウ高さ（ピクセル）。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # 線描画を滑らかにするために MSAA を有効化
        config = Config(double_buffer=True, sample_buffers=1, samples=4)
        super().__init__(
            width=width, height=height, caption=caption, config=config, resizable=True, vsync=True
        )
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []
        self._resize_callbacks: list[Callable[[int, int], None]] = []
        self._pointer: tuple[float, float] = (math.nan, math.nan)
        self.set_mouse_visible(False)

    @property
    def pointer(self) -> tuple[float, float]:
        return self._pointer

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """`on_draw` 中に呼び出す描画関数を登録する（登録順）。"""
        self._draw_callbacks.append(func)

    def add_resize_callback(self, func: Callable[[int, int], None]) -> None:
        """リサイズ時に `(width, height)` を受け取る関数を登録する。"""
        self._resize_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()

    def on_resize(self, width, height):  # noqa: ANN001
        super().on_resize(width, height)
        logger.debug("window resized: %dx%d", width, height)
        for cb in self._resize_callbacks:
            cb(int(width), int(height))

    # ---- pointer ----
    def _set_pointer(self, x: float, y: float) -> None:
        # pyglet は左下原点
        self._pointer = (float(x), float(self.height) - float(y))

    def on_mouse_motion(self, x, y, dx, dy):  # noqa: ANN001
        self._set_pointer(x, y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):  # noqa: ANN001
        self._set_pointer(x, y)

    def on_mouse_enter(self, x, y):  # noqa: ANN001
        self._set_pointer(x, y)

    def on_mouse_leave(self, x, y):  # noqa: ANN001
        self._pointer = (math.nan, math.nan)
