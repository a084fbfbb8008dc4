"""
どこで: `api.sketch`（実行ランナー）。
何を: シーン（FrameDriver）を pyglet ウィンドウ + ModernGL の太線レンダラで毎フレーム描画する。
なぜ: 1 行の呼び出しで、設定解決・ウィンドウ生成・入力・リサイズ・保存キーまでを結線するため。

主エントリポイント:
- `run_scene(*, width=None, height=None, fps=None, background=None, palette=None, seed=None, init_only=False)`

実行フロー（概要）:
1) 設定解決: 明示引数 → 環境変数（`PXC_FPS`）→ `util.utils.load_config()` → 既定値。
2) シーン構築: `SceneContext.create()`（シード/ノイズ場/擬似時計）と `FrameDriver`。
   `init_only=True` はここで返る（ウィンドウ/GL を作らない）。
3) ウィンドウ/GL: `RenderWindow`（vsync/MSAA/システムカーソル非表示）と `LayerRenderer`。
4) フレーム駆動: `FrameClock([SceneTicker, LayerRenderer])` を `pyglet.clock` で駆動し、
   `on_draw` で最新のレイヤーを描画。
5) リサイズ: キャンバス寸法・投影行列を更新し、擬似時計をリセット（シードは保持）。

キー操作:
- `ESC`: 終了
- `P`: 画面を PNG で `data/screenshot/` に保存（失敗はログのみで継続）

例:
    from api import run
    run(seed=42)
"""

from __future__ import annotations

import logging
from typing import Any

from engine.render.surface import DrawSurface
from scene.context import SceneContext
from scene.driver import FrameDriver
from util.utils import load_config

from .sketch_runner.utils import (
    build_projection,
    resolve_background,
    resolve_fps,
    resolve_palette_name,
    resolve_window_size,
)

logger = logging.getLogger(__name__)


def run_scene(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    background: Any = None,
    palette: str | None = None,
    seed: int | None = None,
    init_only: bool = False,
) -> None:
    """シーンをウィンドウで実行する（ウィンドウを閉じるまで戻らない）。

    Parameters
    ----------
    width, height : int | None
        ウィンドウサイズ [px]。None で設定ファイル（`canvas.width/height`）→ 960x720。
    fps : int | None
        フレーム更新レート。None で `PXC_FPS` → `canvas_controller.fps` → 60。
    background : Any
        クリア色（Hex または RGBA）。None で `canvas.background_color` → 黒。
    palette : str | None
        パレット名。None で `scene.palette` → "01"。未知の名前は `KeyError`。
    seed : int | None
        ノイズシードの乱数シード。None で毎回異なる。
    init_only : bool
        True で設定解決とシーン構築だけを行い、ウィンドウを作らずに返る。
    """
    cfg = load_config()
    fps = resolve_fps(fps, cfg)
    window_width, window_height = resolve_window_size(width, height, cfg)
    bg_rgba = resolve_background(background, cfg)

    scene = SceneContext.create(resolve_palette_name(palette, cfg), seed=seed)
    driver = FrameDriver(scene)
    surface = DrawSurface(window_width, window_height)

    if init_only:
        return None

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from engine.core.frame_clock import FrameClock
    from engine.export.image import save_png

    from .sketch_runner.render import create_window_and_renderer
    from .sketch_runner.scene import SceneTicker

    rendering_window, _mgl_ctx, layer_renderer = create_window_and_renderer(
        window_width, window_height, background=bg_rgba
    )

    frame_clock: FrameClock | None = None

    def _elapsed_ms() -> float:
        return frame_clock.elapsed_ms if frame_clock is not None else 0.0

    ticker = SceneTicker(
        driver,
        surface,
        elapsed_ms=_elapsed_ms,
        pointer=lambda: rendering_window.pointer,
        submit=layer_renderer.submit,
    )
    frame_clock = FrameClock([ticker, layer_renderer])

    rendering_window.add_draw_callback(layer_renderer.draw)

    def _on_resize(w: int, h: int) -> None:
        ticker.on_resize(w, h)
        layer_renderer.set_projection(build_projection(w, h), (w, h))

    rendering_window.add_resize_callback(_on_resize)

    def _handle_save_png() -> None:
        try:
            p = save_png(rendering_window)
        except RuntimeError as e:
            logger.warning("PNG save failed: %s", e)
            return
        logger.info("Saved PNG: %s", p)

    @rendering_window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            rendering_window.close()
        if sym == key.P:
            _handle_save_png()

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        pyglet.clock.unschedule(frame_clock.tick)
        layer_renderer.release()
        setattr(on_close, "_closed", True)
        pyglet.app.exit()

    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)
    logger.info(
        "scene started: %dx%d @ %d fps (palette=%s)",
        window_width,
        window_height,
        fps,
        resolve_palette_name(palette, cfg),
    )
    pyglet.app.run()
    return None


__all__ = ["run_scene"]
