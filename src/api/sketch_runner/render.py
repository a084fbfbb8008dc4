"""
どこで: `api.sketch_runner.render`
何を: RenderWindow/ModernGL/LayerRenderer の初期化。
なぜ: `api.sketch` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

import moderngl

from .utils import build_projection


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    background: tuple[float, float, float, float],
):
    """ウィンドウ/ModernGL/LayerRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, layer_renderer)
    """

    from engine.core.render_window import RenderWindow
    from engine.render.renderer import LayerRenderer

    rendering_window = RenderWindow(window_width, window_height, bg_color=background)  # type: ignore[abstract]

    # ModernGL コンテキスト（半透明レイヤーを重ねるためアルファブレンド）
    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    layer_renderer = LayerRenderer(
        mgl_context=mgl_ctx,
        projection_matrix=build_projection(window_width, window_height),
        viewport=(window_width, window_height),
    )
    return rendering_window, mgl_ctx, layer_renderer


__all__ = ["create_window_and_renderer"]
