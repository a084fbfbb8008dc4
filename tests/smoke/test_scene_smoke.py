import math

import numpy as np
import pytest

from engine.render.renderer import PRIMITIVE_RESTART_INDEX, _layers_to_vertices_indices
from engine.render.surface import DrawSurface
from scene.context import FrameInputs, SceneContext
from scene.driver import DEFAULT_LAYER_ORDER, FrameDriver
from tests._utils.scene import layer_names


@pytest.mark.smoke
def test_circular_pointer_path_runs_many_frames():
    # ポインタを中心の周りで 1.5 周させ、全フレームで有限座標のみが出ること
    driver = FrameDriver(SceneContext.create(seed=2024))
    surface = DrawSurface(320, 240)
    for frame in range(45):
        a = 0.3 + frame / 30 * 2.0 * math.pi
        px = 160.0 + 90.0 * math.cos(a)
        py = 120.0 + 90.0 * math.sin(a)
        surface.begin_frame()
        driver.draw_frame(FrameInputs(frame * 16.7, px, py, 320, 240), surface)
        layers = surface.layers()
        assert layer_names(layers) == list(DEFAULT_LAYER_ORDER)
        for layer in layers:
            assert np.all(np.isfinite(layer.geometry.coords))

    verts, idx = _layers_to_vertices_indices(layers, PRIMITIVE_RESTART_INDEX)
    assert verts.shape[1] == 7
    assert np.all(np.isfinite(verts))
    assert np.count_nonzero(idx == PRIMITIVE_RESTART_INDEX) == len(layers)
    assert driver.scene.clock.minute_progress > 0.0


@pytest.mark.smoke
def test_pointer_leaving_window_and_resize():
    driver = FrameDriver(SceneContext.create(seed=9))
    surface = DrawSurface(200, 150)
    pointers = [(50.0, 40.0), (math.nan, math.nan), (-500.0, 900.0), (199.0, 1.0)]
    for i, (px, py) in enumerate(pointers):
        surface.begin_frame()
        ctx = driver.draw_frame(FrameInputs(i * 20.0, px, py, 200, 150), surface)
        assert 0.0 <= ctx.pointer_x <= 200.0
        assert 0.0 <= ctx.pointer_y <= 150.0
        names = layer_names(surface.layers())
        if math.isnan(px):
            assert "cursor_glyph" not in names
            assert "clock_hands" in names
        else:
            assert names[-1] == "cursor_glyph"

    driver.on_resize(0, 0)
    surface.resize(0, 0)
    surface.begin_frame()
    driver.draw_frame(FrameInputs(100.0, 10.0, 10.0, 0, 0), surface)
    assert surface.layer_count == 0
