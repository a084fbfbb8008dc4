from __future__ import annotations

import math

import numpy as np
import pytest

from api.sketch import run_scene
from api.sketch_runner.scene import SceneTicker
from api.sketch_runner.utils import (
    DEFAULT_BACKGROUND,
    build_projection,
    resolve_background,
    resolve_fps,
    resolve_palette_name,
    resolve_window_size,
)
from common import settings
from engine.render.surface import DrawSurface
from scene.context import SceneContext
from scene.driver import FrameDriver


@pytest.fixture()
def clean_fps_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PXC_FPS", raising=False)
    settings.reload_from_env()
    yield monkeypatch
    monkeypatch.delenv("PXC_FPS", raising=False)
    settings.reload_from_env()


def test_run_scene_init_only_returns_none_without_window() -> None:
    out = run_scene(width=100, height=80, fps=30, seed=1, init_only=True)
    assert out is None


def test_run_scene_unknown_palette_raises() -> None:
    with pytest.raises(KeyError):
        run_scene(palette="no-such-palette", init_only=True)


def test_resolve_fps_order(clean_fps_env: pytest.MonkeyPatch) -> None:
    cfg = {"canvas_controller": {"fps": 24}}
    assert resolve_fps(50, cfg) == 50
    assert resolve_fps(0, cfg) == 60
    assert resolve_fps("abc", cfg) == 60  # type: ignore[arg-type]
    assert resolve_fps(None, cfg) == 24
    assert resolve_fps(None, {}) == 60
    assert resolve_fps(None, {"canvas_controller": {"fps": -3}}, default=30) == 30

    clean_fps_env.setenv("PXC_FPS", "12")
    settings.reload_from_env()
    assert resolve_fps(None, cfg) == 12
    assert resolve_fps(40, cfg) == 40


def test_resolve_window_size() -> None:
    assert resolve_window_size(None, None, {}) == (960, 720)
    assert resolve_window_size(None, None, {"canvas": {"width": 640, "height": 480}}) == (640, 480)
    assert resolve_window_size(300, None, {"canvas": {"height": 200}}) == (300, 200)
    assert resolve_window_size(None, None, {"canvas": {"width": "x", "height": 0}}) == (960, 720)
    with pytest.raises(ValueError):
        resolve_window_size(0, 100, {})


def test_resolve_background(caplog: pytest.LogCaptureFixture) -> None:
    assert resolve_background(None, {}) == DEFAULT_BACKGROUND
    assert resolve_background("#ff0000", {}) == (1.0, 0.0, 0.0, 1.0)
    assert resolve_background(None, {"canvas": {"background_color": [0, 0, 255]}}) == (
        0.0,
        0.0,
        1.0,
        1.0,
    )
    with caplog.at_level("WARNING"):
        out = resolve_background(None, {"canvas": {"background_color": "#zzzzzz"}})
    assert out == DEFAULT_BACKGROUND
    assert "background_color" in caplog.text


def test_resolve_palette_name() -> None:
    assert resolve_palette_name("01", {"scene": {"palette": "02"}}) == "01"
    assert resolve_palette_name(None, {"scene": {"palette": "02"}}) == "02"
    assert resolve_palette_name(None, {}) == "01"


def test_build_projection_maps_window_corners() -> None:
    proj = build_projection(200, 100).T
    top_left = proj @ np.array([0.0, 0.0, 0.0, 1.0])
    bottom_right = proj @ np.array([200.0, 100.0, 0.0, 1.0])
    np.testing.assert_allclose(top_left[:2], [-1.0, 1.0], atol=1e-6)
    np.testing.assert_allclose(bottom_right[:2], [1.0, -1.0], atol=1e-6)


class _Submitted:
    def __init__(self) -> None:
        self.batches: list[list] = []

    def __call__(self, layers) -> None:
        self.batches.append(list(layers))


def test_scene_ticker_records_and_submits_frames() -> None:
    driver = FrameDriver(SceneContext.create(seed=5))
    surface = DrawSurface(160, 120)
    submitted = _Submitted()
    clock_ms = iter([0.0, 16.0, 33.0])
    ticker = SceneTicker(
        driver,
        surface,
        elapsed_ms=lambda: next(clock_ms),
        pointer=lambda: (120.0, 30.0),
        submit=submitted,
    )
    for _ in range(3):
        ticker.tick(1 / 60)

    assert ticker.frames == 3
    assert len(submitted.batches) == 3
    # 毎フレーム記録し直す（前フレームのレイヤーを持ち越さない）
    assert len(submitted.batches[0]) == len(submitted.batches[2])
    assert driver.scene.clock.initialized


def test_scene_ticker_resize_resets_clock_only() -> None:
    scene = SceneContext.create(seed=5)
    seeds = scene.seeds
    driver = FrameDriver(scene)
    surface = DrawSurface(160, 120)
    ticker = SceneTicker(
        driver,
        surface,
        elapsed_ms=lambda: 0.0,
        pointer=lambda: (math.nan, math.nan),
        submit=lambda _layers: None,
    )
    ticker.tick(1 / 60)
    assert scene.clock.initialized

    ticker.on_resize(320, 200)
    assert (surface.width, surface.height) == (320, 200)
    assert not scene.clock.initialized
    assert scene.seeds == seeds


def test_cli_init_only_exits_zero() -> None:
    from api.__main__ import build_parser, main

    args = build_parser().parse_args(["--width", "320", "--palette", "01"])
    assert (args.width, args.height, args.palette, args.init_only) == (320, None, "01", False)
    assert main(["--init-only", "--seed", "3"]) == 0
