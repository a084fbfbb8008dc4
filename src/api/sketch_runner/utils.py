"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/ウィンドウサイズ/背景色/パレット名の解決と投影行列の構築を提供。
なぜ: `api.sketch` を薄く保ち、テスト容易性と再利用性を上げるため。

解決順（共通）: 明示引数 → 環境変数（`common.settings`、FPS のみ）→ 設定ファイル → 既定値。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np

from common.settings import get as _get_settings
from util.color import normalize_color
from util.utils import config_section

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60
DEFAULT_WINDOW_SIZE = (960, 720)
DEFAULT_BACKGROUND = (0.0, 0.0, 0.0, 1.0)


def _positive_int(value: Any) -> int | None:
    try:
        v = int(value)
    except (TypeError, ValueError):
        return None
    return v if v > 0 else None


def resolve_fps(
    requested_fps: int | None,
    cfg: Mapping[str, Any] | None = None,
    *,
    default: int = DEFAULT_FPS,
) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（数値化できない/<=0 は既定へ）。
    - 次に `PXC_FPS`、その次に `canvas_controller.fps`。
    """
    if requested_fps is not None:
        return _positive_int(requested_fps) or max(1, int(default))
    env_fps = _get_settings().FPS
    if env_fps is not None:
        return max(1, int(env_fps))
    v = _positive_int(config_section(dict(cfg or {}), "canvas_controller").get("fps"))
    return v or max(1, int(default))


def resolve_window_size(
    width: int | None,
    height: int | None,
    cfg: Mapping[str, Any] | None = None,
) -> tuple[int, int]:
    """ウィンドウサイズ [px] を解決する。明示値が 0 以下なら `ValueError`。"""
    canvas = config_section(dict(cfg or {}), "canvas")
    out: list[int] = []
    for explicit, key, fallback in (
        (width, "width", DEFAULT_WINDOW_SIZE[0]),
        (height, "height", DEFAULT_WINDOW_SIZE[1]),
    ):
        if explicit is not None:
            v = _positive_int(explicit)
            if v is None:
                raise ValueError(f"window {key} must be a positive integer, got {explicit!r}")
            out.append(v)
            continue
        out.append(_positive_int(canvas.get(key)) or fallback)
    return out[0], out[1]


def resolve_background(
    background: Any,
    cfg: Mapping[str, Any] | None = None,
) -> tuple[float, float, float, float]:
    """背景色 RGBA(0–1) を解決する。設定値が不正なら警告して既定色。"""
    if background is not None:
        return normalize_color(background)
    cfg_bg = config_section(dict(cfg or {}), "canvas").get("background_color")
    if cfg_bg is None:
        return DEFAULT_BACKGROUND
    try:
        return normalize_color(cfg_bg)
    except ValueError as e:
        logger.warning("invalid canvas.background_color %r: %s", cfg_bg, e)
        return DEFAULT_BACKGROUND


def resolve_palette_name(palette: str | None, cfg: Mapping[str, Any] | None = None) -> str:
    if palette is not None:
        return str(palette)
    name = config_section(dict(cfg or {}), "scene").get("palette")
    return str(name) if name is not None else "01"


def build_projection(width: float, height: float) -> "np.ndarray":
    """ウィンドウ px（左上原点・y 下向き）を基準とする正射影行列（ModernGL 用の転置済み）を返す。"""
    w = max(1.0, float(width))
    h = max(1.0, float(height))
    proj = np.array(
        [
            [2 / w, 0, 0, -1],
            [0, -2 / h, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


__all__ = [
    "resolve_fps",
    "resolve_window_size",
    "resolve_background",
    "resolve_palette_name",
    "build_projection",
]
