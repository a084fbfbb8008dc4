"""
どこで: `engine.render.surface`。
何を: p5 風の描画 API（stroke/fill/weight/cap, line/ellipse/rect/curve, push/pop/translate/rotate）を
      受け取り、色と太さ付きのポリライン `Layer` 列として記録する `DrawSurface`。
なぜ: シーンの各描画パスを GL 非依存の純粋な呼び出し列として書けるようにし、
      実描画（Renderer）とテストの双方で同じ出力を使うため。

塗りの扱い（Renderer は太線のみを描く）:
- `rect` の塗りは、縦中央を通る太さ `h` の水平線として記録する。
- `ellipse` の塗りは、半径の半分の位置を通る太さ「半径」のリングとして記録する。
- `curve` は線のみ（塗りは無視）。

ストロークキャップ:
- `round`/`project` は線分の両端を太さの半分だけ延長する（`square` は延長しない）。
"""

from __future__ import annotations

import contextlib
import math
from dataclasses import dataclass, replace
from typing import Iterator, Sequence

import numpy as np

from engine.core.affine import TransformStack
from engine.core.geometry import Geometry

from .curve import DEFAULT_SEGMENTS, catmull_rom
from .types import CAP_PROJECT, CAP_ROUND, CAPS, RGBA, Layer

ELLIPSE_SEGMENTS = 48


@dataclass(frozen=True)
class _Style:
    stroke: RGBA | None = (0.0, 0.0, 0.0, 1.0)
    fill: RGBA | None = (1.0, 1.0, 1.0, 1.0)
    weight: float = 1.0
    cap: str = CAP_ROUND


def _as_rgba(color: Sequence[float]) -> RGBA:
    if len(color) == 3:
        return (float(color[0]), float(color[1]), float(color[2]), 1.0)
    if len(color) == 4:
        return (float(color[0]), float(color[1]), float(color[2]), float(color[3]))
    raise ValueError(f"color must be RGB or RGBA in 0..1, got {color!r}")


class DrawSurface:
    """描画コマンドを `Layer` 列として記録する 2D 描画面。"""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        curve_segments: int = DEFAULT_SEGMENTS,
        ellipse_segments: int = ELLIPSE_SEGMENTS,
    ) -> None:
        self._width = max(0, int(width))
        self._height = max(0, int(height))
        self._curve_segments = max(1, int(curve_segments))
        self._ellipse_segments = max(8, int(ellipse_segments))
        self._transform = TransformStack()
        self._style = _Style()
        self._saved_styles: list[_Style] = []
        self._layers: list[Layer] = []
        self._group: str | None = None

    # ---- canvas ----
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        self._width = max(0, int(width))
        self._height = max(0, int(height))

    def begin_frame(self) -> None:
        """記録済みレイヤー・変換・スタイルを初期化する。"""
        self._layers = []
        self._transform.reset()
        self._style = _Style()
        self._saved_styles.clear()
        self._group = None

    def layers(self) -> list[Layer]:
        return list(self._layers)

    @property
    def layer_count(self) -> int:
        return len(self._layers)

    @contextlib.contextmanager
    def group(self, name: str) -> Iterator[None]:
        """このブロック内で記録したレイヤーに `name` を付ける。"""
        prev = self._group
        self._group = name
        try:
            yield
        finally:
            self._group = prev

    # ---- style ----
    def stroke(self, color: Sequence[float]) -> None:
        self._style = replace(self._style, stroke=_as_rgba(color))

    def no_stroke(self) -> None:
        self._style = replace(self._style, stroke=None)

    def fill(self, color: Sequence[float]) -> None:
        self._style = replace(self._style, fill=_as_rgba(color))

    def no_fill(self) -> None:
        self._style = replace(self._style, fill=None)

    def stroke_weight(self, weight: float) -> None:
        self._style = replace(self._style, weight=max(0.0, float(weight)))

    def stroke_cap(self, cap: str) -> None:
        if cap not in CAPS:
            raise ValueError(f"unknown stroke cap: {cap!r} (expected one of {CAPS})")
        self._style = replace(self._style, cap=cap)

    # ---- transform ----
    def push(self) -> None:
        self._transform.push()
        self._saved_styles.append(self._style)

    def pop(self) -> None:
        self._transform.pop()
        self._style = self._saved_styles.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._transform.translate(dx, dy)

    def rotate(self, angle: float) -> None:
        self._transform.rotate(angle)

    # ---- primitives ----
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        st = self._style
        if st.stroke is None or st.weight <= 0.0:
            return
        if st.cap in (CAP_ROUND, CAP_PROJECT):
            dx, dy = x2 - x1, y2 - y1
            length = math.hypot(dx, dy)
            if length > 0.0:
                ext = 0.5 * st.weight / length
                x1, y1 = x1 - dx * ext, y1 - dy * ext
                x2, y2 = x2 + dx * ext, y2 + dy * ext
        self._emit(np.array([[x1, y1], [x2, y2]], dtype=np.float64), st.stroke, st.weight)

    def ellipse(self, x: float, y: float, w: float, h: float | None = None) -> None:
        """中心 `(x, y)`、直径 `w`×`h` の楕円（`h` 省略時は円）。"""
        h = w if h is None else h
        rx, ry = abs(float(w)) * 0.5, abs(float(h)) * 0.5
        if rx <= 0.0 and ry <= 0.0:
            return
        st = self._style
        theta = np.linspace(0.0, 2.0 * math.pi, self._ellipse_segments + 1)
        unit = np.stack([np.cos(theta), np.sin(theta)], axis=1)
        if st.fill is not None:
            ring = unit * np.array([rx * 0.5, ry * 0.5]) + np.array([x, y])
            self._emit(ring, st.fill, min(rx, ry))
        if st.stroke is not None and st.weight > 0.0:
            outline = unit * np.array([rx, ry]) + np.array([x, y])
            self._emit(outline, st.stroke, st.weight)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        st = self._style
        if st.fill is not None and w != 0.0 and h != 0.0:
            cy = y + h * 0.5
            self._emit(np.array([[x, cy], [x + w, cy]], dtype=np.float64), st.fill, abs(h))
        if st.stroke is not None and st.weight > 0.0:
            outline = np.array(
                [[x, y], [x + w, y], [x + w, y + h], [x, y + h], [x, y]], dtype=np.float64
            )
            self._emit(outline, st.stroke, st.weight)

    def curve(self, points: Sequence[Sequence[float]] | np.ndarray) -> None:
        """制御点列を通る滑らかな曲線（先頭/末尾は制御点のみ）。"""
        st = self._style
        if st.stroke is None or st.weight <= 0.0:
            return
        poly = catmull_rom(np.asarray(points, dtype=np.float64), self._curve_segments)
        if poly.shape[0] < 2:
            return
        self._emit(poly, st.stroke, st.weight)

    # ---- internal ----
    def _emit(self, local_pts: np.ndarray, color: RGBA, thickness: float) -> None:
        pts = self._transform.apply(local_pts)
        self._layers.append(
            Layer(
                geometry=Geometry.from_lines([pts]),
                color=color,
                thickness=float(thickness),
                name=self._group,
            )
        )


__all__ = ["DrawSurface", "ELLIPSE_SEGMENTS"]
