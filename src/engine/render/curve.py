"""
どこで: `engine.render.curve`。
何を: Catmull-Rom スプラインによる `curveVertex` 列の折れ線化。
なぜ: 「制御点列 → 滑らかな曲線」を GPU の線描画（LINE_STRIP）へ渡せる点列に変換するため。

規則:
- 入力 K 点のうち、先頭と末尾は制御点としてのみ使われ、曲線は P1..P(K-2) を通る。
- K < 4 のときは描画できる区間が無いため空配列を返す。
- 各区間を `segments` 分割し、終点 P(K-2) を最後に含める。
"""

from __future__ import annotations

import numpy as np

DEFAULT_SEGMENTS = 6


def catmull_rom(points: np.ndarray, segments: int = DEFAULT_SEGMENTS) -> np.ndarray:
    """制御点 (K, 2) を通る一様 Catmull-Rom 曲線を (M, 2) の折れ線で返す。"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    k = pts.shape[0]
    if k < 4:
        return np.empty((0, 2), dtype=np.float32)
    segs = max(1, int(segments))

    p0 = pts[:-3]
    p1 = pts[1:-2]
    p2 = pts[2:-1]
    p3 = pts[3:]

    t = np.arange(segs, dtype=np.float64) / segs
    t2 = t * t
    t3 = t2 * t
    # (n_spans, segs, 2)
    a = 2.0 * p1[:, None, :]
    b = (p2 - p0)[:, None, :] * t[None, :, None]
    c = (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3)[:, None, :] * t2[None, :, None]
    d = (-p0 + 3.0 * p1 - 3.0 * p2 + p3)[:, None, :] * t3[None, :, None]
    body = 0.5 * (a + b + c + d)

    out = np.concatenate([body.reshape(-1, 2), pts[-2:-1]], axis=0)
    return out.astype(np.float32)


__all__ = ["catmull_rom", "DEFAULT_SEGMENTS"]
