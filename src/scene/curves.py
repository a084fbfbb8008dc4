"""
どこで: `scene.curves`（NoiseCurveBuilder）。
何を: 角度方向/横方向の掃引でノイズ変調した点列を作り、両端を複製した曲線制御点列に整える。
なぜ: 帯・リング・グリフ・進捗弧など曲線を描く全パスで、掃引と端点処理を 1 箇所に揃えるため。

規則:
- サンプル番号 i は 0..steps（両端含む、steps + 1 点）。
- 出力は [P0, P0, P1, ..., Pn, Pn]。先頭/末尾の複製は補間曲線を端点に固定する制御点。
- `closed=True` のとき最後のサンプル点を最初の点に一致させる。
- `steps < 1` は `InvalidParameter`。

`sample`/`radius_fn`/`y_fn` は配列（サンプル番号の ndarray）を受け取り、配列を返す。
ノイズ参照は `NoiseField.sample` で一括評価する想定。
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from common.errors import InvalidParameter

SampleFn = Callable[[np.ndarray], tuple[np.ndarray, np.ndarray]]
RadiusFn = Callable[[np.ndarray, np.ndarray], np.ndarray]
YFn = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _check_steps(steps: int) -> int:
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)) or steps < 1:
        raise InvalidParameter(f"steps must be an integer >= 1, got {steps!r}")
    return int(steps)


def build(steps: int, sample: SampleFn, *, closed: bool = False) -> np.ndarray:
    """`sample(i)` を i = 0..steps で評価し、端点を複製した (steps + 3, 2) 点列を返す。"""
    n = _check_steps(steps)
    idx = np.arange(n + 1, dtype=np.float64)
    xs, ys = sample(idx)
    pts = np.empty((n + 1, 2), dtype=np.float64)
    pts[:, 0] = np.broadcast_to(np.asarray(xs, dtype=np.float64), (n + 1,))
    pts[:, 1] = np.broadcast_to(np.asarray(ys, dtype=np.float64), (n + 1,))
    if closed:
        pts[-1] = pts[0]
    return np.concatenate([pts[:1], pts, pts[-1:]], axis=0)


def angular(
    steps: int,
    start: float,
    end: float,
    radius_fn: RadiusFn,
    *,
    y_scale: float = 1.0,
    closed: bool = False,
) -> np.ndarray:
    """角度 `start`→`end` [rad] を等分し、`radius_fn(angles, i)` の半径で極座標掃引する。

    y 成分には `y_scale` を掛ける（縦方向のつぶし）。
    """
    n = _check_steps(steps)

    def sample(idx: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        angles = start + (end - start) * (idx / n)
        r = np.asarray(radius_fn(angles, idx), dtype=np.float64)
        return np.cos(angles) * r, np.sin(angles) * r * y_scale

    return build(n, sample, closed=closed)


def linear(steps: int, x0: float, x1: float, y_fn: YFn) -> np.ndarray:
    """x を `x0`→`x1` で等分し、`y_fn(xs, i)` を y とする横方向掃引。"""
    n = _check_steps(steps)

    def sample(idx: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        xs = x0 + (x1 - x0) * (idx / n)
        return xs, np.asarray(y_fn(xs, idx), dtype=np.float64)

    return build(n, sample)


__all__ = ["build", "angular", "linear", "SampleFn", "RadiusFn", "YFn"]
