"""
どこで: `engine.core` の 2D アフィン変換。
何を: 3x3 同次行列の translate/rotate 合成と、push/pop 可能な変換スタック。
なぜ: 描画面（DrawSurface）の座標系操作を純粋な数値処理として切り出し、GL 無しで検証するため。

回転の向きは画面座標（y 下向き）で時計回りが正。
"""

from __future__ import annotations

import math

import numpy as np


def identity() -> np.ndarray:
    return np.eye(3, dtype=np.float64)


def translation(dx: float, dy: float) -> np.ndarray:
    m = identity()
    m[0, 2] = float(dx)
    m[1, 2] = float(dy)
    return m


def rotation(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = identity()
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def apply(matrix: np.ndarray, points: np.ndarray) -> np.ndarray:
    """(N, 2) 点列に行列を適用して float32 の (N, 2) を返す。"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    out = pts @ matrix[:2, :2].T + matrix[:2, 2]
    return out.astype(np.float32)


class TransformStack:
    """現在の変換行列と、その退避スタック。

    `translate`/`rotate` は現在行列へ右から合成する（後に呼んだ変換ほど局所側）。
    """

    def __init__(self) -> None:
        self._current = identity()
        self._saved: list[np.ndarray] = []

    @property
    def matrix(self) -> np.ndarray:
        return self._current.copy()

    @property
    def depth(self) -> int:
        return len(self._saved)

    def push(self) -> None:
        self._saved.append(self._current.copy())

    def pop(self) -> None:
        if not self._saved:
            raise IndexError("pop from empty transform stack")
        self._current = self._saved.pop()

    def reset(self) -> None:
        self._current = identity()
        self._saved.clear()

    def translate(self, dx: float, dy: float) -> None:
        self._current = self._current @ translation(dx, dy)

    def rotate(self, angle: float) -> None:
        self._current = self._current @ rotation(angle)

    def apply(self, points: np.ndarray) -> np.ndarray:
        return apply(self._current, points)


__all__ = ["identity", "translation", "rotation", "apply", "TransformStack"]
