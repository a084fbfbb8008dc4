"""
どこで: `engine.render` 型定義。
何を: レイヤー描画用の軽量データクラス `Layer` とストロークキャップ定数。
なぜ: 1 フレーム内で色/太さが異なる多数のポリラインを、順序を保ったまま Renderer へ渡すため。
"""

from __future__ import annotations

from dataclasses import dataclass

from engine.core.geometry import Geometry

RGBA = tuple[float, float, float, float]

CAP_ROUND = "round"
CAP_SQUARE = "square"
CAP_PROJECT = "project"
CAPS = (CAP_ROUND, CAP_SQUARE, CAP_PROJECT)


@dataclass(frozen=True)
class Layer:
    """色/太さ付きの描画レイヤー。

    - `color`: RGBA(0–1)。
    - `thickness`: 線幅 [px]（画面座標）。
    - `name`: 発行元の描画パス名（診断/テスト用）。
    """

    geometry: Geometry
    color: RGBA
    thickness: float
    name: str | None = None


__all__ = ["Layer", "RGBA", "CAP_ROUND", "CAP_SQUARE", "CAP_PROJECT", "CAPS"]
