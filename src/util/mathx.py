"""
どこで: `util.mathx`。
何を: スカラー補間の小道具（lerp/clamp）。
なぜ: 描画パスの「0–1 の入力をある範囲へ写す」計算を同じ規則で書くため。
"""

from __future__ import annotations


def lerp(a: float, b: float, t: float) -> float:
    """`a`→`b` の線形補間（`t` は clamp しない）。"""
    return a + (b - a) * t


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return lo if x < lo else hi if x > hi else x


__all__ = ["lerp", "clamp"]
