"""
どこで: `scene.palette`。
何を: 埋め込みパレット（5 色の Hex）と、フレームごとの色相/明度シフト適用。
なぜ: 各描画パスが同じ ActivePalette を共有し、ポインタ角度で全体の配色を一度に回すため。

役割（index）:
- 0: 背景上側
- 1: 背景下側/アクセント
- 2: 構造色（暗）
- 3: ヴェール用アクセント
- 4: ハイライト
"""

from __future__ import annotations

from typing import Sequence

from util.color import RGB, hex_to_rgb, shift_hue

PALETTES: dict[str, tuple[str, ...]] = {
    "01": ("#f4f1de", "#e07a5f", "#3d405b", "#81b29a", "#f2cc8f"),
}

DEFAULT_PALETTE = "01"


def get_palette(name: str = DEFAULT_PALETTE) -> tuple[str, ...]:
    """名前からパレット（Hex 5 色）を返す。未知の名前は `KeyError`。"""
    key = str(name)
    if key not in PALETTES:
        raise KeyError(f"unknown palette {name!r} (available: {sorted(PALETTES)})")
    palette = PALETTES[key]
    # 受理できない Hex は起動時に検出する
    for hex_color in palette:
        hex_to_rgb(hex_color)
    return palette


def active_palette(
    base: Sequence[str], hue_shift_deg: float, lightness_shift: float
) -> tuple[RGB, ...]:
    """各色へ `shift_hue` を適用した ActivePalette（RGB 0–255）を返す。"""
    return tuple(shift_hue(c, hue_shift_deg, lightness_shift) for c in base)


__all__ = ["PALETTES", "DEFAULT_PALETTE", "get_palette", "active_palette"]
