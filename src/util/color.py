"""
どこで: `util.color`。
何を: 色指定の正規化/変換（Hex, RGB 0–255, HSL, RGBA 0–1）とパレットの色相/明度シフトを一元化。
なぜ: シーンの全レイヤーとランナーで同一の受理仕様・丸め規則・エラーを共有するため。

HSL の表記:
- h: 色相 [0, 360)
- s, l: 彩度/明度 [0, 100]

`shift_hue` は純関数。同じ入力には常に同じ RGB を返す。
"""

from __future__ import annotations

from typing import Sequence

from common.errors import InvalidColorFormat

RGB = tuple[int, int, int]
RGBA = tuple[float, float, float, float]

# shift_hue で常に掛ける彩度係数（0 シフトでも彩度は落ちる）
SATURATION_SCALE: float = 0.6

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else float(x)


def hex_to_rgb(value: str) -> RGB:
    """Hex 文字列から RGB(0–255) を返す。

    受理形式: "#RRGGBB", "RRGGBB"（大文字/小文字は不問）。
    それ以外は `InvalidColorFormat`。
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value, "not a string")
    t = value.strip()
    if t.startswith("#"):
        t = t[1:]
    if len(t) != 6:
        raise InvalidColorFormat(value, "expected 6 hex digits")
    # int(..., 16) は符号や "0x"/"_" も受理するため文字種で先に弾く
    if any(ch not in _HEX_DIGITS for ch in t):
        raise InvalidColorFormat(value, "non-hex digit")
    n = int(t, 16)
    return ((n >> 16) & 255, (n >> 8) & 255, n & 255)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """RGB(0–255) → HSL。無彩色（r == g == b）は h = s = 0。"""
    rn = r / 255.0
    gn = g / 255.0
    bn = b / 255.0
    max_v = max(rn, gn, bn)
    min_v = min(rn, gn, bn)
    lum = (max_v + min_v) / 2.0
    if max_v == min_v:
        return (0.0, 0.0, lum * 100.0)
    d = max_v - min_v
    sat = d / (2.0 - max_v - min_v) if lum > 0.5 else d / (max_v + min_v)
    if max_v == rn:
        hue = (gn - bn) / d + (6.0 if gn < bn else 0.0)
    elif max_v == gn:
        hue = (bn - rn) / d + 2.0
    else:
        hue = (rn - gn) / d + 4.0
    return (hue * 60.0, sat * 100.0, lum * 100.0)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """HSL → RGB(0–255)。各成分は最近接整数へ丸める。"""
    sn = s / 100.0
    ln = l / 100.0
    c = (1.0 - abs(2.0 * ln - 1.0)) * sn
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = ln - c / 2.0
    if h < 60:
        rn, gn, bn = c, x, 0.0
    elif h < 120:
        rn, gn, bn = x, c, 0.0
    elif h < 180:
        rn, gn, bn = 0.0, c, x
    elif h < 240:
        rn, gn, bn = 0.0, x, c
    elif h < 300:
        rn, gn, bn = x, 0.0, c
    else:
        rn, gn, bn = c, 0.0, x
    return (
        _round_channel(rn + m),
        _round_channel(gn + m),
        _round_channel(bn + m),
    )


def _round_channel(v: float) -> int:
    # 0.5 は切り上げ（銀行丸めを避ける）
    return int(_clamp(float(int(v * 255.0 + 0.5)), 0.0, 255.0))


def wrap_hue(deg: float) -> float:
    """色相 [deg] を [0, 360) へ写す。"""
    hue = deg % 360.0
    # 微小な負値は % で 360.0 ちょうどに丸まる
    if hue >= 360.0:
        hue -= 360.0
    return hue


def shift_hue(hex_color: str, hue_shift_deg: float, lightness_shift: float) -> RGB:
    """色相を回し、彩度を 0.6 倍、明度を加算した RGB(0–255) を返す。

    - 色相は [0, 360) に wrap
    - 彩度・明度は [0, 100] に clamp
    """
    r, g, b = hex_to_rgb(hex_color)
    h, s, l = rgb_to_hsl(r, g, b)
    hue = wrap_hue(h + hue_shift_deg)
    sat = _clamp(s * SATURATION_SCALE, 0.0, 100.0)
    lum = _clamp(l + lightness_shift, 0.0, 100.0)
    return hsl_to_rgb(hue, sat, lum)


def lerp_color(a: Sequence[float], b: Sequence[float], t: float) -> tuple[float, float, float]:
    """2 色を成分ごとに線形補間（t は [0, 1] に clamp）。"""
    f = _clamp(t, 0.0, 1.0)
    return (
        float(a[0]) + (float(b[0]) - float(a[0])) * f,
        float(a[1]) + (float(b[1]) - float(a[1])) * f,
        float(a[2]) + (float(b[2]) - float(a[2])) * f,
    )


def rgba(color: Sequence[float], alpha: float = 255.0) -> RGBA:
    """RGB(0–255) と alpha(0–255) から Renderer 用の RGBA(0–1) を作る。"""
    return (
        _clamp(float(color[0]) / 255.0, 0.0, 1.0),
        _clamp(float(color[1]) / 255.0, 0.0, 1.0),
        _clamp(float(color[2]) / 255.0, 0.0, 1.0),
        _clamp(float(alpha) / 255.0, 0.0, 1.0),
    )


def normalize_color(value: object) -> RGBA:
    """設定値の色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列（#RRGGBB）, (r,g,b[,a])（0–1 または 0–255）
    """
    if isinstance(value, str):
        return rgba(hex_to_rgb(value))
    if not isinstance(value, (list, tuple)) or len(value) not in (3, 4):
        raise ValueError(f"unsupported color value: {value!r}")
    try:
        comps = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(comps) == 3:
        comps.append(1.0 if all(0.0 <= v <= 1.0 for v in comps) else 255.0)
    if all(0.0 <= v <= 1.0 for v in comps):
        r, g, b, a = comps
        return (r, g, b, a)
    return rgba(comps[:3], comps[3])


__all__ = [
    "hex_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "wrap_hue",
    "shift_hue",
    "lerp_color",
    "rgba",
    "normalize_color",
]
