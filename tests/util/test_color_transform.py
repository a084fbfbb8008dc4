from __future__ import annotations

import pytest

from common.errors import InvalidColorFormat
from util.color import (
    hex_to_rgb,
    hsl_to_rgb,
    lerp_color,
    normalize_color,
    rgb_to_hsl,
    rgba,
    shift_hue,
    wrap_hue,
)


def test_hex_to_rgb_accepts_optional_hash_and_any_case() -> None:
    assert hex_to_rgb("#f4f1de") == (244, 241, 222)
    assert hex_to_rgb("F4F1DE") == (244, 241, 222)
    assert hex_to_rgb("  #3d405b ") == (61, 64, 91)


@pytest.mark.parametrize("bad", ["#fff", "zzzzzz", "#12345g", "+12345", "0x1234", "", "#1234567"])
def test_hex_to_rgb_rejects_malformed(bad: str) -> None:
    with pytest.raises(InvalidColorFormat):
        hex_to_rgb(bad)


def test_invalid_color_format_is_value_error() -> None:
    with pytest.raises(ValueError):
        hex_to_rgb(123)  # type: ignore[arg-type]


def test_rgb_to_hsl_primaries_and_achromatic() -> None:
    assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 100.0, 50.0))
    assert rgb_to_hsl(0, 255, 0) == pytest.approx((120.0, 100.0, 50.0))
    assert rgb_to_hsl(0, 0, 255) == pytest.approx((240.0, 100.0, 50.0))
    h, s, l = rgb_to_hsl(128, 128, 128)
    assert (h, s) == (0.0, 0.0)
    assert l == pytest.approx(128 / 255 * 100)


def test_hsl_to_rgb_primaries() -> None:
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
    assert hsl_to_rgb(0, 0, 100) == (255, 255, 255)
    assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)


@pytest.mark.parametrize("hex_color", ["#f4f1de", "#e07a5f", "#3d405b", "#81b29a", "#f2cc8f"])
def test_palette_colors_round_trip_through_hsl(hex_color: str) -> None:
    rgb = hex_to_rgb(hex_color)
    assert hsl_to_rgb(*rgb_to_hsl(*rgb)) == rgb


def test_shift_hue_reference_example() -> None:
    # (51.8°, 50%, 91.4%) → (141.8°, 30%, 71.4%)
    assert shift_hue("#f4f1de", 90, -20) == (160, 204, 176)


def test_shift_hue_always_scales_saturation() -> None:
    # 彩度 100% → 60%
    assert shift_hue("#ff0000", 0, 0) == (204, 51, 51)


def test_shift_hue_wraps_hue() -> None:
    base = shift_hue("#ff0000", 0, 0)
    assert shift_hue("#ff0000", 360, 0) == base
    assert shift_hue("#ff0000", -360, 0) == base
    assert shift_hue("#ff0000", -120, 0) == (51, 51, 204)


def test_wrap_hue_stays_below_360() -> None:
    assert wrap_hue(-1e-17) == 0.0
    assert wrap_hue(360.0) == 0.0
    assert wrap_hue(-90.0) == 270.0
    assert wrap_hue(725.5) == 5.5
    # 微小な負の和でも 0 付近の色（赤）のまま
    assert shift_hue("#ff0000", -1e-17, 0) == shift_hue("#ff0000", 0, 0)


def test_shift_hue_clamps_lightness() -> None:
    assert shift_hue("#f4f1de", 0, 50) == (255, 255, 255)
    assert shift_hue("#f4f1de", 0, -200) == (0, 0, 0)


def test_shift_hue_is_pure() -> None:
    assert shift_hue("#81b29a", 33.3, -7.5) == shift_hue("#81b29a", 33.3, -7.5)


def test_lerp_color_clamps_t() -> None:
    a, b = (0, 0, 0), (200, 100, 50)
    assert lerp_color(a, b, 0.5) == (100.0, 50.0, 25.0)
    assert lerp_color(a, b, -1.0) == (0.0, 0.0, 0.0)
    assert lerp_color(a, b, 2.0) == (200.0, 100.0, 50.0)


def test_rgba_scales_to_unit_range() -> None:
    assert rgba((255, 0, 51), 255) == pytest.approx((1.0, 0.0, 0.2, 1.0))
    assert rgba((0, 0, 0), 42)[3] == pytest.approx(42 / 255)


def test_normalize_color_accepts_hex_and_tuples() -> None:
    assert normalize_color("#ff0000") == pytest.approx((1.0, 0.0, 0.0, 1.0))
    assert normalize_color((1.0, 0.0, 0.0)) == pytest.approx((1.0, 0.0, 0.0, 1.0))
    assert normalize_color((255, 0, 0)) == pytest.approx((1.0, 0.0, 0.0, 1.0))
    assert normalize_color([0.0, 0.5, 1.0, 0.25]) == pytest.approx((0.0, 0.5, 1.0, 0.25))


@pytest.mark.parametrize("bad", ["oops", (1, 2), {"r": 1}, ("a", "b", "c")])
def test_normalize_color_rejects_unsupported(bad) -> None:
    with pytest.raises(ValueError):
        normalize_color(bad)
