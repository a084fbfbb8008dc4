from __future__ import annotations

from util.mathx import clamp, lerp


def test_lerp_does_not_clamp() -> None:
    assert lerp(2.0, 4.0, 0.5) == 3.0
    assert lerp(2.0, 4.0, 1.5) == 5.0


def test_clamp_defaults_to_unit_interval() -> None:
    assert clamp(-0.2) == 0.0
    assert clamp(1.2) == 1.0
    assert clamp(5.0, 0.0, 10.0) == 5.0
