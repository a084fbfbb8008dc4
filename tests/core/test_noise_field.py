from __future__ import annotations

import numpy as np

from engine.core.noise import NoiseField, build_permutation


def test_permutation_is_seeded_and_duplicated() -> None:
    p = build_permutation(5)
    assert p.shape == (512,)
    np.testing.assert_array_equal(p[:256], p[256:])
    np.testing.assert_array_equal(np.sort(p[:256]), np.arange(256))
    np.testing.assert_array_equal(p, build_permutation(5))


def test_same_seed_same_values() -> None:
    a = NoiseField(seed=3)
    b = NoiseField(seed=3)
    for x, y, z in [(0.5, 0.25, 1.0), (10.3, -4.2, 0.0), (1234.5, 0.07, 77.7)]:
        assert a(x, y, z) == b(x, y, z)


def test_different_seeds_differ_somewhere() -> None:
    xs = np.linspace(0.0, 8.0, 64)
    a = NoiseField(seed=1).sample(xs, 0.3, 0.7)
    b = NoiseField(seed=2).sample(xs, 0.3, 0.7)
    assert not np.allclose(a, b)


def test_values_in_unit_interval(noise_field: NoiseField) -> None:
    xs, ys = np.meshgrid(np.linspace(-20, 20, 41), np.linspace(-20, 20, 41))
    vals = noise_field.sample(xs, ys, 3.3)
    assert vals.shape == xs.shape
    assert vals.min() >= 0.0
    assert vals.max() <= 1.0


def test_sample_matches_scalar_calls(noise_field: NoiseField) -> None:
    xs = np.array([0.1, 0.5, 2.25, 9.75])
    vals = noise_field.sample(xs, 1.5)
    expected = [noise_field(x, 1.5) for x in xs]
    np.testing.assert_allclose(vals, expected, rtol=1e-12, atol=1e-12)


def test_noise_is_continuous(noise_field: NoiseField) -> None:
    xs = np.linspace(0.0, 4.0, 4001)
    vals = noise_field.sample(xs, 0.2, 0.4)
    assert np.max(np.abs(np.diff(vals))) < 0.02


def test_octaves_and_falloff_are_fixed_at_creation() -> None:
    f = NoiseField(seed=0, octaves=0, falloff=0.5)
    assert f.octaves == 1
    assert f.falloff == 0.5
    assert NoiseField(seed=0, octaves=3).octaves == 3
