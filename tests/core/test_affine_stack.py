from __future__ import annotations

import math

import numpy as np
import pytest

from engine.core.affine import TransformStack, apply, rotation, translation


def test_translation_then_rotation_composes_locally() -> None:
    st = TransformStack()
    st.translate(10, 0)
    st.rotate(math.pi / 2)
    out = st.apply(np.array([[1.0, 0.0]]))
    np.testing.assert_allclose(out, [[10.0, 1.0]], atol=1e-6)


def test_apply_returns_float32() -> None:
    out = apply(translation(1, 2), np.array([[0.0, 0.0], [1.0, 1.0]]))
    assert out.dtype == np.float32
    np.testing.assert_allclose(out, [[1, 2], [2, 3]])


def test_rotation_is_clockwise_in_screen_space() -> None:
    out = apply(rotation(math.pi / 2), np.array([[1.0, 0.0]]))
    np.testing.assert_allclose(out, [[0.0, 1.0]], atol=1e-6)


def test_push_pop_restores_matrix() -> None:
    st = TransformStack()
    st.translate(5, 5)
    before = st.matrix
    st.push()
    st.rotate(1.0)
    st.translate(3, 0)
    assert st.depth == 1
    st.pop()
    np.testing.assert_allclose(st.matrix, before)
    assert st.depth == 0


def test_pop_on_empty_raises() -> None:
    with pytest.raises(IndexError):
        TransformStack().pop()


def test_reset_clears_stack() -> None:
    st = TransformStack()
    st.push()
    st.translate(1, 1)
    st.reset()
    assert st.depth == 0
    np.testing.assert_allclose(st.matrix, np.eye(3))
