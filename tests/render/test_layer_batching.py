from __future__ import annotations

import numpy as np

from engine.core.geometry import Geometry
from engine.render.line_mesh import FLOATS_PER_VERTEX
from engine.render.renderer import PRIMITIVE_RESTART_INDEX, _layers_to_vertices_indices
from engine.render.types import Layer

R = PRIMITIVE_RESTART_INDEX


def test_layers_pack_color_and_width_per_vertex() -> None:
    red = Layer(
        geometry=Geometry.from_lines([[[0, 0], [1, 0]], [[0, 1], [1, 1], [2, 1]]]),
        color=(1.0, 0.0, 0.0, 1.0),
        thickness=2.0,
    )
    blue = Layer(
        geometry=Geometry.from_lines([[[5, 5]], [[6, 6], [7, 7]]]),
        color=(0.0, 0.0, 1.0, 0.5),
        thickness=4.0,
    )
    verts, inds = _layers_to_vertices_indices([red, blue], R)

    assert verts.dtype == np.float32
    assert verts.shape == (7, FLOATS_PER_VERTEX)
    np.testing.assert_allclose(verts[:5, 2:], np.tile([1, 0, 0, 1, 2], (5, 1)))
    np.testing.assert_allclose(verts[5:, 2:], np.tile([0, 0, 1, 0.5, 4], (2, 1)))
    # 1 点だけの線は除外される
    np.testing.assert_allclose(verts[5:, :2], [[6, 6], [7, 7]])

    assert inds.dtype == np.uint32
    assert inds.tolist() == [0, 1, R, 2, 3, 4, R, 5, 6, R]


def test_empty_input_yields_empty_buffers() -> None:
    empty = Layer(geometry=Geometry.from_lines([]), color=(0, 0, 0, 1), thickness=1.0)
    verts, inds = _layers_to_vertices_indices([empty], R)
    assert verts.shape == (0, FLOATS_PER_VERTEX)
    assert inds.shape == (0,)
    verts, inds = _layers_to_vertices_indices([], R)
    assert verts.shape == (0, FLOATS_PER_VERTEX)
