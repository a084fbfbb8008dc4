from __future__ import annotations

import numpy as np

from engine.core.geometry import Geometry
from engine.render.line_mesh import VERTEX_FORMAT
from engine.render.renderer import PRIMITIVE_RESTART_INDEX, LayerRenderer
from engine.render.types import Layer


class _Uniform:
    def __init__(self) -> None:
        self.value = None
        self.written: bytes | None = None

    def write(self, data: bytes) -> None:
        self.written = data


class _Program(dict):
    def __init__(self) -> None:
        super().__init__(projection=_Uniform(), viewport=_Uniform())


class _Buffer:
    def __init__(self, reserve: int) -> None:
        self.size = reserve
        self.data = b""
        self.released = False

    def orphan(self) -> None:
        self.data = b""

    def write(self, data: bytes) -> None:
        self.data = data

    def release(self) -> None:
        self.released = True


class _VAO:
    def __init__(self, content) -> None:
        self.content = content
        self.render_calls: list[tuple[int, int]] = []
        self.released = False

    def render(self, mode: int, vertices: int) -> None:
        self.render_calls.append((mode, vertices))

    def release(self) -> None:
        self.released = True


class _Context:
    def __init__(self) -> None:
        self.buffers: list[_Buffer] = []
        self.vaos: list[_VAO] = []
        self.primitive_restart = False
        self.primitive_restart_index = 0

    def program(self, **_shaders) -> _Program:
        return _Program()

    def buffer(self, reserve: int, dynamic: bool = False) -> _Buffer:
        buf = _Buffer(reserve)
        self.buffers.append(buf)
        return buf

    def vertex_array(self, program, content, index_buffer=None, index_element_size=4) -> _VAO:
        vao = _VAO(content)
        self.vaos.append(vao)
        return vao


def _renderer(ctx: _Context) -> LayerRenderer:
    return LayerRenderer(ctx, np.eye(4, dtype=np.float32), (320, 240))


def _layer(n_points: int) -> Layer:
    pts = np.stack([np.arange(n_points), np.zeros(n_points)], axis=1)
    return Layer(geometry=Geometry.from_lines([pts]), color=(1, 1, 1, 1), thickness=2.0)


def test_init_sets_restart_and_uniforms() -> None:
    ctx = _Context()
    r = _renderer(ctx)
    assert ctx.primitive_restart is True
    assert ctx.primitive_restart_index == PRIMITIVE_RESTART_INDEX
    assert r.line_program["viewport"].value == (320.0, 240.0)
    assert len(r.line_program["projection"].written) == 16 * 4
    assert ctx.vaos[0].content[0][1] == VERTEX_FORMAT


def test_submit_is_uploaded_on_tick_and_latest_wins() -> None:
    ctx = _Context()
    r = _renderer(ctx)
    r.submit([_layer(2)])
    r.submit([_layer(3), _layer(4)])
    assert r.get_last_counts() == (0, 0)
    r.tick(1 / 60)
    assert r.get_last_counts() == (7, 2)
    assert r.gpu.index_count == 9

    # 新しい submit が無い tick では再アップロードしない
    r.tick(1 / 60)
    assert r.gpu.index_count == 9


def test_draw_renders_only_when_indices_exist() -> None:
    import moderngl

    ctx = _Context()
    r = _renderer(ctx)
    r.draw()
    assert r.gpu.vao.render_calls == []
    r.submit([_layer(3)])
    r.tick(0.0)
    r.draw()
    assert r.gpu.vao.render_calls == [(moderngl.LINE_STRIP, 4)]


def test_growth_rebuilds_vao_and_release_frees_all() -> None:
    ctx = _Context()
    r = LayerRenderer(ctx, np.eye(4, dtype=np.float32), (0, 0))
    assert r.line_program["viewport"].value == (1.0, 1.0)
    first_vao = r.gpu.vao
    r.gpu.vbo.size = 8
    r.submit([_layer(5)])
    r.tick(0.0)
    assert first_vao.released
    assert r.gpu.vao is not first_vao
    r.release()
    assert r.gpu.vbo.released and r.gpu.ibo.released and r.gpu.vao.released
