"""
どこで: `engine.render` の低レベルメッシュ層。
何を: VBO/IBO/VAO の確保・更新・解放を担当し、描画可能な LineMesh を管理。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

# 頂点レイアウト: xy(2) + rgba(4) + width(1)
VERTEX_FORMAT = "2f 4f 1f"
VERTEX_ATTRS = ("in_vert", "in_color", "in_width")
FLOATS_PER_VERTEX = 7


class LineMesh:
    """
    GPUに頂点やインデックスなどの描画データを送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期GPUメモリ確保量（既定: 4MB）。必要に応じて自動拡張。
        initial_reserve: int = 4 * 1024 * 1024,
        primitive_restart_index: int = 0xFFFFFFFF,
    ):
        """
        ctx: moderngl コンテキスト
        program: 太線シェーダープログラム
        primitive_restart_index: LINE_STRIP を「ここで一旦区切る」目印
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve
        self.primitive_restart_index = primitive_restart_index

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.ibo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()

        self.index_count: int = 0
        self.ctx.primitive_restart = True  # type: ignore
        self.ctx.primitive_restart_index = primitive_restart_index  # type: ignore

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(
            self.program,
            [(self.vbo, VERTEX_FORMAT, *VERTEX_ATTRS)],
            index_buffer=self.ibo,
            index_element_size=4,
        )

    def _ensure_capacity(self, vbo_size: int, ibo_size: int) -> None:
        """データが大きくなったらGPUのバッファを再確保"""
        grown = False
        if vbo_size > self.vbo.size:
            self.vbo.release()
            self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.vbo.size * 2), dynamic=True)
            grown = True
        if ibo_size > self.ibo.size:
            self.ibo.release()
            self.ibo = self.ctx.buffer(reserve=max(ibo_size, self.ibo.size * 2), dynamic=True)
            grown = True
        # VAO は VBO/IBO が差し替わるたびに張り直す
        if grown:
            self.vao.release()
            self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray, indices: np.ndarray) -> None:
        """実際にデータをGPUへ送り込む"""
        if indices.size == 0:
            self.index_count = 0
            return
        self._ensure_capacity(vertices.nbytes, indices.nbytes)

        self.vbo.orphan()
        self.vbo.write(vertices.tobytes())

        self.ibo.orphan()
        self.ibo.write(indices.tobytes())

        self.index_count = int(indices.size)

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vbo.release()
        self.ibo.release()
        self.vao.release()
