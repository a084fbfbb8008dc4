"""
どこで: `engine.render` の高レベル描画。
何を: 1 フレーム分の `Layer` 列を頂点/インデックスへまとめ、ModernGL に転送して太線として描画。
なぜ: 毎フレームのアップロード/描画/リソース寿命を一箇所に集約し、数百レイヤーを 1 回の draw call で描くため。
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from ..core.tickable import Tickable
from .line_mesh import FLOATS_PER_VERTEX
from .types import Layer

PRIMITIVE_RESTART_INDEX = 0xFFFFFFFF


class LayerRenderer(Tickable):
    """
    `submit()` で受け取ったレイヤー列を `tick()` で GPU に送り、`draw()` で描画する。
    新しいレイヤーが来ないフレームは直近のアップロード内容を再描画する。
    """

    def __init__(
        self,
        mgl_context: Any,
        projection_matrix: np.ndarray,
        viewport: tuple[int, int],
    ):
        self.ctx = mgl_context
        self._logger = logging.getLogger(__name__)

        from .line_mesh import LineMesh  # local import
        from .shader import Shader  # local import

        self.line_program = Shader.create_shader(mgl_context)
        self.set_projection(projection_matrix, viewport)

        self.gpu = LineMesh(
            ctx=mgl_context,
            program=self.line_program,
            primitive_restart_index=PRIMITIVE_RESTART_INDEX,
        )
        self._pending: list[Layer] | None = None
        # 診断用: 直近アップロードの頂点/ライン数
        self._last_vertex_count: int = 0
        self._last_line_count: int = 0

    # --------------------------------------------------------------------- #
    # Tickable                                                               #
    # --------------------------------------------------------------------- #
    def tick(self, dt: float) -> None:
        """保留中のレイヤーがあれば GPU へ転送。"""
        if self._pending is None:
            return
        layers, self._pending = self._pending, None
        self._upload_layers(layers)

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def submit(self, layers: Sequence[Layer]) -> None:
        """次の `tick()` でアップロードするレイヤー列を登録（後勝ち）。"""
        self._pending = list(layers)

    def draw(self) -> None:
        """GPUに送ったデータを画面に描画"""
        import moderngl as mgl

        if self.gpu.index_count > 0:
            self.gpu.vao.render(mgl.LINE_STRIP, self.gpu.index_count)

    def set_projection(self, projection_matrix: np.ndarray, viewport: tuple[int, int]) -> None:
        """投影行列とビューポート [px]（線幅の換算に使う）を更新する。"""
        self.line_program["projection"].write(
            np.ascontiguousarray(projection_matrix, dtype=np.float32).tobytes()
        )
        self.line_program["viewport"].value = (
            float(max(1, viewport[0])),
            float(max(1, viewport[1])),
        )

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.gpu.release()

    def get_last_counts(self) -> tuple[int, int]:
        return int(self._last_vertex_count), int(self._last_line_count)

    # --------------------------------------------------------------------- #
    # Internal helpers                                                      #
    # --------------------------------------------------------------------- #
    def _upload_layers(self, layers: Sequence[Layer]) -> None:
        verts, inds = _layers_to_vertices_indices(layers, self.gpu.primitive_restart_index)
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "Uploading layers: layers=%d verts=%d (%.1f KB), inds=%d (%.1f KB)",
                len(layers),
                len(verts),
                verts.nbytes / 1024.0,
                len(inds),
                inds.nbytes / 1024.0,
            )
        self.gpu.upload(verts, inds)
        self._last_vertex_count = int(len(verts))
        self._last_line_count = max(0, int(len(inds)) - int(len(verts)))


# ---------- utility -------------------------------------------------------- #
def _layers_to_vertices_indices(
    layers: Sequence[Layer],
    primitive_restart_index: int,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Layer 列を 1 つの VBO/IBO に変換。

    - 頂点: `(N, 7)` float32 = xy + rgba + width
    - インデックス: 各ポリラインの頂点番号の後に restart index を 1 つ置く
    - 2 点未満のポリラインは線分にならないため除外
    """
    coord_chunks: list[np.ndarray] = []
    attr_chunks: list[np.ndarray] = []
    lengths: list[int] = []

    for layer in layers:
        geometry = layer.geometry
        if geometry is None or geometry.is_empty:
            continue
        coords, offsets = geometry.as_arrays()
        counts = np.diff(offsets)
        keep = counts >= 2
        if not np.any(keep):
            continue
        if np.all(keep):
            pts = coords
            kept_counts = counts
        else:
            mask = np.repeat(keep, counts)
            pts = coords[mask]
            kept_counts = counts[keep]
        attr = np.array(
            [*layer.color, float(layer.thickness)],
            dtype=np.float32,
        )
        coord_chunks.append(pts)
        attr_chunks.append(np.broadcast_to(attr, (pts.shape[0], 5)))
        lengths.extend(int(c) for c in kept_counts)

    if not coord_chunks:
        return (
            np.empty((0, FLOATS_PER_VERTEX), dtype=np.float32),
            np.empty((0,), dtype=np.uint32),
        )

    vertices = np.empty((sum(lengths), FLOATS_PER_VERTEX), dtype=np.float32)
    vertices[:, :2] = np.concatenate(coord_chunks, axis=0)
    vertices[:, 2:] = np.concatenate(attr_chunks, axis=0)

    # 各ポリラインの末尾に restart を挟む: 出力位置 = 頂点番号 + それまでの線数
    n_verts = vertices.shape[0]
    n_lines = len(lengths)
    indices = np.full(n_verts + n_lines, primitive_restart_index, dtype=np.uint32)
    line_ids = np.repeat(np.arange(n_lines), lengths)
    vert_ids = np.arange(n_verts, dtype=np.uint32)
    indices[vert_ids + line_ids] = vert_ids
    return vertices, indices


__all__ = ["LayerRenderer", "PRIMITIVE_RESTART_INDEX"]
