"""
2D ポリライン集合 `Geometry`（描画レイヤーの中身）

データモデル（不変条件）:
- `coords: float32 ndarray (N, 2)`: 全頂点を 1 本の連続メモリで保持（行は XY、画面座標 px）。
- `offsets: int32 ndarray (M+1,)`: 各ポリラインの開始 index（末尾は必ず N）。
- i 本目の線は `coords[offsets[i] : offsets[i+1]]` で取り出せる。

直感図:

    # 2 本のポリライン（線0は3点、線1は2点）
    # coords (N=5): [[0,0], [1,0], [1,1], [2,2], [3,2]]
    # offsets (M+1=3): [0, 3, 5]

補足:
- 空ジオメトリは `coords.shape==(0,2)`, `offsets==[0]`。
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

NumberLike = float | int
LineLike = np.ndarray | Sequence[Sequence[NumberLike]]


def _normalize_geometry_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Geometry` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.ascontiguousarray(coords, dtype=np.float32)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 2:
        raise ValueError("coords は形状 (N, 2) の配列である必要があります。")

    offsets_arr = np.ascontiguousarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1 or offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む 1 次元配列である必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")
    return coords_arr, offsets_arr


class Geometry:
    """2D ポリラインの統一表現。"""

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        self.coords, self.offsets = _normalize_geometry_input(coords, offsets)

    @classmethod
    def from_lines(cls, lines: Iterable[LineLike]) -> "Geometry":
        """点列の集合から `Geometry` を生成する。

        各要素は `(K, 2)` の座標列（list/tuple/ndarray）。形状が合わなければ `ValueError`。
        """
        np_lines: list[np.ndarray] = []
        for line in lines:
            arr = np.asarray(line, dtype=np.float32)
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ValueError(f"座標配列の形状が不正です: {arr.shape}")
            np_lines.append(arr)

        if not np_lines:
            return cls(np.empty((0, 2), dtype=np.float32), np.array([0], dtype=np.int32))

        offsets = np.zeros(len(np_lines) + 1, dtype=np.int32)
        offsets[1:] = np.cumsum([a.shape[0] for a in np_lines])
        return cls(np.concatenate(np_lines, axis=0), offsets)

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """`(coords, offsets)` の読み取り専用ビューを返す。"""
        c = self.coords.view()
        o = self.offsets.view()
        c.setflags(write=False)
        o.setflags(write=False)
        return c, o

    @property
    def is_empty(self) -> bool:
        return self.coords.shape[0] == 0

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_lines(self) -> int:
        return int(self.offsets.shape[0] - 1)

    def __repr__(self) -> str:
        return f"Geometry(vertices={self.n_vertices}, lines={self.n_lines})"


__all__ = ["Geometry"]
