"""
どこで: `engine.core.noise`。
何を: シード付き 3D Perlin ノイズの fBm（オクターブ合成）を [0, 1] で返す `NoiseField`。
なぜ: シーンの全レイヤーが共有する決定的・連続なノイズ場を、1 箇所の Numba カーネルで提供するため。

仕様:
- `field(x, y)` / `field(x, y, z)`: 同じ入力には常に同じ値（同一シード）。
- 値域は [0, 1]（各オクターブの振幅和で正規化し、最後に clamp）。
- オクターブ数と減衰率（falloff）は生成時に固定。既定は 3 / 0.45。
- `field.sample(xs, ys, zs)`: 配列をブロードキャストして一括評価（行単位の描画用）。

実装メモ:
- Permutation は `numpy.random.default_rng(seed)` の置換を 512 に複製したもの。
- 勾配は 3D Perlin の 12 方向。
"""

from __future__ import annotations

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from common.settings import get as _get_settings

GRAD3 = np.array(
    [
        [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
        [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
        [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
    ],
    dtype=np.float64,
)


@njit(fastmath=True, cache=True)
def _fade(t):
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit(fastmath=True, cache=True)
def _lerp(a, b, t):
    return a + t * (b - a)


@njit(fastmath=True, cache=True)
def _grad(hash_val, x, y, z, grad3):
    g = grad3[hash_val % 12]
    return g[0] * x + g[1] * y + g[2] * z


@njit(fastmath=True, cache=True)
def _perlin3(x, y, z, perm, grad3):
    """3 次元 Perlin ノイズ（おおよそ [-1, 1]）。"""
    fx = np.floor(x)
    fy = np.floor(y)
    fz = np.floor(z)
    X = int(fx) & 255
    Y = int(fy) & 255
    Z = int(fz) & 255
    x -= fx
    y -= fy
    z -= fz

    u = _fade(x)
    v = _fade(y)
    w = _fade(z)

    A = perm[X] + Y
    AA = perm[A & 511] + Z
    AB = perm[(A + 1) & 511] + Z
    B = perm[X + 1] + Y
    BA = perm[B & 511] + Z
    BB = perm[(B + 1) & 511] + Z

    g000 = _grad(perm[AA & 511], x, y, z, grad3)
    g100 = _grad(perm[BA & 511], x - 1.0, y, z, grad3)
    g010 = _grad(perm[AB & 511], x, y - 1.0, z, grad3)
    g110 = _grad(perm[BB & 511], x - 1.0, y - 1.0, z, grad3)
    g001 = _grad(perm[(AA + 1) & 511], x, y, z - 1.0, grad3)
    g101 = _grad(perm[(BA + 1) & 511], x - 1.0, y, z - 1.0, grad3)
    g011 = _grad(perm[(AB + 1) & 511], x, y - 1.0, z - 1.0, grad3)
    g111 = _grad(perm[(BB + 1) & 511], x - 1.0, y - 1.0, z - 1.0, grad3)

    return _lerp(
        _lerp(_lerp(g000, g100, u), _lerp(g010, g110, u), v),
        _lerp(_lerp(g001, g101, u), _lerp(g011, g111, u), v),
        w,
    )


@njit(fastmath=True, cache=True)
def _fbm3(x, y, z, perm, grad3, octaves, falloff):
    """オクターブ合成して [0, 1] に正規化。"""
    amp = 1.0
    freq = 1.0
    total = 0.0
    amp_sum = 0.0
    for _ in range(octaves):
        total += amp * (0.5 + 0.5 * _perlin3(x * freq, y * freq, z * freq, perm, grad3))
        amp_sum += amp
        amp *= falloff
        freq *= 2.0
    if amp_sum <= 1e-12:
        return 0.5
    r = total / amp_sum
    if r < 0.0:
        return 0.0
    if r > 1.0:
        return 1.0
    return r


@njit(fastmath=True, cache=True)
def _fbm3_many(xs, ys, zs, perm, grad3, octaves, falloff):
    n = xs.shape[0]
    out = np.empty(n, dtype=np.float64)
    for i in range(n):
        out[i] = _fbm3(xs[i], ys[i], zs[i], perm, grad3, octaves, falloff)
    return out


def build_permutation(seed: int | None) -> np.ndarray:
    """シードから 512 要素の置換テーブル（0..255 の置換を 2 回連結）を作る。"""
    rng = np.random.default_rng(seed)
    p = rng.permutation(256).astype(np.int64)
    return np.concatenate([p, p])


class NoiseField:
    """決定的なコヒーレントノイズ場。`field(x, y[, z])` で [0, 1] を返す。"""

    def __init__(
        self,
        seed: int | None = None,
        *,
        octaves: int | None = None,
        falloff: float | None = None,
    ) -> None:
        settings = _get_settings()
        self.seed = seed
        self.octaves = max(1, int(octaves if octaves is not None else settings.NOISE_OCTAVES))
        self.falloff = float(falloff if falloff is not None else settings.NOISE_FALLOFF)
        self._perm = build_permutation(seed)

    def __call__(self, x: float, y: float, z: float = 0.0) -> float:
        return float(
            _fbm3(
                float(x), float(y), float(z), self._perm, GRAD3, self.octaves, self.falloff
            )
        )

    def sample(self, xs, ys, zs=0.0) -> np.ndarray:
        """配列入力を一括評価する（ブロードキャスト後の形状で返す）。"""
        bx, by, bz = np.broadcast_arrays(
            np.asarray(xs, dtype=np.float64),
            np.asarray(ys, dtype=np.float64),
            np.asarray(zs, dtype=np.float64),
        )
        shape = bx.shape
        out = _fbm3_many(
            np.ascontiguousarray(bx).ravel(),
            np.ascontiguousarray(by).ravel(),
            np.ascontiguousarray(bz).ravel(),
            self._perm,
            GRAD3,
            self.octaves,
            self.falloff,
        )
        return out.reshape(shape)


__all__ = ["NoiseField", "build_permutation", "GRAD3"]
