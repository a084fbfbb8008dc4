"""
どこで: `scene.clock`。
何を: ポインタ角度の変化量から時/分/秒の針角度を合成する状態機械 `CursorAngleClock`。
なぜ: 生のカーソル移動を「擬似時計」として扱い、色変換と各描画パスへ一貫した進捗値を渡すため。

状態遷移:
- Uninitialized → Tracking: 最初の `update()` で 3 本の針をすべて現在角度に揃え、オフセットを 0 にする。
- Tracking → Tracking: 秒針は現在角度へ追従し、その差分の 0.32 倍/0.12 倍を分針/時針へ加算する。
  差分が 0 のとき分針/時針は動かない。浮遊オフセットは毎回経過時間に向けて補間する。
- `reset()`（ウィンドウのリサイズ時）で Uninitialized へ戻る。

角度はすべてラジアンで [0, 2π) に正規化して保持する。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from util.mathx import lerp

TAU = 2.0 * math.pi

MINUTE_FACTOR = 0.32
HOUR_FACTOR = 0.12
OFFSET_AMPLITUDE = 0.6
MINUTE_OFFSET_RATE = 0.0016
HOUR_OFFSET_RATE = 0.0011
MINUTE_OFFSET_EASE = 0.10
HOUR_OFFSET_EASE = 0.08


def normalize_angle(angle: float) -> float:
    """角度を [0, 2π) へ写す（冪等）。"""
    a = math.fmod(angle, TAU)
    if a < 0.0:
        a += TAU
    # fmod の丸めで -ε + 2π が 2π ちょうどになる場合がある
    if a >= TAU:
        a -= TAU
    return a


def angle_difference(a: float, b: float) -> float:
    """`normalize(a) - normalize(b)` を (-π, π] へ写した符号付き差分。"""
    diff = normalize_angle(a) - normalize_angle(b)
    if diff > math.pi:
        diff -= TAU
    elif diff <= -math.pi:
        diff += TAU
    return diff


@dataclass
class ClockState:
    """擬似時計の状態。`initialized` が False の間、角度は意味を持たない。"""

    initialized: bool = False
    second_angle: float = 0.0
    minute_angle: float = 0.0
    hour_angle: float = 0.0
    minute_offset: float = 0.0
    hour_offset: float = 0.0

    @property
    def second_progress(self) -> float:
        return self.second_angle / TAU if self.initialized else 0.0

    @property
    def minute_progress(self) -> float:
        return self.minute_angle / TAU if self.initialized else 0.0

    @property
    def hour_progress(self) -> float:
        return self.hour_angle / TAU if self.initialized else 0.0

    @property
    def pseudo_hour(self) -> float:
        return self.hour_progress * 12.0

    @property
    def pseudo_minute(self) -> float:
        return self.minute_progress * 60.0

    @property
    def pseudo_second(self) -> float:
        return self.second_progress * 60.0


class CursorAngleClock:
    """ポインタ角度を入力に取る擬似時計。フレーム間で状態を保持する唯一のオブジェクト。"""

    def __init__(self) -> None:
        self._state = ClockState()

    @property
    def initialized(self) -> bool:
        return self._state.initialized

    @property
    def state(self) -> ClockState:
        """現在状態のコピー（描画パスへ渡すスナップショット）。"""
        return replace(self._state)

    def update(self, angle: float, elapsed_ms: float) -> None:
        """生の角度 [rad] と起動からの経過時間 [ms] で 1 フレーム分進める。"""
        st = self._state
        a = normalize_angle(angle)
        if not st.initialized:
            st.initialized = True
            st.second_angle = a
            st.minute_angle = a
            st.hour_angle = a
            st.minute_offset = 0.0
            st.hour_offset = 0.0
            return

        delta = angle_difference(a, st.second_angle)
        st.second_angle = a
        if delta != 0.0:
            st.minute_angle = normalize_angle(st.minute_angle + delta * MINUTE_FACTOR)
            st.hour_angle = normalize_angle(st.hour_angle + delta * HOUR_FACTOR)

        ms = float(elapsed_ms)
        st.minute_offset = lerp(
            st.minute_offset,
            math.sin(ms * MINUTE_OFFSET_RATE) * OFFSET_AMPLITUDE,
            MINUTE_OFFSET_EASE,
        )
        st.hour_offset = lerp(
            st.hour_offset,
            math.cos(ms * HOUR_OFFSET_RATE) * OFFSET_AMPLITUDE,
            HOUR_OFFSET_EASE,
        )

    def reset(self) -> None:
        """Uninitialized へ戻す（次の `update()` で再シードされる）。"""
        self._state.initialized = False

    # ---- derived ----
    @property
    def second_progress(self) -> float:
        return self._state.second_progress

    @property
    def minute_progress(self) -> float:
        return self._state.minute_progress

    @property
    def hour_progress(self) -> float:
        return self._state.hour_progress

    @property
    def pseudo_hour(self) -> float:
        return self._state.pseudo_hour

    @property
    def pseudo_minute(self) -> float:
        return self._state.pseudo_minute

    @property
    def pseudo_second(self) -> float:
        return self._state.pseudo_second


__all__ = [
    "TAU",
    "ClockState",
    "CursorAngleClock",
    "normalize_angle",
    "angle_difference",
    "MINUTE_FACTOR",
    "HOUR_FACTOR",
]
