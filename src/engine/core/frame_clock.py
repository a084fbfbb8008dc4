"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定と累積経過時間）。
なぜ: pyglet のスケジューラから呼び出すだけで、シーン更新→GPU 転送の順序を統一するため。
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。

    `elapsed_ms` は最初の tick からの累積時間 [ms]（単調増加）。
    """

    def __init__(
        self,
        tickables: Sequence[Tickable],
        *,
        time_source: Callable[[], float] = time.perf_counter,
    ):
        self._tickables = tuple(tickables)
        self._time_source = time_source
        self._start = time_source()
        self._last_time = self._start

    @property
    def elapsed_ms(self) -> float:
        return (self._time_source() - self._start) * 1000.0

    # GUI フレームワークから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> None:
        now = self._time_source()
        if dt is None:  # pyglet は dt を渡してくれる
            dt = now - self._last_time
        self._last_time = now

        for t in self._tickables:
            t.tick(dt)
