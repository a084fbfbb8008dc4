"""
どこで: `api` 入口（高レベル公開 API）。
何を: ランナー `run_scene`（別名 `run`）とシーン構築の主要型を再輸出。
なぜ: 利用者が単一名前空間から起動まで完結できるようにするため。

Usage:
    from api import run

    run(width=1280, height=800, seed=7)
"""

from scene.context import FrameInputs, SceneContext
from scene.driver import DEFAULT_LAYER_ORDER, FrameDriver

from .sketch import run_scene as run
from .sketch import run_scene as run_scene

__all__ = [
    "run_scene",  # 実行（詳細指定）
    "run",  # 実行（エイリアス、簡易）
    "FrameDriver",
    "FrameInputs",
    "SceneContext",
    "DEFAULT_LAYER_ORDER",
]

# バージョン情報
__version__ = "2026.10"
