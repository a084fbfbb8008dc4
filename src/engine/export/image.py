"""
どこで: `engine.export.image`。
何を: 現在の描画ウィンドウ内容を PNG として保存するラッパ（最小実装）。
なぜ: キー操作（P）ひとつでスクリーンショットを得られるようにするため。
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pyglet

from util.paths import ensure_screenshots_dir


def save_png(
    window: "pyglet.window.Window",
    path: Path | None = None,
) -> Path:
    """現在のウィンドウ内容を PNG として保存する。

    Parameters
    ----------
    window : pyglet.window.Window
        対象ウィンドウ。
    path : Path | None
        出力先パス。None の場合は既定の `data/screenshot/` にタイムスタンプ名で保存。

    Returns
    -------
    Path
        保存先のファイルパス。
    """
    if path is None:
        out_dir = ensure_screenshots_dir()
        path = _unique_path(out_dir / default_filename(window.width, window.height))

    try:
        buffer = pyglet.image.get_buffer_manager().get_color_buffer()
        buffer.save(str(path))
    except Exception as e:  # pyglet が未初期化/ヘッドレスなど
        raise RuntimeError(f"PNG 保存に失敗: {e}") from e
    return path


def default_filename(width: int, height: int, now: datetime | None = None) -> str:
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"{ts}_{int(width)}x{int(height)}.png"


def _unique_path(path: Path) -> Path:
    if not path.exists():
        return path
    stem = path.stem
    suffix = path.suffix
    parent = path.parent
    i = 1
    while True:
        cand = parent / f"{stem}-{i}{suffix}"
        if not cand.exists():
            return cand
        i += 1


__all__ = ["save_png", "default_filename"]
