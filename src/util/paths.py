"""
どこで: `util.paths`。
何を: スクリーンショット保存先ディレクトリの生成と解決。
なぜ: ランナーのキー操作（P）から簡潔に保存先を扱えるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_project_root


def ensure_screenshots_dir(root: Path | None = None) -> Path:
    """スクリーンショット出力先 `data/screenshot/` を作成して返す。

    - 既存の場合もそのまま Path を返す（`exist_ok=True`）。
    """
    base = root if root is not None else _find_project_root(Path(__file__).parent)
    out = base / "data" / "screenshot"
    out.mkdir(parents=True, exist_ok=True)
    return out
