"""
どこで: `common.settings`
何を: 実行時設定（FPS/ノイズ精細度/ログレベル）を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

環境変数（接頭辞 `PXC_`）:
- `PXC_FPS`: 描画レート。未設定なら `None`（設定ファイル → 60 の順で解決）。
- `PXC_NOISE_OCTAVES`: ノイズのオクターブ数（既定 3、下限 1）。
- `PXC_LOG_LEVEL`: ログレベル名（既定 "INFO"）。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str


@dataclass
class _Settings:
    FPS: int | None = None
    NOISE_OCTAVES: int = 3
    NOISE_FALLOFF: float = 0.45
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.FPS = env_int("PXC_FPS", None, min_value=1)
    _settings.NOISE_OCTAVES = env_int("PXC_NOISE_OCTAVES", 3, min_value=1) or 3
    _settings.LOG_LEVEL = (env_str("PXC_LOG_LEVEL", "INFO") or "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
