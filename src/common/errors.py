"""
どこで: `common.errors`。
何を: 色指定の不正と呼び出し契約違反を表す 2 種類の例外を定義。
なぜ: 入力検証の失敗（回復可能）とプログラミング上の誤り（呼び出し単位で致命的）を
呼び出し側が区別できるようにするため。どちらも `ValueError` 互換。
"""

from __future__ import annotations


class InvalidColorFormat(ValueError):
    """16 進カラー文字列として解釈できない入力。"""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        msg = f"invalid hex color: {value!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class InvalidParameter(ValueError):
    """関数の事前条件を満たさない引数（例: ステップ数 < 1）。"""


__all__ = ["InvalidColorFormat", "InvalidParameter"]
