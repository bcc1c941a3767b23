"""
アプリケーション層のポート: キー・バリュー保存先

目的:
- ブラウザのローカルストレージ相当（文字列キー -> 文字列値）を抽象化する。
- 永続化サービスは本ポートにのみ依存し、保存先の実体（ファイル等）を知らない。
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStorage(Protocol):
    """文字列キー・文字列値の保存先。

    契約:
    - get_item は未保存なら None を返す。
    - 読み書きに失敗した場合は StorageError を送出する。
    - set_item が返った後の get_item は、書き込んだ値を返す。
    """

    def get_item(self, key: str) -> str | None:
        """キーに対応する値を返す。"""

    def set_item(self, key: str, value: str) -> None:
        """キーに値を保存する。"""
