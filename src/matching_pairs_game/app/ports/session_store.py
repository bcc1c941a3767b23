"""
アプリケーション層のポート: セッションストア

目的:
- 1 タブ分のゲーム状態（GameState）の置き場を、Streamlit の session_state から切り離す。
- サービス層は本ポート（Protocol）にのみ依存し、テストでは辞書実装に差し替える。
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class SessionStore(Protocol):
    """セッション状態へのアクセス抽象。

    契約:
    - get/set は dict と同じ意味。
    - get_or_create は未設定時のみ factory() の結果を保存して返す（再実行をまたいで同じ値を返す）。
    """

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        ...

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        ...

    def get_or_create(self, key: str, factory: Callable[[], T]) -> T:
        ...
