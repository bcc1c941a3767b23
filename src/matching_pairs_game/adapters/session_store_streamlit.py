"""Streamlit セッション状態アダプタ。

目的:
- `st.session_state` を扱うのはこのアダプタと UI 層だけにする。
- アプリ層ポート `SessionStore` の実装を提供する。
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from src.matching_pairs_game.app.ports.session_store import SessionStore

T = TypeVar("T")


class StSessionStore(SessionStore):
    """Streamlit 実装の SessionStore。"""

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        import streamlit as st

        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        import streamlit as st

        st.session_state[key] = value

    def get_or_create(self, key: str, factory: Callable[[], T]) -> T:
        import streamlit as st

        if key not in st.session_state:
            st.session_state[key] = factory()
        return st.session_state[key]
