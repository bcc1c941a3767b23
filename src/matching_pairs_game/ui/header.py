from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.matching_pairs_game.adapters.session_store_streamlit import StSessionStore
from src.matching_pairs_game.domain import Phase
from src.matching_pairs_game.services import data_access


def render_header(
    store: StSessionStore,
    check_answers: Callable[[], object],
    reset_game: Callable[[], None],
) -> None:
    """プレイ中のヘッダー（判定・リセット）を描画する。

    Args:
        check_answers: 判定ボタン押下時のコールバック。
        reset_game: 編集画面へ戻るコールバック。
    """
    state = data_access.get_state(store)
    c1, c2, _ = st.columns([1, 1, 6])
    with c1:
        if st.button("判定", type="primary", disabled=state.phase is not Phase.PLAYING):
            check_answers()
            st.rerun()
    with c2:
        if st.button("リセット"):
            reset_game()
            st.rerun()
