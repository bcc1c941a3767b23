from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.matching_pairs_game.adapters.session_store_streamlit import StSessionStore
from src.matching_pairs_game.app.ports.key_value_storage import KeyValueStorage
from src.matching_pairs_game.domain import PairValidationError
from src.matching_pairs_game.services import data_access
from src.matching_pairs_game.services.pair_editor import add_pair, clear_all_pairs, remove_pair


def render_editor(
    store: StSessionStore,
    storage: KeyValueStorage,
    start_round: Callable[[], bool],
) -> None:
    """ペア編集画面（追加フォーム・一覧・全削除・スタート）を描画する。

    Args:
        start_round: スタート押下時に呼ぶコールバック。
    """
    st.header("ペアの登録")

    # フォーム送信は Enter キーでも行える。送信後は入力欄を空にする。
    with st.form("add-pair", clear_on_submit=True):
        c1, c2 = st.columns(2)
        with c1:
            item1 = st.text_input("項目 1（左列）")
        with c2:
            item2 = st.text_input("項目 2（右列）")
        submitted = st.form_submit_button("ペアを追加", type="primary")
    if submitted:
        try:
            add_pair(store, storage, item1, item2)
            st.rerun()
        except PairValidationError as e:
            st.error(str(e))

    pairs = data_access.get_pairs(store)
    st.subheader(f"登録済みのペア（{len(pairs)} 件）")
    if not pairs:
        st.caption("まだペアがありません。")
    for idx, p in enumerate(pairs):
        c1, c2 = st.columns([9, 1])
        with c1:
            st.markdown(f"{p.item1} ↔ {p.item2}")
        with c2:
            if st.button("削除", key=f"remove-{idx}"):
                remove_pair(store, storage, idx)
                st.rerun()

    st.divider()
    c1, c2 = st.columns([1, 3])
    with c1:
        if st.button("スタート", type="primary", disabled=len(pairs) == 0):
            if start_round():
                st.rerun()
    with c2:
        with st.popover("すべて削除", disabled=len(pairs) == 0):
            st.warning("すべてのペアを削除します。元に戻せません。")
            confirmed = st.checkbox("削除してよい", key="confirm-clear")
            if st.button("削除する", disabled=not confirmed, key="clear-all"):
                clear_all_pairs(store, storage, confirmed)
                st.rerun()
