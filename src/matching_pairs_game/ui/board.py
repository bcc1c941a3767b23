from __future__ import annotations

import streamlit as st

from src.matching_pairs_game.adapters.session_store_streamlit import StSessionStore
from src.matching_pairs_game.domain import Phase
from src.matching_pairs_game.services import data_access
from src.matching_pairs_game.services.gameplay import (
    MARK_MATCHED,
    MARK_WRONG,
    begin_drag,
    drop_at_row,
    end_drag,
)

_MARK_ICON = {MARK_MATCHED: "✅", MARK_WRONG: "❌"}


def _label(text: str, mark: str | None) -> str:
    icon = _MARK_ICON.get(mark or "")
    return f"{icon} {text}" if icon else text


def render_board(store: StSessionStore) -> None:
    """2列の盤面を描画する。

    - 左列は固定（押せない）。
    - 右列は押すとつかみ、つかみ中は他の行を押すとその前へ差し込む。末尾ボタンで最後へ移す。
    - 描画は GameState の並びを読むだけで、並びの変更はサービスに委譲する。
    """
    state = data_access.get_state(store)
    left = data_access.get_left_items(store)
    right = data_access.get_right_items(store)
    playing = state.phase is Phase.PLAYING
    dragging = state.dragging

    h1, h2 = st.columns(2)
    h1.markdown("**列 A（固定）**")
    h2.markdown("**列 B（並べ替え）**")

    for i, (a, b) in enumerate(zip(left, right)):
        mark = state.marks.get(i)
        c1, c2 = st.columns(2)
        c1.button(_label(a.text, mark), key=f"left-{a.item_id}", disabled=True, use_container_width=True)
        if dragging is None:
            if c2.button(
                _label(b.text, mark),
                key=f"right-{b.item_id}",
                disabled=not playing,
                use_container_width=True,
            ):
                begin_drag(store, b.item_id)
                st.rerun()
        elif dragging == b.item_id:
            if c2.button(f"✋ {b.text}", key=f"right-{b.item_id}", type="primary", use_container_width=True):
                end_drag(store)
                st.rerun()
        else:
            if c2.button(f"⤴ この前へ: {b.text}", key=f"right-{b.item_id}", use_container_width=True):
                drop_at_row(store, i)
                st.rerun()

    if dragging is not None:
        _, c2 = st.columns(2)
        if c2.button("⤵ いちばん下へ", key="drop-end", use_container_width=True):
            drop_at_row(store, len(right))
            st.rerun()
