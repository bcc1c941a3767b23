from __future__ import annotations

import streamlit as st

from src.matching_pairs_game.app.ports.session_store import SessionStore
from src.matching_pairs_game.app.state import GameState
from src.matching_pairs_game.domain import Phase
from src.matching_pairs_game.domain.constants import UPDATED_FILE_NAME
from src.matching_pairs_game.services import data_access
from src.matching_pairs_game.services.persistence import document_bytes, expire_save_notice


def render_stats(state: GameState) -> None:
    """正解数と試行回数を表示する。"""
    total = state.round.size if state.round else len(state.pairs)
    c1, c2 = st.columns(2)
    with c1:
        st.metric("正解", f"{state.matched_pairs}/{total}")
    with c2:
        st.metric("試行", state.attempts)


def render_result(state: GameState, celebrate: bool) -> None:
    """判定後の結果（勝利表示）を描画する。

    Args:
        celebrate: 勝利表示が今回の再実行で始まったときだけ True（演出を1回に限る）。
    """
    if state.victory_visible:
        st.success(f"🎉 全問正解！ {state.attempts} 回目でそろいました。")
        if celebrate:
            st.balloons()
    elif state.phase is Phase.WON:
        st.info("そろいました。リセットで編集画面に戻れます。")


# 保存通知だけを再描画する間隔（秒）
_NOTICE_REFRESH_SEC = 1.0


@st.fragment(run_every=_NOTICE_REFRESH_SEC)
def render_save_notice(store: SessionStore) -> None:
    """保存直後に、更新済み pairs.json のダウンロード案内を一定時間表示する。

    ページ全体は再実行せず、この通知部分だけを定期的に描き直して期限切れで消す。
    """
    if not expire_save_notice(store):
        return
    state = data_access.get_state(store)
    with st.container(border=True):
        c1, c2, c3 = st.columns([6, 3, 1])
        with c1:
            st.markdown(f"📁 保存しました（{len(state.pairs)} ペア）")
        with c2:
            st.download_button(
                "JSON をダウンロード",
                data=document_bytes(state.saved_document),
                file_name=UPDATED_FILE_NAME,
                mime="application/json",
                key="download-updated",
            )
        with c3:
            if st.button("×", key="close-save-notice"):
                state.save_notice_until = None
                st.rerun()
