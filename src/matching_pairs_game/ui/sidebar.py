from __future__ import annotations

import streamlit as st

from src.matching_pairs_game.adapters.session_store_streamlit import StSessionStore
from src.matching_pairs_game.app.ports.key_value_storage import KeyValueStorage
from src.matching_pairs_game.domain import ImportFormatError
from src.matching_pairs_game.domain.constants import EXPORT_FILE_NAME
from src.matching_pairs_game.services import app_state, data_access
from src.matching_pairs_game.services.config_loader import set_runtime_toml_bytes
from src.matching_pairs_game.services.persistence import export_bytes, import_pairs


def render_sidebar(store: StSessionStore, storage: KeyValueStorage) -> None:
    """サイドバー（エクスポート/インポート/設定ファイル）を描画する。

    - インポート・設定の変更は編集中のみ受け付ける。
    - ページリンクは利用可能な場合のみ表示する。
    """
    state = data_access.get_state(store)
    editing = state.round is None

    with st.sidebar:
        st.subheader("バックアップ")
        st.download_button(
            "ペアをエクスポート",
            data=export_bytes(store),
            file_name=EXPORT_FILE_NAME,
            mime="application/json",
            disabled=not state.pairs,
        )
        up = st.file_uploader("ペアをインポート（JSON）", type=["json"], disabled=not editing)
        if st.button("インポート", disabled=up is None or not editing):
            try:
                assert up is not None
                pairs = import_pairs(store, storage, up.getvalue())
                st.success(f"{len(pairs)} ペアをインポートしました。")
            except ImportFormatError as e:
                st.error(f"インポートに失敗しました。ファイル形式を確認してください: {e}")

        st.divider()
        st.subheader("設定")
        cfg = st.file_uploader("config.toml", type=["toml"], disabled=not editing)
        if st.button("設定を反映", disabled=cfg is None or not editing):
            assert cfg is not None
            if set_runtime_toml_bytes(cfg.getvalue()):
                # 保存先が変わった場合は次の再実行で読み直される
                app_state.apply_runtime_settings(store)
                st.rerun()
            else:
                st.error("config.toml を読み込めませんでした。")

        try:
            # 新しめの Streamlit では page_link が提供される
            if hasattr(st.sidebar, "page_link"):
                st.divider()
                st.page_link("pages/pairs_list.py", label="ペア一覧")
        except Exception:
            # 未対応環境ではデフォルトのページ切替UIを利用してもらう
            st.info("ページ切替は画面左上のページメニューから行えます。")
