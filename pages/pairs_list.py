"""
ペア一覧ページ
- セッションのペア一覧を表で表示します。
- 左右の項目で絞り込めます。
"""

import pandas as pd
import streamlit as st

from src.matching_pairs_game.adapters.session_store_streamlit import StSessionStore
from src.matching_pairs_game.adapters.storage_json_file import JsonFileStorage
from src.matching_pairs_game.services import app_state, data_access
from src.matching_pairs_game.services.config_loader import get_pairs_page_subheader_text

# ページ設定
st.set_page_config(page_title="ペア一覧", layout="wide")
st.title("ペア一覧")
st.caption(get_pairs_page_subheader_text())

# このページから開かれた場合もセッションへ保存済みのペアを読み込む
store = StSessionStore()
state = app_state.initialize_state(store, JsonFileStorage(data_access.get_state(store).settings.storage_path))
pairs = state.pairs
if not pairs:
    st.info("ペアがありません。トップページで追加するか、JSON をインポートしてください。")
    st.stop()

df = pd.DataFrame(
    [{"No.": i + 1, "項目 1": p.item1, "項目 2": p.item2} for i, p in enumerate(pairs)]
)

query = st.text_input("絞り込み", placeholder="どちらかの項目に含まれる文字列")
if query:
    q = query.strip().lower()
    mask = df["項目 1"].str.lower().str.contains(q, regex=False) | df["項目 2"].str.lower().str.contains(
        q, regex=False
    )
    df = df[mask]

st.caption(f"{len(df)} / {len(pairs)} 件")
st.dataframe(df, hide_index=True, use_container_width=True)
