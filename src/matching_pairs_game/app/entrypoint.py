import logging
import time

import streamlit as st

from src.matching_pairs_game.adapters.session_store_streamlit import StSessionStore
from src.matching_pairs_game.adapters.storage_json_file import JsonFileStorage
from src.matching_pairs_game.app.state import GameState
from src.matching_pairs_game.services import app_state, data_access, gameplay, persistence
from src.matching_pairs_game.services.config_loader import get_app_title
from src.matching_pairs_game.ui.board import render_board
from src.matching_pairs_game.ui.editor import render_editor
from src.matching_pairs_game.ui.header import render_header
from src.matching_pairs_game.ui.sidebar import render_sidebar
from src.matching_pairs_game.ui.status import render_result, render_save_notice, render_stats

# 遅延遷移待ちの間、再実行するまでの最大待ち秒
_MAX_WAIT_SEC = 0.5


def _wait_and_rerun(state: GameState) -> None:
    """保留中の遅延遷移があれば、次の期限（最大 _MAX_WAIT_SEC）まで待って再実行する。

    Streamlit にはコールバック型のタイマーが無いため、再実行のたびに tick で期限到来分を適用する。
    """
    now = time.time()
    due = state.scheduler.next_due()
    if due is None:
        return
    time.sleep(min(_MAX_WAIT_SEC, max(0.0, due - now)))
    st.rerun()


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    default_title = "ペア合わせゲーム"
    st.set_page_config(page_title=default_title, layout="wide")

    store = StSessionStore()
    state = data_access.get_state(store)
    storage = JsonFileStorage(state.settings.storage_path)
    app_state.initialize_state(store, storage)

    st.title(get_app_title(default_title))

    # 期限の来た遅延遷移（勝利表示・不一致表示の解除）を適用
    fired = gameplay.tick(store)

    render_sidebar(store, storage)
    if persistence.expire_save_notice(store):
        render_save_notice(store)

    if state.round is None:
        render_editor(store, storage, start_round=lambda: gameplay.start_round(store))
    else:
        render_header(
            store,
            check_answers=lambda: gameplay.check_answers(store),
            reset_game=lambda: gameplay.reset_game(store),
        )
        render_stats(state)
        render_result(state, celebrate=gameplay.SHOW_VICTORY in fired)
        st.divider()
        render_board(store)

    _wait_and_rerun(state)
