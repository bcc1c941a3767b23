from __future__ import annotations

import logging
import pathlib

from src.matching_pairs_game.app.ports.key_value_storage import KeyValueStorage
from src.matching_pairs_game.app.ports.session_store import SessionStore
from src.matching_pairs_game.app.state import GameState
from src.matching_pairs_game.services import data_access
from src.matching_pairs_game.services.config_loader import get_runtime_storage_path, load_default_settings
from src.matching_pairs_game.services.persistence import load_pairs

logger = logging.getLogger(__name__)

LOADED_KEY = "pairs_loaded"


def initialize_state(
    store: SessionStore,
    storage: KeyValueStorage,
    bundled_path: str | pathlib.Path | None = None,
) -> GameState:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に読込済みなら何もしない（再実行ごとに読み直さない）。
    読込の失敗はすべて空または既定のペア一覧に落とし、例外は送出しない。
    """
    state = data_access.get_state(store)
    if store.get(LOADED_KEY):
        return state
    data_access.set_pairs(store, load_pairs(storage, bundled_path))
    store.set(LOADED_KEY, True)
    logger.info("セッションを初期化しました: %d ペア", len(state.pairs))
    return state


def apply_runtime_settings(store: SessionStore) -> bool:
    """ランタイム設定（アップロード TOML 由来）を現在のセッションへ反映する。

    保存先はこのセッションの Settings にだけ入る。
    保存先が変わった場合は次回の initialize_state で読み直すようにし、True を返す。
    """
    state = data_access.get_state(store)
    old_path = state.settings.storage_path
    state.settings = load_default_settings()
    state.settings.storage_path = get_runtime_storage_path()
    if state.settings.storage_path != old_path:
        store.set(LOADED_KEY, False)
        return True
    return False
