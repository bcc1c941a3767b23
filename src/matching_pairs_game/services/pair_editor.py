from __future__ import annotations

import logging

from src.matching_pairs_game.app.ports.key_value_storage import KeyValueStorage
from src.matching_pairs_game.app.ports.session_store import SessionStore
from src.matching_pairs_game.domain import Pair, validate_pair
from src.matching_pairs_game.services import data_access
from src.matching_pairs_game.services.persistence import save_pairs

# ペア一覧の編集操作。いずれも成功時は一覧全体を保存する。
# 本モジュールは UI フレームワークに依存しない。

logger = logging.getLogger(__name__)


def add_pair(store: SessionStore, storage: KeyValueStorage, item1: str, item2: str) -> Pair:
    """ペアを末尾に追加して保存する。

    入力が空、または2項目が同じなら PairValidationError（状態は変更しない）。
    """
    pair = validate_pair(item1, item2)
    state = data_access.get_state(store)
    state.pairs.append(pair)
    save_pairs(store, storage)
    return pair


def remove_pair(store: SessionStore, storage: KeyValueStorage, index: int) -> Pair | None:
    """index 位置のペアを削除して保存する。範囲外なら何もせず None。"""
    state = data_access.get_state(store)
    if not 0 <= index < len(state.pairs):
        return None
    removed = state.pairs.pop(index)
    save_pairs(store, storage)
    return removed


def clear_all_pairs(store: SessionStore, storage: KeyValueStorage, confirmed: bool) -> bool:
    """確認済みのときだけ全ペアを削除して保存する。削除したら True。"""
    if not confirmed:
        return False
    data_access.set_pairs(store, [])
    save_pairs(store, storage)
    logger.info("全ペアを削除しました")
    return True
