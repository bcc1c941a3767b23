from __future__ import annotations

from src.matching_pairs_game.app.ports.session_store import SessionStore
from src.matching_pairs_game.app.state import GameState
from src.matching_pairs_game.domain import GameItem, Pair

GAME_STATE_KEY = "game"


def get_state(store: SessionStore) -> GameState:
    """セッション内の GameState を返す（未作成なら作る）。"""
    return store.get_or_create(GAME_STATE_KEY, GameState)


def get_pairs(store: SessionStore) -> list[Pair]:
    """セッションのペア一覧を返す。"""
    return get_state(store).pairs


def set_pairs(store: SessionStore, pairs: list[Pair]) -> None:
    """ペア一覧を置き換える。

    - UI やサービスからは本関数経由で設定することで、参照箇所の統一を図る。
    """
    get_state(store).pairs = list(pairs)


def get_left_items(store: SessionStore) -> list[GameItem]:
    """左列の項目（ラウンド外なら空）。"""
    rnd = get_state(store).round
    return list(rnd.left_items) if rnd else []


def get_right_items(store: SessionStore) -> list[GameItem]:
    """右列の項目を現在の並び順で返す（ラウンド外なら空）。"""
    rnd = get_state(store).round
    return rnd.right_in_order() if rnd else []
