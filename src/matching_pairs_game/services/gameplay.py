from __future__ import annotations

import logging
import random
import time
from collections.abc import Mapping

from src.matching_pairs_game.app.ports.session_store import SessionStore
from src.matching_pairs_game.app.state import GameState
from src.matching_pairs_game.domain import (
    Box,
    CheckResult,
    DragController,
    Phase,
    build_round,
    check_arrangement,
    row_boxes,
)
from src.matching_pairs_game.services import data_access

# UI コンポーネントからのイベント（開始、つかむ/離す、判定、リセット）を受け取り、
# GameState の更新とドメイン操作を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。状態アクセスは SessionStore 経由で行う。

logger = logging.getLogger(__name__)

MARK_MATCHED = "matched"
MARK_WRONG = "wrong"

# 遅延遷移の名前
SHOW_VICTORY = "show_victory"
HIDE_VICTORY = "hide_victory"
CLEAR_MISMATCH = "clear_mismatch"

# 盤面の1行の高さ（並べ替え位置の計算に使う仮想座標）
ROW_HEIGHT: float = 48.0


def _now(now: float | None) -> float:
    return time.time() if now is None else float(now)


def start_round(store: SessionStore, rng: random.Random | None = None) -> bool:
    """ラウンドを開始する。ペアが無ければ何もせず False。

    - 右列は1回シャッフルする。
    - カウンタ・判定表示・保留中の遅延遷移はすべて初期化する。
    """
    state = data_access.get_state(store)
    if not state.pairs:
        return False
    state.scheduler.cancel_all()
    state.mismatch_timer = None
    state.round = build_round(state.pairs, rng)
    state.attempts = 0
    state.matched_pairs = 0
    state.marks = {}
    state.dragging = None
    state.victory_visible = False
    state.phase = Phase.PLAYING
    logger.info("ラウンド開始: %d ペア", state.round.size)
    return True


def _controller(state: GameState) -> DragController | None:
    if state.phase is not Phase.PLAYING or state.round is None:
        return None
    ctl = DragController(state.round.arrangement)
    ctl.dragging = state.dragging
    return ctl


def begin_drag(store: SessionStore, item_id: str) -> bool:
    """右列の項目をつかむ。左列やラウンド外では False。"""
    state = data_access.get_state(store)
    ctl = _controller(state)
    if ctl is None or not ctl.start(item_id):
        return False
    state.dragging = ctl.dragging
    return True


def drag_over(store: SessionStore, pointer_y: float, boxes: Mapping[str, Box]) -> bool:
    """つかんでいる項目をポインタ位置へ差し込む。並びが変わったら判定表示を消す。"""
    state = data_access.get_state(store)
    ctl = _controller(state)
    if ctl is None:
        return False
    changed = ctl.over(pointer_y, boxes)
    if changed:
        state.marks = {}
    return changed


def drop_item(store: SessionStore) -> None:
    ctl = _controller(data_access.get_state(store))
    if ctl is not None:
        ctl.drop()


def end_drag(store: SessionStore) -> None:
    """つかみ状態を解除する。"""
    state = data_access.get_state(store)
    ctl = _controller(state)
    if ctl is not None:
        ctl.end()
    state.dragging = None


def drop_at_row(store: SessionStore, row: int, row_height: float = ROW_HEIGHT) -> bool:
    """つかんでいる項目を row 行目の位置に置く（row が行数以上なら末尾）。

    等しい高さの行レイアウトを仮定し、row 行目の上端付近をポインタ位置とみなす。
    """
    state = data_access.get_state(store)
    if state.round is None or state.dragging is None:
        return False
    arrangement = state.round.arrangement
    boxes = row_boxes(arrangement, row_height)
    pointer_y = max(0, row) * row_height + row_height / 4
    changed = drag_over(store, pointer_y, boxes)
    drop_item(store)
    end_drag(store)
    return changed


def check_answers(store: SessionStore, now: float | None = None) -> CheckResult | None:
    """現在の並びを判定する。プレイ中以外は何もせず None。

    - attempts を1増やし、matched_pairs と行ごとの判定表示を更新する。
    - 全行一致: WON に遷移し、勝利表示の表示/非表示を予約する。
    - それ以外: 不一致表示の解除を予約する（並びはそのまま）。
    """
    state = data_access.get_state(store)
    if state.phase is not Phase.PLAYING or state.round is None:
        return None
    ts = _now(now)
    state.attempts += 1
    result = check_arrangement(state.round.left_items, state.round.right_in_order())
    state.matched_pairs = result.matched_count
    state.marks = {i: (MARK_MATCHED if ok else MARK_WRONG) for i, ok in enumerate(result.matched)}

    settings = state.settings
    # 前回の判定の解除予約は今回の判定表示に対して発火させない
    if state.mismatch_timer is not None:
        state.mismatch_timer.cancel()
        state.mismatch_timer = None
    if result.all_correct:
        state.phase = Phase.WON
        state.dragging = None
        show_delay = settings.victory_delay_ms / 1000.0
        state.scheduler.schedule(SHOW_VICTORY, show_delay, ts)
        state.scheduler.schedule(
            HIDE_VICTORY, show_delay + settings.victory_duration_ms / 1000.0, ts
        )
        logger.info("全問正解: 試行 %d 回", state.attempts)
    else:
        state.mismatch_timer = state.scheduler.schedule(
            CLEAR_MISMATCH, settings.mismatch_clear_ms / 1000.0, ts
        )
    return result


def tick(store: SessionStore, now: float | None = None) -> list[str]:
    """期限の来た遅延遷移を適用し、適用した名前を返す。"""
    state = data_access.get_state(store)
    fired = state.scheduler.run_due(_now(now))
    for name in fired:
        if name == SHOW_VICTORY:
            state.victory_visible = True
        elif name == HIDE_VICTORY:
            state.victory_visible = False
        elif name == CLEAR_MISMATCH:
            state.mismatch_timer = None
            state.marks = {i: m for i, m in state.marks.items() if m != MARK_WRONG}
    return fired


def reset_game(store: SessionStore) -> None:
    """編集画面へ戻す。保存済みペアはそのまま、ラウンドと遅延遷移は破棄する。"""
    state = data_access.get_state(store)
    state.scheduler.cancel_all()
    state.mismatch_timer = None
    state.round = None
    state.marks = {}
    state.dragging = None
    state.victory_visible = False
    state.phase = Phase.EDITING
