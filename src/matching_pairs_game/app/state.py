"""アプリケーションの状態モデル定義。

目的:
- UI とドメインの境界で用いる明示的な状態構造を提供する。
- サービス層は GameState を読み書きし、UI はそれを描画するだけにする。

使い方:
- UI でセッションから GameState を取り出し描画に渡す。
- ユーザー操作はサービス関数に渡し、サービスが GameState を更新する。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.matching_pairs_game.domain import Pair, Phase, Round, Scheduler, TimerHandle
from src.matching_pairs_game.domain import constants as C


@dataclass
class Settings:
    """表示タイミングと保存先に関する設定。

    現状の契約:
    - *_ms はミリ秒。
    - storage_path が None のときはアダプタ既定の保存先を使う。
    """

    victory_delay_ms: int = C.VICTORY_DELAY_MS
    victory_duration_ms: int = C.VICTORY_DURATION_MS
    mismatch_clear_ms: int = C.MISMATCH_CLEAR_MS
    save_notice_ms: int = C.SAVE_NOTICE_MS
    storage_path: str | None = None


@dataclass
class GameState:
    """ゲーム全体の状態。

    現状の契約:
    - pairs はペア一覧の唯一の正本。編集操作からのみ変更する。
    - round は現在のラウンド（編集中は None）。右列の並びは round.arrangement。
    - attempts/matched_pairs はラウンドごとのカウンタ。
    - marks は行ごとの判定表示（"matched" / "wrong"）。
    - dragging は右列でつかんでいる項目 id。
    - scheduler は表示用の遅延遷移。mismatch_timer は保留中の不一致表示解除。
    - saved_document は最後の保存時に作った JSON 文書（ダウンロード用）。
    - save_notice_until は保存通知を表示し続ける期限（epoch 秒）。
    """

    # データ
    pairs: list[Pair] = field(default_factory=list)

    # 進行
    phase: Phase = Phase.EDITING
    round: Round | None = None
    attempts: int = 0
    matched_pairs: int = 0
    marks: dict[int, str] = field(default_factory=dict)
    dragging: str | None = None

    # 表示
    victory_visible: bool = False
    save_notice_until: float | None = None  # epoch seconds
    saved_document: dict[str, Any] | None = None
    scheduler: Scheduler = field(default_factory=Scheduler)
    mismatch_timer: TimerHandle | None = None

    # 設定
    settings: Settings = field(default_factory=lambda: _load_settings_from_text())


def _load_settings_from_text() -> Settings:
    """外部テキストから Settings を読み込む（フォールバックあり）。"""
    try:
        from src.matching_pairs_game.services.config_loader import load_default_settings

        return load_default_settings()
    except Exception:
        # 何らかの読み込み失敗時はコード既定値
        return Settings()
