"""
ペア一覧の永続化サービス（Streamlit 非依存）
- 保存: キー・バリュー保存先へ書き込み、ダウンロード用の JSON 文書も作る
- 起動時の読込: 保存先 → 同梱 JSON → 既定ペア の順に試す
- インポート/エクスポート: `{pairs, lastUpdated, version}` 形式の JSON 文書

保存先の失敗はログに残して握る。呼び出し元の処理は止めない。
"""

from __future__ import annotations

import json
import logging
import pathlib
import time
from datetime import datetime, timezone
from typing import Any

from src.matching_pairs_game.app.ports.key_value_storage import KeyValueStorage
from src.matching_pairs_game.app.ports.session_store import SessionStore
from src.matching_pairs_game.domain import (
    DEFAULT_PAIRS,
    EXPORT_VERSION,
    STORAGE_KEY,
    ImportFormatError,
    Pair,
    StorageError,
    pairs_from_records,
    pairs_to_records,
)
from src.matching_pairs_game.domain.constants import PROJECT_NAME
from src.matching_pairs_game.services import data_access

logger = logging.getLogger(__name__)

BUNDLED_PAIRS_PATH = pathlib.Path(__file__).resolve().parent.parent / "data" / "pairs.json"


def _timestamp(now: datetime | None = None) -> str:
    """ISO 8601（UTC, ミリ秒, 末尾 Z）の時刻文字列。"""
    ts = now or datetime.now(timezone.utc)
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _write_storage(storage: KeyValueStorage, pairs: list[Pair]) -> bool:
    try:
        storage.set_item(STORAGE_KEY, json.dumps(pairs_to_records(pairs), ensure_ascii=False))
    except StorageError as e:
        logger.warning("ペアを保存できませんでした: %s", e)
        return False
    logger.info("ペアを保存しました: %d 件", len(pairs))
    return True


def build_saved_document(pairs: list[Pair], now: datetime | None = None) -> dict[str, Any]:
    """保存のたびに作る、ダウンロード用の JSON 文書（件数・メタデータ付き）。"""
    return {
        "pairs": pairs_to_records(pairs),
        "lastUpdated": _timestamp(now),
        "version": EXPORT_VERSION,
        "totalPairs": len(pairs),
        "projectName": PROJECT_NAME,
    }


def save_pairs(store: SessionStore, storage: KeyValueStorage, now: datetime | None = None) -> bool:
    """現在のペア一覧を保存する。

    - 書き込み失敗はログのみ（例外は送出しない）。戻り値で成否を返す。
    - 書き込めたときだけ、ダウンロード用文書と保存通知の表示期限をセッションに設定する。
    """
    state = data_access.get_state(store)
    ok = _write_storage(storage, state.pairs)
    if ok:
        state.saved_document = build_saved_document(state.pairs, now)
        state.save_notice_until = time.time() + state.settings.save_notice_ms / 1000.0
    return ok


def expire_save_notice(store: SessionStore, now: float | None = None) -> bool:
    """期限切れの保存通知を閉じる。通知がまだ表示中なら True。"""
    state = data_access.get_state(store)
    until = state.save_notice_until
    if until is None:
        return False
    if (time.time() if now is None else now) >= until:
        state.save_notice_until = None
        return False
    return state.saved_document is not None


def _load_bundled(path: pathlib.Path) -> list[Pair]:
    """同梱 JSON（`{pairs: [...]}`）を読む。失敗時は例外を送出する。"""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ImportFormatError("同梱データがオブジェクトではありません。")
    return pairs_from_records(data.get("pairs", []))


def load_pairs(
    storage: KeyValueStorage,
    bundled_path: str | pathlib.Path | None = None,
) -> list[Pair]:
    """起動時のペア一覧を返す。

    順序:
    1. 保存先にあればそれを使う（壊れていれば空リスト）
    2. 無ければ同梱 JSON を読み、保存先へ書き戻す
    3. 同梱 JSON も読めなければ既定ペアを使い、保存先へ書き戻す
    """
    try:
        raw = storage.get_item(STORAGE_KEY)
    except StorageError as e:
        logger.warning("保存先を読み込めませんでした: %s", e)
        return []

    if raw is not None:
        try:
            pairs = pairs_from_records(json.loads(raw))
        except (json.JSONDecodeError, ImportFormatError) as e:
            logger.warning("保存済みのペアを解釈できませんでした: %s", e)
            return []
        logger.info("保存先からペアを読み込みました: %d 件", len(pairs))
        return pairs

    path = pathlib.Path(bundled_path) if bundled_path else BUNDLED_PAIRS_PATH
    try:
        pairs = _load_bundled(path)
        logger.info("同梱データからペアを読み込みました: %d 件", len(pairs))
    except (OSError, json.JSONDecodeError, ImportFormatError) as e:
        logger.warning("同梱データを読み込めませんでした（既定ペアを使用）: %s", e)
        pairs = [Pair(item1=a, item2=b) for a, b in DEFAULT_PAIRS]
    _write_storage(storage, pairs)
    return pairs


def parse_import_document(data: bytes | str) -> list[Pair]:
    """インポート文書を解釈してペア一覧を返す。`pairs` 配列が無ければ ImportFormatError。"""
    try:
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        doc = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ImportFormatError(f"JSON として読み込めません: {e}") from e
    if not isinstance(doc, dict) or not isinstance(doc.get("pairs"), list):
        raise ImportFormatError("ファイル形式が不正です（pairs 配列がありません）。")
    return pairs_from_records(doc["pairs"])


def import_pairs(store: SessionStore, storage: KeyValueStorage, data: bytes | str) -> list[Pair]:
    """インポート文書でペア一覧を丸ごと置き換えて保存する。

    形式不正なら ImportFormatError を送出し、既存の一覧は変更しない。
    """
    pairs = parse_import_document(data)
    data_access.set_pairs(store, pairs)
    save_pairs(store, storage)
    logger.info("ペアをインポートしました: %d 件", len(pairs))
    return pairs


def export_document(pairs: list[Pair], now: datetime | None = None) -> dict[str, Any]:
    """エクスポート文書（pairs, lastUpdated, version）を返す。"""
    return {
        "pairs": pairs_to_records(pairs),
        "lastUpdated": _timestamp(now),
        "version": EXPORT_VERSION,
    }


def document_bytes(doc: dict[str, Any]) -> bytes:
    """ダウンロード用に整形（indent=2）した UTF-8 バイト列。"""
    return json.dumps(doc, ensure_ascii=False, indent=2).encode("utf-8")


def export_bytes(store: SessionStore, now: datetime | None = None) -> bytes:
    return document_bytes(export_document(data_access.get_pairs(store), now))
