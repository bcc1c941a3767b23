"""JSON ファイルによるキー・バリュー保存先アダプタ。

目的:
- ブラウザのローカルストレージ相当を、ユーザーごとのローカルファイルで提供する。
- ファイル内容は `{キー: 文字列値}` の JSON オブジェクト。

契約:
- 書き込みは一時ファイル経由で置き換えるため、途中失敗で既存内容を壊さない。
- 読み書きの失敗は StorageError として送出する（呼び出し側で握る）。
"""

from __future__ import annotations

import json
import logging
import os
import pathlib
import tempfile

from src.matching_pairs_game.app.ports.key_value_storage import KeyValueStorage
from src.matching_pairs_game.domain import StorageError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_PATH = pathlib.Path.home() / ".matching_pairs_game" / "local_storage.json"


class JsonFileStorage(KeyValueStorage):
    def __init__(self, path: str | pathlib.Path | None = None) -> None:
        self.path = pathlib.Path(path) if path else DEFAULT_STORAGE_PATH

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"保存先を読み込めません: {self.path}: {e}") from e
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"保存先の内容が JSON ではありません: {self.path}") from e
        if not isinstance(data, dict):
            raise StorageError(f"保存先の内容がオブジェクトではありません: {self.path}")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=".storage-", suffix=".json", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp, self.path)
            finally:
                if os.path.exists(tmp):
                    os.remove(tmp)
        except OSError as e:
            raise StorageError(f"保存先に書き込めません: {self.path}: {e}") from e
        logger.debug("保存先を更新しました: %s (%s)", self.path, key)
