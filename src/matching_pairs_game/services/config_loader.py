from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()

_TIMING_KEYS = ("victory_delay_ms", "victory_duration_ms", "mismatch_clear_ms", "save_notice_ms")


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時（アップロード）で与えられた設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> bool:
    """アップロードされた TOML バイト列から実行時設定を反映する。

    解釈できなければ設定を解除して False を返す。
    """
    try:
        cfg = tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("config.toml を解釈できません: %s", e)
        set_runtime_config(None)
        return False
    set_runtime_config(cfg)
    return True


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。

    方針: デフォルトではローカルの TOML を読み込まない。
    - アップロードによって与えられたランタイム設定があればそれを返す。
    - それ以外は空辞書を返し、各呼び出し側で default 値にフォールバックさせる。
    """
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def get_app_title(default: str = "ペア合わせゲーム") -> str:
    cfg = _get_config()
    title = cfg.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def get_pairs_page_subheader_text(default: str = "保存されているペアの一覧です。") -> str:
    cfg = _get_config()
    pages = cfg.get("pages") or {}
    if isinstance(pages, dict):
        v = pages.get("pairs_subheader")
        if isinstance(v, str) and v.strip():
            return v.strip()
    return default


def load_default_settings_values() -> dict[str, int]:
    result: dict[str, int] = {}
    cfg = _get_config()
    timing = cfg.get("timing")
    if isinstance(timing, dict):
        # 表示タイミングの既定値。bool は int の派生なので除外する。
        # 不正な型の場合は各呼び出し側でコード既定値へフォールバックする。
        for key in _TIMING_KEYS:
            v = timing.get(key)
            if isinstance(v, int) and not isinstance(v, bool) and v >= 0:
                result[key] = int(v)
    return result


def get_runtime_storage_path() -> str | None:
    """アップロード設定の `[storage] path`。

    実行時設定はプロセス全体で共有されるため、保存先は新しいセッションの既定値には使わない。
    アップロードしたセッションだけが apply_runtime_settings 経由で取り込む。
    """
    storage = _get_config().get("storage")
    if isinstance(storage, dict):
        path = storage.get("path")
        if isinstance(path, str) and path.strip():
            return path.strip()
    return None


if TYPE_CHECKING:
    from src.matching_pairs_game.app.state import Settings as _SettingsType


def load_default_settings() -> _SettingsType:
    """表示タイミングの既定値を返す。storage_path は常に None（アダプタ既定の保存先）。"""
    from src.matching_pairs_game.app.state import Settings  # 局所インポートで循環回避

    values = load_default_settings_values()
    return Settings(
        victory_delay_ms=int(values.get("victory_delay_ms", Settings.victory_delay_ms)),
        victory_duration_ms=int(values.get("victory_duration_ms", Settings.victory_duration_ms)),
        mismatch_clear_ms=int(values.get("mismatch_clear_ms", Settings.mismatch_clear_ms)),
        save_notice_ms=int(values.get("save_notice_ms", Settings.save_notice_ms)),
    )
