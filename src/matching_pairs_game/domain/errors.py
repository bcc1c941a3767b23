"""アプリ全体で扱う例外の定義。

- 入力検証の失敗: PairValidationError
- インポート文書の形式不正: ImportFormatError
- 保存先の読み書き失敗: StorageError
"""

from __future__ import annotations


class PairValidationError(ValueError):
    """ペア入力が不正（空、または左右が同一）。"""


class ImportFormatError(ValueError):
    """インポート文書に `pairs` 配列が無い、または要素の形式が不正。"""


class StorageError(OSError):
    """キー・バリュー保存先への読み書きに失敗した。"""
