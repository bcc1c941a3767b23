from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.matching_pairs_game.domain.errors import ImportFormatError, PairValidationError


@dataclass(frozen=True)
class Pair:
    """対応づける2項目のペア。

    現状の契約:
    - item1: 左列（固定）に出す項目
    - item2: 右列（並べ替え対象）に出す項目
    - 同一性はペア一覧内の位置（インデックス）で表す
    """

    item1: str
    item2: str

    def to_record(self) -> dict[str, str]:
        return {"item1": self.item1, "item2": self.item2}


def validate_pair(item1: str | None, item2: str | None) -> Pair:
    """入力値を前後空白除去したうえで検証し、`Pair` を返す。

    - どちらかが空なら PairValidationError
    - 左右が同じ文字列なら PairValidationError
    """
    a = (item1 or "").strip()
    b = (item2 or "").strip()
    if not a or not b:
        raise PairValidationError("ペアの両方の項目を入力してください。")
    if a == b:
        raise PairValidationError("ペアの2項目は異なる内容にしてください。")
    return Pair(item1=a, item2=b)


def pairs_to_records(pairs: Iterable[Pair]) -> list[dict[str, str]]:
    """`Pair` 群を JSON 化可能な辞書のリストにする。"""
    return [p.to_record() for p in pairs]


def pairs_from_records(records: Any) -> list[Pair]:
    """`[{item1, item2}, ...]` 形式の値から `Pair` のリストを作る。

    作成時の検証（空/同一チェック）は再適用しない。
    形式が合わない場合は ImportFormatError。
    """
    if not isinstance(records, list):
        raise ImportFormatError("pairs は配列である必要があります。")
    pairs: list[Pair] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ImportFormatError(f"pairs[{i}] がオブジェクトではありません。")
        item1 = rec.get("item1")
        item2 = rec.get("item2")
        if not isinstance(item1, str) or not isinstance(item2, str):
            raise ImportFormatError(f"pairs[{i}] に item1/item2（文字列）がありません。")
        pairs.append(Pair(item1=item1, item2=item2))
    return pairs
