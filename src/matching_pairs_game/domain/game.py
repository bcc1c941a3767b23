from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from src.matching_pairs_game.domain.data import Pair

T = TypeVar("T")


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class Phase(str, Enum):
    """ゲームの進行段階（編集 → プレイ → 完成）。"""

    EDITING = "editing"
    PLAYING = "playing"
    WON = "won"


@dataclass(frozen=True)
class GameItem:
    """ペアの片側を盤面に出すための項目。ラウンド開始ごとに作り直す。"""

    item_id: str
    text: str
    pair_index: int
    side: Side


@dataclass
class Round:
    """1ラウンド分の盤面。

    - left_items: 左列（ペア順で固定）
    - right_items: 右列項目の id -> 項目
    - arrangement: 右列の現在の並び（項目 id の順序）。並べ替えはここだけを変更する。
    """

    left_items: list[GameItem]
    right_items: dict[str, GameItem]
    arrangement: list[str] = field(default_factory=list)

    def right_in_order(self) -> list[GameItem]:
        return [self.right_items[i] for i in self.arrangement]

    @property
    def size(self) -> int:
        return len(self.left_items)


@dataclass(frozen=True)
class CheckResult:
    """並びの判定結果。matched[i] は i 行目が正しく対応しているか。"""

    matched: tuple[bool, ...]

    @property
    def matched_count(self) -> int:
        return sum(1 for m in self.matched if m)

    @property
    def all_correct(self) -> bool:
        return all(self.matched)


def shuffle_in_place(items: MutableSequence[T], rng: random.Random | None = None) -> None:
    """Fisher–Yates で一様にシャッフルする（末尾から先頭へ、[0, i] と交換）。"""
    r = rng or random
    for i in range(len(items) - 1, 0, -1):
        j = r.randint(0, i)
        items[i], items[j] = items[j], items[i]


def build_items(pairs: Sequence[Pair], side: Side) -> list[GameItem]:
    """ペア順に片側の項目を作る。id は "<pair_index>_1" / "<pair_index>_2"。"""
    suffix = "1" if side is Side.LEFT else "2"
    items: list[GameItem] = []
    for idx, p in enumerate(pairs):
        text = p.item1 if side is Side.LEFT else p.item2
        items.append(GameItem(item_id=f"{idx}_{suffix}", text=text, pair_index=idx, side=side))
    return items


def build_round(pairs: Sequence[Pair], rng: random.Random | None = None) -> Round:
    """左列はペア順、右列は1回シャッフルした並びでラウンドを作る。"""
    if not pairs:
        raise ValueError("ペアが1件もありません。")
    left = build_items(pairs, Side.LEFT)
    right = build_items(pairs, Side.RIGHT)
    arrangement = [item.item_id for item in right]
    shuffle_in_place(arrangement, rng)
    return Round(
        left_items=left,
        right_items={item.item_id: item for item in right},
        arrangement=arrangement,
    )


def check_arrangement(left: Sequence[GameItem], right: Sequence[GameItem]) -> CheckResult:
    """同じ位置の左右項目のペア番号を比較する。"""
    if len(left) != len(right):
        raise ValueError("左右の項目数が一致しません。")
    return CheckResult(matched=tuple(a.pair_index == b.pair_index for a, b in zip(left, right)))
