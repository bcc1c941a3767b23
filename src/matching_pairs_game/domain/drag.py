"""右列の並べ替え（ドラッグ）制御。

目的:
- 右列の並び（項目 id のリスト）だけを直接書き換える。ペア一覧には触れない。
- 描画結果からは並びを読まない。描画側は同じリストを読んで表示する。

使い方:
- start(item_id) でつかみ、over(pointer_y, boxes) で挿入位置を決め、end() で離す。
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """項目の縦方向の位置（上端と高さ）。"""

    top: float
    height: float

    @property
    def midpoint(self) -> float:
        return self.top + self.height / 2


def row_boxes(item_ids: Sequence[str], row_height: float) -> dict[str, Box]:
    """等しい高さの行が上から並ぶ前提で、各項目の Box を返す。"""
    return {item_id: Box(top=i * row_height, height=row_height) for i, item_id in enumerate(item_ids)}


def find_insert_before(
    item_ids: Sequence[str],
    boxes: Mapping[str, Box],
    pointer_y: float,
    dragging: str | None,
) -> str | None:
    """ポインタより下にあり、中心が最も近い項目の id を返す。無ければ None（末尾）。

    offset = pointer_y - 中心 が負のもののうち最大（0 に最も近い）を選ぶ。
    """
    closest_offset = -math.inf
    closest: str | None = None
    for item_id in item_ids:
        if item_id == dragging:
            continue
        box = boxes.get(item_id)
        if box is None:
            continue
        offset = pointer_y - box.midpoint
        if closest_offset < offset < 0:
            closest_offset = offset
            closest = item_id
    return closest


class DragController:
    """右列の並べ替えジェスチャを扱う。

    arrangement は呼び出し側と共有するリストで、その場で並べ替える。
    """

    def __init__(self, arrangement: list[str]) -> None:
        self.arrangement = arrangement
        self.dragging: str | None = None

    def start(self, item_id: str) -> bool:
        """右列の項目をつかむ。右列に無い id（左列など）は受け付けない。"""
        if item_id not in self.arrangement:
            return False
        self.dragging = item_id
        return True

    def over(self, pointer_y: float, boxes: Mapping[str, Box]) -> bool:
        """つかんでいる項目を、ポインタ位置に応じた場所へ差し込む。並びが変わったら True。"""
        if self.dragging is None:
            return False
        before = list(self.arrangement)
        target = find_insert_before(self.arrangement, boxes, pointer_y, self.dragging)
        self.arrangement.remove(self.dragging)
        if target is None:
            self.arrangement.append(self.dragging)
        else:
            self.arrangement.insert(self.arrangement.index(target), self.dragging)
        return self.arrangement != before

    def drop(self) -> None:
        """ドロップ自体は何もしない（並べ替えは over で完了している）。"""

    def end(self) -> None:
        self.dragging = None
