"""名前付きの遅延遷移を管理するスケジューラ。

目的:
- 表示用の遅延（勝利表示・不一致表示の解除など）を、取り消し可能なハンドルで扱う。
- リセット時に cancel_all() すれば、古いラウンド向けの遷移が後から発火しない。

契約:
- 時刻は epoch 秒（float）。呼び出し側が now を渡す。
- run_due(now) は期限到来分を期限順に1回だけ返し、内部から取り除く。
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field


@dataclass
class TimerHandle:
    name: str
    due_at: float
    seq: int
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class Scheduler:
    _pending: list[TimerHandle] = field(default_factory=list)
    _counter: itertools.count = field(default_factory=itertools.count)

    def schedule(self, name: str, delay: float, now: float) -> TimerHandle:
        """now から delay 秒後に name を発火させる。"""
        handle = TimerHandle(name=name, due_at=now + max(0.0, delay), seq=next(self._counter))
        self._pending.append(handle)
        return handle

    def cancel_all(self) -> None:
        for h in self._pending:
            h.cancel()
        self._pending.clear()

    def pending(self) -> list[TimerHandle]:
        return [h for h in self._pending if not h.cancelled]

    def next_due(self) -> float | None:
        """次に発火する時刻。無ければ None。"""
        active = self.pending()
        if not active:
            return None
        return min(h.due_at for h in active)

    def run_due(self, now: float) -> list[str]:
        """期限が来た遷移名を期限順（同時刻は登録順）に返す。"""
        due = sorted(
            (h for h in self._pending if not h.cancelled and h.due_at <= now),
            key=lambda h: (h.due_at, h.seq),
        )
        fired = {id(h) for h in due}
        self._pending = [h for h in self._pending if not h.cancelled and id(h) not in fired]
        return [h.name for h in due]
