from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Tuple


@dataclass
class ScheduledCall:
    due_ms: int
    callback: Callable[[], None]
    cancelled: bool = field(default=False)

    def cancel(self) -> None:
        self.cancelled = True


class TickScheduler:
    """Millisecond timer queue pumped from the caller's frame loop.

    Nothing runs on its own: due callbacks fire inside `run_due`, on the
    thread that calls it, in due order (ties in scheduling order).
    """

    def __init__(self, now_ms: int = 0) -> None:
        self.now_ms = int(now_ms)
        self._queue: List[Tuple[int, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(due_ms=self.now_ms + max(0, int(delay_ms)), callback=callback)
        heapq.heappush(self._queue, (call.due_ms, next(self._counter), call))
        return call

    def pending(self) -> int:
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def run_due(self, now_ms: int) -> int:
        self.now_ms = max(self.now_ms, int(now_ms))
        ran = 0
        while self._queue and self._queue[0][0] <= self.now_ms:
            _, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            call.callback()
            ran += 1
        return ran

    def advance(self, delta_ms: int) -> int:
        return self.run_due(self.now_ms + int(delta_ms))
