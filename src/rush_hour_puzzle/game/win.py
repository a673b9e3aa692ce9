from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .events import GameListener
from .scheduler import ScheduledCall, TickScheduler
from .vehicles import Vehicle

logger = logging.getLogger(__name__)


class WinPhase(Enum):
    NOT_WON = "not_won"
    WINNING = "winning"
    WON = "won"


class WinSequencer:
    """One-shot win latch with a two-phase animation timeline.

    `trigger` moves NOT_WON -> WINNING and fires the exit phase right away;
    the reveal phase is scheduled `delay_ms` later and latches WON. Only a new
    sequencer (a new level) starts over from NOT_WON.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        listener: Optional[GameListener] = None,
        delay_ms: int = 900,
    ) -> None:
        self.scheduler = scheduler
        self.listener = listener or GameListener()
        self.delay_ms = int(delay_ms)
        self.phase = WinPhase.NOT_WON
        self._pending: Optional[ScheduledCall] = None

    @property
    def won(self) -> bool:
        return self.phase is not WinPhase.NOT_WON

    def trigger(self, vehicle: Vehicle) -> bool:
        if self.phase is not WinPhase.NOT_WON:
            return False
        self.phase = WinPhase.WINNING
        logger.info("Vehicle %s reached the exit", vehicle.id)
        self.listener.on_win_exit(vehicle)
        self._pending = self.scheduler.call_later(self.delay_ms, lambda: self._reveal(vehicle))
        return True

    def _reveal(self, vehicle: Vehicle) -> None:
        self._pending = None
        if self.phase is not WinPhase.WINNING:
            return
        self.phase = WinPhase.WON
        logger.debug("Win reveal for %s", vehicle.id)
        self.listener.on_win_reveal(vehicle)

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
