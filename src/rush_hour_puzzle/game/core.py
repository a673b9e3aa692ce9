from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

import numpy as np

from .drag import DragEngine, DragSession, Pointer
from .events import GameListener
from .errors import LevelError
from .grid import Board
from .levels import VehiclePlacement, build_vehicles, load_level_file
from .rules import BoardRules
from .scheduler import TickScheduler
from .win import WinPhase, WinSequencer

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    rules: BoardRules = field(default_factory=BoardRules)
    win_delay_ms: int = 900


@dataclass
class GameState:
    """Everything that lives for exactly one loaded level."""

    board: Board
    win: WinSequencer
    generation: int = 0
    drag: Optional[DragSession] = None


class RushHourGame:
    """Owns the current `GameState` and routes pointer input to the drag engine.

    A level load builds and validates a complete new state before replacing
    the old one, so a failed load leaves the previous level playable.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        listener: Optional[GameListener] = None,
        scheduler: Optional[TickScheduler] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.listener = listener or GameListener()
        self.scheduler = scheduler or TickScheduler()
        self.engine = DragEngine(self.listener)
        self.state: Optional[GameState] = None
        self._generations = itertools.count(1)

    def load_level(self, placements: Iterable[VehiclePlacement]) -> GameState:
        board = Board(build_vehicles(placements, self.config.rules), self.config.rules)
        try:
            board.validate()
        except LevelError as exc:
            logger.warning("Rejected level, keeping the current board: %s", exc)
            raise
        if self.state is not None:
            self.state.win.cancel()
            self.state.drag = None
        self.state = GameState(
            board=board,
            win=WinSequencer(self.scheduler, self.listener, self.config.win_delay_ms),
            generation=next(self._generations),
        )
        logger.info("Loaded level %d with %d vehicles", self.state.generation, len(board.vehicles))
        self.listener.on_level_loaded(board)
        return self.state

    def load_level_file(self, path: Union[str, Path]) -> GameState:
        try:
            placements = load_level_file(path)
        except LevelError:
            logger.error("Failed to load level %s", path)
            raise
        return self.load_level(placements)

    @property
    def board(self) -> Optional[Board]:
        return self.state.board if self.state is not None else None

    @property
    def phase(self) -> WinPhase:
        return self.state.win.phase if self.state is not None else WinPhase.NOT_WON

    @property
    def won(self) -> bool:
        return self.state is not None and self.state.win.won

    @property
    def dragging(self) -> bool:
        return self.state is not None and self.state.drag is not None

    def pointer_down(self, vehicle_id: Optional[str], pointer: Pointer) -> bool:
        return self.engine.start(self.state, vehicle_id, pointer)

    def pointer_move(self, pointer: Pointer, cell_size: float) -> Optional[int]:
        return self.engine.move(self.state, pointer, cell_size)

    def pointer_up(self) -> bool:
        return self.engine.end(self.state)

    def slide(self, vehicle_id: str, cells: int, cell_size: float = 1.0) -> Optional[int]:
        """Drag a vehicle by `cells` along its axis in one gesture.

        Returns the committed coordinate, or None when nothing moved or the
        drag was rejected.
        """
        if not self.pointer_down(vehicle_id, (0.0, 0.0)):
            return None
        moved = self.pointer_move((cells * cell_size, cells * cell_size), cell_size)
        self.pointer_up()
        return moved

    def tick(self, now_ms: int) -> int:
        return self.scheduler.run_due(now_ms)

    def get_state(self) -> np.ndarray:
        if self.state is None:
            rules = self.config.rules
            return np.zeros((rules.height, rules.width), dtype=np.int8)
        return self.state.board.occupancy_matrix()
