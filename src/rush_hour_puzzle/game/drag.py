from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Set, Tuple

from .events import GameListener
from .grid import Board
from .vehicles import Coordinate, Vehicle

if TYPE_CHECKING:
    from .core import GameState

logger = logging.getLogger(__name__)

Pointer = Tuple[float, float]


@dataclass
class DragSession:
    vehicle: Vehicle
    start_coord: int
    start_pointer: float


def _axis_component(pointer: Pointer, vehicle: Vehicle) -> float:
    return float(pointer[0] if vehicle.horizontal else pointer[1])


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def snap_cells(delta: float, cell_size: float) -> int:
    """Round a pixel displacement to the nearest whole cell.

    Halves round up (towards +inf) so a drag of exactly half a cell to the
    right snaps forward while the same drag to the left stays put.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    return int(math.floor(delta / cell_size + 0.5))


def walk(board: Board, vehicle: Vehicle, target: int, occupied: Set[Coordinate]) -> int:
    """Advance one cell at a time towards `target` and return the last legal coordinate.

    Stops before the first step that would overlap `occupied` or leave
    [0, upper_bound]; a free gap behind a blocker is never reached.
    """
    current = vehicle.axis_coord
    step = (target > current) - (target < current)
    if step == 0:
        return current
    upper = board.upper_bound(vehicle)
    reached = current
    pos = current + step
    while 0 <= pos <= upper:
        if not board.is_free(vehicle.cells_at(pos), occupied):
            break
        reached = pos
        if pos == target:
            break
        pos += step
    return reached


class DragEngine:
    """Turns a pointer stream for one vehicle into collision-free axis moves.

    Idle until `start` opens a session on the game state, active until `end`
    closes it. Every entry point takes the `GameState` explicitly; the engine
    itself only keeps the listener.
    """

    def __init__(self, listener: Optional[GameListener] = None) -> None:
        self.listener = listener or GameListener()

    def start(self, state: Optional["GameState"], vehicle_id: Optional[str], pointer: Pointer) -> bool:
        if state is None:
            return False
        if state.win.won:
            logger.debug("Ignoring drag on %s: level already won", vehicle_id)
            return False
        vehicle = state.board.find(vehicle_id)
        if vehicle is None:
            logger.debug("Ignoring drag: %r is not a vehicle", vehicle_id)
            return False
        state.drag = DragSession(
            vehicle=vehicle,
            start_coord=vehicle.axis_coord,
            start_pointer=_axis_component(pointer, vehicle),
        )
        return True

    def move(self, state: Optional["GameState"], pointer: Pointer, cell_size: float) -> Optional[int]:
        """Apply a pointer move; return the newly committed coordinate, if any."""
        if state is None or state.drag is None or state.win.won:
            return None
        session = state.drag
        board = state.board
        vehicle = session.vehicle
        cells = snap_cells(_axis_component(pointer, vehicle) - session.start_pointer, cell_size)
        target = _clamp(session.start_coord + cells, 0, board.upper_bound(vehicle))
        reached = walk(board, vehicle, target, board.occupied_cells(vehicle.id))
        if reached == vehicle.axis_coord:
            return None
        vehicle.move_to(reached)
        self.listener.on_vehicle_moved(vehicle.id, reached)
        return reached

    def end(self, state: Optional["GameState"]) -> bool:
        """Close the session; return True when it triggered the win."""
        if state is None or state.drag is None:
            return False
        vehicle = state.drag.vehicle
        state.drag = None
        if vehicle.is_player and state.board.is_at_exit(vehicle) and not state.win.won:
            return state.win.trigger(vehicle)
        return False

    @staticmethod
    def reachable(board: Board, vehicle: Vehicle) -> Tuple[int, int]:
        """Inclusive range of axis coordinates the vehicle can slide to right now."""
        occupied = board.occupied_cells(vehicle.id)
        low = walk(board, vehicle, 0, occupied)
        high = walk(board, vehicle, board.upper_bound(vehicle), occupied)
        return low, high
