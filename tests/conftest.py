from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from rush_hour_puzzle.game import (
    Board,
    GameListener,
    Orientation,
    RushHourGame,
    TickScheduler,
    Vehicle,
    VehiclePlacement,
)

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


class RecordingListener(GameListener):
    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def on_level_loaded(self, board: Board) -> None:
        self.events.append(("loaded", len(board.vehicles)))

    def on_vehicle_moved(self, vehicle_id: str, coord: int) -> None:
        self.events.append(("moved", (vehicle_id, coord)))

    def on_win_exit(self, vehicle: Vehicle) -> None:
        self.events.append(("exit", vehicle.id))

    def on_win_reveal(self, vehicle: Vehicle) -> None:
        self.events.append(("reveal", vehicle.id))

    def of(self, kind: str) -> List[Any]:
        return [payload for name, payload in self.events if name == kind]


def player(x: int = 0, y: int = 2, length: int = 2) -> VehiclePlacement:
    return VehiclePlacement(x, y, length, H, player=True)


def car(x: int, y: int, length: int, orientation: Orientation) -> VehiclePlacement:
    return VehiclePlacement(x, y, length, orientation)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def scheduler() -> TickScheduler:
    return TickScheduler()


@pytest.fixture
def game(listener: RecordingListener, scheduler: TickScheduler) -> RushHourGame:
    return RushHourGame(listener=listener, scheduler=scheduler)
