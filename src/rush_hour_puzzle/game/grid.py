from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

import numpy as np

from .errors import LevelError, VehicleNotFound
from .rules import BoardRules
from .vehicles import Coordinate, Vehicle


class Board:
    """The set of vehicles for one level and the cells they cover.

    The board is the single source of truth for vehicle coordinates. Occupancy
    is derived from the vehicles on every query and never cached, since any
    vehicle could have moved since the previous one.
    """

    def __init__(self, vehicles: Iterable[Vehicle], rules: Optional[BoardRules] = None) -> None:
        self.rules = rules or BoardRules()
        self.vehicles: List[Vehicle] = list(vehicles)
        self._by_id: Dict[str, Vehicle] = {v.id: v for v in self.vehicles}

    @property
    def width(self) -> int:
        return self.rules.width

    @property
    def height(self) -> int:
        return self.rules.height

    def find(self, vehicle_id: Optional[str]) -> Optional[Vehicle]:
        if vehicle_id is None:
            return None
        return self._by_id.get(vehicle_id)

    def get(self, vehicle_id: str) -> Vehicle:
        vehicle = self.find(vehicle_id)
        if vehicle is None:
            raise VehicleNotFound(f"Vehicle {vehicle_id} not found on the board.")
        return vehicle

    @property
    def player(self) -> Optional[Vehicle]:
        for vehicle in self.vehicles:
            if vehicle.is_player:
                return vehicle
        return None

    def occupied_cells(self, excluding_id: Optional[str] = None) -> Set[Coordinate]:
        occupied: Set[Coordinate] = set()
        for vehicle in self.vehicles:
            if vehicle.id == excluding_id:
                continue
            for x, y in vehicle.cells():
                # Only exit-capable vehicles may claim exit channel cells
                if self.rules.in_exit_channel(x, y) and not vehicle.can_use_exit_channel:
                    continue
                occupied.add((x, y))
        return occupied

    @staticmethod
    def is_free(cells: Iterable[Coordinate], occupied: Set[Coordinate]) -> bool:
        return all(cell not in occupied for cell in cells)

    def upper_bound(self, vehicle: Vehicle) -> int:
        """Largest axis coordinate the vehicle may take from where it stands."""
        if (
            vehicle.can_use_exit_channel
            and vehicle.horizontal
            and vehicle.y == self.rules.exit_row
        ):
            return self.rules.exit_column
        return self.rules.axis_limit(vehicle) - vehicle.length

    def is_at_exit(self, vehicle: Vehicle) -> bool:
        return (vehicle.x, vehicle.y) == self.rules.exit_cell

    def validate(self) -> None:
        """Raise `LevelError` unless the board is a legal starting position."""
        if len(self._by_id) != len(self.vehicles):
            raise LevelError("Duplicate vehicle ids on the board.")
        players = [v for v in self.vehicles if v.is_player]
        if len(players) != 1:
            raise LevelError(f"Expected exactly one player vehicle, found {len(players)}.")
        seen: Dict[Coordinate, str] = {}
        for vehicle in self.vehicles:
            if vehicle.length not in self.rules.vehicle_lengths:
                raise LevelError(f"Vehicle {vehicle.id} has unsupported length {vehicle.length}.")
            for x, y in vehicle.cells():
                if not self.rules.is_inside(x, y):
                    raise LevelError(f"Vehicle {vehicle.id} does not fit on the board.")
                if (x, y) in seen:
                    raise LevelError(
                        f"Overlap at ({x},{y}) between {seen[(x, y)]} and {vehicle.id}."
                    )
                seen[(x, y)] = vehicle.id

    def occupancy_matrix(self) -> np.ndarray:
        """Grid projection: 0 empty, 1 player, 2.. other vehicles in board order.

        Cells in the exit channel are off the grid and therefore not shown.
        """
        state = np.zeros((self.height, self.width), dtype=np.int8)
        index = 2
        for vehicle in self.vehicles:
            if vehicle.is_player:
                value = 1
            else:
                value = index
                index += 1
            for x, y in vehicle.cells():
                if self.rules.is_inside(x, y):
                    state[y, x] = value
        return state
