from __future__ import annotations

from dataclasses import dataclass

from .vehicles import Coordinate, Vehicle


@dataclass
class BoardRules:
    width: int = 6
    height: int = 6
    exit_row: int = 2
    exit_column: int = 6  # first virtual column past the right edge
    vehicle_lengths: tuple[int, ...] = (2, 3)
    player_id: str = "red"

    @property
    def exit_cell(self) -> Coordinate:
        return (self.exit_column, self.exit_row)

    def axis_limit(self, vehicle: Vehicle) -> int:
        return self.width if vehicle.horizontal else self.height

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def in_exit_channel(self, x: int, y: int) -> bool:
        return y == self.exit_row and x >= self.width
