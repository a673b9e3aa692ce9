from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


Coordinate = Tuple[int, int]


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def prefix(self) -> str:
        return "h" if self is Orientation.HORIZONTAL else "v"


@dataclass
class Vehicle:
    """Axis-aligned vehicle anchored at its top-left cell.

    The orientation never changes after load, so only the coordinate along the
    vehicle's own axis is ever written by `move_to`.
    """

    id: str
    x: int
    y: int
    length: int
    orientation: Orientation
    is_player: bool = False
    can_use_exit_channel: bool = False

    @property
    def horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    @property
    def axis_coord(self) -> int:
        return self.x if self.horizontal else self.y

    def cells_at(self, coord: int) -> List[Coordinate]:
        if self.horizontal:
            return [(coord + i, self.y) for i in range(self.length)]
        return [(self.x, coord + i) for i in range(self.length)]

    def cells(self) -> List[Coordinate]:
        return self.cells_at(self.axis_coord)

    def move_to(self, coord: int) -> None:
        if self.horizontal:
            self.x = coord
        else:
            self.y = coord
