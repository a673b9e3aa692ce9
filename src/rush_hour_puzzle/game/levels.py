"""
Level files and vehicle placement.

A level is a JSON document listing vehicle placements:

    {"vehicles": [
        {"pos": [0, 2], "size": 2, "dir": "horizontal", "player": true},
        {"pos": [3, 1], "size": 2, "dir": "vertical"}
    ]}

`pos` is the (x, y) of the vehicle's top-left cell.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .errors import LevelError, LevelLoadError
from .rules import BoardRules
from .vehicles import Orientation, Vehicle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VehiclePlacement:
    x: int
    y: int
    length: int
    orientation: Orientation
    player: bool = False


DEFAULT_LEVEL: Dict[str, Any] = {
    "vehicles": [
        {"pos": [0, 2], "size": 2, "dir": "horizontal", "player": True},
        {"pos": [0, 0], "size": 2, "dir": "horizontal"},
        {"pos": [3, 0], "size": 3, "dir": "horizontal"},
        {"pos": [2, 1], "size": 2, "dir": "vertical"},
        {"pos": [4, 2], "size": 3, "dir": "vertical"},
        {"pos": [5, 1], "size": 2, "dir": "vertical"},
        {"pos": [1, 3], "size": 2, "dir": "vertical"},
        {"pos": [0, 5], "size": 3, "dir": "horizontal"},
    ]
}


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise LevelError(f"{what} must be an integer, got {value!r}")
    return value


def _as_bool(value: Any, what: str) -> bool:
    if not isinstance(value, bool):
        raise LevelError(f"{what} must be true or false, got {value!r}")
    return value


def parse_vehicle(entry: Any) -> VehiclePlacement:
    if not isinstance(entry, dict):
        raise LevelError(f"Vehicle entry must be an object, got {entry!r}")
    try:
        pos = entry["pos"]
        size = entry["size"]
        direction = entry["dir"]
    except KeyError as exc:
        raise LevelError(f"Vehicle entry is missing {exc.args[0]!r}") from exc
    if not isinstance(pos, (list, tuple)) or len(pos) != 2:
        raise LevelError(f"Vehicle pos must be [x, y], got {pos!r}")
    try:
        orientation = Orientation(direction)
    except ValueError as exc:
        raise LevelError(f"Unknown vehicle direction {direction!r}") from exc
    return VehiclePlacement(
        x=_as_int(pos[0], "pos[0]"),
        y=_as_int(pos[1], "pos[1]"),
        length=_as_int(size, "size"),
        orientation=orientation,
        player=_as_bool(entry.get("player", False), "player"),
    )


def parse_level(data: Any) -> List[VehiclePlacement]:
    """Turn decoded level JSON into placements, in file order."""
    if not isinstance(data, dict) or not isinstance(data.get("vehicles"), list):
        raise LevelError("Level must be an object with a 'vehicles' list")
    return [parse_vehicle(entry) for entry in data["vehicles"]]


def load_level_file(path: Union[str, Path]) -> List[VehiclePlacement]:
    try:
        with open(path, "r", encoding="utf-8") as file:
            data = json.load(file)
    except (OSError, json.JSONDecodeError) as exc:
        raise LevelLoadError(f"Failed to load level {path}: {exc}") from exc
    return parse_level(data)


def build_vehicles(
    placements: Iterable[VehiclePlacement], rules: Optional[BoardRules] = None
) -> List[Vehicle]:
    """Create vehicles with ids: the player gets the reserved id, others h1../v1.. in order."""
    rules = rules or BoardRules()
    counters = {Orientation.HORIZONTAL: 0, Orientation.VERTICAL: 0}
    vehicles: List[Vehicle] = []
    for placement in placements:
        if placement.player:
            vehicle_id = rules.player_id
        else:
            counters[placement.orientation] += 1
            vehicle_id = f"{placement.orientation.prefix}{counters[placement.orientation]}"
        vehicles.append(
            Vehicle(
                id=vehicle_id,
                x=placement.x,
                y=placement.y,
                length=placement.length,
                orientation=placement.orientation,
                is_player=placement.player,
                can_use_exit_channel=placement.player,
            )
        )
    logger.debug("Built %d vehicles", len(vehicles))
    return vehicles
