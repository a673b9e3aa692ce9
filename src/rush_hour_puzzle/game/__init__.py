"""Game module for the Rush Hour puzzle.

Exports the engine and supporting classes:
- Vehicle / Orientation: axis-aligned vehicles and their cells
- BoardRules: board geometry (6x6, exit on row 2)
- Board: occupancy queries and the occupancy matrix projection
- DragEngine: pointer-driven, collision-respecting moves
- WinSequencer: one-shot two-phase win timeline
- RushHourGame: per-level state and input routing
"""

from .errors import LevelError, LevelLoadError, RushHourError, VehicleNotFound
from .vehicles import Orientation, Vehicle
from .rules import BoardRules
from .grid import Board
from .scheduler import ScheduledCall, TickScheduler
from .events import GameListener
from .win import WinPhase, WinSequencer
from .drag import DragEngine, DragSession, snap_cells, walk
from .levels import DEFAULT_LEVEL, VehiclePlacement, build_vehicles, load_level_file, parse_level
from .core import GameConfig, GameState, RushHourGame

__all__ = [
    "RushHourError",
    "LevelError",
    "LevelLoadError",
    "VehicleNotFound",
    "Orientation",
    "Vehicle",
    "BoardRules",
    "Board",
    "ScheduledCall",
    "TickScheduler",
    "GameListener",
    "WinPhase",
    "WinSequencer",
    "DragEngine",
    "DragSession",
    "snap_cells",
    "walk",
    "DEFAULT_LEVEL",
    "VehiclePlacement",
    "build_vehicles",
    "load_level_file",
    "parse_level",
    "GameConfig",
    "GameState",
    "RushHourGame",
]
