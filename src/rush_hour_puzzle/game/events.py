from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Board
    from .vehicles import Vehicle


class GameListener:
    """Rendering collaborator notified of engine output.

    The default implementation ignores everything; front-ends override the
    hooks they care about. Listeners only project state, they never feed
    coordinates back into the engine.
    """

    def on_level_loaded(self, board: "Board") -> None:
        pass

    def on_vehicle_moved(self, vehicle_id: str, coord: int) -> None:
        pass

    def on_win_exit(self, vehicle: "Vehicle") -> None:
        """Immediate phase: the player vehicle drives out through the exit."""
        pass

    def on_win_reveal(self, vehicle: "Vehicle") -> None:
        """Delayed phase: hide the vehicle and hand a copy to the win overlay."""
        pass
