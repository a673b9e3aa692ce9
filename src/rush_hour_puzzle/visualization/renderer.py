from __future__ import annotations

from typing import Optional, Tuple

import pygame

from rush_hour_puzzle.game import Board, GameListener, Vehicle


PALETTE = {
    0: (20, 20, 26),
    1: (220, 40, 40),   # player
    2: (0, 160, 230),
    3: (240, 200, 0),
    4: (60, 190, 90),
    5: (160, 80, 220),
    6: (240, 140, 0),
    7: (0, 200, 190),
}


def _color_for_value(v: int) -> Tuple[int, int, int]:
    if v in PALETTE:
        return PALETTE[v]
    return PALETTE[2 + (v - 2) % 6]


class WinEffects(GameListener):
    """Visual state of the win timeline, reset whenever a level loads."""

    def __init__(self) -> None:
        self.exiting: Optional[str] = None
        self.hidden: Optional[str] = None
        self.overlay_vehicle: Optional[Vehicle] = None

    def on_level_loaded(self, board: Board) -> None:
        self.exiting = None
        self.hidden = None
        self.overlay_vehicle = None

    def on_win_exit(self, vehicle: Vehicle) -> None:
        self.exiting = vehicle.id

    def on_win_reveal(self, vehicle: Vehicle) -> None:
        self.hidden = vehicle.id
        # Overlay gets its own copy so the board vehicle stays untouched
        self.overlay_vehicle = Vehicle(
            id=vehicle.id,
            x=0,
            y=0,
            length=vehicle.length,
            orientation=vehicle.orientation,
            is_player=vehicle.is_player,
        )


class Renderer:
    def __init__(self, cell_size: int = 80, margin: int = 20, exit_cells: int = 3, label: str = "9999") -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.exit_cells = exit_cells
        self.label = label

    def window_size(self, board: Board) -> Tuple[int, int]:
        width = self.margin * 2 + (board.width + self.exit_cells) * self.cell_size
        height = self.margin * 2 + board.height * self.cell_size
        return width, height

    def _cell_rect(self, x: int, y: int, w: int = 1, h: int = 1) -> pygame.Rect:
        return pygame.Rect(
            self.margin + x * self.cell_size,
            self.margin + y * self.cell_size,
            w * self.cell_size - 1,
            h * self.cell_size - 1,
        )

    def _vehicle_rect(self, vehicle: Vehicle) -> pygame.Rect:
        if vehicle.horizontal:
            return self._cell_rect(vehicle.x, vehicle.y, vehicle.length, 1)
        return self._cell_rect(vehicle.x, vehicle.y, 1, vehicle.length)

    def vehicle_at(self, board: Board, pos: Tuple[int, int]) -> Optional[str]:
        """Id of the vehicle under a pixel position, or None."""
        px, py = pos
        if px < self.margin or py < self.margin:
            return None
        cell = ((px - self.margin) // self.cell_size, (py - self.margin) // self.cell_size)
        for vehicle in board.vehicles:
            if cell in vehicle.cells():
                return vehicle.id
        return None

    def _draw_grid(self, screen: pygame.Surface, board: Board) -> None:
        for y in range(board.height):
            for x in range(board.width):
                pygame.draw.rect(screen, _color_for_value(0), self._cell_rect(x, y))
        exit_rect = self._cell_rect(board.width, board.rules.exit_row)
        exit_rect.width = self.cell_size // 5
        pygame.draw.rect(screen, (230, 230, 230), exit_rect, 2)

    def _draw_vehicles(self, screen: pygame.Surface, board: Board, effects: WinEffects) -> None:
        index = 2
        for vehicle in board.vehicles:
            if vehicle.is_player:
                value = 1
            else:
                value = index
                index += 1
            if vehicle.id == effects.hidden:
                continue
            rect = self._vehicle_rect(vehicle)
            if vehicle.id == effects.exiting:
                rect = rect.move(self.cell_size * self.exit_cells, 0)
            pygame.draw.rect(screen, _color_for_value(value), rect, border_radius=8)

    def _draw_overlay(self, screen: pygame.Surface, effects: WinEffects, font: pygame.font.Font) -> None:
        vehicle = effects.overlay_vehicle
        if vehicle is None:
            return
        shade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        screen.blit(shade, (0, 0))
        w = self.cell_size * (vehicle.length if vehicle.horizontal else 1)
        h = self.cell_size * (1 if vehicle.horizontal else vehicle.length)
        rect = pygame.Rect(0, 0, w, h)
        rect.center = screen.get_rect().center
        pygame.draw.rect(screen, _color_for_value(1), rect, border_radius=8)
        text = font.render(self.label, True, (255, 255, 255))
        screen.blit(text, text.get_rect(center=rect.center))

    def draw(self, screen: pygame.Surface, board: Board, effects: WinEffects, font: pygame.font.Font) -> None:
        screen.fill((10, 10, 14))
        self._draw_grid(screen, board)
        self._draw_vehicles(screen, board, effects)
        self._draw_overlay(screen, effects, font)
        pygame.display.flip()
