from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame

from rush_hour_puzzle.game import (
    DEFAULT_LEVEL,
    LevelError,
    RushHourGame,
    TickScheduler,
    VehiclePlacement,
    load_level_file,
    parse_level,
)
from .renderer import Renderer, WinEffects

logger = logging.getLogger(__name__)


def _read_level(level_path: Optional[str]) -> List[VehiclePlacement]:
    if level_path is None:
        return parse_level(DEFAULT_LEVEL)
    return load_level_file(level_path)


def run(level_path: Optional[str] = None, cell_size: int = 80) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        effects = WinEffects()
        game = RushHourGame(listener=effects, scheduler=TickScheduler(pygame.time.get_ticks()))
        game.load_level(_read_level(level_path))
        renderer = Renderer(cell_size=cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.board))
        pygame.display.set_caption("Rush Hour - Human Play")
        font = pygame.font.SysFont(None, cell_size // 2)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_n:
                        try:
                            game.load_level(_read_level(level_path))
                        except LevelError:
                            logger.exception("Reload failed, keeping the current board")
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.pointer_down(renderer.vehicle_at(game.board, event.pos), event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    game.pointer_move(event.pos, renderer.cell_size)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    game.pointer_up()

            # Win timeline
            game.tick(pygame.time.get_ticks())

            renderer.draw(screen, game.board, effects, font)
            clock.tick(60)
    finally:
        pygame.quit()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play a Rush Hour level with the mouse.")
    p.add_argument("--level", type=str, default=None, help="Path to a level JSON file")
    p.add_argument("--cell-size", type=int, default=80)
    p.add_argument("--log-level", type=str, default="INFO")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(args.level, args.cell_size)


if __name__ == "__main__":  # pragma: no cover
    main()
