from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pygame

from falling_blocks.controller import GameController
from falling_blocks.game import GameConfig, load_config
from .renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with the arrow keys.")
    p.add_argument("--config", type=str, default=None, help="YAML file with GameConfig fields")
    p.add_argument("--rows", type=int, default=None)
    p.add_argument("--cols", type=int, default=None)
    p.add_argument("--tick_ms", type=int, default=None, help="Gravity interval in milliseconds")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log_level", type=str, default="WARNING")
    return p


def config_from_args(args: argparse.Namespace) -> GameConfig:
    base = load_config(args.config) if args.config else GameConfig()
    return base.merged({
        "rows": args.rows,
        "cols": args.cols,
        "tick_ms": args.tick_ms,
        "random_seed": args.seed,
    })


def run(config: Optional[GameConfig] = None) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        controller = GameController(config)
        renderer = Renderer(cell_size=controller.config.cell_size)

        screen = pygame.display.set_mode(renderer.window_size(controller.config.rows, controller.config.cols))
        pygame.display.set_caption("Falling Blocks")
        controller.restart(pygame.time.get_ticks())

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and controller.game_over:
                        controller.restart(pygame.time.get_ticks())
                    else:
                        controller.handle_key(pygame.key.name(event.key))

            # Gravity
            controller.update(pygame.time.get_ticks())

            renderer.draw(screen, controller.view(), controller.game_over)
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    run(config_from_args(args))


if __name__ == "__main__":  # pragma: no cover
    main()
