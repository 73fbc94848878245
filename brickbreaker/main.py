#!/usr/bin/env python3
"""BrickBreaker - Standalone Entry Point.

Usage:
    brickbreaker
    brickbreaker --lives 5
    brickbreaker --config mygame.yaml --seed 42
"""

import argparse
import sys
from typing import List, Optional

import pygame

from brickbreaker.config import FPS, ConfigError, GameConfig, load_config
from brickbreaker.game_mode import BrickBreakerGame
from brickbreaker.input import InputManager
from brickbreaker.input.sources import KeyboardInputSource
from brickbreaker.logging import configure_logging, get_logger
from brickbreaker.skins import SKINS

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="BrickBreaker - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=None, help='Field width')
    parser.add_argument('--height', type=int, default=None, help='Field height')
    parser.add_argument('--fps', type=int, default=FPS, help='Frames (ticks) per second')
    parser.add_argument('--skin', type=str, default='geometric',
                        choices=sorted(SKINS),
                        help='Visual skin')

    # Game options
    parser.add_argument('--config', type=str, default=None, help='YAML game configuration')
    parser.add_argument('--lives', type=int, default=None, help='Starting lives')
    parser.add_argument('--seed', type=int, default=None, help='Seed for launch angles')

    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Log level')
    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Load the YAML config (if any) and apply command line overrides.

    Raises:
        ConfigError: If the file or the resulting values are invalid
    """
    config = load_config(args.config) if args.config else GameConfig()
    return config.with_overrides(**{
        'lives': args.lives,
        'field.width': args.width,
        'field.height': args.height,
    })


def run(game: BrickBreakerGame, skin, keyboard: KeyboardInputSource, fps: int) -> None:
    """Open the window and drive the game at a fixed frame rate until quit."""
    width, height = game.config.field.width, game.config.field.height

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("BrickBreaker")

        clock = pygame.time.Clock()
        running = True

        print("\n" + "=" * 50)
        print("BRICKBREAKER")
        print("=" * 50)
        print("Controls:")
        print("  - ENTER or S to start")
        print("  - LEFT/RIGHT or A/D to move the paddle")
        print("  - SPACE to launch the ball")
        print("  - R to reset")
        print("  - ESC to quit")
        print("=" * 50 + "\n")

        while running:
            clock.tick(fps)

            for event in keyboard.handle_events(pygame.event.get()):
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.WINDOWFOCUSLOST:
                    keyboard.clear()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in (pygame.K_RETURN, pygame.K_s):
                        game.start()
                    elif event.key == pygame.K_r:
                        game.reset()

            game.tick()

            skin.render(game.snapshot(), screen)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    """Run BrickBreaker standalone."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        log.error("%s", e)
        return 1

    keyboard = KeyboardInputSource()
    game = BrickBreakerGame(
        config=config,
        seed=args.seed,
        input_manager=InputManager(keyboard),
    )
    skin = SKINS[args.skin]()

    try:
        run(game, skin, keyboard, args.fps)
    except Exception:
        log.exception("Game loop stopped after %d ticks", game.ticks)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
