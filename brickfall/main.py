#!/usr/bin/env python3
"""Brickfall - Standalone Entry Point.

Usage:
    brickfall
    brickfall --difficulty frantic
    brickfall --config my_game.yaml --seed 42
    python -m brickfall --mute --log-level DEBUG
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

import pygame

from brickfall.config import FIELD_HEIGHT, FIELD_WIDTH, load_game_config
from brickfall.game_mode import BrickBreakerMode
from brickfall.input import InputManager
from brickfall.input.sources import KeyboardInputSource
from brickfall.logging import (
    close_all_sinks,
    configure_logging,
    create_sink,
    get_logger,
    register_sink,
)

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with display options plus the game's own ARGUMENTS."""
    parser = argparse.ArgumentParser(
        prog='brickfall',
        description=BrickBreakerMode.DESCRIPTION,
    )

    parser.add_argument('--width', type=int, default=None,
                        help=f'Field width (default: {FIELD_WIDTH})')
    parser.add_argument('--height', type=int, default=None,
                        help=f'Field height (default: {FIELD_HEIGHT})')
    parser.add_argument('--fps', type=int, default=60, help='Display frame rate')

    for arg in BrickBreakerMode.get_arguments():
        kwargs = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **kwargs)

    return parser


def game_kwargs(args: argparse.Namespace) -> Dict[str, Any]:
    """Constructor arguments for BrickBreakerMode.

    With --config the difficulty preset is applied while loading, so
    explicit values in the file win over the preset.

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If the config file is empty or invalid
    """
    config = None
    difficulty = args.difficulty
    if args.config:
        config = load_game_config(args.config, difficulty=difficulty)
        difficulty = None
    return {
        'config': config,
        'difficulty': difficulty,
        'width': args.width,
        'height': args.height,
        'seed': args.seed,
        'mute': args.mute,
    }


def main(argv: Optional[List[str]] = None) -> int:
    """Run Brickfall in a pygame window."""
    args = build_parser().parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    try:
        kwargs = game_kwargs(args)
    except (FileNotFoundError, ValueError) as e:
        log.error("Could not load config: %s", e)
        return 2

    register_sink('session', create_sink('session'))

    pygame.init()
    pygame.font.init()

    try:
        game = BrickBreakerMode(**kwargs)
        width = int(game.config.field.width)
        height = int(game.config.field.height)
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(BrickBreakerMode.NAME)

        input_manager = InputManager(KeyboardInputSource())
        clock = pygame.time.Clock()

        print("\n" + "=" * 50)
        print("BRICKFALL")
        print("=" * 50)
        print("Controls:")
        print("  - LEFT / RIGHT to move the paddle")
        print("  - SPACE to start or continue")
        print("  - ENTER to restart after game over")
        print("  - P to pause, R to restart")
        print("  - ESC to quit")
        print("=" * 50 + "\n")

        while not game.quit_requested:
            dt = clock.tick(args.fps) / 1000.0

            input_manager.update(dt)
            game.handle_input(input_manager.get_events())
            game.update(dt)

            game.render(screen)
            pygame.display.flip()

        log.info("Final score %d on level %d", game.get_score(), game.session.level)
    finally:
        close_all_sinks()
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
