#!/usr/bin/env python3
"""Breakout - Standalone Entry Point.

Usage:
    python -m games.Breakout.main
    python -m games.Breakout.main --pacing relaxed
    python -m games.Breakout.main --lives 5 --no-restart
"""

import argparse
import sys
from typing import List, Optional

import pygame

from playfield.games.input import InputManager
from playfield.games.input.sources import PygameInputSource
from playfield.logging import close_all_sinks, create_sink_for_module, get_logger, register_sink

from games.Breakout.config import FPS, HIDE_CURSOR, SCREEN_WIDTH, SCREEN_HEIGHT
from games.Breakout.engine import FrameClock, FrameDriver, SessionEnd
from games.Breakout.game_mode import BreakoutMode

log = get_logger('breakout.main')


def build_parser() -> argparse.ArgumentParser:
    """Command line parser: game arguments plus display/session options."""
    parser = argparse.ArgumentParser(description=f"{BreakoutMode.NAME} - Standalone")

    for arg in BreakoutMode.get_arguments():
        options = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **options)

    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')
    parser.add_argument('--no-restart', action='store_true',
                        help='Exit after the first win or loss instead of starting over')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run Breakout standalone."""
    parser = build_parser()
    args = parser.parse_args(argv)

    pygame.init()
    pygame.font.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
    else:
        width = args.width or SCREEN_WIDTH
        height = args.height or SCREEN_HEIGHT
        screen = pygame.display.set_mode((width, height))

    pygame.display.set_caption(BreakoutMode.NAME)
    pygame.mouse.set_visible(not HIDE_CURSOR)

    try:
        game = BreakoutMode(
            skin=args.skin,
            pacing=args.pacing,
            lives=args.lives,
            width=width,
            height=height,
        )
    except ValueError as exc:
        pygame.quit()
        parser.error(str(exc))

    register_sink('session', create_sink_for_module('session'))
    input_manager = InputManager(PygameInputSource())
    driver = FrameDriver(game, screen, input_manager, clock=FrameClock(FPS))

    print("\n" + "=" * 50)
    print(BreakoutMode.NAME.upper())
    print("=" * 50)
    print("Controls:")
    print("  - Left/Right arrows or the mouse move the paddle")
    print("  - P to pause, R to restart")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        while True:
            end = driver.run()
            if end == SessionEnd.QUIT:
                break
            if end != SessionEnd.RESTART and args.no_restart:
                break
            game.reset()
            input_manager.clear_events()
            log.info("starting a new session")
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
