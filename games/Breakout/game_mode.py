"""Breakout - single-screen ball-and-paddle brick breaker.

Features:
- Arrow keys or the pointer move the paddle
- Fixed 6 x 3 brick grid, one point per brick
- Three lives; the session ends on a clear or when the lives run out
"""

import argparse
from typing import List, Optional

import pygame

from playfield.games import BaseGame, GameState
from playfield.games.input import InputEvent, InputKind
from playfield.logging import get_logger

from .config import (
    GameSettings,
    STARTING_LIVES, SCREEN_WIDTH, SCREEN_HEIGHT,
    PACING_PRESETS,
)
from .game.controls import ControlState
from .game.simulation import StepResult, step
from .game.skins import BreakoutSkin, SKINS, get_skin
from .game.world import WorldState, new_world

log = get_logger('breakout.game_mode')


def _positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


class BreakoutMode(BaseGame):
    """Breakout game mode.

    One update() call is one simulation frame. Input events only ever touch
    the ControlState; the world is changed by the simulation step alone.
    """

    # Game metadata
    NAME = "Breakout"
    DESCRIPTION = "Clear the brick wall without letting the ball drop."
    VERSION = "1.0.0"
    AUTHOR = "Playfield Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'classic',
            'choices': sorted(SKINS),
            'help': 'Visual skin'
        },
        {
            'name': '--pacing',
            'type': str,
            'default': 'classic',
            'choices': sorted(PACING_PRESETS),
            'help': 'Ball/paddle speed preset'
        },
        {
            'name': '--lives',
            'type': _positive_int,
            'default': STARTING_LIVES,
            'help': 'Starting lives'
        },
    ]

    def __init__(
        self,
        skin: str = 'classic',
        pacing: str = 'classic',
        lives: int = STARTING_LIVES,
        width: Optional[int] = None,
        height: Optional[int] = None,
        settings: Optional[GameSettings] = None,
        **kwargs,
    ):
        """Initialize Breakout game.

        Args:
            skin: Visual skin to use
            pacing: Speed preset
            lives: Starting lives
            width: Screen width
            height: Screen height
            settings: Explicit settings; overrides pacing/lives/width/height
            **kwargs: Base game args
        """
        super().__init__(**kwargs)

        self._settings = settings or GameSettings.from_pacing(
            pacing,
            lives=lives,
            width=width or SCREEN_WIDTH,
            height=height or SCREEN_HEIGHT,
        )
        self._skin: BreakoutSkin = get_skin(skin)

        self._world: WorldState = new_world(self._settings)
        self._controls = self._new_controls()
        self._last_result = StepResult()

    def _new_controls(self) -> ControlState:
        return ControlState(
            self._settings.width,
            left_key=self._settings.left_key,
            right_key=self._settings.right_key,
        )

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def controls(self) -> ControlState:
        return self._controls

    @property
    def skin(self) -> BreakoutSkin:
        return self._skin

    @property
    def last_result(self) -> StepResult:
        """Result of the most recent simulation step."""
        return self._last_result

    @property
    def lives(self) -> int:
        return self._world.lives

    def _get_internal_state(self) -> GameState:
        """Map the world outcome to the standard state."""
        if self._world.outcome is not None:
            return self._world.outcome
        return GameState.PLAYING

    def get_score(self) -> int:
        """Get current score."""
        return self._world.score

    def handle_input(self, events: List[InputEvent]) -> None:
        """Feed input events to the control state.

        Args:
            events: List of input events, in arrival order
        """
        for event in events:
            if event.kind == InputKind.KEY_DOWN:
                self._controls.key_down(event.key)
            elif event.kind == InputKind.KEY_UP:
                self._controls.key_up(event.key)
            elif event.kind == InputKind.POINTER_MOVE:
                self._controls.pointer_move(event.position.x)

    def update(self, dt: float) -> None:
        """Run one simulation frame.

        Args:
            dt: Seconds since last frame; motion is per frame so it is only logged
        """
        if self.is_paused or self._world.is_finished:
            self._last_result = StepResult()
            return

        self._last_result = step(self._world, self._controls)
        if self._last_result.events:
            log.trace("frame %d (dt=%.3f): %s", self._last_result.frame, dt,
                      [e.value for e in self._last_result.events])

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.clear(screen)

        for brick in self._world.bricks:
            self._skin.render_brick(brick, screen)

        self._skin.render_ball(self._world.ball, screen)
        self._skin.render_paddle(self._world.paddle, screen)
        self._skin.render_hud(screen, self._world.score, self._world.lives)

        if self.state == GameState.PAUSED:
            self._skin.render_banner(screen, "PAUSED", "Press P to resume")

    def reset(self) -> None:
        """Start a fresh session with the same settings."""
        super().reset()
        self._world = new_world(self._settings)
        self._controls = self._new_controls()
        self._last_result = StepResult()
        log.debug("session reset")
