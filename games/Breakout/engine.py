"""
Frame driver for Breakout.

This module owns the per-frame loop: drain input, run one simulation step,
draw, flip, wait for the next frame. When the session ends it tells the
player and stops instead of scheduling another frame.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional, Tuple

import pygame

from playfield.games import GameState
from playfield.games.input import InputEvent, InputKind, InputManager
from playfield.logging import emit_record, get_logger

from .config import (
    FPS, PAUSE_KEY, RESTART_KEY, QUIT_KEY,
    WIN_MESSAGE, LOSS_MESSAGE,
)
from .game.simulation import StepEvent, StepResult
from .game_mode import BreakoutMode

log = get_logger('breakout.engine')

# Left in the queue for the input source
_INPUT_EVENT_TYPES = (pygame.KEYDOWN, pygame.KEYUP, pygame.MOUSEMOTION)


class SessionEnd(str, Enum):
    """Why FrameDriver.run() returned."""

    WON = "won"
    LOST = "lost"
    RESTART = "restart"
    QUIT = "quit"


class FrameClock:
    """Display-rate frame scheduler backed by pygame.time.Clock.

    Args:
        fps: Target frame rate (0 = uncapped)
    """

    def __init__(self, fps: int = FPS):
        self._fps = fps
        self._clock = pygame.time.Clock()

    @property
    def fps(self) -> int:
        return self._fps

    def wait_next_frame(self) -> float:
        """Block until the next frame is due.

        Returns:
            Seconds elapsed since the previous frame
        """
        return self._clock.tick(self._fps) / 1000.0


class Notifier(ABC):
    """Tells the player how the session ended."""

    @abstractmethod
    def notify(self, outcome: GameState, score: int) -> bool:
        """Show the outcome and wait for acknowledgment.

        Args:
            outcome: GameState.WON or GameState.GAME_OVER
            score: Final score

        Returns:
            True if the player acknowledged, False if they closed the window
        """
        pass


class BannerNotifier(Notifier):
    """Draws the outcome over the last frame and blocks until a key or click.

    Args:
        game: Game whose skin draws the banner
        screen: Display surface
        flip: Presents the surface (pygame.display.flip by default)
        wait_event: Blocking event read (pygame.event.wait by default)
    """

    def __init__(
        self,
        game: BreakoutMode,
        screen: pygame.Surface,
        flip: Callable[[], None] = pygame.display.flip,
        wait_event: Callable[[], pygame.event.Event] = pygame.event.wait,
    ):
        self._game = game
        self._screen = screen
        self._flip = flip
        self._wait_event = wait_event

    def notify(self, outcome: GameState, score: int) -> bool:
        if outcome == GameState.WON:
            title, color = WIN_MESSAGE, (34, 139, 34)
        else:
            title, color = LOSS_MESSAGE, (220, 20, 60)

        self._game.skin.render_banner(
            self._screen,
            title,
            f"Score: {score} - press any key",
            color,
        )
        self._flip()

        while True:
            event = self._wait_event()
            if event.type == pygame.QUIT:
                return False
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                return True


class FrameDriver:
    """Runs one Breakout session frame by frame.

    Attributes:
        game: The game mode being driven
        screen: Surface the game renders into
        input_manager: Source of keyboard/pointer events
        clock: Frame scheduler
        notifier: Shows the outcome when the session ends
        frames: Simulation steps run in the current session (paused frames excluded)

    Examples:
        >>> driver = FrameDriver(game, screen, InputManager(PygameInputSource()))
        >>> driver.run()
        <SessionEnd.WON: 'won'>
    """

    def __init__(
        self,
        game: BreakoutMode,
        screen: pygame.Surface,
        input_manager: InputManager,
        clock: Optional[FrameClock] = None,
        notifier: Optional[Notifier] = None,
        flip: Callable[[], None] = pygame.display.flip,
        poll_quit: Optional[Callable[[], bool]] = None,
    ):
        """Initialize the frame driver.

        Args:
            game: The game mode to drive
            screen: Surface to render into
            input_manager: Input manager with an active source
            clock: Frame scheduler (FrameClock at config FPS by default)
            notifier: End-of-session notifier (BannerNotifier by default)
            flip: Presents the rendered frame
            poll_quit: Returns True when the window was closed
        """
        self.game = game
        self.screen = screen
        self.input_manager = input_manager
        self.clock = clock or FrameClock()
        self.notifier = notifier or BannerNotifier(game, screen, flip=flip)
        self._flip = flip
        self._poll_quit = poll_quit or _pygame_quit_requested
        self.frames = 0

    def run(self) -> SessionEnd:
        """Run frames until the session ends.

        Returns:
            How the session ended
        """
        self.frames = 0
        log.info("session started: %d bricks, %d lives",
                 self.game.world.bricks.total, self.game.lives)
        emit_record('session', {
            'type': 'start',
            'bricks': self.game.world.bricks.total,
            'lives': self.game.lives,
        })

        while True:
            dt = self.clock.wait_next_frame()
            end = self.tick(dt)
            if end is not None:
                break

        log.info("session ended (%s) after %d frames, score %d",
                 end.value, self.frames, self.game.get_score())
        emit_record('session', {
            'type': 'end',
            'result': end.value,
            'frames': self.frames,
            'score': self.game.get_score(),
            'lives': self.game.lives,
        })
        return end

    def tick(self, dt: float) -> Optional[SessionEnd]:
        """Run a single frame.

        Args:
            dt: Seconds since the previous frame

        Returns:
            None to schedule another frame, or why the session ended
        """
        self.input_manager.update(dt)
        events = self.input_manager.get_events()
        if self._poll_quit():
            return SessionEnd.QUIT

        game_events, command = self._split_driver_keys(events)
        if command is not None:
            return command

        self.game.handle_input(game_events)
        self.game.update(dt)
        if self.game.last_result.frame:
            self.frames += 1
        self._record(self.game.last_result)

        self.game.render(self.screen)
        self._flip()

        state = self.game.state
        if state.is_terminal:
            acknowledged = self.notifier.notify(state, self.game.get_score())
            if not acknowledged:
                return SessionEnd.QUIT
            return SessionEnd.WON if state == GameState.WON else SessionEnd.LOST

        return None

    def _split_driver_keys(
        self,
        events: List[InputEvent],
    ) -> Tuple[List[InputEvent], Optional[SessionEnd]]:
        """Handle pause/restart/quit keys and return the remaining events."""
        remaining = []
        for event in events:
            if event.kind == InputKind.KEY_DOWN:
                if event.key == QUIT_KEY:
                    return remaining, SessionEnd.QUIT
                if event.key == RESTART_KEY:
                    return remaining, SessionEnd.RESTART
                if event.key == PAUSE_KEY:
                    paused = self.game.toggle_pause()
                    log.info("paused" if paused else "resumed")
                    continue
            remaining.append(event)
        return remaining, None

    def _record(self, result: StepResult) -> None:
        """Log and emit records for the events of one step."""
        for event in result.events:
            if event == StepEvent.BRICK_DESTROYED:
                log.debug("frame %d: brick destroyed, score %d",
                          result.frame, self.game.get_score())
            elif event == StepEvent.LIFE_LOST:
                log.info("frame %d: life lost, %d left", result.frame, self.game.lives)
            elif event in (StepEvent.WIN, StepEvent.LOSS):
                log.info("frame %d: %s", result.frame, event.value)
            else:
                continue

            emit_record('session', {
                'type': event.value,
                'frame': result.frame,
                'score': self.game.get_score(),
                'lives': self.game.lives,
            })


def _pygame_quit_requested() -> bool:
    """True if the window was closed since the last check.

    Drains whatever the input source re-posted (window events, clicks).
    Keyboard and pointer events that arrived after the source drained the
    queue stay queued for the next frame.
    """
    if not pygame.display.get_init():
        return False
    events = pygame.event.get(exclude=_INPUT_EVENT_TYPES)
    return any(event.type == pygame.QUIT for event in events)
