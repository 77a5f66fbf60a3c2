"""World state for one Breakout session.

WorldState is a plain mutable holder. It is owned by the game mode and
passed by reference into the simulation step; nothing here lives at module
scope.
"""

from dataclasses import dataclass
from typing import Optional

from models import Rectangle
from playfield.games import GameState

from ..config import GameSettings
from .entities import Ball, BallConfig, BrickGrid, Paddle, PaddleConfig


@dataclass
class WorldState:
    """Everything the simulation step reads and writes.

    Attributes:
        settings: Session settings the world was built from
        field: Play field rectangle (the canvas)
        ball: The ball
        paddle: The paddle
        bricks: The brick grid
        score: Bricks destroyed so far
        lives: Lives remaining
        frame: Number of simulation steps taken
        outcome: GameState.WON / GameState.GAME_OVER once the session ended
    """

    settings: GameSettings
    field: Rectangle
    ball: Ball
    paddle: Paddle
    bricks: BrickGrid
    score: int = 0
    lives: int = 0
    frame: int = 0
    outcome: Optional[GameState] = None

    @property
    def is_finished(self) -> bool:
        return self.outcome is not None

    @property
    def serve_position(self) -> tuple:
        """Where the ball is (re)served from: horizontal center, near the bottom."""
        return (
            self.settings.width / 2,
            self.settings.height - self.settings.ball_start_offset,
        )

    def reset_serve(self) -> None:
        """Re-center the ball and the paddle after a lost life.

        Score, lives and destroyed bricks are left alone.
        """
        self.ball.serve(*self.serve_position)
        self.paddle.center()


def new_world(settings: Optional[GameSettings] = None) -> WorldState:
    """Build a fresh session: full brick grid, served ball, centered paddle.

    Args:
        settings: Session settings (defaults from config when None)

    Returns:
        A new WorldState
    """
    settings = settings or GameSettings()

    field = Rectangle(x=0.0, y=0.0, width=settings.width, height=settings.height)
    ball = Ball(BallConfig(radius=settings.ball_radius, speed=settings.ball_speed), 0.0, 0.0)
    paddle = Paddle(
        PaddleConfig(
            width=settings.paddle_width,
            height=settings.paddle_height,
            speed=settings.paddle_speed,
        ),
        settings.width,
        settings.height,
    )

    world = WorldState(
        settings=settings,
        field=field,
        ball=ball,
        paddle=paddle,
        bricks=BrickGrid(settings.grid),
        score=0,
        lives=settings.lives,
    )
    world.reset_serve()
    return world
