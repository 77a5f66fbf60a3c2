"""Configuration for Breakout game.

Contains screen dimensions, physics constants, the brick grid layout,
pacing presets and the color palette. Speeds are in pixels per frame.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

import pygame
from dotenv import load_dotenv

from models import Color

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    raw = os.getenv(key, str(default))
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None


# Display settings
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('BREAKOUT_FPS', 60)
HIDE_CURSOR = _get_bool('BREAKOUT_HIDE_CURSOR', True)

# Ball
BALL_RADIUS: float = 10.0
BALL_SPEED: float = _get_float('BREAKOUT_BALL_SPEED', 5.0)
BALL_START_OFFSET: float = 30.0  # Serve height above the bottom edge

# Paddle
PADDLE_WIDTH: float = 75.0
PADDLE_HEIGHT: float = 10.0
PADDLE_SPEED: float = _get_float('BREAKOUT_PADDLE_SPEED', 7.0)

# Brick grid
BRICK_ROW_COUNT = 3
BRICK_COLUMN_COUNT = 6
BRICK_WIDTH: float = 100.0
BRICK_HEIGHT: float = 20.0
BRICK_PADDING: float = 20.0
BRICK_OFFSET_TOP: float = 50.0
BRICK_OFFSET_LEFT: float = 50.0

STARTING_LIVES = _get_int('BREAKOUT_LIVES', 3)

# Paddle keys
MOVE_LEFT_KEY = pygame.K_LEFT
MOVE_RIGHT_KEY = pygame.K_RIGHT

# Driver keys
PAUSE_KEY = pygame.K_p
RESTART_KEY = pygame.K_r
QUIT_KEY = pygame.K_ESCAPE

# Messages shown on terminal events
WIN_MESSAGE = "C'est gagné, Bravo!"
LOSS_MESSAGE = "GAME OVER"

# Palette (CSS color names)
BACKGROUND_COLOR = Color(r=255, g=255, b=255)
BALL_FILL = Color(r=220, g=20, b=60)          # Crimson
BALL_STROKE = Color(r=178, g=34, b=34)        # FireBrick
PADDLE_FILL = Color(r=65, g=105, b=225)       # RoyalBlue
PADDLE_STROKE = Color(r=25, g=25, b=112)      # MidnightBlue
BRICK_FILL = Color(r=50, g=205, b=50)         # LimeGreen
BRICK_STROKE = Color(r=0, g=100, b=0)         # DarkGreen
INTERFACE_COLOR = Color(r=30, g=144, b=255)   # DodgerBlue
INTERFACE_FONT_NAME = "arial"
INTERFACE_FONT_SIZE = 16


@dataclass
class PacingPreset:
    """Pacing configuration for different player skill levels."""

    name: str
    ball_speed: float       # Ball speed per axis, pixels/frame
    paddle_speed: float     # Paddle step, pixels/frame
    paddle_width: float     # Paddle width (wider = easier)


PACING_PRESETS: Dict[str, PacingPreset] = {
    'classic': PacingPreset(
        name='classic',
        ball_speed=BALL_SPEED,
        paddle_speed=PADDLE_SPEED,
        paddle_width=PADDLE_WIDTH,
    ),
    'relaxed': PacingPreset(
        name='relaxed',
        ball_speed=4.0,
        paddle_speed=6.0,
        paddle_width=100.0,     # Wide paddle
    ),
    'fast': PacingPreset(
        name='fast',
        ball_speed=7.0,
        paddle_speed=9.0,
        paddle_width=65.0,
    ),
}


def get_pacing_preset(name: str) -> PacingPreset:
    """Get pacing preset by name, with fallback to classic."""
    return PACING_PRESETS.get(name, PACING_PRESETS['classic'])


@dataclass
class BrickGridConfig:
    """Brick grid layout. Cell geometry is derived from (column, row)."""

    rows: int = BRICK_ROW_COUNT
    columns: int = BRICK_COLUMN_COUNT
    brick_width: float = BRICK_WIDTH
    brick_height: float = BRICK_HEIGHT
    padding: float = BRICK_PADDING
    offset_top: float = BRICK_OFFSET_TOP
    offset_left: float = BRICK_OFFSET_LEFT

    @property
    def total(self) -> int:
        """Number of bricks in a full grid."""
        return self.rows * self.columns


@dataclass
class GameSettings:
    """Every tunable for one session.

    Raises:
        ValueError: If a dimension, speed or the starting lives is not positive
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    ball_radius: float = BALL_RADIUS
    ball_speed: float = BALL_SPEED
    ball_start_offset: float = BALL_START_OFFSET
    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT
    paddle_speed: float = PADDLE_SPEED
    lives: int = STARTING_LIVES
    grid: BrickGridConfig = field(default_factory=BrickGridConfig)
    left_key: int = MOVE_LEFT_KEY
    right_key: int = MOVE_RIGHT_KEY

    def __post_init__(self):
        for name in ('width', 'height', 'ball_radius', 'ball_speed',
                     'paddle_width', 'paddle_height', 'paddle_speed', 'lives'):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.paddle_width > self.width:
            raise ValueError(
                f"paddle_width ({self.paddle_width}) exceeds screen width ({self.width})"
            )
        if self.grid.rows <= 0 or self.grid.columns <= 0:
            raise ValueError(
                f"brick grid must have at least one cell, got "
                f"{self.grid.rows}x{self.grid.columns}"
            )

    @classmethod
    def from_pacing(
        cls,
        pacing: str = 'classic',
        lives: int = STARTING_LIVES,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
    ) -> 'GameSettings':
        """Build settings from a named pacing preset."""
        preset = get_pacing_preset(pacing)
        return cls(
            width=width,
            height=height,
            ball_speed=preset.ball_speed,
            paddle_speed=preset.paddle_speed,
            paddle_width=preset.paddle_width,
            lives=lives,
        )
