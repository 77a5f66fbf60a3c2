"""Classic skin - the canvas palette the game was first drawn with.

Filled shapes with a darker outline: crimson ball, royal-blue paddle,
lime-green bricks and a dodger-blue HUD on a white background.
"""

from typing import TYPE_CHECKING

import pygame

from .base import BreakoutSkin
from ...config import (
    BACKGROUND_COLOR as CANVAS_COLOR,
    BALL_FILL, BALL_STROKE,
    PADDLE_FILL, PADDLE_STROKE,
    BRICK_FILL, BRICK_STROKE,
    INTERFACE_COLOR, INTERFACE_FONT_NAME, INTERFACE_FONT_SIZE,
)

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class ClassicSkin(BreakoutSkin):
    """Renders the game with the classic colors."""

    NAME = "classic"
    DESCRIPTION = "Classic canvas palette"

    BACKGROUND_COLOR = CANVAS_COLOR.as_rgb_tuple
    FONT_NAME = INTERFACE_FONT_NAME
    FONT_SIZE = INTERFACE_FONT_SIZE

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        pos = (round(ball.x), round(ball.y))
        radius = round(ball.radius)
        pygame.draw.circle(screen, BALL_FILL.as_rgb_tuple, pos, radius)
        pygame.draw.circle(screen, BALL_STROKE.as_rgb_tuple, pos, radius, 1)

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        rect = paddle.rect.as_tuple()
        pygame.draw.rect(screen, PADDLE_FILL.as_rgb_tuple, rect)
        pygame.draw.rect(screen, PADDLE_STROKE.as_rgb_tuple, rect, 1)

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        if not brick.is_active:
            return
        rect = brick.rect.as_tuple()
        pygame.draw.rect(screen, BRICK_FILL.as_rgb_tuple, rect)
        pygame.draw.rect(screen, BRICK_STROKE.as_rgb_tuple, rect, 1)

    def render_hud(self, screen: pygame.Surface, score: int, lives: int) -> None:
        """Score at top left, lives at top right."""
        self._ensure_fonts()
        color = INTERFACE_COLOR.as_rgb_tuple

        score_text = self._font.render(f"Score = {score}", True, color)
        screen.blit(score_text, (8, 8))

        lives_text = self._font.render(f"Lives x {lives}", True, color)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 8, 8)
        screen.blit(lives_text, lives_rect)
