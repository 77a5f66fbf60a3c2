"""Geometric skin - flat shapes with white outlines on a dark background."""

from typing import TYPE_CHECKING, Tuple

import pygame

from .base import BreakoutSkin

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class GeometricSkin(BreakoutSkin):
    """Renders game using simple geometric shapes.

    - Paddle: Blue rectangle with white outline
    - Ball: White circle
    - Bricks: One color per row, white outline
    """

    NAME = "geometric"
    DESCRIPTION = "Simple shapes on a dark background"

    BACKGROUND_COLOR = (20, 20, 30)

    PADDLE_COLOR = (100, 150, 255)
    PADDLE_OUTLINE = (255, 255, 255)
    BALL_COLOR = (255, 255, 255)
    HUD_COLOR = (255, 255, 255)

    ROW_COLORS = [
        (255, 100, 100),
        (255, 180, 100),
        (255, 255, 100),
        (100, 255, 100),
        (100, 100, 255),
    ]

    def _get_brick_color(self, brick: 'Brick') -> Tuple[int, int, int]:
        _, row = brick.grid_position
        return self.ROW_COLORS[row % len(self.ROW_COLORS)]

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render paddle as a colored rectangle."""
        rect = paddle.rect.as_tuple()
        pygame.draw.rect(screen, self.PADDLE_COLOR, rect)
        pygame.draw.rect(screen, self.PADDLE_OUTLINE, rect, 2)

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render ball as a white circle."""
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(screen, self.BALL_COLOR, pos, int(ball.radius))

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render brick as a colored rectangle."""
        if not brick.is_active:
            return
        rect = brick.rect.as_tuple()
        pygame.draw.rect(screen, self._get_brick_color(brick), rect)
        pygame.draw.rect(screen, (255, 255, 255), rect, 1)

    def render_hud(self, screen: pygame.Surface, score: int, lives: int) -> None:
        """Render HUD with score and lives."""
        self._ensure_fonts()

        score_text = self._font.render(f"Score: {score}", True, self.HUD_COLOR)
        screen.blit(score_text, (10, 10))

        lives_text = self._font.render(f"Lives: {lives}", True, self.HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(lives_text, lives_rect)
