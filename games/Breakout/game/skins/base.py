"""Base class for Breakout skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import pygame

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class BreakoutSkin(ABC):
    """Base class for game skins.

    The game logic only manages state - skins decide how to present it.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    BACKGROUND_COLOR = (0, 0, 0)
    FONT_NAME: Optional[str] = None
    FONT_SIZE: int = 24

    def __init__(self):
        self._font: Optional[pygame.font.Font] = None
        self._banner_font: Optional[pygame.font.Font] = None

    def _ensure_fonts(self) -> None:
        """Create fonts on first use (pygame.font must be initialized)."""
        if self._font is None:
            pygame.font.init()
            if self.FONT_NAME:
                self._font = pygame.font.SysFont(self.FONT_NAME, self.FONT_SIZE)
                self._banner_font = pygame.font.SysFont(self.FONT_NAME, self.FONT_SIZE * 3)
            else:
                self._font = pygame.font.Font(None, self.FONT_SIZE)
                self._banner_font = pygame.font.Font(None, self.FONT_SIZE * 3)

    def clear(self, screen: pygame.Surface) -> None:
        """Fill the screen with the background color."""
        screen.fill(self.BACKGROUND_COLOR)

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render one active brick.

        Args:
            brick: Brick to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_hud(self, screen: pygame.Surface, score: int, lives: int) -> None:
        """Render the heads-up display (score and lives).

        Args:
            screen: Pygame surface to draw on
            score: Current score
            lives: Remaining lives
        """
        pass

    def render_banner(
        self,
        screen: pygame.Surface,
        title: str,
        subtitle: str = "",
        color=(255, 255, 255),
    ) -> None:
        """Render a centered message over the play field.

        Args:
            screen: Pygame surface to draw on
            title: Main line
            subtitle: Smaller second line (optional)
            color: Title color
        """
        self._ensure_fonts()
        center_x = screen.get_width() // 2
        center_y = screen.get_height() // 2

        text = self._banner_font.render(title, True, color)
        screen.blit(text, text.get_rect(center=(center_x, center_y)))

        if subtitle:
            sub = self._font.render(subtitle, True, color)
            screen.blit(sub, sub.get_rect(center=(center_x, center_y + text.get_height())))
