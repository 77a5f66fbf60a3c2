"""Paddle entity driven by arrow keys or the pointer.

The paddle sits on the bottom edge of the play field. Its position is the
left edge, and every movement request is clamped so the whole paddle stays
on screen.
"""

from dataclasses import dataclass

from models import Rectangle


@dataclass
class PaddleConfig:
    """Paddle configuration from settings or defaults."""

    width: float = 75.0
    height: float = 10.0
    speed: float = 7.0      # Keyboard step in pixels/frame


class Paddle:
    """Horizontal paddle with clamped keyboard steps and pointer placement."""

    def __init__(
        self,
        config: PaddleConfig,
        screen_width: float,
        screen_height: float,
    ):
        """Initialize paddle, centered on the bottom edge.

        Args:
            config: Paddle configuration
            screen_width: Screen width in pixels
            screen_height: Screen height in pixels
        """
        self._config = config
        self._screen_width = screen_width
        self._screen_height = screen_height
        self._x = 0.0
        self.center()

    @property
    def x(self) -> float:
        """Get paddle left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y position."""
        return self._screen_height - self._config.height

    @property
    def width(self) -> float:
        return self._config.width

    @property
    def height(self) -> float:
        return self._config.height

    @property
    def speed(self) -> float:
        return self._config.speed

    @property
    def left(self) -> float:
        return self._x

    @property
    def right(self) -> float:
        return self._x + self._config.width

    @property
    def max_x(self) -> float:
        """Largest left-edge position that keeps the paddle on screen."""
        return self._screen_width - self._config.width

    @property
    def rect(self) -> Rectangle:
        """Get paddle bounding rectangle."""
        return Rectangle(
            x=self._x,
            y=self.y,
            width=self._config.width,
            height=self._config.height,
        )

    def spans(self, x: float) -> bool:
        """Check if x lies within the paddle's horizontal extent (edges included)."""
        return self.left <= x <= self.right

    def center(self) -> None:
        """Reset paddle to the horizontal center."""
        self._x = (self._screen_width - self._config.width) / 2

    def move_right(self) -> bool:
        """Step right by the paddle speed, stopping at the right edge.

        Returns:
            True if the paddle moved
        """
        if self._x >= self.max_x:
            return False
        self._x = min(self._x + self._config.speed, self.max_x)
        return True

    def move_left(self) -> bool:
        """Step left by the paddle speed, stopping at the left edge.

        Returns:
            True if the paddle moved
        """
        if self._x <= 0:
            return False
        self._x = max(self._x - self._config.speed, 0.0)
        return True

    def place_center_at(self, target_x: float) -> None:
        """Center the paddle on target_x, clamped to screen bounds.

        Args:
            target_x: Desired X coordinate for the paddle center
        """
        left = target_x - self._config.width / 2
        self._x = max(0.0, min(self.max_x, left))
