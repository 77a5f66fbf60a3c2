"""Ball entity with fixed-magnitude velocity.

The ball moves a constant number of pixels per frame on each axis. Bounces
only ever flip the sign of one component, so |vx| and |vy| never change.
"""

from dataclasses import dataclass

from models import Point2D


@dataclass
class BallConfig:
    """Ball configuration from settings or defaults."""

    radius: float = 10.0
    speed: float = 5.0      # Per-axis speed in pixels/frame


class Ball:
    """Ball with velocity-based movement and sign-flip bouncing."""

    def __init__(
        self,
        config: BallConfig,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
    ):
        """Initialize ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
            vx: X velocity (pixels/frame)
            vy: Y velocity (pixels/frame)
        """
        self._config = config
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def speed(self) -> float:
        """Get per-axis speed."""
        return self._config.speed

    @property
    def center(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)

    @property
    def next_x(self) -> float:
        """X position after one more frame at the current velocity."""
        return self.x + self.vx

    @property
    def next_y(self) -> float:
        """Y position after one more frame at the current velocity."""
        return self.y + self.vy

    def serve(self, x: float, y: float) -> None:
        """Place the ball at (x, y) and launch it up and to the right.

        Args:
            x: Serve X position
            y: Serve Y position
        """
        self.x = x
        self.y = y
        self.vx = self._config.speed
        self.vy = -self._config.speed

    def advance(self) -> None:
        """Move the ball by one frame of velocity."""
        self.x += self.vx
        self.y += self.vy

    def bounce_horizontal(self) -> None:
        """Bounce off a vertical surface (reverse X velocity)."""
        self.vx = -self.vx

    def bounce_vertical(self) -> None:
        """Bounce off a horizontal surface (reverse Y velocity)."""
        self.vy = -self.vy

    def __repr__(self) -> str:
        return f"Ball(x={self.x:.1f}, y={self.y:.1f}, vx={self.vx:+.1f}, vy={self.vy:+.1f})"
