"""
Tests for Breakout entities: ball, paddle and the brick grid.

Tests cover:
- Ball serve, integration and sign-flip bounces
- Paddle clamping for keyboard steps and pointer placement
- Brick grid geometry, iteration order and destruction
"""

import pytest

from games.Breakout.config import BrickGridConfig
from games.Breakout.game.entities import (
    Ball, BallConfig,
    Brick, BrickGrid, BrickState,
    Paddle, PaddleConfig,
)
from models import Rectangle


class TestBall:
    """Test Ball entity."""

    def test_serve_sets_launch_velocity(self):
        """Serve places the ball and launches it up and to the right."""
        ball = Ball(BallConfig(radius=10, speed=5), 0, 0)
        ball.serve(400, 570)
        assert (ball.x, ball.y) == (400, 570)
        assert (ball.vx, ball.vy) == (5, -5)

    def test_advance(self):
        """Advance adds one frame of velocity."""
        ball = Ball(BallConfig(), 100, 100, vx=5, vy=-5)
        ball.advance()
        assert (ball.x, ball.y) == (105, 95)

    def test_next_position_does_not_move(self):
        """next_x/next_y look ahead without changing the position."""
        ball = Ball(BallConfig(), 100, 100, vx=-5, vy=5)
        assert (ball.next_x, ball.next_y) == (95, 105)
        assert (ball.x, ball.y) == (100, 100)

    def test_bounces_only_flip_signs(self):
        """Bounces keep the per-axis speed."""
        ball = Ball(BallConfig(speed=5), 0, 0, vx=5, vy=-5)
        ball.bounce_horizontal()
        assert (ball.vx, ball.vy) == (-5, -5)
        ball.bounce_vertical()
        assert (ball.vx, ball.vy) == (-5, 5)

    def test_center(self):
        ball = Ball(BallConfig(), 12.5, 30)
        assert ball.center.x == 12.5
        assert ball.center.y == 30

    def test_repr(self):
        ball = Ball(BallConfig(), 1, 2, vx=5, vy=-5)
        assert repr(ball) == "Ball(x=1.0, y=2.0, vx=+5.0, vy=-5.0)"


class TestPaddle:
    """Test Paddle entity."""

    @pytest.fixture
    def paddle(self):
        return Paddle(PaddleConfig(width=75, height=10, speed=7), 800, 600)

    def test_starts_centered_on_bottom(self, paddle):
        """Paddle starts centered with its top at height - paddle height."""
        assert paddle.x == pytest.approx(362.5)
        assert paddle.y == 590
        assert paddle.max_x == 725

    def test_rect(self, paddle):
        rect = paddle.rect
        assert rect.x == pytest.approx(362.5)
        assert rect.y == 590
        assert rect.width == 75
        assert rect.height == 10

    def test_move_right_clamps(self, paddle):
        """The last step right stops at the edge."""
        paddle.place_center_at(760)
        assert paddle.x == pytest.approx(722.5)
        assert paddle.move_right()
        assert paddle.x == 725
        assert not paddle.move_right()
        assert paddle.x == 725

    def test_move_left_clamps(self, paddle):
        """The last step left stops at zero."""
        paddle.place_center_at(40)
        assert paddle.x == pytest.approx(2.5)
        assert paddle.move_left()
        assert paddle.x == 0
        assert not paddle.move_left()
        assert paddle.x == 0

    def test_place_center_at(self, paddle):
        """Pointer placement centers the paddle on the target."""
        paddle.place_center_at(200)
        assert paddle.x == pytest.approx(162.5)

    @pytest.mark.parametrize("target,expected", [(0, 0), (-50, 0), (800, 725), (1000, 725)])
    def test_place_center_at_clamps(self, paddle, target, expected):
        paddle.place_center_at(target)
        assert paddle.x == pytest.approx(expected)

    def test_spans_is_inclusive(self, paddle):
        """Both paddle edges count as inside the span."""
        assert paddle.spans(paddle.left)
        assert paddle.spans(paddle.right)
        assert paddle.spans(400)
        assert not paddle.spans(paddle.left - 0.01)
        assert not paddle.spans(paddle.right + 0.01)

    def test_center_resets(self, paddle):
        paddle.place_center_at(0)
        paddle.center()
        assert paddle.x == pytest.approx(362.5)


class TestBrick:
    """Test Brick entity."""

    def test_starts_active(self):
        brick = Brick(Rectangle(x=0, y=0, width=100, height=20), (1, 2))
        assert brick.is_active
        assert not brick.is_destroyed
        assert brick.state == BrickState.ACTIVE
        assert brick.grid_position == (1, 2)

    def test_destroy_is_permanent(self):
        """Destroying twice leaves the brick destroyed."""
        brick = Brick(Rectangle(x=0, y=0, width=100, height=20), (0, 0))
        brick.destroy()
        brick.destroy()
        assert brick.is_destroyed
        assert brick.state == BrickState.DESTROYED

    def test_repr(self):
        brick = Brick(Rectangle(x=0, y=0, width=100, height=20), (3, 1))
        assert repr(brick) == "Brick(col=3, row=1, active)"


class TestBrickGrid:
    """Test the brick grid."""

    @pytest.fixture
    def grid(self):
        return BrickGrid(BrickGridConfig())

    def test_size(self, grid):
        """Default grid is 6 columns by 3 rows."""
        assert grid.total == 18
        assert len(grid) == 18
        assert len(list(grid)) == 18

    def test_cell_geometry(self, grid):
        """Cells are laid out from the offsets with padding between them."""
        rect = grid.at(0, 0).rect
        assert (rect.x, rect.y, rect.width, rect.height) == (50, 50, 100, 20)

        rect = grid.at(5, 2).rect
        assert (rect.x, rect.y) == (5 * 120 + 50, 2 * 40 + 50)

    def test_column_major_order(self, grid):
        """Iteration walks each column top to bottom."""
        positions = [brick.grid_position for brick in grid]
        assert positions[:4] == [(0, 0), (0, 1), (0, 2), (1, 0)]
        assert positions[-1] == (5, 2)

    def test_cells_fit_default_screen(self, grid):
        """The default grid fits inside an 800 pixel wide screen."""
        assert max(brick.rect.right for brick in grid) <= 800

    def test_destroyed_count(self, grid):
        grid.at(1, 1).destroy()
        grid.at(4, 0).destroy()
        assert grid.destroyed_count == 2
        assert len(grid.active_bricks()) == 16
        assert not grid.all_destroyed

    def test_all_destroyed(self, grid):
        for brick in grid:
            brick.destroy()
        assert grid.all_destroyed
        assert grid.active_bricks() == []

    def test_custom_layout(self):
        grid = BrickGrid(BrickGridConfig(rows=2, columns=3))
        assert grid.total == 6
        assert grid.at(2, 1).grid_position == (2, 1)
