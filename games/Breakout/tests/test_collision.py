"""
Tests for collision detection.

Tests cover:
- Center-point brick hits (strict, active only)
- Wall look-ahead checks against the play field
- Paddle catch on the ball's center x
"""

import pytest

from games.Breakout.config import BrickGridConfig
from games.Breakout.game.entities import Ball, BallConfig, Brick, BrickGrid, Paddle, PaddleConfig
from games.Breakout.game.physics import (
    check_brick_collision,
    check_paddle_catch,
    find_brick_hits,
    hits_bottom_wall,
    hits_side_wall,
    hits_top_wall,
)
from models import Rectangle


@pytest.fixture
def field():
    return Rectangle(x=0, y=0, width=800, height=600)


def make_ball(x, y, vx=5, vy=-5):
    return Ball(BallConfig(radius=10, speed=5), x, y, vx=vx, vy=vy)


class TestBrickCollision:
    """Test ball vs brick."""

    @pytest.fixture
    def brick(self):
        return Brick(Rectangle(x=50, y=50, width=100, height=20), (0, 0))

    def test_center_inside(self, brick):
        assert check_brick_collision(make_ball(100, 60), brick)

    def test_center_on_edge(self, brick):
        """Edges are outside."""
        assert not check_brick_collision(make_ball(50, 60), brick)
        assert not check_brick_collision(make_ball(100, 70), brick)

    def test_overlap_without_center(self, brick):
        """A circle overlapping the brick but centered outside misses."""
        assert not check_brick_collision(make_ball(100, 45), brick)

    def test_destroyed_brick_never_collides(self, brick):
        brick.destroy()
        assert not check_brick_collision(make_ball(100, 60), brick)

    def test_find_brick_hits(self):
        grid = BrickGrid(BrickGridConfig())
        hits = find_brick_hits(make_ball(340, 100), grid)
        assert [brick.grid_position for brick in hits] == [(2, 1)]

    def test_find_brick_hits_in_gap(self):
        """Padding between bricks is empty."""
        grid = BrickGrid(BrickGridConfig())
        assert find_brick_hits(make_ball(160, 60), grid) == []


class TestWalls:
    """Test look-ahead wall checks."""

    def test_top(self, field):
        assert hits_top_wall(make_ball(400, 14, vy=-5), field)
        assert not hits_top_wall(make_ball(400, 15, vy=-5), field)
        assert not hits_top_wall(make_ball(400, 14, vy=5), field)

    def test_bottom(self, field):
        assert hits_bottom_wall(make_ball(400, 586, vy=5), field)
        assert not hits_bottom_wall(make_ball(400, 585, vy=5), field)
        assert not hits_bottom_wall(make_ball(400, 586, vy=-5), field)

    def test_sides(self, field):
        assert hits_side_wall(make_ball(786, 300, vx=5), field)
        assert not hits_side_wall(make_ball(785, 300, vx=5), field)
        assert hits_side_wall(make_ball(14, 300, vx=-5), field)
        assert not hits_side_wall(make_ball(15, 300, vx=-5), field)


class TestPaddleCatch:
    """Test the paddle catch."""

    @pytest.fixture
    def paddle(self):
        return Paddle(PaddleConfig(width=75, height=10, speed=7), 800, 600)

    def test_over_paddle(self, paddle):
        assert check_paddle_catch(make_ball(400, 590), paddle)

    def test_edges_count(self, paddle):
        assert check_paddle_catch(make_ball(paddle.left, 590), paddle)
        assert check_paddle_catch(make_ball(paddle.right, 590), paddle)

    def test_radius_does_not_count(self, paddle):
        """Only the center x is compared with the span."""
        assert not check_paddle_catch(make_ball(paddle.left - 5, 590), paddle)
