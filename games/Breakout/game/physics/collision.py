"""Collision detection for Breakout.

All tests are axis-aligned. Bricks are hit when the ball's *center* lies
strictly inside them, and the paddle catches the ball when the center's x
lies within its span; the ball's radius only matters against the walls.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from models import Rectangle
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick, BrickGrid


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if the ball's center is strictly inside an active brick.

    Args:
        ball: Ball to check
        brick: Brick to check against

    Returns:
        True if ball hits brick
    """
    if not brick.is_active:
        return False
    return brick.rect.strictly_contains(ball.x, ball.y)


def find_brick_hits(ball: 'Ball', bricks: 'BrickGrid') -> List['Brick']:
    """All active bricks the ball's center is currently inside, column-major."""
    return [brick for brick in bricks if check_brick_collision(ball, brick)]


def hits_top_wall(ball: 'Ball', field: 'Rectangle') -> bool:
    """True if the next step would take the ball within one radius of the top."""
    return ball.next_y < field.top + ball.radius


def hits_bottom_wall(ball: 'Ball', field: 'Rectangle') -> bool:
    """True if the next step would take the ball within one radius of the bottom."""
    return ball.next_y > field.bottom - ball.radius


def hits_side_wall(ball: 'Ball', field: 'Rectangle') -> bool:
    """True if the next step would take the ball within one radius of either side."""
    return (ball.next_x > field.right - ball.radius or
            ball.next_x < field.left + ball.radius)


def check_paddle_catch(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the paddle is under the ball when it reaches the bottom.

    Only the ball's center x is compared with the paddle span.

    Args:
        ball: Ball at the bottom edge
        paddle: Paddle to check against

    Returns:
        True if the ball bounces instead of being lost
    """
    return paddle.spans(ball.x)
