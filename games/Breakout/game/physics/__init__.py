"""Breakout physics and collision detection."""

from .collision import (
    check_brick_collision,
    check_paddle_catch,
    find_brick_hits,
    hits_bottom_wall,
    hits_side_wall,
    hits_top_wall,
)

__all__ = [
    'check_brick_collision',
    'check_paddle_catch',
    'find_brick_hits',
    'hits_bottom_wall',
    'hits_side_wall',
    'hits_top_wall',
]
