"""
Shared models for the Playfield platform.

Pydantic data models used across games and the platform:
- Primitives: Basic geometric and color types (Point2D, Color, Rectangle)

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models.primitives import Color
"""

from .primitives import (
    Point2D,
    Color,
    Rectangle,
)

__all__ = [
    'Point2D',
    'Color',
    'Rectangle',
]
