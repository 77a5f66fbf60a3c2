"""
Tests for the shared primitive models.

Tests cover:
- Point2D immutability
- Color validation and tuple helpers
- Rectangle validation, edges and strict containment
"""

import pytest
from pydantic import ValidationError

from models import Color, Point2D, Rectangle


class TestPoint2D:
    """Test Point2D."""

    def test_fields(self):
        point = Point2D(x=1.5, y=-2.0)
        assert (point.x, point.y) == (1.5, -2.0)

    def test_frozen(self):
        point = Point2D(x=0.0, y=0.0)
        with pytest.raises(ValidationError):
            point.x = 5.0

    def test_equality(self):
        assert Point2D(x=1, y=2) == Point2D(x=1.0, y=2.0)

    def test_str(self):
        assert str(Point2D(x=1, y=2)) == "Point2D(x=1.00, y=2.00)"


class TestColor:
    """Test Color."""

    def test_tuples(self):
        color = Color(r=220, g=20, b=60)
        assert color.as_tuple == (220, 20, 60, 255)
        assert color.as_rgb_tuple == (220, 20, 60)

    @pytest.mark.parametrize("component", ['r', 'g', 'b', 'a'])
    def test_out_of_range(self, component):
        values = {'r': 0, 'g': 0, 'b': 0, 'a': 255}
        values[component] = 256
        with pytest.raises(ValidationError):
            Color(**values)

    def test_negative(self):
        with pytest.raises(ValidationError):
            Color(r=-1, g=0, b=0)


class TestRectangle:
    """Test Rectangle."""

    @pytest.fixture
    def rect(self):
        return Rectangle(x=50.0, y=50.0, width=100.0, height=20.0)

    def test_edges(self, rect):
        assert (rect.left, rect.right, rect.top, rect.bottom) == (50, 150, 50, 70)

    def test_center(self, rect):
        assert rect.center == Point2D(x=100.0, y=60.0)

    def test_as_tuple(self, rect):
        assert rect.as_tuple() == (50.0, 50.0, 100.0, 20.0)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 10)])
    def test_non_positive_dimensions(self, width, height):
        with pytest.raises(ValidationError):
            Rectangle(x=0, y=0, width=width, height=height)

    def test_strictly_contains_inside(self, rect):
        assert rect.strictly_contains(100, 60)
        assert rect.strictly_contains(50.001, 69.999)

    @pytest.mark.parametrize("x,y", [
        (50, 60), (150, 60), (100, 50), (100, 70),   # on an edge
        (49, 60), (100, 71), (0, 0),                 # outside
    ])
    def test_strictly_contains_excludes(self, rect, x, y):
        assert not rect.strictly_contains(x, y)

    def test_frozen(self, rect):
        with pytest.raises(ValidationError):
            rect.x = 0.0
