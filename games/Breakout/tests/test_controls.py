"""
Tests for ControlState.

Tests cover:
- Latched movement flags from key down/up
- Ignored keys
- Pointer target validation and one-shot consumption
"""

import pygame
import pytest

from games.Breakout.game.controls import ControlState


@pytest.fixture
def controls():
    return ControlState(800)


class TestKeys:
    """Test key handling."""

    def test_key_down_latches(self, controls):
        controls.key_down(pygame.K_LEFT)
        assert controls.move_left
        assert not controls.move_right

        controls.key_down(pygame.K_RIGHT)
        assert controls.move_left
        assert controls.move_right

    def test_key_up_releases(self, controls):
        controls.key_down(pygame.K_RIGHT)
        controls.key_up(pygame.K_RIGHT)
        assert not controls.move_right

    def test_flags_are_independent(self, controls):
        """Releasing one key leaves the other held."""
        controls.key_down(pygame.K_LEFT)
        controls.key_down(pygame.K_RIGHT)
        controls.key_up(pygame.K_LEFT)
        assert not controls.move_left
        assert controls.move_right

    def test_other_keys_ignored(self, controls):
        for key in (pygame.K_a, pygame.K_SPACE, pygame.K_UP):
            controls.key_down(key)
        assert not controls.move_left
        assert not controls.move_right
        assert controls.pointer_target is None

    def test_custom_keys(self):
        controls = ControlState(800, left_key=pygame.K_a, right_key=pygame.K_d)
        controls.key_down(pygame.K_LEFT)
        assert not controls.move_left
        controls.key_down(pygame.K_a)
        assert controls.move_left

    def test_release_all(self, controls):
        controls.key_down(pygame.K_LEFT)
        controls.key_down(pygame.K_RIGHT)
        controls.pointer_move(100)
        controls.release_all()
        assert not controls.move_left
        assert not controls.move_right
        assert controls.pointer_target is None


class TestPointer:
    """Test pointer handling."""

    def test_inside_canvas_is_recorded(self, controls):
        controls.pointer_move(250)
        assert controls.pointer_target == 250

    @pytest.mark.parametrize("x", [0, 800, -10, 1200])
    def test_outside_canvas_is_ignored(self, controls, x):
        """Positions on or past the canvas edges are dropped."""
        controls.pointer_move(x)
        assert controls.pointer_target is None

    def test_invalid_position_keeps_previous_target(self, controls):
        controls.pointer_move(300)
        controls.pointer_move(900)
        assert controls.pointer_target == 300

    def test_latest_position_wins(self, controls):
        controls.pointer_move(300)
        controls.pointer_move(310)
        assert controls.pointer_target == 310

    def test_take_clears_target(self, controls):
        controls.pointer_move(300)
        assert controls.take_pointer_target() == 300
        assert controls.take_pointer_target() is None

    def test_pointer_does_not_touch_flags(self, controls):
        controls.pointer_move(300)
        assert not controls.move_left
        assert not controls.move_right
