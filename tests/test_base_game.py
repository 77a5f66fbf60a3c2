"""
Tests for BaseGame and GameState.

Tests cover:
- Metadata and argument merging
- Pause/resume and the reported state
- Terminal states
"""

from typing import List

import pygame
import pytest

from playfield.games import BaseGame, GameState


class DummyGame(BaseGame):
    """Minimal concrete game."""

    NAME = "Dummy"
    DESCRIPTION = "Does nothing"

    ARGUMENTS = [
        {'name': '--lives', 'type': int, 'default': 3, 'help': 'Starting lives'},
        {'name': '--width', 'type': int, 'default': 640, 'help': 'Narrow screen'},
    ]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.outcome = GameState.PLAYING

    def _get_internal_state(self) -> GameState:
        return self.outcome

    def get_score(self) -> int:
        return 0

    def handle_input(self, events: List) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, screen: pygame.Surface) -> None:
        pass


class TestGameState:
    """Test GameState."""

    @pytest.mark.parametrize("state,terminal", [
        (GameState.PLAYING, False),
        (GameState.PAUSED, False),
        (GameState.GAME_OVER, True),
        (GameState.WON, True),
    ])
    def test_is_terminal(self, state, terminal):
        assert state.is_terminal is terminal


class TestMetadata:
    """Test class-level metadata."""

    def test_game_arguments_take_precedence(self):
        args = DummyGame.get_arguments()
        assert [arg['name'] for arg in args] == ['--lives', '--width', '--height']
        assert args[1]['default'] == 640

    def test_get_info(self):
        info = DummyGame.get_info()
        assert info['name'] == "Dummy"
        assert info['description'] == "Does nothing"
        assert info['version'] == "1.0.0"
        assert len(info['arguments']) == 3

    def test_abstract(self):
        with pytest.raises(TypeError):
            BaseGame()


class TestPause:
    """Test pause support."""

    def test_pause_and_resume(self):
        game = DummyGame()
        game.pause()
        assert game.is_paused
        assert game.state == GameState.PAUSED
        game.resume()
        assert game.state == GameState.PLAYING

    def test_toggle_returns_new_value(self):
        game = DummyGame()
        assert game.toggle_pause() is True
        assert game.toggle_pause() is False

    def test_terminal_state_not_hidden_by_pause(self):
        game = DummyGame()
        game.pause()
        game.outcome = GameState.WON
        assert game.state == GameState.WON

    def test_reset_unpauses(self):
        game = DummyGame()
        game.pause()
        game.reset()
        assert not game.is_paused
