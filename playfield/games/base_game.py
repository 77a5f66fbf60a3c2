"""Base class for all Playfield games.

All games should inherit from BaseGame to ensure a consistent interface
with the standalone runners and the frame driver.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, making them part of the plugin architecture.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from playfield.games.game_state import GameState


class BaseGame(ABC):
    """Abstract base class for all Playfield games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(events): Process input events
        - update(dt): Update game logic
        - render(screen): Draw the game

    Optional overrides:
        - reset(): Reset game to initial state

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"

            ARGUMENTS = [
                {'name': '--lives', 'type': int, 'default': 3,
                 'help': 'Starting lives'},
            ]

            def _get_internal_state(self) -> GameState:
                return GameState.PLAYING

            # ... implement other abstract methods
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always included after the game-specific arguments
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--width',
            'type': int,
            'default': None,
            'help': 'Screen width in pixels'
        },
        {
            'name': '--height',
            'type': int,
            'default': None,
            'help': 'Screen height in pixels'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in cls.ARGUMENTS + cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Initialization
    # =========================================================================

    def __init__(self, **kwargs):
        """Initialize base game.

        Unknown keyword arguments (leftovers from CLI parsing) are ignored.
        """
        self._paused = False

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        A finished game reports its outcome even if it was paused.
        """
        internal = self._get_internal_state()
        if self._paused and not internal.is_terminal:
            return GameState.PAUSED
        return internal

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState.

        Returns:
            GameState.PLAYING, GameState.GAME_OVER or GameState.WON
        """
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    # =========================================================================
    # Pause Support
    # =========================================================================

    @property
    def is_paused(self) -> bool:
        return self._paused

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def toggle_pause(self) -> bool:
        """Flip the pause flag. Returns True if now paused."""
        self._paused = not self._paused
        return self._paused

    # =========================================================================
    # Optional Methods
    # =========================================================================

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        self._paused = False
