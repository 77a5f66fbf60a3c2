"""
Input abstraction layer for Playfield games.

Provides unified keyboard/pointer input handling independent of where the
events come from.
"""

from playfield.games.input.input_event import InputEvent, InputKind
from playfield.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputKind', 'InputManager']
