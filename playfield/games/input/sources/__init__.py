"""
Input source implementations.
"""

from playfield.games.input.sources.base import InputSource
from playfield.games.input.sources.pygame_events import PygameInputSource

__all__ = ['InputSource', 'PygameInputSource']
