"""
Playfield

Small pygame game platform: the BaseGame plugin interface, the standard
GameState enum, input sources and logging.
"""

from playfield.logging import get_logger

__all__ = ['get_logger']
