"""Breakout visual skins."""

from .base import BreakoutSkin
from .classic import ClassicSkin
from .geometric import GeometricSkin

SKINS = {
    ClassicSkin.NAME: ClassicSkin,
    GeometricSkin.NAME: GeometricSkin,
}


def get_skin(name: str) -> BreakoutSkin:
    """Create a skin by name, falling back to classic."""
    return SKINS.get(name, ClassicSkin)()


__all__ = ['BreakoutSkin', 'ClassicSkin', 'GeometricSkin', 'SKINS', 'get_skin']
