"""Pytest configuration shared by the platform and game tests."""
import os

# Headless pygame and quiet console logging; must be set before pygame or
# playfield.logging are imported by any test module.
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ.setdefault('PLAYFIELD_LOG_LEVEL', 'WARNING')

import pygame
import pytest


@pytest.fixture
def pygame_display():
    """Initialize pygame with a small dummy display, quit afterwards."""
    pygame.init()
    screen = pygame.display.set_mode((800, 600))
    yield screen
    pygame.quit()
