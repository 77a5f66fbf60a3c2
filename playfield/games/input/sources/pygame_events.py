"""
Pygame Input Source - keyboard and mouse-motion input from the pygame queue.

This is a shared module used by all games.
"""
import time
from typing import List

import pygame

from playfield.games.input.input_event import InputEvent
from playfield.games.input.sources.base import InputSource


class PygameInputSource(InputSource):
    """Keyboard and pointer input source backed by the pygame event queue.

    Converts KEYDOWN, KEYUP and MOUSEMOTION events into InputEvents.
    All other events (QUIT, mouse buttons, window events) are re-posted
    to the pygame event queue for the main loop.

    Args:
        origin_x: Left edge of the play field in window coordinates
        origin_y: Top edge of the play field in window coordinates
    """

    def __init__(self, origin_x: float = 0.0, origin_y: float = 0.0):
        """Initialize the pygame input source."""
        self._origin_x = origin_x
        self._origin_y = origin_y
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Drain the pygame queue and collect keyboard/pointer events."""
        passthrough = []
        for event in pygame.event.get():
            now = time.monotonic()
            if event.type == pygame.KEYDOWN:
                self._event_queue.append(InputEvent.key_down(event.key, now))
            elif event.type == pygame.KEYUP:
                self._event_queue.append(InputEvent.key_up(event.key, now))
            elif event.type == pygame.MOUSEMOTION:
                pos_x, pos_y = event.pos
                self._event_queue.append(InputEvent.pointer_move(
                    float(pos_x) - self._origin_x,
                    float(pos_y) - self._origin_y,
                    now,
                ))
            else:
                passthrough.append(event)

        # Re-post after draining so we don't read our own re-posts back
        for event in passthrough:
            pygame.event.post(event)

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
