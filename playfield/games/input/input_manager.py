"""
Input manager for Playfield games.

This module provides the InputManager class that manages the active input
source and hands its events to the frame driver once per frame.
"""

from typing import List, Optional

from playfield.games.input.input_event import InputEvent
from playfield.games.input.sources.base import InputSource


class InputManager:
    """Manages the active input source and provides unified event access.

    Events are only ever collected on the thread that runs the game loop:
    the frame driver calls update() and then get_events() at the start of
    each frame, so the game sees a consistent snapshot of input.

    Attributes:
        _source: The currently active input source

    Examples:
        >>> from playfield.games.input.sources import PygameInputSource
        >>> manager = InputManager(PygameInputSource())
        >>> manager.update(0.016)
        >>> events = manager.get_events()
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize the input manager with an optional input source.

        Args:
            source: The initial input source, or None to start with no source
        """
        self._source: Optional[InputSource] = source

    def set_source(self, source: InputSource) -> None:
        """Set or change the active input source.

        Args:
            source: The new input source to use

        Raises:
            TypeError: If source is not an instance of InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an instance of InputSource, got {type(source).__name__}"
            )
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        """Get the currently active input source."""
        return self._source

    def has_source(self) -> bool:
        """Check if an input source is currently active."""
        return self._source is not None

    def update(self, dt: float) -> None:
        """Update the active input source.

        Safe to call even if no source is active.

        Args:
            dt: Delta time in seconds since last update
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Get new input events from the active source.

        Returns:
            List of InputEvent objects, empty if no source or no events
        """
        if self._source is None:
            return []
        return self._source.poll_events()

    def clear_events(self) -> None:
        """Discard any pending events from the active source.

        Used when a new session starts so stale key presses don't leak in.
        """
        if self._source is not None:
            self._source.poll_events()
