"""
Abstract base class for input sources.

This module defines the InputSource interface that all input sources must
implement, so games can be driven by pygame events, scripted replays or
anything else that produces InputEvents.
"""

from abc import ABC, abstractmethod
from typing import List

from playfield.games.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    Subclasses must implement:
        - poll_events(): Return new input events since last poll
        - update(dt): Update source state for time-based processing

    Examples:
        >>> class MyInputSource(InputSource):
        ...     def poll_events(self) -> List[InputEvent]:
        ...         return []  # Return collected events
        ...     def update(self, dt: float) -> None:
        ...         pass  # Update internal state
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll.

        This method should return all events that have occurred since
        the last call to poll_events(), then clear the internal event queue.

        Returns:
            List of InputEvent objects in arrival order, empty list if none
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update source state.

        Called once per frame before poll_events().

        Args:
            dt: Delta time in seconds since last update
        """
        pass
