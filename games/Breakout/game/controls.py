"""Player input state for Breakout.

ControlState holds latched flags for the two movement keys and a pending
pointer target. Only its handler methods mutate it, and the simulation
step reads it once per frame.
"""

from typing import Optional

import pygame


class ControlState:
    """Latched movement flags plus a one-shot pointer target.

    Args:
        field_width: Canvas width; pointer x must lie strictly inside (0, width)
        left_key: Key code that moves the paddle left
        right_key: Key code that moves the paddle right
    """

    def __init__(
        self,
        field_width: float,
        left_key: int = pygame.K_LEFT,
        right_key: int = pygame.K_RIGHT,
    ):
        self._field_width = field_width
        self._left_key = left_key
        self._right_key = right_key
        self.move_left = False
        self.move_right = False
        self._pointer_target: Optional[float] = None

    @property
    def pointer_target(self) -> Optional[float]:
        """Pending pointer x (paddle center), or None."""
        return self._pointer_target

    def key_down(self, key: int) -> None:
        """Latch the flag for a movement key. Other keys are ignored."""
        if key == self._right_key:
            self.move_right = True
        elif key == self._left_key:
            self.move_left = True

    def key_up(self, key: int) -> None:
        """Release the flag for a movement key. Other keys are ignored."""
        if key == self._right_key:
            self.move_right = False
        elif key == self._left_key:
            self.move_left = False

    def pointer_move(self, x: float) -> None:
        """Record a pointer position if it is inside the canvas.

        Out-of-bounds positions are dropped without error.
        """
        if 0 < x < self._field_width:
            self._pointer_target = x

    def take_pointer_target(self) -> Optional[float]:
        """Return and clear the pending pointer target."""
        target = self._pointer_target
        self._pointer_target = None
        return target

    def release_all(self) -> None:
        """Clear every flag and the pointer target."""
        self.move_left = False
        self.move_right = False
        self._pointer_target = None
