"""
Input Event - Represents a single keyboard or pointer action.

This is a shared module used by all games.
Uses a frozen dataclass for immutability.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models import Point2D


class InputKind(str, Enum):
    """Kinds of input events delivered by input sources.

    Attributes:
        KEY_DOWN: A key was pressed
        KEY_UP: A key was released
        POINTER_MOVE: The pointer moved to a new position
    """
    KEY_DOWN = "key_down"
    KEY_UP = "key_up"
    POINTER_MOVE = "pointer_move"


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    All input sources must convert their events to this common format.

    Attributes:
        kind: What happened (key down/up, pointer move)
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        key: Key code for KEY_DOWN/KEY_UP events
        position: Pointer position (screen coordinates) for POINTER_MOVE events
    """
    kind: InputKind
    timestamp: float
    key: Optional[int] = None
    position: Optional[Point2D] = None

    def __post_init__(self):
        """Validate timestamp and the payload required by the event kind."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')
        if self.kind in (InputKind.KEY_DOWN, InputKind.KEY_UP) and self.key is None:
            raise ValueError(f'{self.kind.value} event requires a key')
        if self.kind == InputKind.POINTER_MOVE and self.position is None:
            raise ValueError('pointer_move event requires a position')

    @classmethod
    def key_down(cls, key: int, timestamp: float) -> 'InputEvent':
        return cls(kind=InputKind.KEY_DOWN, timestamp=timestamp, key=key)

    @classmethod
    def key_up(cls, key: int, timestamp: float) -> 'InputEvent':
        return cls(kind=InputKind.KEY_UP, timestamp=timestamp, key=key)

    @classmethod
    def pointer_move(cls, x: float, y: float, timestamp: float) -> 'InputEvent':
        return cls(
            kind=InputKind.POINTER_MOVE,
            timestamp=timestamp,
            position=Point2D(x=x, y=y),
        )

    def __str__(self) -> str:
        """String representation for debugging."""
        if self.kind == InputKind.POINTER_MOVE:
            return (f"InputEvent({self.kind.value}, pos=({self.position.x:.2f}, "
                    f"{self.position.y:.2f}), t={self.timestamp:.3f})")
        return f"InputEvent({self.kind.value}, key={self.key}, t={self.timestamp:.3f})"
