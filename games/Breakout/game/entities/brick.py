"""Brick entity and the fixed brick grid.

Each brick's rectangle is computed once from its (column, row) index. A
brick is either ACTIVE or DESTROYED, and a destroyed brick never comes back
within a session.
"""

from enum import Enum
from typing import Iterator, List, Tuple

from models import Rectangle

from ...config import BrickGridConfig


class BrickState(Enum):
    """Brick lifecycle states."""

    ACTIVE = "active"
    DESTROYED = "destroyed"


class Brick:
    """A single grid cell."""

    def __init__(self, rect: Rectangle, grid_position: Tuple[int, int]):
        """Initialize brick.

        Args:
            rect: Cell rectangle in screen coordinates
            grid_position: (column, row) position in grid
        """
        self._rect = rect
        self._grid_position = grid_position
        self._state = BrickState.ACTIVE

    @property
    def rect(self) -> Rectangle:
        return self._rect

    @property
    def state(self) -> BrickState:
        return self._state

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (column, row)."""
        return self._grid_position

    @property
    def is_active(self) -> bool:
        return self._state == BrickState.ACTIVE

    @property
    def is_destroyed(self) -> bool:
        return self._state == BrickState.DESTROYED

    def destroy(self) -> None:
        """Mark the brick destroyed. There is no way back to ACTIVE."""
        self._state = BrickState.DESTROYED

    def __repr__(self) -> str:
        col, row = self._grid_position
        return f"Brick(col={col}, row={row}, {self._state.value})"


class BrickGrid:
    """Fixed COLUMNS x ROWS grid of bricks, built once per session.

    Iteration is column-major (all rows of column 0, then column 1, ...),
    which is the order collisions are resolved in.
    """

    def __init__(self, config: BrickGridConfig):
        self._config = config
        self._columns: List[List[Brick]] = [
            [Brick(self.cell_rect(col, row), (col, row)) for row in range(config.rows)]
            for col in range(config.columns)
        ]

    def cell_rect(self, column: int, row: int) -> Rectangle:
        """Rectangle for the cell at (column, row)."""
        cfg = self._config
        return Rectangle(
            x=column * (cfg.brick_width + cfg.padding) + cfg.offset_left,
            y=row * (cfg.brick_height + cfg.padding) + cfg.offset_top,
            width=cfg.brick_width,
            height=cfg.brick_height,
        )

    @property
    def config(self) -> BrickGridConfig:
        return self._config

    @property
    def total(self) -> int:
        return self._config.total

    def __iter__(self) -> Iterator[Brick]:
        for column in self._columns:
            yield from column

    def __len__(self) -> int:
        return self.total

    def at(self, column: int, row: int) -> Brick:
        return self._columns[column][row]

    def active_bricks(self) -> List[Brick]:
        return [brick for brick in self if brick.is_active]

    @property
    def destroyed_count(self) -> int:
        return sum(1 for brick in self if brick.is_destroyed)

    @property
    def all_destroyed(self) -> bool:
        return self.destroyed_count == self.total
