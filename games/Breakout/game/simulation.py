"""Per-frame simulation step for Breakout.

One call to step() advances the world by exactly one frame. The order of
the phases matters because later checks read state written by earlier ones:

1. ball vs bricks, using the ball's current center
2. integrate the ball position
3. top wall, or bottom impact (paddle bounce or lost life)
4. side walls
5. paddle movement (pointer target, else keys; right wins a tie)

Terminal outcomes (all bricks destroyed, lives exhausted) end the phase
sequence immediately and mark the world finished, after which step() is a
no-op.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from playfield.games import GameState

from .controls import ControlState
from .physics import (
    check_paddle_catch,
    find_brick_hits,
    hits_bottom_wall,
    hits_side_wall,
    hits_top_wall,
)
from .world import WorldState


class StepEvent(str, Enum):
    """Transitions reported by a simulation step."""

    BRICK_DESTROYED = "brick_destroyed"
    PADDLE_BOUNCE = "paddle_bounce"
    WALL_BOUNCE = "wall_bounce"
    LIFE_LOST = "life_lost"
    WIN = "win"
    LOSS = "loss"


TERMINAL_EVENTS = (StepEvent.WIN, StepEvent.LOSS)


@dataclass
class StepResult:
    """What happened during one frame.

    Attributes:
        frame: Frame number of this step (1-based), 0 if the world was already finished
        events: Events in the order they happened
        destroyed: Grid positions (column, row) of bricks destroyed this frame
    """

    frame: int = 0
    events: List[StepEvent] = field(default_factory=list)
    destroyed: List[tuple] = field(default_factory=list)

    @property
    def terminal(self) -> bool:
        return any(event in TERMINAL_EVENTS for event in self.events)

    @property
    def outcome(self):
        """GameState.WON / GameState.GAME_OVER for terminal steps, else None."""
        if StepEvent.WIN in self.events:
            return GameState.WON
        if StepEvent.LOSS in self.events:
            return GameState.GAME_OVER
        return None

    def count(self, event: StepEvent) -> int:
        return self.events.count(event)


def step(world: WorldState, controls: ControlState) -> StepResult:
    """Advance the world by one frame.

    Args:
        world: Session state, mutated in place
        controls: Input snapshot for this frame

    Returns:
        StepResult describing the transitions of this frame
    """
    if world.is_finished:
        return StepResult()

    world.frame += 1
    result = StepResult(frame=world.frame)

    if _collide_bricks(world, result):
        return result

    ball = world.ball
    ball.advance()

    if hits_top_wall(ball, world.field):
        ball.bounce_vertical()
        result.events.append(StepEvent.WALL_BOUNCE)
    elif hits_bottom_wall(ball, world.field):
        if _bottom_impact(world, result):
            return result

    if hits_side_wall(ball, world.field):
        ball.bounce_horizontal()
        result.events.append(StepEvent.WALL_BOUNCE)

    _move_paddle(world, controls)
    return result


def _collide_bricks(world: WorldState, result: StepResult) -> bool:
    """Destroy every active brick under the ball's center.

    Each hit flips the vertical velocity. Returns True when the last brick
    went down.
    """
    for brick in find_brick_hits(world.ball, world.bricks):
        world.ball.bounce_vertical()
        brick.destroy()
        world.score += 1
        result.events.append(StepEvent.BRICK_DESTROYED)
        result.destroyed.append(brick.grid_position)

        if world.score == world.bricks.total:
            world.outcome = GameState.WON
            result.events.append(StepEvent.WIN)
            return True
    return False


def _bottom_impact(world: WorldState, result: StepResult) -> bool:
    """Bounce off the paddle or lose a life. Returns True when the game is lost."""
    if check_paddle_catch(world.ball, world.paddle):
        world.ball.bounce_vertical()
        result.events.append(StepEvent.PADDLE_BOUNCE)
        return False

    world.lives -= 1
    result.events.append(StepEvent.LIFE_LOST)

    if world.lives <= 0:
        world.outcome = GameState.GAME_OVER
        result.events.append(StepEvent.LOSS)
        return True

    world.reset_serve()
    return False


def _move_paddle(world: WorldState, controls: ControlState) -> None:
    """Apply the pointer target if one is pending, else the held keys."""
    paddle = world.paddle

    target = controls.take_pointer_target()
    if target is not None:
        paddle.place_center_at(target)
        return

    if controls.move_right and paddle.x < paddle.max_x:
        paddle.move_right()
    elif controls.move_left and paddle.x > 0:
        paddle.move_left()
