"""Common GameState enum for all Playfield games.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states used by the platform.

    States:
        PLAYING: Active gameplay in progress
        PAUSED: Game temporarily paused (manual pause)
        GAME_OVER: Game ended in loss/failure
        WON: Game ended in success/victory

    For games with internal states:
        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                if self._outcome == "lives_exhausted":
                    return GameState.GAME_OVER
                elif self._outcome == "cleared":
                    return GameState.WON
                return GameState.PLAYING
    """
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        """True for states that end the session."""
        return self in (GameState.GAME_OVER, GameState.WON)
