from __future__ import annotations

from enum import Enum


class GameState(Enum):
    """Phase of a game session.

    ROLLING_DICE and GAME_OVER are declared but no transition leads to them:
    a session plays a fixed number of ticks and simply stops.
    """
    UNDEFINED = 0
    WELCOME = 1
    PLAYING = 2
    ROLLING_DICE = 3
    GAME_OVER = 4


def next_state(state: GameState) -> GameState:
    """Advances the linear Undefined -> Welcome -> Playing progression."""
    if state is GameState.UNDEFINED:
        return GameState.WELCOME
    if state is GameState.WELCOME:
        return GameState.PLAYING
    return state
