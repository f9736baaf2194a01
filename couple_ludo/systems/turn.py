"""Turn manager.

``current_player`` is the single source of truth for whose turn it is. It
advances exactly once per completed turn cycle: right after a plain landing,
or after a task resolution that did not end the game.
"""

import logging
from dataclasses import replace

from couple_ludo.state import State
from couple_ludo.types import Phase

logger = logging.getLogger(__name__)


def turn_system(state: State) -> State:
    """Hand the turn to the other player and return to ``PLAYING``."""
    if state.is_moving or state.current_task is not None:
        raise ValueError("Turn cannot switch mid-animation or with an open task")
    next_player = state.current_player.other
    logger.debug("Turn %d ends, %s to play", state.turn, next_player)
    return replace(
        state,
        current_player=next_player,
        turn=state.turn + 1,
        phase=Phase.PLAYING,
        pending=None,
    )
