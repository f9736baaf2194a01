"""Terminal condition system.

A game ends only when a piece comes to rest exactly on the end cell; passing
over it during a bounce never counts.
"""

import logging
from dataclasses import replace

from couple_ludo.state import State
from couple_ludo.types import Phase, PlayerColor
from couple_ludo.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)


def has_won(state: State, player: PlayerColor) -> bool:
    return state.position[player] == state.last


def win_system(state: State, player: PlayerColor) -> State:
    """Set the ``WIN`` phase with ``player`` as winner (idempotent)."""
    if is_terminal_state(state):
        return state
    if not has_won(state, player):
        raise ValueError(f"{player} is not on the end cell")
    logger.info("%s wins after %d turns", player, state.turn)
    return replace(
        state,
        phase=Phase.WIN,
        winner=player,
        animation=None,
        pending=None,
        current_task=None,
        task_type=None,
    )
