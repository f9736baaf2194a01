"""Terminal condition helper predicates."""

from couple_ludo.state import State
from couple_ludo.types import Phase


def is_valid_state(state: State) -> bool:
    """Return True if a board with a start and an end cell is loaded."""
    return len(state.cells) >= 2


def is_terminal_state(state: State) -> bool:
    """Return True once a winner has been declared."""
    return state.phase == Phase.WIN
