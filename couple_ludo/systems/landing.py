"""Event resolver.

Classifies the cell a dice move came to rest on and, after the fixed
transition delay, applies the result. Classification runs once per dice
move, never for intermediate steps or task-outcome relocations.

Precedence (first match wins):

1. ``COLLISION``: the other player occupies the landing cell and it is
   neither the start nor the end cell.
2. ``WIN``: the landing cell is the end cell.
3. ``STAR`` / ``TRAP``: the landing cell type.
4. ``NONE``: plain cell, the turn passes.
"""

import logging
from dataclasses import replace

from pyrsistent import pvector

from couple_ludo.actions import ResolveLanding
from couple_ludo.components import Landing
from couple_ludo.effects import StartTimer, Transition
from couple_ludo.state import State
from couple_ludo.systems.task import task_system
from couple_ludo.systems.terminal import win_system
from couple_ludo.systems.turn import turn_system
from couple_ludo.types import CellType, LandingKind, Phase, PlayerColor, TaskType

logger = logging.getLogger(__name__)

LANDING_TASK_TYPES = {
    LandingKind.COLLISION: TaskType.COLLISION,
    LandingKind.STAR: TaskType.STAR,
    LandingKind.TRAP: TaskType.TRAP,
}


def classify_landing(state: State, player: PlayerColor, cell_id: int) -> LandingKind:
    """Return the event triggered by ``player`` resting on ``cell_id``."""
    other_position = state.position[player.other]
    if cell_id == other_position and cell_id not in (0, state.last):
        return LandingKind.COLLISION
    if cell_id == state.last:
        return LandingKind.WIN
    cell_type = state.cell_at(cell_id).type
    if cell_type == CellType.STAR:
        return LandingKind.STAR
    if cell_type == CellType.TRAP:
        return LandingKind.TRAP
    return LandingKind.NONE


def landing_system(state: State, player: PlayerColor) -> Transition:
    """Record the classified landing and schedule its transition."""
    cell_id = state.position[player]
    kind = classify_landing(state, player, cell_id)
    logger.debug("%s landed on %d: %s", player, cell_id, kind)
    state = replace(
        state,
        phase=Phase.PLAYING,
        pending=Landing(player=player, cell_id=cell_id, kind=kind),
    )
    return Transition(
        state,
        pvector(
            [
                StartTimer(
                    state.config.transition_delay_ms, ResolveLanding(state.epoch)
                )
            ]
        ),
    )


def resolve_landing_system(state: State) -> State:
    """Apply the pending landing: open a task, declare a win or pass the turn."""
    landing = state.pending
    if landing is None:
        return state
    state = replace(state, pending=None)
    if landing.kind == LandingKind.WIN:
        return win_system(state, landing.player)
    task_type = LANDING_TASK_TYPES.get(landing.kind)
    if task_type is not None:
        return task_system(state, task_type, landing.player)
    return turn_system(state)
