"""Outcome resolver.

Applies the reward or penalty of a resolved challenge to the executor.

* star / trap, completed: move forward by a reward drawn from
  ``config.reward_range``, bouncing off the end cell like a dice move. A
  reward of 0 reports "stayed" instead of "moved forward".
* star / trap, failed: move backward by a penalty drawn from
  ``config.penalty_range``, clamped at the start cell.
* collision, completed: nothing moves.
* collision, failed: the executor is sent straight back to the start.

A changed star / trap position is animated through the movement engine and
the game continues from :func:`finish_outcome_move`; everything else resolves
synchronously. The turn always passes unless the executor came to rest on
the end cell.
"""

import logging
from dataclasses import replace

from couple_ludo.effects import Transition
from couple_ludo.moves import plan_move, plan_retreat
from couple_ludo.state import State
from couple_ludo.systems.movement import start_animation
from couple_ludo.systems.terminal import has_won, win_system
from couple_ludo.systems.turn import turn_system
from couple_ludo.types import MessageKind, MovePurpose, PlayerColor, TaskType
from couple_ludo.utils.message import emit_message
from couple_ludo.utils.rng import draw_int

logger = logging.getLogger(__name__)


def finish_outcome_move(state: State, player: PlayerColor) -> State:
    """Declare ``player`` the winner on the end cell, otherwise pass the turn."""
    if has_won(state, player):
        return win_system(state, player)
    return turn_system(state)


def _collision_outcome(state: State, executor: PlayerColor, completed: bool) -> Transition:
    if completed:
        transition = emit_message(state, f"{executor}Completed", MessageKind.SUCCESS)
    else:
        state = replace(state, position=state.position.set(executor, 0))
        transition = emit_message(state, f"{executor}FailedToStart", MessageKind.ERROR)
    return Transition(turn_system(transition.state), transition.effects)


def _move_outcome(state: State, executor: PlayerColor, completed: bool) -> Transition:
    current = state.position[executor]
    if completed:
        low, high = state.config.reward_range
        reward, state = draw_int(state, low, high)
        path = plan_move(current, reward, state.last)
        if reward == 0:
            transition = emit_message(state, f"{executor}Stay", MessageKind.SUCCESS)
        else:
            transition = emit_message(
                state, f"{executor}Forward", MessageKind.SUCCESS, {"steps": reward}
            )
    else:
        low, high = state.config.penalty_range
        penalty, state = draw_int(state, low, high)
        path = plan_retreat(current, penalty)
        transition = emit_message(
            state, f"{executor}Backward", MessageKind.ERROR, {"steps": penalty}
        )

    final = path[-1] if len(path) > 0 else current
    logger.debug("%s task outcome: %d -> %d", executor, current, final)
    if final != current:
        return transition.then(
            start_animation(transition.state, executor, path, MovePurpose.TASK_OUTCOME)
        )
    return Transition(finish_outcome_move(transition.state, executor), transition.effects)


def outcome_system(state: State, completed: bool) -> Transition:
    """Resolve the open challenge with the reported result."""
    task = state.current_task
    task_type = state.task_type
    if task is None or task_type is None:
        return Transition(state)
    state = replace(state, current_task=None, task_type=None)
    if task_type == TaskType.COLLISION:
        return _collision_outcome(state, task.executor, completed)
    return _move_outcome(state, task.executor, completed)
