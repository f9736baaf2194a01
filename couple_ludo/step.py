"""State reducer and transition orchestration.

This module wires the systems together. :func:`step` is the only public
entry point for game progression: it takes a ``State`` and an ``Action`` and
returns a :class:`~couple_ludo.effects.Transition` holding the next state and
the side effects (animations to start, timers to arm, messages to show) that
a driver should carry out. It is pure.

Control flow of a turn::

    RollDice -> DiceFrame* -> apply_roll -> AnimationTick* -> landing_system
        -> ResolveLanding -> resolve_event
            -> turn_system                      (plain cell)
            -> win_system                       (exact end cell)
            -> task_system -> ReportTaskOutcome -> apply_task_outcome
                -> [AnimationTick*] -> finish_outcome_move

Gating: input that arrives while the dice roll, a piece moves, a landing is
pending or a challenge is open is ignored and returns the state unchanged
with no effects. Timer actions from an earlier epoch (before a restart) are
ignored the same way.

The named transition functions :func:`apply_roll`, :func:`resolve_event` and
:func:`apply_task_outcome` are exported for direct use in tests and tools.
"""

import logging
from dataclasses import replace

from pyrsistent import pvector

from couple_ludo.actions import (
    TIMER_ACTIONS,
    Action,
    AnimationTick,
    ChangeLanguage,
    ClearMessage,
    DiceFrame,
    ReportTaskOutcome,
    ResolveLanding,
    Restart,
    RollDice,
    StartGame,
)
from couple_ludo.board import validate_board
from couple_ludo.effects import Transition
from couple_ludo.moves import plan_move
from couple_ludo.state import State
from couple_ludo.systems.dice import dice_frame_system, roll_system
from couple_ludo.systems.landing import landing_system, resolve_landing_system
from couple_ludo.systems.movement import movement_system, start_animation
from couple_ludo.systems.outcome import finish_outcome_move, outcome_system
from couple_ludo.systems.task import rebuild_queue
from couple_ludo.types import MovePurpose, Phase
from couple_ludo.utils.message import clear_message
from couple_ludo.utils.terminal import is_terminal_state, is_valid_state

logger = logging.getLogger(__name__)


def step(state: State, action: Action) -> Transition:
    """Advance the game by one action.

    Args:
        state (State): Previous immutable game state.
        action (Action): Player control or timer action.

    Returns:
        Transition: Next state and requested effects. Rejected or stale input
            returns the same state object with no effects.

    Raises:
        ValueError: If the action type is not recognized, or a ``StartGame``
            carries an invalid board.
    """
    if isinstance(action, Restart):
        return _step_restart(state)
    if isinstance(action, ChangeLanguage):
        return _step_change_language(state, action)
    if isinstance(action, ClearMessage):
        return Transition(clear_message(state, action.seq))
    if isinstance(action, StartGame):
        return _step_start_game(state, action)

    if isinstance(action, TIMER_ACTIONS) and action.epoch != state.epoch:
        logger.debug("Dropping stale %s from epoch %d", type(action).__name__, action.epoch)
        return Transition(state)
    if not is_valid_state(state) or is_terminal_state(state):
        return Transition(state)

    if isinstance(action, RollDice):
        return _step_roll(state)
    if isinstance(action, DiceFrame):
        return _step_dice_frame(state)
    if isinstance(action, AnimationTick):
        return _step_tick(state)
    if isinstance(action, ResolveLanding):
        return resolve_event(state)
    if isinstance(action, ReportTaskOutcome):
        return apply_task_outcome(state, action.completed)
    raise ValueError(f"Action is not valid: {action!r}")


def apply_roll(state: State, value: int) -> Transition:
    """Move the current player ``value`` cells, bouncing off the end cell.

    Accepted only in the ``PLAYING`` phase with no animation, pending landing
    or open challenge; otherwise the state is returned unchanged.
    """
    if not 1 <= value <= state.config.dice_faces:
        raise ValueError(f"Dice value {value} outside 1..{state.config.dice_faces}")
    if not replace(state, is_rolling=False).can_roll:
        logger.debug("Ignoring roll of %d in phase %s", value, state.phase)
        return Transition(state)
    player = state.current_player
    path = plan_move(state.position[player], value, state.last)
    state = replace(state, dice_value=value, is_rolling=False)
    return start_animation(state, player, path, MovePurpose.DICE)


def resolve_event(state: State) -> Transition:
    """Apply the pending landing after its transition delay."""
    if state.pending is None:
        return Transition(state)
    return Transition(resolve_landing_system(state))


def apply_task_outcome(state: State, completed: bool) -> Transition:
    """Resolve the open challenge as ``completed`` or failed."""
    if not state.can_report_task:
        logger.debug("Ignoring task outcome in phase %s", state.phase)
        return Transition(state)
    return outcome_system(state, completed)


def _step_roll(state: State) -> Transition:
    if not state.can_roll:
        logger.debug("Ignoring roll in phase %s", state.phase)
        return Transition(state)
    return roll_system(state)


def _step_dice_frame(state: State) -> Transition:
    transition, value = dice_frame_system(state)
    if value is None:
        return transition
    return transition.then(apply_roll(transition.state, value))


def _step_tick(state: State) -> Transition:
    """Advance the active animation and route its completion by purpose."""
    transition, finished = movement_system(state)
    if finished is None:
        return transition
    if finished.purpose == MovePurpose.DICE:
        return transition.then(landing_system(transition.state, finished.player))
    return Transition(
        finish_outcome_move(transition.state, finished.player), transition.effects
    )


def _step_start_game(state: State, action: StartGame) -> Transition:
    """Leave the start screen with all entities at their initial values."""
    if state.phase != Phase.START:
        logger.debug("Ignoring start request in phase %s", state.phase)
        return Transition(state)
    validate_board(action.cells)
    fresh = _initial_state(state)
    fresh = replace(
        fresh, cells=pvector(action.cells), phase=Phase.PLAYING, mode=action.mode
    )
    fresh = rebuild_queue(fresh, action.tasks)
    logger.info(
        "Game started: mode=%s, %d cells, %d tasks",
        action.mode,
        len(fresh.cells),
        len(fresh.task_queue),
    )
    return Transition(fresh)


def _step_restart(state: State) -> Transition:
    """Full reset to the start screen; queued timers become stale."""
    logger.info("Restarting game")
    return Transition(replace(_initial_state(state), epoch=state.epoch + 1))


def _step_change_language(state: State, action: ChangeLanguage) -> Transition:
    """Switch language without touching positions, turn or phase."""
    state = replace(state, language=action.language)
    if action.empty_queue_text:
        state = replace(state, empty_queue_text=action.empty_queue_text)
    if state.phase != Phase.START:
        state = rebuild_queue(state, action.tasks)
    return Transition(state)


def _initial_state(state: State) -> State:
    """Fresh state keeping only session-level settings."""
    return State(
        cells=state.cells,
        mode=state.mode,
        language=state.language,
        epoch=state.epoch,
        message_seq=state.message_seq,
        seed=state.seed,
        rng_counter=state.rng_counter,
        empty_queue_text=state.empty_queue_text,
        roll_fn=state.roll_fn,
        config=state.config,
    )
