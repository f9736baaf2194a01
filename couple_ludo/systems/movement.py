"""Movement engine.

Drives the single active :class:`~couple_ludo.components.Animation`. A job is
started with a precomputed trajectory (see :mod:`couple_ludo.moves`) and each
:class:`~couple_ludo.actions.AnimationTick` moves the piece to the next
position on it. Exactly one job may be active at a time; it always runs to
completion unless a restart wipes the state.
"""

from dataclasses import replace
from typing import Optional, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.actions import AnimationTick
from couple_ludo.components import Animation
from couple_ludo.effects import StartAnimation, StartTimer, Transition
from couple_ludo.state import State
from couple_ludo.types import MovePurpose, Phase, PlayerColor


def start_animation(
    state: State, player: PlayerColor, path: PVector[int], purpose: MovePurpose
) -> Transition:
    """Begin a movement job for ``player`` along ``path``."""
    if state.is_moving:
        raise ValueError("A movement animation is already running")
    if len(path) == 0:
        raise ValueError("Cannot animate an empty path")
    for pos in path:
        if not 0 <= pos <= state.last:
            raise ValueError(f"Path position {pos} outside board [0, {state.last}]")
    animation = Animation(player=player, path=path, purpose=purpose)
    state = replace(state, phase=Phase.MOVING, animation=animation)
    return Transition(state, pvector([StartAnimation(animation)]))


def movement_system(state: State) -> Tuple[Transition, Optional[Animation]]:
    """Apply one animation tick.

    Returns:
        Tuple[Transition, Animation | None]: The advanced state, plus the
            finished job when this tick completed it (its completion is routed
            by the reducer according to ``purpose``). While the job continues
            the next tick is scheduled.
    """
    animation = state.animation
    if animation is None:
        return Transition(state), None

    next_pos = animation.path[animation.index]
    animation = replace(animation, index=animation.index + 1)
    state = replace(
        state, position=state.position.set(animation.player, next_pos)
    )

    if animation.done:
        return Transition(replace(state, animation=None)), animation

    state = replace(state, animation=animation)
    return (
        Transition(
            state, pvector([StartTimer(state.config.tick_ms, AnimationTick(state.epoch))])
        ),
        None,
    )
