"""Dice roll animation system.

A roll shows ``dice_roll_frames`` random faces at ``dice_frame_ms`` intervals
before settling on the final value, which then drives the movement engine.
"""

from dataclasses import replace
from typing import Optional, Tuple

from pyrsistent import pvector

from couple_ludo.actions import DiceFrame
from couple_ludo.effects import StartTimer, Transition
from couple_ludo.state import State
from couple_ludo.utils.rng import draw_int


def _next_frame(state: State) -> Transition:
    return Transition(
        state,
        pvector([StartTimer(state.config.dice_frame_ms, DiceFrame(state.epoch))]),
    )


def roll_system(state: State) -> Transition:
    """Start rolling; the caller is responsible for gating."""
    state = replace(state, is_rolling=True, dice_value=None, dice_frames=0)
    return _next_frame(state)


def dice_frame_system(state: State) -> Tuple[Transition, Optional[int]]:
    """Show the next face, or settle on the final value.

    Returns:
        Tuple[Transition, int | None]: Updated state and, on the last frame,
            the settled dice value to move by.
    """
    if not state.is_rolling:
        return Transition(state), None
    value, state = draw_int(state, 1, state.config.dice_faces)
    if state.dice_frames < state.config.dice_roll_frames:
        state = replace(state, dice_value=value, dice_frames=state.dice_frames + 1)
        return _next_frame(state), None
    state = replace(state, dice_value=value, is_rolling=False)
    return Transition(state), value
