"""Deterministic random draws.

Every draw is derived from ``(state.seed, state.rng_counter)`` so a seeded
game replays identically and no global RNG state is touched. Callers must
advance ``rng_counter`` after each draw; :func:`draw_int` does this for them.
"""

import random
from dataclasses import replace
from typing import List, Sequence, Tuple, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from couple_ludo.state import State

T = TypeVar("T")


def make_rng(state: "State") -> random.Random:
    """Return a ``random.Random`` bound to the state's seed and draw counter."""
    base_seed = hash((state.seed if state.seed is not None else 0, state.rng_counter))
    return random.Random(base_seed)


def seeded_roll_fn(state: "State", low: int, high: int) -> int:
    """Default ``RollFn``: uniform integer in ``[low, high]``."""
    return make_rng(state).randint(low, high)


def draw_int(state: "State", low: int, high: int) -> Tuple[int, "State"]:
    """Draw through ``state.roll_fn`` and advance the counter.

    Returns:
        Tuple[int, State]: The drawn value and the state with ``rng_counter``
        incremented.
    """
    value = state.roll_fn(state, low, high)
    if not low <= value <= high:
        raise ValueError(f"roll_fn returned {value}, outside [{low}, {high}]")
    return value, replace(state, rng_counter=state.rng_counter + 1)


def shuffled(state: "State", items: Sequence[T]) -> Tuple[List[T], "State"]:
    """Fisher-Yates shuffle of ``items`` using the state's seeded RNG."""
    result = list(items)
    make_rng(state).shuffle(result)
    return result, replace(state, rng_counter=state.rng_counter + 1)
