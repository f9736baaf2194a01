"""Movement trajectory planning.

Each function maps a starting cell and a distance to the sequence of cells
the piece occupies on successive animation ticks. The movement system
consumes these positions one per tick; nothing here touches ``State``.

Contract:

* Returns one position per tick; an empty sequence means no movement.
* Never produces a value outside ``[0, last]``.
* The last element is where the piece comes to rest.

Overshoot rule (``plan_move``): a move that would pass the end cell walks
forward to ``last`` and reflects the excess backward, landing on
``max(0, last - overshoot)``. The trajectory always has exactly ``distance``
entries; if the reflected leg hits the clamp early, the remaining ticks hold
the piece in place.
"""

from typing import List

from pyrsistent import pvector
from pyrsistent.typing import PVector


def bounce_target(current: int, distance: int, last: int) -> int:
    """Resting cell of a forward move of ``distance`` from ``current``."""
    target = current + distance
    if target <= last:
        return target
    overshoot = target - last
    return max(0, last - overshoot)


def plan_move(current: int, distance: int, last: int) -> PVector[int]:
    """Per-tick positions of a forward move, including bounce-back.

    Args:
        current (int): Starting cell index.
        distance (int): Number of ticks / cells to travel.
        last (int): Index of the end cell.

    Returns:
        PVector[int]: ``distance`` positions; the final one equals
            :func:`bounce_target`.
    """
    if distance <= 0:
        return pvector()
    if not 0 <= current <= last:
        raise ValueError(f"Position {current} outside board [0, {last}]")
    if current + distance <= last:
        return pvector(range(current + 1, current + distance + 1))

    final = bounce_target(current, distance, last)
    path: List[int] = []
    pos = current
    reached_end = current >= last
    for _ in range(distance):
        if not reached_end:
            pos += 1
            reached_end = pos == last
        elif pos > final:
            pos -= 1
        path.append(pos)
    return pvector(path)


def plan_retreat(current: int, distance: int) -> PVector[int]:
    """Per-tick positions of a backward move clamped at the start cell.

    Penalties only move backward so no bounce is involved; the trajectory
    stops as soon as cell 0 is reached.
    """
    final = max(0, current - distance)
    return pvector(range(current - 1, final - 1, -1))
