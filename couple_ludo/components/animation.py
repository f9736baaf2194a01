"""Movement animation job.

An ``Animation`` is the explicit state of the single in-flight movement: the
precomputed per-tick trajectory, how far along it the piece is, and what to
do once it finishes. The movement system advances it one entry per tick.
"""

from dataclasses import dataclass

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.types import MovePurpose, PlayerColor


@dataclass(frozen=True)
class Animation:
    """Step-by-step relocation of one player.

    Attributes:
        player: Player being moved.
        path: Position to assume on each tick, in order.
        purpose: Completion behavior (dice landing or task outcome).
        index: Number of ticks already applied.
    """

    player: PlayerColor
    path: PVector[int] = pvector()
    purpose: MovePurpose = MovePurpose.DICE
    index: int = 0

    @property
    def remaining(self) -> int:
        return len(self.path) - self.index

    @property
    def target(self) -> int:
        return self.path[-1]

    @property
    def done(self) -> bool:
        return self.index >= len(self.path)
