"""Classified landing awaiting its delayed transition."""

from dataclasses import dataclass

from couple_ludo.types import LandingKind, PlayerColor


@dataclass(frozen=True)
class Landing:
    """Result of the event resolver for a finished dice move.

    Attributes:
        player: Player whose move ended.
        cell_id: Final cell of the move.
        kind: Event classification.
    """

    player: PlayerColor
    cell_id: int
    kind: LandingKind
