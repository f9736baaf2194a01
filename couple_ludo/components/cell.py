"""Board cell component.

A ``Cell`` is one addressable location on the board path. ``id`` equals the
cell's index along the path and doubles as the position value stored for
each player; ``x`` / ``y`` are grid coordinates used only for display.
"""

from dataclasses import dataclass

from couple_ludo.types import CellType


@dataclass(frozen=True)
class Cell:
    """Single board path cell.

    Attributes:
        id: Index along the path (0-based).
        x: Column on the display grid.
        y: Row on the display grid.
        type: Cell category.
    """

    id: int
    x: int
    y: int
    type: CellType = CellType.PATH
