"""Board path generators and registry.

A board is an ordered ``PVector[Cell]`` laid out on a ``board_size`` square
display grid. Geometry is deterministic per generator; the placement of star
and trap cells is drawn from a ``random.Random`` seeded by the caller so a
seeded game always gets the same board.

Contract (``BoardFn``):

* ``cells[i].id == i`` for every cell.
* ``cells[0]`` is the only ``START`` cell and ``cells[-1]`` the only ``END``.
* Consecutive cells are grid neighbours.
* Special cells never occupy the first two or the last two cells.
"""

import random
from typing import Dict, List, Optional, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.components import Cell
from couple_ludo.config import GameConfig
from couple_ludo.types import BoardFn, CellType

Coordinate = Tuple[int, int]


def serpentine_coordinates(size: int) -> List[Coordinate]:
    """Boustrophedon path over every other row, joined at alternating edges.

    On a 7x7 grid this gives four full rows and three connector cells, 31
    cells in total.
    """
    coords: List[Coordinate] = []
    for row_index, y in enumerate(range(0, size, 2)):
        xs = range(size) if row_index % 2 == 0 else range(size - 1, -1, -1)
        coords.extend((x, y) for x in xs)
        if y + 2 < size:
            edge = size - 1 if row_index % 2 == 0 else 0
            coords.append((edge, y + 1))
    return coords


def spiral_coordinates(size: int) -> List[Coordinate]:
    """Clockwise inward spiral covering the whole grid."""
    coords: List[Coordinate] = []
    top, left, bottom, right = 0, 0, size - 1, size - 1
    while top <= bottom and left <= right:
        coords.extend((x, top) for x in range(left, right + 1))
        coords.extend((right, y) for y in range(top + 1, bottom + 1))
        if top < bottom:
            coords.extend((x, bottom) for x in range(right - 1, left - 1, -1))
        if left < right:
            coords.extend((left, y) for y in range(bottom - 1, top, -1))
        top, left, bottom, right = top + 1, left + 1, bottom - 1, right - 1
    return coords


def build_path(
    coords: Sequence[Coordinate],
    star_count: int,
    trap_count: int,
    seed: Optional[int] = None,
) -> PVector[Cell]:
    """Turn coordinates into typed cells with randomly placed specials."""
    if len(coords) < 2:
        raise ValueError("A board needs at least a start and an end cell")
    last = len(coords) - 1
    eligible = list(range(2, last - 1))
    rng = random.Random(seed)
    specials = rng.sample(eligible, min(star_count + trap_count, len(eligible)))
    stars = set(specials[:star_count])
    traps = set(specials[star_count:])

    cells: List[Cell] = []
    for i, (x, y) in enumerate(coords):
        if i == 0:
            cell_type = CellType.START
        elif i == last:
            cell_type = CellType.END
        elif i in stars:
            cell_type = CellType.STAR
        elif i in traps:
            cell_type = CellType.TRAP
        else:
            cell_type = CellType.PATH
        cells.append(Cell(id=i, x=x, y=y, type=cell_type))
    return pvector(cells)


def serpentine_board_fn(config: GameConfig, seed: Optional[int] = None) -> PVector[Cell]:
    return build_path(
        serpentine_coordinates(config.board_size),
        config.star_count,
        config.trap_count,
        seed,
    )


def spiral_board_fn(config: GameConfig, seed: Optional[int] = None) -> PVector[Cell]:
    return build_path(
        spiral_coordinates(config.board_size),
        config.star_count,
        config.trap_count,
        seed,
    )


def validate_board(cells: Sequence[Cell]) -> None:
    """Raise ``ValueError`` unless ``cells`` is a well-formed board path."""
    if len(cells) < 2:
        raise ValueError("A board needs at least a start and an end cell")
    last = len(cells) - 1
    for index, cell in enumerate(cells):
        if cell.id != index:
            raise ValueError(f"Cell at index {index} has id {cell.id}")
        if (cell.type == CellType.START) != (index == 0):
            raise ValueError(f"Only cell 0 may be the start cell (cell {index})")
        if (cell.type == CellType.END) != (index == last):
            raise ValueError(f"Only cell {last} may be the end cell (cell {index})")


def create_board(config: GameConfig, seed: Optional[int] = None) -> PVector[Cell]:
    """Generate a board with the configured generator."""
    board_fn = BOARD_FN_REGISTRY.get(config.board_fn_name)
    if board_fn is None:
        raise ValueError(f"Unknown board generator: {config.board_fn_name}")
    cells = board_fn(config, seed)
    validate_board(cells)
    return cells


# Board generator registry for per-game selection
BOARD_FN_REGISTRY: Dict[str, BoardFn] = {
    "serpentine": serpentine_board_fn,
    "spiral": spiral_board_fn,
}
"""Registry of built-in board generator names to callables."""
