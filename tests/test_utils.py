from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PVector

from couple_ludo.components import Cell
from couple_ludo.state import State
from couple_ludo.tasks import TaskLoadError
from couple_ludo.types import CellType, GameMode, Language, Phase, PlayerColor


class FixedRoll:
    """Roll function answering every draw with ``value``, clamped to the range.

    Tests change ``value`` between phases of a game; states hold a reference
    to the same object so the change is visible immediately.
    """

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: List[Tuple[int, int]] = []

    def __call__(self, state: State, low: int, high: int) -> int:
        self.calls.append((low, high))
        return min(max(self.value, low), high)


class StubTaskProvider:
    """In-memory task provider; missing entries raise ``TaskLoadError``."""

    def __init__(self, tasks: Dict[Tuple[GameMode, Language], Sequence[str]]) -> None:
        self.tasks = tasks
        self.calls: List[Tuple[GameMode, Language]] = []

    def fetch(self, mode: GameMode, language: Language) -> Sequence[str]:
        self.calls.append((mode, language))
        if (mode, language) not in self.tasks:
            raise TaskLoadError(f"no tasks for {mode}/{language}")
        return self.tasks[(mode, language)]


def make_board(
    length: int = 10, stars: Iterable[int] = (), traps: Iterable[int] = ()
) -> PVector[Cell]:
    """Straight board of ``length`` cells with the given special cells."""
    star_ids = set(stars)
    trap_ids = set(traps)
    cells: List[Cell] = []
    for i in range(length):
        if i == 0:
            cell_type = CellType.START
        elif i == length - 1:
            cell_type = CellType.END
        elif i in star_ids:
            cell_type = CellType.STAR
        elif i in trap_ids:
            cell_type = CellType.TRAP
        else:
            cell_type = CellType.PATH
        cells.append(Cell(id=i, x=i, y=0, type=cell_type))
    return pvector(cells)


def make_state(
    length: int = 10,
    stars: Iterable[int] = (),
    traps: Iterable[int] = (),
    red: int = 0,
    blue: int = 0,
    roll_fn: Optional[FixedRoll] = None,
    tasks: Sequence[str] = ("task one", "task two", "task three"),
    **overrides: Any,
) -> State:
    """Active game in the ``PLAYING`` phase with red to move."""
    kwargs: Dict[str, Any] = dict(
        cells=make_board(length, stars, traps),
        phase=Phase.PLAYING,
        position=pmap({PlayerColor.RED: red, PlayerColor.BLUE: blue}),
        task_queue=pvector(tasks),
        seed=0,
    )
    if roll_fn is not None:
        kwargs["roll_fn"] = roll_fn
    kwargs.update(overrides)
    return State(**kwargs)
