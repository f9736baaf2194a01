"""Common type aliases and enumerations.

``RollFn`` and ``BoardFn`` are the pluggable extension points: the first is
stored on the ``State`` and answers every bounded random draw, the second
produces the board path when a game starts.
"""

from enum import StrEnum, auto
from typing import Callable, Optional, TYPE_CHECKING

from pyrsistent.typing import PVector


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from couple_ludo.components import Cell
    from couple_ludo.config import GameConfig
    from couple_ludo.state import State

RollFn = Callable[["State", int, int], int]
BoardFn = Callable[["GameConfig", Optional[int]], "PVector[Cell]"]


class PlayerColor(StrEnum):
    """The two fixed player roles."""

    RED = auto()
    BLUE = auto()

    @property
    def other(self) -> "PlayerColor":
        return PlayerColor.BLUE if self is PlayerColor.RED else PlayerColor.RED


class CellType(StrEnum):
    """Board cell categories."""

    START = auto()
    PATH = auto()
    STAR = auto()
    TRAP = auto()
    END = auto()


class Phase(StrEnum):
    """Top-level game phase.

    ``MOVING`` and ``TASK`` are transient sub-phases of an active game;
    ``WIN`` is terminal until an explicit restart.
    """

    START = auto()
    PLAYING = auto()
    TASK = auto()
    MOVING = auto()
    WIN = auto()


class TaskType(StrEnum):
    """Board events that trigger a challenge."""

    STAR = auto()
    TRAP = auto()
    COLLISION = auto()


class LandingKind(StrEnum):
    """Classification of a completed dice move, in precedence order."""

    COLLISION = auto()
    WIN = auto()
    STAR = auto()
    TRAP = auto()
    NONE = auto()


class GameMode(StrEnum):
    """Selects the task set and theme; never affects movement rules."""

    NORMAL = auto()
    LOVE = auto()
    COUPLE = auto()
    ADVANCED = auto()
    INTIMATE = auto()
    MIXED = auto()


class Language(StrEnum):
    ZH = auto()
    EN = auto()


class MessageKind(StrEnum):
    SUCCESS = auto()
    ERROR = auto()


class MovePurpose(StrEnum):
    """What happens when an animation job finishes."""

    DICE = auto()
    TASK_OUTCOME = auto()
