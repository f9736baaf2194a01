"""Action definitions.

Actions are the only inputs to :func:`couple_ludo.step.step`. They come in two
flavours:

* *Controls* issued by the players: :class:`StartGame`, :class:`RollDice`,
  :class:`ReportTaskOutcome`, :class:`Restart`, :class:`ChangeLanguage`.
* *Timer* actions fired by the scheduler: :class:`DiceFrame`,
  :class:`AnimationTick`, :class:`ResolveLanding`, :class:`ClearMessage`.
  Timer actions carry the ``epoch`` they were scheduled under so that a
  restart invalidates everything still queued.

Controls that carry external data (board cells, task texts) receive it
already loaded; the reducer itself performs no I/O.
"""

from dataclasses import dataclass
from typing import Union

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.components import Cell
from couple_ludo.types import GameMode, Language


@dataclass(frozen=True)
class StartGame:
    """Leave the start screen with a freshly generated board and task set."""

    mode: GameMode
    cells: PVector[Cell]
    tasks: PVector[str] = pvector()


@dataclass(frozen=True)
class RollDice:
    pass


@dataclass(frozen=True)
class ReportTaskOutcome:
    """Human-reported result of the open challenge."""

    completed: bool


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class ChangeLanguage:
    """Switch language; rebuilds the task queue when a game is active."""

    language: Language
    tasks: PVector[str] = pvector()
    empty_queue_text: str = ""


@dataclass(frozen=True)
class DiceFrame:
    epoch: int


@dataclass(frozen=True)
class AnimationTick:
    epoch: int


@dataclass(frozen=True)
class ResolveLanding:
    epoch: int


@dataclass(frozen=True)
class ClearMessage:
    seq: int


ControlAction = Union[StartGame, RollDice, ReportTaskOutcome, Restart, ChangeLanguage]
TimerAction = Union[DiceFrame, AnimationTick, ResolveLanding, ClearMessage]
Action = Union[ControlAction, TimerAction]

TIMER_ACTIONS = (DiceFrame, AnimationTick, ResolveLanding)
