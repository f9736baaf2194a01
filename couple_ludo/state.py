"""Immutable game ``State`` aggregate.

This module defines the frozen :class:`State` object that represents the
entire game snapshot at a single instant. All systems are pure functions that
take a previous ``State`` plus inputs and return a *new* ``State``; nothing
is mutated in place. This keeps the turn state machine deterministic and
testable without any UI or timer harness.

Design notes:

* Collections are persistent structures (``pyrsistent.PVector`` /
    ``PMap``). ``position`` is the position store keyed by player colour.
* ``animation`` holds the single in-flight movement job. While it is set, or
    while ``pending`` holds a classified landing, or a task is open, or the
    dice are rolling, new rolls are rejected (see :attr:`State.can_roll`).
* ``epoch`` increases on every restart. Timer actions carry the epoch they
    were scheduled under; :mod:`couple_ludo.step` drops actions from an older
    epoch so that a restart behaves as a full reset.
* Randomness goes through ``roll_fn`` with ``seed`` and ``rng_counter`` so
    that a seeded game is reproducible and tests can script draws.

See :mod:`couple_ludo.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pyrsistent import PMap, PVector, pmap, pvector

from couple_ludo.components import Animation, Cell, CurrentTask, Landing, Message
from couple_ludo.config import DEFAULT_CONFIG, GameConfig
from couple_ludo.types import (
    GameMode,
    Language,
    Phase,
    PlayerColor,
    RollFn,
    TaskType,
)
from couple_ludo.utils.rng import seeded_roll_fn

DEFAULT_EMPTY_QUEUE_TEXT = "任务队列空了！休息一下吧！"

INITIAL_POSITIONS: PMap[PlayerColor, int] = pmap(
    {PlayerColor.RED: 0, PlayerColor.BLUE: 0}
)


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        cells (PVector[Cell]): Board path; ``cells[i].id == i``.
        phase (Phase): Top-level phase.
        mode (GameMode): Selected task set.
        language (Language): Active language for task content.
        current_player (PlayerColor): Whose turn it is.
        position (PMap[PlayerColor, int]): Cell index of each player.
        dice_value (int | None): Last shown dice face.
        is_rolling (bool): True while the dice roll animation runs.
        dice_frames (int): Rolling frames already shown.
        animation (Animation | None): Active movement job.
        pending (Landing | None): Classified landing awaiting its transition.
        task_queue (PVector[str]): Round-robin task descriptions.
        current_task (CurrentTask | None): Open challenge.
        task_type (TaskType | None): Event that opened the challenge.
        winner (PlayerColor | None): Set once ``phase`` is ``WIN``.
        message (Message | None): Active toast.
        message_seq (int): Sequence number of the last emitted message.
        turn (int): Completed turn cycles.
        epoch (int): Restart generation used to drop stale timers.
        seed (int | None): Base RNG seed.
        rng_counter (int): Number of random draws made so far.
        empty_queue_text (str): Placeholder description for an empty queue.
        roll_fn (RollFn): Bounded integer draw ``(state, low, high) -> int``.
        config (GameConfig): Timings and random ranges.
    """

    cells: PVector[Cell] = pvector()
    phase: Phase = Phase.START
    mode: GameMode = GameMode.NORMAL
    language: Language = Language.ZH
    current_player: PlayerColor = PlayerColor.RED
    position: PMap[PlayerColor, int] = INITIAL_POSITIONS

    # Dice
    dice_value: Optional[int] = None
    is_rolling: bool = False
    dice_frames: int = 0

    # Movement / events
    animation: Optional[Animation] = None
    pending: Optional[Landing] = None

    # Tasks
    task_queue: PVector[str] = pvector()
    current_task: Optional[CurrentTask] = None
    task_type: Optional[TaskType] = None

    # Status
    winner: Optional[PlayerColor] = None
    message: Optional[Message] = None
    message_seq: int = 0
    turn: int = 0
    epoch: int = 0

    # RNG
    seed: Optional[int] = None
    rng_counter: int = 0

    empty_queue_text: str = DEFAULT_EMPTY_QUEUE_TEXT
    roll_fn: RollFn = field(default=seeded_roll_fn, compare=False)
    config: GameConfig = DEFAULT_CONFIG

    @property
    def last(self) -> int:
        """Index of the end cell."""
        return len(self.cells) - 1

    @property
    def is_moving(self) -> bool:
        return self.animation is not None

    @property
    def can_roll(self) -> bool:
        """Whether a dice roll would be accepted right now."""
        return (
            self.phase == Phase.PLAYING
            and not self.is_rolling
            and not self.is_moving
            and self.pending is None
            and self.current_task is None
        )

    @property
    def can_report_task(self) -> bool:
        return (
            self.phase == Phase.TASK
            and self.current_task is not None
            and not self.is_moving
        )

    def position_of(self, player: PlayerColor) -> int:
        return self.position[player]

    def cell_at(self, index: int) -> Cell:
        return self.cells[index]

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Skips empty persistent collections, ``None`` values and the callable
        ``roll_fn``; useful for diagnostics without dumping the whole board.

        Returns:
            PMap[str, Any]: Field name to value for all populated fields.
        """
        description: PMap[str, Any] = pmap()
        for name in self.__dataclass_fields__:
            if name in ("roll_fn", "cells"):
                continue
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, (PVector, PMap)) and len(value) == 0:
                continue
            description = description.set(name, value)
        return description.set("cell_count", len(self.cells))
