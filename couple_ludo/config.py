"""Game configuration.

``GameConfig`` is a frozen value object stored on every ``State`` so that the
pure transition functions can read timings and random ranges without any
global lookup. Defaults reproduce the reference timings: one cell every
300 ms, a 300 ms pause before landing transitions, 3 s toasts and a dice
roll animation of ten 80 ms frames.
"""

from dataclasses import dataclass
from typing import Tuple

from couple_ludo.types import Language


@dataclass(frozen=True)
class GameConfig:
    """Timings, random ranges and board shape.

    Attributes:
        tick_ms: Delay between two animation steps.
        transition_delay_ms: Pause between a landing and its task / win / turn switch.
        toast_ms: Lifetime of an outcome message.
        dice_faces: Highest dice value.
        dice_roll_frames: Number of intermediate faces shown while rolling.
        dice_frame_ms: Delay between two rolling frames.
        reward_range: Inclusive bounds of the forward reward for a completed task.
        penalty_range: Inclusive bounds of the backward penalty for a failed task.
        default_language: Language used when a localized resource is missing.
        board_size: Side length of the square display grid.
        star_count: Number of star cells placed by the board generator.
        trap_count: Number of trap cells placed by the board generator.
        board_fn_name: Key into ``BOARD_FN_REGISTRY``.
    """

    tick_ms: int = 300
    transition_delay_ms: int = 300
    toast_ms: int = 3000
    dice_faces: int = 6
    dice_roll_frames: int = 10
    dice_frame_ms: int = 80
    reward_range: Tuple[int, int] = (0, 3)
    penalty_range: Tuple[int, int] = (3, 6)
    default_language: Language = Language.ZH
    board_size: int = 7
    star_count: int = 5
    trap_count: int = 5
    board_fn_name: str = "serpentine"

    def __post_init__(self) -> None:
        for name in ("tick_ms", "transition_delay_ms", "toast_ms", "dice_frame_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.dice_faces < 1:
            raise ValueError("dice_faces must be at least 1")
        if self.dice_roll_frames < 0:
            raise ValueError("dice_roll_frames cannot be negative")
        for name in ("reward_range", "penalty_range"):
            low, high = getattr(self, name)
            if low < 0 or low > high:
                raise ValueError(f"{name} must satisfy 0 <= low <= high")
        if self.board_size < 2:
            raise ValueError("board_size must be at least 2")
        if self.star_count < 0 or self.trap_count < 0:
            raise ValueError("special cell counts cannot be negative")


DEFAULT_CONFIG = GameConfig()
