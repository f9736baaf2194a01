"""couple_ludo: a two-player race board game with task challenges.

The game logic is a pure reducer over an immutable :class:`State`;
:class:`Game` drives it with a tick scheduler for interactive play.
"""

from couple_ludo.config import DEFAULT_CONFIG, GameConfig
from couple_ludo.game import Game
from couple_ludo.state import State
from couple_ludo.step import step
from couple_ludo.types import GameMode, Language, Phase, PlayerColor

__all__ = [
    "DEFAULT_CONFIG",
    "Game",
    "GameConfig",
    "GameMode",
    "Language",
    "Phase",
    "PlayerColor",
    "State",
    "step",
]
