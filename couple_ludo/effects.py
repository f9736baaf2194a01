"""Side effects requested by a transition.

The reducer never sleeps, schedules or prints. Instead each transition
returns the effects it *intends*; a driver such as :class:`couple_ludo.game.Game`
interprets them:

* :class:`StartAnimation`: a movement job began; schedule its first tick.
* :class:`StartTimer`: fire ``action`` after ``delay_ms``.
* :class:`EmitMessage`: show a toast to the players.
"""

from dataclasses import dataclass
from typing import Union

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.actions import Action
from couple_ludo.components import Animation, Message
from couple_ludo.state import State


@dataclass(frozen=True)
class StartAnimation:
    animation: Animation


@dataclass(frozen=True)
class StartTimer:
    delay_ms: int
    action: Action


@dataclass(frozen=True)
class EmitMessage:
    message: Message


Effect = Union[StartAnimation, StartTimer, EmitMessage]


@dataclass(frozen=True)
class Transition:
    """New state plus the effects the driver should carry out, in order."""

    state: State
    effects: PVector[Effect] = pvector()

    def then(self, other: "Transition") -> "Transition":
        """Chain a follow-up transition computed from ``self.state``."""
        return Transition(other.state, self.effects.extend(other.effects))
