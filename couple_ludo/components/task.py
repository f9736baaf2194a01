"""Active challenge component."""

from dataclasses import dataclass

from couple_ludo.types import PlayerColor


@dataclass(frozen=True)
class CurrentTask:
    """Challenge awaiting a human-reported result.

    Attributes:
        description: Task text shown to the players.
        executor: Player who must perform the task.
        target: Player whose move triggered the event.
        placeholder: True when synthesized because the queue was empty.
    """

    description: str
    executor: PlayerColor
    target: PlayerColor
    placeholder: bool = False
