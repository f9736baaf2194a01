"""Task dispatcher.

Maintains the round-robin task queue and assigns the executor of a
triggered challenge:

=========== ============================
event       executor
=========== ============================
star        the *other* player
trap        the player who landed
collision   the *other* player
=========== ============================

The target is always the player whose move triggered the event.
"""

import logging
from dataclasses import replace
from typing import Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from couple_ludo.components import CurrentTask
from couple_ludo.state import State
from couple_ludo.types import Phase, PlayerColor, TaskType
from couple_ludo.utils.rng import shuffled

logger = logging.getLogger(__name__)


def executor_for(task_type: TaskType, player_on_cell: PlayerColor) -> PlayerColor:
    if task_type == TaskType.TRAP:
        return player_on_cell
    return player_on_cell.other


def assign_task(
    queue: PVector[str],
    task_type: TaskType,
    player_on_cell: PlayerColor,
    empty_text: str,
) -> Tuple[CurrentTask, PVector[str]]:
    """Pop the front task, re-enqueue it at the back and build the challenge.

    An empty queue yields a placeholder addressed to ``player_on_cell`` as
    both executor and target, and the queue stays empty.

    Returns:
        Tuple[CurrentTask, PVector[str]]: The challenge and the rotated queue.
    """
    if len(queue) == 0:
        task = CurrentTask(
            description=empty_text,
            executor=player_on_cell,
            target=player_on_cell,
            placeholder=True,
        )
        return task, queue
    description = queue[0]
    rotated = queue.delete(0).append(description)
    task = CurrentTask(
        description=description,
        executor=executor_for(task_type, player_on_cell),
        target=player_on_cell,
    )
    return task, rotated


def task_system(state: State, task_type: TaskType, player_on_cell: PlayerColor) -> State:
    """Open a challenge for an event triggered by ``player_on_cell``."""
    if len(state.task_queue) == 0:
        logger.warning("Task queue is empty, using placeholder task")
    task, queue = assign_task(
        state.task_queue, task_type, player_on_cell, state.empty_queue_text
    )
    logger.debug("%s task for %s executed by %s", task_type, task.target, task.executor)
    return replace(
        state,
        phase=Phase.TASK,
        task_queue=queue,
        current_task=task,
        task_type=task_type,
    )


def rebuild_queue(state: State, tasks: Sequence[str]) -> State:
    """Replace the queue with a freshly shuffled copy of ``tasks``."""
    order, state = shuffled(state, tasks)
    return replace(state, task_queue=pvector(order))
