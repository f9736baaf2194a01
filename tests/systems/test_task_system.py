from pyrsistent import pvector

from couple_ludo.systems.task import assign_task, executor_for, rebuild_queue, task_system
from couple_ludo.types import Phase, PlayerColor, TaskType
from tests.test_utils import make_state


def test_executor_for() -> None:
    assert executor_for(TaskType.STAR, PlayerColor.RED) == PlayerColor.BLUE
    assert executor_for(TaskType.COLLISION, PlayerColor.BLUE) == PlayerColor.RED
    assert executor_for(TaskType.TRAP, PlayerColor.RED) == PlayerColor.RED


def test_assign_task_rotates_queue() -> None:
    task, queue = assign_task(
        pvector(["a", "b", "c"]), TaskType.STAR, PlayerColor.RED, "empty"
    )
    assert task.description == "a"
    assert task.executor == PlayerColor.BLUE
    assert task.target == PlayerColor.RED
    assert not task.placeholder
    assert list(queue) == ["b", "c", "a"]


def test_assign_task_empty_queue_placeholder() -> None:
    task, queue = assign_task(pvector(), TaskType.STAR, PlayerColor.RED, "empty")
    assert task.placeholder
    assert task.description == "empty"
    assert task.executor == PlayerColor.RED
    assert task.target == PlayerColor.RED
    assert len(queue) == 0


def test_task_system_opens_challenge() -> None:
    state = task_system(make_state(tasks=["only"]), TaskType.TRAP, PlayerColor.BLUE)
    assert state.phase == Phase.TASK
    assert state.task_type == TaskType.TRAP
    assert state.current_task.executor == PlayerColor.BLUE
    assert list(state.task_queue) == ["only"]


def test_task_system_uses_empty_queue_text() -> None:
    state = make_state(tasks=[], empty_queue_text="Take a break!")
    state = task_system(state, TaskType.STAR, PlayerColor.RED)
    assert state.current_task.description == "Take a break!"
    assert state.current_task.placeholder


def test_rebuild_queue_shuffles_same_tasks() -> None:
    tasks = [f"task {i}" for i in range(20)]
    state = make_state(tasks=[])
    rebuilt = rebuild_queue(state, tasks)
    assert sorted(rebuilt.task_queue) == sorted(tasks)
    assert rebuilt.rng_counter == state.rng_counter + 1
    assert rebuild_queue(state, tasks).task_queue == rebuilt.task_queue
