
import pytest

from couple_ludo.actions import ResolveLanding
from couple_ludo.components import Landing
from couple_ludo.state import State
from couple_ludo.effects import StartTimer
from couple_ludo.systems.landing import (
    classify_landing,
    landing_system,
    resolve_landing_system,
)
from couple_ludo.types import LandingKind, Phase, PlayerColor, TaskType
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "red,blue,expected",
    [
        (2, 0, LandingKind.NONE),
        (4, 0, LandingKind.STAR),
        (5, 0, LandingKind.TRAP),
        (9, 0, LandingKind.WIN),
        (3, 3, LandingKind.COLLISION),
        (4, 4, LandingKind.COLLISION),
        (9, 9, LandingKind.WIN),
        (0, 0, LandingKind.NONE),
    ],
)
def test_classify_landing(red: int, blue: int, expected: LandingKind) -> None:
    state = make_state(stars=[4], traps=[5], red=red, blue=blue)
    assert classify_landing(state, PlayerColor.RED, red) == expected


def test_landing_system_records_pending_and_schedules_resolution() -> None:
    state = make_state(stars=[4], red=4, epoch=2)
    transition = landing_system(state, PlayerColor.RED)
    assert transition.state.pending == Landing(PlayerColor.RED, 4, LandingKind.STAR)
    assert transition.state.phase == Phase.PLAYING
    assert list(transition.effects) == [StartTimer(300, ResolveLanding(2))]
    assert not transition.state.can_roll


def _resolve(red: int, blue: int = 0) -> State:
    state = make_state(stars=[4], traps=[5], red=red, blue=blue)
    state = landing_system(state, PlayerColor.RED).state
    return resolve_landing_system(state)


def test_resolve_star_assigns_other_player() -> None:
    state = _resolve(4)
    assert state.phase == Phase.TASK
    assert state.task_type == TaskType.STAR
    assert state.current_task.executor == PlayerColor.BLUE
    assert state.current_task.target == PlayerColor.RED
    assert state.pending is None
    assert state.current_player == PlayerColor.RED


def test_resolve_trap_assigns_self() -> None:
    state = _resolve(5)
    assert state.task_type == TaskType.TRAP
    assert state.current_task.executor == PlayerColor.RED


def test_resolve_collision_assigns_occupant() -> None:
    state = _resolve(3, blue=3)
    assert state.task_type == TaskType.COLLISION
    assert state.current_task.executor == PlayerColor.BLUE
    assert state.current_task.target == PlayerColor.RED


def test_resolve_plain_cell_passes_turn() -> None:
    state = _resolve(2)
    assert state.phase == Phase.PLAYING
    assert state.current_player == PlayerColor.BLUE
    assert state.turn == 1
    assert state.current_task is None


def test_resolve_end_cell_wins() -> None:
    state = _resolve(9)
    assert state.phase == Phase.WIN
    assert state.winner == PlayerColor.RED
    assert state.current_task is None


def test_resolve_without_pending_is_noop() -> None:
    state = make_state()
    assert resolve_landing_system(state) is state


def test_resolve_consumes_task_queue_round_robin() -> None:
    state = make_state(stars=[4], red=4, tasks=["a", "b"])
    state = landing_system(state, PlayerColor.RED).state
    state = resolve_landing_system(state)
    assert state.current_task.description == "a"
    assert list(state.task_queue) == ["b", "a"]
