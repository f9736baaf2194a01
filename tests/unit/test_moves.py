import pytest

from couple_ludo.moves import bounce_target, plan_move, plan_retreat


@pytest.mark.parametrize(
    "current,distance,last,expected",
    [
        (0, 3, 9, 3),
        (6, 3, 9, 9),
        (6, 5, 9, 7),
        (8, 3, 9, 7),
        (9, 2, 9, 7),
        (1, 6, 2, 0),
    ],
)
def test_bounce_target(current: int, distance: int, last: int, expected: int) -> None:
    assert bounce_target(current, distance, last) == expected


def test_plan_move_straight() -> None:
    assert list(plan_move(0, 3, 9)) == [1, 2, 3]


def test_plan_move_exact_end() -> None:
    assert list(plan_move(6, 3, 9)) == [7, 8, 9]


def test_plan_move_bounces_off_end() -> None:
    assert list(plan_move(6, 5, 9)) == [7, 8, 9, 8, 7]
    assert list(plan_move(7, 5, 9)) == [8, 9, 8, 7, 6]


def test_plan_move_from_end_cell_walks_back() -> None:
    assert list(plan_move(9, 2, 9)) == [8, 7]


def test_plan_move_clamped_bounce_holds_position() -> None:
    assert list(plan_move(1, 6, 2)) == [2, 1, 0, 0, 0, 0]


def test_plan_move_zero_distance_is_empty() -> None:
    assert len(plan_move(4, 0, 9)) == 0


def test_plan_move_outside_board_raises() -> None:
    with pytest.raises(ValueError):
        plan_move(10, 1, 9)
    with pytest.raises(ValueError):
        plan_move(-1, 1, 9)


def test_plan_move_invariants() -> None:
    last = 9
    for current in range(last + 1):
        for distance in range(1, 7):
            path = plan_move(current, distance, last)
            assert len(path) == distance
            assert all(0 <= p <= last for p in path)
            assert path[-1] == bounce_target(current, distance, last)
            steps = [current] + list(path)
            assert all(abs(b - a) <= 1 for a, b in zip(steps, steps[1:]))


def test_plan_retreat() -> None:
    assert list(plan_retreat(5, 3)) == [4, 3, 2]


def test_plan_retreat_clamps_at_start() -> None:
    assert list(plan_retreat(2, 5)) == [1, 0]
    assert len(plan_retreat(0, 3)) == 0
