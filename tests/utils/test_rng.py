import pytest

from couple_ludo.state import State
from couple_ludo.utils.rng import draw_int, seeded_roll_fn, shuffled


def test_draws_are_reproducible() -> None:
    state = State(seed=42)
    first, after = draw_int(state, 1, 6)
    again, _ = draw_int(State(seed=42), 1, 6)
    assert first == again
    assert 1 <= first <= 6
    assert after.rng_counter == 1


def test_draws_depend_on_counter() -> None:
    state = State(seed=7)
    values = []
    for _ in range(30):
        value, state = draw_int(state, 1, 6)
        values.append(value)
    assert len(set(values)) > 1


def test_seeded_roll_fn_range() -> None:
    for counter in range(50):
        assert 0 <= seeded_roll_fn(State(seed=1, rng_counter=counter), 0, 3) <= 3


def test_out_of_range_roll_fn_rejected() -> None:
    state = State(roll_fn=lambda s, low, high: high + 1)
    with pytest.raises(ValueError):
        draw_int(state, 1, 6)


def test_shuffled_keeps_items() -> None:
    items = list(range(10))
    result, state = shuffled(State(seed=3), items)
    assert sorted(result) == items
    assert state.rng_counter == 1
    assert items == list(range(10))
