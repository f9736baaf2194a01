from dataclasses import replace

import pytest
from pyrsistent import pvector

from couple_ludo.components import Animation, CurrentTask
from couple_ludo.systems.turn import turn_system
from couple_ludo.types import Phase, PlayerColor
from tests.test_utils import make_state


def test_turn_alternates() -> None:
    state = turn_system(make_state())
    assert state.current_player == PlayerColor.BLUE
    assert state.turn == 1
    state = turn_system(state)
    assert state.current_player == PlayerColor.RED
    assert state.turn == 2
    assert state.phase == Phase.PLAYING


def test_turn_rejected_mid_animation() -> None:
    state = replace(make_state(), animation=Animation(PlayerColor.RED, pvector([1])))
    with pytest.raises(ValueError):
        turn_system(state)


def test_turn_rejected_with_open_task() -> None:
    state = replace(
        make_state(), current_task=CurrentTask("t", PlayerColor.BLUE, PlayerColor.RED)
    )
    with pytest.raises(ValueError):
        turn_system(state)
