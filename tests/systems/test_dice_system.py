from couple_ludo.actions import DiceFrame
from couple_ludo.config import GameConfig
from couple_ludo.effects import StartTimer
from couple_ludo.systems.dice import dice_frame_system, roll_system
from tests.test_utils import FixedRoll, make_state


def test_roll_system_starts_rolling() -> None:
    transition = roll_system(make_state(dice_value=3, epoch=1))
    assert transition.state.is_rolling
    assert transition.state.dice_value is None
    assert transition.state.dice_frames == 0
    assert list(transition.effects) == [StartTimer(80, DiceFrame(1))]


def test_dice_frames_then_final_value() -> None:
    roll = FixedRoll(4)
    state = make_state(roll_fn=roll, config=GameConfig(dice_roll_frames=2))
    state = roll_system(state).state

    transition, value = dice_frame_system(state)
    assert value is None
    assert transition.state.dice_frames == 1
    assert transition.state.dice_value == 4
    assert list(transition.effects) == [StartTimer(80, DiceFrame(0))]

    transition, value = dice_frame_system(transition.state)
    assert value is None
    assert transition.state.dice_frames == 2

    transition, value = dice_frame_system(transition.state)
    assert value == 4
    assert not transition.state.is_rolling
    assert len(transition.effects) == 0
    assert roll.calls == [(1, 6)] * 3
    assert transition.state.rng_counter == 3


def test_dice_frame_ignored_when_not_rolling() -> None:
    state = make_state()
    transition, value = dice_frame_system(state)
    assert transition.state is state
    assert value is None
