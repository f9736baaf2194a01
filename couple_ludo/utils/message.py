"""Toast emission helper."""

from dataclasses import replace
from typing import Mapping

from pyrsistent import pmap, pvector

from couple_ludo.actions import ClearMessage
from couple_ludo.components import Message
from couple_ludo.effects import EmitMessage, StartTimer, Transition
from couple_ludo.state import State
from couple_ludo.types import MessageKind


def emit_message(
    state: State,
    key: str,
    kind: MessageKind,
    params: Mapping[str, int] = pmap(),
) -> Transition:
    """Set the active toast and schedule its removal.

    The clearing timer carries the message sequence number, so a newer toast
    survives the expiry of an older one.
    """
    seq = state.message_seq + 1
    message = Message(key=key, params=pmap(params), kind=kind, seq=seq)
    state = replace(state, message=message, message_seq=seq)
    return Transition(
        state,
        pvector(
            [
                EmitMessage(message),
                StartTimer(state.config.toast_ms, ClearMessage(seq)),
            ]
        ),
    )


def clear_message(state: State, seq: int) -> State:
    if state.message is None or state.message.seq != seq:
        return state
    return replace(state, message=None)
