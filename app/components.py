from typing import Dict, List

import streamlit as st

from couple_ludo.game import Game
from couple_ludo.i18n import translate
from couple_ludo.state import State
from couple_ludo.types import CellType, MessageKind, Phase, PlayerColor, TaskType

CELL_ICONS: Dict[CellType, str] = {
    CellType.START: "🏁",
    CellType.PATH: "",
    CellType.STAR: "⭐",
    CellType.TRAP: "💣",
    CellType.END: "🏆",
}

PLAYER_ICONS: Dict[PlayerColor, str] = {
    PlayerColor.RED: "🔴",
    PlayerColor.BLUE: "🔵",
}

TASK_TITLE_KEYS: Dict[TaskType, str] = {
    TaskType.STAR: "tasks.starTask",
    TaskType.TRAP: "tasks.trapTask",
    TaskType.COLLISION: "tasks.collisionTask",
}


def board_html(state: State, size: int) -> str:
    """Render the board path as an HTML grid of ``size`` x ``size`` squares."""
    grid: List[List[str]] = [["" for _ in range(size)] for _ in range(size)]
    for cell in state.cells:
        content = CELL_ICONS[cell.type]
        pieces = "".join(
            PLAYER_ICONS[player]
            for player in PlayerColor
            if state.position[player] == cell.id
        )
        grid[cell.y][cell.x] = (
            f'<td class="cell cell-{cell.type}">'
            f'<span class="cell-id">{cell.id}</span>{content}{pieces}</td>'
        )
    rows = []
    for row in grid:
        rows.append(
            "<tr>" + "".join(td or '<td class="cell cell-empty"></td>' for td in row) + "</tr>"
        )
    return f'<table class="board">{"".join(rows)}</table>'


def display_status(game: Game) -> None:
    state = game.state
    bundle = game.translations
    if state.phase == Phase.WIN and state.winner is not None:
        st.success(translate(bundle, f"game.{state.winner}Win"))
        return
    st.info(translate(bundle, f"game.{state.current_player}Turn"), icon=PLAYER_ICONS[state.current_player])
    if state.dice_value is not None:
        st.metric("🎲", state.dice_value)
    if state.is_rolling:
        st.caption(translate(bundle, "common.rolling"))
    elif state.is_moving:
        st.caption(translate(bundle, "common.moving"))


def display_task(game: Game) -> None:
    state = game.state
    task = state.current_task
    if task is None or state.task_type is None:
        return
    bundle = game.translations
    st.subheader(translate(bundle, TASK_TITLE_KEYS[state.task_type]))
    st.write(f"**{task.description}**")
    st.caption(translate(bundle, f"tasks.{task.executor}Execute"))
    if state.task_type == TaskType.COLLISION:
        st.caption(translate(bundle, "tasks.collisionCompletedReward"))
        st.caption(translate(bundle, "tasks.collisionFailedPenalty"))
    else:
        st.caption(translate(bundle, "tasks.completedReward"))
        st.caption(translate(bundle, "tasks.failedPenalty"))


def show_new_messages(game: Game) -> None:
    """Toast messages emitted since the last rerun."""
    shown = st.session_state.get("shown_messages", 0)
    for message in game.messages[shown:]:
        icon = "✅" if message.kind == MessageKind.SUCCESS else "⚠️"
        st.toast(game.translate_message(message), icon=icon)
    st.session_state["shown_messages"] = len(game.messages)
