from dataclasses import dataclass, replace
from typing import Optional

import streamlit as st

from couple_ludo.board import BOARD_FN_REGISTRY
from couple_ludo.config import GameConfig
from couple_ludo.game import Game
from couple_ludo.i18n import translate
from couple_ludo.types import Language


@dataclass(frozen=True)
class AppConfig:
    seed: Optional[int]
    language: Language
    game_config: GameConfig


def _initial_config() -> AppConfig:
    return AppConfig(seed=None, language=Language.ZH, game_config=GameConfig())


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = _initial_config()


def make_game(config: AppConfig) -> None:
    """Create a fresh session for ``config`` and store it in session state."""
    try:
        game = Game(
            config=config.game_config, seed=config.seed, language=config.language
        )
    except ValueError as e:
        st.error(f"Game creation failed: {e}")
        return
    st.session_state["game"] = game
    st.session_state["shown_messages"] = 0


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]
    game: Optional[Game] = st.session_state.get("game")
    bundle = game.translations if game else None

    def label(key: str, fallback: str) -> str:
        return translate(bundle, key) if bundle else fallback

    st.subheader(label("common.seed", "Random seed"))
    use_seed = st.checkbox("Fixed seed", value=current.seed is not None)
    seed: Optional[int] = None
    if use_seed:
        seed = int(
            st.number_input(
                label("common.seed", "Random seed"),
                min_value=0,
                value=current.seed or 0,
                key="seed_input",
            )
        )

    st.subheader("Board")
    names = list(BOARD_FN_REGISTRY.keys())
    board_fn_name = st.selectbox(
        "Board shape",
        names,
        index=names.index(current.game_config.board_fn_name),
        key="board_fn_select",
    )
    star_count = st.slider(
        label("board.star", "Star"), 0, 10, current.game_config.star_count
    )
    trap_count = st.slider(
        label("board.trap", "Trap"), 0, 10, current.game_config.trap_count
    )

    st.subheader("Timing")
    tick_ms = st.slider("Step (ms)", 50, 1000, current.game_config.tick_ms, step=50)

    game_config = replace(
        current.game_config,
        board_fn_name=board_fn_name,
        star_count=star_count,
        trap_count=trap_count,
        tick_ms=tick_ms,
    )
    return replace(current, seed=seed, game_config=game_config)
