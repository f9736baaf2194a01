import os
from dataclasses import replace

import streamlit as st

from config import AppConfig, get_config_from_widgets, make_game, set_default_config
from components import board_html, display_status, display_task, show_new_messages
from couple_ludo.game import Game
from couple_ludo.i18n import translate
from couple_ludo.types import GameMode, Language, Phase

script_dir: str = os.path.dirname(os.path.realpath(__file__))

st.set_page_config(layout="wide", page_title="Couple Ludo")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_config()
if "game" not in st.session_state:
    make_game(st.session_state["config"])

game: Game = st.session_state["game"]
bundle = game.translations

tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: AppConfig = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = replace(config, language=game.state.language)
        make_game(st.session_state["config"])
        st.rerun()

with tab_game:
    languages = list(Language)
    language = st.selectbox(
        translate(bundle, "common.language"),
        languages,
        index=languages.index(game.state.language),
        format_func=lambda lang: {"zh": "中文", "en": "English"}[lang],
        key="language_select",
    )
    if language != game.state.language:
        game.change_language(language)
        st.rerun()

    st.title(translate(bundle, "game.title"))

    if game.state.phase == Phase.START:
        st.caption(translate(bundle, "game.subtitle"))
        st.subheader(translate(bundle, "game.selectMode"))
        columns = st.columns(3)
        for i, mode in enumerate(GameMode):
            with columns[i % 3]:
                st.markdown(f"**{translate(bundle, f'modes.{mode}.name')}**")
                st.caption(translate(bundle, f"modes.{mode}.description"))
                if st.button("▶️", key=f"mode_{mode}", use_container_width=True):
                    game.start_game(mode)
                    st.rerun()
    else:
        left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

        with middle_col:
            board_slot = st.empty()
            board_slot.markdown(
                board_html(game.state, game.config.board_size), unsafe_allow_html=True
            )

        with left_col:
            status_slot = st.empty()
            with status_slot.container():
                display_status(game)

        with right_col:
            state = game.state
            if state.phase == Phase.WIN:
                st.balloons()
                if st.button(translate(bundle, "game.backToHome"), use_container_width=True):
                    game.restart()
                    st.rerun()
            elif state.phase == Phase.TASK:
                display_task(game)
                done_col, fail_col = st.columns(2)
                with done_col:
                    if st.button(f"✅ {translate(bundle, 'common.completed')}", use_container_width=True):
                        game.report_task(completed=True)
                with fail_col:
                    if st.button(f"❌ {translate(bundle, 'common.failed')}", use_container_width=True):
                        game.report_task(completed=False)
            elif st.button(
                f"🎲 {translate(bundle, 'common.rollDice')}",
                disabled=not state.can_roll,
                use_container_width=True,
            ):
                game.roll()

            st.divider()
            if st.button(f"🔁 {translate(bundle, 'common.restart')}", use_container_width=True):
                game.restart()
                st.rerun()

        def redraw() -> None:
            board_slot.markdown(
                board_html(game.state, game.config.board_size), unsafe_allow_html=True
            )
            with status_slot.container():
                display_status(game)

        if game.scheduler.pending:
            game.run_realtime(on_fire=redraw)
            show_new_messages(game)
            st.rerun()
        show_new_messages(game)

with tab_state:
    st.json({k: str(v) for k, v in game.state.description.items()}, expanded=1)
