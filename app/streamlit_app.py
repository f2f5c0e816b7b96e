"""Streamlit interface for the MLB win probability viewer."""

from __future__ import annotations

import logging
from datetime import date

import altair as alt
import streamlit as st

from winprob.chart.series import series_frame, tooltip_lines
from winprob.config import get_settings, get_start_date
from winprob.data.statsapi_client import StatsApiClient
from winprob.state.controller import Controller
from winprob.state.types import (
    Hover,
    Loaded,
    RefreshSelectedGame,
    SelectDate,
    SelectGame,
    ShiftDate,
    Unhover,
)
from winprob.state.view import Snapshot, snapshot

settings = get_settings()
logging.basicConfig(level=settings.log_level)

st.set_page_config(page_title="Win Probability", layout="wide", page_icon="⚾")
st.title("⚾ Win Probability")
st.caption("Play-by-play win probability swings from the MLB Stats API.")


def get_controller() -> Controller:
    if "controller" not in st.session_state:
        controller = Controller(StatsApiClient(), start=get_start_date())
        controller.start()
        st.session_state["controller"] = controller
    return st.session_state["controller"]


def render_date_pager(controller: Controller) -> None:
    prev_col, picker_col, next_col = st.columns([0.15, 0.7, 0.15])
    if prev_col.button("◀ Previous day", width="stretch"):
        controller.dispatch(ShiftDate(-1))
    if next_col.button("Next day ▶", width="stretch"):
        controller.dispatch(ShiftDate(1))
    picked = picker_col.date_input("Date", value=controller.state.current_date)
    if isinstance(picked, date) and picked != controller.state.current_date:
        controller.dispatch(SelectDate(picked))


def render_schedule(controller: Controller, view: Snapshot) -> None:
    st.subheader(f"Games on {view.date}")
    if view.schedule_status == "loading":
        st.info("Loading schedule...")
        return
    if view.schedule_status == "failed":
        st.error("Could not load the schedule. Pick another date or try again.")
        return
    if not view.matchups:
        st.caption("No games scheduled.")
        return
    labels = {game_pk: label for game_pk, label in view.matchups}
    choice = st.radio(
        "Select a game",
        options=list(labels),
        format_func=labels.get,
        index=None if view.selected_game_pk not in labels else list(labels).index(view.selected_game_pk),
    )
    if choice is not None and choice != view.selected_game_pk:
        schedule = controller.state.schedule
        if isinstance(schedule, Loaded):
            game = next(g for g in schedule.value.games() if g.game_pk == choice)
            controller.dispatch(SelectGame(game))


def render_chart(controller: Controller, view: Snapshot) -> None:
    st.subheader("Win probability")
    if view.game_info_status == "not_requested":
        st.caption("Select a game to see its win probability chart.")
        return
    if st.button("Refresh game"):
        controller.dispatch(RefreshSelectedGame())
        view = snapshot(controller.state)
    if view.game_info_status == "loading":
        st.info("Loading plays...")
        return
    if view.game_info_status == "failed":
        st.error("Could not load play-by-play data for this game.")
        return
    if not view.series:
        st.caption("No plays yet.")
        return

    df = series_frame(view.series)
    df["tooltip"] = [" | ".join(tooltip_lines(d, view.home_name, view.away_name)) for d in view.series]
    chart = (
        alt.Chart(df)
        .mark_line(point=True)
        .encode(
            x=alt.X("index:Q", title="Play"),
            y=alt.Y("home_win_prob:Q", title=f"{view.home_name} win %", scale=alt.Scale(domain=[0, 100])),
            tooltip=["tooltip:N"],
        )
    )
    st.altair_chart(chart, width="stretch")

    highlighted = st.select_slider(
        "Highlight play",
        options=[0] + [int(d.index) for d in view.series],
        value=controller.state.hover or 0,
    )
    if highlighted and highlighted != controller.state.hover:
        controller.dispatch(Hover(highlighted))
    elif not highlighted and controller.state.hover is not None:
        controller.dispatch(Unhover())
    hovered = snapshot(controller.state).hovered
    if hovered:
        st.markdown("  \n".join(tooltip_lines(hovered, view.home_name, view.away_name)))


# ----- Page Layout ------------------------------------------------------------
controller = get_controller()
render_date_pager(controller)
view = snapshot(controller.state)

col_main, col_right = st.columns([0.35, 0.65], gap="large")
with col_main:
    render_schedule(controller, view)
with col_right:
    render_chart(controller, snapshot(controller.state))
