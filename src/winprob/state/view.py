"""Render-cycle snapshot handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from winprob.chart.series import Datum, to_series
from winprob.data.teams import short_name
from winprob.state.types import (
    AppState,
    Failed,
    GameInfoStatus,
    Loaded,
    Loading,
    NotRequested,
    ScheduleStatus,
)


@dataclass(frozen=True)
class Snapshot:
    date: str
    schedule_status: str
    game_info_status: str
    matchups: List[Tuple[int, str]] = field(default_factory=list)
    selected_game_pk: Optional[int] = None
    series: List[Datum] = field(default_factory=list)
    home_name: str = "Home"
    away_name: str = "Away"
    hovered: Optional[Datum] = None


def _status_name(status: ScheduleStatus | GameInfoStatus) -> str:
    if isinstance(status, NotRequested):
        return "not_requested"
    if isinstance(status, Loading):
        return "loading"
    if isinstance(status, Failed):
        return "failed"
    if isinstance(status, Loaded):
        return "loaded"
    raise TypeError(f"Unknown load status: {status!r}")


def _resolve_hover(series: List[Datum], hover: Optional[int]) -> Optional[Datum]:
    if hover is None or not 1 <= hover <= len(series):
        return None
    return series[hover - 1]


def snapshot(state: AppState) -> Snapshot:
    """Build the view model; the series is derived afresh on every call."""

    matchups: List[Tuple[int, str]] = []
    if isinstance(state.schedule, Loaded):
        matchups = [(game.game_pk, game.label) for game in state.schedule.value.games()]

    series: List[Datum] = []
    if isinstance(state.game_info, Loaded):
        series = to_series(state.game_info.value)

    game = state.selected_game
    home_name, away_name = "Home", "Away"
    if game is not None:
        home_name = short_name(game.teams.home.team.id, "home")
        away_name = short_name(game.teams.away.team.id, "away")

    return Snapshot(
        date=state.current_date.isoformat(),
        schedule_status=_status_name(state.schedule),
        game_info_status=_status_name(state.game_info),
        matchups=matchups,
        selected_game_pk=game.game_pk if game is not None else None,
        series=series,
        home_name=home_name,
        away_name=away_name,
        hovered=_resolve_hover(series, state.hover),
    )
