"""Presentation snapshot and team lookup tests."""

from __future__ import annotations

from datetime import date

from winprob.data.schemas import Game, decode_game_info
from winprob.data.statsapi_client import Ok
from winprob.data.teams import TEAM_SHORT_NAMES, short_name
from winprob.state import machine
from winprob.state.types import GameInfoFetched, Hover, SelectGame
from winprob.state.view import snapshot


def _game(home_id: int, away_id: int) -> Game:
    return Game.model_validate(
        {
            "gamePk": 1,
            "gameGuid": "guid-1",
            "teams": {
                "home": {"team": {"id": home_id, "name": "Home Club"}, "seriesNumber": 1},
                "away": {"team": {"id": away_id, "name": "Away Club"}, "seriesNumber": 1},
            },
        }
    )


def _loaded_state(game: Game, plays: int):
    selected = machine.reduce(machine.bootstrap(date(2024, 6, 28)).state, SelectGame(game))
    info = decode_game_info(
        [
            {
                "result": {"type": "atBat", "awayScore": 0, "homeScore": 0},
                "homeTeamWinProbability": 50.0,
                "awayTeamWinProbability": 50.0,
                "homeTeamWinProbabilityAdded": 0.0,
            }
        ]
        * plays
    )
    return machine.reduce(selected.state, GameInfoFetched(selected.effects[0].request_id, Ok(info))).state


def test_team_table_covers_thirty_clubs() -> None:
    assert len(TEAM_SHORT_NAMES) == 30
    assert short_name(147, "home") == "Yankees"


def test_unknown_team_falls_back_to_side() -> None:
    assert short_name(999, "home") == "Home"
    assert short_name(999, "away") == "Away"


def test_initial_snapshot() -> None:
    view = snapshot(machine.bootstrap(date(2024, 6, 28)).state)
    assert view.date == "2024-06-28"
    assert view.schedule_status == "loading"
    assert view.game_info_status == "not_requested"
    assert view.matchups == []
    assert view.series == []
    assert view.hovered is None


def test_snapshot_names_use_fallbacks() -> None:
    view = snapshot(_loaded_state(_game(999, 147), plays=2))
    assert view.game_info_status == "loaded"
    assert view.home_name == "Home"
    assert view.away_name == "Yankees"
    assert len(view.series) == 2


def test_hover_resolves_against_current_series() -> None:
    state = _loaded_state(_game(147, 111), plays=3)
    view = snapshot(machine.reduce(state, Hover(2)).state)
    assert view.hovered is not None
    assert view.hovered.index == 2.0
    assert snapshot(machine.reduce(state, Hover(9)).state).hovered is None
