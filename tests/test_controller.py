"""Controller tests against a mocked Stats API."""

from __future__ import annotations

from datetime import date

import httpx

from winprob.data.statsapi_client import StatsApiClient
from winprob.state.controller import Controller
from winprob.state.types import Failed, Loaded, SelectDate, SelectGame, ShiftDate
from winprob.state.view import snapshot


def _team_side(team_id: int, name: str) -> dict:
    return {"team": {"id": team_id, "name": name}, "seriesNumber": 2}


def _schedule_payload(count: int) -> dict:
    games = [
        {
            "gamePk": 12345 + idx,
            "gameGuid": f"guid-{idx}",
            "teams": {
                "home": _team_side(147, "New York Yankees"),
                "away": _team_side(141, "Toronto Blue Jays"),
            },
        }
        for idx in range(count)
    ]
    return {"totalItems": count, "dates": [{"date": "2024-06-28", "totalItems": count, "games": games}]}


def _play(idx: int) -> dict:
    return {
        "result": {"type": "atBat", "description": f"Play {idx}", "awayScore": 0, "homeScore": idx},
        "about": {"inning": 1, "halfInning": "bottom"},
        "homeTeamWinProbability": 50.0 + idx,
        "awayTeamWinProbability": 50.0 - idx,
        "homeTeamWinProbabilityAdded": 1.0,
    }


class FakeStatsApi:
    """Routes requests by path and records them."""

    def __init__(self, schedule_status: int = 200) -> None:
        self.schedule_status = schedule_status
        self.paths: list[str] = []
        self.play_counts: dict[int, int] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.paths.append(request.url.path)
        if request.url.path.endswith("/schedule/games/"):
            if self.schedule_status != 200:
                return httpx.Response(self.schedule_status)
            return httpx.Response(200, json=_schedule_payload(15))
        game_pk = int(request.url.path.split("/")[-2])
        count = self.play_counts.get(game_pk, 5)
        return httpx.Response(200, json=[_play(idx) for idx in range(count)])


def _controller(api: FakeStatsApi) -> Controller:
    client = StatsApiClient(base_url="https://statsapi.test/api/v1", client=httpx.Client(transport=httpx.MockTransport(api)))
    return Controller(client, start=date(2024, 6, 28))


def test_schedule_lists_fifteen_matchups() -> None:
    controller = _controller(FakeStatsApi())
    controller.start()
    view = snapshot(controller.state)
    assert view.schedule_status == "loaded"
    assert len(view.matchups) == 15
    assert view.matchups[0] == (12345, "Toronto Blue Jays at New York Yankees")


def test_select_game_builds_series() -> None:
    api = FakeStatsApi()
    controller = _controller(api)
    controller.start()
    schedule = controller.state.schedule
    assert isinstance(schedule, Loaded)
    controller.dispatch(SelectGame(schedule.value.games()[0]))
    view = snapshot(controller.state)
    assert [d.index for d in view.series] == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert view.home_name == "Yankees"
    assert view.away_name == "Blue Jays"
    assert api.paths.count("/api/v1/game/12345/winProbability") == 1


def test_out_of_order_game_responses_keep_latest_selection() -> None:
    api = FakeStatsApi()
    api.play_counts = {12345: 5, 12346: 3}
    controller = _controller(api)
    controller.start()
    games = controller.state.schedule.value.games()
    first_effects = controller.apply(SelectGame(games[0]))
    second_effects = controller.apply(SelectGame(games[1]))
    late = controller.run_effect(second_effects[0])
    early = controller.run_effect(first_effects[0])
    controller.dispatch(late)
    controller.dispatch(early)
    assert controller.state.selected_game.game_pk == games[1].game_pk
    assert isinstance(controller.state.game_info, Loaded)
    assert len(controller.state.game_info.value) == 3
    assert [d.index for d in snapshot(controller.state).series] == [1.0, 2.0, 3.0]


def test_schedule_server_error_is_recoverable() -> None:
    api = FakeStatsApi(schedule_status=500)
    controller = _controller(api)
    controller.start()
    assert controller.state.schedule == Failed()
    assert snapshot(controller.state).matchups == []

    api.schedule_status = 200
    controller.dispatch(ShiftDate(1))
    assert controller.state.current_date == date(2024, 6, 29)
    assert isinstance(controller.state.schedule, Loaded)
    assert api.paths.count("/api/v1/schedule/games/") == 2


def test_select_date_after_start() -> None:
    controller = _controller(FakeStatsApi())
    controller.start()
    controller.dispatch(SelectDate(date(2024, 7, 4)))
    assert snapshot(controller.state).date == "2024-07-04"
