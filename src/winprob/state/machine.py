"""Pure reducer for the viewer's navigation and load state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import List

from winprob.data.statsapi_client import Err, Ok
from winprob.state.types import (
    AppState,
    Effect,
    Event,
    Failed,
    FetchGameInfo,
    FetchSchedule,
    GameInfoFetched,
    Hover,
    Loaded,
    Loading,
    NotRequested,
    RefreshSchedule,
    RefreshSelectedGame,
    ScheduleFetched,
    SelectDate,
    SelectGame,
    ShiftDate,
    Unhover,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    state: AppState
    effects: List[Effect] = field(default_factory=list)


def initial_state(start: date) -> AppState:
    return AppState(current_date=start, schedule=Loading(), game_info=NotRequested())


def bootstrap(start: date) -> Transition:
    """Initial state together with the first schedule request."""

    state = initial_state(start)
    return Transition(state, [FetchSchedule(state.schedule_request, start)])


def _select_date(state: AppState, target: date) -> Transition:
    # Bumping the game info id too drops any in-flight play log for the old date.
    new_state = replace(
        state,
        current_date=target,
        schedule=Loading(),
        game_info=NotRequested(),
        selected_game=None,
        hover=None,
        schedule_request=state.schedule_request + 1,
        game_info_request=state.game_info_request + 1,
    )
    return Transition(new_state, [FetchSchedule(new_state.schedule_request, target)])


def _select_game(state: AppState, game) -> Transition:
    new_state = replace(
        state,
        selected_game=game,
        game_info=Loading(),
        hover=None,
        game_info_request=state.game_info_request + 1,
    )
    return Transition(new_state, [FetchGameInfo(new_state.game_info_request, game.game_pk)])


def _discard(state: AppState, event) -> Transition:
    logger.debug("Discarding stale %s (request %s)", type(event).__name__, event.request_id)
    return Transition(state)


def _settle(result):
    if isinstance(result, Ok):
        return Loaded(result.value)
    if isinstance(result, Err):
        return Failed()
    raise TypeError(f"Unexpected fetch result: {result!r}")


def reduce(state: AppState, event: Event) -> Transition:
    """Apply one event and return the next state plus any fetches to issue."""

    if isinstance(event, SelectDate):
        return _select_date(state, event.date)
    if isinstance(event, ShiftDate):
        return _select_date(state, state.current_date + timedelta(days=event.days))
    if isinstance(event, RefreshSchedule):
        return _select_date(state, state.current_date)
    if isinstance(event, ScheduleFetched):
        if is_stale(state, event):
            return _discard(state, event)
        return Transition(replace(state, schedule=_settle(event.result)))
    if isinstance(event, SelectGame):
        return _select_game(state, event.game)
    if isinstance(event, GameInfoFetched):
        if is_stale(state, event):
            return _discard(state, event)
        return Transition(replace(state, game_info=_settle(event.result)))
    if isinstance(event, Hover):
        return Transition(replace(state, hover=event.index))
    if isinstance(event, Unhover):
        return Transition(replace(state, hover=None))
    if isinstance(event, RefreshSelectedGame):
        if state.selected_game is None:
            return Transition(state)
        return _select_game(state, state.selected_game)
    raise TypeError(f"Unknown event: {event!r}")


def is_stale(state: AppState, event: Event) -> bool:
    """True when a fetch result no longer answers the latest request of its kind."""

    if isinstance(event, ScheduleFetched):
        return event.request_id != state.schedule_request
    if isinstance(event, GameInfoFetched):
        return event.request_id != state.game_info_request
    return False
