"""Load statuses, events, effects and the application state record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, Optional, TypeVar, Union

from winprob.data.schemas import Game, GameInfo, Schedule
from winprob.data.statsapi_client import FetchResult

T = TypeVar("T")


# ----- Load statuses ------------------------------------------------------------
@dataclass(frozen=True)
class NotRequested:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    pass


@dataclass(frozen=True)
class Loaded(Generic[T]):
    value: T


ScheduleStatus = Union[Loading, Failed, Loaded[Schedule]]
GameInfoStatus = Union[NotRequested, Loading, Failed, Loaded[GameInfo]]


# ----- Events -------------------------------------------------------------------
@dataclass(frozen=True)
class SelectDate:
    date: date


@dataclass(frozen=True)
class ShiftDate:
    days: int


@dataclass(frozen=True)
class RefreshSchedule:
    pass


@dataclass(frozen=True)
class ScheduleFetched:
    request_id: int
    result: FetchResult[Schedule]


@dataclass(frozen=True)
class SelectGame:
    game: Game


@dataclass(frozen=True)
class GameInfoFetched:
    request_id: int
    result: FetchResult[GameInfo]


@dataclass(frozen=True)
class Hover:
    index: int


@dataclass(frozen=True)
class Unhover:
    pass


@dataclass(frozen=True)
class RefreshSelectedGame:
    pass


Event = Union[
    SelectDate,
    ShiftDate,
    RefreshSchedule,
    ScheduleFetched,
    SelectGame,
    GameInfoFetched,
    Hover,
    Unhover,
    RefreshSelectedGame,
]


# ----- Effects ------------------------------------------------------------------
@dataclass(frozen=True)
class FetchSchedule:
    request_id: int
    date: date


@dataclass(frozen=True)
class FetchGameInfo:
    request_id: int
    game_pk: int


Effect = Union[FetchSchedule, FetchGameInfo]


@dataclass(frozen=True)
class AppState:
    """Single session state. Replaced wholesale by every transition.

    ``schedule_request`` and ``game_info_request`` are the ids of the latest
    request in each category; results tagged with any other id are stale.
    ``hover`` is a 1-based position into the series derived from ``game_info``.
    """

    current_date: date
    schedule: ScheduleStatus
    game_info: GameInfoStatus
    selected_game: Optional[Game] = None
    hover: Optional[int] = None
    schedule_request: int = 0
    game_info_request: int = 0
