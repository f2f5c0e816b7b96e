"""Pydantic schemas for MLB Stats API schedule and win probability payloads."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

DEFAULT_EVENT = "In Progress"
DEFAULT_EVENT_TYPE = "in progress"
DEFAULT_DESCRIPTION = "Play description is not yet available."


class DecodeError(ValueError):
    """Raised when a payload is missing a required field or has the wrong type."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path or '<root>'}: {message}")
        self.path = path
        self.message = message

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "DecodeError":
        first = exc.errors()[0]
        path = ".".join(str(part) for part in first["loc"])
        return cls(path, first["msg"])


class StatsApiModel(BaseModel):
    """Base model: camelCase wire keys, immutable, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        frozen=True,
        extra="ignore",
    )

    # Keys whose ``null`` value is treated the same as a missing key.
    nullable_defaults: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def _null_means_missing(cls, data: Any) -> Any:
        if not cls.nullable_defaults or not isinstance(data, dict):
            return data
        return {
            key: value
            for key, value in data.items()
            if not (value is None and key in cls.nullable_defaults)
        }


class Team(StatsApiModel):
    id: StrictInt
    name: StrictStr


class TeamSide(StatsApiModel):
    team: Team
    series_number: StrictInt


class Matchup(StatsApiModel):
    home: TeamSide
    away: TeamSide


class Game(StatsApiModel):
    game_pk: StrictInt
    game_guid: StrictStr
    teams: Matchup

    @property
    def label(self) -> str:
        return f"{self.teams.away.team.name} at {self.teams.home.team.name}"


class GameDay(StatsApiModel):
    date: StrictStr
    total_items: StrictInt
    games: list[Game]


class Schedule(StatsApiModel):
    """Root of a schedule lookup. ``total_items`` is informational only."""

    total_items: StrictInt
    dates: list[GameDay]

    def games(self) -> list[Game]:
        return [game for day in self.dates for game in day.games]


class PlayResult(StatsApiModel):
    nullable_defaults: ClassVar[tuple[str, ...]] = ("event", "eventType", "description")

    play_type: StrictStr = Field(alias="type")
    event: StrictStr = DEFAULT_EVENT
    event_type: StrictStr = DEFAULT_EVENT_TYPE
    description: StrictStr = DEFAULT_DESCRIPTION
    away_score: StrictInt
    home_score: StrictInt


class PlayAbout(StatsApiModel):
    nullable_defaults: ClassVar[tuple[str, ...]] = ("inning", "halfInning")

    inning: StrictInt = 0
    half_inning: StrictStr = ""


class Play(StatsApiModel):
    nullable_defaults: ClassVar[tuple[str, ...]] = ("about",)

    result: PlayResult
    home_team_win_probability: StrictFloat
    away_team_win_probability: StrictFloat
    home_team_win_probability_added: StrictFloat
    about: PlayAbout = Field(default_factory=PlayAbout)

    @property
    def about_inning(self) -> int:
        return self.about.inning

    @property
    def about_half_inning(self) -> str:
        return self.about.half_inning


# Chronological play log for one game; list position is the chart x-axis.
GameInfo = list[Play]

_GAME_INFO_ADAPTER: TypeAdapter[list[Play]] = TypeAdapter(list[Play])


def decode_schedule(payload: Any) -> Schedule:
    """Decode a parsed schedule response or raise :class:`DecodeError`."""

    try:
        return Schedule.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError.from_validation_error(exc) from exc


def decode_game_info(payload: Any) -> GameInfo:
    """Decode a parsed win probability response (a bare array of plays)."""

    try:
        return _GAME_INFO_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise DecodeError.from_validation_error(exc) from exc
