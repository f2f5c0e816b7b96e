"""Derive the win probability chart series from a decoded play log."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List

import pandas as pd

from winprob.data.schemas import GameInfo

SERIES_COLUMNS = [
    "index",
    "home_win_prob",
    "away_win_prob",
    "description",
    "probability_delta",
    "inning",
    "half_inning",
    "away_score",
    "home_score",
]


@dataclass(frozen=True)
class Datum:
    """One chart point per play."""

    index: float
    home_win_prob: float
    away_win_prob: float
    description: str
    probability_delta: float
    inning: int
    half_inning: str
    away_score: int
    home_score: int


def to_series(info: GameInfo) -> List[Datum]:
    """Map each play to a point whose x value is its 1-based position in the log."""

    return [
        Datum(
            index=float(position),
            home_win_prob=play.home_team_win_probability,
            away_win_prob=play.away_team_win_probability,
            description=play.result.description,
            probability_delta=play.home_team_win_probability_added,
            inning=play.about_inning,
            half_inning=play.about_half_inning,
            away_score=play.result.away_score,
            home_score=play.result.home_score,
        )
        for position, play in enumerate(info, start=1)
    ]


def series_frame(series: List[Datum]) -> pd.DataFrame:
    """Tabular form of the series for charting."""

    return pd.DataFrame([asdict(datum) for datum in series], columns=SERIES_COLUMNS)


def inning_label(datum: Datum) -> str:
    if datum.inning <= 0:
        return "Pregame"
    half = datum.half_inning.lower()
    if half == "top":
        return f"Top {datum.inning}"
    if half == "bottom":
        return f"Bot {datum.inning}"
    return f"Inning {datum.inning}"


def tooltip_lines(datum: Datum, home_name: str, away_name: str) -> list[str]:
    """Hover text for one point: inning, score, play, and the home swing."""

    return [
        inning_label(datum),
        f"{away_name} {datum.away_score}, {home_name} {datum.home_score}",
        datum.description,
        f"{home_name} win probability {datum.home_win_prob:.1f}% ({datum.probability_delta:+.1f})",
    ]
