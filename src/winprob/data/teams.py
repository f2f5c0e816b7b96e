"""Static lookup of MLB team ids to short display names."""

from __future__ import annotations

from typing import Literal

Side = Literal["home", "away"]

TEAM_SHORT_NAMES: dict[int, str] = {
    108: "Angels",
    109: "D-backs",
    110: "Orioles",
    111: "Red Sox",
    112: "Cubs",
    113: "Reds",
    114: "Guardians",
    115: "Rockies",
    116: "Tigers",
    117: "Astros",
    118: "Royals",
    119: "Dodgers",
    120: "Nationals",
    121: "Mets",
    133: "Athletics",
    134: "Pirates",
    135: "Padres",
    136: "Mariners",
    137: "Giants",
    138: "Cardinals",
    139: "Rays",
    140: "Rangers",
    141: "Blue Jays",
    142: "Twins",
    143: "Phillies",
    144: "Braves",
    145: "White Sox",
    146: "Marlins",
    147: "Yankees",
    158: "Brewers",
}

_FALLBACK: dict[str, str] = {"home": "Home", "away": "Away"}


def short_name(team_id: int, side: Side) -> str:
    """Return the short display name for a team, or "Home"/"Away" if unknown."""

    return TEAM_SHORT_NAMES.get(team_id, _FALLBACK[side])
