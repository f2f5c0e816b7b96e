"""Thin client for the public MLB Stats API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Generic, Literal, Optional, TypeVar, Union

import httpx

from winprob.config import get_settings
from winprob.data.schemas import (
    DecodeError,
    GameInfo,
    Schedule,
    decode_game_info,
    decode_schedule,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchErrorKind = Literal["network", "status", "decode"]


@dataclass(frozen=True)
class FetchError:
    """Why a fetch failed. Callers treat every kind the same way."""

    kind: FetchErrorKind
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: FetchError


FetchResult = Union[Ok[T], Err]


class StatsApiClient:
    """Issues schedule and win probability lookups; one request per call, no retries."""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.statsapi_base_url).rstrip("/")
        self._client = client or httpx.Client()

    def __enter__(self) -> "StatsApiClient":  # pragma: no cover - context sugar
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        response = self._client.get(url, params=params)
        response.raise_for_status()
        return response.json()

    def _fetch(
        self,
        path: str,
        params: Optional[Dict[str, Any]],
        decode: Callable[[Any], T],
    ) -> FetchResult[T]:
        try:
            payload = self._get_json(path, params)
        except httpx.HTTPStatusError as exc:
            logger.warning("Stats API returned %s for %s", exc.response.status_code, path)
            return Err(FetchError("status", str(exc)))
        except httpx.HTTPError as exc:
            logger.warning("Stats API request to %s failed: %r", path, exc)
            return Err(FetchError("network", str(exc)))
        except ValueError as exc:
            logger.warning("Stats API response for %s is not JSON: %s", path, exc)
            return Err(FetchError("decode", str(exc)))
        try:
            return Ok(decode(payload))
        except DecodeError as exc:
            logger.warning("Stats API payload for %s failed to decode: %s", path, exc)
            return Err(FetchError("decode", str(exc)))

    def fetch_schedule(self, target_date: date | str) -> FetchResult[Schedule]:
        """Return the schedule for a single day."""

        day = target_date.isoformat() if isinstance(target_date, date) else target_date
        params = {"sportId": 1, "startDate": day, "endDate": day}
        return self._fetch("/schedule/games/", params, decode_schedule)

    def fetch_game_info(self, game_pk: int) -> FetchResult[GameInfo]:
        """Return the chronological win probability play log for one game."""

        return self._fetch(f"/game/{game_pk}/winProbability", None, decode_game_info)
