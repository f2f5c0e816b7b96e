"""Drive the reducer: hold the session state and run fetch effects."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from winprob.config import get_start_date
from winprob.data.statsapi_client import StatsApiClient
from winprob.state.machine import bootstrap, reduce
from winprob.state.types import (
    AppState,
    Effect,
    Event,
    FetchGameInfo,
    FetchSchedule,
    GameInfoFetched,
    ScheduleFetched,
)


class Controller:
    """Owns the single :class:`AppState` of a viewing session.

    ``dispatch`` runs synchronously: each fetch is issued and its result fed back
    before returning. Hosts that run fetches themselves can use ``apply`` and
    ``run_effect`` and deliver results in whatever order they arrive.
    """

    def __init__(self, client: StatsApiClient, start: Optional[date] = None) -> None:
        self.client = client
        transition = bootstrap(start or get_start_date())
        self.state: AppState = transition.state
        self._initial_effects: List[Effect] = transition.effects

    def start(self) -> AppState:
        """Issue the bootstrap schedule request."""

        effects, self._initial_effects = self._initial_effects, []
        self._run(effects)
        return self.state

    def apply(self, event: Event) -> List[Effect]:
        transition = reduce(self.state, event)
        self.state = transition.state
        return transition.effects

    def dispatch(self, event: Event) -> AppState:
        self._run(self.apply(event))
        return self.state

    def run_effect(self, effect: Effect) -> Event:
        """Perform one fetch and wrap its result in the matching event."""

        if isinstance(effect, FetchSchedule):
            return ScheduleFetched(effect.request_id, self.client.fetch_schedule(effect.date))
        if isinstance(effect, FetchGameInfo):
            return GameInfoFetched(effect.request_id, self.client.fetch_game_info(effect.game_pk))
        raise TypeError(f"Unknown effect: {effect!r}")

    def _run(self, effects: List[Effect]) -> None:
        for effect in effects:
            self.dispatch(self.run_effect(effect))
