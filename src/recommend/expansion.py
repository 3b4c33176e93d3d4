from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from src.config import settings
from src.log import get_logger
from src.models import Event, ScoredCandidate, User
from src.recommend.scorer import score_pass
from src.recommend.taste import PreferenceProfile

logger = get_logger("expansion")


class ExpansionState(str, Enum):
    INITIAL = "initial"
    EXPANDING = "expanding"
    DONE = "done"


class RadiusExpansionController:
    """Widen the search radius until `limit` events are scored or the ceiling is hit.

    One controller serves one request; it records the final state, radius and
    pass count for inspection afterwards.
    """

    def __init__(
        self,
        fallback_radius_km: float | None = None,
        history_radius_factor: float | None = None,
        growth_factor: float | None = None,
        ceiling_km: float | None = None,
        min_radius_km: float | None = None,
    ) -> None:
        self.fallback_radius_km = (
            settings.fallback_radius_km if fallback_radius_km is None else fallback_radius_km
        )
        self.history_radius_factor = (
            settings.history_radius_factor if history_radius_factor is None else history_radius_factor
        )
        self.growth_factor = settings.radius_growth_factor if growth_factor is None else growth_factor
        self.ceiling_km = settings.radius_ceiling_km if ceiling_km is None else ceiling_km
        self.min_radius_km = settings.min_expansion_radius_km if min_radius_km is None else min_radius_km
        if self.growth_factor <= 1:
            raise ValueError(f"growth_factor must be > 1, got {self.growth_factor}")
        if self.min_radius_km <= 0:
            raise ValueError(f"min_radius_km must be > 0, got {self.min_radius_km}")

        self.state = ExpansionState.INITIAL
        self.radius = 0.0
        self.passes = 0

    def starting_radius(self, profile: PreferenceProfile, max_attended_km: float) -> float:
        if profile.attended_count:
            return max_attended_km * self.history_radius_factor
        return self.fallback_radius_km

    def next_radius(self, radius: float) -> float:
        # a zero radius cannot grow by multiplication
        grown = radius * self.growth_factor if radius > 0 else self.min_radius_km
        return min(grown, self.ceiling_km)

    def run(
        self,
        user: User,
        events: Sequence[Event],
        profile: PreferenceProfile,
        max_attended_km: float,
        candidates: set[str],
        limit: int,
    ) -> list[ScoredCandidate]:
        self.state = ExpansionState.INITIAL
        self.radius = self.starting_radius(profile, max_attended_km)
        self.passes = 0
        seen: set[str] = set()
        accumulated: list[ScoredCandidate] = []

        while self.state is not ExpansionState.DONE:
            scored = score_pass(user, events, self.radius, profile, candidates, seen)
            accumulated.extend(scored)
            self.passes += 1
            logger.debug(
                "radius_pass",
                user_id=user.id,
                radius_km=round(self.radius, 3),
                pass_number=self.passes,
                new_scored=len(scored),
            )

            if len(accumulated) >= limit:
                reason = "limit_reached"
            elif self.radius >= self.ceiling_km:
                reason = "ceiling_reached"
            else:
                self.state = ExpansionState.EXPANDING
                self.radius = self.next_radius(self.radius)
                continue

            self.state = ExpansionState.DONE
            logger.info(
                "expansion_done",
                user_id=user.id,
                reason=reason,
                passes=self.passes,
                radius_km=round(self.radius, 3),
                scored=len(accumulated),
            )

        return accumulated
