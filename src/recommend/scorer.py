from __future__ import annotations

import math
from collections.abc import Iterable

from src.geo import distance_km
from src.models import Event, ScoredCandidate, User, WeightPolicy
from src.recommend.taste import PreferenceProfile

# Term weights per policy. A missing term contributes nothing.
WEIGHTS: dict[WeightPolicy, dict[str, float]] = {
    WeightPolicy.PREFERENCE_AND_SIMILARITY: {
        "preference": 0.4,
        "distance": 0.35,
        "similarity": 0.15,
        "popularity": 0.1,
    },
    WeightPolicy.PREFERENCE_NO_SIMILARITY: {
        "preference": 0.4,
        "distance": 0.3,
        "popularity": 0.35,
    },
    # Cold start: nothing matched, lean on distance and popularity
    WeightPolicy.NO_PREFERENCE: {
        "distance": 0.45,
        "popularity": 0.35,
        "similarity": 0.2,
    },
}


def select_policy(preference_points: float, has_candidates: bool) -> WeightPolicy:
    """Pick the weighting for one event. Branch order matters."""
    if preference_points > 0 and has_candidates:
        return WeightPolicy.PREFERENCE_AND_SIMILARITY
    if preference_points > 0:
        return WeightPolicy.PREFERENCE_NO_SIMILARITY
    return WeightPolicy.NO_PREFERENCE


def distance_points(distance: float, radius: float) -> float | None:
    """1 at the user's location falling to 0 at the radius; None if out of reach."""
    if math.isnan(distance) or distance > radius:
        return None
    if radius <= 0:
        return 1.0 if distance == 0 else None
    return 1 - distance / radius


def combine(policy: WeightPolicy, terms: dict[str, float]) -> float:
    weights = WEIGHTS[policy]
    return sum(w * terms.get(name, 0.0) for name, w in weights.items())


def score_event(
    event: Event,
    distance: float,
    radius: float,
    profile: PreferenceProfile,
    candidates: set[str],
) -> ScoredCandidate | None:
    """Score a single event at `distance` km, or None if it lies outside `radius`."""
    dist_points = distance_points(distance, radius)
    if dist_points is None:
        return None

    preference = profile.points(event.categories)
    similarity = 1.0 if event.id in candidates else 0.0
    policy = select_policy(preference, bool(candidates))
    score = combine(
        policy,
        {
            "preference": preference,
            "distance": dist_points,
            "similarity": similarity,
            "popularity": event.popularity,
        },
    )
    return ScoredCandidate(event=event, score=score, distance_km=distance, policy=policy)


def score_pass(
    user: User,
    events: Iterable[Event],
    radius: float,
    profile: PreferenceProfile,
    candidates: set[str],
    seen: set[str],
) -> list[ScoredCandidate]:
    """Score every unseen, unattended event within `radius`.

    Scored ids are added to `seen` so a later, wider pass skips them.
    """
    attended = set(user.attended_events)
    scored = []
    for event in events:
        if event.id in seen or event.id in attended:
            continue
        d = distance_km(user.location, event.location)
        result = score_event(event, d, radius, profile, candidates)
        if result is None:
            continue
        seen.add(event.id)
        scored.append(result)
    return scored
