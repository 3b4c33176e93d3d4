from __future__ import annotations

from collections.abc import Iterable

from src.geo import distance_km
from src.models import SimilarityIndex, User


def resolve_candidates(attended_ids: Iterable[str], similarity: SimilarityIndex) -> set[str]:
    """Events similar to anything the user attended, minus what they already attended."""
    attended = set(attended_ids)
    candidates: set[str] = set()
    for event_id in attended:
        for similar_id in similarity.get(event_id, ()):
            if similar_id not in attended:
                candidates.add(similar_id)
    return candidates


def nearby_user_candidates(
    user: User,
    users: Iterable[User],
    interests: Iterable[str],
    radius_km: float,
) -> set[str]:
    """Events attended by other users within `radius_km` who share an interest.

    Used to seed the candidate set for users without explicit preferences.
    """
    interests = set(interests)
    if not interests:
        return set()

    attended = set(user.attended_events)
    found: set[str] = set()
    for neighbour in users:
        if neighbour.id == user.id:
            continue
        # NaN compares False, so unusable locations drop out here
        if not distance_km(user.location, neighbour.location) <= radius_km:
            continue
        if not interests & neighbour.preferences:
            continue
        found.update(e for e in neighbour.attended_events if e not in attended)
    return found
