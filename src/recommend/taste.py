from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from src.geo import distance_km
from src.models import Event, User


class PreferenceProfile:
    """Category -> weight, built fresh for each request.

    Each explicit preference seeds a weight of 1; every attended event adds 1
    to each of its categories.
    """

    def __init__(self, weights: Mapping[str, float] | None = None, attended_count: int = 0) -> None:
        self._weights: dict[str, float] = dict(weights or {})
        self.attended_count = attended_count

    def weight(self, category: str) -> float:
        return self._weights.get(category, 0.0)

    def points(self, categories: Iterable[str]) -> float:
        return sum(self.weight(c) for c in categories)

    def categories(self) -> set[str]:
        return set(self._weights)

    def as_dict(self) -> dict[str, float]:
        return dict(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def to_text(self) -> str:
        """Render the profile for console output, heaviest categories first."""
        if not self._weights:
            return "  (no preferences)"
        lines = []
        for category, weight in sorted(self._weights.items(), key=lambda x: (-x[1], x[0])):
            lines.append(f"  {category} (weight: {weight:g})")
        return "\n".join(lines)


def build_profile(user: User, catalog: Mapping[str, Event]) -> tuple[PreferenceProfile, float]:
    """Derive the user's profile and the farthest distance they travelled to an event.

    Attended ids missing from the catalog are stale references and skipped.
    """
    weights: dict[str, float] = {p: 1.0 for p in user.preferences}
    max_attended = 0.0
    attended = 0

    for event_id in user.attended_events:
        event = catalog.get(event_id)
        if event is None:
            continue
        attended += 1
        for category in event.categories:
            weights[category] = weights.get(category, 0.0) + 1.0
        d = distance_km(user.location, event.location)
        if not math.isnan(d):
            max_attended = max(max_attended, d)

    return PreferenceProfile(weights, attended_count=attended), max_attended
