import math

import pytest

from src.models import Coordinate, Event, User
from src.recommend.taste import PreferenceProfile, build_profile

KM_PER_DEGREE = math.pi * 6371 / 180


def _north(km: float) -> Coordinate:
    return Coordinate(latitude=km / KM_PER_DEGREE, longitude=0.0)


def _make_event(event_id: str, km: float = 0.0, categories=(), popularity: float = 0.5) -> Event:
    return Event(id=event_id, location=_north(km), categories=set(categories), popularity=popularity)


def _make_user(**overrides) -> User:
    defaults = dict(id="u1", location=_north(0))
    defaults.update(overrides)
    return User(**defaults)


def test_explicit_preferences_seed_weight_one():
    profile, max_km = build_profile(_make_user(preferences={"music", "art"}), {})
    assert profile.as_dict() == {"music": 1.0, "art": 1.0}
    assert profile.attended_count == 0
    assert max_km == 0


def test_attended_categories_increment_weights():
    catalog = {
        "a": _make_event("a", 10, ["music", "outdoor"]),
        "b": _make_event("b", 20, ["music"]),
    }
    user = _make_user(preferences={"music"}, attended_events=["a", "b"])
    profile, max_km = build_profile(user, catalog)
    assert profile.weight("music") == 3.0
    assert profile.weight("outdoor") == 1.0
    assert profile.weight("sports") == 0.0
    assert profile.attended_count == 2
    assert max_km == pytest.approx(20)


def test_stale_attended_ids_are_skipped():
    catalog = {"a": _make_event("a", 7, ["food"])}
    user = _make_user(attended_events=["gone", "a", "also-gone"])
    profile, max_km = build_profile(user, catalog)
    assert profile.as_dict() == {"food": 1.0}
    assert profile.attended_count == 1
    assert max_km == pytest.approx(7)


def test_only_stale_history_counts_as_no_history():
    profile, max_km = build_profile(_make_user(attended_events=["gone"]), {})
    assert profile.attended_count == 0
    assert max_km == 0


def test_points_sums_matching_weights():
    profile = PreferenceProfile({"music": 2.0, "art": 1.0})
    assert profile.points({"music", "art", "food"}) == 3.0
    assert profile.points({"food"}) == 0.0
    assert profile.points(set()) == 0.0


def test_to_text_orders_by_weight():
    text = PreferenceProfile({"art": 1.0, "music": 3.0}).to_text()
    assert text.index("music") < text.index("art")
    assert "weight: 3" in text
    assert "no preferences" in PreferenceProfile().to_text()
