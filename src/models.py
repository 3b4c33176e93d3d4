from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field

# event id -> ids of similar events (asymmetric)
SimilarityIndex = dict[str, list[str]]


class Coordinate(BaseModel):
    latitude: float = Field(
        ge=-90.0,
        le=90.0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("latitude", "lat"),
    )
    longitude: float = Field(
        ge=-180.0,
        le=180.0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("longitude", "lng", "lon"),
    )


class Event(BaseModel):
    """Catalog event. Read-only for the duration of a recommendation request."""

    id: str
    name: str | None = None
    location: Coordinate
    categories: set[str] = Field(default_factory=set)
    popularity: float = Field(ge=0.0, le=1.0)


class User(BaseModel):
    id: str
    location: Coordinate
    preferences: set[str] = Field(
        default_factory=set,
        validation_alias=AliasChoices("preferences", "explicit_preferences"),
    )
    attended_events: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("attended_events", "attendedEvents", "attended_event_ids"),
    )


class WeightPolicy(str, Enum):
    NO_PREFERENCE = "no_preference"
    PREFERENCE_NO_SIMILARITY = "preference_no_similarity"
    PREFERENCE_AND_SIMILARITY = "preference_and_similarity"


class ScoredCandidate(BaseModel):
    event: Event
    score: float
    distance_km: float
    policy: WeightPolicy
