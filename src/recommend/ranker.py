from __future__ import annotations

from collections.abc import Iterable, Sequence

from src.config import settings
from src.log import get_logger
from src.models import Event, ScoredCandidate, SimilarityIndex, User
from src.recommend.expansion import RadiusExpansionController
from src.recommend.similarity import resolve_candidates
from src.recommend.taste import build_profile

logger = get_logger("ranker")


def select_top(scored: Iterable[ScoredCandidate], events: Sequence[Event], limit: int) -> list[Event]:
    """Highest score first; equal scores keep catalog order."""
    order: dict[str, int] = {}
    for i, e in enumerate(events):
        order.setdefault(e.id, i)
    ranked = sorted(scored, key=lambda c: (-c.score, order.get(c.event.id, len(order))))
    return [c.event for c in ranked[:limit]]


def recommend(
    user: User,
    events: Sequence[Event],
    similarity: SimilarityIndex,
    limit: int | None = None,
    extra_candidates: Iterable[str] | None = None,
    controller: RadiusExpansionController | None = None,
) -> list[Event]:
    """Rank catalog events for `user` and return at most `limit` of them.

    Fewer than `limit` come back when the catalog has nothing more to offer
    within the radius ceiling.
    """
    if limit is None:
        limit = settings.default_limit
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    catalog: dict[str, Event] = {}
    for e in events:
        catalog.setdefault(e.id, e)
    # first occurrence of a duplicated id wins everywhere
    unique = list(catalog.values())

    profile, max_attended = build_profile(user, catalog)
    candidates = resolve_candidates(user.attended_events, similarity)
    if extra_candidates:
        attended = set(user.attended_events)
        candidates.update(c for c in extra_candidates if c not in attended)

    if controller is None:
        controller = RadiusExpansionController()
    scored = controller.run(user, unique, profile, max_attended, candidates, limit)
    top = select_top(scored, unique, limit)

    logger.info(
        "recommendation_complete",
        user_id=user.id,
        profile_size=len(profile),
        candidates=len(candidates),
        passes=controller.passes,
        returned=len(top),
        limit=limit,
    )
    return top
