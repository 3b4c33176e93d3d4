#!/usr/bin/env python3
"""One-shot recommendation: rank catalog events for one user and print results."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.catalog import CatalogError, find_user, load_dataset
from src.config import settings
from src.geo import distance_km
from src.recommend.ranker import recommend
from src.recommend.similarity import nearby_user_candidates
from src.recommend.taste import build_profile


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("user_id")
    parser.add_argument("--data-dir", type=Path, default=settings.data_dir)
    parser.add_argument("--limit", type=int, default=settings.default_limit)
    parser.add_argument(
        "--nearby",
        action="store_true",
        help="fold in events attended by nearby users with shared interests",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    print(f"Loading dataset from {args.data_dir}...")
    try:
        data = load_dataset(args.data_dir)
    except CatalogError as e:
        print(f"Could not load dataset: {e}", file=sys.stderr)
        return 1
    print(f"Found {len(data.events)} events, {len(data.users)} users.")

    try:
        user = find_user(data.users, args.user_id)
    except KeyError:
        print(f"Unknown user: {args.user_id}", file=sys.stderr)
        return 1

    catalog = {e.id: e for e in data.events}
    profile, _ = build_profile(user, catalog)
    print(f"Preference profile:\n{profile.to_text()}\n")

    extra = None
    if args.nearby and not user.preferences:
        extra = nearby_user_candidates(
            user, data.users, profile.categories(), settings.nearby_user_radius_km
        )
        print(f"Nearby users contributed {len(extra)} candidate events: {', '.join(sorted(extra))}")

    try:
        events = recommend(user, data.events, data.similarity, args.limit, extra_candidates=extra)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"\nTop {len(events)} recommendations:\n")
    for i, event in enumerate(events, 1):
        categories = ", ".join(sorted(event.categories)) or "uncategorized"
        d = distance_km(user.location, event.location)
        print(
            f"{i:2d}. {event.name or event.id} ({event.id})\n"
            f"    {categories} | {d:.1f} km | popularity {event.popularity:.2f}\n"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
