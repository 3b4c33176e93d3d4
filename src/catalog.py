"""JSON loading for events, users and the event-similarity index.

All validation happens here, through the pydantic models, so the
recommendation pipeline only ever sees well-formed input.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from src.log import get_logger
from src.models import Event, SimilarityIndex, User

logger = get_logger("catalog")

EVENTS_FILE = "events.json"
USERS_FILE = "users.json"
SIMILARITY_FILE = "event_similarity.json"

_events_adapter = TypeAdapter(list[Event])
_users_adapter = TypeAdapter(list[User])
_similarity_adapter = TypeAdapter(SimilarityIndex)


class CatalogError(ValueError):
    """A data file could not be read or failed validation."""


@dataclass
class Dataset:
    events: list[Event] = field(default_factory=list)
    users: list[User] = field(default_factory=list)
    similarity: SimilarityIndex = field(default_factory=dict)


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        logger.error("catalog_read_failed", path=str(path), error=str(e))
        raise CatalogError(f"{path}: {e}") from e
    except json.JSONDecodeError as e:
        logger.error("catalog_parse_failed", path=str(path), error=str(e))
        raise CatalogError(f"{path}: invalid JSON ({e})") from e


def _validate(adapter: TypeAdapter, data: Any, path: Path) -> Any:
    try:
        return adapter.validate_python(data)
    except ValidationError as e:
        logger.error("catalog_invalid", path=str(path), errors=e.error_count())
        raise CatalogError(f"{path}: {e}") from e


def load_events(path: str | Path) -> list[Event]:
    path = Path(path)
    events = _validate(_events_adapter, _read_json(path), path)
    logger.info("events_loaded", path=str(path), count=len(events))
    return events


def load_users(path: str | Path) -> list[User]:
    path = Path(path)
    users = _validate(_users_adapter, _read_json(path), path)
    logger.info("users_loaded", path=str(path), count=len(users))
    return users


def load_similarity(path: str | Path) -> SimilarityIndex:
    path = Path(path)
    index = _validate(_similarity_adapter, _read_json(path), path)
    logger.info("similarity_loaded", path=str(path), count=len(index))
    return index


def load_dataset(data_dir: str | Path) -> Dataset:
    data_dir = Path(data_dir)
    return Dataset(
        events=load_events(data_dir / EVENTS_FILE),
        users=load_users(data_dir / USERS_FILE),
        similarity=load_similarity(data_dir / SIMILARITY_FILE),
    )


def find_user(users: list[User], user_id: str) -> User:
    for user in users:
        if user.id == user_id:
            return user
    raise KeyError(user_id)
