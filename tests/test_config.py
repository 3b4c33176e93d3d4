from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)  # no stray .env
    s = Settings()
    assert s.fallback_radius_km == 25.0
    assert s.history_radius_factor == 1.25
    assert s.radius_growth_factor == 1.5
    assert s.radius_ceiling_km == 4500.0
    assert s.default_limit == 5
    assert s.data_dir == Path("data")


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FALLBACK_RADIUS_KM", "10")
    monkeypatch.setenv("RADIUS_CEILING_KM", "1000")
    s = Settings()
    assert s.fallback_radius_km == 10.0
    assert s.radius_ceiling_km == 1000.0


@pytest.mark.parametrize(
    "name,value",
    [
        ("RADIUS_GROWTH_FACTOR", "1.0"),
        ("FALLBACK_RADIUS_KM", "0"),
        ("MIN_EXPANSION_RADIUS_KM", "-1"),
        ("DEFAULT_LIMIT", "0"),
    ],
)
def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
