from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from casaluna.brand.config import DEFAULT_HIGH_SEASON_PERIODS
from casaluna.core.config import Settings
from casaluna.models.pricing import HighSeasonPeriod
from casaluna.models.schemas import HighSeasonPeriodConfig

BASE_DIR = Path(__file__).resolve().parents[2]


class SeasonConfigError(ValueError):
    """High season file is missing or malformed."""


def parse_periods(raw: Iterable[dict[str, Any]]) -> tuple[HighSeasonPeriod, ...]:
    periods = []
    for index, entry in enumerate(raw):
        try:
            periods.append(HighSeasonPeriodConfig.model_validate(entry).to_period())
        except ValidationError as exc:
            raise SeasonConfigError(f"invalid high season period #{index}: {exc}") from exc
    return tuple(periods)


DEFAULT_PERIODS = parse_periods(DEFAULT_HIGH_SEASON_PERIODS)


def resolve_season_path(raw_path: str) -> Path:
    path = Path(raw_path).expanduser()
    if path.is_absolute():
        return path
    return (BASE_DIR / path).resolve()


def load_high_season_periods(path: Path) -> tuple[HighSeasonPeriod, ...]:
    """Read a JSON list of periods. Order is kept as written."""
    if not path.exists():
        raise SeasonConfigError(f"high season file not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SeasonConfigError(f"high season file is not valid JSON: {path}") from exc
    if not isinstance(raw, list):
        raise SeasonConfigError(f"high season file must hold a list of periods: {path}")
    return parse_periods(raw)


@lru_cache(maxsize=1)
def get_high_season_periods() -> tuple[HighSeasonPeriod, ...]:
    settings = Settings()
    if not settings.high_season_path:
        return DEFAULT_PERIODS
    return load_high_season_periods(resolve_season_path(settings.high_season_path))
