from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUGGESTION_COUNT = 5
MAX_SUGGESTIONS_ENV = "ADVENTURE_MAX_SUGGESTIONS"
WORLD_PATH_ENV = "ADVENTURE_WORLD"


def get_config_paths() -> dict[str, Path]:
    """Return canonical on-disk locations for packaged worlds."""

    adventure_core = Path(__file__).resolve().parents[1]
    data_dir = adventure_core / "data"

    override = os.getenv(WORLD_PATH_ENV)
    default_world = Path(override) if override else data_dir / "test_world.json"

    return {
        "data_dir": data_dir,
        "test_world": data_dir / "test_world.json",
        "default_world": default_world,
    }


def get_max_suggestion_count() -> int:
    """Read the suggestion cap from the environment, falling back to the default."""

    raw = os.getenv(MAX_SUGGESTIONS_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_SUGGESTION_COUNT
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(
            "Ignoring non-integer %s=%r; using %d",
            MAX_SUGGESTIONS_ENV,
            raw,
            DEFAULT_MAX_SUGGESTION_COUNT,
        )
        return DEFAULT_MAX_SUGGESTION_COUNT
    if value < 1:
        return DEFAULT_MAX_SUGGESTION_COUNT
    return value
