"""Settings for the dashboard catalog, read from environment variables."""

import os
import logging
from functools import lru_cache
from typing import Optional, Literal
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    seed_sample_data: bool = True
    search_limit: int = Field(5, ge=1)
    featured_limit: int = Field(3, ge=1)
    recent_limit: int = Field(4, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    # "vocabulary" aligns query terms with each stored vector's own vocabulary,
    # "positional" compares raw slot positions of the zero-padded vectors
    similarity_alignment: Literal["vocabulary", "positional"] = "vocabulary"


def _env(name: str) -> Optional[str]:
    value = os.getenv(f"CATALOG_{name}")
    if value is None or value.strip() == "":
        return None
    return value.strip()


def load_settings() -> Settings:
    """
    Build settings from CATALOG_* environment variables, falling back to defaults
    for anything unset.
    """
    log_level = _env("LOG_LEVEL")
    raw = {
        "seed_sample_data": _env("SEED_SAMPLE_DATA"),
        "search_limit": _env("SEARCH_LIMIT"),
        "featured_limit": _env("FEATURED_LIMIT"),
        "recent_limit": _env("RECENT_LIMIT"),
        "log_level": log_level.upper() if log_level else None,
        "host": _env("HOST"),
        "port": _env("PORT"),
        "similarity_alignment": _env("SIMILARITY_ALIGNMENT"),
    }
    values = {key: value for key, value in raw.items() if value is not None}

    try:
        return Settings(**values)
    except ValidationError as e:
        logger.error(f"Invalid catalog settings in environment: {str(e)}")
        raise


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
