# creator_match/config.py
"""
Environment-driven settings.

Reads a project-root .env (if present) the same way the rest of the
tooling does, then exposes small builders so nothing touches os.environ
at scoring time:

    catalog_path_from_env()   -> Path to the category catalog JSON
    scoring_config_from_env() -> ScoringConfig with any overrides applied

Recognised variables:
    CREATOR_CATEGORIES_PATH
    CATEGORY_BIO_WEIGHT
    CATEGORY_SECOND_DOMINANCE_RATIO
    CATEGORY_THIRD_DOMINANCE_RATIO
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
import os

from dotenv import load_dotenv

from .errors import ConfigError

ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "categories.json"

# Existing environment wins over .env values
load_dotenv(ROOT / ".env")


@dataclass(frozen=True)
class ScoringConfig:
    """
    Tunable constants for category scoring.

    bio_weight:              added once per keyword found in the bio
    second_dominance_ratio:  top > 2nd * ratio  -> keep only the top category
    third_dominance_ratio:   top > 3rd * ratio  -> keep only the top two
    """
    bio_weight: int = 2
    second_dominance_ratio: int = 10
    third_dominance_ratio: int = 15


_ENV_FIELDS = {
    "CATEGORY_BIO_WEIGHT": "bio_weight",
    "CATEGORY_SECOND_DOMINANCE_RATIO": "second_dominance_ratio",
    "CATEGORY_THIRD_DOMINANCE_RATIO": "third_dominance_ratio",
}


def _parse_non_negative_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


def scoring_config_from_env(environ: Optional[Mapping[str, str]] = None) -> ScoringConfig:
    env = os.environ if environ is None else environ
    overrides = {}
    for name, field_name in _ENV_FIELDS.items():
        raw = env.get(name)
        if raw is None or not raw.strip():
            continue
        overrides[field_name] = _parse_non_negative_int(name, raw)
    return ScoringConfig(**overrides)


def catalog_path_from_env(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ
    raw = (env.get("CREATOR_CATEGORIES_PATH") or "").strip()
    return Path(raw) if raw else DEFAULT_CATALOG_PATH
