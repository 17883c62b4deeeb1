"""
Environment-driven scoring settings.

Run: python -m pytest tests/test_config.py -v
"""

from pathlib import Path
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from creator_match.config import (
    DEFAULT_CATALOG_PATH,
    ScoringConfig,
    catalog_path_from_env,
    scoring_config_from_env,
)
from creator_match.errors import ConfigError


class TestScoringConfigFromEnv:

    def test_defaults(self):
        config = scoring_config_from_env({})
        assert config == ScoringConfig(bio_weight=2, second_dominance_ratio=10, third_dominance_ratio=15)

    def test_overrides(self):
        config = scoring_config_from_env({
            "CATEGORY_BIO_WEIGHT": "3",
            "CATEGORY_SECOND_DOMINANCE_RATIO": " 8 ",
            "CATEGORY_THIRD_DOMINANCE_RATIO": "20",
        })
        assert config == ScoringConfig(bio_weight=3, second_dominance_ratio=8, third_dominance_ratio=20)

    def test_blank_values_ignored(self):
        assert scoring_config_from_env({"CATEGORY_BIO_WEIGHT": "  "}) == ScoringConfig()

    @pytest.mark.parametrize("raw", ["two", "1.5", "-1"])
    def test_rejects_bad_values(self, raw):
        with pytest.raises(ConfigError, match="CATEGORY_BIO_WEIGHT"):
            scoring_config_from_env({"CATEGORY_BIO_WEIGHT": raw})

    def test_reads_process_env(self, monkeypatch):
        monkeypatch.setenv("CATEGORY_THIRD_DOMINANCE_RATIO", "30")
        assert scoring_config_from_env().third_dominance_ratio == 30


class TestCatalogPathFromEnv:

    def test_default(self):
        assert catalog_path_from_env({}) == DEFAULT_CATALOG_PATH
        assert DEFAULT_CATALOG_PATH.exists()

    def test_override(self):
        assert catalog_path_from_env({"CREATOR_CATEGORIES_PATH": "/tmp/cats.json"}) == Path("/tmp/cats.json")
