"""
Category catalog loading + shape validation.

Run: python -m pytest tests/test_catalog.py -v
"""

import json
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from creator_match.catalog import (
    CategoryDefinition,
    category_names,
    load_catalog,
    parse_catalog,
)
from creator_match.config import DEFAULT_CATALOG_PATH
from creator_match.errors import CatalogError


def _write(tmp_path, data, name="categories.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestParseCatalog:

    def test_valid_document(self):
        catalog = parse_catalog([
            {"category": "RPG", "keywords": ["rpg", "dragon"]},
            {"category": "Shooter", "keywords": []},
        ])
        assert catalog == (
            CategoryDefinition("RPG", ("rpg", "dragon")),
            CategoryDefinition("Shooter", ()),
        )

    def test_keywords_default_to_empty(self):
        assert parse_catalog([{"category": "Misc"}]) == (CategoryDefinition("Misc", ()),)

    @pytest.mark.parametrize("data", [
        {"category": "RPG"},
        "not a list",
        None,
    ])
    def test_rejects_non_list(self, data):
        with pytest.raises(CatalogError):
            parse_catalog(data)

    @pytest.mark.parametrize("entry", [
        "RPG",
        {"keywords": ["rpg"]},
        {"category": "   ", "keywords": []},
        {"category": 12, "keywords": []},
        {"category": "RPG", "keywords": "rpg"},
        {"category": "RPG", "keywords": ["rpg", 3]},
    ])
    def test_rejects_bad_entries(self, entry):
        with pytest.raises(CatalogError):
            parse_catalog([entry])

    def test_rejects_case_insensitive_duplicates(self):
        with pytest.raises(CatalogError, match="duplicate"):
            parse_catalog([{"category": "Gaming"}, {"category": "GAMING"}])

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_catalog(42)


class TestLoadCatalog:

    def test_loads_file(self, tmp_path):
        path = _write(tmp_path, [{"category": "Music", "keywords": ["music"]}])
        assert load_catalog(path) == (CategoryDefinition("Music", ("music",)),)

    def test_accepts_str_path(self, tmp_path):
        path = _write(tmp_path, [])
        assert load_catalog(str(path)) == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="cannot read"):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(path)

    def test_env_path(self, tmp_path, monkeypatch):
        path = _write(tmp_path, [{"category": "Comedy", "keywords": ["meme"]}])
        monkeypatch.setenv("CREATOR_CATEGORIES_PATH", str(path))
        assert load_catalog() == (CategoryDefinition("Comedy", ("meme",)),)

    def test_bundled_catalog(self, monkeypatch):
        monkeypatch.delenv("CREATOR_CATEGORIES_PATH", raising=False)
        catalog = load_catalog()
        assert catalog == load_catalog(DEFAULT_CATALOG_PATH)
        assert "gaming" in category_names(catalog)
        assert all(c.keywords for c in catalog)


def test_category_names_lowercased():
    catalog = (CategoryDefinition("Gaming"), CategoryDefinition("Beauty"))
    assert category_names(catalog) == {"gaming", "beauty"}
