"""
Unit tests for core path resolution. Run from repo root:
  python -m pytest backend/tests/test_core_paths.py -v
"""
import pytest
from pathlib import Path


def test_backend_is_current_or_on_path():
    """Ensure tests run with backend on path so 'checker' resolves."""
    try:
        from checker import config
    except ImportError:
        pytest.skip("Run tests with backend on path: cd backend && python -m pytest ...")
        return
    assert config._BACKEND_DIR.is_dir()
    assert (config._BACKEND_DIR / "checker").is_dir()
    assert config._REPO_ROOT.is_dir()
    assert config._REPO_ROOT.name != "checker"


def test_allergen_catalog_path_resolution(monkeypatch):
    """Allergen catalog path is repo_root/data/allergens.json by default."""
    from checker.config import get_allergen_catalog_path, _REPO_ROOT
    monkeypatch.delenv("ALLERGEN_CATALOG_PATH", raising=False)
    path = get_allergen_catalog_path()
    assert path == _REPO_ROOT / "data" / "allergens.json"
    assert path.exists(), f"Expected {path} to exist"


def test_dish_catalog_path_resolution(monkeypatch):
    """Dish catalog path is repo_root/data/dishes.json by default."""
    from checker.config import get_dish_catalog_path, _REPO_ROOT
    monkeypatch.delenv("DISH_CATALOG_PATH", raising=False)
    path = get_dish_catalog_path()
    assert path == _REPO_ROOT / "data" / "dishes.json"
    assert path.exists(), f"Expected {path} to exist"


def test_catalog_paths_env_override(monkeypatch, tmp_path):
    from checker.config import get_allergen_catalog_path, get_dish_catalog_path
    monkeypatch.setenv("ALLERGEN_CATALOG_PATH", str(tmp_path / "a.json"))
    monkeypatch.setenv("DISH_CATALOG_PATH", str(tmp_path / "d.json"))
    assert get_allergen_catalog_path() == tmp_path / "a.json"
    assert get_dish_catalog_path() == tmp_path / "d.json"


def test_dish_min_match_length_default_and_override(monkeypatch):
    from checker.config import get_dish_min_match_length
    monkeypatch.delenv("DISH_MIN_MATCH_LENGTH", raising=False)
    assert get_dish_min_match_length() == 3
    monkeypatch.setenv("DISH_MIN_MATCH_LENGTH", "5")
    assert get_dish_min_match_length() == 5


def test_cors_origins_parsing(monkeypatch):
    from checker.config import get_cors_allowed_origins
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000, https://example.org ,")
    assert get_cors_allowed_origins() == ["http://localhost:3000", "https://example.org"]
    monkeypatch.delenv("CORS_ALLOWED_ORIGINS")
    assert get_cors_allowed_origins() == ["*"]


def test_registries_load_from_resolved_path():
    """Registries use config paths and load when files exist."""
    from checker.catalog import AllergenRegistry, DishRegistry
    allergens = AllergenRegistry()
    assert len(allergens) > 0
    assert allergens.get("eggs") is not None
    assert allergens.get_version() and len(allergens.get_version()) >= 1
    dishes = DishRegistry(allergen_registry=allergens)
    assert len(dishes) > 0
