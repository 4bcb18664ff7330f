"""
Paths and centralized configuration.
All resolution relative to the backend directory; environment variables override defaults.
"""
import os
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Repo root: backend/checker/config.py -> parent=checker, parent.parent=backend, parent.parent.parent=repo
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_REPO_ROOT = _BACKEND_DIR.parent

# --- Data paths ---
def get_allergen_catalog_path() -> Path:
    override = os.environ.get("ALLERGEN_CATALOG_PATH", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "data" / "allergens.json"

def get_dish_catalog_path() -> Path:
    override = os.environ.get("DISH_CATALOG_PATH", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "data" / "dishes.json"

# --- Matching ---
def get_dish_min_match_length() -> int:
    """Shortest string allowed to take part in a dish containment match."""
    return int(os.environ.get("DISH_MIN_MATCH_LENGTH", "3"))

# --- Service ---
def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()

def get_cors_allowed_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOWED_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]

# --- Startup logging ---
def log_config() -> None:
    logger.info(
        "CONFIG: allergens=%s (exists=%s) dishes=%s (exists=%s) dish_min_match_length=%d "
        "log_level=%s cors_origins=%s",
        get_allergen_catalog_path(), get_allergen_catalog_path().exists(),
        get_dish_catalog_path(), get_dish_catalog_path().exists(),
        get_dish_min_match_length(), get_log_level(), get_cors_allowed_origins(),
    )
