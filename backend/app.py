"""
Lebensmittel-Check FastAPI application.

Endpoints:
    GET  /                  Health check
    POST /check             Classify a single ingredient or dish name
    POST /check/list        Classify a comma/semicolon/newline/"und" separated list
    GET  /dishes            Browse known dishes (optional substring filter ?q=)
    GET  /dishes/{name}     One dish plus its classification
    GET  /allergens         Allergen categories, safe exceptions and level legend
"""
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Dict, Optional
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load env vars
load_dotenv(Path(__file__).parent / ".env")

from checker.config import get_cors_allowed_origins, get_log_level, log_config
from checker.catalog.catalog_schema import RiskLevel
from checker.evaluation.food_checker import FoodChecker
from checker.models.classification import LEVEL_LABELS, NOT_RECOGNIZED_LABEL

# Logger
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

log_config()

# Initialize App
app = FastAPI(title="Lebensmittel-Check API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Catalog is loaded here; a malformed catalog raises CatalogError and the app never starts.
checker = FoodChecker()


# --- Request/Response Models ---
class CheckRequest(BaseModel):
    text: str


class CheckResponse(BaseModel):
    result: Optional[Dict] = None


class CheckListResponse(BaseModel):
    results: List[Dict]
    count: int


# --- Helper Functions ---

def _legend() -> List[Dict]:
    legend = [
        {"level": level.value, "label": LEVEL_LABELS[level]}
        for level in (RiskLevel.DEADLY, RiskLevel.DANGEROUS, RiskLevel.CAUTION, RiskLevel.SAFE)
    ]
    legend.append({"level": RiskLevel.SAFE.value, "label": NOT_RECOGNIZED_LABEL})
    return legend


# --- Endpoints ---

@app.get("/")
def health():
    return {
        "status": "ok",
        "catalog_version": checker.allergen_registry.get_version(),
        "categories": len(checker.allergen_registry),
        "dishes": len(checker.dish_registry),
    }


@app.post("/check", response_model=CheckResponse)
def check_single(request: CheckRequest):
    result = checker.classify_single(request.text)
    if result is not None:
        logger.info("CHECK text=%s level=%s label=%s", request.text[:60], result.level.value, result.label)
    return CheckResponse(result=result.to_dict() if result is not None else None)


@app.post("/check/list", response_model=CheckListResponse)
def check_list(request: CheckRequest):
    results = checker.classify_all(request.text)
    return CheckListResponse(results=[r.to_dict() for r in results], count=len(results))


@app.get("/dishes")
def list_dishes(q: str = Query("", description="Case-insensitive substring filter on dish names")):
    dishes = checker.dish_registry.search(q)
    return {"dishes": [d.to_dict() for d in dishes], "count": len(dishes)}


@app.get("/dishes/{dish_name}")
def get_dish(dish_name: str):
    dish = checker.dish_registry.get(dish_name)
    if dish is None:
        raise HTTPException(status_code=404, detail=f"Unknown dish: {dish_name}")
    result = checker.classify_single(dish.name)
    return {
        "dish": dish.to_dict(),
        "result": result.to_dict() if result is not None else None,
    }


@app.get("/allergens")
def list_allergens():
    categories = []
    for cat in checker.allergen_registry:
        d = cat.to_dict()
        d["level"] = cat.severity.value
        d["label"] = LEVEL_LABELS[cat.severity]
        categories.append(d)
    return {
        "catalog_version": checker.allergen_registry.get_version(),
        "categories": categories,
        "legend": _legend(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
