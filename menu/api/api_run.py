from fastapi import (
    FastAPI,
    Query,
    HTTPException,
    Response,
)
from fastapi.staticfiles import StaticFiles

from contextlib import asynccontextmanager
from typing import Optional
import logging
import random

from menu.domain.Plan import WeeklyPlan
from menu.infra.Catalog_Repository import load_menu_items, CatalogError
from menu.infra.pdf_utils import generate_pdf_for_plan
from menu.logic.planning.week_planner import generate_week
from menu.logic.reporting.plan_summary import compute_plan_summary
from menu.utilities.config import (
    STATIC_DIR,
    DEFAULT_NUM_DAYS,
    DEFAULT_COMBOS_PER_DAY,
    DEFAULT_MIN_CALORIES,
    DEFAULT_MAX_CALORIES,
)
from menu.utilities.constants import DAY_NAMES
from menu.events.web_observers import start as start_event_observers, get_events as get_web_events

# Routers
from menu.api.routes import catalog

# Logging
logger = logging.getLogger("menu_app")


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    """Register event bus subscribers for planner alerts when the app starts."""
    start_event_observers()
    logger.info("Web observers for planner events started")
    yield


# Initialize FastAPI app
app = FastAPI(title="Combo Menu Planner API", lifespan=_lifespan)

# Include routers
app.include_router(catalog.router)


# -------------------- Helpers --------------------
def _build_plan(days: int, combos_per_day: int, min_calories: int, max_calories: int,
                seed: Optional[int]) -> WeeklyPlan:
    """Load the catalog and run the planner; map failures onto HTTP errors."""
    if min_calories > max_calories:
        raise HTTPException(status_code=400, detail="min_calories cannot be greater than max_calories")
    try:
        items = load_menu_items()
    except CatalogError as e:
        logger.error("Error loading menu file: %s", e)
        raise HTTPException(status_code=500, detail=f"Unable to load menu file: {e}")

    rng = random.Random(seed) if seed is not None else None
    try:
        return generate_week(items, days, combos_per_day, min_calories, max_calories, rng=rng)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# -------------------- API: Plan generation --------------------
@app.get("/generate-menu")
def generate_menu(days: int = Query(default=DEFAULT_NUM_DAYS, ge=1, le=len(DAY_NAMES)),
                  combos_per_day: int = Query(default=DEFAULT_COMBOS_PER_DAY, ge=1, le=20),
                  min_calories: int = Query(default=DEFAULT_MIN_CALORIES, ge=0),
                  max_calories: int = Query(default=DEFAULT_MAX_CALORIES, ge=0),
                  seed: Optional[int] = Query(default=None),
                  include_summary: bool = Query(default=False)):
    """Generate a multi-day combo plan.

    Response JSON structure:
        {
          "menu_plan": [
            { "day": "Monday",
              "combos": [ { combo_id, main, side, drink, calorie_count, popularity_score, reasoning } ] },
            ...
          ],
          "summary": {...}   # only with include_summary=true
        }
    """
    plan = _build_plan(days, combos_per_day, min_calories, max_calories, seed)
    payload = plan.to_dict()
    if include_summary:
        payload["summary"] = compute_plan_summary(plan, combos_per_day)
    return payload


@app.get("/export_pdf")
def export_pdf(days: int = Query(default=DEFAULT_NUM_DAYS, ge=1, le=len(DAY_NAMES)),
               combos_per_day: int = Query(default=DEFAULT_COMBOS_PER_DAY, ge=1, le=20),
               min_calories: int = Query(default=DEFAULT_MIN_CALORIES, ge=0),
               max_calories: int = Query(default=DEFAULT_MAX_CALORIES, ge=0),
               seed: Optional[int] = Query(default=None)):
    plan = _build_plan(days, combos_per_day, min_calories, max_calories, seed)
    pdf_bytes = generate_pdf_for_plan(plan)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="combo_menu_plan.pdf"'},
    )


# -------------------- API: Alerts --------------------
@app.get('/api/planner/alerts')
def api_planner_alerts(since: Optional[int] = Query(default=None, ge=0)):
    """Recent planner shortfall events (poll with since=<next_cursor>)."""
    return get_web_events(since)


@app.get('/health')
def health():
    return {"status": "ok"}


# Static page last so the API routes above take precedence over "/"
app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")
