from datetime import date as _date
from typing import Optional
import logging

from fastapi import FastAPI, Query, Request, Depends, HTTPException
from fastapi.responses import JSONResponse

from mealweek.api.dependencies import get_planner
from mealweek.api.routes import meals, recipes, transfer, seed
from mealweek.api.routes.meals import meal_view
from mealweek.domain.errors import NotFound, PersistenceUnavailable, ValidationError
from mealweek.events.web_observers import start as start_event_observers, get_events as get_web_events
from mealweek.logic.ordering.views import parse_day
from mealweek.logic.planner import Planner

# Logging
logger = logging.getLogger("mealweek_app")

# Initialize FastAPI app
app = FastAPI(title="Weekly Meal Planner API")

# Include routers
app.include_router(meals.router)
app.include_router(recipes.router)
app.include_router(transfer.router)
app.include_router(seed.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web change notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for planner events started")


# -------------------- Error mapping --------------------
@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFound)
async def _not_found(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(PersistenceUnavailable)
async def _persistence_unavailable(request: Request, exc: PersistenceUnavailable):
    logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


# -------------------- Week view --------------------
@app.get("/api/week")
def get_week(date: Optional[str] = Query(default=None), planner: Planner = Depends(get_planner)):
    """Monday-start week containing ``date`` (default today), each day with its ordered meals."""
    try:
        reference = parse_day(date) if date else _date.today()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date (expected YYYY-MM-DD)")
    days = planner.week(reference)
    for day in days:
        day["meals"] = [meal_view(m) for m in day["meals"]]
    return {"start": days[0]["date"], "end": days[-1]["date"], "days": days}


@app.get("/api/events")
def get_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)
