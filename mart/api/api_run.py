from fastapi import FastAPI, Query, HTTPException, Response, Depends
from datetime import datetime
from typing import Optional
import logging

from mart.infra.pdf_utils import generate_pdf_for_week
from mart.infra.Order_Repository import get_orders_for_user
from mart.infra.Plan_Repository import PlanRepository
from mart.infra.Storage import KeyValueStore
from mart.logic.planning.plan_store import filter_products
from mart.logic.planning.session import StoreSession, open_session, save_session
from mart.logic.reporting.dashboard import build_dashboard
from mart.logic.reporting.nutrition import primary_nutrient
from mart.events.event_helpers import publish_plan_generated
from mart.events.web_observers import start as start_event_observers, get_events as get_web_events
from mart.utilities.validators import (
    DayInput, PlanItemInput, PlanQuantityInput, SelectAllInput, RoutineInput
)

# Routers
from mart.api.routes import products, profile, cart

# Logging
logger = logging.getLogger("mart_app")

# Initialize FastAPI app
app = FastAPI(title="Mart Nutrition Planner API")

# Include routers
app.include_router(products.router)
app.include_router(profile.router)
app.include_router(cart.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for web polling when the app starts."""
    start_event_observers()
    logger.info("Web observers for storefront events started")


# -------------------- Helpers --------------------
def get_session() -> StoreSession:
    """One fresh session per request; no user state survives in process memory."""
    return open_session()


def _parse_now(now: Optional[str]) -> datetime:
    """Request clock: explicit ISO timestamp if given (used by tests and previews), else local time."""
    if not now:
        return datetime.now().astimezone()
    try:
        return datetime.fromisoformat(now.replace("Z", "+00:00"))
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid 'now' (expected ISO-8601)")


def _with_day(session: StoreSession, day: Optional[str]):
    if day:
        session.plan_store.select_day(day)


def _plan_view(session: StoreSession):
    store = session.plan_store
    index = session.product_index
    rows = []
    for entry in store.entries():
        product = index.get(entry.product_id)
        if product is None:
            continue
        rows.append({
            "id": product.id,
            "name": product.name,
            "category": product.category,
            "quantity": entry.quantity,
            "primaryNutrient": primary_nutrient(product),
        })
    return {
        **store.to_dict(),
        "items": rows,
        "summary": session.day_summary(),
    }


# -------------------- API: Weekly plan --------------------
@app.get("/api/plan")
def read_plan(session: StoreSession = Depends(get_session)):
    return _plan_view(session)


@app.post("/api/plan/select-day")
def select_day(payload: DayInput, session: StoreSession = Depends(get_session)):
    session.plan_store.select_day(payload.day)
    save_session(session)
    return _plan_view(session)


@app.post("/api/plan/quantity")
def set_plan_quantity(payload: PlanQuantityInput, session: StoreSession = Depends(get_session)):
    _with_day(session, payload.day)
    session.plan_store.set_quantity(payload.productId, payload.quantity)
    save_session(session)
    return _plan_view(session)


@app.post("/api/plan/add")
def add_plan_item(payload: PlanItemInput, session: StoreSession = Depends(get_session)):
    if payload.productId not in session.product_index:
        raise HTTPException(status_code=404, detail="Product not found")
    _with_day(session, payload.day)
    session.plan_store.add_one(payload.productId)
    save_session(session)
    return _plan_view(session)


@app.post("/api/plan/remove")
def remove_plan_item(payload: PlanItemInput, session: StoreSession = Depends(get_session)):
    _with_day(session, payload.day)
    session.plan_store.remove_one(payload.productId)
    save_session(session)
    return _plan_view(session)


@app.post("/api/plan/select-all")
def select_all_filtered(payload: SelectAllInput, session: StoreSession = Depends(get_session)):
    _with_day(session, payload.day)
    if payload.productIds is not None:
        index = session.product_index
        items = [pid for pid in payload.productIds if pid in index]
    else:
        items = filter_products(session.products, payload.category, payload.search)
    session.plan_store.select_all_filtered(items)
    save_session(session)
    logger.info("Selected %d filtered item(s) for %s", len(items), session.plan_store.selected_day)
    return _plan_view(session)


@app.post("/api/plan/clear-day")
def clear_day(payload: Optional[DayInput] = None, session: StoreSession = Depends(get_session)):
    _with_day(session, payload.day if payload else None)
    session.plan_store.clear_day()
    save_session(session)
    return _plan_view(session)


@app.post("/api/plan/reset-week")
def reset_week(session: StoreSession = Depends(get_session)):
    """Empty every day of the week. Like any empty plan, the next load reseeds the sample week."""
    session.plan_store.plan = PlanRepository(KeyValueStore()).reset_week()
    save_session(session)
    return _plan_view(session)


@app.post("/api/plan/auto-generate")
def auto_generate(session: StoreSession = Depends(get_session)):
    session.plan_store.auto_generate(session.products)
    save_session(session)
    publish_plan_generated(session.plan_store.plan)
    return _plan_view(session)


@app.get("/api/plan/summary")
def plan_summary(day: Optional[str] = Query(default=None), session: StoreSession = Depends(get_session)):
    """Selected-day and whole-week totals with the matching comparison targets."""
    try:
        _with_day(session, day)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "day": session.day_summary(),
        "week": session.week_summary(),
        "dailyTargets": session.daily_targets(),
    }


@app.get("/api/plan/routine")
def read_routine():
    return {"enabled": PlanRepository(KeyValueStore()).get_routine_enabled()}


@app.put("/api/plan/routine")
def write_routine(payload: RoutineInput):
    PlanRepository(KeyValueStore()).set_routine_enabled(payload.enabled)
    return {"enabled": payload.enabled}


@app.get("/api/plan/export_pdf")
def export_pdf(session: StoreSession = Depends(get_session)):
    owner = session.profile.name if session.profile else ""
    pdf_bytes = generate_pdf_for_week(session.plan_store.plan, session.products, owner)
    headers = {"Content-Disposition": 'attachment; filename="weekly_plan.pdf"'}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)


# -------------------- API: Dashboard --------------------
@app.get("/api/dashboard")
def dashboard(now: Optional[str] = Query(default=None), session: StoreSession = Depends(get_session)):
    current = _parse_now(now)
    # summary counters cover the whole order history, not one page of it
    orders = get_orders_for_user(session.profile.id, limit=None) if session.profile else []
    return build_dashboard(current, session.products, orders, session.profile)


# -------------------- API: Events --------------------
@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None)):
    return get_web_events(since)
