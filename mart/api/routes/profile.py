from fastapi import APIRouter, HTTPException, Query

from mart.infra.Order_Repository import get_orders_for_user
from mart.infra.Profile_Repository import get_user_profile, update_user_profile
from mart.logic.reporting.targets import compute_targets, comparison_targets
from mart.utilities.validators import ProfileUpdateInput

router = APIRouter(tags=["profile"])


def _require_profile():
    profile = get_user_profile()
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return profile


@router.get("/api/profile")
def read_profile():
    return _require_profile().to_dict()


@router.put("/api/profile")
def edit_profile(payload: ProfileUpdateInput):
    current = _require_profile()
    try:
        updated = update_user_profile(payload.changes(), current.id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "Profile updated successfully", "user": updated.to_dict()}


@router.get("/api/profile/targets")
def read_targets():
    """Daily targets, plus the five-metric set with the fixed vitamin C / calcium values."""
    profile = _require_profile()
    return {"daily": compute_targets(profile), "comparison": comparison_targets(profile)}


@router.get("/api/orders")
def list_orders(limit: int = Query(default=10, ge=1, le=100)):
    profile = _require_profile()
    orders = get_orders_for_user(profile.id, limit)
    return {"count": len(orders), "orders": [o.to_dict() for o in orders]}
