"""Plan normalization.

Stored plans come in three historical encodings:
  - plain id lists, where a repeated id means a higher quantity: ``{"Monday": ["a", "a", "b"]}``
  - id/quantity objects: ``{"Monday": [{"id": "a", "quantity": 2}]}``
  - any mix of the two above

``normalize_plan`` folds all of them into a WeeklyPlan with one entry per product per
day. It never raises: anything unrecognized is skipped and the worst case is an
empty week.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from mart.domain.Plan import PlanEntry, WeeklyPlan
from mart.utilities.constants import DAYS

logger = logging.getLogger(__name__)


def _as_product_id(value: Any) -> Optional[str]:
    # bool is an int subclass; True is not a product id
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value if value else None
    if isinstance(value, int):
        return str(value)
    return None


def _as_quantity(value: Any) -> int:
    """Positive numbers are floored; a missing or unusable quantity counts as one."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 1
    if not math.isfinite(value) or value <= 0:
        return 1
    return int(math.floor(value))


def _normalize_day(day_value: Any) -> List[PlanEntry]:
    if not isinstance(day_value, list):
        return []
    quantity_by_id: Dict[str, int] = {}
    for element in day_value:
        pid = _as_product_id(element)
        if pid is not None:
            quantity_by_id[pid] = quantity_by_id.get(pid, 0) + 1
            continue
        if isinstance(element, dict):
            pid = _as_product_id(element.get("id"))
            if pid is None:
                continue
            quantity_by_id[pid] = quantity_by_id.get(pid, 0) + _as_quantity(element.get("quantity"))
    # fractional quantities below one floor to zero; such ids are not entries
    return [PlanEntry(pid, qty) for pid, qty in quantity_by_id.items() if qty > 0]


def normalize_plan(raw: Any) -> WeeklyPlan:
    """Return the canonical WeeklyPlan for any stored plan value."""
    if not isinstance(raw, dict):
        if raw is not None:
            logger.info("Ignoring stored plan of type %s", type(raw).__name__)
        return WeeklyPlan.empty()
    return WeeklyPlan({day: _normalize_day(raw.get(day)) for day in DAYS})


def serialize_plan(plan: WeeklyPlan) -> Dict[str, List[Dict[str, Any]]]:
    """JSON shape written to storage; normalize_plan(serialize_plan(p)) == p."""
    return plan.to_dict()


def legacy_to_plan(legacy: Any) -> WeeklyPlan:
    """Convert the generator's ``{day: [id, ...]}`` shape, giving every id quantity one."""
    if not isinstance(legacy, dict):
        return WeeklyPlan.empty()
    days = {}
    for day in DAYS:
        seen: Dict[str, PlanEntry] = {}
        for pid in legacy.get(day) or []:
            key = _as_product_id(pid)
            if key is not None and key not in seen:
                seen[key] = PlanEntry(key, 1)
        days[day] = list(seen.values())
    return WeeklyPlan(days)


__all__ = ["normalize_plan", "serialize_plan", "legacy_to_plan"]
