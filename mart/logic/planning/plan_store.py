"""Weekly plan store: incremental edits of one session's plan, keyed by the selected day.

Every mutation works on the currently selected weekday unless a method says
otherwise. Quantities never reach zero inside the plan: setting a quantity of
zero or less removes the entry.
"""
import logging
from typing import Iterable, List, Optional, Union

from mart.domain.Plan import PlanEntry, WeeklyPlan
from mart.domain.Product import Product, normalize_category
from mart.logic.planning.generator import generate_sample_weekly_plan
from mart.logic.planning.normalizer import legacy_to_plan
from mart.utilities.constants import DAYS, DEFAULT_DAY

logger = logging.getLogger(__name__)


def _product_id(item: Union[Product, str, int]) -> str:
    return item.id if isinstance(item, Product) else str(item)


class PlanStore:
    def __init__(self, plan: Optional[WeeklyPlan] = None, selected_day: str = DEFAULT_DAY):
        self.plan = plan if plan is not None else WeeklyPlan.empty()
        self.selected_day = DEFAULT_DAY
        self.select_day(selected_day)

    def select_day(self, day: str):
        if day not in DAYS:
            raise ValueError(f"Unknown weekday: {day!r}")
        self.selected_day = day
        return self

    def entries(self, day: Optional[str] = None) -> List[PlanEntry]:
        return self.plan.entries(day or self.selected_day)

    def current_quantity(self, product_id) -> int:
        return self.plan.quantity_of(self.selected_day, _product_id(product_id))

    def set_quantity(self, product_id, quantity: int):
        '''Upserts the exact quantity (replace, not add). quantity <= 0 removes the entry.'''
        self.plan.set_quantity(self.selected_day, _product_id(product_id), int(quantity))
        return self

    def add_one(self, product_id):
        return self.set_quantity(product_id, self.current_quantity(product_id) + 1)

    def remove_one(self, product_id):
        return self.set_quantity(product_id, self.current_quantity(product_id) - 1)

    def select_all_filtered(self, items: Iterable[Union[Product, str]]):
        '''Overwrites the selected day with one entry per item.

        Items already planned keep their quantity, new ones start at 1. Anything that
        was planned but is not in ``items`` is dropped.
        '''
        existing = {e.product_id: e.quantity for e in self.entries()}
        entries: List[PlanEntry] = []
        seen = set()
        for item in items:
            pid = _product_id(item)
            if pid in seen:
                continue
            seen.add(pid)
            entries.append(PlanEntry(pid, existing.get(pid, 1)))
        self.plan.replace_day(self.selected_day, entries)
        return self

    def clear_day(self):
        self.plan.clear_day(self.selected_day)
        return self

    def auto_generate(self, products: Iterable[Product]):
        '''Replaces the whole week with the deterministic sample plan.'''
        self.plan = legacy_to_plan(generate_sample_weekly_plan(products))
        logger.info("Generated sample weekly plan")
        return self

    def to_dict(self):
        return {"selectedDay": self.selected_day, "plan": self.plan.to_dict()}


def filter_products(products: Iterable[Product], category: str = "All", search: str = "") -> List[Product]:
    """Planner picker filter: category ('All' keeps every category) and name substring."""
    term = (search or "").lower()
    wanted = None if category in ("All", "", None) else normalize_category(category)
    return [p for p in products if (wanted is None or p.category == wanted) and term in p.name.lower()]


__all__ = ["PlanStore", "filter_products"]
