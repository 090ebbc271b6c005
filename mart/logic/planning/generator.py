"""Deterministic sample week: one vegetable, one fruit and one salad per day."""
from typing import Dict, List, Iterable

from mart.domain.Product import Product
from mart.utilities.constants import DAYS, CATEGORY_VEGETABLES, CATEGORY_FRUITS, CATEGORY_SALADS

SLOT_CATEGORIES = (CATEGORY_VEGETABLES, CATEGORY_FRUITS, CATEGORY_SALADS)


def _pick(items: List[Product], index: int):
    # an empty category yields no item for the slot
    if not items:
        return None
    return items[index % max(len(items), 1)]


def generate_sample_weekly_plan(products: Iterable[Product]) -> Dict[str, List[str]]:
    """Return the legacy ``{day: [product_id, ...]}`` shape, cycling each category by day index."""
    products = list(products)
    by_category = {c: [p for p in products if p.category == c] for c in SLOT_CATEGORIES}
    plan: Dict[str, List[str]] = {}
    for index, day in enumerate(DAYS):
        picks = [_pick(by_category[c], index) for c in SLOT_CATEGORIES]
        plan[day] = [p.id for p in picks if p is not None]
    return plan


__all__ = ["generate_sample_weekly_plan"]
