"""Nutrition aggregation logic.

One summation rule shared by the cart, a single planner day and the whole week:
``total[m] += value(product, m) * quantity`` for every metric ``m``. Calcium falls back
to ``potassium * 0.35`` when a product has no calcium measurement, and missing
optional nutrients count as zero.
"""
import logging
from typing import Dict, Any, List, Iterable, Tuple, Mapping, Union

from mart.domain.Product import Product, NutrientProfile
from mart.domain.Plan import WeeklyPlan

logger = logging.getLogger(__name__)

METRICS = ("calories", "protein", "fiber", "vitaminC", "calcium", "iron")

ProductIndex = Mapping[str, Product]


def index_products(products: Union[Iterable[Product], ProductIndex]) -> Dict[str, Product]:
    if isinstance(products, Mapping):
        return dict(products)
    return {p.id: p for p in products}


def _empty_totals() -> Dict[str, float]:
    totals: Dict[str, Any] = {m: 0 for m in METRICS}
    totals["totalQuantity"] = 0
    return totals


def aggregate_items(items: Iterable[Tuple[Product, int]]) -> Dict[str, float]:
    """Sum nutrients over resolved (product, quantity) pairs."""
    totals = _empty_totals()
    for product, quantity in items:
        nutrition = product.nutrition
        for metric in METRICS:
            totals[metric] += nutrition.value(metric) * quantity
        totals["totalQuantity"] += quantity
    return totals


def _entry_fields(entry) -> Tuple[str, int]:
    if isinstance(entry, dict):
        return str(entry.get("productId", entry.get("id", ""))), entry.get("quantity", 0) or 0
    return entry.product_id, entry.quantity


def resolve_entries(entries: Iterable[Any], products) -> List[Tuple[Product, int]]:
    """Pair entries with their products. Stale product ids are skipped."""
    index = index_products(products)
    resolved = []
    for entry in entries:
        pid, quantity = _entry_fields(entry)
        product = index.get(pid)
        if product is None:
            logger.debug("Skipping stale product reference %s", pid)
            continue
        resolved.append((product, quantity))
    return resolved


def aggregate(entries: Iterable[Any], products) -> Dict[str, float]:
    """Totals for PlanEntry/CartEntry/OrderItem objects (or their dicts) against a catalog.

    Returns {calories, protein, fiber, vitaminC, calcium, iron, totalQuantity}.
    """
    return aggregate_items(resolve_entries(entries, products))


def aggregate_day(plan: WeeklyPlan, day: str, products) -> Dict[str, float]:
    return aggregate(plan.entries(day), products)


def aggregate_week(plan: WeeklyPlan, products) -> Dict[str, float]:
    # flatten first, no cross-day deduplication
    return aggregate(plan.all_entries(), products)


def aggregate_cart(cart, products) -> Dict[str, float]:
    return aggregate(cart.items, products)


def compute_week_nutrition(plan: WeeklyPlan, products) -> Dict[str, Any]:
    """Per-day totals plus the whole-week totals for a plan.

    Returns structure:
    {
      'days': { 'Monday': {calories, protein, fiber, vitaminC, calcium, iron, totalQuantity}, ... },
      'week_totals': {calories, protein, fiber, vitaminC, calcium, iron, totalQuantity}
    }
    """
    index = index_products(products)
    return {
        'days': {day: aggregate(entries, index) for day, entries in plan.days.items()},
        'week_totals': aggregate_week(plan, index),
    }


def top_nutrients(nutrition: NutrientProfile, limit: int = 4) -> List[Dict[str, Any]]:
    """Largest raw values first.

    Values in kcal, g and mg are compared as plain numbers, so this is an ordering by
    magnitude, not by nutritional importance.
    """
    nutrients = [
        {"label": "Calories", "value": nutrition.calories, "unit": "kcal"},
        {"label": "Protein", "value": nutrition.protein, "unit": "g"},
        {"label": "Fiber", "value": nutrition.fiber, "unit": "g"},
        {"label": "Iron", "value": nutrition.iron, "unit": "mg"},
        {"label": "Potassium", "value": nutrition.potassium or 0, "unit": "mg"},
        {"label": "Vitamin C", "value": nutrition.vitamin_c or 0, "unit": "mg"},
    ]
    nutrients.sort(key=lambda n: n["value"], reverse=True)
    return [n for n in nutrients[:limit] if n["value"] > 0]


def primary_nutrient(product: Product) -> str:
    """Short label of the nutrient a product is best known for, e.g. 'Vit C 53mg'."""
    vitamin_c = product.nutrition.vitamin_c or 0
    iron = product.nutrition.iron
    calcium = product.nutrition.calcium_mg()
    if vitamin_c >= iron and vitamin_c >= calcium / 20:
        return f"Vit C {vitamin_c:.0f}mg"
    if calcium / 20 >= iron:
        return f"Calcium {calcium:.0f}mg"
    return f"Iron {iron:.1f}mg"


__all__ = [
    "METRICS", "index_products", "aggregate_items", "resolve_entries", "aggregate",
    "aggregate_day", "aggregate_week", "aggregate_cart", "compute_week_nutrition",
    "top_nutrients", "primary_nutrient",
]
