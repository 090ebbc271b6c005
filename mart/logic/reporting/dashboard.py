"""Dashboard data: product rails, order summary and the weekly report."""
import random
from datetime import datetime
from typing import Dict, Any, List, Optional

from mart.domain.Order import Order
from mart.domain.Product import Product
from mart.domain.UserProfile import UserProfile
from mart.logic.reporting.nutrition import index_products
from mart.logic.reporting.weekly_report import weekly_report_window
from mart.utilities.constants import DASHBOARD_RAIL_SIZE, ESTIMATED_SAVINGS, POPULARITY_JITTER


def trending_products(products: List[Product], rng: Optional[random.Random] = None) -> List[Product]:
    """Most popular products, shuffled a little on every call by random jitter."""
    rng = rng or random.Random()
    scored = [(p.popularity + rng.random() * POPULARITY_JITTER, p) for p in products]
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [p for _, p in scored[:DASHBOARD_RAIL_SIZE]]


def recommended_products(products: List[Product]) -> List[Product]:
    return [p for p in products
            if p.nutrition.protein >= 2 or p.nutrition.fiber >= 3][:DASHBOARD_RAIL_SIZE]


def weekly_summary(orders: List[Order], products) -> Dict[str, Any]:
    """Items ordered and average protein per ordered line across the given orders."""
    index = index_products(products)
    lines = [item for order in orders for item in order.items]
    protein = sum(index[i.product_id].nutrition.protein * i.quantity
                  for i in lines if i.product_id in index)
    return {
        'itemsOrdered': sum(i.quantity for i in lines),
        'estimatedSavings': ESTIMATED_SAVINGS,
        'avgProtein': round(protein / max(len(lines), 1), 1),
    }


def build_dashboard(now: datetime, products: List[Product], orders: List[Order],
                    profile: Optional[UserProfile] = None,
                    rng: Optional[random.Random] = None) -> Dict[str, Any]:
    return {
        'trending': [p.to_dict() for p in trending_products(products, rng)],
        'recommended': [p.to_dict() for p in recommended_products(products)],
        'weeklySummary': weekly_summary(orders, products),
        'weeklyReport': weekly_report_window(now, orders, products, profile),
    }


__all__ = ['trending_products', 'recommended_products', 'weekly_summary', 'build_dashboard']
