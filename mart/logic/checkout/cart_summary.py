"""Cart pricing, nutrition summary and checkout.

Provides summarize_cart(cart, products, profile) and checkout(cart, products, user_id, now).
No payment is taken: checkout stores a Pending order and empties the cart.
"""
from datetime import datetime
from typing import Dict, Any, Optional

from mart.domain.Cart import Cart
from mart.domain.Order import Order, OrderItem
from mart.domain.UserProfile import UserProfile
from mart.logic.reporting.nutrition import aggregate_cart, index_products
from mart.logic.reporting.targets import comparison_targets
from mart.logic.reporting.weekly_report import REPORT_METRICS
from mart.utilities.config import FREE_DELIVERY_THRESHOLD, DELIVERY_FEE


def delivery_fee(subtotal: float) -> float:
    return 0 if subtotal >= FREE_DELIVERY_THRESHOLD else DELIVERY_FEE


def summarize_cart(cart: Cart, products, profile: Optional[UserProfile] = None) -> Dict[str, Any]:
    """Lines, prices, the 5-metric nutrition aggregate and the comparison targets."""
    index = index_products(products)
    prices = {pid: p.price for pid, p in index.items()}
    subtotal = cart.total_price(prices)
    fee = delivery_fee(subtotal)
    totals = aggregate_cart(cart, index)
    lines = []
    for entry in cart.items:
        product = index.get(entry.product_id)
        lines.append({
            'id': entry.product_id,
            'name': product.name if product else None,
            'unit': product.unit if product else None,
            'price': product.price if product else None,
            'quantity': entry.quantity,
            'available': product is not None,
        })
    return {
        'items': lines,
        'totalItems': cart.total_items,
        'subtotal': subtotal,
        'deliveryFee': fee,
        'total': subtotal + fee,
        'nutrition': {m: totals[m] for m in REPORT_METRICS},
        'targets': comparison_targets(profile),
    }


def checkout(cart: Cart, products, user_id: str, now: datetime) -> Order:
    """Build the order for the cart contents. Raises ValueError for an empty cart.

    Lines pointing at products that no longer exist are left out of the order.
    The caller persists the order and clears the cart.
    """
    if cart.is_empty():
        raise ValueError("Cart is empty")
    index = index_products(products)
    summary = summarize_cart(cart, index)
    items = [OrderItem(e.product_id, e.quantity, index[e.product_id].price)
             for e in cart.items if e.product_id in index]
    if not items:
        raise ValueError("Cart is empty")
    return Order(
        user_id=user_id,
        ordered_at=now.isoformat(),
        status="Pending",
        total=summary['total'],
        items=items,
        subtotal=summary['subtotal'],
        delivery_fee=summary['deliveryFee'],
        nutrition_summary=summary['nutrition'],
    )


__all__ = ['delivery_fee', 'summarize_cart', 'checkout']
