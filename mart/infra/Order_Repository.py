"""Order history persistence."""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from mart.domain.Order import Order, parse_order_timestamp
from mart.infra.Mock_Database import load_db, save_db

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(order: Order):
    """Instant the order was placed, in UTC. Naive timestamps are read as UTC; unreadable ones sort last."""
    ts = parse_order_timestamp(order.ordered_at)
    if ts is None:
        return _OLDEST
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def get_orders_for_user(user_id: str, limit: Optional[int] = 10) -> List[Order]:
    """The user's orders, newest first, at most ``limit`` of them (all of them when limit is None)."""
    orders = [Order.from_dict(o) for o in load_db()["orders"] if str(o.get("userId")) == str(user_id)]
    orders.sort(key=_sort_key, reverse=True)
    if limit is None:
        return orders
    return orders[:max(limit, 0)]


def create_order(order: Order) -> Order:
    if not order.id:
        order.id = f"ord-{uuid4().hex[:8]}"
    db = load_db()
    db["orders"].append(order.to_dict())
    save_db(db)
    logger.info("Order %s stored for user %s (%d item(s))", order.id, order.user_id, len(order.items))
    return order


__all__ = ["get_orders_for_user", "create_order"]
