"""Order domain entity: a completed checkout with its line items."""
from datetime import datetime
from typing import List, Optional, Dict, Any


def parse_order_timestamp(value) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp ('Z' suffix accepted). Returns None when unparseable."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


class OrderItem:
    def __init__(self, product_id: str, quantity: int = 1, price: float = 0):
        self.product_id = str(product_id)
        self.quantity = quantity
        self.price = price

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return OrderItem(d.get("productId", ""), d.get("quantity", 0) or 0, d.get("price", 0) or 0)

    def to_dict(self):
        return {"productId": self.product_id, "quantity": self.quantity, "price": self.price}


class Order:
    def __init__(self, id: str = "", user_id: str = "", ordered_at: str = "",
                 status: str = "Pending", total: float = 0, items: Optional[List[OrderItem]] = None,
                 subtotal: Optional[float] = None, delivery_fee: Optional[float] = None,
                 nutrition_summary: Optional[Dict[str, float]] = None):
        self.id = str(id)
        self.user_id = str(user_id)
        self.ordered_at = ordered_at
        self.status = status
        self.total = total
        self.items = items[:] if items else []
        self.subtotal = subtotal
        self.delivery_fee = delivery_fee
        self.nutrition_summary = dict(nutrition_summary) if nutrition_summary else None

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status}) - {len(self.items)} item(s) - Rs {self.total}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]):
        d = data if isinstance(data, dict) else {}
        return Order(
            id=d.get("id", ""),
            user_id=d.get("userId", ""),
            ordered_at=d.get("orderedAt", ""),
            status=d.get("status", "Pending"),
            total=d.get("total", 0) or 0,
            items=[OrderItem.from_dict(i) for i in d.get("items", []) or []],
            subtotal=d.get("subtotal"),
            delivery_fee=d.get("deliveryFee"),
            nutrition_summary=d.get("nutritionSummary"),
        )

    def to_dict(self):
        out = {
            "id": self.id,
            "userId": self.user_id,
            "orderedAt": self.ordered_at,
            "status": self.status,
            "total": self.total,
            "items": [i.to_dict() for i in self.items],
        }
        if self.subtotal is not None:
            out["subtotal"] = self.subtotal
        if self.delivery_fee is not None:
            out["deliveryFee"] = self.delivery_fee
        if self.nutrition_summary is not None:
            out["nutritionSummary"] = self.nutrition_summary
        return out
