"""Cart aggregate: CartEntry items waiting for checkout."""
from typing import List, Dict, Optional


class CartEntry:
    def __init__(self, product_id: str, quantity: int = 1):
        self.product_id = str(product_id)
        self.quantity = int(quantity)

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Reads both the current {id, quantity} shape and full product snapshots.'''
        d = data if isinstance(data, dict) else {}
        pid = d.get("productId", d.get("id"))
        qty = d.get("quantity", 0)
        if pid is None or isinstance(qty, bool) or not isinstance(qty, (int, float)) or qty <= 0:
            return None
        return CartEntry(pid, int(qty))

    def to_dict(self):
        return {"id": self.product_id, "quantity": self.quantity}


class Cart:
    def __init__(self, items: Optional[List[CartEntry]] = None):
        self.items: List[CartEntry] = list(items) if items else []

    def _find(self, product_id: str) -> Optional[CartEntry]:
        for entry in self.items:
            if entry.product_id == str(product_id):
                return entry
        return None

    def add_item(self, product_id: str, quantity: int = 1):
        '''
        Adds quantity to the cart; an existing line is incremented instead of duplicated.
        '''
        if quantity <= 0:
            raise ValueError(f"Quantity must be positive: {quantity}")
        existing = self._find(product_id)
        if existing:
            existing.quantity += quantity
        else:
            self.items.append(CartEntry(product_id, quantity))

    def update_quantity(self, product_id: str, quantity: int):
        '''
        Sets the quantity of an existing line. Zero or less removes the line.
        '''
        if quantity <= 0:
            self.remove_item(product_id)
            return
        existing = self._find(product_id)
        if existing:
            existing.quantity = int(quantity)

    def remove_item(self, product_id: str):
        self.items = [e for e in self.items if e.product_id != str(product_id)]

    def clear(self):
        self.items = []

    def get_item_quantity(self, product_id: str) -> int:
        entry = self._find(product_id)
        return entry.quantity if entry else 0

    @property
    def total_items(self) -> int:
        return sum(e.quantity for e in self.items)

    def total_price(self, prices: Dict[str, float]) -> float:
        """Sum of price x quantity; lines whose product has no price contribute nothing."""
        return sum(prices.get(e.product_id, 0) * e.quantity for e in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def __str__(self) -> str:
        items_str = ", ".join(str(e) for e in self.items)
        return f"Cart [{items_str}]"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        entries = [CartEntry.from_dict(d) for d in data] if isinstance(data, list) else []
        return Cart([e for e in entries if e is not None])

    def to_dict(self):
        return [e.to_dict() for e in self.items]
