"""Weekly plan entities: PlanEntry (product id + quantity) grouped per weekday."""
from typing import Dict, List, Iterable, Optional
from mart.utilities.constants import DAYS


class PlanEntry:
    def __init__(self, product_id: str, quantity: int = 1):
        if quantity <= 0:
            raise ValueError(f"Plan entry quantity must be positive: {quantity}")
        self.product_id = str(product_id)
        self.quantity = int(quantity)

    def __eq__(self, other):
        if not isinstance(other, PlanEntry):
            return NotImplemented
        return self.product_id == other.product_id and self.quantity == other.quantity

    def __str__(self) -> str:
        return f"{self.product_id} x{self.quantity}"

    __repr__ = __str__

    def to_dict(self):
        return {"id": self.product_id, "quantity": self.quantity}


def _check_day(day: str) -> str:
    if day not in DAYS:
        raise ValueError(f"Unknown weekday: {day!r}")
    return day


class WeeklyPlan:
    """Seven day plans, each a list of entries with unique product ids."""

    def __init__(self, days: Optional[Dict[str, List[PlanEntry]]] = None):
        days = days or {}
        self.days: Dict[str, List[PlanEntry]] = {d: list(days.get(d, [])) for d in DAYS}

    @classmethod
    def empty(cls):
        return cls()

    def entries(self, day: str) -> List[PlanEntry]:
        return self.days[_check_day(day)]

    def quantity_of(self, day: str, product_id: str) -> int:
        for entry in self.entries(day):
            if entry.product_id == str(product_id):
                return entry.quantity
        return 0

    def set_quantity(self, day: str, product_id: str, quantity: int):
        '''Replace the quantity of a product on a day; quantity <= 0 removes the entry.'''
        pid = str(product_id)
        current = self.entries(day)
        if quantity <= 0:
            self.days[day] = [e for e in current if e.product_id != pid]
            return
        for entry in current:
            if entry.product_id == pid:
                entry.quantity = int(quantity)
                return
        current.append(PlanEntry(pid, quantity))

    def replace_day(self, day: str, entries: Iterable[PlanEntry]):
        self.days[_check_day(day)] = list(entries)

    def clear_day(self, day: str):
        self.days[_check_day(day)] = []

    def all_entries(self) -> List[PlanEntry]:
        """Every entry of the week, Monday first. Same product on two days appears twice."""
        return [entry for day in DAYS for entry in self.days[day]]

    def is_empty(self) -> bool:
        return not any(self.days[d] for d in DAYS)

    def __str__(self) -> str:
        return "; ".join(f"{d}: {self.days[d]}" for d in DAYS)

    __repr__ = __str__

    def to_dict(self):
        return {d: [e.to_dict() for e in self.days[d]] for d in DAYS}
