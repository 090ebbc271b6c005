"""Weekly nutrition report windowing.

The report covers Monday 00:00 up to "now" and closes itself on Sunday at 12:00,
without any background job: everything is derived from the ``now`` passed in.
Sunday belongs to the week that started the previous Monday.

After the Sunday-noon cutoff the window is closed: no orders count and the
targets are a full seven days' worth.
"""
import logging
from datetime import datetime, timedelta, date
from typing import Dict, Iterable, List, Optional

from mart.domain.Order import Order, parse_order_timestamp
from mart.domain.UserProfile import UserProfile
from mart.logic.reporting.nutrition import aggregate
from mart.logic.reporting.targets import comparison_targets, scale_targets
from mart.utilities.constants import REPORT_RESET_HOUR

logger = logging.getLogger(__name__)

REPORT_METRICS = ("vitaminC", "protein", "fiber", "calcium", "iron")
FULL_WEEK_DAYS = 7


class ReportWindow:
    def __init__(self, now: datetime):
        self.now = now
        self.monday = (now - timedelta(days=now.weekday())).replace(
            hour=0, minute=0, second=0, microsecond=0)
        self.sunday_noon = (self.monday + timedelta(days=6)).replace(hour=REPORT_RESET_HOUR)
        self.reset_applied = now >= self.sunday_noon

    @property
    def elapsed_days(self) -> int:
        if self.reset_applied:
            return FULL_WEEK_DAYS
        return max((self.now - self.monday) // timedelta(days=1) + 1, 1)

    def _order_day(self, order: Order) -> Optional[date]:
        ts = parse_order_timestamp(order.ordered_at)
        if ts is None:
            return None
        if ts.tzinfo is not None and self.now.tzinfo is not None:
            ts = ts.astimezone(self.now.tzinfo)
        return ts.date()

    def includes(self, order: Order) -> bool:
        """Date-only check of the order against [monday, now]; always False once reset."""
        if self.reset_applied:
            return False
        day = self._order_day(order)
        if day is None:
            logger.warning("Order %s has an unreadable date %r; excluded from report",
                           order.id, order.ordered_at)
            return False
        return self.monday.date() <= day <= self.now.date()

    @property
    def period_label(self) -> str:
        if self.reset_applied:
            return f"Week of {self.monday:%d %b} (reset after Sunday 12:00 PM)"
        return f"{self.monday:%a %d %b} - {self.now:%a %d %b}"


def orders_in_window(window: ReportWindow, orders: Iterable[Order]) -> List[Order]:
    return [o for o in orders if window.includes(o)]


def weekly_report_window(now: datetime, orders: Iterable[Order], products,
                         profile: Optional[UserProfile] = None) -> Dict:
    """Build {resetApplied, periodLabel, values, targets} for the dashboard report.

    ``now`` must be supplied by the caller; this function never reads the clock.
    """
    window = ReportWindow(now)
    included = orders_in_window(window, orders)
    totals = aggregate((item for order in included for item in order.items), products)
    daily = comparison_targets(profile)
    return {
        "resetApplied": window.reset_applied,
        "periodLabel": window.period_label,
        "elapsedDays": window.elapsed_days,
        "values": {m: totals[m] for m in REPORT_METRICS},
        "targets": {m: v for m, v in scale_targets(daily, window.elapsed_days).items()
                    if m in REPORT_METRICS},
    }


__all__ = ["ReportWindow", "orders_in_window", "weekly_report_window", "REPORT_METRICS"]
