"""Session-scoped planner state.

One StoreSession holds everything a single user's request needs (profile, catalog,
plan store, cart) and is passed explicitly to the reporting functions. Nothing here
is cached at module level, so two sessions served by one process never share state.
Targets are recomputed from the profile on every call.
"""
from typing import Dict, Any, List, Optional

from mart.domain.Cart import Cart
from mart.domain.Product import Product
from mart.domain.UserProfile import UserProfile
from mart.events.event_helpers import publish_plan_generated
from mart.infra.Cart_Repository import load_cart
from mart.infra.Plan_Repository import PlanRepository
from mart.infra.Product_Repository import get_all_products
from mart.infra.Profile_Repository import get_user_profile
from mart.infra.Storage import KeyValueStore
from mart.logic.planning.plan_store import PlanStore
from mart.logic.reporting.nutrition import aggregate_day, aggregate_week, index_products
from mart.logic.reporting.targets import comparison_targets, compute_targets
from mart.utilities.constants import DAYS, DEFAULT_DAY, SELECTED_DAY_STORAGE_KEY


class StoreSession:
    def __init__(self, profile: Optional[UserProfile], products: List[Product],
                 plan_store: PlanStore, cart: Optional[Cart] = None):
        self.profile = profile
        self.products = list(products)
        self.plan_store = plan_store
        self.cart = cart if cart is not None else Cart()

    @property
    def product_index(self) -> Dict[str, Product]:
        return index_products(self.products)

    def daily_targets(self) -> Optional[Dict[str, int]]:
        return compute_targets(self.profile) if self.profile else None

    def comparison_targets(self) -> Dict[str, int]:
        return comparison_targets(self.profile)

    def day_summary(self, day: Optional[str] = None) -> Dict[str, Any]:
        day = day or self.plan_store.selected_day
        return {
            'day': day,
            'totals': aggregate_day(self.plan_store.plan, day, self.product_index),
            'targets': self.comparison_targets(),
        }

    def week_summary(self) -> Dict[str, Any]:
        return {
            'totals': aggregate_week(self.plan_store.plan, self.product_index),
            'targets': self.comparison_targets(),
        }

    def seed_if_empty(self) -> bool:
        """Fill a completely empty plan with the sample week. Returns True when seeded."""
        if not self.plan_store.plan.is_empty() or not self.products:
            return False
        self.plan_store.auto_generate(self.products)
        publish_plan_generated(self.plan_store.plan)
        return True


def open_session(store: Optional[KeyValueStore] = None, seed: bool = True) -> StoreSession:
    """Load profile, catalog, stored plan, selected day and cart into a fresh session."""
    store = store or KeyValueStore()
    repo = PlanRepository(store)
    selected = store.get_json(SELECTED_DAY_STORAGE_KEY)
    plan_store = PlanStore(repo.get_week_plan(), selected if selected in DAYS else DEFAULT_DAY)
    session = StoreSession(get_user_profile(), get_all_products(), plan_store, load_cart(store))
    if seed and session.seed_if_empty():
        repo.save_week_plan(plan_store.plan)
    return session


def save_session(session: StoreSession, store: Optional[KeyValueStore] = None):
    """Persist the plan and the selected day. The cart is owned by the cart routes and never written here."""
    store = store or KeyValueStore()
    PlanRepository(store).save_week_plan(session.plan_store.plan)
    store.set_json(SELECTED_DAY_STORAGE_KEY, session.plan_store.selected_day)


__all__ = ['StoreSession', 'open_session', 'save_session']
