import logging
from typing import Optional

from mart.domain.Plan import WeeklyPlan
from mart.infra.Storage import KeyValueStore
from mart.logic.planning.normalizer import normalize_plan, serialize_plan
from mart.utilities.constants import PLAN_STORAGE_KEY, ROUTINE_STORAGE_KEY

logger = logging.getLogger(__name__)


class PlanRepository:
    """Weekly plan persistence under a versioned key.

    A plan saved under an older key version is simply not found, so it loads as an
    empty week. Whatever shape is found under the current key goes through
    normalize_plan on the way in.
    """

    def __init__(self, store: Optional[KeyValueStore] = None, key: str = PLAN_STORAGE_KEY):
        self.store = store or KeyValueStore()
        self.key = key

    def get_week_plan(self) -> WeeklyPlan:
        return normalize_plan(self.store.get_json(self.key))

    def save_week_plan(self, plan: WeeklyPlan) -> None:
        # last write wins; concurrent sessions are not reconciled
        self.store.set_json(self.key, serialize_plan(plan))

    def reset_week(self) -> WeeklyPlan:
        """Empty all seven days and persist the blank week."""
        plan = WeeklyPlan.empty()
        self.save_week_plan(plan)
        logger.info("Weekly plan reset")
        return plan

    def get_routine_enabled(self) -> bool:
        return self.store.get_json(ROUTINE_STORAGE_KEY) is True

    def set_routine_enabled(self, enabled: bool) -> None:
        self.store.set_json(ROUTINE_STORAGE_KEY, bool(enabled))
