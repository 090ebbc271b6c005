from typing import Final, Tuple, Dict

from mart.utilities.config import PLAN_STORAGE_VERSION

DAYS: Final[Tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
DEFAULT_DAY: Final[str] = "Monday"

# Product categories (canonical names as stored in db.json)
CATEGORY_VEGETABLES: Final[str] = "Vegetables"
CATEGORY_FRUITS: Final[str] = "Fruits"
CATEGORY_SALADS: Final[str] = "Salads"
CATEGORY_ICE_CREAMS: Final[str] = "Ice Creams"
CATEGORY_ALIASES: Final[Dict[str, str]] = {
    "vegetables": CATEGORY_VEGETABLES,
    "vegetable": CATEGORY_VEGETABLES,
    "fruits": CATEGORY_FRUITS,
    "fruit": CATEGORY_FRUITS,
    "salads": CATEGORY_SALADS,
    "salad": CATEGORY_SALADS,
    "ice creams": CATEGORY_ICE_CREAMS,
    "icecreams": CATEGORY_ICE_CREAMS,
    "icecream": CATEGORY_ICE_CREAMS,
}

# Calories per kg of bodyweight per day
ACTIVITY_MULTIPLIER: Final[Dict[str, int]] = {"low": 28, "moderate": 32, "high": 36}
DEFAULT_ACTIVITY_LEVEL: Final[str] = "moderate"

VITAMIN_C_TARGET_MG: Final[int] = 90
CALCIUM_TARGET_MG: Final[int] = 1000
# Approximation used when a product carries no calcium measurement
CALCIUM_FROM_POTASSIUM: Final[float] = 0.35

# Shown before a profile has been loaded
GUEST_TARGETS: Final[Dict[str, int]] = {
    "protein": 50, "fiber": 25, "vitaminC": VITAMIN_C_TARGET_MG,
    "calcium": CALCIUM_TARGET_MG, "iron": 18,
}

# Weekly report closes on Sunday at this hour
REPORT_RESET_HOUR: Final[int] = 12

ESTIMATED_SAVINGS: Final[int] = 260
DASHBOARD_RAIL_SIZE: Final[int] = 6
POPULARITY_JITTER: Final[float] = 8.0

# Keys in the local key-value store
PLAN_STORAGE_KEY: Final[str] = f"mart_weekly_plan_v{PLAN_STORAGE_VERSION}"
ROUTINE_STORAGE_KEY: Final[str] = "mart_weekly_routine_v1"
CART_STORAGE_KEY: Final[str] = "mart_cart_items_v2"
SELECTED_DAY_STORAGE_KEY: Final[str] = "mart_weekly_selected_day"
