"""Daily recommended intake derived from a user profile."""
import math
from typing import Dict, Optional

from mart.domain.UserProfile import UserProfile
from mart.utilities.constants import (
    ACTIVITY_MULTIPLIER, DEFAULT_ACTIVITY_LEVEL, VITAMIN_C_TARGET_MG, CALCIUM_TARGET_MG,
    GUEST_TARGETS,
)

__all__ = ["compute_targets", "comparison_targets", "scale_targets"]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_targets(profile: UserProfile) -> Dict[str, int]:
    """Return {calories, protein, fiber, iron} for one day.

    vitaminC and calcium are fixed constants and are not part of this result;
    see comparison_targets.
    """
    weight = profile.weight or 0
    multiplier = ACTIVITY_MULTIPLIER.get(profile.activity_level,
                                         ACTIVITY_MULTIPLIER[DEFAULT_ACTIVITY_LEVEL])
    return {
        "calories": _round_half_up(weight * multiplier),
        "protein": _round_half_up(weight * 1.1),
        "fiber": _round_half_up(25 + weight * 0.08),
        "iron": 18 if (profile.age or 0) < 50 else 10,
    }


def comparison_targets(profile: Optional[UserProfile]) -> Dict[str, int]:
    """Five-metric daily targets (protein, fiber, vitaminC, calcium, iron) for progress rings."""
    if profile is None:
        return dict(GUEST_TARGETS)
    base = compute_targets(profile)
    return {
        "protein": base["protein"],
        "fiber": base["fiber"],
        "vitaminC": VITAMIN_C_TARGET_MG,
        "calcium": CALCIUM_TARGET_MG,
        "iron": base["iron"],
    }


def scale_targets(targets: Dict[str, float], days: int) -> Dict[str, float]:
    return {k: v * days for k, v in targets.items()}
