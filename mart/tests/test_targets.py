import unittest

from mart.domain.UserProfile import UserProfile
from mart.logic.reporting.targets import compute_targets, comparison_targets, scale_targets


class TestComputeTargets(unittest.TestCase):
    def test_moderate_adult(self):
        profile = UserProfile(weight=70, age=30, activity_level="moderate")
        self.assertEqual(compute_targets(profile),
                         {"calories": 2240, "protein": 77, "fiber": 31, "iron": 18})

    def test_activity_multipliers(self):
        low = compute_targets(UserProfile(weight=60, age=25, activity_level="low"))
        high = compute_targets(UserProfile(weight=60, age=25, activity_level="high"))
        self.assertEqual(low["calories"], 1680)
        self.assertEqual(high["calories"], 2160)

    def test_unknown_activity_uses_moderate(self):
        profile = UserProfile(weight=50, age=20, activity_level="extreme")
        self.assertEqual(compute_targets(profile)["calories"], 1600)

    def test_iron_drops_at_fifty(self):
        self.assertEqual(compute_targets(UserProfile(weight=70, age=49))["iron"], 18)
        self.assertEqual(compute_targets(UserProfile(weight=70, age=50))["iron"], 10)
        self.assertEqual(compute_targets(UserProfile(weight=70, age=60, activity_level="low"))["iron"], 10)

    def test_half_rounds_up(self):
        # 65 * 1.1 = 71.5 -> 72
        self.assertEqual(compute_targets(UserProfile(weight=65, age=30))["protein"], 72)

    def test_zero_weight(self):
        self.assertEqual(compute_targets(UserProfile(weight=0, age=30)),
                         {"calories": 0, "protein": 0, "fiber": 25, "iron": 18})


class TestComparisonTargets(unittest.TestCase):
    def test_adds_fixed_vitamin_c_and_calcium(self):
        profile = UserProfile(weight=70, age=30, activity_level="moderate")
        self.assertEqual(comparison_targets(profile),
                         {"protein": 77, "fiber": 31, "vitaminC": 90, "calcium": 1000, "iron": 18})

    def test_guest_fallback(self):
        self.assertEqual(comparison_targets(None),
                         {"protein": 50, "fiber": 25, "vitaminC": 90, "calcium": 1000, "iron": 18})

    def test_scale(self):
        self.assertEqual(scale_targets({"protein": 50, "iron": 18}, 3), {"protein": 150, "iron": 54})


if __name__ == '__main__':
    unittest.main()
