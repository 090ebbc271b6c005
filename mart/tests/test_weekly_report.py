import unittest
from datetime import datetime, timezone, timedelta

from mart.domain.Order import Order, OrderItem
from mart.domain.Product import NutrientProfile, Product
from mart.domain.UserProfile import UserProfile
from mart.logic.reporting.weekly_report import ReportWindow, weekly_report_window

GUAVA = Product("fruit-guava", "Guava", "Fruits", 70, nutrition=NutrientProfile(
    calories=68, protein=2.6, fiber=5.4, iron=0.3, calcium=18, potassium=417, vitamin_c=228))
PROFILE = UserProfile("u-1", "Test", weight=70, age=30, activity_level="moderate")


def _order(oid, ordered_at, qty=1):
    return Order(oid, "u-1", ordered_at, "Delivered", 70 * qty, [OrderItem("fruit-guava", qty, 70)])


class TestReportWindow(unittest.TestCase):
    # 2026-10-12 is a Monday
    def test_monday_start(self):
        w = ReportWindow(datetime(2026, 10, 15, 18, 30))
        self.assertEqual(w.monday, datetime(2026, 10, 12))
        self.assertEqual(w.sunday_noon, datetime(2026, 10, 18, 12))

    def test_sunday_belongs_to_previous_monday(self):
        w = ReportWindow(datetime(2026, 10, 18, 9, 0))
        self.assertEqual(w.monday, datetime(2026, 10, 12))

    def test_reset_after_sunday_noon(self):
        self.assertTrue(ReportWindow(datetime(2026, 10, 18, 13, 0)).reset_applied)
        self.assertTrue(ReportWindow(datetime(2026, 10, 18, 12, 0)).reset_applied)
        self.assertFalse(ReportWindow(datetime(2026, 10, 18, 11, 59)).reset_applied)

    def test_elapsed_days(self):
        self.assertEqual(ReportWindow(datetime(2026, 10, 12, 0, 0)).elapsed_days, 1)
        self.assertEqual(ReportWindow(datetime(2026, 10, 12, 23, 59)).elapsed_days, 1)
        self.assertEqual(ReportWindow(datetime(2026, 10, 16, 10, 0)).elapsed_days, 5)
        self.assertEqual(ReportWindow(datetime(2026, 10, 18, 11, 59)).elapsed_days, 7)
        self.assertEqual(ReportWindow(datetime(2026, 10, 18, 13, 0)).elapsed_days, 7)

    def test_new_week_after_midnight(self):
        w = ReportWindow(datetime(2026, 10, 19, 0, 5))
        self.assertFalse(w.reset_applied)
        self.assertEqual(w.monday, datetime(2026, 10, 19))

    def test_period_labels(self):
        self.assertEqual(ReportWindow(datetime(2026, 10, 15, 8)).period_label, "Mon 12 Oct - Thu 15 Oct")
        self.assertEqual(ReportWindow(datetime(2026, 10, 18, 14)).period_label,
                         "Week of 12 Oct (reset after Sunday 12:00 PM)")

    def test_includes_is_date_only(self):
        w = ReportWindow(datetime(2026, 10, 14, 8, 0))
        # later the same day still counts
        self.assertTrue(w.includes(_order("a", "2026-10-14T21:00:00")))
        self.assertTrue(w.includes(_order("b", "2026-10-12T00:00:00Z")))
        self.assertFalse(w.includes(_order("c", "2026-10-11T23:59:00")))
        self.assertFalse(w.includes(_order("d", "2026-10-15T07:00:00")))

    def test_aware_timestamps_use_now_timezone(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        w = ReportWindow(datetime(2026, 10, 14, 8, 0, tzinfo=ist))
        # Sunday 20:00 UTC is already Monday in IST
        self.assertTrue(w.includes(_order("a", "2026-10-11T20:00:00Z")))

    def test_unreadable_date_is_excluded(self):
        w = ReportWindow(datetime(2026, 10, 14, 8, 0))
        with self.assertLogs("mart.logic.reporting.weekly_report", level="WARNING"):
            self.assertFalse(w.includes(_order("bad", "yesterday")))


class TestWeeklyReport(unittest.TestCase):
    def setUp(self):
        self.orders = [
            _order("this-week", "2026-10-13T09:15:00Z", qty=2),
            _order("last-week", "2026-10-06T11:05:00Z", qty=5),
        ]

    def test_open_window(self):
        report = weekly_report_window(datetime(2026, 10, 16, 10, 0), self.orders, [GUAVA], PROFILE)
        self.assertFalse(report["resetApplied"])
        self.assertEqual(report["elapsedDays"], 5)
        self.assertAlmostEqual(report["values"]["vitaminC"], 456)
        self.assertAlmostEqual(report["values"]["calcium"], 36)
        self.assertEqual(set(report["values"]), {"vitaminC", "protein", "fiber", "calcium", "iron"})
        self.assertEqual(report["targets"],
                         {"protein": 385, "fiber": 155, "vitaminC": 450, "calcium": 5000, "iron": 90})

    def test_after_reset_nothing_counts(self):
        report = weekly_report_window(datetime(2026, 10, 18, 13, 0), self.orders, [GUAVA], PROFILE)
        self.assertTrue(report["resetApplied"])
        self.assertEqual(report["values"], {m: 0 for m in report["values"]})
        self.assertEqual(report["targets"]["vitaminC"], 630)

    def test_guest_targets(self):
        report = weekly_report_window(datetime(2026, 10, 12, 9, 0), [], [GUAVA])
        self.assertEqual(report["targets"]["protein"], 50)


if __name__ == '__main__':
    unittest.main()
