import unittest
from fastapi.testclient import TestClient

from mart.api.api_run import app
from mart.tests.support import TempDataMixin


def _ids(data):
    return [item["id"] for item in data["items"]]


class TestPlanAPI(TempDataMixin, unittest.TestCase):
    def setUp(self):
        super().setUp()
        self.client = TestClient(app)

    def test_fresh_plan_is_seeded_with_sample_week(self):
        resp = self.client.get("/api/plan")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["selectedDay"], "Monday")
        self.assertEqual(_ids(data), ["veg-spinach", "fruit-orange", "salad-greek"])
        self.assertEqual(data["summary"]["totals"]["totalQuantity"], 3)
        for day, entries in data["plan"].items():
            self.assertEqual(len(entries), 3, day)

    def test_selected_day_is_remembered(self):
        self.client.post("/api/plan/select-day", json={"day": "Friday"})
        self.assertEqual(self.client.get("/api/plan").json()["selectedDay"], "Friday")

    def test_select_day_validation(self):
        resp = self.client.post("/api/plan/select-day", json={"day": "Someday"})
        self.assertEqual(resp.status_code, 422)

    def test_set_quantity_and_remove_with_zero(self):
        resp = self.client.post("/api/plan/quantity",
                                json={"productId": "veg-carrot", "quantity": 3, "day": "Tuesday"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["selectedDay"], "Tuesday")
        carrot = [i for i in data["items"] if i["id"] == "veg-carrot"]
        self.assertEqual(carrot[0]["quantity"], 3)

        data = self.client.post("/api/plan/quantity",
                                json={"productId": "veg-carrot", "quantity": 0}).json()
        self.assertNotIn("veg-carrot", _ids(data))

    def test_add_and_remove_one(self):
        self.client.post("/api/plan/add", json={"productId": "ice-mango", "day": "Saturday"})
        data = self.client.post("/api/plan/add", json={"productId": "ice-mango"}).json()
        mango = [i for i in data["items"] if i["id"] == "ice-mango"][0]
        self.assertEqual(mango["quantity"], 2)
        data = self.client.post("/api/plan/remove", json={"productId": "ice-mango"}).json()
        mango = [i for i in data["items"] if i["id"] == "ice-mango"][0]
        self.assertEqual(mango["quantity"], 1)

    def test_add_unknown_product(self):
        resp = self.client.post("/api/plan/add", json={"productId": "does-not-exist"})
        self.assertEqual(resp.status_code, 404)

    def test_select_all_filtered_keeps_existing_quantities(self):
        self.client.post("/api/plan/quantity",
                         json={"productId": "salad-quinoa", "quantity": 4, "day": "Wednesday"})
        data = self.client.post("/api/plan/select-all",
                                json={"day": "Wednesday", "category": "salads"}).json()
        quantities = {i["id"]: i["quantity"] for i in data["items"]}
        self.assertEqual(quantities, {"salad-greek": 1, "salad-sprouts": 1, "salad-quinoa": 4})

    def test_select_all_with_explicit_ids(self):
        data = self.client.post("/api/plan/select-all",
                                json={"productIds": ["fruit-guava", "ghost", "fruit-guava"]}).json()
        self.assertEqual(_ids(data), ["fruit-guava"])

    def test_clear_day(self):
        data = self.client.post("/api/plan/clear-day", json={"day": "Thursday"}).json()
        self.assertEqual(data["items"], [])
        self.assertEqual(data["plan"]["Thursday"], [])
        self.assertEqual(len(data["plan"]["Monday"]), 3)

    def test_auto_generate_overwrites_edits(self):
        self.client.post("/api/plan/clear-day", json={"day": "Monday"})
        data = self.client.post("/api/plan/auto-generate").json()
        self.assertEqual(_ids(data), ["veg-spinach", "fruit-orange", "salad-greek"])

    def test_reset_week(self):
        data = self.client.post("/api/plan/reset-week").json()
        self.assertTrue(all(entries == [] for entries in data["plan"].values()))

    def test_summary(self):
        resp = self.client.get("/api/plan/summary", params={"day": "Sunday"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["day"]["day"], "Sunday")
        self.assertEqual(data["day"]["totals"]["totalQuantity"], 3)
        self.assertEqual(data["week"]["totals"]["totalQuantity"], 21)
        self.assertEqual(data["dailyTargets"]["calories"], 2240)
        self.assertEqual(data["week"]["targets"]["vitaminC"], 90)

    def test_summary_unknown_day(self):
        resp = self.client.get("/api/plan/summary", params={"day": "Caturday"})
        self.assertEqual(resp.status_code, 400)

    def test_routine_flag(self):
        self.assertFalse(self.client.get("/api/plan/routine").json()["enabled"])
        self.client.put("/api/plan/routine", json={"enabled": True})
        self.assertTrue(self.client.get("/api/plan/routine").json()["enabled"])

    def test_export_pdf(self):
        resp = self.client.get("/api/plan/export_pdf")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "application/pdf")
        self.assertTrue(resp.content.startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
