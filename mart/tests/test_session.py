import unittest

from mart.infra.Cart_Repository import load_cart, save_cart
from mart.logic.planning.session import open_session, save_session
from mart.tests.support import TempDataMixin


class TestStoreSession(TempDataMixin, unittest.TestCase):
    def test_fresh_session_is_seeded(self):
        session = open_session()
        self.assertFalse(session.plan_store.plan.is_empty())
        self.assertEqual(session.daily_targets()["calories"], 2240)

    def test_plan_save_keeps_cart_added_meanwhile(self):
        session = open_session()
        # another request fills the cart while this one edits the plan
        cart = load_cart()
        cart.add_item("veg-spinach", 2)
        save_cart(cart)

        session.plan_store.add_one("fruit-guava")
        save_session(session)

        self.assertEqual(load_cart().get_item_quantity("veg-spinach"), 2)
        self.assertEqual(open_session().plan_store.current_quantity("fruit-guava"), 1)

    def test_selected_day_round_trips(self):
        session = open_session()
        session.plan_store.select_day("Saturday")
        save_session(session)
        self.assertEqual(open_session().plan_store.selected_day, "Saturday")


if __name__ == '__main__':
    unittest.main()
