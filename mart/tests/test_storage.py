import json

from mart.domain.Cart import Cart
from mart.domain.Plan import PlanEntry
from mart.infra.Cart_Repository import load_cart, save_cart
from mart.infra.Mock_Database import load_db
from mart.infra.Plan_Repository import PlanRepository
from mart.infra.Storage import KeyValueStore
from mart.utilities.constants import CART_STORAGE_KEY, PLAN_STORAGE_KEY


def test_key_value_roundtrip(tmp_path):
    store = KeyValueStore(tmp_path / "storage.json")
    assert store.get_json("missing") is None
    store.set_json("k", {"a": [1, 2]})
    assert store.get_json("k") == {"a": [1, 2]}
    store.remove_item("k")
    assert store.get_item("k") is None


def test_corrupt_storage_file_reads_empty(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    assert KeyValueStore(path).get_item("anything") is None


def test_invalid_json_value_is_ignored(tmp_path):
    store = KeyValueStore(tmp_path / "storage.json")
    store.set_item("k", "{oops")
    assert store.get_json("k") is None


def test_plan_repository_normalizes_stored_shapes(tmp_path):
    store = KeyValueStore(tmp_path / "storage.json")
    store.set_json(PLAN_STORAGE_KEY, {"Monday": ["a", "a", {"id": "b", "quantity": 2}]})
    plan = PlanRepository(store).get_week_plan()
    assert plan.entries("Monday") == [PlanEntry("a", 2), PlanEntry("b", 2)]


def test_plan_repository_save_and_reset(tmp_path):
    store = KeyValueStore(tmp_path / "storage.json")
    repo = PlanRepository(store)
    plan = repo.get_week_plan()
    plan.set_quantity("Friday", "x", 3)
    repo.save_week_plan(plan)
    raw = json.loads((tmp_path / "storage.json").read_text(encoding="utf-8"))
    assert json.loads(raw[PLAN_STORAGE_KEY])["Friday"] == [{"id": "x", "quantity": 3}]
    assert repo.reset_week().is_empty()
    assert repo.get_week_plan().is_empty()


def test_old_plan_version_is_not_read(tmp_path):
    store = KeyValueStore(tmp_path / "storage.json")
    store.set_json("mart_weekly_plan_v4", {"Monday": ["a"]})
    assert PlanRepository(store).get_week_plan().is_empty()


def test_routine_flag(tmp_path):
    repo = PlanRepository(KeyValueStore(tmp_path / "storage.json"))
    assert repo.get_routine_enabled() is False
    repo.set_routine_enabled(True)
    assert repo.get_routine_enabled() is True


def test_cart_repository(tmp_path):
    store = KeyValueStore(tmp_path / "storage.json")
    cart = Cart()
    cart.add_item("veg-spinach", 2)
    save_cart(cart, store)
    assert [(e.product_id, e.quantity) for e in load_cart(store).items] == [("veg-spinach", 2)]


def test_corrupt_cart_is_discarded(tmp_path):
    store = KeyValueStore(tmp_path / "storage.json")
    store.set_json(CART_STORAGE_KEY, {"veg-spinach": 2})
    assert load_cart(store).is_empty()
    assert store.get_item(CART_STORAGE_KEY) is None


def test_load_db_missing_file(tmp_path):
    data = load_db(tmp_path / "nope.json")
    assert data == {"users": [], "products": [], "orders": []}
