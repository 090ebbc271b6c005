"""Product catalog (read-only after seeding)."""
import logging
from typing import List, Optional

from mart.domain.Product import Product, normalize_category
from mart.infra.Mock_Database import load_db

logger = logging.getLogger(__name__)

# Catalog nutrition presets
NUTRITION_FILTERS = {
    "high-protein": lambda n: n.protein >= 5,
    "high-fiber": lambda n: n.fiber >= 4,
    "high-iron": lambda n: n.iron >= 2,
    "low-calorie": lambda n: n.calories <= 120,
}


def get_all_products() -> List[Product]:
    """Load every product from the database, skipping records without an id."""
    products = []
    for entry in load_db()["products"]:
        if not isinstance(entry, dict) or entry.get("id") in (None, ""):
            logger.warning("Skipping product record without id: %r", entry)
            continue
        products.append(Product.from_dict(entry))
    return products


def get_product_by_id(product_id: str) -> Optional[Product]:
    for product in get_all_products():
        if product.id == str(product_id):
            return product
    return None


def get_catalog_products(category: Optional[str] = None, search: Optional[str] = None,
                         nutrition: Optional[str] = None) -> List[Product]:
    """Catalog listing with optional category, name search and nutrition preset filters."""
    products = get_all_products()
    if category and category != "All":
        wanted = normalize_category(category)
        products = [p for p in products if p.category == wanted]
    if search:
        term = search.lower()
        products = [p for p in products if term in p.name.lower()]
    check = NUTRITION_FILTERS.get(nutrition or "all")
    if check is not None:
        products = [p for p in products if check(p.nutrition)]
    return products


__all__ = ["get_all_products", "get_product_by_id", "get_catalog_products", "NUTRITION_FILTERS"]
