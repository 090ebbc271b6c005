"""Cart persistence in the key-value store."""
import logging
from typing import Optional

from mart.domain.Cart import Cart
from mart.infra.Storage import KeyValueStore
from mart.utilities.constants import CART_STORAGE_KEY

logger = logging.getLogger(__name__)


def load_cart(store: Optional[KeyValueStore] = None) -> Cart:
    """Stored cart; a corrupt value is dropped and the cart starts empty."""
    store = store or KeyValueStore()
    data = store.get_json(CART_STORAGE_KEY)
    if data is not None and not isinstance(data, list):
        logger.warning("Discarding stored cart of type %s", type(data).__name__)
        store.remove_item(CART_STORAGE_KEY)
        return Cart()
    return Cart.from_dict(data or [])


def save_cart(cart: Cart, store: Optional[KeyValueStore] = None):
    (store or KeyValueStore()).set_json(CART_STORAGE_KEY, cart.to_dict())


__all__ = ["load_cart", "save_cart"]
