import logging
from datetime import datetime

from fastapi import APIRouter, HTTPException

from mart.events.event_helpers import publish_order_placed
from mart.infra.Cart_Repository import load_cart, save_cart
from mart.infra.Order_Repository import create_order
from mart.infra.Product_Repository import get_all_products, get_product_by_id
from mart.infra.Profile_Repository import get_user_profile
from mart.logic.checkout.cart_summary import summarize_cart, checkout
from mart.utilities.validators import CartItemInput, CartQuantityInput

router = APIRouter(prefix="/api/cart", tags=["cart"])
logger = logging.getLogger(__name__)


def _summary(cart):
    return summarize_cart(cart, get_all_products(), get_user_profile())


@router.get("")
def read_cart():
    return _summary(load_cart())


@router.post("/items")
def add_cart_item(payload: CartItemInput):
    product = get_product_by_id(payload.productId)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    cart = load_cart()
    cart.add_item(product.id, payload.quantity)
    save_cart(cart)
    return {"message": f"{product.name} added to cart", **_summary(cart)}


@router.put("/items/{product_id}")
def update_cart_item(product_id: str, payload: CartQuantityInput):
    cart = load_cart()
    if payload.quantity > 0 and cart.get_item_quantity(product_id) == 0:
        raise HTTPException(status_code=404, detail="Item not in cart")
    cart.update_quantity(product_id, payload.quantity)
    save_cart(cart)
    return _summary(cart)


@router.delete("/items/{product_id}")
def remove_cart_item(product_id: str):
    cart = load_cart()
    cart.remove_item(product_id)
    save_cart(cart)
    return _summary(cart)


@router.delete("")
def clear_cart():
    cart = load_cart()
    cart.clear()
    save_cart(cart)
    return _summary(cart)


@router.post("/checkout", status_code=201)
def checkout_cart():
    profile = get_user_profile()
    if profile is None:
        raise HTTPException(status_code=401, detail="Must be signed in to check out")
    cart = load_cart()
    try:
        order = checkout(cart, get_all_products(), profile.id, datetime.now().astimezone())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    create_order(order)
    cart.clear()
    save_cart(cart)
    publish_order_placed(order)
    logger.info("Checkout complete: order %s, total %s", order.id, order.total)
    return {"message": "Order placed successfully", "order": order.to_dict()}
