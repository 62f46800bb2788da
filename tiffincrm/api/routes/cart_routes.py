from __future__ import annotations

from flask import Blueprint, current_app, session
from flask_login import current_user

from tiffincrm.api.utils.responses import ok, parse_body
from tiffincrm.errors import NotFound, ValidationFailed
from tiffincrm.extensions import db
from tiffincrm.repositories import CustomerRepository, MenuRepository, OrderRepository
from tiffincrm.schemas import CartAdd, CheckoutIn, OrderCreate
from tiffincrm.services.cart import Cart
from tiffincrm.services.order_placement import place_order

api_cart = Blueprint("api_cart", __name__, url_prefix="/api/cart")


@api_cart.get("")
def view_cart():
    return ok(Cart.load(session).to_dict())


@api_cart.post("/items")
def add_item():
    body = parse_body(CartAdd)
    item = MenuRepository(db.session).get(body.menu_item_id)
    if item is None:
        raise NotFound(f"Menu item with ID {body.menu_item_id} not found")

    cart = Cart.load(session)
    cart.add(item, body.quantity)
    cart.save(session)
    return ok(cart.to_dict(), message=f"{item.name} added to cart")


@api_cart.delete("/items/<int:menu_item_id>")
def remove_item(menu_item_id: int):
    cart = Cart.load(session)
    cart.remove(menu_item_id)
    cart.save(session)
    return ok(cart.to_dict())


@api_cart.delete("")
def clear_cart():
    cart = Cart.load(session)
    cart.clear()
    cart.save(session)
    return ok(cart.to_dict(), message="Cart cleared")


@api_cart.post("/checkout")
def checkout():
    body = parse_body(CheckoutIn)
    cart = Cart.load(session)
    if cart.is_empty():
        raise ValidationFailed("Please add items to cart first")

    customer_id = body.customer_id
    if customer_id is None and current_user.is_authenticated:
        customer_id = current_user.customer_id
    if customer_id is None:
        raise ValidationFailed("customer_id is required when not logged in as a customer")

    request = OrderCreate.model_validate(
        {
            "customer_id": customer_id,
            "delivery_address": body.delivery_address,
            "items": cart.order_lines(),
        }
    )
    order = place_order(
        request,
        customers=CustomerRepository(db.session),
        menu=MenuRepository(db.session),
        orders=OrderRepository(db.session),
    )

    # only a committed order empties the cart
    cart.clear()
    cart.save(session)
    current_app.logger.info("Cart checked out as order #%s", order.id)
    return ok(order.to_dict(with_items=True), 201, message="Order placed successfully")
