from __future__ import annotations

from flask import Blueprint, current_app, request

from tiffincrm.api.utils.responses import ok, parse_body
from tiffincrm.errors import NotFound, ValidationFailed
from tiffincrm.extensions import db
from tiffincrm.models import Order, OrderStatus
from tiffincrm.models.order_status import can_transition
from tiffincrm.repositories import CustomerRepository, MenuRepository, OrderRepository
from tiffincrm.schemas import OrderCreate, StatusUpdate
from tiffincrm.services.order_placement import place_order

order_bp = Blueprint("order_bp", __name__, url_prefix="/api/orders")


def _repo() -> OrderRepository:
    return OrderRepository(db.session)


def _get_or_404(repo: OrderRepository, order_id: int, with_items: bool = False) -> Order:
    o = repo.get(order_id, with_items=with_items)
    if o is None:
        raise NotFound("Order not found")
    return o


def _parse_status(raw) -> OrderStatus:
    try:
        return OrderStatus.parse(raw)
    except ValueError as e:
        raise ValidationFailed(str(e)) from e


@order_bp.get("")
def list_orders():
    status = request.args.get("status")
    customer_id = request.args.get("customer_id", type=int)
    orders = _repo().list(
        status=_parse_status(status) if status else None,
        customer_id=customer_id,
    )
    return ok([o.to_dict() for o in orders])


@order_bp.post("")
def create_order():
    body = parse_body(OrderCreate)
    order = place_order(
        body,
        customers=CustomerRepository(db.session),
        menu=MenuRepository(db.session),
        orders=_repo(),
    )
    return ok(order.to_dict(with_items=True), 201, message="Order created successfully")


@order_bp.get("/<int:order_id>")
def get_order(order_id: int):
    return ok(_get_or_404(_repo(), order_id, with_items=True).to_dict(with_items=True))


@order_bp.delete("/<int:order_id>")
def delete_order(order_id: int):
    repo = _repo()
    o = _get_or_404(repo, order_id)
    repo.delete(o)
    db.session.commit()
    current_app.logger.info("Order #%s deleted", order_id)
    return ok(message="Order deleted successfully")


@order_bp.patch("/<int:order_id>/status")
def update_status(order_id: int):
    body = parse_body(StatusUpdate)
    o = _get_or_404(_repo(), order_id)

    previous = o.status
    if not can_transition(previous, body.status):
        raise ValidationFailed(f"Cannot move order from {previous.value} to {body.status.value}")

    o.status = body.status
    db.session.commit()
    current_app.logger.info("Order #%s status %s -> %s", o.id, previous.value, o.status.value)
    return ok(
        {"id": o.id, "status": o.status.value},
        message="Order status updated successfully",
    )


@order_bp.get("/status/<path:status>")
def orders_by_status(status: str):
    orders = _repo().list(status=_parse_status(status))
    return ok([o.to_dict() for o in orders])


@order_bp.get("/customer/<int:customer_id>")
def orders_by_customer(customer_id: int):
    orders = _repo().list(customer_id=customer_id)
    return ok([o.to_dict() for o in orders])
