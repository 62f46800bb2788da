# tiffincrm/services/order_placement.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from tiffincrm.errors import NotFound, ValidationFailed
from tiffincrm.models import Customer, MenuItem, Order, OrderItem, OrderStatus
from tiffincrm.repositories import CustomerRepository, MenuRepository, OrderRepository
from tiffincrm.schemas import OrderCreate

log = logging.getLogger(__name__)


def _to_decimal(val) -> Decimal:
    return Decimal(str(val))


@dataclass
class _PricedLine:
    menu_item: MenuItem
    quantity: int
    price: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


def _price_lines(request: OrderCreate, menu: MenuRepository) -> list[_PricedLine]:
    lines = []
    for line in request.items:
        item = menu.get(line.menu_item_id)
        if item is None:
            raise NotFound(f"Menu item with ID {line.menu_item_id} not found")
        if not item.available:
            raise ValidationFailed(f'Menu item "{item.name}" is not available')
        lines.append(_PricedLine(menu_item=item, quantity=line.quantity, price=_to_decimal(item.price)))
    return lines


def place_order(
    request: OrderCreate,
    customers: CustomerRepository,
    menu: MenuRepository,
    orders: OrderRepository,
) -> Order:
    """
    Validate the customer and every line against the menu, then write the
    order and all of its items in one transaction.

    Nothing is written until every line has passed; any failure rolls the
    session back so no partial order survives.
    """
    session = orders.session
    try:
        customer: Customer | None = customers.get(request.customer_id)
        if customer is None:
            raise NotFound("Customer not found")

        lines = _price_lines(request, menu)
        total = sum((ln.subtotal for ln in lines), Decimal("0.00")).quantize(Decimal("0.01"))

        order = Order(
            customer_id=customer.id,
            customer_name=customer.name,
            total_amount=total,
            status=OrderStatus.PENDING,
            order_date=date.today(),
            delivery_address=request.delivery_address or customer.address,
        )
        for ln in lines:
            order.items.append(
                OrderItem(
                    menu_item_id=ln.menu_item.id,
                    menu_item_name=ln.menu_item.name,
                    quantity=ln.quantity,
                    price=ln.price,
                )
            )
        orders.add(order)
        session.commit()
    except Exception:
        session.rollback()
        raise

    log.info(
        "Order #%s placed for customer #%s: %s item(s), total %s",
        order.id, customer.id, len(lines), total,
    )
    return order
