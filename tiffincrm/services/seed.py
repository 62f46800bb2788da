# tiffincrm/services/seed.py
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import inspect

from tiffincrm.extensions import db
from tiffincrm.models import Customer, MenuItem, Order, OrderItem, OrderStatus

log = logging.getLogger(__name__)

SAMPLE_CUSTOMERS = [
    ("John Doe", "9876543210", "123 Main St, Mumbai", "Monthly"),
    ("Jane Smith", "9876543211", "456 Oak Ave, Delhi", "Weekly"),
    ("Mike Johnson", "9876543212", "789 Pine Rd, Bangalore", "Daily"),
    ("Priya Sharma", "9876543213", "321 Lake View, Chennai", "Monthly"),
    ("Raj Patel", "9876543214", "654 Garden St, Pune", "Weekly"),
]

SAMPLE_MENU = [
    ("Dal Rice", 80, "Vegetarian"),
    ("Chicken Curry", 120, "Non-Vegetarian"),
    ("Paneer Masala", 100, "Vegetarian"),
    ("Fish Curry", 140, "Non-Vegetarian"),
    ("Vegetable Biryani", 90, "Vegetarian"),
    ("Mutton Curry", 160, "Non-Vegetarian"),
    ("Rajma Chawal", 85, "Vegetarian"),
    ("Chole Bhature", 95, "Vegetarian"),
    ("Butter Chicken", 150, "Non-Vegetarian"),
    ("Aloo Gobi", 75, "Vegetarian"),
]

# (customer phone, [(menu item name, qty)], status, order date)
SAMPLE_ORDERS = [
    ("9876543210", [("Butter Chicken", 1)], OrderStatus.DELIVERED, date(2024, 6, 10)),
    ("9876543211", [("Chicken Curry", 1)], OrderStatus.PENDING, date(2024, 6, 12)),
    ("9876543212", [("Paneer Masala", 2)], OrderStatus.DELIVERED, date(2024, 6, 11)),
    ("9876543213", [("Vegetable Biryani", 2)], OrderStatus.CONFIRMED, date(2024, 6, 12)),
    ("9876543210", [("Dal Rice", 3)], OrderStatus.OUT_FOR_DELIVERY, date(2024, 6, 12)),
]


def seed_sample_data(session=None) -> bool:
    """Insert the sample rows when the customers table is empty.

    Returns True when rows were inserted.
    """
    session = session or db.session
    if session.query(Customer.id).first() is not None:
        return False

    log.info("Inserting sample data...")
    by_phone = {}
    for name, phone, address, plan in SAMPLE_CUSTOMERS:
        c = Customer(name=name, phone=phone, address=address, plan=plan)
        session.add(c)
        by_phone[phone] = c

    by_name = {}
    for name, price, category in SAMPLE_MENU:
        m = MenuItem(name=name, price=Decimal(price), category=category, available=True)
        session.add(m)
        by_name[name] = m
    session.flush()

    for phone, lines, status, order_date in SAMPLE_ORDERS:
        customer = by_phone[phone]
        order = Order(
            customer_id=customer.id,
            customer_name=customer.name,
            status=status,
            order_date=order_date,
            delivery_address=customer.address,
            total_amount=Decimal("0"),
        )
        total = Decimal("0")
        for item_name, qty in lines:
            item = by_name[item_name]
            order.items.append(
                OrderItem(
                    menu_item_id=item.id,
                    menu_item_name=item.name,
                    price=Decimal(str(item.price)),
                    quantity=qty,
                )
            )
            total += Decimal(str(item.price)) * qty
        order.total_amount = total
        session.add(order)

    session.commit()
    log.info("Sample data inserted successfully")
    return True


def init_database(app, seed: bool | None = None) -> None:
    """Create the four tables if missing, then seed when configured."""
    with app.app_context():
        db.create_all()
        tables = sorted(inspect(db.engine).get_table_names())
        app.logger.info("Database ready at %s (tables: %s)", db.engine.url, ", ".join(tables))
        if seed is None:
            seed = app.config.get("SEED_SAMPLE_DATA", True)
        if seed:
            seed_sample_data()
