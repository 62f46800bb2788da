# tiffincrm/models/__init__.py
from .order_status import OrderStatus
from .customer import Customer
from .menu_item import MenuItem
from .order import Order
from .order_item import OrderItem

__all__ = [
    "OrderStatus",
    "Customer",
    "MenuItem",
    "Order",
    "OrderItem",
]
