# tiffincrm/services/dashboard.py
from __future__ import annotations

from tiffincrm.models.order_status import ACTIVE_STATUSES, OrderStatus
from tiffincrm.repositories import CustomerRepository, MenuRepository, OrderRepository


def admin_stats(customers: CustomerRepository, menu: MenuRepository, orders: OrderRepository) -> dict:
    recent = orders.list(limit=5)
    return {
        "totalCustomers": customers.count(),
        "totalOrders": orders.count(),
        "pendingOrders": orders.count(status=OrderStatus.PENDING),
        "totalRevenue": float(orders.revenue()),
        "recentOrders": [o.to_dict() for o in recent],
        "menuItems": [m.to_dict() for m in menu.list()[:5]],
    }


def customer_summary(customer_id: int, orders: OrderRepository) -> dict:
    mine = orders.list(customer_id=customer_id)
    active = [o for o in mine if o.status in ACTIVE_STATUSES]
    return {
        "totalOrders": len(mine),
        "totalSpent": float(orders.revenue(customer_id=customer_id)),
        "activeOrders": len(active),
        "deliveredOrders": sum(1 for o in mine if o.status == OrderStatus.DELIVERED),
        "recentOrders": [o.to_dict() for o in mine[:5]],
    }
