# tiffincrm/models/order_status.py
from __future__ import annotations

import enum


class OrderStatus(str, enum.Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PREPARING = "Preparing"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]

    @classmethod
    def parse(cls, raw) -> "OrderStatus":
        """Accept a member or its display value; anything else raises ValueError."""
        if isinstance(raw, cls):
            return raw
        value = str(raw or "").strip()
        for s in cls:
            if s.value == value:
                return s
        raise ValueError(f"Status must be one of: {', '.join(cls.values())}")

    def __str__(self) -> str:
        return self.value


# Admins may move an order anywhere, including backwards.
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    s: frozenset(OrderStatus) for s in OrderStatus
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


# Statuses that still count as "in flight" on the customer dashboard
ACTIVE_STATUSES = frozenset(
    {
        OrderStatus.PENDING,
        OrderStatus.CONFIRMED,
        OrderStatus.PREPARING,
        OrderStatus.OUT_FOR_DELIVERY,
    }
)
