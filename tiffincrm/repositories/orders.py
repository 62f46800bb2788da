# tiffincrm/repositories/orders.py
from __future__ import annotations

from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from tiffincrm.models import Order, OrderStatus


class OrderRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, order_id: int, with_items: bool = False) -> Order | None:
        if not with_items:
            return self.session.get(Order, order_id)
        stmt = (
            select(Order)
            .options(selectinload(Order.items), selectinload(Order.customer))
            .where(Order.id == order_id)
        )
        return self.session.scalars(stmt).first()

    def list(
        self,
        status: OrderStatus | None = None,
        customer_id: int | None = None,
        limit: int | None = None,
    ) -> list[Order]:
        stmt = select(Order).options(selectinload(Order.customer))
        if status is not None:
            stmt = stmt.where(Order.status == status)
        if customer_id is not None:
            stmt = stmt.where(Order.customer_id == customer_id)
        stmt = stmt.order_by(Order.created_at.desc(), Order.id.desc())
        if limit:
            stmt = stmt.limit(limit)
        return list(self.session.scalars(stmt))

    def count(self, status: OrderStatus | None = None) -> int:
        stmt = select(func.count(Order.id))
        if status is not None:
            stmt = stmt.where(Order.status == status)
        return int(self.session.scalar(stmt) or 0)

    def revenue(self, customer_id: int | None = None) -> Decimal:
        stmt = select(func.coalesce(func.sum(Order.total_amount), 0))
        if customer_id is not None:
            stmt = stmt.where(Order.customer_id == customer_id)
        return Decimal(str(self.session.scalar(stmt) or 0))

    def add(self, order: Order) -> Order:
        self.session.add(order)
        self.session.flush()
        return order

    def delete(self, order: Order) -> None:
        # items go with it (cascade="all, delete-orphan")
        self.session.delete(order)
