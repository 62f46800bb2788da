# tiffincrm/repositories/customers.py
from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from tiffincrm.models import Customer, Order


class CustomerRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, customer_id: int) -> Customer | None:
        return self.session.get(Customer, customer_id)

    def list(self, term: str | None = None) -> list[Customer]:
        stmt = select(Customer)
        if term:
            like = f"%{term}%"
            stmt = stmt.where(
                or_(
                    Customer.name.ilike(like),
                    Customer.phone.ilike(like),
                    Customer.address.ilike(like),
                )
            )
        stmt = stmt.order_by(Customer.created_at.desc(), Customer.id.desc())
        return list(self.session.scalars(stmt))

    def phone_taken(self, phone: str, exclude_id: int | None = None) -> bool:
        stmt = select(Customer.id).where(Customer.phone == phone)
        if exclude_id:
            stmt = stmt.where(Customer.id != exclude_id)
        return self.session.scalars(stmt.limit(1)).first() is not None

    def order_count(self, customer_id: int) -> int:
        stmt = select(func.count(Order.id)).where(Order.customer_id == customer_id)
        return int(self.session.scalar(stmt) or 0)

    def count(self) -> int:
        return int(self.session.scalar(select(func.count(Customer.id))) or 0)

    def add(self, customer: Customer) -> Customer:
        self.session.add(customer)
        self.session.flush()
        return customer

    def delete(self, customer: Customer) -> None:
        self.session.delete(customer)
