# tiffincrm/repositories/menu.py
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tiffincrm.models import MenuItem


class MenuRepository:
    def __init__(self, session: Session):
        self.session = session

    def get(self, item_id: int) -> MenuItem | None:
        return self.session.get(MenuItem, item_id)

    def list(self, category: str | None = None, available: bool | None = None) -> list[MenuItem]:
        stmt = select(MenuItem)
        if category:
            stmt = stmt.where(MenuItem.category == category)
        if available is not None:
            stmt = stmt.where(MenuItem.available == available)
        stmt = stmt.order_by(MenuItem.category.asc(), MenuItem.name.asc())
        return list(self.session.scalars(stmt))

    def name_taken(self, name: str, category: str, exclude_id: int | None = None) -> bool:
        stmt = select(MenuItem.id).where(MenuItem.name == name, MenuItem.category == category)
        if exclude_id:
            stmt = stmt.where(MenuItem.id != exclude_id)
        return self.session.scalars(stmt.limit(1)).first() is not None

    def count(self) -> int:
        return int(self.session.scalar(select(func.count(MenuItem.id))) or 0)

    def add(self, item: MenuItem) -> MenuItem:
        self.session.add(item)
        self.session.flush()
        return item

    def delete(self, item: MenuItem) -> None:
        self.session.delete(item)
