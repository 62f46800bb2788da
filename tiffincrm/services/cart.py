# tiffincrm/services/cart.py
"""
Shopping cart held in the signed client session.

The cart is a plain list of line dicts so it serializes straight into the
session cookie; the ``Cart`` wrapper is the only thing that mutates it.
"""
from __future__ import annotations

from decimal import Decimal
from typing import MutableMapping

from tiffincrm.errors import NotFound, ValidationFailed
from tiffincrm.models import MenuItem
from tiffincrm.schemas import MAX_QUANTITY

SESSION_KEY = "tiffin_cart"


class Cart:
    def __init__(self, lines: list[dict] | None = None):
        self.lines: list[dict] = [dict(ln) for ln in (lines or [])]

    # --- session binding ----------------------------------------------------
    @classmethod
    def load(cls, store: MutableMapping) -> "Cart":
        return cls(store.get(SESSION_KEY) or [])

    def save(self, store: MutableMapping) -> None:
        store[SESSION_KEY] = self.lines

    # --- actions ------------------------------------------------------------
    def _find(self, menu_item_id: int) -> dict | None:
        return next((ln for ln in self.lines if ln["menu_item_id"] == menu_item_id), None)

    def add(self, item: MenuItem, quantity: int = 1) -> dict:
        """Merge ``quantity`` of ``item`` into the cart; returns the line."""
        if not item.available:
            raise ValidationFailed(f'Menu item "{item.name}" is not available')
        if quantity <= 0:
            raise ValidationFailed("Quantity must be a positive integer")

        line = self._find(item.id)
        if self.quantity_of(item.id) + quantity > MAX_QUANTITY:
            raise ValidationFailed(f"Quantity cannot exceed {MAX_QUANTITY}")
        if line:
            line["quantity"] += quantity
            # keep the displayed price current with the menu
            line["price"] = float(item.price)
            line["name"] = item.name
        else:
            line = {
                "menu_item_id": item.id,
                "name": item.name,
                "category": item.category,
                "price": float(item.price),
                "quantity": quantity,
            }
            self.lines.append(line)
        return line

    def remove(self, menu_item_id: int) -> dict | None:
        """Decrement one unit; the line is dropped once it reaches zero."""
        line = self._find(menu_item_id)
        if line is None:
            raise NotFound("Item is not in the cart")
        if line["quantity"] > 1:
            line["quantity"] -= 1
            return line
        self.lines = [ln for ln in self.lines if ln["menu_item_id"] != menu_item_id]
        return None

    def clear(self) -> None:
        self.lines = []

    # --- derived values -----------------------------------------------------
    def quantity_of(self, menu_item_id: int) -> int:
        line = self._find(menu_item_id)
        return line["quantity"] if line else 0

    @property
    def total(self) -> Decimal:
        return sum(
            (Decimal(str(ln["price"])) * ln["quantity"] for ln in self.lines),
            Decimal("0"),
        )

    @property
    def item_count(self) -> int:
        return sum(ln["quantity"] for ln in self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def order_lines(self) -> list[dict]:
        return [{"menu_item_id": ln["menu_item_id"], "quantity": ln["quantity"]} for ln in self.lines]

    def to_dict(self) -> dict:
        return {
            "items": [
                {**ln, "total_price": float(Decimal(str(ln["price"])) * ln["quantity"])}
                for ln in self.lines
            ],
            "total": float(self.total),
            "item_count": self.item_count,
        }
