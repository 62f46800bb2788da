"""
Request schemas for the JSON API.

Every write endpoint parses its body into one of these models before any
business logic runs, so services only ever see typed, trimmed values.
"""
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tiffincrm.models.order_status import OrderStatus


CENT = Decimal("0.01")
MAX_PRICE = Decimal("100000000")
MAX_QUANTITY = 10_000


class _Body(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True, extra="ignore")


class CustomerIn(_Body):
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    plan: Optional[str] = None

    @model_validator(mode="after")
    def all_required(self):
        if not (self.name and self.phone and self.address and self.plan):
            raise ValueError("All fields are required: name, phone, address, plan")
        return self


class MenuItemIn(_Body):
    name: Optional[str] = None
    price: Optional[Decimal] = None
    category: Optional[str] = None
    available: Optional[bool] = None

    @model_validator(mode="after")
    def required_and_positive(self):
        if not self.name or self.price is None or not self.category:
            raise ValueError("Name, price, and category are required")
        if self.price <= 0:
            raise ValueError("Price must be greater than 0")
        # Numeric(10, 2) column
        if self.price != self.price.quantize(CENT):
            raise ValueError("Price must have at most 2 decimal places")
        if self.price >= MAX_PRICE:
            raise ValueError("Price is too large")
        return self


class OrderLineIn(_Body):
    menu_item_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY)


class OrderCreate(_Body):
    customer_id: int = Field(..., gt=0)
    delivery_address: Optional[str] = None
    items: List[OrderLineIn] = Field(..., min_length=1)

    @field_validator("delivery_address")
    @classmethod
    def blank_is_none(cls, v):
        return v or None


class StatusUpdate(_Body):
    status: OrderStatus

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, v):
        return OrderStatus.parse(v)


class CartAdd(_Body):
    menu_item_id: int = Field(..., gt=0)
    quantity: int = Field(1, gt=0, le=MAX_QUANTITY)


class CheckoutIn(_Body):
    customer_id: Optional[int] = Field(None, gt=0)
    delivery_address: Optional[str] = None


class LoginIn(_Body):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    type: Optional[str] = None


class RegisterIn(_Body):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    plan: str = "Custom"
    password: Optional[str] = None


class ProfileUpdate(_Body):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
