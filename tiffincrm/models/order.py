# tiffincrm/models/order.py
from datetime import date, datetime
from tiffincrm.extensions import db
from tiffincrm.models.order_status import OrderStatus


class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.Integer, primary_key=True)

    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=False, index=True)
    # snapshot of the customer's name at placement time
    customer_name = db.Column(db.String(120), nullable=False)

    total_amount = db.Column(db.Numeric(10, 2), nullable=False)
    status = db.Column(
        db.Enum(
            OrderStatus,
            name="order_status",
            native_enum=False,
            length=32,
            values_callable=lambda e: [s.value for s in e],
            validate_strings=True,
        ),
        nullable=False,
        default=OrderStatus.PENDING,
        index=True,
    )
    order_date = db.Column(db.Date, nullable=False, default=date.today)
    delivery_address = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    customer = db.relationship("Customer", back_populates="orders")
    items = db.relationship(
        "OrderItem",
        back_populates="order",
        lazy=True,
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    def to_dict(self, with_items: bool = False) -> dict:
        data = {
            "id": self.id,
            "customer_id": self.customer_id,
            "customer_name": self.customer_name,
            "customer_phone": self.customer.phone if self.customer else None,
            "total_amount": float(self.total_amount) if self.total_amount is not None else None,
            "status": self.status.value if self.status else None,
            "order_date": self.order_date.isoformat() if self.order_date else None,
            "delivery_address": self.delivery_address,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if with_items:
            data["customer_address"] = self.customer.address if self.customer else None
            data["items"] = [it.to_dict() for it in self.items]
        return data

    def __repr__(self):
        return f"<Order #{self.id} – {self.customer_name} – {self.status}>"
