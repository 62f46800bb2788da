from flask import Blueprint

from tiffincrm.api.utils.responses import ok
from tiffincrm.errors import NotFound
from tiffincrm.extensions import db
from tiffincrm.repositories import CustomerRepository, MenuRepository, OrderRepository
from tiffincrm.services.dashboard import admin_stats, customer_summary

api_dashboard = Blueprint("api_dashboard", __name__, url_prefix="/api/dashboard")


@api_dashboard.get("/stats")
def stats():
    return ok(
        admin_stats(
            CustomerRepository(db.session),
            MenuRepository(db.session),
            OrderRepository(db.session),
        )
    )


@api_dashboard.get("/customer/<int:customer_id>")
def customer_stats(customer_id: int):
    if CustomerRepository(db.session).get(customer_id) is None:
        raise NotFound("Customer not found")
    return ok(customer_summary(customer_id, OrderRepository(db.session)))
