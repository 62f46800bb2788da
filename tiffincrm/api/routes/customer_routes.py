from __future__ import annotations

from contextlib import contextmanager

from flask import Blueprint, current_app, request
from sqlalchemy.exc import IntegrityError

from tiffincrm.api.utils.responses import ok, parse_body
from tiffincrm.errors import Conflict, NotFound
from tiffincrm.extensions import db
from tiffincrm.models import Customer
from tiffincrm.repositories import CustomerRepository
from tiffincrm.schemas import CustomerIn

api_customers = Blueprint("api_customers", __name__, url_prefix="/api/customers")

PHONE_TAKEN = "Phone number already exists"


def _repo() -> CustomerRepository:
    return CustomerRepository(db.session)


def _get_or_404(repo: CustomerRepository, customer_id: int) -> Customer:
    c = repo.get(customer_id)
    if c is None:
        raise NotFound("Customer not found")
    return c


@contextmanager
def phone_conflict_guard():
    # the UNIQUE(phone) constraint backs up the pre-check when two writes race;
    # add() flushes, so the violation can surface inside the block or at commit
    try:
        yield
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise Conflict(PHONE_TAKEN) from e


@api_customers.get("")
def list_customers():
    term = (request.args.get("q") or "").strip()
    return ok([c.to_dict() for c in _repo().list(term or None)])


@api_customers.get("/search/<path:term>")
def search_customers(term: str):
    return ok([c.to_dict() for c in _repo().list(term.strip() or None)])


@api_customers.get("/<int:customer_id>")
def get_customer(customer_id: int):
    return ok(_get_or_404(_repo(), customer_id).to_dict())


@api_customers.post("")
def create_customer():
    body = parse_body(CustomerIn)
    repo = _repo()

    if repo.phone_taken(body.phone):
        raise Conflict(PHONE_TAKEN)

    with phone_conflict_guard():
        c = repo.add(Customer(name=body.name, phone=body.phone, address=body.address, plan=body.plan))
    current_app.logger.info("Customer #%s created (%s)", c.id, c.phone)
    return ok(c.to_dict(), 201, message="Customer created successfully")


@api_customers.put("/<int:customer_id>")
def update_customer(customer_id: int):
    body = parse_body(CustomerIn)
    repo = _repo()
    c = _get_or_404(repo, customer_id)

    if repo.phone_taken(body.phone, exclude_id=c.id):
        raise Conflict(PHONE_TAKEN)

    with phone_conflict_guard():
        c.name = body.name
        c.phone = body.phone
        c.address = body.address
        c.plan = body.plan
    return ok(c.to_dict(), message="Customer updated successfully")


@api_customers.delete("/<int:customer_id>")
def delete_customer(customer_id: int):
    repo = _repo()
    c = _get_or_404(repo, customer_id)

    if repo.order_count(c.id) > 0:
        raise Conflict("Cannot delete customer with existing orders")

    repo.delete(c)
    db.session.commit()
    current_app.logger.info("Customer #%s deleted", customer_id)
    return ok(message="Customer deleted successfully")
