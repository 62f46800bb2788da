# tiffincrm/auth/login_routes.py
import time

from flask import Blueprint, current_app, jsonify, session
from flask_login import current_user, login_required, login_user, logout_user

from tiffincrm.api.routes.customer_routes import PHONE_TAKEN, phone_conflict_guard
from tiffincrm.api.utils.responses import ok, parse_body
from tiffincrm.errors import Conflict
from tiffincrm.extensions import db
from tiffincrm.models import Customer
from tiffincrm.repositories import CustomerRepository
from tiffincrm.schemas import LoginIn, ProfileUpdate, RegisterIn
from tiffincrm.auth.user_loader import PROFILE_KEY, TiffinUser, check_credentials

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _start_session(profile: dict) -> TiffinUser:
    session[PROFILE_KEY] = profile
    user = TiffinUser(profile)
    login_user(user)
    return user


def _me_payload(profile: dict | None) -> dict:
    kind = (profile or {}).get("type")
    return {"user": profile, "isAdmin": kind == "admin", "isUser": kind == "user"}


@auth_bp.post("/login")
def login():
    body = parse_body(LoginIn)
    profile = check_credentials(body.email, body.password, body.type)
    if profile is None:
        return jsonify({"success": False, "error": "Invalid email or password"}), 401

    _start_session(profile)
    current_app.logger.info("Demo login as %s (%s)", profile["email"], profile["type"])
    return ok(profile, message="Login successful")


@auth_bp.post("/register")
def register():
    """Signup form: creates the customer row and logs the new user in."""
    body = parse_body(RegisterIn)
    customers = CustomerRepository(db.session)
    if customers.phone_taken(body.phone):
        raise Conflict(PHONE_TAKEN)

    with phone_conflict_guard():
        c = customers.add(Customer(name=body.name, phone=body.phone, address=body.address, plan=body.plan))

    profile = {
        "id": int(time.time() * 1000),
        "email": body.email,
        "type": "user",
        "name": c.name,
        "phone": c.phone,
        "address": c.address,
        "customer_id": c.id,
    }
    _start_session(profile)
    return ok(profile, 201, message="Registration successful")


@auth_bp.get("/me")
def me():
    profile = session.get(PROFILE_KEY) if current_user.is_authenticated else None
    return ok(_me_payload(profile))


@auth_bp.patch("/profile")
@login_required
def update_profile():
    body = parse_body(ProfileUpdate)
    profile = dict(session.get(PROFILE_KEY) or {})
    profile.update(body.model_dump(exclude_none=True))
    session[PROFILE_KEY] = profile
    return ok(profile, message="Profile updated")


@auth_bp.post("/logout")
def logout():
    logout_user()
    session.pop(PROFILE_KEY, None)
    return ok(message="Logged out")
