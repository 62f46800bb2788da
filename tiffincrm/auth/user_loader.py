# tiffincrm/auth/user_loader.py
"""
Mock login: two hard-coded demo accounts and a plain profile kept in the
signed session cookie. There is no token, expiry, or server-side session;
it only tells the browser which UI (admin or customer) to render.
"""
from __future__ import annotations

from flask import session
from flask_login import UserMixin

from tiffincrm.extensions import login_manager

PROFILE_KEY = "tiffin_user"

DEMO_USERS = {
    "admin": {
        "id": 1,
        "email": "admin@tiffin.com",
        "password": "admin123",
        "type": "admin",
        "name": "Admin User",
    },
    "user": {
        "id": 2,
        "email": "user@tiffin.com",
        "password": "user123",
        "type": "user",
        "name": "John Doe",
        "phone": "9876543210",
        "address": "123 Main St, Mumbai",
        "customer_id": 1,
    },
}


class TiffinUser(UserMixin):
    def __init__(self, profile: dict):
        self.profile = dict(profile)

    @property
    def id(self):
        return self.profile["id"]

    @property
    def is_admin(self) -> bool:
        return self.profile.get("type") == "admin"

    @property
    def customer_id(self) -> int | None:
        return self.profile.get("customer_id")

    def get_id(self):
        return str(self.id)


def check_credentials(email: str, password: str, type_: str | None = None) -> dict | None:
    """Plain string comparison against the demo accounts; returns the profile without password."""
    for demo in DEMO_USERS.values():
        if demo["email"] == email and demo["password"] == password:
            if type_ and demo["type"] != type_:
                continue
            return {k: v for k, v in demo.items() if k != "password"}
    return None


@login_manager.user_loader
def load_user(user_id):
    profile = session.get(PROFILE_KEY)
    if profile and str(profile.get("id")) == str(user_id):
        return TiffinUser(profile)
    return None
