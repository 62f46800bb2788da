from __future__ import annotations

from flask import Blueprint, current_app, request

from tiffincrm.api.utils.responses import ok, parse_body
from tiffincrm.errors import Conflict, NotFound, ValidationFailed
from tiffincrm.extensions import db
from tiffincrm.models import MenuItem
from tiffincrm.repositories import MenuRepository
from tiffincrm.schemas import MenuItemIn

api_menu = Blueprint("api_menu", __name__, url_prefix="/api/menu")

DUPLICATE_ITEM = "Menu item with this name already exists in this category"


def _repo() -> MenuRepository:
    return MenuRepository(db.session)


def _get_or_404(repo: MenuRepository, item_id: int) -> MenuItem:
    item = repo.get(item_id)
    if item is None:
        raise NotFound("Menu item not found")
    return item


def _bool_arg(name: str) -> bool | None:
    raw = request.args.get(name)
    if raw in (None, ""):
        return None
    val = raw.strip().lower()
    if val in ("1", "true", "yes", "on"):
        return True
    if val in ("0", "false", "no", "off"):
        return False
    raise ValidationFailed(f"Invalid '{name}' filter")


@api_menu.get("")
def list_menu():
    category = (request.args.get("category") or "").strip() or None
    items = _repo().list(category=category, available=_bool_arg("available"))
    return ok([m.to_dict() for m in items])


@api_menu.get("/available")
def list_available():
    return ok([m.to_dict() for m in _repo().list(available=True)])


@api_menu.get("/<int:item_id>")
def get_menu_item(item_id: int):
    return ok(_get_or_404(_repo(), item_id).to_dict())


@api_menu.post("")
def create_menu_item():
    body = parse_body(MenuItemIn)
    repo = _repo()

    if repo.name_taken(body.name, body.category):
        raise Conflict(DUPLICATE_ITEM)

    item = repo.add(
        MenuItem(
            name=body.name,
            price=body.price,
            category=body.category,
            available=True if body.available is None else body.available,
        )
    )
    db.session.commit()
    current_app.logger.info("Menu item #%s created (%s)", item.id, item.name)
    return ok(item.to_dict(), 201, message="Menu item created successfully")


@api_menu.put("/<int:item_id>")
def update_menu_item(item_id: int):
    body = parse_body(MenuItemIn)
    repo = _repo()
    item = _get_or_404(repo, item_id)

    if repo.name_taken(body.name, body.category, exclude_id=item.id):
        raise Conflict(DUPLICATE_ITEM)

    item.name = body.name
    item.price = body.price
    item.category = body.category
    if body.available is not None:
        item.available = body.available
    db.session.commit()
    return ok(item.to_dict(), message="Menu item updated successfully")


@api_menu.delete("/<int:item_id>")
def delete_menu_item(item_id: int):
    repo = _repo()
    item = _get_or_404(repo, item_id)
    repo.delete(item)
    db.session.commit()
    current_app.logger.info("Menu item #%s deleted", item_id)
    return ok(message="Menu item deleted successfully")


@api_menu.patch("/<int:item_id>/toggle-availability")
def toggle_availability(item_id: int):
    item = _get_or_404(_repo(), item_id)
    item.available = not bool(item.available)
    db.session.commit()
    state = "enabled" if item.available else "disabled"
    return ok(
        {"id": item.id, "available": bool(item.available)},
        message=f"Menu item {state} successfully",
    )
