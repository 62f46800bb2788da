import pytest

from tiffincrm.models import MenuItem


def test_create_menu_item(client):
    resp = client.post("/api/menu", json={"name": "Dal Rice", "price": 80, "category": "Vegetarian"})
    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["price"] == 80
    assert data["available"] is True


@pytest.mark.parametrize("price", [0, -5])
def test_price_must_be_positive(client, price):
    resp = client.post("/api/menu", json={"name": "Free Food", "price": price, "category": "Vegetarian"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Price must be greater than 0"


@pytest.mark.parametrize(
    "price,error",
    [
        (0.001, "Price must have at most 2 decimal places"),
        ("12.345", "Price must have at most 2 decimal places"),
        (100000000, "Price is too large"),
    ],
)
def test_price_must_fit_the_column(client, price, error, row_count):
    resp = client.post("/api/menu", json={"name": "Odd Price", "price": price, "category": "Snacks"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == error
    assert row_count(MenuItem) == 0


def test_two_decimal_price_is_kept(client):
    resp = client.post("/api/menu", json={"name": "Samosa", "price": "12.50", "category": "Snacks"})
    assert resp.status_code == 201
    assert resp.get_json()["data"]["price"] == 12.5


def test_missing_fields(client):
    resp = client.post("/api/menu", json={"name": "No Price"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Name, price, and category are required"


def test_duplicate_name_in_same_category_conflicts(client, make_menu_item):
    make_menu_item(name="Aloo Gobi", category="Vegetarian")
    dup = client.post("/api/menu", json={"name": "Aloo Gobi", "price": 75, "category": "Vegetarian"})
    assert dup.status_code == 400
    assert dup.get_json()["error"] == "Menu item with this name already exists in this category"

    other_category = client.post("/api/menu", json={"name": "Aloo Gobi", "price": 75, "category": "Snacks"})
    assert other_category.status_code == 201


def test_update_excludes_own_id_and_keeps_availability(client, make_menu_item):
    m = make_menu_item(name="Fish Curry", price=140, category="Non-Vegetarian", available=False)
    resp = client.put(
        f"/api/menu/{m['id']}",
        json={"name": "Fish Curry", "price": 150, "category": "Non-Vegetarian"},
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["price"] == 150
    assert data["available"] is False


def test_update_cannot_rename_onto_existing_item(client, make_menu_item):
    make_menu_item(name="Aloo Gobi", category="Vegetarian")
    m = make_menu_item(name="Paneer Masala", price=120, category="Vegetarian")
    resp = client.put(
        f"/api/menu/{m['id']}",
        json={"name": "Aloo Gobi", "price": 120, "category": "Vegetarian"},
    )
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Menu item with this name already exists in this category"
    assert client.get(f"/api/menu/{m['id']}").get_json()["data"]["name"] == "Paneer Masala"


@pytest.mark.parametrize(
    "original,first_message,second_message",
    [
        (True, "Menu item disabled successfully", "Menu item enabled successfully"),
        (False, "Menu item enabled successfully", "Menu item disabled successfully"),
    ],
)
def test_toggle_twice_restores_original(client, make_menu_item, original, first_message, second_message):
    m = make_menu_item(available=original)
    assert m["available"] is original

    once = client.patch(f"/api/menu/{m['id']}/toggle-availability").get_json()
    assert once["data"]["available"] is (not original)
    assert once["message"] == first_message

    twice = client.patch(f"/api/menu/{m['id']}/toggle-availability").get_json()
    assert twice["data"]["available"] is original
    assert twice["message"] == second_message


def test_available_listing_and_filters(client, make_menu_item):
    a = make_menu_item(name="Rajma Chawal", category="Vegetarian")
    b = make_menu_item(name="Mutton Curry", category="Non-Vegetarian")
    client.patch(f"/api/menu/{b['id']}/toggle-availability")

    available = client.get("/api/menu/available").get_json()["data"]
    assert [m["id"] for m in available] == [a["id"]]

    veg = client.get("/api/menu?category=Vegetarian").get_json()["data"]
    assert [m["name"] for m in veg] == ["Rajma Chawal"]

    unavailable = client.get("/api/menu?available=false").get_json()["data"]
    assert [m["id"] for m in unavailable] == [b["id"]]


def test_menu_ordered_by_category_then_name(client, make_menu_item):
    make_menu_item(name="Paneer Masala", category="Vegetarian")
    make_menu_item(name="Butter Chicken", category="Non-Vegetarian")
    make_menu_item(name="Aloo Gobi", category="Vegetarian")
    names = [m["name"] for m in client.get("/api/menu").get_json()["data"]]
    assert names == ["Butter Chicken", "Aloo Gobi", "Paneer Masala"]


def test_delete_menu_item_leaves_order_snapshot(client, make_customer, make_menu_item):
    c = make_customer()
    m = make_menu_item(name="Chole Bhature", price=95)
    order = client.post(
        "/api/orders",
        json={"customer_id": c["id"], "items": [{"menu_item_id": m["id"], "quantity": 2}]},
    ).get_json()["data"]

    assert client.delete(f"/api/menu/{m['id']}").status_code == 200
    assert client.get(f"/api/menu/{m['id']}").status_code == 404

    items = client.get(f"/api/orders/{order['id']}").get_json()["data"]["items"]
    assert items[0]["menu_item_name"] == "Chole Bhature"
    assert items[0]["price"] == 95


def test_unknown_menu_item(client):
    assert client.patch("/api/menu/42/toggle-availability").status_code == 404
    assert client.delete("/api/menu/42").get_json()["error"] == "Menu item not found"
