from tiffincrm.models import Order, OrderItem


def _place(client, customer_id, *lines, **extra):
    payload = {
        "customer_id": customer_id,
        "items": [{"menu_item_id": mid, "quantity": qty} for mid, qty in lines],
    }
    payload.update(extra)
    return client.post("/api/orders", json=payload)


def test_dal_rice_scenario(client, make_customer):
    c = make_customer()
    m = client.post("/api/menu", json={"name": "Dal Rice", "price": 80, "category": "Vegetarian"}).get_json()["data"]

    resp = _place(client, c["id"], (m["id"], 3))
    assert resp.status_code == 201
    order = resp.get_json()["data"]
    assert order["total_amount"] == 240
    assert order["status"] == "Pending"

    fetched = client.get(f"/api/orders/{order['id']}").get_json()["data"]
    assert len(fetched["items"]) == 1
    item = fetched["items"][0]
    assert item["quantity"] == 3
    assert item["price"] == 80
    assert item["total_price"] == 240


def test_total_sums_lines_and_survives_price_change(client, make_customer, make_menu_item):
    c = make_customer()
    a = make_menu_item(name="Paneer Masala", price=100)
    b = make_menu_item(name="Fish Curry", price=140, category="Non-Vegetarian")

    order = _place(client, c["id"], (a["id"], 2), (b["id"], 1)).get_json()["data"]
    assert order["total_amount"] == 340

    client.put(
        f"/api/menu/{a['id']}",
        json={"name": "Paneer Masala", "price": 999, "category": "Vegetarian"},
    )

    fetched = client.get(f"/api/orders/{order['id']}").get_json()["data"]
    assert fetched["total_amount"] == 340
    assert sum(it["total_price"] for it in fetched["items"]) == 340
    assert {it["price"] for it in fetched["items"]} == {100, 140}


def test_delivery_address_defaults_to_customer(client, make_customer, make_menu_item):
    c = make_customer(address="77 Default Rd")
    m = make_menu_item()

    default = _place(client, c["id"], (m["id"], 1)).get_json()["data"]
    assert default["delivery_address"] == "77 Default Rd"
    assert default["customer_name"] == c["name"]

    custom = _place(client, c["id"], (m["id"], 1), delivery_address="Office Tower 5").get_json()["data"]
    assert custom["delivery_address"] == "Office Tower 5"


def test_unavailable_item_rejects_whole_order(client, make_customer, make_menu_item, row_count):
    c = make_customer()
    ok_item = make_menu_item(name="Aloo Gobi")
    off_item = make_menu_item(name="Mutton Curry", category="Non-Vegetarian")
    client.patch(f"/api/menu/{off_item['id']}/toggle-availability")

    resp = _place(client, c["id"], (ok_item["id"], 1), (off_item["id"], 2))
    assert resp.status_code == 400
    assert resp.get_json()["error"] == 'Menu item "Mutton Curry" is not available'
    assert row_count(Order) == 0
    assert row_count(OrderItem) == 0


def test_missing_menu_item_is_404_and_writes_nothing(client, make_customer, make_menu_item, row_count):
    c = make_customer()
    m = make_menu_item()
    resp = _place(client, c["id"], (m["id"], 1), (9999, 1))
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Menu item with ID 9999 not found"
    assert row_count(Order) == 0


def test_unknown_customer(client, make_menu_item):
    m = make_menu_item()
    resp = _place(client, 12345, (m["id"], 1))
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Customer not found"


def test_bad_quantities_and_empty_items(client, make_customer, make_menu_item, row_count):
    c = make_customer()
    m = make_menu_item()

    assert _place(client, c["id"], (m["id"], 0)).status_code == 400
    assert _place(client, c["id"], (m["id"], -2)).status_code == 400
    assert _place(client, c["id"], (m["id"], 1.5)).status_code == 400
    assert _place(client, c["id"], (m["id"], 10**20)).status_code == 400
    assert _place(client, c["id"], (m["id"], 10_001)).status_code == 400
    assert client.post("/api/orders", json={"customer_id": c["id"], "items": []}).status_code == 400
    assert client.post("/api/orders", json={"items": [{"menu_item_id": m["id"], "quantity": 1}]}).status_code == 400
    assert row_count(Order) == 0


def test_list_and_filters(client, make_customer, make_menu_item):
    alice = make_customer(name="Alice", phone="9990001111")
    bob = make_customer(name="Bob", phone="9990002222")
    m = make_menu_item()

    o1 = _place(client, alice["id"], (m["id"], 1)).get_json()["data"]
    o2 = _place(client, bob["id"], (m["id"], 1)).get_json()["data"]
    client.patch(f"/api/orders/{o2['id']}/status", json={"status": "Delivered"})

    everything = client.get("/api/orders").get_json()
    assert everything["count"] == 2
    assert everything["data"][0]["id"] == o2["id"]
    assert everything["data"][0]["customer_phone"] == "9990002222"

    pending = client.get("/api/orders/status/Pending").get_json()["data"]
    assert [o["id"] for o in pending] == [o1["id"]]

    delivered = client.get("/api/orders?status=Delivered").get_json()["data"]
    assert [o["id"] for o in delivered] == [o2["id"]]

    by_customer = client.get(f"/api/orders/customer/{alice['id']}").get_json()["data"]
    assert [o["id"] for o in by_customer] == [o1["id"]]


def test_status_with_spaces_in_path(client, make_customer, make_menu_item):
    c = make_customer()
    m = make_menu_item()
    o = _place(client, c["id"], (m["id"], 1)).get_json()["data"]
    client.patch(f"/api/orders/{o['id']}/status", json={"status": "Out for Delivery"})

    rows = client.get("/api/orders/status/Out%20for%20Delivery").get_json()["data"]
    assert [r["id"] for r in rows] == [o["id"]]


def test_filter_by_unknown_status_is_400(client):
    resp = client.get("/api/orders/status/Lost")
    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("Status must be one of:")


def test_delete_order_removes_items(client, make_customer, make_menu_item, row_count):
    c = make_customer()
    m = make_menu_item()
    o = _place(client, c["id"], (m["id"], 2)).get_json()["data"]
    assert row_count(OrderItem) == 1

    resp = client.delete(f"/api/orders/{o['id']}")
    assert resp.status_code == 200
    assert row_count(Order) == 0
    assert row_count(OrderItem) == 0
    assert client.get(f"/api/orders/{o['id']}").status_code == 404


def test_customer_can_be_deleted_after_orders_removed(client, make_customer, make_menu_item):
    c = make_customer()
    m = make_menu_item()
    o = _place(client, c["id"], (m["id"], 1)).get_json()["data"]
    assert client.delete(f"/api/customers/{c['id']}").status_code == 400

    client.delete(f"/api/orders/{o['id']}")
    assert client.delete(f"/api/customers/{c['id']}").status_code == 200
