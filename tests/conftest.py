import pytest

from tiffincrm.app import create_app
from tiffincrm.extensions import db as _db


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
            "SECRET_KEY": "test",
            "APP_ENV": "development",
            "SEED_SAMPLE_DATA": False,
        }
    )
    yield app
    with app.app_context():
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    with app.app_context():
        yield _db


@pytest.fixture
def make_customer(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"Customer {counter['n']}",
            "phone": f"90000000{counter['n']:02d}",
            "address": f"{counter['n']} Test Lane",
            "plan": "Weekly",
        }
        payload.update(overrides)
        resp = client.post("/api/customers", json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _make


@pytest.fixture
def make_menu_item(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {"name": f"Dish {counter['n']}", "price": 100, "category": "Vegetarian"}
        payload.update(overrides)
        resp = client.post("/api/menu", json=payload)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]

    return _make


@pytest.fixture
def row_count(app):
    def _count(model) -> int:
        with app.app_context():
            return _db.session.query(model).count()

    return _count
