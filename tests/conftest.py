import pytest

from storefront import create_app
from storefront.config import TestConfig
from storefront.extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app(config_object=TestConfig, config_overrides={
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_token(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "12345678"})
    assert resp.status_code == 200
    return resp.get_json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
