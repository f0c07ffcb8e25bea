from storefront import create_app
from storefront.config import TestConfig


def test_positional_overrides_are_applied(tmp_path):
    app = create_app({
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'factory.db'}",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
        "ORDER_UID_LENGTH": 12,
    })

    assert app.config["ORDER_UID_LENGTH"] == 12
    assert app.config["UPLOAD_FOLDER"] == str(tmp_path / "uploads")
    assert app.config["SQLALCHEMY_DATABASE_URI"].endswith("factory.db")


def test_config_object_is_keyword_only(tmp_path):
    app = create_app(
        {"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'kw.db'}",
         "UPLOAD_FOLDER": str(tmp_path / "uploads")},
        config_object=TestConfig,
    )
    assert app.config["TESTING"] is True
    assert app.config["JWT_SECRET_KEY"] == "test-secret"
