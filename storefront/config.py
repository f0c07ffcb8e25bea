# --- storefront/config.py ---
import os
from datetime import timedelta


def _env_bool(name, default=False):
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # JWT (admin session)
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-secret-change-me")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.getenv("JWT_EXPIRES_HOURS", "48")))
    JWT_TOKEN_LOCATION = ["headers", "cookies"]
    JWT_ACCESS_COOKIE_NAME = "token"
    JWT_COOKIE_SECURE = _env_bool("JWT_COOKIE_SECURE")
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_COOKIE_CSRF_PROTECT = False

    # single admin identity
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER")
    UPLOAD_URL_PREFIX = "/uploads"

    ORDER_UID_LENGTH = 10
    ORDER_UID_MAX_ATTEMPTS = 3

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    @staticmethod
    def init_app(app):
        os.makedirs(app.instance_path, exist_ok=True)
        if not app.config.get("SQLALCHEMY_DATABASE_URI"):
            app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
                "DATABASE_URL", f"sqlite:///{os.path.join(app.instance_path, 'shop.db')}"
            )
        if not app.config.get("UPLOAD_FOLDER"):
            app.config["UPLOAD_FOLDER"] = os.path.join(app.instance_path, "uploads")


class TestConfig(Config):
    TESTING = True
    JWT_SECRET_KEY = "test-secret"
    ADMIN_PASSWORD_HASH = None
    ADMIN_PASSWORD = "12345678"
    LOG_LEVEL = "WARNING"
